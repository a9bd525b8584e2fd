"""
Tool Use Event Processors
=========================

Processes tool_use blocks from Claude's stream-json output and turns each
one into a short, icon-prefixed display line. Each processor handles a
specific tool type and pulls the one input field worth showing (a file
path, a shell command, a search pattern, a sub-task description).

Tools without a registered processor fall through to a generic line that
shows only the tool name.

Architecture:
  - FormattedLine: Pydantic BaseModel (frozen) with render()
  - BaseToolUseEventProcessor: ABC for behavioral strategy objects
  - @register_processor: decorator-based registry (self-documenting)
  - *ToolInput models: lenient, one field each, never raise on bad input
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


BASH_COMMAND_MAX_LENGTH = 80
TRUNCATION_MARKER = "…"


# --- Pydantic data models ---

class FormattedLine(BaseModel):
    """One display line produced from a stream-json event.

    `label` is None for the generic fallback, which renders the tool name
    in backticks in place of a label.
    """

    model_config = {"frozen": True}

    icon: str
    label: Optional[str] = None
    payload: Optional[str] = None

    def render(self) -> str:
        if self.label is None:
            return f"{self.icon} `{self.payload}`"
        if self.payload is None:
            return f"{self.icon} {self.label}"
        return f"{self.icon} {self.label}: `{self.payload}`"


class FileToolInput(BaseModel):
    """Validated input for Read/Edit/Write tool_use events."""

    model_config = {"extra": "ignore"}

    file_path: Optional[str] = None


class BashToolInput(BaseModel):
    """Validated input for Bash tool_use events."""

    model_config = {"extra": "ignore"}

    command: Optional[str] = None


class PatternToolInput(BaseModel):
    """Validated input for Glob/Grep tool_use events."""

    model_config = {"extra": "ignore"}

    pattern: Optional[str] = None


class TaskToolInput(BaseModel):
    """Validated input for Task (sub-agent) tool_use events."""

    model_config = {"extra": "ignore"}

    description: Optional[str] = None


# --- Processor base class and registry ---

_PROCESSOR_REGISTRY: dict[str, "BaseToolUseEventProcessor"] = {}


def register_processor(cls: type) -> type:
    """Class decorator that registers a processor for its declared tool_names.

    Raises ValueError on duplicate tool name registration.
    """
    instance = cls()
    for name in instance.tool_names:
        if name in _PROCESSOR_REGISTRY:
            raise ValueError(
                f"Duplicate processor registration for tool '{name}': "
                f"{type(_PROCESSOR_REGISTRY[name]).__name__} and {cls.__name__}"
            )
        _PROCESSOR_REGISTRY[name] = instance
    return cls


class BaseToolUseEventProcessor(ABC):
    """
    Base class for tool-specific formatting of Claude's stream-json events.

    Subclasses declare the tool names they own and the icon to show, and
    override `process()` to pick the payload out of the tool input.
    """

    tool_names: ClassVar[list[str]] = []
    icon: ClassVar[str] = "🔧"

    @abstractmethod
    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        """
        Format a tool_use event as a display line.

        Args:
            tool_name: The tool name from Claude's stream-json.
            tool_input: The tool input parameters dict.

        Returns:
            FormattedLine for the event. Never raises on malformed input.
        """
        ...

    def _line(self, tool_name: str, payload: Optional[str] = None) -> FormattedLine:
        return FormattedLine(icon=self.icon, label=tool_name, payload=payload)


def _validate_input(model: type[BaseModel], tool_input: dict[str, Any]) -> BaseModel:
    """Validate tool input, falling back to an all-defaults model.

    Claude's tool inputs are not a stable contract; a wrongly typed field
    means "field missing", not an error.
    """
    try:
        return model.model_validate(tool_input)
    except ValidationError as e:
        logger.debug("Ignoring malformed %s: %s", model.__name__, e)
        return model()


# --- Processor implementations ---

@register_processor
class ReadToolProcessor(BaseToolUseEventProcessor):
    """Shows the file path of Read tool_use events."""

    tool_names: ClassVar[list[str]] = ["Read"]
    icon: ClassVar[str] = "📖"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        inp = _validate_input(FileToolInput, tool_input)
        return self._line(tool_name, inp.file_path)


@register_processor
class EditToolProcessor(BaseToolUseEventProcessor):
    """Shows the file path of Edit tool_use events."""

    tool_names: ClassVar[list[str]] = ["Edit"]
    icon: ClassVar[str] = "✏️"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        inp = _validate_input(FileToolInput, tool_input)
        return self._line(tool_name, inp.file_path)


@register_processor
class WriteToolProcessor(BaseToolUseEventProcessor):
    """Shows the file path of Write tool_use events."""

    tool_names: ClassVar[list[str]] = ["Write"]
    icon: ClassVar[str] = "📝"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        inp = _validate_input(FileToolInput, tool_input)
        return self._line(tool_name, inp.file_path)


@register_processor
class BashToolProcessor(BaseToolUseEventProcessor):
    """
    Shows the command of Bash tool_use events.

    Commands longer than BASH_COMMAND_MAX_LENGTH are cut to that many
    characters and marked with TRUNCATION_MARKER.
    """

    tool_names: ClassVar[list[str]] = ["Bash"]
    icon: ClassVar[str] = "💻"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        inp = _validate_input(BashToolInput, tool_input)
        command = inp.command
        if command is not None:
            command = truncate(command, BASH_COMMAND_MAX_LENGTH)
        return self._line(tool_name, command)


@register_processor
class SearchToolProcessor(BaseToolUseEventProcessor):
    """Shows the search pattern of Glob/Grep tool_use events."""

    tool_names: ClassVar[list[str]] = ["Glob", "Grep"]
    icon: ClassVar[str] = "🔍"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        inp = _validate_input(PatternToolInput, tool_input)
        return self._line(tool_name, inp.pattern)


@register_processor
class TodoWriteToolProcessor(BaseToolUseEventProcessor):
    """TodoWrite carries a whole todo list; only the label is shown."""

    tool_names: ClassVar[list[str]] = ["TodoWrite"]
    icon: ClassVar[str] = "📋"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        return self._line(tool_name)


@register_processor
class TaskToolProcessor(BaseToolUseEventProcessor):
    """Shows the description of Task (sub-agent) tool_use events."""

    tool_names: ClassVar[list[str]] = ["Task"]
    icon: ClassVar[str] = "🤖"

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        inp = _validate_input(TaskToolInput, tool_input)
        return self._line(tool_name, inp.description)


class GenericToolProcessor(BaseToolUseEventProcessor):
    """Fallback for tools with no registered processor. Not registered."""

    def process(self, tool_name: str, tool_input: dict[str, Any]) -> FormattedLine:
        return FormattedLine(icon=self.icon, payload=tool_name)


_GENERIC_PROCESSOR = GenericToolProcessor()


# --- Helpers ---

def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, appending TRUNCATION_MARKER if cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


# --- Public API ---

def get_processor(tool_name: str) -> Optional[BaseToolUseEventProcessor]:
    """Get the processor for a given tool name, or None."""
    return _PROCESSOR_REGISTRY.get(tool_name)


def format_tool_event(tool_name: str, tool_input: Any) -> FormattedLine:
    """
    Convenience: format a tool_use event through the appropriate processor.

    Args:
        tool_name: Tool name from Claude's stream-json (exact, case-sensitive).
        tool_input: Tool input parameters. Anything but a dict counts as empty.

    Returns:
        FormattedLine from the matching processor, or the generic fallback.
    """
    if not isinstance(tool_input, dict):
        tool_input = {}
    proc = get_processor(tool_name) or _GENERIC_PROCESSOR
    return proc.process(tool_name, tool_input)
