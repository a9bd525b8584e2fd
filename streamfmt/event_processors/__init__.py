"""
Event Processors
================

Turns Claude's stream-json events into short display lines.

Modules:
    tool_use    — Formats tool_use blocks (Read, Bash, Grep, etc.)
    tool_result — Formats the payload of result events
"""

from .tool_result import (  # noqa: F401
    flatten_result,
    format_tool_result,
)
from .tool_use import (  # noqa: F401
    BaseToolUseEventProcessor,
    FormattedLine,
    format_tool_event,
    get_processor,
    register_processor,
    truncate,
)
