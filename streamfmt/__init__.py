"""
streamfmt
===============================================

Human-readable progress lines from Claude Code's stream-json output.

Usage:
    from streamfmt import format_event

    line = format_event({"type": "result", "result": "ok"})
    # "✅ Done: `ok`"
"""

from .driver import process_line, run
from .event_processors import (
    BaseToolUseEventProcessor,
    FormattedLine,
    flatten_result,
    format_tool_event,
    format_tool_result,
    get_processor,
    register_processor,
)
from .formatter import format_event, format_event_lines

__all__ = [
    # Primary API
    "format_event",
    "format_event_lines",
    "process_line",
    "run",
    # Tool formatting
    "FormattedLine",
    "BaseToolUseEventProcessor",
    "format_tool_event",
    "format_tool_result",
    "flatten_result",
    "get_processor",
    "register_processor",
]

__version__ = "0.1.0"
