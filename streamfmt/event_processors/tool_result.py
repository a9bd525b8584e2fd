"""
Tool Result Event Processing
============================

Formats the `result` payload of Claude's stream-json result events.
String results are shown verbatim. Structured results have no stable
shape, so they are flattened to text on a best-effort basis.
"""

import json
from typing import Any

from .tool_use import FormattedLine

RESULT_ICON = "✅"
RESULT_LABEL = "Done"

# Checked in order after "text"; the first one that flattens to something wins.
_NESTED_TEXT_KEYS = ("content", "result", "output", "stdout")

# Deeper structures are shown as compact JSON instead of being walked.
MAX_FLATTEN_DEPTH = 32


def flatten_result(value: Any, _depth: int = 0) -> str:
    """Extract human-readable text from a result payload.

    Lists join their non-empty pieces with newlines. Dicts prefer a string
    "text" field, then nested content keys, then fall back to compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if _depth >= MAX_FLATTEN_DEPTH:
        return _json_compact(value)
    if isinstance(value, list):
        chunks = [flatten_result(item, _depth + 1) for item in value]
        return "\n".join(chunk for chunk in chunks if chunk)
    if isinstance(value, dict):
        text = value.get("text")
        if isinstance(text, str):
            return text
        for key in _NESTED_TEXT_KEYS:
            if key in value:
                nested = flatten_result(value[key], _depth + 1)
                if nested:
                    return nested
    return _json_compact(value)


def _json_compact(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError):
        return ""


def format_tool_result(result: Any) -> FormattedLine:
    """Format a result payload as a display line.

    Only a missing (null) result drops the payload; an empty string is
    shown as an empty payload.
    """
    if result is None:
        return FormattedLine(icon=RESULT_ICON, label=RESULT_LABEL)
    return FormattedLine(icon=RESULT_ICON, label=RESULT_LABEL, payload=flatten_result(result))
