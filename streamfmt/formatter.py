"""
Event Formatter
===============

Classifies one parsed stream-json value and renders it as display text.

    assistant  — each tool_use block becomes an icon line, non-blank text
                 blocks are shown verbatim
    result     — "✅ Done: `<result>`"
    (other)    — nothing

Pure functions, no side effects. Malformed events degrade to fewer lines,
never to an exception.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from .event_processors import format_tool_event, format_tool_result
from .models import AssistantMessage, StreamEvent, TextBlock, ToolUseBlock

logger = logging.getLogger(__name__)

ASSISTANT_EVENT = "assistant"
RESULT_EVENT = "result"

_BLOCK_MODELS: dict[str, type[BaseModel]] = {
    "text": TextBlock,
    "tool_use": ToolUseBlock,
}


def format_event_lines(value: Any) -> list[str]:
    """Render one parsed JSON value as zero or more display lines."""
    if not isinstance(value, dict):
        return []
    try:
        event = StreamEvent.model_validate(value)
    except ValidationError as e:
        logger.debug("Skipping event without usable type: %s", e)
        return []

    if event.type == ASSISTANT_EVENT:
        try:
            message = AssistantMessage.model_validate(event.message)
        except ValidationError as e:
            logger.debug("Skipping assistant event without content: %s", e)
            return []
        return _format_assistant_message(message)
    if event.type == RESULT_EVENT:
        return [format_tool_result(event.result).render()]
    return []


def format_event(value: Any) -> Optional[str]:
    """Render one parsed JSON value, joining multiple lines with newlines.

    Returns None when the event produces nothing to display.
    """
    lines = format_event_lines(value)
    if not lines:
        return None
    return "\n".join(lines)


def _format_assistant_message(message: AssistantMessage) -> list[str]:
    lines: list[str] = []
    for raw in message.content:
        block = _parse_block(raw)
        if isinstance(block, ToolUseBlock):
            lines.append(format_tool_event(block.name, block.input).render())
        elif isinstance(block, TextBlock) and block.text.strip():
            lines.append(block.text)
    return lines


def _parse_block(raw: Any) -> Optional[BaseModel]:
    """Validate one content block, or None for unknown/malformed blocks."""
    if not isinstance(raw, dict):
        return None
    block_type = raw.get("type")
    if not isinstance(block_type, str) or block_type not in _BLOCK_MODELS:
        return None
    try:
        return _BLOCK_MODELS[block_type].model_validate(raw)
    except ValidationError as e:
        logger.debug("Skipping malformed %s block: %s", block_type, e)
        return None
