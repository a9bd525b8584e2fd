"""Pydantic models for the parts of Claude's stream-json events we display."""

from typing import Any

from pydantic import BaseModel, Field


class TextBlock(BaseModel):
    model_config = {"extra": "ignore"}

    type: str = "text"
    text: str = ""


class ToolUseBlock(BaseModel):
    model_config = {"extra": "ignore"}

    type: str = "tool_use"
    name: str
    input: Any = Field(default_factory=dict)


class AssistantMessage(BaseModel):
    model_config = {"extra": "ignore"}

    # Blocks stay raw here; each one is validated on its own so a single
    # bad block does not hide the rest of the message.
    content: list[Any] = Field(default_factory=list)


class StreamEvent(BaseModel):
    """Top-level stream-json event, discriminated by `type`."""

    model_config = {"extra": "ignore"}

    type: str
    # Validated as AssistantMessage only for assistant events; other event
    # types reuse the key with different shapes.
    message: Any = None
    result: Any = None
