"""Models for the /ai/chat endpoint."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from .common import ModelTier, ScreenSnapshot


class Sender(str, Enum):
    """Who wrote a chat message."""
    USER = "user"
    AI = "ai"


class ChatMessage(BaseModel):
    """A message in a chat conversation."""
    sender: Sender = Field(..., description="Message author")
    text: str = Field(..., description="Message content")


class ChatRequest(BaseModel):
    """Request body for chat."""
    message: str = Field(..., description="User's message")
    session_id: Optional[str] = Field(None, description="Existing chat session; omit to start one")
    tier: ModelTier = Field(ModelTier.MID, description="Selected model tier")
    thinking_mode: bool = Field(False, description="Extended reasoning (top tier only)")


class ChatResponse(ScreenSnapshot):
    """Chat screen state after a submission."""
    session_id: str = Field(..., description="Chat session identifier")
    messages: list[ChatMessage] = Field(default_factory=list, description="Transcript, oldest first")
    result: Optional[str] = Field(None, description="Latest AI reply from this submission")
    tier: ModelTier = Field(ModelTier.MID, description="Selected model tier")
    thinking_mode: bool = Field(False, description="Whether thinking mode was requested")


class ChatTranscript(BaseModel):
    """Transcript of an existing chat session."""
    session_id: str
    messages: list[ChatMessage] = Field(default_factory=list)


class ModelOption(BaseModel):
    """A selectable chat model."""
    tier: ModelTier
    model: str
    label: str
    supports_thinking: bool = False
