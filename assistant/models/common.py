"""Common models shared across assistant operations."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class OperationKind(str, Enum):
    """The four assistant workflows."""
    QUIZ = "quiz"
    CHAT = "chat"
    IMAGE = "image"
    VIDEO = "video"


class ModelTier(str, Enum):
    """Chat model tiers, cheapest first."""
    LOW = "low"
    MID = "mid"
    HIGH = "high"


# Tier -> Gemini model id
MODEL_IDS = {
    ModelTier.LOW: "gemini-2.5-flash-lite",
    ModelTier.MID: "gemini-2.5-flash",
    ModelTier.HIGH: "gemini-2.5-pro",
}

MODEL_LABELS = {
    ModelTier.LOW: "Flash Lite (Fastest)",
    ModelTier.MID: "Flash (Balanced)",
    ModelTier.HIGH: "Pro (Advanced)",
}


class ImageData(BaseModel):
    """Base64-encoded image data."""
    data: str = Field(..., description="Base64-encoded image data")
    mime_type: str = Field("image/png", description="MIME type of the image")


class ScreenStatus(str, Enum):
    """Lifecycle of a single screen submission."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ScreenSnapshot(BaseModel):
    """State every screen reports back after a submission."""
    operation: OperationKind = Field(..., description="Which workflow produced this state")
    input_value: str = Field("", description="Current input left on the screen")
    is_loading: bool = Field(False, description="Whether a remote call is in flight")
    error_message: Optional[str] = Field(None, description="User-facing error, if any")
    status: ScreenStatus = Field(ScreenStatus.IDLE, description="Derived screen status")
    model: Optional[str] = Field(None, description="Model the last request targeted")
    mode: str = Field("prod", description="Mode used (prod or mock)")
