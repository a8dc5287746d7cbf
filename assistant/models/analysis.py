"""Models for the /ai/image and /ai/video endpoints."""

from typing import Optional
from pydantic import BaseModel, Field

from .common import ImageData, ScreenSnapshot


class ImageRequest(BaseModel):
    """Request body for image analysis."""
    prompt: str = Field(..., description="What to ask about the image")
    image: Optional[ImageData] = Field(None, description="The uploaded image")


class ImageResponse(ScreenSnapshot):
    """Image screen state after a submission."""
    result: Optional[str] = Field(None, description="Model analysis")


class VideoRequest(BaseModel):
    """Request body for video-description analysis."""
    description: str = Field(..., description="Video title, description or topic")


class VideoResponse(ScreenSnapshot):
    """Video screen state after a submission."""
    result: Optional[str] = Field(None, description="Model analysis (markdown)")
    html: Optional[str] = Field(None, description="Analysis with line breaks as <br />")
