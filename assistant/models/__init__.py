"""Pydantic models and request descriptors for the assistant."""

from .common import (
    OperationKind,
    ModelTier,
    MODEL_IDS,
    MODEL_LABELS,
    ImageData,
    ScreenStatus,
    ScreenSnapshot,
)
from .operation import OperationRequest, ValidationFailure
from .quiz import (
    QuizRequest,
    QuizAnswer,
    QuizAnswerSet,
    RenderedOption,
    RenderedQuizAnswer,
    QuizResponse,
)
from .chat import Sender, ChatMessage, ChatRequest, ChatResponse, ChatTranscript, ModelOption
from .analysis import ImageRequest, ImageResponse, VideoRequest, VideoResponse

__all__ = [
    # Common
    "OperationKind",
    "ModelTier",
    "MODEL_IDS",
    "MODEL_LABELS",
    "ImageData",
    "ScreenStatus",
    "ScreenSnapshot",
    # Operation
    "OperationRequest",
    "ValidationFailure",
    # Quiz
    "QuizRequest",
    "QuizAnswer",
    "QuizAnswerSet",
    "RenderedOption",
    "RenderedQuizAnswer",
    "QuizResponse",
    # Chat
    "Sender",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChatTranscript",
    "ModelOption",
    # Image / video
    "ImageRequest",
    "ImageResponse",
    "VideoRequest",
    "VideoResponse",
]
