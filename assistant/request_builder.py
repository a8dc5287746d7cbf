"""Request Builder - turns raw user input into a single OperationRequest.

Every builder returns either an OperationRequest or a ValidationFailure.
Blank input never raises; the caller shows the failure message inline.
"""

from typing import Optional, Union

from .models import (
    ImageData,
    ModelTier,
    MODEL_IDS,
    OperationKind,
    OperationRequest,
    ValidationFailure,
)
from .prompts import build_quiz_prompt, build_video_prompt

BuildOutcome = Union[OperationRequest, ValidationFailure]

QUIZ_MODEL = MODEL_IDS[ModelTier.MID]
IMAGE_MODEL = MODEL_IDS[ModelTier.MID]
VIDEO_MODEL = MODEL_IDS[ModelTier.HIGH]

# Only the top tier accepts a thinking budget
THINKING_TIER = ModelTier.HIGH
THINKING_BUDGET = 32768

QUIZ_INPUT_MESSAGE = "Please paste your quiz questions first."
CHAT_INPUT_MESSAGE = "Please enter a message."
IMAGE_INPUT_MESSAGE = "Please upload an image and provide a prompt."
VIDEO_INPUT_MESSAGE = "Please provide a video title or description."


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def build_quiz_request(quiz_text: str) -> BuildOutcome:
    """Quiz: grounded with Google Search, fixed mid-tier model."""
    if _is_blank(quiz_text):
        return ValidationFailure(QUIZ_INPUT_MESSAGE)

    return OperationRequest(
        operation_kind=OperationKind.QUIZ,
        model_id=QUIZ_MODEL,
        prompt_text=build_quiz_prompt(quiz_text),
        tools_enabled=True,
    )


def build_chat_request(
    message: str,
    tier: ModelTier = ModelTier.MID,
    thinking_mode: bool = False,
) -> BuildOutcome:
    """
    Chat: prompt passed verbatim to the selected tier.

    The thinking budget is attached only when the top tier is selected
    and thinking mode is on; any other combination omits it.
    """
    if _is_blank(message):
        return ValidationFailure(CHAT_INPUT_MESSAGE)

    tier = ModelTier(tier)
    budget = THINKING_BUDGET if thinking_mode and tier == THINKING_TIER else None

    return OperationRequest(
        operation_kind=OperationKind.CHAT,
        model_id=MODEL_IDS[tier],
        prompt_text=message,
        extended_reasoning_budget=budget,
    )


def build_image_request(image: Optional[ImageData], prompt: str) -> BuildOutcome:
    """Image: exactly one image part followed by the prompt."""
    if image is None or not image.data or _is_blank(prompt):
        return ValidationFailure(IMAGE_INPUT_MESSAGE)

    return OperationRequest(
        operation_kind=OperationKind.IMAGE,
        model_id=IMAGE_MODEL,
        prompt_text=prompt,
        attached_parts=(image,),
    )


def build_video_request(description: str) -> BuildOutcome:
    """Video: description wrapped in analysis instructions, top-tier model."""
    if _is_blank(description):
        return ValidationFailure(VIDEO_INPUT_MESSAGE)

    return OperationRequest(
        operation_kind=OperationKind.VIDEO,
        model_id=VIDEO_MODEL,
        prompt_text=build_video_prompt(description),
    )


def build_request(kind: OperationKind, **inputs) -> BuildOutcome:
    """
    Dispatch to the builder for an operation kind.

    Args:
        kind: Which workflow the input belongs to
        **inputs: Keyword arguments of the matching build_* function

    Returns:
        OperationRequest, or ValidationFailure for missing input
    """
    builders = {
        OperationKind.QUIZ: build_quiz_request,
        OperationKind.CHAT: build_chat_request,
        OperationKind.IMAGE: build_image_request,
        OperationKind.VIDEO: build_video_request,
    }
    return builders[OperationKind(kind)](**inputs)
