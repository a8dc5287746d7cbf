"""Unit tests for turning user input into OperationRequests."""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assistant.models import ImageData, ModelTier, OperationKind, OperationRequest, ValidationFailure
from assistant.request_builder import (
    CHAT_INPUT_MESSAGE,
    IMAGE_INPUT_MESSAGE,
    QUIZ_INPUT_MESSAGE,
    THINKING_BUDGET,
    VIDEO_INPUT_MESSAGE,
    build_chat_request,
    build_image_request,
    build_quiz_request,
    build_request,
    build_video_request,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _image() -> ImageData:
    return ImageData(data="aGVsbG8=", mime_type="image/jpeg")


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------

class TestQuizRequest:

    def test_wraps_text_in_solver_prompt(self):
        request = build_quiz_request("What is 2+2?\nA) 3\nB) 4")
        assert isinstance(request, OperationRequest)
        assert request.operation_kind == OperationKind.QUIZ
        assert "What is 2+2?\nA) 3\nB) 4" in request.prompt_text
        assert '"quizResults"' in request.prompt_text
        assert "---" in request.prompt_text

    def test_grounding_always_on_with_mid_tier(self):
        request = build_quiz_request("Q?")
        assert request.tools_enabled is True
        assert request.model_id == "gemini-2.5-flash"
        assert request.extended_reasoning_budget is None
        assert request.attached_parts == ()

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_is_validation_failure(self, text):
        assert build_quiz_request(text) == ValidationFailure(QUIZ_INPUT_MESSAGE)

    def test_braces_in_quiz_text_survive(self):
        request = build_quiz_request("Is {x} a set?")
        assert "Is {x} a set?" in request.prompt_text


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------

class TestChatRequest:

    def test_prompt_passed_verbatim(self):
        request = build_chat_request("  hello there  ")
        assert request.prompt_text == "  hello there  "
        assert request.operation_kind == OperationKind.CHAT
        assert request.tools_enabled is False

    @pytest.mark.parametrize("tier,model", [
        (ModelTier.LOW, "gemini-2.5-flash-lite"),
        (ModelTier.MID, "gemini-2.5-flash"),
        (ModelTier.HIGH, "gemini-2.5-pro"),
    ])
    def test_tier_selects_model(self, tier, model):
        assert build_chat_request("hi", tier=tier).model_id == model

    def test_default_tier_is_mid(self):
        assert build_chat_request("hi").model_id == "gemini-2.5-flash"

    @pytest.mark.parametrize("tier,thinking,expected", [
        (ModelTier.LOW, False, None),
        (ModelTier.LOW, True, None),
        (ModelTier.MID, False, None),
        (ModelTier.MID, True, None),
        (ModelTier.HIGH, False, None),
        (ModelTier.HIGH, True, THINKING_BUDGET),
    ])
    def test_reasoning_budget_needs_high_tier_and_thinking(self, tier, thinking, expected):
        request = build_chat_request("hi", tier=tier, thinking_mode=thinking)
        assert request.extended_reasoning_budget == expected

    def test_budget_constant(self):
        assert THINKING_BUDGET == 32768

    def test_tier_accepts_plain_string(self):
        request = build_chat_request("hi", tier="high", thinking_mode=True)
        assert request.model_id == "gemini-2.5-pro"
        assert request.extended_reasoning_budget == THINKING_BUDGET

    def test_blank_message_is_validation_failure(self):
        assert build_chat_request("  ") == ValidationFailure(CHAT_INPUT_MESSAGE)


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------

class TestImageRequest:

    def test_one_image_then_prompt(self):
        image = _image()
        request = build_image_request(image, "What is this?")
        assert request.operation_kind == OperationKind.IMAGE
        assert request.attached_parts == (image,)
        assert request.prompt_text == "What is this?"
        assert request.model_id == "gemini-2.5-flash"
        assert request.tools_enabled is False

    def test_rejects_empty_prompt_with_image(self):
        assert build_image_request(_image(), "") == ValidationFailure(IMAGE_INPUT_MESSAGE)

    def test_rejects_missing_image_with_prompt(self):
        assert build_image_request(None, "What is this?") == ValidationFailure(IMAGE_INPUT_MESSAGE)

    def test_rejects_image_without_data(self):
        empty = ImageData(data="", mime_type="image/png")
        assert isinstance(build_image_request(empty, "What is this?"), ValidationFailure)


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------

class TestVideoRequest:

    def test_wraps_description_with_pro_model(self):
        request = build_video_request("Cooking pasta in 10 minutes")
        assert request.operation_kind == OperationKind.VIDEO
        assert request.model_id == "gemini-2.5-pro"
        assert 'Video Description: "Cooking pasta in 10 minutes"' in request.prompt_text
        assert "markdown" in request.prompt_text
        assert request.tools_enabled is False
        assert request.extended_reasoning_budget is None

    def test_blank_description_is_validation_failure(self):
        assert build_video_request("") == ValidationFailure(VIDEO_INPUT_MESSAGE)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

class TestBuildRequest:

    def test_dispatches_by_kind(self):
        request = build_request(OperationKind.CHAT, message="hi", tier=ModelTier.HIGH)
        assert request.model_id == "gemini-2.5-pro"

    def test_accepts_kind_value(self):
        request = build_request("video", description="A talk about bees")
        assert request.operation_kind == OperationKind.VIDEO

    def test_image_dispatch_validates(self):
        outcome = build_request(OperationKind.IMAGE, image=None, prompt="")
        assert isinstance(outcome, ValidationFailure)
