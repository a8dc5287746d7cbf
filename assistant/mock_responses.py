"""
Mock Responses - Predefined model output for testing without hitting the real API.

Responses are shaped like real Gemini text, including the fenced JSON the
quiz solver sometimes returns despite being told not to.
"""

from typing import Optional
import json

from .models import OperationKind

_SAMPLE_QUIZ = {
    "quizResults": [
        {
            "question": "What is the capital of France?",
            "options": ["Berlin", "Madrid", "Paris", "Rome"],
            "correctAnswer": "Paris",
            "explanation": "Paris has been the capital of France since the 10th century.",
        }
    ]
}

# Default responses by operation kind
MOCK_RESPONSES = {
    OperationKind.QUIZ: "```json\n" + json.dumps(_SAMPLE_QUIZ, indent=2) + "\n```",
    OperationKind.CHAT: "This is a mock chat response. Your message was received and processed successfully.",
    OperationKind.IMAGE: "This is a mock vision response. I can see the image you've provided.",
    OperationKind.VIDEO: (
        "## Overview\n"
        "This is a mock analysis of the video description.\n\n"
        "## Key Themes\n"
        "- First theme\n"
        "- Second theme"
    ),
}

# Scenario-specific responses (used with X-Mock-Scenario header)
SCENARIO_RESPONSES = {
    "quiz_fenced": MOCK_RESPONSES[OperationKind.QUIZ],
    "quiz_bare": json.dumps(_SAMPLE_QUIZ),
    "quiz_no_match": json.dumps({
        "quizResults": [
            {
                "question": "Which planet is largest?",
                "options": ["Mars", "Venus"],
                "correctAnswer": "Jupiter",
                "explanation": "Jupiter is the largest planet, but it was not offered.",
            }
        ]
    }),
    "quiz_empty": json.dumps({"quizResults": []}),
    "not_json": "not json at all",
    "empty": "",
    "long": "This is a very long response. " * 100,
    "multiline": "Line one\nLine two\nLine three",
}

# Simulated failures (used with ?error=...): name -> (status, message)
MOCK_ERRORS = {
    "rate_limit": (429, "Gemini API error: Resource has been exhausted (e.g. check quota)."),
    "timeout": (504, "Gemini API error: Deadline exceeded."),
    "500": (500, "Gemini API returned HTTP 500"),
}


def get_mock_response(
    kind: OperationKind,
    scenario: Optional[str] = None,
) -> str:
    """
    Get a mock response for testing.

    Args:
        kind: The operation being mocked
        scenario: Optional specific scenario from X-Mock-Scenario header

    Returns:
        Mock response text
    """
    if scenario and scenario in SCENARIO_RESPONSES:
        return SCENARIO_RESPONSES[scenario]

    return MOCK_RESPONSES[OperationKind(kind)]