"""Response Interpreter - turns raw model text into the result each operation expects.

Quiz output goes through two stages: locate a candidate payload (a ```json
fenced block if present, otherwise the whole text), then deserialize it
strictly into a QuizAnswerSet. Malformed output is an expected case and
yields None rather than an exception.
"""

import logging
import re
from typing import Optional, Union

from pydantic import ValidationError

from .models import (
    OperationKind,
    QuizAnswerSet,
    RenderedOption,
    RenderedQuizAnswer,
)

logger = logging.getLogger(__name__)

QUIZ_PARSE_MESSAGE = "The AI could not process the quiz. Please check the format and try again."

_JSON_FENCE = re.compile(r"```json\n(.*?)\n```", re.DOTALL)


def extract_json_payload(text: str) -> str:
    """Return the body of the first ```json fence, or the text unchanged."""
    match = _JSON_FENCE.search(text)
    return match.group(1) if match else text


def parse_quiz_response(text: str) -> Optional[QuizAnswerSet]:
    """
    Deserialize a quiz response.

    Returns:
        QuizAnswerSet, or None if the candidate payload is not JSON of the
        expected shape. correctAnswer is not checked against the options.
    """
    candidate = extract_json_payload(text or "")
    try:
        return QuizAnswerSet.model_validate_json(candidate)
    except ValidationError as e:
        logger.warning("Failed to parse quiz response: %s", e.errors(include_input=False)[:3])
        return None


def interpret(kind: OperationKind, text: str) -> Union[QuizAnswerSet, str, None]:
    """Quiz text is parsed; chat, image and video text passes through unchanged."""
    if OperationKind(kind) == OperationKind.QUIZ:
        return parse_quiz_response(text)
    return text


def render_video_html(text: str) -> str:
    """Display transform for video analysis: newlines become <br />."""
    return text.replace("\n", "<br />")


def render_quiz(answer_set: QuizAnswerSet) -> list[RenderedQuizAnswer]:
    """Mark every option equal to correctAnswer. No match means nothing is highlighted."""
    rendered = []
    for index, answer in enumerate(answer_set.quiz_results, start=1):
        rendered.append(RenderedQuizAnswer(
            number=index,
            question=answer.question,
            options=[
                RenderedOption(text=option, is_correct=option == answer.correct_answer)
                for option in answer.options
            ],
            explanation=answer.explanation,
        ))
    return rendered
