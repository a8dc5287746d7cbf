"""Models for the /ai/quiz endpoint (grounded quiz solving)."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import ScreenSnapshot


class QuizRequest(BaseModel):
    """Request body for quiz solving."""
    quiz_text: str = Field(..., description="Pasted multiple-choice questions")


class QuizAnswer(BaseModel):
    """One solved question as returned by the model."""
    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., description="The question text")
    options: list[str] = Field(..., description="Answer options in display order; may repeat")
    correct_answer: str = Field(..., alias="correctAnswer", description="Text of the correct option")
    explanation: str = Field(..., description="Why the answer is correct")


class QuizAnswerSet(BaseModel):
    """Top-level JSON object the quiz prompt asks for."""
    model_config = ConfigDict(populate_by_name=True)

    quiz_results: list[QuizAnswer] = Field(..., alias="quizResults", description="Solved questions")


class RenderedOption(BaseModel):
    """An option ready for display."""
    text: str
    is_correct: bool = False


class RenderedQuizAnswer(BaseModel):
    """A solved question with the correct option highlighted."""
    number: int = Field(..., description="1-based position in the result list")
    question: str
    options: list[RenderedOption] = Field(default_factory=list)
    explanation: str


class QuizResponse(ScreenSnapshot):
    """Quiz screen state after a submission."""
    result: Optional[QuizAnswerSet] = Field(None, description="Parsed answers, if any")
    rendered: list[RenderedQuizAnswer] = Field(default_factory=list, description="Answers with highlighting")
