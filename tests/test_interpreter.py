"""Unit tests for response interpretation (fenced JSON extraction, quiz parsing)."""

import json
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assistant.interpreter import (
    extract_json_payload,
    interpret,
    parse_quiz_response,
    render_quiz,
    render_video_html,
)
from assistant.models import OperationKind, QuizAnswer, QuizAnswerSet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

EXAMPLE = '{"quizResults":[{"question":"Q","options":["A","B"],"correctAnswer":"A","explanation":"E"}]}'


def _fenced(body: str) -> str:
    return f"```json\n{body}\n```"


# ---------------------------------------------------------------------------
# extract_json_payload
# ---------------------------------------------------------------------------

class TestExtractJsonPayload:

    def test_fenced_block_body(self):
        assert extract_json_payload(_fenced(EXAMPLE)) == EXAMPLE

    def test_fence_inside_prose(self):
        text = "Here you go:\n" + _fenced(EXAMPLE) + "\nGood luck!"
        assert extract_json_payload(text) == EXAMPLE

    def test_no_fence_returns_whole_text(self):
        assert extract_json_payload(EXAMPLE) == EXAMPLE

    def test_untagged_fence_not_used(self):
        text = f"```\n{EXAMPLE}\n```"
        assert extract_json_payload(text) == text

    def test_first_fence_wins(self):
        text = _fenced('{"a": 1}') + "\n" + _fenced('{"b": 2}')
        assert extract_json_payload(text) == '{"a": 1}'


# ---------------------------------------------------------------------------
# parse_quiz_response
# ---------------------------------------------------------------------------

class TestParseQuizResponse:

    def test_round_trip_example(self):
        result = parse_quiz_response(_fenced(EXAMPLE))
        assert result is not None
        assert result.quiz_results == [
            QuizAnswer(question="Q", options=["A", "B"], correct_answer="A", explanation="E")
        ]

    def test_bare_json(self):
        result = parse_quiz_response(EXAMPLE)
        assert result is not None
        assert len(result.quiz_results) == 1

    def test_not_json_is_none(self):
        assert parse_quiz_response("not json at all") is None

    def test_empty_text_is_none(self):
        assert parse_quiz_response("") is None

    def test_none_text_is_none(self):
        assert parse_quiz_response(None) is None

    def test_missing_quiz_results_is_none(self):
        assert parse_quiz_response('{"answers": []}') is None

    def test_wrong_field_type_is_none(self):
        body = json.dumps({"quizResults": [
            {"question": "Q", "options": "A", "correctAnswer": "A", "explanation": "E"}
        ]})
        assert parse_quiz_response(body) is None

    def test_top_level_array_is_none(self):
        assert parse_quiz_response("[1, 2, 3]") is None

    def test_malformed_fenced_json_is_none(self):
        assert parse_quiz_response(_fenced('{"quizResults": [')) is None

    def test_empty_list_is_valid(self):
        result = parse_quiz_response('{"quizResults": []}')
        assert result == QuizAnswerSet(quiz_results=[])

    def test_unknown_fields_ignored(self):
        body = json.dumps({"quizResults": [
            {"question": "Q", "options": ["A"], "correctAnswer": "A", "explanation": "E", "source": "web"}
        ], "note": "x"})
        result = parse_quiz_response(body)
        assert result.quiz_results[0].question == "Q"

    def test_duplicate_options_kept(self):
        body = json.dumps({"quizResults": [
            {"question": "Q", "options": ["A", "A", "B"], "correctAnswer": "A", "explanation": "E"}
        ]})
        assert parse_quiz_response(body).quiz_results[0].options == ["A", "A", "B"]

    def test_correct_answer_outside_options_not_rejected(self):
        body = json.dumps({"quizResults": [
            {"question": "Q", "options": ["A", "B"], "correctAnswer": "C", "explanation": "E"}
        ]})
        assert parse_quiz_response(body).quiz_results[0].correct_answer == "C"


# ---------------------------------------------------------------------------
# interpret / render
# ---------------------------------------------------------------------------

class TestInterpret:

    def test_quiz_is_parsed(self):
        assert isinstance(interpret(OperationKind.QUIZ, EXAMPLE), QuizAnswerSet)

    @pytest.mark.parametrize("kind", [OperationKind.CHAT, OperationKind.IMAGE, OperationKind.VIDEO])
    def test_text_passes_through(self, kind):
        text = "line one\n```json\n{}\n```"
        assert interpret(kind, text) == text

    def test_empty_text_passes_through(self):
        assert interpret(OperationKind.CHAT, "") == ""


class TestRendering:

    def test_video_newlines_become_breaks(self):
        assert render_video_html("a\nb\n\nc") == "a<br />b<br /><br />c"

    def test_quiz_highlights_matching_option(self):
        rendered = render_quiz(parse_quiz_response(EXAMPLE))
        assert rendered[0].number == 1
        assert [o.is_correct for o in rendered[0].options] == [True, False]

    def test_quiz_no_match_highlights_nothing(self):
        answers = QuizAnswerSet(quiz_results=[
            QuizAnswer(question="Q", options=["A", "B"], correct_answer="Z", explanation="E")
        ])
        rendered = render_quiz(answers)
        assert not any(o.is_correct for o in rendered[0].options)

    def test_quiz_duplicate_options_both_highlighted(self):
        answers = QuizAnswerSet(quiz_results=[
            QuizAnswer(question="Q", options=["A", "A"], correct_answer="A", explanation="E")
        ])
        assert [o.is_correct for o in render_quiz(answers)[0].options] == [True, True]
