"""Prompt templates for assistant operations."""


QUIZ_SOLVER_PROMPT = """You are an expert quiz solver. Analyze the following text which contains one or more multiple-choice questions. For each question, identify the correct answer using your knowledge and up-to-date information from Google Search.

Respond ONLY with a JSON object in the following format:
{{
  "quizResults": [
    {{
      "question": "The text of the first question",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": "The text of the correct option",
      "explanation": "A brief explanation of why this is the correct answer."
    }}
  ]
}}

Do not include any introductory text, concluding text, or markdown formatting like ```json. Your entire response must be a single, valid JSON object.

Here is the quiz text:
---
{quiz_text}
---
"""


VIDEO_ANALYSIS_PROMPT = """You are a video analysis expert. Based on the following title and description of a video, provide a detailed analysis of its potential content, themes, and key information.

Video Description: "{description}"

Provide your analysis in well-structured markdown."""


def build_quiz_prompt(quiz_text: str) -> str:
    """Wrap pasted quiz text in the grounded quiz-solver instructions."""
    return QUIZ_SOLVER_PROMPT.format(quiz_text=quiz_text)


def build_video_prompt(description: str) -> str:
    """Wrap a video title/description in the analysis instructions."""
    return VIDEO_ANALYSIS_PROMPT.format(description=description)
