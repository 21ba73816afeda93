"""Prompt builders, one per kind of model request.

Each builder is pure: the same arguments always produce the same text. The
text itself may ask the model to vary its answer.
"""

import json
from typing import Any

DEFAULT_TRENDING_COUNT = 24
DEFAULT_RECOMMEND_LIMIT = 12
DEFAULT_QUIZ_QUESTIONS = 5
DEFAULT_CATEGORY_COUNT = 15
DEFAULT_CAREER_RECOMMENDATIONS = 3

CAREER_LIST_SCHEMA = """{
  "careers": [
    {
      "id": "snake_case_identifier",
      "title": "Career Title",
      "description": "One or two sentence description",
      "category": "Category name",
      "requiredSkills": ["skill", "skill", "skill"],
      "recommendedSkills": ["skill", "skill"],
      "averageSalary": 90000,
      "growthPotential": "High | Medium | Low",
      "companies": ["Company"],
      "courses": ["Course"],
      "imageUrl": ""
    }
  ]
}"""

ENRICH_SCHEMA = """{
  "<title>": {
    "salaryRange": {"min": 60000, "max": 120000, "currency": "USD"},
    "growthPercent": 12,
    "demand": "High | Medium | Low",
    "remotePercent": 40,
    "education": "Typical education path",
    "skills": ["skill", "skill", "skill"]
  }
}"""

QUIZ_RULES = """IMPORTANT: Each question must have:
1. A unique ID (q1, q2, q3...)
2. 4 options with unique IDs (a, b, c, d)
3. A correctAnswerId field pointing to the correct option
4. An explanation for why the answer is correct
5. Points value (1 for easy, 2 for medium, 3 for hard)"""

QUIZ_UNIQUENESS = (
    "Each time you are called, generate a new, unique set of questions. "
    "Do not repeat previous questions. Randomize the content."
)

RECOMMENDATIONS_SCHEMA = """{
  "recommendations": [
    {"career": "Software Engineer", "explanation": "Good for technical skills"},
    {"career": "Data Analyst", "explanation": "Good for analytical thinking"},
    {"career": "Project Manager", "explanation": "Good for leadership skills"}
  ]
}"""


def _quiz_schema(quiz_id: str) -> str:
    return (
        "{\n"
        f'  "id": "{quiz_id}",\n'
        """  "title": "Quiz Title",
  "description": "Quiz description",
  "questions": [
    {
      "id": "q1",
      "question": "Question text?",
      "options": [
        {"id": "a", "text": "Option A"},
        {"id": "b", "text": "Option B"},
        {"id": "c", "text": "Option C"},
        {"id": "d", "text": "Option D"}
      ],
      "correctAnswerId": "a",
      "explanation": "Why this is correct",
      "points": 2
    }
  ]
}"""
    )


def build_trending_prompt(count: int = DEFAULT_TRENDING_COUNT) -> str:
    """Ask for ``count`` trending careers across fields."""
    return (
        f"List {count} trending, diverse careers across different industries. "
        "Give each 3-5 required skills.\n\n"
        f"Respond ONLY in this exact JSON format:\n{CAREER_LIST_SCHEMA}"
    )


def build_recommend_prompt(
    preferences: dict[str, Any] | None = None,
    limit: int = DEFAULT_RECOMMEND_LIMIT,
) -> str:
    """Ask for ``limit`` careers matching the user's stated preferences."""
    prefs = json.dumps(preferences if preferences is not None else {})
    return (
        f"Given preferences: {prefs}, recommend {limit} diverse careers. "
        "Explain the fit in each description and give 3-5 required skills.\n\n"
        f"Respond ONLY in this exact JSON format:\n{CAREER_LIST_SCHEMA}"
    )


def build_enrich_prompt(titles: list[str] | None = None) -> str:
    """Ask for realistic labour-market stats for each career title."""
    return (
        f"For titles: {json.dumps(titles if titles is not None else [])} return realistic stats "
        "(salary USD range, growth %, demand, remote %, education) + 3-5 skills. "
        "Key the JSON object by title.\n\n"
        f"Respond ONLY in this exact JSON format:\n{ENRICH_SCHEMA}"
    )


def build_quiz_prompt(
    quiz_id: str,
    topic: str | None = None,
    subcategory: str | None = None,
    difficulty: str | None = None,
    question_style: str | None = None,
    num_questions: int = DEFAULT_QUIZ_QUESTIONS,
) -> str:
    """Ask for a quiz of ``num_questions`` questions shaped like ``Quiz``.

    ``subcategory`` "General" and ``question_style`` "Multiple Choice" are the
    implicit defaults and add nothing to the prompt.
    """
    about = f' about "{topic}"' if topic else ""
    sub = f' in the subcategory "{subcategory}"' if subcategory and subcategory != "General" else ""
    diff = f" at a {difficulty} level" if difficulty else ""
    style = (
        f" Use the {question_style} style."
        if question_style and question_style != "Multiple Choice"
        else ""
    )

    return (
        f"Generate {num_questions} unique questions{about}{sub}{diff}.{style} {QUIZ_UNIQUENESS}\n\n"
        f"{QUIZ_RULES}\n\n"
        f"Respond ONLY in this exact JSON format:\n{_quiz_schema(quiz_id)}"
    )


def build_careers_by_category_prompt(
    category: str | None = None,
    count: int = DEFAULT_CATEGORY_COUNT,
) -> str:
    """Ask for ``count`` careers within one category."""
    return (
        f'List {count} diverse careers in the "{category or ""}" category. '
        "Give each 3-5 required skills.\n\n"
        f"Respond ONLY in this exact JSON format:\n{CAREER_LIST_SCHEMA}"
    )


def build_career_recommendations_prompt(
    answers: list[Any] | None = None,
    limit: int = DEFAULT_CAREER_RECOMMENDATIONS,
) -> str:
    """Ask for ``limit`` career recommendations from quiz answers."""
    return (
        f"Based on these quiz answers: {json.dumps(answers if answers is not None else [])}\n\n"
        f"Recommend {limit} careers. Return ONLY this JSON format:\n{RECOMMENDATIONS_SCHEMA}"
    )
