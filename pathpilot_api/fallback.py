"""Fallback selection for quota-exhausted model calls."""

from enum import Enum
from typing import Any

import structlog

from pathpilot_api.errors import QuotaExceeded
from pathpilot_api.fallback_catalog import (
    QUIZ_DESCRIPTION,
    QUIZ_QUESTIONS,
    QUIZ_TITLE,
    RECOMMENDATIONS,
    TRENDING_CAREERS,
)
from pathpilot_api.gemini_client import GeminiClient
from pathpilot_api.models import CareerList, ModelEnvelope, Quiz, QuizQuestion, RecommendationList
from pathpilot_api.observability import record_fallback

logger = structlog.get_logger()

# Question count used when a quiz fallback is requested without one
DEFAULT_FALLBACK_QUESTIONS = 10


class FallbackKind(str, Enum):
    """Which static payload stands in for a model reply."""

    TRENDING = "trending"
    QUIZ = "quiz"
    RECOMMENDATIONS = "recommendations"


def select_quiz_questions(num_questions: int) -> list[QuizQuestion]:
    """Return the first ``min(num_questions, catalog size)`` canonical questions."""
    count = max(0, min(num_questions, len(QUIZ_QUESTIONS)))
    return list(QUIZ_QUESTIONS[:count])


def select(kind: FallbackKind, num_questions: int | None = None) -> ModelEnvelope:
    """Build the canned envelope for ``kind``.

    Args:
        kind: The fallback payload to serve.
        num_questions: Quiz size; ignored for other kinds.

    Returns:
        An envelope whose embedded JSON matches the live reply schema.
    """
    if kind is FallbackKind.TRENDING:
        payload = CareerList(careers=list(TRENDING_CAREERS))
    elif kind is FallbackKind.QUIZ:
        if num_questions is None:
            num_questions = DEFAULT_FALLBACK_QUESTIONS
        payload = Quiz(
            title=QUIZ_TITLE,
            description=QUIZ_DESCRIPTION,
            questions=select_quiz_questions(num_questions),
        )
    elif kind is FallbackKind.RECOMMENDATIONS:
        payload = RecommendationList(recommendations=list(RECOMMENDATIONS))
    else:
        raise ValueError(f"Unknown fallback kind: {kind!r}")

    return ModelEnvelope.wrap(payload)


async def call_with_fallback(
    client: GeminiClient,
    prompt: str,
    kind: FallbackKind = FallbackKind.TRENDING,
    num_questions: int | None = None,
) -> dict[str, Any]:
    """Call the model, substituting the ``kind`` fallback on quota exhaustion.

    Every other error propagates unchanged.
    """
    try:
        return await client.generate(prompt)
    except QuotaExceeded:
        logger.warning("Gemini quota exhausted, serving fallback", kind=kind.value)
        record_fallback(kind.value)
        return select(kind, num_questions).model_dump()
