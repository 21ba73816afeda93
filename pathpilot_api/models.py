"""Pydantic models for API requests, responses and model payloads.

JSON keys are camelCase on the wire; Python attributes stay snake_case.
"""

import json
import time
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Domain Entities
# =============================================================================


class Career(CamelModel):
    """A career as produced by the model or the fallback catalog."""

    id: str
    title: str
    description: str
    category: str
    required_skills: list[str] = Field(default_factory=list)
    recommended_skills: list[str] = Field(default_factory=list)
    average_salary: int | float
    growth_potential: str
    companies: list[str] = Field(default_factory=list)
    courses: list[str] = Field(default_factory=list)
    image_url: str = ""


class CareerList(CamelModel):
    """Career listing payload: ``{"careers": [...]}``."""

    careers: list[Career]


class QuizOption(CamelModel):
    """One answer option of a quiz question."""

    id: str
    text: str


class QuizQuestion(CamelModel):
    """A single quiz question; ``correct_answer_id`` names one of ``options``."""

    id: str
    question: str
    options: list[QuizOption]
    correct_answer_id: str
    explanation: str
    points: int


def generate_quiz_id() -> str:
    """Quiz ids are derived from the current time in milliseconds."""
    return f"quiz_{int(time.time() * 1000)}"


class Quiz(CamelModel):
    """An ordered set of quiz questions."""

    id: str = Field(default_factory=generate_quiz_id)
    title: str
    description: str
    questions: list[QuizQuestion]


class Recommendation(CamelModel):
    """A recommended career with the reason behind it."""

    career: str
    explanation: str


class RecommendationList(CamelModel):
    """Recommendation payload: ``{"recommendations": [...]}``."""

    recommendations: list[Recommendation]


# =============================================================================
# Model Envelope
# =============================================================================


class EnvelopePart(BaseModel):
    text: str


class EnvelopeContent(BaseModel):
    parts: list[EnvelopePart]


class EnvelopeCandidate(BaseModel):
    content: EnvelopeContent


class ModelEnvelope(BaseModel):
    """Wrapper shared by live model replies and fallback payloads."""

    candidates: list[EnvelopeCandidate]

    @classmethod
    def wrap(cls, payload: CamelModel) -> "ModelEnvelope":
        """Embed ``payload`` as JSON text in a single-candidate envelope."""
        text = json.dumps(payload.model_dump(by_alias=True, mode="json"))
        return cls(candidates=[EnvelopeCandidate(content=EnvelopeContent(parts=[EnvelopePart(text=text)]))])

    def first_text(self) -> str:
        """Return the text of the first part of the first candidate."""
        return self.candidates[0].content.parts[0].text


# =============================================================================
# Request Bodies
# =============================================================================


class TrendingRequest(CamelModel):
    count: int = 24


class RecommendRequest(CamelModel):
    preferences: dict[str, Any] = Field(default_factory=dict)
    limit: int = 12


class EnrichRequest(CamelModel):
    titles: list[str] = Field(default_factory=list)


class QuizRequest(CamelModel):
    topic: str | None = None
    subcategory: str | None = None
    difficulty: str | None = None
    question_style: str | None = None
    num_questions: int = 5


class CareersByCategoryRequest(CamelModel):
    category: str | None = None
    count: int = 15


class CareerRecommendationsRequest(CamelModel):
    answers: list[Any] = Field(default_factory=list)
    limit: int = 3


# =============================================================================
# Responses
# =============================================================================


class InsertResponse(CamelModel):
    """Result of a document insert."""

    inserted_id: str = Field(..., description="Store-assigned document id")


class ErrorResponse(BaseModel):
    """Error body returned with HTTP 500."""

    error: str


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    model_config = ConfigDict(protected_namespaces=())

    status: Literal["healthy", "degraded"] = Field(..., description="Service status")
    model_configured: bool = Field(..., description="Gemini API key present")
    store_configured: bool = Field(..., description="MongoDB URI present")
    version: str = Field(..., description="API version")
