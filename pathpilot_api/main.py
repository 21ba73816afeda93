"""FastAPI application entrypoint for the PathPilot API."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator

import structlog
from fastapi import Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_fastapi_instrumentator import Instrumentator

from pathpilot_api import __version__
from pathpilot_api.config import get_settings
from pathpilot_api.document_store import DocumentStore, close_document_store, get_document_store
from pathpilot_api.errors import PathPilotError
from pathpilot_api.fallback import FallbackKind, call_with_fallback, select
from pathpilot_api.gemini_client import GeminiClient, close_gemini_client, get_gemini_client
from pathpilot_api.models import (
    CareerRecommendationsRequest,
    CareersByCategoryRequest,
    EnrichRequest,
    ErrorResponse,
    HealthResponse,
    InsertResponse,
    QuizRequest,
    RecommendRequest,
    TrendingRequest,
    generate_quiz_id,
)
from pathpilot_api.observability import generate_trace_id, record_fallback, set_trace_id
from pathpilot_api.prompts import (
    build_career_recommendations_prompt,
    build_careers_by_category_prompt,
    build_enrich_prompt,
    build_quiz_prompt,
    build_recommend_prompt,
    build_trending_prompt,
)

settings = get_settings()

logging.basicConfig(format="%(message)s", level=settings.log_level)

# Configure structlog
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

CAREERS_COLLECTION = "careers"
QUIZ_RESULTS_COLLECTION = "quiz_results"
CAREERS_LIST_LIMIT = 100

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {500: {"model": ErrorResponse}}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logger.info("Starting PathPilot API", version=__version__, port=settings.port)

    if not settings.has_mongodb_uri:
        logger.warning("MONGODB_URI not set, store-backed endpoints will fail")
    if not settings.has_gemini_key:
        logger.warning("GEMINI_KEY not set, model-backed endpoints will fail")

    yield

    logger.info("Shutting down PathPilot API")
    await close_gemini_client()
    await close_document_store()


# Create FastAPI app
app = FastAPI(
    title="PathPilot API",
    description="Career exploration gateway over Gemini with static fallbacks",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Trace ID middleware for request correlation
@app.middleware("http")
async def trace_id_middleware(request: Request, call_next):
    """Add trace ID to every request for log correlation."""
    trace_id = request.headers.get("X-Trace-ID") or generate_trace_id()
    set_trace_id(trace_id)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(trace_id=trace_id)

    response = await call_next(request)
    response.headers["X-Trace-ID"] = trace_id
    return response


# Add Prometheus metrics
Instrumentator().instrument(app).expose(app)


def _error_response(endpoint: str, error: Exception) -> JSONResponse:
    """Render a failure as ``{"error": ...}`` with HTTP 500."""
    logger.error("Request failed", endpoint=endpoint, error=str(error), error_type=type(error).__name__)
    return JSONResponse(status_code=500, content={"error": str(error)})


# =============================================================================
# Health Endpoints
# =============================================================================


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness probe."""
    return "OK"


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report which external collaborators are configured."""
    settings = get_settings()
    model_configured = settings.has_gemini_key
    store_configured = settings.has_mongodb_uri

    return HealthResponse(
        status="healthy" if model_configured and store_configured else "degraded",
        model_configured=model_configured,
        store_configured=store_configured,
        version=__version__,
    )


# =============================================================================
# Store-backed Endpoints
# =============================================================================


@app.get("/careers", responses=ERROR_RESPONSES)
async def list_careers(store: DocumentStore = Depends(get_document_store)):
    """List up to 100 stored careers."""
    try:
        return await store.find(CAREERS_COLLECTION, {}, limit=CAREERS_LIST_LIMIT)
    except PathPilotError as e:
        return _error_response("careers", e)


@app.post("/careers", response_model=InsertResponse, responses=ERROR_RESPONSES)
async def create_career(
    career: dict[str, Any] | None = Body(default=None),
    store: DocumentStore = Depends(get_document_store),
):
    """Store a career object as given."""
    try:
        inserted_id = await store.insert(CAREERS_COLLECTION, dict(career or {}))
    except PathPilotError as e:
        return _error_response("careers", e)
    return InsertResponse(inserted_id=inserted_id)


@app.post("/quiz-results", response_model=InsertResponse, responses=ERROR_RESPONSES)
async def create_quiz_result(
    result: dict[str, Any] | None = Body(default=None),
    store: DocumentStore = Depends(get_document_store),
):
    """Store a quiz result, stamping it with ``createdAt``."""
    document = {**(result or {}), "createdAt": datetime.now(timezone.utc)}
    try:
        inserted_id = await store.insert(QUIZ_RESULTS_COLLECTION, document)
    except PathPilotError as e:
        return _error_response("quiz-results", e)
    return InsertResponse(inserted_id=inserted_id)


@app.get("/quiz-results/{user_id}", responses=ERROR_RESPONSES)
async def list_quiz_results(user_id: str, store: DocumentStore = Depends(get_document_store)):
    """List a user's quiz results, newest first."""
    try:
        return await store.find(
            QUIZ_RESULTS_COLLECTION,
            {"userId": user_id},
            sort=[("createdAt", -1)],
        )
    except PathPilotError as e:
        return _error_response("quiz-results", e)


# =============================================================================
# Model-backed Endpoints
# =============================================================================


@app.post("/trending")
async def trending(
    payload: Any = Body(default=None),
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """List trending careers.

    Always answers 200: any failure, not only quota exhaustion, is replaced
    by the trending fallback.
    """
    try:
        request = TrendingRequest.model_validate(payload or {})
        prompt = build_trending_prompt(request.count)
        return await call_with_fallback(gemini, prompt, FallbackKind.TRENDING)
    except Exception as e:
        logger.warning("Trending failed, serving fallback", error=str(e), error_type=type(e).__name__)
        record_fallback(FallbackKind.TRENDING.value)
        return select(FallbackKind.TRENDING).model_dump()


@app.post("/recommend", responses=ERROR_RESPONSES)
async def recommend(
    request: RecommendRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Recommend careers for a set of preferences."""
    request = request or RecommendRequest()
    prompt = build_recommend_prompt(request.preferences, request.limit)
    try:
        return await call_with_fallback(gemini, prompt, FallbackKind.TRENDING)
    except PathPilotError as e:
        return _error_response("recommend", e)


@app.post("/enrich", responses=ERROR_RESPONSES)
async def enrich(
    request: EnrichRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Attach market stats to career titles."""
    request = request or EnrichRequest()
    prompt = build_enrich_prompt(request.titles)
    try:
        return await call_with_fallback(gemini, prompt, FallbackKind.TRENDING)
    except PathPilotError as e:
        return _error_response("enrich", e)


@app.post("/quiz", responses=ERROR_RESPONSES)
async def quiz(
    request: QuizRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Generate a quiz."""
    request = request or QuizRequest()
    prompt = build_quiz_prompt(
        quiz_id=generate_quiz_id(),
        topic=request.topic,
        subcategory=request.subcategory,
        difficulty=request.difficulty,
        question_style=request.question_style,
        num_questions=request.num_questions,
    )
    try:
        return await call_with_fallback(
            gemini, prompt, FallbackKind.QUIZ, num_questions=request.num_questions
        )
    except PathPilotError as e:
        return _error_response("quiz", e)


@app.post("/careers-by-category", responses=ERROR_RESPONSES)
async def careers_by_category(
    request: CareersByCategoryRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """List careers within a category."""
    request = request or CareersByCategoryRequest()
    prompt = build_careers_by_category_prompt(request.category, request.count)
    try:
        return await call_with_fallback(gemini, prompt, FallbackKind.TRENDING)
    except PathPilotError as e:
        return _error_response("careers-by-category", e)


@app.post("/career-recommendations", responses=ERROR_RESPONSES)
async def career_recommendations(
    request: CareerRecommendationsRequest | None = None,
    gemini: GeminiClient = Depends(get_gemini_client),
):
    """Recommend careers from quiz answers."""
    request = request or CareerRecommendationsRequest()
    prompt = build_career_recommendations_prompt(request.answers, request.limit)
    try:
        return await call_with_fallback(gemini, prompt, FallbackKind.RECOMMENDATIONS)
    except PathPilotError as e:
        return _error_response("career-recommendations", e)
