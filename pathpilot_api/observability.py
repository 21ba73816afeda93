"""Observability utilities: trace IDs, model/fallback/store metrics, payload logging.

This module provides:
- Trace ID generation and propagation via context vars
- Prometheus metrics for Gemini calls, fallback substitutions and store operations
- Structured logging helpers for model request/response correlation
"""

import secrets
import time
from contextvars import ContextVar
from dataclasses import dataclass, field

import structlog
from prometheus_client import Counter, Histogram

logger = structlog.get_logger()

# =============================================================================
# Trace ID Context
# =============================================================================

# Context variable for trace ID propagation across async calls
trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")


def generate_trace_id() -> str:
    """Generate cryptographically secure trace ID for request tracking."""
    return secrets.token_hex(16)


def get_trace_id() -> str:
    """Get current trace ID from context, or empty string if not set."""
    return trace_id_ctx.get()


def set_trace_id(trace_id: str) -> None:
    """Set trace ID in context."""
    trace_id_ctx.set(trace_id)


# =============================================================================
# Prometheus Metrics
# =============================================================================

llm_requests_total = Counter(
    "llm_requests_total",
    "Total Gemini API requests",
    ["model", "status"],  # values: success, quota_exceeded, error
)

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Gemini response latency in seconds",
    ["model"],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0],
)

fallback_responses_total = Counter(
    "fallback_responses_total",
    "Static fallback payloads served instead of model output",
    ["kind"],
)

document_store_operations_total = Counter(
    "document_store_operations_total",
    "Document store operations",
    ["operation", "status"],
)


# =============================================================================
# LLM Payload Logging
# =============================================================================


@dataclass
class LLMRequestLog:
    """Structured log data for model requests."""

    trace_id: str
    model: str
    prompt_chars: int
    prompt_preview: str  # First 100 chars
    timestamp: float = field(default_factory=time.time)


def log_llm_request(model: str, prompt: str) -> LLMRequestLog:
    """Log a model request.

    Returns LLMRequestLog for correlation with the response.
    """
    log_data = LLMRequestLog(
        trace_id=get_trace_id(),
        model=model,
        prompt_chars=len(prompt),
        prompt_preview=prompt[:100] + ("..." if len(prompt) > 100 else ""),
    )

    logger.info(
        "llm_request",
        trace_id=log_data.trace_id,
        model=log_data.model,
        prompt_chars=log_data.prompt_chars,
        prompt_preview=log_data.prompt_preview,
    )
    return log_data


def log_llm_response(
    request_log: LLMRequestLog,
    status: str = "success",
    http_status: int | None = None,
    error: str | None = None,
) -> None:
    """Log a model response with metrics and correlation."""
    latency_ms = int((time.time() - request_log.timestamp) * 1000)

    if error:
        logger.error(
            "llm_response",
            trace_id=request_log.trace_id,
            model=request_log.model,
            status=status,
            http_status=http_status,
            latency_ms=latency_ms,
            error=error,
        )
    else:
        logger.info(
            "llm_response",
            trace_id=request_log.trace_id,
            model=request_log.model,
            status=status,
            http_status=http_status,
            latency_ms=latency_ms,
        )

    llm_requests_total.labels(model=request_log.model, status=status).inc()
    llm_latency_seconds.labels(model=request_log.model).observe(latency_ms / 1000.0)


def record_fallback(kind: str) -> None:
    """Count a fallback substitution."""
    fallback_responses_total.labels(kind=kind).inc()


def record_store_operation(operation: str, status: str) -> None:
    """Count a document store operation."""
    document_store_operations_total.labels(operation=operation, status=status).inc()
