"""Gemini generateContent client.

One request per call: no retries, no backoff. HTTP 429 is reported as
``QuotaExceeded`` so the caller can decide what to substitute.
"""

from typing import Any

import httpx
import structlog

from pathpilot_api.config import get_settings
from pathpilot_api.errors import ConfigurationError, QuotaExceeded, UpstreamError
from pathpilot_api.observability import log_llm_request, log_llm_response

logger = structlog.get_logger()


class GeminiClient:
    """Async client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the Gemini client.

        Args:
            api_key: Gemini API key. Defaults to config value.
            base_url: API base URL. Defaults to config value.
            model: Model ID to use. Defaults to config value.
            timeout: Read timeout in seconds. Defaults to config value.
        """
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.gemini_key
        self._base_url = base_url or settings.gemini_base_url
        self._model = model or settings.gemini_model
        self._timeout = timeout or settings.gemini_timeout_seconds
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GeminiClient":
        await self.connect()
        return self

    async def __aexit__(self, _exc_type: Any, _exc_val: Any, _exc_tb: Any) -> None:
        await self.close()

    async def connect(self) -> None:
        """Create the HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(self._timeout, connect=10.0),
        )
        logger.info("Gemini client connected", model=self._model)

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Gemini client closed")

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        """Check if the client has an API key."""
        return bool(self._api_key and self._api_key.strip())

    @staticmethod
    def build_payload(prompt: str) -> dict[str, Any]:
        """Wrap a prompt in the generateContent request body."""
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    async def generate(self, prompt: str) -> dict[str, Any]:
        """Send a single prompt and return the raw response envelope.

        Args:
            prompt: Natural-language instructions for the model.

        Returns:
            The decoded JSON body, forwarded without schema validation.

        Raises:
            ConfigurationError: If no API key is configured.
            QuotaExceeded: If the API answers HTTP 429.
            UpstreamError: For any other non-success outcome, including
                transport failures and undecodable bodies.
        """
        if not self.is_configured:
            logger.error("Gemini API key not configured")
            raise ConfigurationError("GEMINI_KEY not set")

        if not self._client:
            await self.connect()

        request_log = log_llm_request(self._model, prompt)

        try:
            response = await self._client.post(
                f"/models/{self._model}:generateContent",
                json=self.build_payload(prompt),
                headers={"x-goog-api-key": self._api_key},
            )
        except httpx.HTTPError as e:
            log_llm_response(request_log, status="error", error=str(e))
            raise UpstreamError(None, str(e) or type(e).__name__) from e

        body = response.text

        if response.status_code == 429:
            log_llm_response(
                request_log, status="quota_exceeded", http_status=429, error="quota exhausted"
            )
            raise QuotaExceeded(body)

        if not response.is_success:
            log_llm_response(
                request_log, status="error", http_status=response.status_code, error=body[:200]
            )
            raise UpstreamError(response.status_code, body)

        try:
            data = response.json()
        except ValueError as e:
            log_llm_response(
                request_log, status="error", http_status=response.status_code, error="invalid JSON"
            )
            raise UpstreamError(response.status_code, body) from e

        log_llm_response(request_log, http_status=response.status_code)
        return data


# Global client instance
_gemini_client: GeminiClient | None = None


async def get_gemini_client() -> GeminiClient:
    """Get or create the global Gemini client instance."""
    global _gemini_client
    if _gemini_client is None:
        _gemini_client = GeminiClient()
        await _gemini_client.connect()
    return _gemini_client


async def close_gemini_client() -> None:
    """Close the global Gemini client."""
    global _gemini_client
    if _gemini_client:
        await _gemini_client.close()
        _gemini_client = None


def reset_gemini_client() -> None:
    """Reset the global Gemini client (for testing)."""
    global _gemini_client
    _gemini_client = None
