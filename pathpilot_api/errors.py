"""Error taxonomy shared by the model client, document store and handlers."""


class PathPilotError(Exception):
    """Base exception for gateway errors."""

    pass


class ConfigurationError(PathPilotError):
    """Raised when a required credential or connection string is missing."""

    pass


class UpstreamError(PathPilotError):
    """Raised when the model API fails with anything other than quota exhaustion.

    ``status`` is ``None`` when no HTTP response was received at all.
    """

    def __init__(self, status: int | None, body: str):
        self.status = status
        self.body = body
        if status is None:
            message = f"Gemini request failed: {body}"
        else:
            message = f"Gemini error {status}: {body}"
        super().__init__(message)


class QuotaExceeded(PathPilotError):
    """Raised when the model API answers HTTP 429.

    This is a signal for the fallback path; handlers never surface it.
    """

    def __init__(self, body: str = ""):
        self.body = body
        super().__init__(f"Gemini quota exhausted: {body}" if body else "Gemini quota exhausted")


class StoreUnavailableError(PathPilotError):
    """Raised when the document store is not configured or cannot be reached."""

    pass


class StoreOperationError(PathPilotError):
    """Raised when a document store read or write fails."""

    pass
