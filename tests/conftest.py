"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Iterator

import httpx
import pytest

from pathpilot_api.config import Settings
from tests.fakes import FakeMongoFactory, GeminiStub

# Set test environment variables before importing app modules
os.environ.setdefault("GEMINI_KEY", "")
os.environ.setdefault("MONGODB_URI", "")
os.environ.setdefault("ENVIRONMENT", "development")

GEMINI_BASE_URL = "https://gemini.test/v1"


@pytest.fixture(autouse=True)
def reset_caches() -> Iterator[None]:
    """Reset cached settings and shared clients before each test."""
    from pathpilot_api.config import get_settings
    from pathpilot_api.document_store import reset_document_store
    from pathpilot_api.gemini_client import reset_gemini_client

    get_settings.cache_clear()
    reset_gemini_client()
    reset_document_store()
    yield
    get_settings.cache_clear()
    reset_gemini_client()
    reset_document_store()


@pytest.fixture
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[..., Settings]:
    """Fixture to set test settings."""

    def _mock_settings(**kwargs: str) -> Settings:
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        from pathpilot_api.config import get_settings

        get_settings.cache_clear()
        return get_settings()

    return _mock_settings


# =============================================================================
# Gemini
# =============================================================================


@pytest.fixture
def gemini_stub() -> GeminiStub:
    return GeminiStub()


@pytest.fixture
def make_gemini_client(gemini_stub: GeminiStub):
    """Build a GeminiClient whose HTTP traffic goes to ``gemini_stub``."""
    from pathpilot_api.gemini_client import GeminiClient

    def _make(api_key: str = "test-key") -> GeminiClient:
        client = GeminiClient(api_key=api_key, base_url=GEMINI_BASE_URL, model="gemini-test")
        client._client = httpx.AsyncClient(
            base_url=GEMINI_BASE_URL,
            transport=httpx.MockTransport(gemini_stub.handler),
        )
        return client

    return _make


# =============================================================================
# MongoDB
# =============================================================================


@pytest.fixture
def mongo_factory() -> FakeMongoFactory:
    return FakeMongoFactory()


@pytest.fixture
def make_document_store(mongo_factory: FakeMongoFactory):
    """Build a DocumentStore on top of the fake Mongo client."""
    from pathpilot_api.document_store import DocumentStore

    def _make(uri: str = "mongodb://fake:27017", connect_timeout: float = 1.0) -> DocumentStore:
        return DocumentStore(
            uri=uri,
            db_name="pathpilot_test",
            connect_timeout=connect_timeout,
            client_factory=mongo_factory,
        )

    return _make


# =============================================================================
# App
# =============================================================================


@pytest.fixture
def client(make_gemini_client, make_document_store):
    """Test client with Gemini and MongoDB swapped for in-process fakes."""
    from fastapi.testclient import TestClient

    from pathpilot_api.document_store import get_document_store
    from pathpilot_api.gemini_client import get_gemini_client
    from pathpilot_api.main import app

    gemini = make_gemini_client()
    store = make_document_store()
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    app.dependency_overrides[get_document_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
