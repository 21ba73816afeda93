"""MongoDB document store adapter.

The connection is opened on first use and shared for the process lifetime.
Concurrent first use opens exactly one connection.
"""

import asyncio
from collections.abc import Callable, Sequence
from typing import Any

import structlog
from pymongo import AsyncMongoClient
from bson.errors import BSONError
from pymongo.errors import PyMongoError

from pathpilot_api.config import get_settings
from pathpilot_api.errors import StoreOperationError, StoreUnavailableError
from pathpilot_api.observability import record_store_operation

logger = structlog.get_logger()

SortSpec = Sequence[tuple[str, int]]

# Read or write failures, including BSON encoding errors raised outside PyMongoError
OPERATION_ERRORS = (PyMongoError, BSONError, OverflowError)


class DocumentStore:
    """Insert and filtered-read access to named collections."""

    def __init__(
        self,
        uri: str | None = None,
        db_name: str | None = None,
        connect_timeout: float | None = None,
        client_factory: Callable[..., Any] = AsyncMongoClient,
    ):
        """Initialize the adapter without connecting.

        Args:
            uri: MongoDB connection string. Defaults to config value.
            db_name: Database name. Defaults to config value.
            connect_timeout: Ceiling in seconds for the first connection. Defaults to config value.
            client_factory: Callable building the driver client.
        """
        settings = get_settings()
        self._uri = uri if uri is not None else settings.mongodb_uri
        self._db_name = db_name or settings.db_name
        self._connect_timeout = connect_timeout or settings.mongodb_connect_timeout_seconds
        self._client_factory = client_factory
        self._client: Any = None
        self._db: Any = None
        self._lock = asyncio.Lock()

    @property
    def is_configured(self) -> bool:
        return bool(self._uri and self._uri.strip())

    @property
    def is_connected(self) -> bool:
        return self._db is not None

    async def _get_database(self) -> Any:
        """Return the database handle, connecting on first use."""
        if self._db is not None:
            return self._db

        if not self.is_configured:
            raise StoreUnavailableError("MONGODB_URI not set")

        async with self._lock:
            # Another request may have connected while we waited
            if self._db is not None:
                return self._db

            timeout_ms = int(self._connect_timeout * 1000)
            client = self._client_factory(self._uri, serverSelectionTimeoutMS=timeout_ms)
            try:
                await asyncio.wait_for(client.admin.command("ping"), timeout=self._connect_timeout)
            except (asyncio.TimeoutError, PyMongoError) as e:
                reason = str(e) or f"no response within {self._connect_timeout}s"
                logger.error("Failed to connect to MongoDB", error=reason)
                await client.close()
                raise StoreUnavailableError(f"MongoDB unavailable: {reason}") from e

            self._client = client
            self._db = client[self._db_name]
            logger.info("Connected to MongoDB", db_name=self._db_name)
            return self._db

    async def insert(self, collection: str, document: dict[str, Any]) -> str:
        """Insert ``document`` and return the generated id as a string.

        Raises:
            StoreUnavailableError: If the store is not configured or unreachable.
            StoreOperationError: If the write fails.
        """
        db = await self._get_database()
        try:
            result = await db[collection].insert_one(document)
        except OPERATION_ERRORS as e:
            record_store_operation("insert", "error")
            logger.error("MongoDB insert failed", collection=collection, error=str(e))
            raise StoreOperationError(f"Insert into {collection} failed: {e}") from e

        record_store_operation("insert", "success")
        logger.info("Document inserted", collection=collection, inserted_id=str(result.inserted_id))
        return str(result.inserted_id)

    async def find(
        self,
        collection: str,
        filter: dict[str, Any] | None = None,
        sort: SortSpec | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return documents matching ``filter`` with ``_id`` rendered as a string.

        Raises:
            StoreUnavailableError: If the store is not configured or unreachable.
            StoreOperationError: If the read fails.
        """
        db = await self._get_database()
        try:
            cursor = db[collection].find(filter or {})
            if sort:
                cursor = cursor.sort(list(sort))
            if limit:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=None)
        except OPERATION_ERRORS as e:
            record_store_operation("find", "error")
            logger.error("MongoDB find failed", collection=collection, error=str(e))
            raise StoreOperationError(f"Find in {collection} failed: {e}") from e

        record_store_operation("find", "success")
        for doc in documents:
            if "_id" in doc:
                doc["_id"] = str(doc["_id"])
        return documents

    async def close(self) -> None:
        """Close the MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._db = None
            logger.info("Closed MongoDB connection")


# Global store instance
_document_store: DocumentStore | None = None


def get_document_store() -> DocumentStore:
    """Get the global document store instance."""
    global _document_store
    if _document_store is None:
        _document_store = DocumentStore()
    return _document_store


async def close_document_store() -> None:
    """Close the global document store."""
    global _document_store
    if _document_store:
        await _document_store.close()
        _document_store = None


def reset_document_store() -> None:
    """Reset the global document store (for testing)."""
    global _document_store
    _document_store = None
