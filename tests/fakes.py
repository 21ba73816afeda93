"""In-process stand-ins for Gemini and MongoDB used by the test suite."""

import asyncio
import json
from types import SimpleNamespace
from typing import Any

import httpx
import bson
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError


def gemini_reply(text: str) -> dict[str, Any]:
    """A minimal successful generateContent body."""
    return {
        "candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}],
        "usageMetadata": {"totalTokenCount": 42},
    }


class GeminiStub:
    """Scripted responses for an httpx.MockTransport-backed Gemini client."""

    def __init__(self) -> None:
        self.status_code = 200
        self.json_body: Any = gemini_reply('{"careers": []}')
        self.text_body: str | None = None
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_prompt(self) -> str:
        payload = json.loads(self.requests[-1].content)
        return payload["contents"][0]["parts"][0]["text"]


class FakeCursor:
    """Subset of the async cursor API: sort, limit, to_list."""

    def __init__(self, rows: list[tuple[int, dict[str, Any]]]) -> None:
        self._rows = rows
        self._limit: int | None = None

    def sort(self, spec: list[tuple[str, int]]) -> "FakeCursor":
        # Apply keys right to left; insertion order breaks ties
        for key, direction in reversed(spec):
            self._rows.sort(key=lambda row: (row[1].get(key), row[0]), reverse=direction < 0)
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        rows = self._rows if self._limit is None else self._rows[: self._limit]
        return [dict(doc) for _, doc in rows]


class FakeCollection:
    def __init__(self) -> None:
        self.rows: list[tuple[int, dict[str, Any]]] = []
        self.fail_with: Exception | None = None

    async def insert_one(self, document: dict[str, Any]) -> SimpleNamespace:
        if self.fail_with is not None:
            raise self.fail_with
        document.setdefault("_id", ObjectId())
        # The driver encodes before sending; oversized ints and bad keys fail here
        bson.encode(document)
        self.rows.append((len(self.rows), dict(document)))
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, filter: dict[str, Any] | None = None) -> FakeCursor:
        if self.fail_with is not None:
            raise self.fail_with
        filter = filter or {}
        matched = [
            row for row in self.rows if all(row[1].get(k) == v for k, v in filter.items())
        ]
        return FakeCursor(matched)


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


class FakeMongoFactory:
    """Stands in for AsyncMongoClient; counts how many clients get built."""

    def __init__(self) -> None:
        self.clients: list["FakeMongoClient"] = []
        self.databases: dict[str, FakeDatabase] = {}
        self.ping_delay = 0.0
        self.fail_ping = False

    def __call__(self, uri: str, **kwargs: Any) -> "FakeMongoClient":
        client = FakeMongoClient(self, uri, kwargs)
        self.clients.append(client)
        return client


class FakeMongoClient:
    def __init__(self, factory: FakeMongoFactory, uri: str, options: dict[str, Any]) -> None:
        self.factory = factory
        self.uri = uri
        self.options = options
        self.closed = False
        self.admin = SimpleNamespace(command=self._command)

    async def _command(self, name: str) -> dict[str, Any]:
        await asyncio.sleep(self.factory.ping_delay)
        if self.factory.fail_ping:
            raise ServerSelectionTimeoutError("No servers found")
        return {"ok": 1}

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.factory.databases.setdefault(name, FakeDatabase())

    async def close(self) -> None:
        self.closed = True

