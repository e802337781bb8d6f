"""Shared fixtures: an in-memory document store and a clean environment."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from l10n_export.config import Config

ENV_KEYS = ("DB_PASSWORD", "PLATFORM", "DB_USER", "DB_HOST", "MONGODB_URI", "OUTPUT_DIR")


class InMemoryDocumentStore:
    """Document store backed by a dict of collection name -> documents."""

    def __init__(
        self,
        collections: Dict[str, List[Dict[str, Any]]],
        delays: Optional[Dict[str, float]] = None,
        failures: Optional[Dict[str, Exception]] = None,
    ):
        self.collections = collections
        self.delays = delays or {}
        self.failures = failures or {}
        self.cancelled: List[str] = []
        self.connected = False
        self.connect_calls = 0
        self.fetched: List[str] = []

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def connect(self) -> None:
        self.connect_calls += 1
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    async def list_collection_names(self) -> List[str]:
        return list(self.collections)

    async def fetch_documents(self, collection_name: str) -> List[Dict[str, Any]]:
        try:
            await asyncio.sleep(self.delays.get(collection_name, 0))
        except asyncio.CancelledError:
            self.cancelled.append(collection_name)
            raise
        if collection_name in self.failures:
            raise self.failures[collection_name]
        self.fetched.append(collection_name)
        return [dict(doc) for doc in self.collections[collection_name]]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_config(tmp_path):
    def _make(platform: str = "web") -> Config:
        return Config(db_password="secret", platform=platform, output_dir=tmp_path / "out")

    return _make


@pytest.fixture
def greeting_collections():
    return {
        "greeting": [
            {"_id": "g1", "lang": "en", "hello": "Hi", "bye": "Bye"},
            {"_id": "g2", "lang": "ua", "hello": "Привіт", "bye": "Бувай"},
        ],
        "menu": [
            {"_id": "m1", "lang": "en", "title": "Menu"},
            {"_id": "m2", "lang": "ua", "title": "Меню"},
        ],
    }


@pytest.fixture
def make_store():
    return InMemoryDocumentStore
