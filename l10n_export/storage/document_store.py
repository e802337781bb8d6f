"""Access to the MongoDB database holding the localization documents."""

import logging
from typing import Any, Dict, List, Optional, Protocol

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ..errors import StoreError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


class DocumentStore(Protocol):
    """What the export needs from a document database."""

    async def connect(self) -> None: ...

    async def close(self) -> None: ...

    async def list_collection_names(self) -> List[str]: ...

    async def fetch_documents(self, collection_name: str) -> List[Document]: ...

    async def __aenter__(self) -> "DocumentStore": ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...


class MongoDocumentStore:
    """Reads collections of one logical database through pymongo's async client."""

    def __init__(self, uri: str, database_name: str, client: Optional[AsyncMongoClient] = None):
        self.uri = uri
        self.database_name = database_name
        self._client = client

    async def __aenter__(self) -> "MongoDocumentStore":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def connect(self) -> None:
        """Open the client and check that the server answers."""
        if self._client is None:
            self._client = AsyncMongoClient(self.uri, server_api=ServerApi("1"))
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            await self.close()
            raise StoreError(f"Could not connect to MongoDB: {e}") from e
        logger.debug("Connected to MongoDB, database %r", self.database_name)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def list_collection_names(self) -> List[str]:
        try:
            names = await self._database().list_collection_names()
        except PyMongoError as e:
            raise StoreError(f"Could not list collections of {self.database_name!r}: {e}") from e
        logger.debug("Found %d collections in %r", len(names), self.database_name)
        return names

    async def fetch_documents(self, collection_name: str) -> List[Document]:
        """Fetch every document of a collection, in natural order."""
        try:
            cursor = self._database()[collection_name].find({})
            return await cursor.to_list()
        except PyMongoError as e:
            raise StoreError(f"Could not read collection {collection_name!r}: {e}") from e

    def _database(self):
        if self._client is None:
            raise StoreError("MongoDB client is not connected")
        return self._client[self.database_name]
