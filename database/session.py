"""
Async MongoDB client for the document store.
"""

from __future__ import annotations

from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from config.settings import config

USERS_COLLECTION = "users"

_client: Optional[AsyncMongoClient] = None


def get_client() -> AsyncMongoClient:
    """Return the process-wide client, creating it on first use."""
    global _client
    if _client is None:
        _client = AsyncMongoClient(
            config.mongo_url,
            serverSelectionTimeoutMS=config.mongo_timeout_ms,
        )
    return _client


def get_database() -> AsyncDatabase:
    return get_client()[config.mongo_db]


def get_users_collection() -> AsyncCollection:
    return get_database()[USERS_COLLECTION]


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.close()
        _client = None
