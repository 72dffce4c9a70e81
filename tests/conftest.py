"""
Shared fixtures — test configuration and an in-memory users collection.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-0123456789")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from types import SimpleNamespace

from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from database.helpers import UserStore


class InMemoryUsers:
    """Implements the slice of ``AsyncCollection`` that ``UserStore`` uses."""

    def __init__(self):
        self.docs = []
        self.indexes = []

    async def create_index(self, key, unique=False):
        self.indexes.append((key, unique))
        return f"{key}_1"

    async def find_one(self, query):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                return dict(doc)
        return None

    async def insert_one(self, doc):
        if any(d["email"] == doc["email"] for d in self.docs):
            raise DuplicateKeyError("E11000 duplicate key error")
        doc = dict(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])


@pytest.fixture
def users():
    return InMemoryUsers()


@pytest.fixture
def store(users):
    return UserStore(users)


@pytest.fixture
def app(store):
    from auth.dependencies import get_user_store
    from main import app

    app.dependency_overrides[get_user_store] = lambda: store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    # https so the Secure cookie is kept and sent back
    return TestClient(app, base_url="https://testserver")
