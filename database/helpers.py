"""
Database helper functions — user lookup and persistence.

"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from database.models import User

logger = logging.getLogger(__name__)


class EmailAlreadyRegistered(Exception):
    """The unique ``email`` index rejected an insert."""


def _to_object_id(value: str | ObjectId) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class UserStore:
    """Credential store over the ``users`` collection.

    Every call is a single attempt; driver errors propagate to the caller.
    """

    def __init__(self, collection: Any) -> None:
        self._collection = collection

    async def ensure_indexes(self) -> None:
        await self._collection.create_index("email", unique=True)

    async def find_user_by_email(self, email: str) -> Optional[User]:
        doc = await self._collection.find_one({"email": email})
        return User.from_document(doc) if doc else None

    async def find_user_by_id(self, user_id: str) -> Optional[User]:
        oid = _to_object_id(user_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return User.from_document(doc) if doc else None

    async def insert_user(self, fields: Dict[str, Any]) -> str:
        """Insert a user document and return the generated id."""
        doc = dict(fields)
        try:
            result = await self._collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise EmailAlreadyRegistered(fields.get("email")) from exc
        user_id = str(result.inserted_id)
        logger.debug("Inserted user %s", user_id)
        return user_id
