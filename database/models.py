"""
Document models for the ``users`` collection.

Field names follow the stored documents (camelCase) so the same keys are
used in the database and in API responses.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    password: str  # bcrypt hash
    firstName: str
    lastName: str
    avatar: str = ""
    theme: int = 0
    configuredProfile: bool = False

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        data = {k: v for k, v in doc.items() if k != "_id"}
        return cls(id=str(doc["_id"]), **data)

    def to_public(self) -> Dict[str, Any]:
        """Fields safe to return to the client (never the password)."""
        return self.model_dump(exclude={"password"})
