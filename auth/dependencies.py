"""
FastAPI dependencies for authentication.

Provides ``get_user_store`` and ``get_current_user_id`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status

from database.helpers import UserStore
from database.session import get_users_collection


def get_user_store() -> UserStore:
    """Credential store bound to the shared Mongo client."""
    return UserStore(get_users_collection())


def current_user_id(request: Request) -> Optional[str]:
    """User id attached by the token-cookie middleware, if any."""
    return getattr(request.state, "user_id", None)


async def get_current_user_id(request: Request) -> str:
    """
    Return the authenticated ``user_id``.

    Raises ``HTTPException(401)`` when the request carried no valid token.
    """
    user_id = current_user_id(request)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated",
        )
    return user_id
