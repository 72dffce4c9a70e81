"""
Global middleware.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

from auth.jwt import verify_token
from config.settings import config

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI) -> None:
    """Attach any app-level middleware."""

    @app.middleware("http")
    async def token_cookie(request: Request, call_next):
        # request.state.user_id is None unless the jwt cookie verifies
        token = request.cookies.get(config.jwt_cookie_name)
        request.state.user_id = verify_token(token) if token else None
        return await call_next(request)

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response
