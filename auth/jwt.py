"""
JWT creation and verification.

Tokens are compact HS512 JWTs (``header.payload.signature``, base64url
without padding) carrying ``id`` and ``exp``.
Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

from config.settings import config

logger = logging.getLogger(__name__)

_TOKEN_SECRET = config.jwt_secret.encode()
_TOKEN_EXPIRY_SECONDS = config.jwt_expiry_seconds
_HEADER = {"alg": "HS512", "typ": "JWT"}


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def _b64decode(segment: str) -> bytes:
    return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))


def _sign(signing_input: bytes) -> str:
    return _b64encode(hmac.new(_TOKEN_SECRET, signing_input, hashlib.sha512).digest())


def _encode(payload: Dict[str, Any]) -> str:
    header = _b64encode(json.dumps(_HEADER, separators=(",", ":")).encode())
    body = _b64encode(json.dumps(payload, separators=(",", ":")).encode())
    signing_input = f"{header}.{body}"
    return f"{signing_input}.{_sign(signing_input.encode())}"


def create_token(user_id: str, expires_in: Optional[int] = None) -> str:
    """Create a signed token containing ``id`` and expiry."""
    ttl = _TOKEN_EXPIRY_SECONDS if expires_in is None else expires_in
    return _encode({"id": user_id, "exp": int(time.time()) + ttl})


def verify_token(token: str) -> Optional[str]:
    """
    Verify token and return the user id.

    Returns ``None`` for malformed, tampered or expired tokens.
    """
    try:
        header_b64, body_b64, sig = token.split(".")
        expected_sig = _sign(f"{header_b64}.{body_b64}".encode())
        if not hmac.compare_digest(sig, expected_sig):
            raise ValueError("bad signature")
        header = json.loads(_b64decode(header_b64))
        if header.get("alg") != _HEADER["alg"]:
            raise ValueError("unexpected algorithm")
        payload = json.loads(_b64decode(body_b64))
        if not isinstance(payload.get("exp"), (int, float)) or payload["exp"] < time.time():
            raise ValueError("token expired")
        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise ValueError("missing id")
        return user_id
    except (ValueError, AttributeError, TypeError) as exc:
        logger.debug("Rejected token: %s", exc)
        return None
