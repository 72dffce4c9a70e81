"""
Auth API routes — signup, signin, fetchuserinfo, signout.

Route prefix: /api/authentication
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import ValidationError

from auth.dependencies import get_current_user_id, get_user_store
from auth.jwt import create_token
from auth.models import SignInBody, SignUpBody
from auth.password import hash_password, password_too_long, verify_password
from config.settings import config
from database.helpers import EmailAlreadyRegistered, UserStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

INTERNAL_ERROR = "Internal Server Error"


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def _read_body(request: Request, model):
    """Parse the JSON body into ``model``; 400 when absent or not an object."""
    raw = await request.body()
    if not raw.strip():
        raise _bad_request("No body provided")
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        raise _bad_request("No body provided")
    if not isinstance(data, dict):
        raise _bad_request("No body provided")
    try:
        return model.model_validate(data)
    except ValidationError:
        raise _bad_request("Invalid request body")


def _set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=config.jwt_cookie_name,
        value=token,
        max_age=config.jwt_expiry_seconds,
        path="/",
        httponly=True,
        secure=config.cookie_secure,
        samesite=config.cookie_samesite,
    )


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: Request,
    response: Response,
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Register a new user and start a cookie session."""
    try:
        body = await _read_body(request, SignUpBody)
        if not body.email or not body.password:
            raise _bad_request("Email and password required")

        if await store.find_user_by_email(body.email) is not None:
            raise _bad_request("Email already in use")

        if not body.firstName or not body.lastName:
            raise _bad_request("First name and last name required")

        if password_too_long(body.password):
            raise _bad_request("Password must be at most 72 bytes")

        fields = {
            "email": body.email,
            "password": await asyncio.to_thread(hash_password, body.password),
            "firstName": body.firstName,
            "lastName": body.lastName,
            "avatar": "",
            "theme": 0,
            "configuredProfile": False,
        }
        try:
            user_id = await store.insert_user(fields)
        except EmailAlreadyRegistered:
            raise _bad_request("Email already in use")

        _set_token_cookie(response, create_token(user_id))
        logger.info("Registered user %s", user_id)

        return {
            "user": {
                "id": user_id,
                "email": body.email,
                "firstName": body.firstName,
                "lastName": body.lastName,
                "avatar": "",
                "theme": 0,
                "configuredProfile": False,
            }
        }
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error in signUp")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("/signin")
async def sign_in(
    request: Request,
    response: Response,
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Login with email + password."""
    try:
        body = await _read_body(request, SignInBody)
        if not body.email or not body.password:
            raise _bad_request("Email and password required")

        user = await store.find_user_by_email(body.email)
        if user is None:
            raise _bad_request("Email not found")

        if not await asyncio.to_thread(verify_password, body.password, user.password):
            raise _bad_request("Incorrect password")

        _set_token_cookie(response, create_token(user.id))
        logger.info("Login: %s", user.id)

        return {"user": user.to_public()}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error during signIn")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.get("/fetchuserinfo")
async def fetch_user_info(
    user_id: str = Depends(get_current_user_id),
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    """Profile of the user identified by the session cookie."""
    try:
        user = await store.find_user_by_id(user_id)
        if user is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )
        return {"user": user.to_public()}
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error fetching user info")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.post("/signout")
async def sign_out(response: Response) -> Dict[str, str]:
    """Clear the session cookie."""
    try:
        response.delete_cookie(
            key=config.jwt_cookie_name,
            path="/",
            httponly=True,
            secure=config.cookie_secure,
            samesite=config.cookie_samesite,
        )
        return {"message": "Sign out successful"}
    except Exception:
        logger.exception("Error during signOut")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
