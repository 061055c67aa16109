"""Signed bearer tokens and the admin gate for write endpoints.

A token is ``<payload>.<signature>`` where payload is base64url JSON
``{"username": ..., "isAdmin": ...}`` and signature is its HMAC-SHA256
under ``settings.secret_key``.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json

from fastapi import Request

from .config import settings
from .errors import UnauthorizedError

AUTH_BEARER_PREFIX = "Bearer "


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(text: str) -> bytes:
    padding = "=" * (-len(text) % 4)
    return base64.urlsafe_b64decode(text + padding)


def _sign(payload: str) -> str:
    digest = hmac.new(
        settings.secret_key.encode("utf-8"),
        payload.encode("ascii"),
        hashlib.sha256,
    ).digest()
    return _b64encode(digest)


def create_token(username: str, is_admin: bool = False) -> str:
    claims = {"username": username, "isAdmin": bool(is_admin)}
    payload = _b64encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    return f"{payload}.{_sign(payload)}"


def decode_token(token: str) -> dict:
    """Verify a token's signature and return its claims.

    Raises:
        UnauthorizedError: If the token is malformed or the signature is wrong
    """
    payload, sep, signature = token.partition(".")
    if not sep or not payload or not signature:
        raise UnauthorizedError("Malformed token")
    if not hmac.compare_digest(signature, _sign(payload)):
        raise UnauthorizedError("Invalid token")
    try:
        claims = json.loads(_b64decode(payload))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise UnauthorizedError("Malformed token")
    if not isinstance(claims, dict):
        raise UnauthorizedError("Malformed token")
    return claims


def _extract_bearer_token(authorization_header: str | None) -> str | None:
    if not authorization_header:
        return None
    if not authorization_header.startswith(AUTH_BEARER_PREFIX):
        return None
    return authorization_header[len(AUTH_BEARER_PREFIX):].strip() or None


async def ensure_admin(request: Request) -> dict:
    """FastAPI dependency: require a valid token with ``isAdmin`` set."""
    token = _extract_bearer_token(request.headers.get("Authorization"))
    if not token:
        raise UnauthorizedError()
    claims = decode_token(token)
    if claims.get("isAdmin") is not True:
        raise UnauthorizedError()
    return claims
