"""
JWT-style token creation and verification.

Tokens are urlsafe-base64 JSON claim sets signed with HMAC-SHA256::

    <base64(json({sub, email, iat, exp}))>.<hex signature>

Secret key is loaded from ``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode

from pydantic import BaseModel, ValidationError

from auth.exceptions import InvalidTokenError
from config.settings import config


class TokenClaims(BaseModel):
    sub: str
    email: str
    iat: int
    exp: int


class TokenIssuer:
    """Signs and verifies self-contained bearer tokens."""

    def __init__(self, secret: str, expiry_seconds: int) -> None:
        if not secret:
            raise ValueError("A token signing secret must be provided")
        self._secret = secret.encode()
        self.expiry_seconds = expiry_seconds

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, subject: str, email: str) -> str:
        """Create a signed token for ``subject`` that expires after ``expiry_seconds``."""
        now = int(time.time())
        payload = {
            "sub": subject,
            "email": email,
            "iat": now,
            "exp": now + self.expiry_seconds,
        }
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify ``token`` and return its claims.

        Raises ``InvalidTokenError`` on malformed, tampered or expired tokens.
        """
        parts = token.split(".")
        if len(parts) != 2:
            raise InvalidTokenError("bad format")
        try:
            raw = urlsafe_b64decode(parts[0].encode())
        except (binascii.Error, ValueError) as exc:
            raise InvalidTokenError("bad encoding") from exc

        if not hmac.compare_digest(parts[1].encode(), self._sign(raw).encode()):
            raise InvalidTokenError("bad signature")

        try:
            claims = TokenClaims.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as exc:
            raise InvalidTokenError("bad claims") from exc

        if claims.exp <= time.time():
            raise InvalidTokenError("token expired")
        return claims


token_issuer = TokenIssuer(config.jwt_secret, config.jwt_expiry_seconds)


def create_token(user_id: str, email: str) -> str:
    return token_issuer.issue(user_id, email)


def verify_token(token: str) -> TokenClaims:
    return token_issuer.verify(token)
