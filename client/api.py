"""
Async HTTP client for the auth API.

Every call returns an ``ApiResult`` instead of raising on HTTP errors, so
callers can show ``result.message`` directly.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from auth.models import UserProfile

logger = logging.getLogger(__name__)


class ApiResult(BaseModel):
    success: bool
    user: Optional[UserProfile] = None
    token: Optional[str] = None
    message: Optional[str] = None


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        data = response.json()
    except ValueError:
        return fallback
    message = data.get("message") if isinstance(data, dict) else None
    if isinstance(message, list):
        message = "; ".join(str(m) for m in message)
    return message or fallback


class AuthClient:
    """Talks to ``{base_url}/auth/*``."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "AuthClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _auth_call(self, path: str, payload: Dict[str, Any], fallback: str) -> ApiResult:
        response = await self._client.post(path, json=payload)
        if response.is_success:
            data = response.json()
            return ApiResult(
                success=True,
                user=UserProfile.model_validate(data["user"]),
                token=data["access_token"],
            )
        logger.debug("%s failed with %d", path, response.status_code)
        return ApiResult(success=False, message=_error_message(response, fallback))

    async def signup(self, email: str, name: str, password: str) -> ApiResult:
        return await self._auth_call(
            "/auth/signup",
            {"email": email, "name": name, "password": password},
            "Signup failed",
        )

    async def signin(self, email: str, password: str) -> ApiResult:
        return await self._auth_call(
            "/auth/signin",
            {"email": email, "password": password},
            "Login failed",
        )

    async def get_profile(self, token: str) -> ApiResult:
        response = await self._client.get(
            "/auth/profile",
            headers={"Authorization": f"Bearer {token}"},
        )
        if response.is_success:
            return ApiResult(success=True, user=UserProfile.model_validate(response.json()))
        return ApiResult(
            success=False,
            message=_error_message(response, "Failed to get profile"),
        )
