"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_auth_service`` and ``get_current_claims``
dependencies used by the auth routes.
"""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.exceptions import UnauthorizedError
from auth.jwt import TokenClaims, token_issuer
from auth.password import password_hasher
from auth.service import AuthService
from database.session import get_db_session
from database.users import UserStore

_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


def get_auth_service(session: AsyncSession = Depends(db_session)) -> AuthService:
    return AuthService(
        store=UserStore(session),
        hasher=password_hasher,
        tokens=token_issuer,
    )


async def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    """
    Extract and verify the Bearer token, returning its claims.

    A missing header, a non-Bearer scheme or a bad token all raise
    ``UnauthorizedError``.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError()
    return service.authenticate(credentials.credentials)
