"""
Authentication service — signup, signin, profile retrieval.

Collaborators are passed in explicitly:

  • ``store``  — a ``UserStore`` (or anything with the same coroutines)
  • ``hasher`` — a ``PasswordHasher``
  • ``tokens`` — a ``TokenIssuer``
"""

from __future__ import annotations

import logging

from auth.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthorizedError,
    UserAlreadyExistsError,
)
from auth.jwt import TokenClaims, TokenIssuer
from auth.models import AuthResponse, UserProfile
from auth.password import PasswordHasher
from database.models import User
from database.users import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def _respond(self, user: User) -> AuthResponse:
        profile = UserProfile(id=str(user.user_id), email=user.email, name=user.name)
        return AuthResponse(
            access_token=self.tokens.issue(profile.id, profile.email),
            user=profile,
        )

    async def signup(self, email: str, name: str, password: str) -> AuthResponse:
        """
        Create an account and return a token for it.

        The existence pre-check only saves a bcrypt round; the store's
        insert is what actually rejects duplicates.
        """
        if await self.store.exists(email):
            raise UserAlreadyExistsError(email)

        password_hash = await self.hasher.hash_async(password)
        user = await self.store.insert_if_absent(email, name, password_hash)

        logger.info("Registered user %s (%s)", user.email, user.user_id)
        return self._respond(user)

    async def signin(self, email: str, password: str) -> AuthResponse:
        user = await self.store.find_by_email(email)
        if user is None:
            await self.hasher.verify_dummy_async(password)
            logger.warning("Signin failed for %s", email)
            raise InvalidCredentialsError()

        if not await self.hasher.verify_async(password, user.password_hash):
            logger.warning("Signin failed for %s", email)
            raise InvalidCredentialsError()

        logger.info("Login: %s (%s)", user.email, user.user_id)
        return self._respond(user)

    async def get_profile(self, user_id: str) -> UserProfile:
        profile = await self.store.find_by_id(user_id)
        if profile is None:
            raise UnauthorizedError("User not found")
        return profile

    def authenticate(self, token: str) -> TokenClaims:
        """Verify a bearer token, mapping any failure to ``UnauthorizedError``."""
        try:
            return self.tokens.verify(token)
        except InvalidTokenError as exc:
            logger.info("Rejected token: %s", exc)
            raise UnauthorizedError() from exc
