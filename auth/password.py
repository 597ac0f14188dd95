"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.  The async variants push the
work onto a thread so the event loop keeps serving other requests.
"""

from __future__ import annotations

import asyncio

import bcrypt

from config.settings import config


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (fresh salt every call)."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError):
            return False

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify, password, password_hash)

    def dummy_hash(self) -> str:
        """Digest of a throwaway password, computed once per hasher."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("not-a-real-password")
        return self._dummy_hash

    async def verify_dummy_async(self, password: str) -> None:
        """Spend one verification so unknown users cost as much as known ones."""
        if self._dummy_hash is None:
            await asyncio.to_thread(self.dummy_hash)
        await self.verify_async(password, self._dummy_hash)


password_hasher = PasswordHasher(rounds=config.bcrypt_rounds)


def hash_password(password: str) -> str:
    return password_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return password_hasher.verify(password, password_hash)
