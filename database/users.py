"""
User store — persistence of ``users`` rows.

Duplicate emails are rejected by the UNIQUE constraint on ``users.email``,
not by a read-then-write check, so concurrent signups for the same address
cannot both succeed.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.exceptions import UserAlreadyExistsError
from auth.models import UserProfile
from database.models import User

logger = logging.getLogger(__name__)


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None


class UserStore:
    """Reads and writes ``User`` rows through one ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert_if_absent(self, email: str, name: str, password_hash: str) -> User:
        """
        Insert a new user and commit.

        Raises ``UserAlreadyExistsError`` when the email is taken.
        """
        user = User(
            user_id=uuid.uuid4(),
            email=email,
            name=name,
            password_hash=password_hash,
        )
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Insert rejected for existing email %s", email)
            raise UserAlreadyExistsError(email) from exc
        return user

    async def exists(self, email: str) -> bool:
        result = await self.session.execute(
            select(User.user_id).where(User.email == email)
        )
        return result.first() is not None

    async def find_by_email(self, email: str) -> User | None:
        """Exact-match lookup returning the full record, hash included."""
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str | uuid.UUID) -> UserProfile | None:
        """Profile projection — the password hash is never selected."""
        uid = _to_uuid(user_id)
        if uid is None:
            return None
        result = await self.session.execute(
            select(User.user_id, User.email, User.name).where(User.user_id == uid)
        )
        row = result.first()
        if row is None:
            return None
        return UserProfile(id=str(row.user_id), email=row.email, name=row.name)
