"""
User repository for data access operations on User entities.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository):
    """Data access helpers for User entities."""

    async def find_many(self) -> list[User]:
        """
        Fetch every user.

        No filtering, ordering or pagination is applied; rows come back in
        whatever order the database returns them.
        """
        result = await self._session.scalars(select(User))
        return list(result)

    async def find_unique(self, user_id: int) -> User | None:
        """Fetch a user by primary key, or None."""
        return await self._session.get(User, user_id)

    async def find_by_email(self, email: str) -> User | None:
        """Fetch a user by the unique email column, or None."""
        return await self._session.scalar(select(User).where(User.email == email))

    async def create(self, email: str, name: str | None = None) -> User:
        """
        Insert a new user and flush so the generated id is available.

        A duplicate email surfaces as the driver's IntegrityError.
        """
        user = User(email=email, name=name)
        self._session.add(user)
        await self._session.flush()
        return user

    async def update(self, user_id: int, **fields: Any) -> User:
        user = await self._get_or_raise(User, user_id)
        self._apply_fields(user, fields)
        await self._session.flush()
        return user

    async def delete(self, user_id: int) -> User:
        user = await self._get_or_raise(User, user_id)
        await self._session.delete(user)
        await self._session.flush()
        return user


__all__ = ["UserRepository"]
