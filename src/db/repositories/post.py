"""
Post repository for data access operations on Post entities.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select

from ..models import Post
from .base import BaseRepository


class PostRepository(BaseRepository):
    """Data access helpers for Post entities."""

    async def find_many(self, author_id: int | None = None) -> list[Post]:
        """Fetch all posts, optionally only those written by one author."""
        stmt: Select[tuple[Post]] = select(Post)
        if author_id is not None:
            stmt = stmt.where(Post.author_id == author_id)
        result = await self._session.scalars(stmt)
        return list(result)

    async def find_unique(self, post_id: int) -> Post | None:
        return await self._session.get(Post, post_id)

    async def create(
        self,
        title: str,
        author_id: int,
        *,
        content: str | None = None,
        published: bool = False,
    ) -> Post:
        """
        Insert a new post for an existing author.

        The author reference is checked by the database's foreign key, not here.
        """
        post = Post(title=title, author_id=author_id, content=content, published=published)
        self._session.add(post)
        await self._session.flush()
        return post

    async def update(self, post_id: int, **fields: Any) -> Post:
        post = await self._get_or_raise(Post, post_id)
        self._apply_fields(post, fields)
        await self._session.flush()
        return post

    async def delete(self, post_id: int) -> Post:
        post = await self._get_or_raise(Post, post_id)
        await self._session.delete(post)
        await self._session.flush()
        return post


__all__ = ["PostRepository"]
