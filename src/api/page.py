"""
Server-rendered home page: every user, as raw JSON, inside a button.
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter

from ..db.client import DatabaseClient
from ..db.repositories.user import UserRepository
from .schemas import UserRead

CONTAINER_CLASSES = "min-h-screen min-w-screen flex items-center justify-center"
PAGE_TITLE = "Users"

_USERS_ADAPTER = TypeAdapter(list[UserRead])


def serialize_users(users: Iterable[Any]) -> str:
    """
    Serialize users to compact JSON, preserving their order.

    Accepts ORM rows or plain mappings. Non-ASCII text is emitted as-is and
    nothing is truncated.
    """
    records = _USERS_ADAPTER.validate_python(list(users), from_attributes=True)
    return _USERS_ADAPTER.dump_json(records).decode("utf-8")


def render_users_fragment(users_json: str) -> str:
    """Wrap the JSON text in the centred container and button markup."""
    return (
        f'<div class="{CONTAINER_CLASSES}">'
        f'<button type="button">{html.escape(users_json, quote=False)}</button>'
        "</div>"
    )


def render_document(fragment: str, title: str = PAGE_TITLE) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        f'<head><meta charset="utf-8"><title>{html.escape(title)}</title></head>'
        f"<body>{fragment}</body>"
        "</html>"
    )


async def render_users_page(client: DatabaseClient) -> str:
    """
    Fetch all users with one query and render them as a page fragment.

    Whatever the query raises propagates unchanged.
    """
    async with client.session() as session:
        users = await UserRepository(session).find_many()
    return render_users_fragment(serialize_users(users))


__all__ = [
    "CONTAINER_CLASSES",
    "render_document",
    "render_users_fragment",
    "render_users_page",
    "serialize_users",
]
