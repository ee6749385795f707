"""
Database toolkit exposing ORM models, the client accessor, and repositories.
"""

from .client import ClientContext, DatabaseClient, get_client, shared_context
from .exceptions import RecordNotFoundError, RepositoryError
from .models import Base, Post, User
from .repositories import BaseRepository, PostRepository, UserRepository

__all__ = [
    "Base",
    "BaseRepository",
    "ClientContext",
    "DatabaseClient",
    "Post",
    "PostRepository",
    "RecordNotFoundError",
    "RepositoryError",
    "User",
    "UserRepository",
    "get_client",
    "shared_context",
]
