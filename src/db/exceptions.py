"""
Exceptions raised by the repository layer.

Errors coming from SQLAlchemy or the database driver are never wrapped; only
conditions detected by the repositories themselves live here.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """Base exception for repository-level failures."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class RecordNotFoundError(RepositoryError):
    """Raised when an update or delete targets a row that does not exist."""


__all__ = ["RecordNotFoundError", "RepositoryError"]
