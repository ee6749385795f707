"""
Base repository class with shared utilities.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import RecordNotFoundError


class BaseRepository:
    """
    Base class for all repositories.

    Holds the session and the helpers shared by the per-entity repositories.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Expose the underlying session for transaction management."""
        return self._session

    async def _get_or_raise(self, model: type[Any], record_id: int) -> Any:
        """Load a row by primary key or raise RecordNotFoundError."""
        record = await self._session.get(model, record_id)
        if record is None:
            raise RecordNotFoundError(
                f"{model.__name__} {record_id} does not exist",
                context={"model": model.__name__, "id": record_id},
            )
        return record

    @staticmethod
    def _apply_fields(record: Any, fields: dict[str, Any]) -> None:
        for field_name, value in fields.items():
            if not hasattr(type(record), field_name):
                raise AttributeError(f"{type(record).__name__} has no field {field_name!r}")
            setattr(record, field_name, value)


__all__ = ["BaseRepository"]
