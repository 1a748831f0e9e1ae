"""Models for quiz participants."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import as_utc, utcnow


class UserBase(SQLModel):
    name: Optional[str] = None
    score: int = ORMField(default=0, ge=0)
    show_in_rating: bool = False
    registered_at: datetime = ORMField(default_factory=utcnow)

    @field_validator("registered_at")
    @classmethod
    def _registered_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class User(UserBase):
    """Participant keyed by a namespaced identity (``platform:`` or ``local:``)."""

    id: str


class UserRecord(UserBase, table=True):
    __tablename__ = "quiz_user"

    id: str = ORMField(primary_key=True)


__all__ = ["User", "UserBase", "UserRecord"]
