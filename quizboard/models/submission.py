"""Models for recorded answer submissions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import as_utc, utcnow


class SubmissionBase(SQLModel):
    user_id: str = ORMField(index=True)
    task: str = ORMField(index=True)
    answer: str
    correct: bool
    ts: datetime = ORMField(default_factory=utcnow)

    @field_validator("ts")
    @classmethod
    def _ts_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class SubmissionAttempt(SubmissionBase):
    """One submit call, correct or not. ``id`` is only known once stored in SQL."""

    id: Optional[int] = None


class SubmissionRecord(SubmissionBase, table=True):
    __tablename__ = "submission"

    id: Optional[int] = ORMField(default=None, primary_key=True)


__all__ = ["SubmissionAttempt", "SubmissionBase", "SubmissionRecord"]
