"""Database model for extra profanity terms."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class BannedTerm(SQLModel, table=True):
    __tablename__ = "banned_term"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    term: str = ORMField(index=True, unique=True)


__all__ = ["BannedTerm"]
