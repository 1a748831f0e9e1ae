"""The persisted store document shared by every store backend."""

from __future__ import annotations

from typing import Dict, List

from sqlmodel import Field as ORMField, SQLModel

from .submission import SubmissionAttempt
from .task import Task
from .user import User


class StoreDocument(SQLModel):
    """Snapshot of users, tasks, answer history and extra banned terms.

    ``users`` keeps insertion (registration) order, which the leaderboard
    relies on for ties. ``degraded`` marks the empty fallback a backend
    returns when existing data could not be read; it is never persisted and
    such a document must not be written back.
    """

    users: Dict[str, User] = ORMField(default_factory=dict)
    tasks: Dict[str, Task] = ORMField(default_factory=dict)
    answers: List[SubmissionAttempt] = ORMField(default_factory=list)
    banned: List[str] = ORMField(default_factory=list)
    degraded: bool = False


__all__ = ["StoreDocument"]
