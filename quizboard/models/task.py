"""Models for quiz tasks."""

from __future__ import annotations

from sqlmodel import Field as ORMField, SQLModel


class TaskBase(SQLModel):
    answer: str
    points: int = ORMField(default=1, ge=0)


class Task(TaskBase):
    """Quiz challenge with its canonical answer and point value."""

    id: str


class TaskRecord(TaskBase, table=True):
    __tablename__ = "task"

    id: str = ORMField(primary_key=True)


__all__ = ["Task", "TaskBase", "TaskRecord"]
