"""SQLite-backed store built on the SQLModel tables."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import StoreUnavailable
from ..models import (
    BannedTerm,
    StoreDocument,
    SubmissionAttempt,
    SubmissionRecord,
    Task,
    TaskRecord,
    User,
    UserRecord,
)
logger = logging.getLogger(__name__)


class SqlStore:
    """Maps the store document onto ``task``, ``quiz_user``, ``submission`` and
    ``banned_term`` tables. Each write is a single transaction."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def read(self) -> StoreDocument:
        try:
            with Session(self.engine) as session:
                users = session.exec(
                    select(UserRecord).order_by(UserRecord.registered_at, UserRecord.id)
                ).all()
                tasks = session.exec(select(TaskRecord).order_by(TaskRecord.id)).all()
                answers = session.exec(
                    select(SubmissionRecord).order_by(SubmissionRecord.id)
                ).all()
                banned = session.exec(select(BannedTerm).order_by(BannedTerm.id)).all()

                document = StoreDocument(
                    users={record.id: User.model_validate(record) for record in users},
                    tasks={record.id: Task.model_validate(record) for record in tasks},
                    answers=[SubmissionAttempt.model_validate(record) for record in answers],
                    banned=[record.term for record in banned],
                )
        except SQLAlchemyError as exc:
            logger.warning("Store database unreadable, starting empty: %s", exc)
            return StoreDocument(degraded=True)
        return document

    def write(self, document: StoreDocument) -> None:
        try:
            with Session(self.engine) as session:
                for user in document.users.values():
                    session.merge(UserRecord.model_validate(user))

                stored_tasks = set(session.exec(select(TaskRecord.id)).all())
                for task in document.tasks.values():
                    session.merge(TaskRecord.model_validate(task))
                for task_id in stored_tasks - set(document.tasks):
                    session.delete(session.get(TaskRecord, task_id))

                for attempt in document.answers:
                    if attempt.id is None:
                        session.add(SubmissionRecord.model_validate(attempt))

                wanted_terms = list(dict.fromkeys(document.banned))
                stored_terms = {
                    record.term: record for record in session.exec(select(BannedTerm)).all()
                }
                for term, record in stored_terms.items():
                    if term not in wanted_terms:
                        session.delete(record)
                for term in wanted_terms:
                    if term not in stored_terms:
                        session.add(BannedTerm(term=term))

                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Failed to write store database", exc_info=True)
            raise StoreUnavailable() from exc


__all__ = ["SqlStore"]
