"""Answer submission and scoring.

The ledger owns every read-modify-write of the store. One lock serializes
those spans so two concurrent correct submissions for the same task can
never both see "no prior correct attempt" and award points twice.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from ..core.config import RATING_DEFAULT_LIMIT
from ..core.errors import StoreUnavailable, TaskNotFound
from ..models import StoreDocument, SubmissionAttempt, User
from ..storage.base import Store
from .leaderboard import LeaderboardRow, top_n
from .moderation import NameModerator
from .normalizer import answers_match

logger = logging.getLogger(__name__)

INCORRECT_MESSAGE = "❌ Неправильно"


def correct_message(points: int) -> str:
    return f"✅ Правильно! +{points} бал."


@dataclass(frozen=True)
class TaskInfo:
    exists: bool
    points: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"exists": self.exists}
        if self.exists:
            payload["points"] = self.points
        return payload


@dataclass(frozen=True)
class SubmissionResult:
    correct: bool
    message: str
    user_id: str
    score: int
    awarded: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correct": self.correct,
            "message": self.message,
            "userId": self.user_id,
            "score": self.score,
        }


def has_correct_attempt(document: StoreDocument, user_key: str, task_key: str) -> bool:
    return any(
        attempt.correct and attempt.user_id == user_key and attempt.task == task_key
        for attempt in document.answers
    )


class ScoringLedger:
    """Submission handling and read-only views over a :class:`Store`."""

    def __init__(self, store: Store) -> None:
        self.store = store
        self._lock = threading.Lock()

    @contextmanager
    def transaction(self) -> Iterator[StoreDocument]:
        """Yield the current document and write it back if the block succeeds.

        The lock is held across read and write. An exception inside the
        block leaves the store untouched. A degraded read raises
        ``StoreUnavailable`` so the fallback never overwrites existing data.
        """

        with self._lock:
            document = self.store.read()
            if document.degraded:
                raise StoreUnavailable()
            yield document
            self.store.write(document)

    def task_info(self, task_key: str) -> TaskInfo:
        task = self.store.read().tasks.get(task_key)
        if task is None:
            return TaskInfo(exists=False)
        return TaskInfo(exists=True, points=task.points)

    def submit(
        self,
        user_key: str,
        task_key: str,
        raw_answer: str,
        wants_visibility: bool = False,
        candidate_name: Optional[str] = None,
    ) -> SubmissionResult:
        with self.transaction() as document:
            task = document.tasks.get(task_key)
            if task is None:
                raise TaskNotFound()

            display_name = None
            if wants_visibility:
                display_name = NameModerator(document.banned).validate(candidate_name)

            user = document.users.get(user_key)
            if user is None:
                user = User(id=user_key)
                document.users[user_key] = user
                logger.info("Registered user %s", user_key)
            if display_name is not None:
                user.name = display_name
                user.show_in_rating = True

            correct = answers_match(raw_answer, task.answer)
            already_correct = has_correct_attempt(document, user_key, task_key)
            document.answers.append(
                SubmissionAttempt(
                    user_id=user_key, task=task_key, answer=raw_answer, correct=correct
                )
            )

            awarded = 0
            if correct and not already_correct:
                awarded = task.points
                user.score += awarded
                logger.info(
                    "Awarded %d point(s) to %s for task %s", awarded, user_key, task_key
                )

        return SubmissionResult(
            correct=correct,
            message=correct_message(task.points) if correct else INCORRECT_MESSAGE,
            user_id=user_key,
            score=user.score,
            awarded=awarded,
        )

    def rating(self, limit: int = RATING_DEFAULT_LIMIT) -> List[LeaderboardRow]:
        return top_n(self.store.read().users.values(), limit)

    def attempts_for(self, user_key: str) -> List[SubmissionAttempt]:
        return [
            attempt for attempt in self.store.read().answers if attempt.user_id == user_key
        ]


__all__ = [
    "INCORRECT_MESSAGE",
    "ScoringLedger",
    "SubmissionResult",
    "TaskInfo",
    "correct_message",
    "has_correct_attempt",
]
