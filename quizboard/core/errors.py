"""Error taxonomy for the submission flow.

Every failure the HTTP layer can surface carries a machine-checkable
``kind``, an HTTP status and a user-facing message. The messages are the
ones the mini-app shows verbatim, so they stay in Russian.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class QuizboardError(Exception):
    """Base class for errors reported to API callers."""

    kind = "error"
    status_code = 400
    default_message = "Ошибка"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "kind": self.kind, "message": self.message}


class InvalidRequest(QuizboardError):
    """The payload lacks ``task`` or ``answer``."""

    kind = "invalid_request"
    default_message = "Нет task или answer"


class TaskNotFound(QuizboardError):
    kind = "task_not_found"
    status_code = 404
    default_message = "Задание не найдено"


class MissingName(QuizboardError):
    """Leaderboard visibility was requested without a display name."""

    kind = "missing_name"
    default_message = "Чтобы показываться в рейтинге, нужно ввести имя"


class ProfaneName(QuizboardError):
    kind = "profane_name"
    default_message = "Имя содержит запрещённые слова"


class StoreUnavailable(QuizboardError):
    """The persisted store could not be written."""

    kind = "store_unavailable"
    status_code = 503
    default_message = "Хранилище недоступно"


__all__ = [
    "InvalidRequest",
    "MissingName",
    "ProfaneName",
    "QuizboardError",
    "StoreUnavailable",
    "TaskNotFound",
]
