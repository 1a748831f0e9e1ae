"""Model exports."""

from .banned import BannedTerm
from .document import StoreDocument
from .submission import SubmissionAttempt, SubmissionRecord
from .task import Task, TaskRecord
from .user import User, UserRecord

__all__ = [
    "BannedTerm",
    "StoreDocument",
    "SubmissionAttempt",
    "SubmissionRecord",
    "Task",
    "TaskRecord",
    "User",
    "UserRecord",
]
