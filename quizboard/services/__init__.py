"""Service layer helpers."""

from .identity import classify_identity, resolve_user_key
from .leaderboard import LeaderboardRow, parse_limit, top_n
from .moderation import NameModerator, check_name, validate_display_name
from .normalizer import answers_match, normalize_answer
from .scoring import ScoringLedger, SubmissionResult, TaskInfo
from .telegram import TelegramBot

__all__ = [
    "LeaderboardRow",
    "NameModerator",
    "ScoringLedger",
    "SubmissionResult",
    "TaskInfo",
    "TelegramBot",
    "answers_match",
    "check_name",
    "classify_identity",
    "normalize_answer",
    "parse_limit",
    "resolve_user_key",
    "top_n",
    "validate_display_name",
]
