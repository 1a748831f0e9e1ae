"""Ranked projection of users who opted into the public rating."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List

from ..core.config import RATING_DEFAULT_LIMIT
from ..models import User


@dataclass(frozen=True)
class LeaderboardRow:
    rank: int
    name: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_limit(raw: Any, default: int = RATING_DEFAULT_LIMIT) -> int:
    """Coerce a ``limit`` query value; anything but a positive integer gives ``default``."""

    if raw is None or isinstance(raw, bool):
        return default
    try:
        limit = int(str(raw).strip())
    except ValueError:
        return default
    return limit if limit > 0 else default


def is_listed(user: User) -> bool:
    return bool(user.show_in_rating and user.name)


def top_n(users: Iterable[User], limit: int = RATING_DEFAULT_LIMIT) -> List[LeaderboardRow]:
    """Rank listed users by score, highest first.

    Equal scores keep the earliest registered user first; users registered
    at the same instant keep the order they were given in. Ranks are
    positional, so ties still get consecutive numbers.
    """

    listed = [user for user in users if is_listed(user)]
    ordered = sorted(listed, key=lambda user: (-user.score, user.registered_at))
    return [
        LeaderboardRow(rank=index, name=user.name, score=user.score)
        for index, user in enumerate(ordered[:limit], start=1)
    ]


__all__ = ["LeaderboardRow", "is_listed", "parse_limit", "top_n"]
