"""Task lookup, answer submission and rating endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from ...core import InvalidRequest
from ...services.identity import resolve_user_key
from ...services.leaderboard import parse_limit
from ...services.scoring import ScoringLedger
from ..deps import get_ledger

router = APIRouter(prefix="/api", tags=["quiz"])


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


@router.get("/task/{task_id}")
def get_task(task_id: str, ledger: ScoringLedger = Depends(get_ledger)):
    """Report whether a task exists and how many points it is worth."""

    return {"ok": True, **ledger.task_info(task_id).to_dict()}


@router.post("/submit")
def submit_answer(body: Dict[str, Any], ledger: ScoringLedger = Depends(get_ledger)):
    """Check an answer and award points on the first correct submission."""

    task = _text(body.get("task"))
    answer = body.get("answer")
    if not task or not _text(answer):
        raise InvalidRequest()

    client_id: Optional[str] = _text(body.get("userId")) or None
    user_key = resolve_user_key(body.get("initData"), client_id)

    result = ledger.submit(
        user_key,
        task,
        str(answer),
        wants_visibility=_flag(body.get("showInRating")),
        candidate_name=_text(body.get("name")) or None,
    )
    return {"ok": True, **result.to_dict()}


@router.get("/rating")
def get_rating(limit: Optional[str] = None, ledger: ScoringLedger = Depends(get_ledger)):
    """Top users who opted into the public rating."""

    rows = ledger.rating(parse_limit(limit))
    return {"ok": True, "items": [row.to_dict() for row in rows]}


__all__ = ["router"]
