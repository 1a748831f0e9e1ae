"""Task and moderation administration, behind HTTP Basic auth."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...models import Task
from ...services.scoring import ScoringLedger
from ..deps import get_ledger, require_admin

router = APIRouter(
    prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/tasks")
def list_tasks(ledger: ScoringLedger = Depends(get_ledger)):
    document = ledger.store.read()
    return {"ok": True, "tasks": [task.model_dump() for task in document.tasks.values()]}


@router.put("/tasks/{task_id}")
def upsert_task(
    task_id: str, body: Dict[str, Any], ledger: ScoringLedger = Depends(get_ledger)
):
    """Create or replace a task."""

    answer = body.get("answer")
    answer = answer.strip() if isinstance(answer, str) else ""
    if not answer:
        raise HTTPException(400, "Answer is required")
    try:
        points = int(body.get("points", 1))
    except (TypeError, ValueError) as exc:
        raise HTTPException(400, "Points must be an integer") from exc
    if points < 0:
        raise HTTPException(400, "Points must not be negative")

    task = Task(id=task_id, answer=answer, points=points)
    with ledger.transaction() as document:
        document.tasks[task_id] = task
    return {"ok": True, "task": task.model_dump()}


@router.delete("/tasks/{task_id}")
def delete_task(task_id: str, ledger: ScoringLedger = Depends(get_ledger)):
    with ledger.transaction() as document:
        if document.tasks.pop(task_id, None) is None:
            raise HTTPException(404, "Task not found")
    return {"ok": True, "deleted_task": task_id}


@router.get("/banned")
def list_banned(ledger: ScoringLedger = Depends(get_ledger)):
    return {"ok": True, "banned": ledger.store.read().banned}


@router.post("/banned")
def add_banned(body: Dict[str, Any], ledger: ScoringLedger = Depends(get_ledger)):
    """Add an extra profanity term checked against display names."""

    term = body.get("term")
    term = term.strip().lower() if isinstance(term, str) else ""
    if not term:
        raise HTTPException(400, "Term is required")
    with ledger.transaction() as document:
        if term not in document.banned:
            document.banned.append(term)
        banned = list(document.banned)
    return {"ok": True, "banned": banned}


@router.delete("/banned/{term}")
def remove_banned(term: str, ledger: ScoringLedger = Depends(get_ledger)):
    term = term.strip().lower()
    with ledger.transaction() as document:
        if term not in document.banned:
            raise HTTPException(404, "Term not found")
        document.banned.remove(term)
    return {"ok": True, "deleted_term": term}


@router.get("/users/{user_key}/answers")
def user_answers(user_key: str, ledger: ScoringLedger = Depends(get_ledger)):
    """Submission history of one user, oldest first."""

    attempts = ledger.attempts_for(user_key)
    return {
        "ok": True,
        "user_id": user_key,
        "answers": [attempt.model_dump(mode="json", exclude={"id"}) for attempt in attempts],
    }


__all__ = ["router"]
