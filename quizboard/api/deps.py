"""FastAPI dependencies."""

from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from ..core import ADMIN_PASS, ADMIN_USER
from ..services.scoring import ScoringLedger
from ..services.telegram import TelegramBot

security = HTTPBasic()


def get_ledger(request: Request) -> ScoringLedger:
    return request.app.state.ledger


def get_bot(request: Request) -> Optional[TelegramBot]:
    return request.app.state.bot


def require_admin(credentials: HTTPBasicCredentials = Depends(security)) -> bool:
    ok_user = secrets.compare_digest(credentials.username.encode(), ADMIN_USER.encode())
    ok_pass = secrets.compare_digest(credentials.password.encode(), ADMIN_PASS.encode())
    if not (ok_user and ok_pass):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return True


__all__ = ["get_bot", "get_ledger", "require_admin"]
