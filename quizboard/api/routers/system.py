"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ...core import RATING_DEFAULT_LIMIT, WEBAPP_URL

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> JSONResponse:
    """Kubernetes-style readiness endpoint."""

    return JSONResponse({"ok": True})


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose front-end configuration values."""

    return {
        "webapp_url": WEBAPP_URL,
        "rating_default_limit": RATING_DEFAULT_LIMIT,
    }


__all__ = ["router"]
