"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .quiz import router as quiz_router
from .system import router as system_router
from .telegram import router as telegram_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    quiz_router,
    admin_router,
    telegram_router,
)

__all__ = ["ALL_ROUTERS"]
