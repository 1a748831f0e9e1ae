"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


_PROJECT_ROOT = Path(__file__).resolve().parents[2]


# HTTP server ----------------------------------------------------------------
HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3000)

# The mini-app is opened from Telegram clients, so any origin is allowed
# unless the deploy narrows it down.
ALLOWED_CORS_ORIGINS = _unique(_split_csv(os.getenv("ALLOWED_CORS_ORIGINS"))) or ["*"]

WEBAPP_DIR = Path(os.getenv("WEBAPP_DIR", str(_PROJECT_ROOT / "webapp")))


# Telegram bot ---------------------------------------------------------------
BOT_TOKEN = os.getenv("BOT_TOKEN", "")
CHANNEL_ID = os.getenv("CHANNEL_ID", "")
WEBAPP_URL = os.getenv("WEBAPP_URL", "")
TELEGRAM_WEBHOOK_SECRET = os.getenv("TELEGRAM_WEBHOOK_SECRET", "")


# Persistence ----------------------------------------------------------------
STORE_BACKEND = os.getenv("STORE_BACKEND", "json").strip().lower()
STORE_PATH = Path(os.getenv("STORE_PATH", str(_PROJECT_ROOT / "db.json")))
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))


# Admin and runtime behaviour ------------------------------------------------
ADMIN_USER = os.getenv("ADMIN_USER", "admin")
ADMIN_PASS = os.getenv("ADMIN_PASS", "changeme")

RATING_DEFAULT_LIMIT = _env_int("RATING_DEFAULT_LIMIT", 10)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
RELOAD = _env_bool("RELOAD", False)


__all__ = [
    "ADMIN_PASS",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "BOT_TOKEN",
    "CHANNEL_ID",
    "DATA_DIR",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "RATING_DEFAULT_LIMIT",
    "RELOAD",
    "STORE_BACKEND",
    "STORE_PATH",
    "TELEGRAM_WEBHOOK_SECRET",
    "WEBAPP_DIR",
    "WEBAPP_URL",
]
