"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASS,
    ADMIN_USER,
    ALLOWED_CORS_ORIGINS,
    BOT_TOKEN,
    CHANNEL_ID,
    DATA_DIR,
    HOST,
    LOG_LEVEL,
    PORT,
    RATING_DEFAULT_LIMIT,
    RELOAD,
    STORE_BACKEND,
    STORE_PATH,
    TELEGRAM_WEBHOOK_SECRET,
    WEBAPP_DIR,
    WEBAPP_URL,
)
from .database import create_db_engine, sqlite_url
from .errors import (
    InvalidRequest,
    MissingName,
    ProfaneName,
    QuizboardError,
    StoreUnavailable,
    TaskNotFound,
)
from .logging import configure_logging
from .time import utcnow

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
    "InvalidRequest",
    "MissingName",
    "ProfaneName",
    "QuizboardError",
    "StoreUnavailable",
    "TaskNotFound",
    "configure_logging",
    "create_db_engine",
    "sqlite_url",
    "utcnow",
]
