"""Database configuration helpers for the SQLite store backend."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from .config import DATA_DIR


def sqlite_url(path: Optional[Path] = None) -> str:
    """Return the SQLite URL for ``path`` (``data/app.db`` by default)."""

    if path is None:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        path = DATA_DIR / "app.db"
    return f"sqlite:///{path}"


def create_db_engine(url: Optional[str] = None) -> Engine:
    """Create an engine and make sure every table exists."""

    from .. import models  # noqa: F401 - ensure models are registered with SQLModel

    engine = create_engine(
        url or sqlite_url(), connect_args={"check_same_thread": False}
    )
    SQLModel.metadata.create_all(engine)
    return engine


__all__ = ["create_db_engine", "sqlite_url"]
