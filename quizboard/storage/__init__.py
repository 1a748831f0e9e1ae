"""Persisted store backends."""

from __future__ import annotations

import logging

from ..core import STORE_BACKEND, STORE_PATH, create_db_engine
from .base import Store, empty_document
from .json_file import JsonFileStore
from .memory import MemoryStore
from .sql import SqlStore

logger = logging.getLogger(__name__)


def build_store(backend: str = STORE_BACKEND) -> Store:
    """Instantiate the configured backend (``json`` or ``sqlite``)."""

    if backend == "json":
        logger.info("Using JSON file store at %s", STORE_PATH)
        return JsonFileStore(STORE_PATH)
    if backend == "sqlite":
        logger.info("Using SQLite store")
        return SqlStore(create_db_engine())
    raise RuntimeError(f"Unknown STORE_BACKEND: {backend!r}")


__all__ = [
    "JsonFileStore",
    "MemoryStore",
    "SqlStore",
    "Store",
    "build_store",
    "empty_document",
]
