"""In-process store, mainly for tests."""

from __future__ import annotations

from typing import Optional

from ..models import StoreDocument
from .base import empty_document


class MemoryStore:
    """Keeps a private copy of the document so callers cannot mutate it in place."""

    def __init__(self, document: Optional[StoreDocument] = None) -> None:
        self._document = (document or empty_document()).model_copy(deep=True)
        self.writes = 0

    def read(self) -> StoreDocument:
        return self._document.model_copy(deep=True)

    def write(self, document: StoreDocument) -> None:
        self._document = document.model_copy(deep=True)
        self.writes += 1


__all__ = ["MemoryStore"]
