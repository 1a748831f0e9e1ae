"""Read/write contract for the persisted store."""

from __future__ import annotations

from typing import Protocol

from ..models import StoreDocument


class Store(Protocol):
    """Whole-document persistence.

    ``read`` never fails: a missing store yields an empty document, an
    unreadable one an empty document flagged ``degraded``. ``write`` raises :class:`~quizboard.core.errors.StoreUnavailable`
    when the document could not be durably saved.
    """

    def read(self) -> StoreDocument: ...

    def write(self, document: StoreDocument) -> None: ...


def empty_document() -> StoreDocument:
    return StoreDocument()


__all__ = ["Store", "empty_document"]
