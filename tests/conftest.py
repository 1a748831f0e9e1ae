"""Shared fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from quizboard.app import create_app
from quizboard.models import StoreDocument, Task
from quizboard.services.scoring import ScoringLedger
from quizboard.storage import MemoryStore


def seeded_document() -> StoreDocument:
    return StoreDocument(
        tasks={
            "t1": Task(id="t1", answer="снег", points=2),
            "t2": Task(id="t2", answer="Hello, World", points=1),
        },
        banned=["редиска"],
    )


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore(seeded_document())


@pytest.fixture
def ledger(store: MemoryStore) -> ScoringLedger:
    return ScoringLedger(store)


@pytest.fixture
def client(store: MemoryStore) -> TestClient:
    return TestClient(create_app(store=store))
