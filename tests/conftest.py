"""Mini README: Shared fixtures for the Ledgerlite test-suite.

Provides a deterministic clock for id generation and a fixed date so tests
can assert on exact identifiers and display dates.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, List

import pytest

from ledgerlite.ledger import TransactionIdGenerator, TransactionStore
from ledgerlite.persistence import MemoryBlobStore, PersistenceBridge
from ledgerlite.session import LedgerSession


class FrozenClock:
    """Clock returning queued readings, repeating the last one when exhausted."""

    def __init__(self, readings: List[int]) -> None:
        self._readings = list(readings)
        self._last = readings[-1]

    def __call__(self) -> int:
        if self._readings:
            self._last = self._readings.pop(0)
        return self._last


@pytest.fixture
def frozen_clock() -> Callable[[List[int]], FrozenClock]:
    return FrozenClock


@pytest.fixture
def store() -> TransactionStore:
    return TransactionStore(
        id_generator=TransactionIdGenerator(clock=FrozenClock([1_700_000_000_000])),
        today=lambda: date(2024, 5, 1),
    )


@pytest.fixture
def blob_store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def session(store: TransactionStore, blob_store: MemoryBlobStore) -> LedgerSession:
    return LedgerSession.open(PersistenceBridge(blob_store), store=store)
