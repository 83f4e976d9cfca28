"""Mini README: Tests for the session that composes store, filter and bridge.

Ensures each mutation is written through, persistence failures keep the
in-memory change, and filter selection only affects the visible list.
"""

from __future__ import annotations

import json
from datetime import date

import pytest

from ledgerlite.configuration import LedgerSettings
from ledgerlite.errors import InvalidAmount, InvalidFilter, PersistFailure
from ledgerlite.ledger import TransactionFilter
from ledgerlite.persistence import MemoryBlobStore, PersistenceBridge
from ledgerlite.session import LedgerSession, open_session


def _saved_descriptions(blob_store: MemoryBlobStore):
    return [entry["description"] for entry in json.loads(blob_store.get("transactions"))]


def test_add_and_delete_write_through(session: LedgerSession, blob_store: MemoryBlobStore) -> None:
    coffee = session.add_transaction("Coffee", 4.5, "food", "expense")
    session.add_transaction("Paycheck", 1000, "salary", "income")
    assert _saved_descriptions(blob_store) == ["Coffee", "Paycheck"]

    assert session.delete_transaction(coffee.id) is True
    assert _saved_descriptions(blob_store) == ["Paycheck"]


def test_rejected_add_does_not_persist(session: LedgerSession, blob_store: MemoryBlobStore) -> None:
    with pytest.raises(InvalidAmount):
        session.add_transaction("Rent", -5, "utilities", "expense")
    assert blob_store.get("transactions") is None
    assert len(session.store) == 0


def test_persist_failure_keeps_transaction(session: LedgerSession, blob_store: MemoryBlobStore) -> None:
    """The UI keeps showing the entry even though saving failed."""

    blob_store.fail_writes = True
    with pytest.raises(PersistFailure) as excinfo:
        session.add_transaction("Coffee", 4.5, "food", "expense")

    assert excinfo.value.transaction is not None
    assert list(session.visible_transactions()) == [excinfo.value.transaction]


def test_filter_selection_changes_visible_list_only(session: LedgerSession) -> None:
    session.add_transaction("Coffee", 4.5, "food", "expense")
    paycheck = session.add_transaction("Paycheck", 1000, "salary", "income")

    assert session.current_filter is TransactionFilter.ALL
    session.select_filter("Income")

    assert list(session.visible_transactions()) == [paycheck]
    assert session.summary().expense == pytest.approx(4.5)


def test_invalid_filter_keeps_previous_selection(session: LedgerSession) -> None:
    session.select_filter("expense")
    with pytest.raises(InvalidFilter):
        session.select_filter("weekly")
    assert session.current_filter is TransactionFilter.EXPENSE


def test_open_reports_corrupt_snapshot() -> None:
    session = LedgerSession.open(PersistenceBridge(MemoryBlobStore({"transactions": "oops"})))

    assert session.load_report is not None and not session.load_report.ok
    assert len(session.store) == 0


def test_open_session_reads_file_snapshot(tmp_path) -> None:
    settings = LedgerSettings(data_directory=tmp_path, storage_key="household")
    first = open_session(settings)
    first.add_transaction("Groceries", 82.1, "food", "expense")

    reopened = open_session(settings)

    assert [transaction.description for transaction in reopened.store.all()] == ["Groceries"]
    assert (tmp_path / "household.json").exists()


def test_open_keeps_supplied_store(store, blob_store: MemoryBlobStore) -> None:
    """An empty store handed to ``open`` is used as-is, clock and date included."""

    session = LedgerSession.open(PersistenceBridge(blob_store), store=store)
    transaction = session.add_transaction("Coffee", 4.5, "food", "expense")

    assert session.store is store
    assert transaction.id == 1_700_000_000_000
    assert transaction.date == "05/01/2024"


def test_open_session_applies_date_format(tmp_path) -> None:
    settings = LedgerSettings(data_directory=tmp_path, date_format="%Y-%m-%d")
    session = open_session(settings)

    transaction = session.add_transaction("Groceries", 20, "food", "expense")

    assert transaction.date == date.today().strftime("%Y-%m-%d")
