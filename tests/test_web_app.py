"""Mini README: Tests for the FastAPI JSON interface.

Each test builds an application around an in-memory session so no files are
touched, then drives it through FastAPI's test client.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ledgerlite.configuration import LedgerSettings
from ledgerlite.interface import create_application
from ledgerlite.persistence import MemoryBlobStore
from ledgerlite.session import LedgerSession


@pytest.fixture
def client(session: LedgerSession, tmp_path) -> TestClient:
    settings = LedgerSettings(data_directory=tmp_path)
    return TestClient(create_application(session=session, settings=settings))


def test_add_list_and_summary(client: TestClient) -> None:
    response = client.post(
        "/transactions",
        json={"description": "Coffee", "amount": 4.5, "category": "food", "type": "expense"},
    )
    assert response.status_code == 201
    assert response.json()["display_amount"] == "-$4.50"
    client.post(
        "/transactions",
        json={"description": "Paycheck", "amount": "1000", "category": "salary", "type": "income"},
    )

    listing = client.get("/transactions", params={"filter": "expense"}).json()
    assert [entry["description"] for entry in listing["transactions"]] == ["Coffee"]
    assert listing["summary"]["balance"] == pytest.approx(995.5)

    summary = client.get("/summary").json()
    assert summary["display"] == {"income": "$1000.00", "expense": "$4.50", "balance": "$995.50"}
    assert summary["trend"] == "positive"


def test_short_description_rejected_by_input_layer(client: TestClient) -> None:
    response = client.post("/transactions", json={"description": "ab", "amount": 3})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidDescription"


def test_negative_amount_rejected(client: TestClient) -> None:
    response = client.post("/transactions", json={"description": "Rent", "amount": -5})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidAmount"
    assert client.get("/transactions").json()["transactions"] == []


def test_delete_is_idempotent(client: TestClient) -> None:
    created = client.post("/transactions", json={"description": "Taxi", "amount": 12}).json()
    transaction_id = created["transaction"]["id"]

    assert client.delete(f"/transactions/{transaction_id}").json()["removed"] is True
    assert client.delete(f"/transactions/{transaction_id}").json()["removed"] is False


def test_filter_selection_persists_between_requests(client: TestClient) -> None:
    client.post("/transactions", json={"description": "Bonus", "amount": 50, "type": "income"})
    client.post("/transactions", json={"description": "Dinner", "amount": 30, "type": "expense"})

    selected = client.post("/filter", json={"filter": "income"}).json()
    assert [entry["description"] for entry in selected["transactions"]] == ["Bonus"]
    assert client.get("/transactions").json()["filter"] == "income"

    assert client.post("/filter", json={"filter": "monthly"}).status_code == 422


def test_persist_failure_is_reported_not_rolled_back(
    client: TestClient, blob_store: MemoryBlobStore
) -> None:
    blob_store.fail_writes = True
    response = client.post("/transactions", json={"description": "Coffee", "amount": 4.5})

    assert response.status_code == 201
    assert response.json()["persisted"] is False
    assert len(client.get("/transactions").json()["transactions"]) == 1


def test_categories_listed(client: TestClient) -> None:
    assert "salary" in client.get("/categories").json()["categories"]
