"""Mini README: Tests for the FastAPI JSON interface.

Each test builds its own engine and hands it to the application factory so
state never leaks between tests.
"""

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from spendwise.finance import CAUTION_MESSAGES, UNAFFORDABLE_SUGGESTIONS, LedgerEngine, SpendingAdvisor
from spendwise.interface import create_application


@pytest.fixture()
def engine() -> LedgerEngine:
    return LedgerEngine.with_demo_data(advisor=SpendingAdvisor(rng=random.Random(0)))


@pytest.fixture()
def client(engine: LedgerEngine) -> TestClient:
    return TestClient(create_application(engine))


def _expense(amount: float, category: str = "Food") -> dict:
    return {
        "amount": amount,
        "category": category,
        "description": "Dinner",
        "occurred_on": "2024-02-10T19:00:00",
        "transaction_type": "expense",
    }


def test_dashboard_returns_snapshot(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["available_balance"] == pytest.approx(1700.0)
    assert body["round_up_savings"] == pytest.approx(450.0)
    assert len(body["transactions"]) == 3
    assert "currency_symbol" in body


def test_add_transaction_updates_budget(client: TestClient, engine: LedgerEngine) -> None:
    response = client.post("/transactions", json=_expense(2500.0))

    assert response.status_code == 201
    assert response.json()["transaction_id"] == "txn_0004"
    budgets = {b["category"]: b for b in client.get("/budgets").json()["budgets"]}
    assert budgets["Food"]["spent"] == pytest.approx(5000.0)
    assert engine.list_transactions()[0].transaction_id == "txn_0004"


def test_edit_and_delete_round_trip(client: TestClient) -> None:
    edited = client.put("/transactions/txn_0001", json=_expense(1000.0, "Shopping"))
    assert edited.status_code == 200
    assert edited.json()["category"] == "Shopping"

    budgets = {b["category"]: b for b in client.get("/budgets").json()["budgets"]}
    assert budgets["Food"]["spent"] == pytest.approx(0.0)
    assert budgets["Shopping"]["spent"] == pytest.approx(4500.0)
    assert budgets["Shopping"]["over_budget"] is True

    deleted = client.delete("/transactions/txn_0001")
    assert deleted.status_code == 200
    assert client.get("/transactions/txn_0001").status_code == 404


def test_unknown_ids_return_404(client: TestClient) -> None:
    assert client.put("/transactions/txn_9999", json=_expense(1.0)).status_code == 404
    assert client.delete("/transactions/txn_9999").status_code == 404
    assert client.put("/budgets/Travel", json={"limit": 10}).status_code == 404
    assert client.post("/savings/goal_9999/contributions", json={"amount": 5}).status_code == 404


def test_invalid_transaction_type_is_rejected(client: TestClient) -> None:
    payload = _expense(10.0)
    payload["transaction_type"] = "refund"

    assert client.post("/transactions", json=payload).status_code == 422


def test_update_budget_limit(client: TestClient) -> None:
    response = client.put("/budgets/Entertainment", json={"limit": 3500})

    assert response.status_code == 200
    assert response.json()["limit"] == pytest.approx(3500.0)
    assert response.json()["spent"] == pytest.approx(1200.0)


def test_savings_goals(client: TestClient) -> None:
    created = client.post(
        "/savings",
        json={"name": "Laptop", "target": 80000, "deadline": "2025-01-31"},
    )
    assert created.status_code == 201
    goal_id = created.json()["goal_id"]

    contributed = client.post(f"/savings/{goal_id}/contributions", json={"amount": 20000})
    assert contributed.json()["progress"] == pytest.approx(0.25)

    savings = client.get("/savings").json()
    assert [goal["name"] for goal in savings["goals"]][-1] == "Laptop"
    assert savings["round_up_savings"] == pytest.approx(450.0)


def test_expenses_by_category(client: TestClient) -> None:
    expenses = client.get("/expenses-by-category").json()["expenses"]

    assert expenses == {"Food": 2500.0, "Transportation": 800.0}


def test_advice_routes(client: TestClient) -> None:
    affordable = client.get("/advice/affordability", params={"amount": 100}).json()
    assert affordable["can_afford"] is True

    too_much = client.get("/advice/affordability", params={"amount": 100000}).json()
    assert too_much["can_afford"] is False
    assert too_much["suggestion"] in UNAFFORDABLE_SUGGESTIONS

    risk = client.get("/advice/regret-risk", params={"amount": 2600, "category": "Food"}).json()
    assert risk["risk"] == 1.0
    assert risk["message"] in CAUTION_MESSAGES


def test_voice_parse_does_not_record(client: TestClient, engine: LedgerEngine) -> None:
    response = client.post("/voice/parse", json={"transcript": "Spent ₹250 on lunch"})

    assert response.status_code == 200
    assert response.json()["category"] == "Food"
    assert response.json()["amount"] == pytest.approx(250.0)
    assert len(engine.list_transactions()) == 3

    assert client.post("/voice/parse", json={"transcript": " "}).status_code == 400


def test_overflowing_amount_is_rejected_and_dashboard_survives(
    client: TestClient, engine: LedgerEngine
) -> None:
    """A JSON number too large for a float parses as infinity and must be refused."""

    body = (
        '{"amount": 1e999, "category": "Food", "description": "Dinner",'
        ' "occurred_on": "2024-02-10T19:00:00", "transaction_type": "expense"}'
    )
    response = client.post(
        "/transactions", content=body, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422
    assert len(engine.list_transactions()) == 3
    assert engine.get_budget("Food").spent == pytest.approx(2500.0)
    assert client.get("/").status_code == 200


def test_non_finite_advice_queries_are_rejected(client: TestClient) -> None:
    assert client.get("/advice/affordability", params={"amount": "inf"}).status_code == 422
    assert (
        client.get("/advice/regret-risk", params={"amount": "nan", "category": "Food"}).status_code
        == 422
    )


def test_dashboard_projections_include_progress_fields(client: TestClient) -> None:
    body = client.get("/").json()

    budgets = {budget["category"]: budget for budget in body["budgets"]}
    assert budgets["Shopping"]["percent_used"] == pytest.approx(87.5)
    assert all(isinstance(goal["days_left"], int) for goal in body["savings_goals"])
