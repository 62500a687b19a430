"""Mini README: Tests for the FastAPI interface.

Each test builds its own application around a fresh ledger so requests never
share state.
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from financemap.configuration import FinancemapSettings
from financemap.interface import create_application
from financemap.ledger import Ledger


@pytest.fixture()
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture()
def client(ledger: Ledger) -> TestClient:
    settings = FinancemapSettings(default_period="Monthly", seed_demo_data=False)
    return TestClient(create_application(ledger=ledger, settings=settings))


def test_main_menu_lists_sections(client: TestClient) -> None:
    """The root route describes the reachable sections."""

    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["transaction_count"] == 0


def test_periods_endpoint(client: TestClient) -> None:
    """The recognised periods and the default are listed."""

    assert client.get("/periods").json() == {
        "periods": ["Daily", "Weekly", "Monthly", "Yearly"],
        "default": "Monthly",
    }


def test_manual_entry_round_trip(client: TestClient, ledger: Ledger) -> None:
    """Form submissions are stored and returned by the listing."""

    response = client.post(
        "/transactions",
        data={"date": "2024-03-15", "amount": "40", "type": "Debit", "description": "Groceries"},
    )

    assert response.status_code == 201
    assert response.json()["message"] == "Transaction added successfully!"
    assert ledger.list_transactions()[0].amount == pytest.approx(-40.0)

    listed = client.get("/transactions", params={"start": "2024-03-01", "end": "2024-03-31"}).json()
    assert listed["transactions"][0]["description"] == "Groceries"


def test_manual_entry_rejects_bad_amount(client: TestClient, ledger: Ledger) -> None:
    """Malformed amounts produce a 400 with the entry hint."""

    response = client.post("/transactions", data={"date": "2024-03-15", "amount": "lots"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid amount. Please enter a valid number."
    assert len(ledger) == 0


def test_inverted_transaction_range_is_a_client_error(client: TestClient) -> None:
    """An inverted listing range is a 400."""

    response = client.get("/transactions", params={"start": "2024-03-31", "end": "2024-03-01"})

    assert response.status_code == 400


def test_report_endpoints(client: TestClient, ledger: Ledger) -> None:
    """JSON and text reports agree on the monthly totals."""

    ledger.add_transaction(date(2024, 3, 1), 100.0, "Credit", "Salary")
    ledger.add_transaction(date(2024, 3, 15), -40.0, "Debit", "Groceries")
    ledger.add_transaction(date(2024, 4, 1), 50.0, "Credit", "Gift")

    payload = client.get("/report", params={"period": "Monthly", "reference_date": "2024-03-10"}).json()
    summary = client.get("/report/summary", params={"reference_date": "2024-03-10"})

    assert payload["net_balance"] == pytest.approx(60.0)
    assert payload["count"] == 2
    assert summary.status_code == 200
    assert "Total Debits: $-40.00" in summary.text


def test_report_rejects_unknown_period(client: TestClient) -> None:
    """Unknown periods produce a 400."""

    response = client.get("/report", params={"period": "monthly"})

    assert response.status_code == 400
    assert "Unsupported reporting period" in response.json()["detail"]


def test_pdf_import_requires_file(client: TestClient) -> None:
    """Posting without a file is a 400."""

    assert client.post("/import/pdf").status_code == 400


def test_pdf_import_is_not_implemented(client: TestClient) -> None:
    """Uploading a statement reports 501 naming the file."""

    response = client.post(
        "/import/pdf",
        files={"statement": ("statement.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 501
    assert "statement.pdf" in response.json()["detail"]


def test_record_import(client: TestClient, ledger: Ledger) -> None:
    """JSON records are bulk appended."""

    response = client.post(
        "/import/records",
        json=[
            {"date": "2024-03-01", "amount": 10, "description": "Cashback"},
            {"date": "2024-03-02", "amount": -3, "type": "Debit"},
        ],
    )

    assert response.status_code == 201
    assert response.json() == {"imported": 2}
    assert len(ledger) == 2


def test_demo_data_is_seeded_when_configured() -> None:
    """The seed setting fills the application's ledger."""

    settings = FinancemapSettings(seed_demo_data=True)
    app = create_application(settings=settings)

    assert len(app.state.ledger) > 0


def test_record_import_rejects_oversized_amount(client: TestClient, ledger: Ledger) -> None:
    """An amount beyond float range is a 400, not a server error."""

    response = client.post("/import/records", json=[{"date": "2024-03-01", "amount": 10**400}])

    assert response.status_code == 400
    assert len(ledger) == 0
