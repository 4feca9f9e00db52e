from decimal import Decimal

import httpx
import pytest

from ledger.main import create_app

from .conftest import USER_ID

HEADERS = {"X-User-Id": USER_ID}


@pytest.fixture
async def client(container):
    app = create_app(container)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _create_account(client, **overrides) -> dict:
    payload = {"name": "Checking", "type": "bank", "currency": "USD", "initial_balance": "100"}
    payload.update(overrides)
    response = await client.post("/api/accounts", json=payload, headers=HEADERS)
    assert response.status_code == 201, response.text
    return response.json()


async def test_health(client) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_requests_need_a_user(client) -> None:
    response = await client.get("/api/accounts")

    assert response.status_code == 401


async def test_expense_flow(client) -> None:
    account = await _create_account(client)

    response = await client.post(
        "/api/transactions",
        json={"type": "expense", "amount": "40", "account_id": account["id"], "currency": "USD", "date": "2026-01-05"},
        headers=HEADERS,
    )

    assert response.status_code == 201, response.text
    body = response.json()
    assert Decimal(body["amount"]) == Decimal("40")
    assert (body["year"], body["month"], body["day"], body["year_month"]) == (2026, 1, 5, "2026-01")
    assert Decimal(body["reference_amount"]) == Decimal("40")
    assert body["reference_currency"] == "USD"

    account = (await client.get(f"/api/accounts/{account['id']}", headers=HEADERS)).json()
    assert Decimal(account["current_balance"]) == Decimal("60")

    listing = (await client.get("/api/transactions", headers=HEADERS)).json()
    assert listing["total"] == 1
    assert listing["transactions"][0]["id"] == body["id"]


async def test_reference_amount_uses_configured_rate(client) -> None:
    account = await _create_account(client, currency="UYU", initial_balance="10000")

    response = await client.post(
        "/api/transactions",
        json={"type": "expense", "amount": "4000", "account_id": account["id"], "date": "2026-01-05"},
        headers=HEADERS,
    )

    assert Decimal(response.json()["reference_amount"]) == Decimal("100")


async def test_insufficient_funds_is_a_conflict(client) -> None:
    account = await _create_account(client, initial_balance="10")

    response = await client.post(
        "/api/transactions",
        json={"type": "expense", "amount": "10.01", "account_id": account["id"], "date": "2026-01-05"},
        headers=HEADERS,
    )

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "InsufficientFundsError"


async def test_self_transfer_is_unprocessable(client) -> None:
    account = await _create_account(client)

    response = await client.post(
        "/api/transactions",
        json={
            "type": "transfer",
            "amount": "5",
            "account_id": account["id"],
            "to_account_id": account["id"],
            "date": "2026-01-05",
        },
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert "to_account_id" in response.json()["detail"]["errors"]


async def test_unknown_accounts_are_not_found(client) -> None:
    response = await client.get("/api/accounts/missing", headers=HEADERS)
    assert response.status_code == 404

    response = await client.post(
        "/api/transactions",
        json={"type": "income", "amount": "5", "account_id": "missing", "date": "2026-01-05"},
        headers=HEADERS,
    )
    assert response.status_code == 404


async def test_idempotency_key_header(client) -> None:
    account = await _create_account(client)
    payload = {"type": "expense", "amount": "10", "account_id": account["id"], "date": "2026-01-05"}
    headers = {**HEADERS, "Idempotency-Key": "submit-1"}

    first = (await client.post("/api/transactions", json=payload, headers=headers)).json()
    second = (await client.post("/api/transactions", json=payload, headers=headers)).json()

    assert second["id"] == first["id"]
    assert second["replayed"] is True
    account = (await client.get(f"/api/accounts/{account['id']}", headers=HEADERS)).json()
    assert Decimal(account["current_balance"]) == Decimal("90")


async def test_adjustments_and_direct_transfers(client) -> None:
    source = await _create_account(client)
    destination = await _create_account(client, name="Savings", initial_balance="0")

    response = await client.post(
        f"/api/accounts/{source['id']}/adjustments", json={"delta": "-20"}, headers=HEADERS
    )
    assert response.status_code == 200
    assert Decimal(response.json()["current_balance"]) == Decimal("80")

    response = await client.post(
        "/api/accounts/transfers",
        json={"from_account_id": source["id"], "to_account_id": destination["id"], "amount": "30"},
        headers=HEADERS,
    )
    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["source"]["current_balance"]) == Decimal("50")
    assert Decimal(body["destination"]["current_balance"]) == Decimal("30")

    listing = (await client.get("/api/accounts", headers=HEADERS)).json()
    assert listing["total"] == 2


async def test_invalid_account_type(client) -> None:
    response = await client.post(
        "/api/accounts", json={"name": "Jar", "type": "piggy"}, headers=HEADERS
    )

    assert response.status_code == 422
    assert "type" in response.json()["detail"]["errors"]


async def test_oversized_amount_is_unprocessable(client) -> None:
    account = await _create_account(client, type="credit", initial_balance="0")

    response = await client.post(
        "/api/transactions",
        json={"type": "expense", "amount": "1e17", "account_id": account["id"], "date": "2026-01-05"},
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert "amount" in response.json()["detail"]["errors"]


async def test_balance_limit_is_a_conflict(client) -> None:
    account = await _create_account(client, initial_balance="0")
    payload = {"type": "income", "amount": "92233720368547758.07", "account_id": account["id"], "date": "2026-01-05"}

    response = await client.post("/api/transactions", json=payload, headers=HEADERS)
    assert response.status_code == 422

    payload["amount"] = "6000000000000"
    response = await client.post("/api/transactions", json=payload, headers=HEADERS)
    assert response.status_code == 201
    response = await client.post("/api/transactions", json=payload, headers=HEADERS)
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "BalanceLimitExceededError"

    response = await client.post(
        f"/api/accounts/{account['id']}/adjustments", json={"delta": "5000000000000"}, headers=HEADERS
    )
    assert response.status_code == 409

    account = (await client.get(f"/api/accounts/{account['id']}", headers=HEADERS)).json()
    assert Decimal(account["current_balance"]) == Decimal("6000000000000")


async def test_oversized_initial_balance_is_unprocessable(client) -> None:
    response = await client.post(
        "/api/accounts",
        json={"name": "Vault", "type": "bank", "initial_balance": "1e17"},
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert "initial_balance" in response.json()["detail"]["errors"]
