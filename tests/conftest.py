"""Shared fixtures: a throwaway SQLite database per test.

A file-backed database is used instead of ``:memory:`` so that every pooled
connection (and therefore every concurrent atomic unit) sees the same state.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from ledger.core.config import DatabaseSettings, LedgerSettings, Settings
from ledger.core.container import ApplicationContainer
from ledger.infrastructure.database.session import init_db
from ledger.modules.accounts import Account, AccountCreateInput, AccountService
from ledger.modules.transactions import TransactionEngine

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}"),
        ledger=LedgerSettings(commit_max_attempts=10, retry_backoff_seconds=0.001),
    )


@pytest.fixture
async def container(settings: Settings):
    container = ApplicationContainer.from_settings(settings)
    await init_db(container.engine)
    yield container
    await container.engine.dispose()


@pytest.fixture
def accounts(container: ApplicationContainer) -> AccountService:
    return container.account_service()


@pytest.fixture
def engine(container: ApplicationContainer) -> TransactionEngine:
    return container.transaction_engine()


@pytest.fixture
def make_account(accounts: AccountService):
    async def _make(
        balance: str | int = "0",
        *,
        type: str = "bank",
        currency: str = "USD",
        name: str = "Checking",
        user_id: str = USER_ID,
    ) -> Account:
        return await accounts.create_account(
            user_id,
            AccountCreateInput(name=name, type=type, currency=currency, initial_balance=Decimal(str(balance))),
        )

    return _make
