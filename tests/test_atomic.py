from decimal import Decimal

import pytest
from sqlalchemy.exc import InvalidRequestError

from ledger.infrastructure.database.atomic import SqlAtomicExecutor, SqlLedgerUnit
from ledger.infrastructure.database.repositories.account_repository import SqlAccountRepository
from ledger.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from ledger.modules.accounts import InsufficientFundsError
from ledger.modules.accounts.repository import AccountRepository
from ledger.modules.common import CommitError, ConcurrentUpdateError
from ledger.modules.transactions.repository import TransactionRepository

from .conftest import USER_ID


@pytest.fixture
def executor(container) -> SqlAtomicExecutor:
    return SqlAtomicExecutor(container.session_factory, max_attempts=3, backoff_seconds=0)


async def test_retries_contention_until_it_commits(executor) -> None:
    calls = []

    async def work(unit):
        calls.append(unit)
        if len(calls) < 3:
            raise ConcurrentUpdateError("someone else wrote first")
        return "committed"

    assert await executor.run(work) == "committed"
    assert len(calls) == 3
    # every attempt gets a fresh unit
    assert len({id(unit.session) for unit in calls}) == 3


async def test_gives_up_with_commit_error(executor) -> None:
    async def work(unit):
        raise ConcurrentUpdateError("always losing")

    with pytest.raises(CommitError) as excinfo:
        await executor.run(work, label="doomed")

    assert excinfo.value.attempts == 3
    assert isinstance(excinfo.value.__cause__, ConcurrentUpdateError)
    assert "doomed" in str(excinfo.value)


async def test_domain_errors_are_not_retried(executor) -> None:
    calls = 0

    async def work(unit):
        nonlocal calls
        calls += 1
        raise InsufficientFundsError("no money")

    with pytest.raises(InsufficientFundsError):
        await executor.run(work)

    assert calls == 1


async def test_store_failures_surface_as_commit_error(executor) -> None:
    calls = 0

    async def work(unit):
        nonlocal calls
        calls += 1
        raise InvalidRequestError("broken statement")

    with pytest.raises(CommitError) as excinfo:
        await executor.run(work)

    assert calls == 1
    assert excinfo.value.attempts == 1


async def test_failed_unit_leaves_no_partial_writes(executor, accounts, make_account) -> None:
    account = await make_account(100)

    async def work(unit):
        current = await unit.accounts.get(USER_ID, account.id)
        await unit.accounts.write_balance(current, 0)
        raise InsufficientFundsError("abort after the write")

    with pytest.raises(InsufficientFundsError):
        await executor.run(work)

    reloaded = await accounts.get(USER_ID, account.id)
    assert reloaded.current_balance == Decimal("100.00")
    assert reloaded.version == 1


async def test_stale_versions_are_detected(executor, accounts, make_account) -> None:
    stale = await make_account(100)
    await accounts.adjust_balance(USER_ID, stale.id, 5)

    async def work(unit):
        return await unit.accounts.write_balance(stale, 0)

    with pytest.raises(CommitError):
        await executor.run(work)

    assert (await accounts.get(USER_ID, stale.id)).current_balance == Decimal("105.00")


async def test_unit_repositories_implement_the_protocols(executor) -> None:
    assert AccountRepository in SqlAccountRepository.__mro__
    assert TransactionRepository in SqlTransactionRepository.__mro__

    async def work(unit):
        return unit

    unit = await executor.run(work)
    assert isinstance(unit, SqlLedgerUnit)
    assert isinstance(unit.accounts, SqlAccountRepository)
    assert isinstance(unit.transactions, SqlTransactionRepository)
