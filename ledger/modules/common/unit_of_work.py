"""Atomic unit abstractions the services depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Protocol, TypeVar

if TYPE_CHECKING:
    from ledger.modules.accounts.repository import AccountRepository
    from ledger.modules.transactions.repository import TransactionRepository

T = TypeVar("T")


class LedgerUnit(Protocol):
    """Repositories bound to one all-or-nothing unit of work."""

    accounts: "AccountRepository"
    transactions: "TransactionRepository"


class AtomicExecutor(Protocol):
    """Runs ``work`` inside an atomic unit, committing only if it returns.

    Implementations detect concurrent writers, retry the whole unit on
    contention and raise :class:`CommitError` once retries are exhausted.
    Domain errors raised by ``work`` abort the unit and propagate unchanged.
    """

    async def run(self, work: Callable[[LedgerUnit], Awaitable[T]], *, label: str = "unit") -> T:
        ...
