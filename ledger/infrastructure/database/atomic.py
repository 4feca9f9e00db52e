"""Atomic multi-record units over an async SQLAlchemy session.

Each attempt opens a fresh session, runs the unit of work inside
``session.begin()`` and commits when it returns. Balance writes are
compare-and-set on the account version, so a concurrent writer shows up as
:class:`ConcurrentUpdateError`; the attempt is rolled back and the whole unit
runs again against fresh reads.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ledger.infrastructure.database.repositories import SqlAccountRepository, SqlTransactionRepository
from ledger.modules.common.exceptions import CommitError, ConcurrentUpdateError
from ledger.modules.common.unit_of_work import LedgerUnit

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_ERRORS = (ConcurrentUpdateError, OperationalError, IntegrityError)


class SqlLedgerUnit:
    """Repositories sharing one session, hence one database transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.accounts = SqlAccountRepository(session)
        self.transactions = SqlTransactionRepository(session)


@dataclass(slots=True)
class SqlAtomicExecutor:
    session_factory: async_sessionmaker[AsyncSession]
    max_attempts: int = 5
    backoff_seconds: float = 0.02

    async def run(self, work: Callable[[LedgerUnit], Awaitable[T]], *, label: str = "unit") -> T:
        last_error: Exception | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        return await work(SqlLedgerUnit(session))
            except RETRYABLE_ERRORS as exc:
                last_error = exc
                logger.warning(
                    "%s attempt %d/%d hit contention: %s",
                    label,
                    attempt,
                    self.max_attempts,
                    exc,
                )
            except SQLAlchemyError as exc:
                logger.error("%s failed in the store: %s", label, exc)
                raise CommitError(f"{label} could not be committed: {exc}", attempt) from exc

            if attempt < self.max_attempts and self.backoff_seconds:
                await asyncio.sleep(self.backoff_seconds * attempt * random.uniform(0.5, 1.5))

        raise CommitError(
            f"{label} could not be committed after {self.max_attempts} attempts",
            self.max_attempts,
        ) from last_error
