"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ledger.core.config import Settings, get_settings
from ledger.infrastructure.database.atomic import SqlAtomicExecutor
from ledger.infrastructure.database.session import (
    build_engine,
    create_session_factory,
    get_engine,
    get_session_factory,
)
from ledger.modules.accounts import AccountService
from ledger.modules.transactions import TransactionEngine


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        engine = build_engine(settings)
        return cls(settings=settings, engine=engine, session_factory=create_session_factory(engine))

    def executor(self) -> SqlAtomicExecutor:
        return SqlAtomicExecutor(
            self.session_factory,
            max_attempts=self.settings.ledger.commit_max_attempts,
            backoff_seconds=self.settings.ledger.retry_backoff_seconds,
        )

    def account_service(self) -> AccountService:
        return AccountService(self.executor(), default_currency=self.settings.ledger.default_currency)

    def transaction_engine(self) -> TransactionEngine:
        return TransactionEngine(self.executor())


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer(
        settings=get_settings(),
        engine=get_engine(),
        session_factory=get_session_factory(),
    )


__all__ = ["ApplicationContainer", "get_container"]
