"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from ledger.db.models import LedgerAccount as AccountModel
from ledger.modules.accounts.models import Account
from ledger.modules.accounts.repository import AccountRepository
from ledger.modules.common.exceptions import ConcurrentUpdateError


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, user_id: str, account_id: str) -> Account | None:
        stmt = select(AccountModel).where(
            AccountModel.id == account_id,
            AccountModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def list_accounts(self, user_id: str) -> Sequence[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.user_id == user_id)
            .order_by(AccountModel.created_at, AccountModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_account(
        self,
        *,
        user_id: str,
        name: str,
        type: str,
        currency: str,
        initial_balance_cents: int,
    ) -> Account:
        model = AccountModel(
            user_id=user_id,
            name=name,
            type=type,
            currency=currency,
            initial_balance_cents=initial_balance_cents,
            current_balance_cents=initial_balance_cents,
            is_active=True,
            version=1,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def write_balance(self, account: Account, balance_cents: int) -> Account:
        stmt = (
            update(AccountModel)
            .where(
                AccountModel.id == account.id,
                AccountModel.user_id == account.user_id,
                AccountModel.version == account.version,
            )
            .values(
                current_balance_cents=balance_cents,
                version=AccountModel.version + 1,
                updated_at=func.now(),
            )
            .returning(AccountModel.version, AccountModel.updated_at)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        row = result.first()
        if row is None:
            raise ConcurrentUpdateError(
                f"account {account.id} changed since version {account.version}"
            )
        return replace(
            account,
            current_balance_cents=balance_cents,
            version=row.version,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _to_domain(model: AccountModel) -> Account:
        return Account(
            id=str(model.id),
            user_id=model.user_id,
            name=model.name,
            type=model.type,
            currency=model.currency,
            initial_balance_cents=model.initial_balance_cents,
            current_balance_cents=model.current_balance_cents,
            is_active=bool(model.is_active),
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
