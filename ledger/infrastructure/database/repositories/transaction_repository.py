"""SQLAlchemy implementation of the transaction log."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from sqlalchemy import desc, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.db.models import LedgerTransaction
from ledger.modules.transactions.models import CommittedTransaction, DateParts
from ledger.modules.transactions.repository import TransactionRepository


class SqlTransactionRepository(TransactionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_transaction(
        self,
        *,
        user_id: str,
        type: str,
        amount_cents: int,
        currency: str,
        account_id: str,
        to_account_id: Optional[str],
        effective_date: date,
        date_parts: DateParts,
        category_id: Optional[str],
        goal_id: Optional[str],
        description: Optional[str],
        notes: Optional[str],
        tags: list[str],
        idempotency_key: Optional[str],
    ) -> CommittedTransaction:
        tx = LedgerTransaction(
            user_id=user_id,
            type=type,
            amount_cents=amount_cents,
            currency=currency,
            account_id=account_id,
            to_account_id=to_account_id,
            category_id=category_id,
            goal_id=goal_id,
            description=description,
            notes=notes,
            tags=tags,
            date=effective_date,
            year=date_parts.year,
            month=date_parts.month,
            day=date_parts.day,
            week=date_parts.week,
            year_month=date_parts.year_month,
            idempotency_key=idempotency_key,
        )
        self.session.add(tx)
        await self.session.flush()
        await self.session.refresh(tx)
        return self._to_domain(tx)

    async def get_by_idempotency_key(self, user_id: str, key: str) -> CommittedTransaction | None:
        stmt = select(LedgerTransaction).where(
            LedgerTransaction.user_id == user_id,
            LedgerTransaction.idempotency_key == key,
        )
        result = await self.session.execute(stmt)
        row = result.scalars().first()
        return self._to_domain(row) if row is not None else None

    async def list_transactions(
        self,
        user_id: str,
        *,
        account_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[CommittedTransaction]:
        stmt = select(LedgerTransaction).where(LedgerTransaction.user_id == user_id)
        if account_id:
            stmt = stmt.where(
                or_(
                    LedgerTransaction.account_id == account_id,
                    LedgerTransaction.to_account_id == account_id,
                )
            )
        stmt = (
            stmt.order_by(desc(LedgerTransaction.date), desc(LedgerTransaction.created_at))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    @staticmethod
    def _to_domain(model: LedgerTransaction) -> CommittedTransaction:
        return CommittedTransaction(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            amount_cents=model.amount_cents,
            currency=model.currency,
            account_id=model.account_id,
            to_account_id=model.to_account_id,
            date=model.date,
            year=model.year,
            month=model.month,
            day=model.day,
            week=model.week,
            year_month=model.year_month,
            category_id=model.category_id,
            goal_id=model.goal_id,
            description=model.description,
            notes=model.notes,
            tags=list(model.tags or []),
            idempotency_key=model.idempotency_key,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
