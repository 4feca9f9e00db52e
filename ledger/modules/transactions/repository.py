"""Repository protocol for the transaction log."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .models import CommittedTransaction, DateParts


class TransactionRepository(Protocol):
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
        ...

    async def get_by_idempotency_key(self, user_id: str, key: str) -> CommittedTransaction | None:
        ...

    async def list_transactions(
        self,
        user_id: str,
        *,
        account_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[CommittedTransaction]:
        ...
