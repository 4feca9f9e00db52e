"""Transaction engine: the only writer of balances in response to a transaction.

``create_transaction`` validates a draft, then inside one atomic unit reads
the account(s) involved, checks the money invariants, writes the new
balance(s) and appends the transaction record. Either everything becomes
visible or nothing does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ledger.modules.accounts.exceptions import AccountNotFoundError
from ledger.modules.accounts.invariants import ensure_same_currency, next_balance
from ledger.modules.common.exceptions import ValidationError
from ledger.modules.common.unit_of_work import AtomicExecutor, LedgerUnit

from .dates import extract_date_parts
from .effects import effect
from .exceptions import CurrencyMismatchError
from .models import CommittedTransaction, TransactionDraft, TransactionType
from .validator import ValidatedDraft, ensure_valid

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionEngine:
    executor: AtomicExecutor

    async def create_transaction(self, user_id: str, draft: TransactionDraft) -> CommittedTransaction:
        if not user_id:
            raise ValidationError("user_id is required", {"user_id": "user_id is required"})
        validated = ensure_valid(draft)

        async def work(unit: LedgerUnit) -> CommittedTransaction:
            return await self._apply(unit, user_id, validated)

        committed = await self.executor.run(work, label="create_transaction")
        if committed.replayed:
            logger.info(
                "Replayed transaction %s for idempotency key %s",
                committed.id,
                committed.idempotency_key,
            )
        else:
            logger.info(
                "Committed %s %s %s on account %s (transaction %s)",
                committed.type,
                committed.amount,
                committed.currency,
                committed.account_id,
                committed.id,
            )
        return committed

    async def list_transactions(
        self,
        user_id: str,
        *,
        account_id: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[CommittedTransaction]:
        if not user_id:
            raise ValidationError("user_id is required", {"user_id": "user_id is required"})

        async def work(unit: LedgerUnit) -> Sequence[CommittedTransaction]:
            return await unit.transactions.list_transactions(
                user_id, account_id=account_id, limit=limit, offset=offset
            )

        return await self.executor.run(work, label="list_transactions")

    @staticmethod
    async def _apply(unit: LedgerUnit, user_id: str, validated: ValidatedDraft) -> CommittedTransaction:
        draft = validated.draft

        if draft.idempotency_key:
            existing = await unit.transactions.get_by_idempotency_key(user_id, draft.idempotency_key)
            if existing is not None:
                existing.replayed = True
                return existing

        source = await unit.accounts.get(user_id, draft.account_id)
        if source is None:
            raise AccountNotFoundError(draft.account_id, "source account")

        if draft.currency and draft.currency != source.currency:
            raise CurrencyMismatchError(
                f"transaction currency {draft.currency} does not match "
                f"source account currency {source.currency}"
            )

        destination = None
        if draft.type == TransactionType.TRANSFER:
            destination = await unit.accounts.get(user_id, draft.to_account_id)
            if destination is None:
                raise AccountNotFoundError(draft.to_account_id, "destination account")
            ensure_same_currency(source, destination)

        deltas = effect(draft.type, validated.amount_cents)
        source_balance = next_balance(source, deltas.from_delta)
        destination_balance = None
        if destination is not None and deltas.to_delta is not None:
            destination_balance = next_balance(destination, deltas.to_delta, destination=True)

        date_parts = extract_date_parts(validated.effective_date)

        await unit.accounts.write_balance(source, source_balance)
        if destination is not None and destination_balance is not None:
            await unit.accounts.write_balance(destination, destination_balance)

        return await unit.transactions.add_transaction(
            user_id=user_id,
            type=TransactionType(draft.type).value,
            amount_cents=validated.amount_cents,
            currency=source.currency,
            account_id=source.id,
            to_account_id=destination.id if destination is not None else None,
            effective_date=validated.effective_date,
            date_parts=date_parts,
            category_id=draft.category_id or None,
            goal_id=draft.goal_id or None,
            description=draft.description or None,
            notes=draft.notes or None,
            tags=list(draft.tags or []),
            idempotency_key=draft.idempotency_key or None,
        )
