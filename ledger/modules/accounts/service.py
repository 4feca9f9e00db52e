"""Domain services for account management."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from ledger.modules.common.exceptions import InvalidAmountError, ValidationError
from ledger.modules.common.unit_of_work import AtomicExecutor, LedgerUnit
from ledger.modules.money import is_currency_code, to_minor_units

from .exceptions import AccountNotFoundError
from .invariants import allows_negative_balance, ensure_same_currency, next_balance
from .models import ACCOUNT_TYPES, Account, AccountCreateInput

logger = logging.getLogger(__name__)


def _require_user(user_id: str) -> None:
    if not user_id:
        raise ValidationError("user_id is required", {"user_id": "user_id is required"})


class AccountService:
    """Account use cases; every balance write runs inside an atomic unit."""

    def __init__(self, executor: AtomicExecutor, *, default_currency: str = "USD") -> None:
        self._executor = executor
        self._default_currency = default_currency

    async def get(self, user_id: str, account_id: str) -> Account | None:
        _require_user(user_id)
        if not account_id:
            raise ValidationError("account_id is required", {"account_id": "account_id is required"})

        async def work(unit: LedgerUnit) -> Account | None:
            return await unit.accounts.get(user_id, account_id)

        return await self._executor.run(work, label="get_account")

    async def list_accounts(self, user_id: str) -> Sequence[Account]:
        _require_user(user_id)

        async def work(unit: LedgerUnit) -> Sequence[Account]:
            return await unit.accounts.list_accounts(user_id)

        return await self._executor.run(work, label="list_accounts")

    async def create_account(self, user_id: str, payload: AccountCreateInput) -> Account:
        _require_user(user_id)
        errors: dict[str, str] = {}
        name = (payload.name or "").strip()
        if not name:
            errors["name"] = "account name is required"
        if payload.type not in ACCOUNT_TYPES:
            errors["type"] = f"invalid account type, must be one of: {', '.join(ACCOUNT_TYPES)}"
        currency = payload.currency or self._default_currency
        if not is_currency_code(currency):
            errors["currency"] = f"invalid currency code: {currency}"
        initial_cents = 0
        try:
            initial_cents = to_minor_units(payload.initial_balance)
        except InvalidAmountError as exc:
            errors["initial_balance"] = str(exc)
        if initial_cents < 0 and not allows_negative_balance(payload.type):
            errors["initial_balance"] = "only credit accounts may start with a negative balance"
        if errors:
            raise ValidationError("invalid account", errors)

        async def work(unit: LedgerUnit) -> Account:
            return await unit.accounts.create_account(
                user_id=user_id,
                name=name,
                type=payload.type,
                currency=currency,
                initial_balance_cents=initial_cents,
            )

        account = await self._executor.run(work, label="create_account")
        logger.info("Created %s account %s for user %s", account.type, account.id, user_id)
        return account

    async def adjust_balance(self, user_id: str, account_id: str, delta: Decimal | int | str) -> Account:
        """Apply a signed ad-hoc correction to one account balance."""
        _require_user(user_id)
        delta_cents = to_minor_units(delta)
        if delta_cents == 0:
            raise InvalidAmountError("delta must be a non-zero amount")

        async def work(unit: LedgerUnit) -> Account:
            account = await unit.accounts.get(user_id, account_id)
            if account is None:
                raise AccountNotFoundError(account_id)
            balance = next_balance(account, delta_cents)
            return await unit.accounts.write_balance(account, balance)

        account = await self._executor.run(work, label="adjust_balance")
        logger.info("Adjusted account %s by %s cents", account_id, delta_cents)
        return account

    async def transfer_between_accounts(
        self,
        user_id: str,
        from_account_id: str,
        to_account_id: str,
        amount: Decimal | int | str,
    ) -> tuple[Account, Account]:
        """Move money between two accounts without writing a transaction record."""
        _require_user(user_id)
        if not from_account_id or not to_account_id:
            raise ValidationError("both accounts are required", {"account_id": "both accounts are required"})
        if from_account_id == to_account_id:
            raise ValidationError(
                "source and destination accounts must be different",
                {"to_account_id": "source and destination accounts must be different"},
            )
        amount_cents = to_minor_units(amount)
        if amount_cents <= 0:
            raise InvalidAmountError()

        async def work(unit: LedgerUnit) -> tuple[Account, Account]:
            source = await unit.accounts.get(user_id, from_account_id)
            if source is None:
                raise AccountNotFoundError(from_account_id, "source account")
            destination = await unit.accounts.get(user_id, to_account_id)
            if destination is None:
                raise AccountNotFoundError(to_account_id, "destination account")
            ensure_same_currency(source, destination)
            source_balance = next_balance(source, -amount_cents)
            destination_balance = next_balance(destination, amount_cents, destination=True)
            source = await unit.accounts.write_balance(source, source_balance)
            destination = await unit.accounts.write_balance(destination, destination_balance)
            return source, destination

        result = await self._executor.run(work, label="transfer_between_accounts")
        logger.info("Transferred %s cents from %s to %s", amount_cents, from_account_id, to_account_id)
        return result
