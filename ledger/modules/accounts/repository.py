"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get(self, user_id: str, account_id: str) -> Account | None:
        ...

    async def list_accounts(self, user_id: str) -> Sequence[Account]:
        ...

    async def create_account(
        self,
        *,
        user_id: str,
        name: str,
        type: str,
        currency: str,
        initial_balance_cents: int,
    ) -> Account:
        ...

    async def write_balance(self, account: Account, balance_cents: int) -> Account:
        """Compare-and-set the balance against ``account.version``.

        Raises ``ConcurrentUpdateError`` when the stored version moved on.
        """
        ...
