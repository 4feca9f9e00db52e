"""Balance invariants shared by every code path that moves money."""

from __future__ import annotations

from ledger.modules.money import MAX_MINOR_UNITS, from_minor_units

from .exceptions import (
    BalanceLimitExceededError,
    DestinationWouldGoNegativeError,
    InsufficientFundsError,
    UnsupportedTransferError,
)
from .models import CREDIT_ACCOUNT_TYPE, Account


def allows_negative_balance(account_type: str) -> bool:
    return account_type == CREDIT_ACCOUNT_TYPE


def next_balance(account: Account, delta_cents: int, *, destination: bool = False) -> int:
    """Return the balance ``account`` would hold after ``delta_cents``.

    Non-credit accounts may never end up below zero, and no account may
    hold more than MAX_MINOR_UNITS in either direction.
    """
    balance = account.current_balance_cents + delta_cents
    if abs(balance) > MAX_MINOR_UNITS:
        raise BalanceLimitExceededError(
            f"account {account.id} balance would exceed {from_minor_units(MAX_MINOR_UNITS)}: "
            f"balance {from_minor_units(account.current_balance_cents)}, "
            f"change {from_minor_units(delta_cents)}"
        )
    if balance < 0 and not allows_negative_balance(account.type):
        error_cls = DestinationWouldGoNegativeError if destination else InsufficientFundsError
        role = "destination" if destination else "source"
        raise error_cls(
            f"{role} account {account.id} would go negative: "
            f"balance {from_minor_units(account.current_balance_cents)}, "
            f"change {from_minor_units(delta_cents)}"
        )
    return balance


def ensure_same_currency(source: Account, destination: Account) -> None:
    if source.currency != destination.currency:
        raise UnsupportedTransferError(
            "transfers between accounts with different currencies are not supported: "
            f"{source.currency} -> {destination.currency}"
        )
