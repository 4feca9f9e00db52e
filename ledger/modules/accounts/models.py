"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ledger.modules.money import from_minor_units

ACCOUNT_TYPES = ("cash", "bank", "credit", "investment", "wallet", "other")
CREDIT_ACCOUNT_TYPE = "credit"


@dataclass(slots=True)
class Account:
    id: str
    user_id: str
    name: str
    type: str
    currency: str
    initial_balance_cents: int
    current_balance_cents: int
    is_active: bool = True
    version: int = 1
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def current_balance(self) -> Decimal:
        return from_minor_units(self.current_balance_cents)

    @property
    def initial_balance(self) -> Decimal:
        return from_minor_units(self.initial_balance_cents)

    def is_credit(self) -> bool:
        return self.type == CREDIT_ACCOUNT_TYPE


@dataclass(slots=True)
class AccountCreateInput:
    name: str
    type: str
    currency: Optional[str] = None
    initial_balance: Decimal | int | str = Decimal("0")
