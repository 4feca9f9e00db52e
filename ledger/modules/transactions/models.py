"""Domain models for ledger transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from ledger.modules.money import from_minor_units


class TransactionType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"
    SAVING = "saving"


TRANSACTION_TYPES = tuple(t.value for t in TransactionType)


@dataclass(slots=True)
class TransactionDraft:
    """A user-submitted financial event, not yet validated."""

    type: str
    amount: Any
    account_id: Optional[str]
    date: Any
    to_account_id: Optional[str] = None
    currency: Optional[str] = None
    category_id: Optional[str] = None
    goal_id: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    idempotency_key: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DateParts:
    year: int
    month: int
    day: int
    week: int
    year_month: str


@dataclass(slots=True)
class CommittedTransaction:
    id: str
    user_id: str
    type: str
    amount_cents: int
    currency: str
    account_id: str
    to_account_id: Optional[str]
    date: date
    year: int
    month: int
    day: int
    week: int
    year_month: str
    category_id: Optional[str] = None
    goal_id: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    idempotency_key: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # True when an earlier commit with the same idempotency key was returned.
    replayed: bool = False

    @property
    def amount(self) -> Decimal:
        return from_minor_units(self.amount_cents)
