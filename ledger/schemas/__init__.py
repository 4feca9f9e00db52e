"""Pydantic schemas used by the HTTP layer."""
from datetime import date as Date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccountCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: str
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    initial_balance: Decimal = Decimal("0")


class AccountResponse(BaseModel):
    id: str
    name: str
    type: str
    currency: str
    initial_balance: Decimal
    current_balance: Decimal
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AccountListResponse(BaseModel):
    total: int
    accounts: list[AccountResponse]


class BalanceAdjustmentRequest(BaseModel):
    delta: Decimal


class AccountTransferRequest(BaseModel):
    from_account_id: str
    to_account_id: str
    amount: Decimal


class AccountTransferResponse(BaseModel):
    source: AccountResponse
    destination: AccountResponse


class TransactionCreateRequest(BaseModel):
    type: str
    amount: Decimal
    account_id: str
    to_account_id: Optional[str] = None
    currency: Optional[str] = None
    date: str
    category_id: Optional[str] = None
    goal_id: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    idempotency_key: Optional[str] = Field(default=None, max_length=128)


class TransactionResponse(BaseModel):
    id: str
    type: str
    amount: Decimal
    currency: str
    account_id: str
    to_account_id: Optional[str] = None
    category_id: Optional[str] = None
    goal_id: Optional[str] = None
    description: Optional[str] = None
    notes: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    date: Date
    year: int
    month: int
    day: int
    week: int
    year_month: str
    idempotency_key: Optional[str] = None
    created_at: Optional[datetime] = None
    replayed: bool = False
    reference_amount: Optional[Decimal] = None
    reference_currency: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    total: int
    transactions: list[TransactionResponse]
