"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import JSON, BigInteger, Boolean, Column, Date, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from ledger.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class LedgerAccount(Base):
    __tablename__ = "ledger_accounts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(128), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    type = Column(String(20), nullable=False)  # cash, bank, credit, investment, wallet, other
    currency = Column(String(3), nullable=False, default="USD")
    initial_balance_cents = Column(BigInteger, nullable=False, default=0)
    current_balance_cents = Column(BigInteger, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class LedgerTransaction(Base):
    __tablename__ = "ledger_transactions"
    __table_args__ = (
        UniqueConstraint("user_id", "idempotency_key", name="uq_ledger_transactions_user_idempotency"),
        Index("ix_ledger_transactions_user_year_month", "user_id", "year_month"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(128), nullable=False, index=True)
    type = Column(String(20), nullable=False)  # expense, income, transfer, saving
    amount_cents = Column(BigInteger, nullable=False)
    currency = Column(String(3), nullable=False)
    account_id = Column(String(36), ForeignKey("ledger_accounts.id"), nullable=False, index=True)
    to_account_id = Column(String(36), ForeignKey("ledger_accounts.id"), nullable=True, index=True)
    category_id = Column(String(64))
    goal_id = Column(String(64))
    description = Column(String(255))
    notes = Column(Text)
    tags = Column(JSON, nullable=False, default=list)
    date = Column(Date, nullable=False)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    day = Column(Integer, nullable=False)
    week = Column(Integer, nullable=False)
    year_month = Column(String(7), nullable=False)
    idempotency_key = Column(String(128), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
