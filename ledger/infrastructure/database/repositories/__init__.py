"""SQLAlchemy repository implementations."""

from .account_repository import SqlAccountRepository
from .transaction_repository import SqlTransactionRepository

__all__ = [
    "SqlAccountRepository",
    "SqlTransactionRepository",
]
