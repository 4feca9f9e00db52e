"""Transaction domain exports."""

from .effects import BalanceEffect, effect
from .engine import TransactionEngine
from .exceptions import CurrencyMismatchError, UnsupportedTypeError
from .models import (
    TRANSACTION_TYPES,
    CommittedTransaction,
    DateParts,
    TransactionDraft,
    TransactionType,
)
from .validator import ValidationResult, ensure_valid, validate

__all__ = [
    "TRANSACTION_TYPES",
    "BalanceEffect",
    "CommittedTransaction",
    "CurrencyMismatchError",
    "DateParts",
    "TransactionDraft",
    "TransactionEngine",
    "TransactionType",
    "UnsupportedTypeError",
    "ValidationResult",
    "effect",
    "ensure_valid",
    "validate",
]
