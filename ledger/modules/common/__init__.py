"""Shared domain building blocks."""

from .exceptions import (
    CommitError,
    ConcurrentUpdateError,
    DomainInvariantError,
    InvalidAmountError,
    LedgerError,
    ValidationError,
)
from .unit_of_work import AtomicExecutor, LedgerUnit

__all__ = [
    "AtomicExecutor",
    "CommitError",
    "ConcurrentUpdateError",
    "DomainInvariantError",
    "InvalidAmountError",
    "LedgerError",
    "LedgerUnit",
    "ValidationError",
]
