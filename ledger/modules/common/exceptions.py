"""Error taxonomy shared by every ledger module."""

from __future__ import annotations

from typing import Mapping


class LedgerError(Exception):
    """Base class for ledger domain errors."""


class ValidationError(LedgerError):
    """Raised when input is rejected before any store access."""

    def __init__(self, message: str, errors: Mapping[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})


class InvalidAmountError(ValidationError):
    """Raised when an amount is not a finite positive number of money."""

    def __init__(self, message: str = "amount must be a finite number greater than 0") -> None:
        super().__init__(message, {"amount": message})


class DomainInvariantError(LedgerError):
    """Raised when applying an operation would break a money-domain invariant."""


class ConcurrentUpdateError(LedgerError):
    """Raised inside an atomic unit when a concurrent writer got there first."""


class CommitError(LedgerError):
    """Raised when the atomic unit could not be committed."""

    def __init__(self, message: str, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts
