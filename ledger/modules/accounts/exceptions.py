"""Account domain specific exceptions."""

from ledger.modules.common.exceptions import DomainInvariantError, LedgerError


class AccountError(LedgerError):
    """Base class for account domain errors."""


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found for the user."""

    def __init__(self, account_id: str, role: str = "account") -> None:
        super().__init__(f"{role} not found: {account_id}")
        self.account_id = account_id
        self.role = role


class UnsupportedTransferError(DomainInvariantError):
    """Raised for transfers between accounts holding different currencies."""


class InsufficientFundsError(DomainInvariantError):
    """Raised when a debit would take a non-credit account below zero."""


class DestinationWouldGoNegativeError(DomainInvariantError):
    """Raised when a transfer would leave a non-credit destination below zero."""


class BalanceLimitExceededError(DomainInvariantError):
    """Raised when a balance would leave the storable range."""
