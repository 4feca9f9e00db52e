"""Account domain exports."""

from .exceptions import (
    AccountError,
    AccountNotFoundError,
    BalanceLimitExceededError,
    DestinationWouldGoNegativeError,
    InsufficientFundsError,
    UnsupportedTransferError,
)
from .models import ACCOUNT_TYPES, Account, AccountCreateInput
from .service import AccountService

__all__ = [
    "ACCOUNT_TYPES",
    "Account",
    "AccountCreateInput",
    "AccountError",
    "AccountNotFoundError",
    "AccountService",
    "BalanceLimitExceededError",
    "DestinationWouldGoNegativeError",
    "InsufficientFundsError",
    "UnsupportedTransferError",
]
