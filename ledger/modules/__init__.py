"""Domain modules."""

from . import accounts, common, money, transactions

__all__ = [
    "accounts",
    "common",
    "money",
    "transactions",
]
