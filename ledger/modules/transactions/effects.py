"""How each transaction type moves account balances.

Pure and deterministic: no store access, safe to call repeatedly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from ledger.modules.common.exceptions import InvalidAmountError

from .exceptions import UnsupportedTypeError
from .models import TransactionType

Number = Union[int, float, Decimal]


@dataclass(frozen=True, slots=True)
class BalanceEffect:
    from_delta: Number
    to_delta: Optional[Number] = None


def _check_amount(amount: Number) -> None:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError()
    if isinstance(amount, Decimal):
        finite = amount.is_finite()
    else:
        finite = math.isfinite(amount)
    if not finite or amount <= 0:
        raise InvalidAmountError()


def effect(type_: str, amount: Number) -> BalanceEffect:
    """Return the signed deltas ``type_`` applies to source and destination.

    A saving debits the source like an expense; crediting a goal is left to
    the caller.
    """
    _check_amount(amount)
    if type_ in (TransactionType.EXPENSE, TransactionType.SAVING):
        return BalanceEffect(from_delta=-amount)
    if type_ == TransactionType.INCOME:
        return BalanceEffect(from_delta=amount)
    if type_ == TransactionType.TRANSFER:
        return BalanceEffect(from_delta=-amount, to_delta=amount)
    raise UnsupportedTypeError(type_)
