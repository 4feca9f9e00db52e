"""Pure money helpers.

Amounts travel through the API as major units (``Decimal`` such as
``Decimal("12.50")``) and are stored as integer minor units (cents). Every
supported currency uses two decimal places.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ledger.modules.common.exceptions import InvalidAmountError, ValidationError

Number = Union[int, float, str, Decimal]

MINOR_UNIT_EXPONENT = 2
# Largest absolute amount or balance, in minor units (ten trillion major units)
MAX_MINOR_UNITS = 10**15
_QUANT = Decimal(1).scaleb(-MINOR_UNIT_EXPONENT)
_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


def is_currency_code(code: object) -> bool:
    return isinstance(code, str) and bool(_CURRENCY_RE.match(code))


def parse_amount(value: Number) -> Decimal:
    """Parse ``value`` into a finite ``Decimal``; booleans are not money."""
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError()
    try:
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError() from None
    if not amount.is_finite():
        raise InvalidAmountError()
    return amount


def round2(amount: Number) -> Decimal:
    """Round half-up to two decimals: ``round2("10.255") == Decimal("10.26")``."""
    return parse_amount(amount).quantize(_QUANT, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Number) -> int:
    """Convert a major-unit amount to integer cents.

    Sub-cent precision is rejected instead of silently rounded away.
    """
    value = parse_amount(amount)
    scaled = value.scaleb(MINOR_UNIT_EXPONENT)
    if scaled != scaled.to_integral_value():
        raise InvalidAmountError("amount must not have more than two decimal places")
    if abs(scaled) > MAX_MINOR_UNITS:
        raise InvalidAmountError(f"amount must not exceed {from_minor_units(MAX_MINOR_UNITS)}")
    return int(scaled)


def from_minor_units(cents: int) -> Decimal:
    return Decimal(cents).scaleb(-MINOR_UNIT_EXPONENT).quantize(_QUANT)


def _check_rate(rate: Number | None, currency: str) -> Decimal:
    if rate is None:
        raise ValidationError(
            f"no exchange rate supplied for {currency}",
            {"rate": f"exchange rate required for {currency}"},
        )
    try:
        value = parse_amount(rate)
    except InvalidAmountError:
        value = Decimal(0)
    if value <= 0:
        raise ValidationError("exchange rate must be greater than 0", {"rate": "exchange rate must be greater than 0"})
    return value


def to_reference_currency(
    amount: Number,
    currency: str,
    rate: Number | None = None,
    reference_currency: str = "USD",
) -> Decimal:
    """Normalize ``amount`` in ``currency`` to ``reference_currency``.

    ``rate`` is the number of ``currency`` units per one reference unit, so
    ``to_reference_currency(4000, "UYU", 40) == Decimal("100.00")``.
    The rate is always passed in; nothing is read from ambient state.
    """
    value = parse_amount(amount)
    if currency == reference_currency:
        return round2(value)
    return round2(value / _check_rate(rate, currency))


def from_reference_currency(
    amount: Number,
    currency: str,
    rate: Number | None = None,
    reference_currency: str = "USD",
) -> Decimal:
    """Inverse of :func:`to_reference_currency`."""
    value = parse_amount(amount)
    if currency == reference_currency:
        return round2(value)
    return round2(value * _check_rate(rate, currency))
