"""Money helpers: minor-unit conversion and reference-currency normalization."""

from .currency import (
    MAX_MINOR_UNITS,
    from_minor_units,
    from_reference_currency,
    is_currency_code,
    parse_amount,
    round2,
    to_minor_units,
    to_reference_currency,
)

__all__ = [
    "MAX_MINOR_UNITS",
    "from_minor_units",
    "from_reference_currency",
    "is_currency_code",
    "parse_amount",
    "round2",
    "to_minor_units",
    "to_reference_currency",
]
