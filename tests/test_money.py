from decimal import Decimal

import pytest

from ledger.modules.common import InvalidAmountError, ValidationError
from ledger.modules.money import (
    MAX_MINOR_UNITS,
    from_minor_units,
    from_reference_currency,
    is_currency_code,
    round2,
    to_minor_units,
    to_reference_currency,
)


@pytest.mark.parametrize(
    ("amount", "cents"),
    [("12.34", 1234), (Decimal("100"), 10000), (7, 700), (0.1, 10), ("-5.5", -550), ("0.01", 1)],
)
def test_to_minor_units(amount, cents: int) -> None:
    assert to_minor_units(amount) == cents


@pytest.mark.parametrize("amount", ["1.001", "abc", "NaN", "Infinity", float("inf"), True, None])
def test_to_minor_units_rejects(amount) -> None:
    with pytest.raises(InvalidAmountError):
        to_minor_units(amount)


def test_to_minor_units_is_bounded() -> None:
    assert to_minor_units("10000000000000") == MAX_MINOR_UNITS
    assert to_minor_units("-10000000000000") == -MAX_MINOR_UNITS

    for amount in ("10000000000000.01", "-10000000000000.01", Decimal("1e17"), "92233720368547758.07"):
        with pytest.raises(InvalidAmountError):
            to_minor_units(amount)


def test_float_sums_do_not_leak_into_minor_units() -> None:
    # 0.1 + 0.2 == 0.30000000000000004 as a float
    assert to_minor_units("0.1") + to_minor_units("0.2") == to_minor_units("0.3")


def test_from_minor_units() -> None:
    assert from_minor_units(6000) == Decimal("60.00")
    assert str(from_minor_units(-50000)) == "-500.00"
    assert str(from_minor_units(1)) == "0.01"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("10.256", "10.26"), ("10.254", "10.25"), ("-3.555", "-3.56"), ("0", "0.00"), ("10.255", "10.26")],
)
def test_round2(value: str, expected: str) -> None:
    assert round2(value) == Decimal(expected)


def test_to_reference_currency() -> None:
    assert to_reference_currency(100, "USD") == Decimal("100.00")
    assert to_reference_currency(4000, "UYU", 40) == Decimal("100.00")
    assert to_reference_currency(4000, "UYU", 50) == Decimal("80.00")
    assert to_reference_currency(1, "UYU", 40) == Decimal("0.03")


def test_reference_currency_is_configurable() -> None:
    assert to_reference_currency(100, "UYU", 40, reference_currency="UYU") == Decimal("100.00")
    assert to_reference_currency(100, "USD", Decimal("0.025"), reference_currency="UYU") == Decimal("4000.00")


def test_from_reference_currency() -> None:
    assert from_reference_currency(100, "USD") == Decimal("100.00")
    assert from_reference_currency(100, "UYU", 40) == Decimal("4000.00")
    assert from_reference_currency(Decimal("0.03"), "UYU", 40) == Decimal("1.20")


@pytest.mark.parametrize("rate", [None, 0, -40, "abc"])
def test_conversion_needs_a_positive_rate(rate) -> None:
    with pytest.raises(ValidationError) as excinfo:
        to_reference_currency(100, "UYU", rate)

    assert "rate" in excinfo.value.errors


def test_is_currency_code() -> None:
    assert is_currency_code("USD")
    assert is_currency_code("UYU")
    assert not is_currency_code("usd")
    assert not is_currency_code("DOLLARS")
    assert not is_currency_code(None)
