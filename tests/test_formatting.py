"""Unit tests for core/formatting.py."""
import math
from decimal import Decimal

import pytest

from pagseguro_checkout.core.formatting import format_amount, format_quantity


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, "10.00"),
        (10.0, "10.00"),
        (1234.5, "1234.50"),
        (1234567.891, "1234567.89"),
        (0.1 + 0.2, "0.30"),
        (2.675, "2.68"),
        (Decimal("99.999"), "100.00"),
        (-5.5, "-5.50"),
        (-0.001, "0.00"),
        (0, "0.00"),
    ],
)
def test_format_amount(value, expected):
    assert format_amount(value) == expected


def test_format_amount_has_no_separators():
    text = format_amount(1234567.5)
    assert "," not in text
    assert text.count(".") == 1
    assert len(text.split(".")[1]) == 2


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, Decimal("NaN")])
def test_format_amount_rejects_non_finite(value):
    with pytest.raises(ValueError):
        format_amount(value)


@pytest.mark.parametrize("value", ["10.00", None, True])
def test_format_amount_rejects_non_numbers(value):
    with pytest.raises(TypeError):
        format_amount(value)


def test_format_quantity():
    assert format_quantity(1) == "1"
    assert format_quantity(250) == "250"


@pytest.mark.parametrize("value", [1.5, "3", False])
def test_format_quantity_rejects_non_integers(value):
    with pytest.raises(TypeError):
        format_quantity(value)


@pytest.mark.parametrize("value", [1e30, 10**40, Decimal("1E+50")])
def test_format_amount_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        format_amount(value)
