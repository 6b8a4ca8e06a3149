"""Unit tests for the DECIMAL click parameter type."""

from decimal import Decimal

import click
import pytest

from hexcalc.entrypoints.cli.helpers import DECIMAL

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0.1", "0.1"),
        ("10.50", "10.50"),
        ("-5", "-5"),
        (" 3.0 ", "3.0"),
        ("1e3", "1E+3"),
    ],
)
def test_parses_exact_text(text, expected):
    """Operands are parsed from text, not through float."""
    value = DECIMAL.convert(text, None, None)
    assert isinstance(value, Decimal)
    assert str(value) == expected


def test_decimal_passes_through():
    """An already-parsed Decimal (e.g. a default) is accepted as-is."""
    value = Decimal("2.50")
    assert DECIMAL.convert(value, None, None) is value


@pytest.mark.parametrize("text", ["abc", "", "1,5", "1e"])
def test_rejects_unparsable_text(text):
    """Garbage is a usage error."""
    with pytest.raises(click.BadParameter, match="is not a valid decimal number"):
        DECIMAL.convert(text, None, None)


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-inf", "sNaN"])
def test_rejects_non_finite(text):
    """NaN and infinities are refused."""
    with pytest.raises(click.BadParameter, match="is not a finite decimal number"):
        DECIMAL.convert(text, None, None)


def test_name_in_help_metavar():
    """The type is named for help output."""
    assert DECIMAL.name == "decimal"
