"""Unit tests for domain errors."""

from decimal import Decimal

import pytest

from hexcalc.domain.errors import (
    DivisionByZero,
    DomainError,
    InvalidOperand,
    InvalidScale,
    ResultOutOfRange,
)
from hexcalc.domain.value_objects import Operation

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "error",
    [InvalidOperand("operand1"), DivisionByZero(Decimal("1")), InvalidScale(-1)],
)
def test_errors_are_domain_errors(error):
    """Every calculation error derives from DomainError."""
    assert isinstance(error, DomainError)


def test_invalid_operand_messages():
    """The message depends on whether a value was given."""
    assert str(InvalidOperand("operand2")) == "Operand 'operand2' is required."
    assert "got Decimal('NaN')" in str(InvalidOperand("operand1", Decimal("NaN")))


def test_division_by_zero_keeps_dividend():
    """The dividend is available on the error and in its message."""
    error = DivisionByZero(Decimal("10.5"))
    assert error.dividend == Decimal("10.5")
    assert str(error) == "Cannot divide 10.5 by zero."
    assert isinstance(error, ZeroDivisionError)


def test_invalid_scale_message():
    """The offending scale is echoed back."""
    assert "-3" in str(InvalidScale(-3))


def test_result_out_of_range_names_the_calculation():
    """The operation and operands are kept on the error and in its message."""
    error = ResultOutOfRange(Operation.ADD, Decimal("9E+5"), Decimal("1"))
    assert isinstance(error, DomainError)
    assert (error.operation, error.operand1, error.operand2) == (
        Operation.ADD,
        Decimal("9E+5"),
        Decimal("1"),
    )
    assert str(error) == (
        "The result of 9E+5 + 1 is out of the representable decimal range."
    )
