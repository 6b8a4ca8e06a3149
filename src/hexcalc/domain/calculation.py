"""Calculation model.

A `Calculation` is the immutable record of one completed arithmetic operation.
It is only ever produced by one of the four factories (`add`, `subtract`,
`multiply`, `divide`), which own the arithmetic and validation rules:

- Addition, subtraction and multiplication are exact. They run in an
  unbounded-precision decimal context, so no digit is ever rounded away
  (unlike the 28-digit default context of the `decimal` module).
- Division is rounded to a caller-supplied number of fractional digits using
  round-half-up (ties go away from zero). The quotient is computed on the
  operands' integer coefficients, so rounding is exact at any magnitude.

The only limit is the exponent range of `decimal` (`MAX_EMAX`/`MIN_EMIN`).
A result that falls outside it raises `ResultOutOfRange` instead of being
rounded.

Example:
    ```python
    >>> Calculation.add(Decimal("0.1"), Decimal("0.2")).result
    Decimal('0.3')
    >>> Calculation.divide(Decimal("10"), Decimal("3"), 4).result
    Decimal('3.3333')
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
)
from typing import Any

from .errors import DivisionByZero, InvalidOperand, InvalidScale, ResultOutOfRange
from .value_objects import Operation

OPERAND1 = "operand1"
OPERAND2 = "operand2"


@dataclass(frozen=True, slots=True)
class Calculation:
    """Immutable record of one completed arithmetic operation.

    Attributes:
        operand1: Left-hand operand.
        operand2: Right-hand operand.
        operation: Operator symbol of the operation that produced `result`.
        result: Outcome of applying `operation` to the operands.

    Note:
        Use the factories to compute a new calculation. The constructor is
        meant for adapters rehydrating a calculation computed earlier; it
        checks the operands and operation but does not recompute `result`.
    """

    operand1: Decimal
    operand2: Decimal
    operation: Operation
    result: Decimal

    def __post_init__(self) -> None:
        _require_operand(OPERAND1, self.operand1)
        _require_operand(OPERAND2, self.operand2)
        # accept the bare symbol ("+") as well as the enum member
        object.__setattr__(self, "operation", Operation(self.operation))

    # --------------------------------------------------------------------- #
    # Factories
    # --------------------------------------------------------------------- #

    @classmethod
    def add(cls, operand1: Decimal, operand2: Decimal) -> Calculation:
        """Add two decimals exactly.

        Raises:
            InvalidOperand: If either operand is absent or not a finite decimal.
            ResultOutOfRange: If the exact result is outside the decimal range.
        """
        _require_operands(operand1, operand2)
        result = _exact(Operation.ADD, operand1, operand2)
        return cls(operand1, operand2, Operation.ADD, result)

    @classmethod
    def subtract(cls, operand1: Decimal, operand2: Decimal) -> Calculation:
        """Subtract `operand2` from `operand1` exactly.

        Raises:
            InvalidOperand: If either operand is absent or not a finite decimal.
            ResultOutOfRange: If the exact result is outside the decimal range.
        """
        _require_operands(operand1, operand2)
        result = _exact(Operation.SUBTRACT, operand1, operand2)
        return cls(operand1, operand2, Operation.SUBTRACT, result)

    @classmethod
    def multiply(cls, operand1: Decimal, operand2: Decimal) -> Calculation:
        """Multiply two decimals exactly.

        Raises:
            InvalidOperand: If either operand is absent or not a finite decimal.
            ResultOutOfRange: If the exact result is outside the decimal range.
        """
        _require_operands(operand1, operand2)
        result = _exact(Operation.MULTIPLY, operand1, operand2)
        return cls(operand1, operand2, Operation.MULTIPLY, result)

    @classmethod
    def divide(cls, operand1: Decimal, operand2: Decimal, scale: int) -> Calculation:
        """Divide `operand1` by `operand2`, rounded half-up to `scale` digits.

        Args:
            operand1: Dividend.
            operand2: Divisor; must not compare equal to zero.
            scale: Number of fractional digits kept in the result (>= 0).

        Returns:
            A calculation whose result has exactly `scale` fractional digits.

        Raises:
            InvalidOperand: If either operand is absent or not a finite decimal.
            InvalidScale: If `scale` is not a non-negative integer.
            DivisionByZero: If `operand2` is zero.
            ResultOutOfRange: If `scale` or the operands' exponents leave the
                decimal range.
        """
        _require_operands(operand1, operand2)
        if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
            raise InvalidScale(scale)
        if operand2.is_zero():
            raise DivisionByZero(operand1)
        result = _divide_half_up(operand1, operand2, scale)
        return cls(operand1, operand2, Operation.DIVIDE, result)


# ============================================================================
#                               Helpers
# ============================================================================


def _exact_context() -> Context:
    """Return a decimal context in which add/subtract/multiply never round.

    `Inexact` is trapped so any rounding would surface as an exception
    rather than a silently truncated result.
    """
    return Context(
        prec=MAX_PREC,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, Inexact],
    )


def _exact(operation: Operation, operand1: Decimal, operand2: Decimal) -> Decimal:
    context = _exact_context()
    apply = {
        Operation.ADD: context.add,
        Operation.SUBTRACT: context.subtract,
        Operation.MULTIPLY: context.multiply,
    }[operation]
    try:
        return apply(operand1, operand2)
    except Inexact as e:
        # Overflow and Underflow are both Inexact
        raise ResultOutOfRange(operation, operand1, operand2) from e


def _require_operand(name: str, value: Any) -> None:
    if value is None:
        raise InvalidOperand(name)
    if not isinstance(value, Decimal) or not value.is_finite():
        raise InvalidOperand(name, value)


def _require_operands(operand1: Any, operand2: Any) -> None:
    _require_operand(OPERAND1, operand1)
    _require_operand(OPERAND2, operand2)


def _coefficient(value: Decimal) -> int:
    """Unsigned coefficient of `value` as an int, without going through `str`."""
    exponent = value.as_tuple().exponent
    return int(value.copy_abs().scaleb(-exponent, _exact_context()))


def _divide_half_up(dividend: Decimal, divisor: Decimal, scale: int) -> Decimal:
    """Return `dividend / divisor` rounded half-up to `scale` fractional digits.

    Both operands are written as `coefficient * 10**exponent`; the quotient
    scaled by `10**scale` is then a ratio of integers, which `divmod` rounds
    without any intermediate precision limit. Conversions between `int` and
    `Decimal` never pass through `str`, so they are not subject to the
    interpreter's int/str digit limit.
    """
    n_exp = int(dividend.as_tuple().exponent)
    d_exp = int(divisor.as_tuple().exponent)
    shift = n_exp - d_exp + scale
    if scale > MAX_EMAX or abs(shift) > MAX_EMAX:
        raise ResultOutOfRange(Operation.DIVIDE, dividend, divisor)

    numerator = _coefficient(dividend)
    denominator = _coefficient(divisor)
    if shift >= 0:
        numerator *= 10**shift
    else:
        denominator *= 10**-shift

    quotient, remainder = divmod(numerator, denominator)
    if 2 * remainder >= denominator:
        quotient += 1

    result = Decimal(quotient).scaleb(-scale, _exact_context())
    if quotient != 0 and dividend.is_signed() != divisor.is_signed():
        result = result.copy_negate()
    return result
