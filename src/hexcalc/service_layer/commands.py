"""Module defining Commands."""

from dataclasses import dataclass
from decimal import Decimal

DEFAULT_DIVISION_SCALE = 2


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class AddCommand(Command):
    """Command to add two operands."""

    operand1: Decimal
    operand2: Decimal


@dataclass(frozen=True)
class SubtractCommand(Command):
    """Command to subtract `operand2` from `operand1`."""

    operand1: Decimal
    operand2: Decimal


@dataclass(frozen=True)
class MultiplyCommand(Command):
    """Command to multiply two operands."""

    operand1: Decimal
    operand2: Decimal


@dataclass(frozen=True)
class DivideCommand(Command):
    """Command to divide `operand1` by `operand2`.

    `scale` is the number of fractional digits kept in the result.
    """

    operand1: Decimal
    operand2: Decimal
    scale: int = DEFAULT_DIVISION_SCALE
