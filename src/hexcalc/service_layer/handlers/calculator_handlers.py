"""Handlers routing calculator commands to the calculator input port."""

from collections.abc import Callable
from typing import Any

from hexcalc.service_layer import commands
from hexcalc.service_layer.input_port import CalculatorInputPort
from hexcalc.service_layer.responses import CalculationResponse


def add(
    cmd: commands.AddCommand, calculator: CalculatorInputPort
) -> CalculationResponse:
    """Add two operands."""
    return calculator.perform_addition(cmd)


def subtract(
    cmd: commands.SubtractCommand, calculator: CalculatorInputPort
) -> CalculationResponse:
    """Subtract one operand from another."""
    return calculator.perform_subtraction(cmd)


def multiply(
    cmd: commands.MultiplyCommand, calculator: CalculatorInputPort
) -> CalculationResponse:
    """Multiply two operands."""
    return calculator.perform_multiplication(cmd)


def divide(
    cmd: commands.DivideCommand, calculator: CalculatorInputPort
) -> CalculationResponse:
    """Divide one operand by another."""
    return calculator.perform_division(cmd)


COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    commands.AddCommand: add,
    commands.SubtractCommand: subtract,
    commands.MultiplyCommand: multiply,
    commands.DivideCommand: divide,
}
