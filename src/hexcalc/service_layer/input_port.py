"""Calculator input port.

The operation surface that input adapters (the CLI, or any other front end)
call into. One method per arithmetic operation; each takes the matching
command and returns a `CalculationResponse`. Calls are synchronous and hold no
state between them, so concurrent calls are independent.
"""

import abc

from .commands import AddCommand, DivideCommand, MultiplyCommand, SubtractCommand
from .responses import CalculationResponse


class CalculatorInputPort(abc.ABC):
    """Contract for the calculator use-cases."""

    @abc.abstractmethod
    def perform_addition(self, command: AddCommand) -> CalculationResponse:
        """Add the command's operands."""

    @abc.abstractmethod
    def perform_subtraction(self, command: SubtractCommand) -> CalculationResponse:
        """Subtract the command's second operand from its first."""

    @abc.abstractmethod
    def perform_multiplication(self, command: MultiplyCommand) -> CalculationResponse:
        """Multiply the command's operands."""

    @abc.abstractmethod
    def perform_division(self, command: DivideCommand) -> CalculationResponse:
        """Divide the command's first operand by its second, rounded to its scale."""
