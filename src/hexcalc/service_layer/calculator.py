"""Calculator service: the use-case orchestrator behind the input port.

Every operation runs the same three steps, in order, as a single synchronous
attempt:

1. compute a `Calculation` with the domain model;
2. hand it to the observer;
3. save it to the store;

and then returns a `CalculationResponse` snapshot of it.

A failure at any step propagates unchanged and skips the steps after it. In
particular a failing observer means the calculation is not stored. Nothing is
rolled back, since the computation itself is purely in-memory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hexcalc.domain.calculation import Calculation

from .input_port import CalculatorInputPort
from .responses import CalculationResponse

if TYPE_CHECKING:
    from hexcalc.interfaces.calculation_store import CalculationStore
    from hexcalc.interfaces.observer import CalculationObserver

    from .commands import AddCommand, DivideCommand, MultiplyCommand, SubtractCommand

logger = logging.getLogger(__name__)


class CalculatorService(CalculatorInputPort):
    """Calculator use-cases wired to an observer and a store.

    Args:
        observer: Output port notified of every completed calculation.
        store: Output port that persists every completed calculation.

    Note:
        The service keeps no state besides the two ports, so one instance can
        serve concurrent callers as long as the ports themselves can.
    """

    def __init__(self, observer: CalculationObserver, store: CalculationStore) -> None:
        self.observer = observer
        self.store = store

    def perform_addition(self, command: AddCommand) -> CalculationResponse:
        logger.info("Performing addition: %s + %s", command.operand1, command.operand2)
        calculation = Calculation.add(command.operand1, command.operand2)
        return self._complete(calculation)

    def perform_subtraction(self, command: SubtractCommand) -> CalculationResponse:
        logger.info(
            "Performing subtraction: %s - %s", command.operand1, command.operand2
        )
        calculation = Calculation.subtract(command.operand1, command.operand2)
        return self._complete(calculation)

    def perform_multiplication(self, command: MultiplyCommand) -> CalculationResponse:
        logger.info(
            "Performing multiplication: %s * %s", command.operand1, command.operand2
        )
        calculation = Calculation.multiply(command.operand1, command.operand2)
        return self._complete(calculation)

    def perform_division(self, command: DivideCommand) -> CalculationResponse:
        logger.info(
            "Performing division: %s / %s (scale: %s)",
            command.operand1,
            command.operand2,
            command.scale,
        )
        calculation = Calculation.divide(
            command.operand1, command.operand2, command.scale
        )
        return self._complete(calculation)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _complete(self, calculation: Calculation) -> CalculationResponse:
        """Run the side effects for a computed calculation and build the response."""
        self.observer.observe(calculation)
        calculation_id = self.store.save(calculation)
        logger.info("Saved calculation as %s", calculation_id)
        return CalculationResponse.from_calculation(calculation)
