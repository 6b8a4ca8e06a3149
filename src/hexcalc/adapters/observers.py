"""Observer adapters.

- `LoggingObserver` writes each calculation to the ``hexcalc.observations``
  logger, so it ends up wherever logging is configured to go (console,
  flight recorder, ...).
- `ConsoleObserver` prints a trace line for each calculation to a Rich
  console on stderr, keeping stdout free for results.
- `NullObserver` does nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console

from hexcalc.interfaces.observer import CalculationObserver

if TYPE_CHECKING:
    from hexcalc.domain.calculation import Calculation

# pylint: disable=too-few-public-methods

OBSERVATIONS_LOGGER = "hexcalc.observations"


def describe(calculation: Calculation) -> str:
    """Render a calculation as ``operand1 op operand2 = result``."""
    return (
        f"{calculation.operand1} {calculation.operation} "
        f"{calculation.operand2} = {calculation.result}"
    )


class LoggingObserver(CalculationObserver):
    """Log every calculation at a fixed level."""

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self._logger = logger or logging.getLogger(OBSERVATIONS_LOGGER)
        self._level = level

    def observe(self, calculation: Calculation) -> None:
        self._logger.log(self._level, "Calculation: %s", describe(calculation))


class ConsoleObserver(CalculationObserver):
    """Print every calculation to a Rich console.

    Args:
        console: Console to print to. Defaults to a stderr console.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def observe(self, calculation: Calculation) -> None:
        self._console.print(
            f"[dim]trace[/dim] {describe(calculation)}", highlight=False
        )


class NullObserver(CalculationObserver):
    """Observer that ignores every calculation."""

    def observe(self, calculation: Calculation) -> None:
        return None
