"""Observer output port.

An observer is told about every calculation the calculator completes. What it
does with it (log it, print it, emit a metric, nothing at all) is up to the
adapter. The calculator ignores any return value, but an exception raised by
`observe` propagates to the caller and prevents the calculation from being
stored.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexcalc.domain.calculation import Calculation

# pylint: disable=too-few-public-methods


class CalculationObserver(abc.ABC):
    """Contract for a sink that is notified of completed calculations."""

    @abc.abstractmethod
    def observe(self, calculation: Calculation) -> None:
        """Notify the observer of a completed calculation.

        Args:
            calculation: The calculation that was just computed.
        """
