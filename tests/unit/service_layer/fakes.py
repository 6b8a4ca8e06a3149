"""Fake output ports for service layer tests.

The fakes share a `journal` list so tests can assert the order in which the
calculator talks to its ports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexcalc.bootstrap.bootstrap import build_message_bus
from hexcalc.interfaces.calculation_store import CalculationStore
from hexcalc.interfaces.observer import CalculationObserver
from hexcalc.service_layer.calculator import CalculatorService
from hexcalc.service_layer.handlers import COMMAND_HANDLERS

if TYPE_CHECKING:
    from hexcalc.domain.calculation import Calculation

# pylint: disable=too-few-public-methods


class RecordingObserver(CalculationObserver):
    """Observer that remembers what it saw, and can be told to fail."""

    def __init__(self, journal: list[str] | None = None, fail_with=None):
        self.journal = journal if journal is not None else []
        self.observed: list[Calculation] = []
        self.fail_with = fail_with

    def observe(self, calculation: Calculation) -> None:
        self.journal.append("observe")
        if self.fail_with is not None:
            raise self.fail_with
        self.observed.append(calculation)


class RecordingStore(CalculationStore):
    """Store that keeps saved calculations in a list, and can be told to fail."""

    def __init__(self, journal: list[str] | None = None, fail_with=None):
        self.journal = journal if journal is not None else []
        self.saved: list[Calculation] = []
        self.fail_with = fail_with

    def save(self, calculation: Calculation) -> str:
        self.journal.append("save")
        if self.fail_with is not None:
            raise self.fail_with
        self.saved.append(calculation)
        return f"calc-{len(self.saved)}"

    def find_by_id(self, calculation_id: str) -> Calculation | None:
        index = int(calculation_id.removeprefix("calc-")) - 1
        return self.saved[index] if 0 <= index < len(self.saved) else None


def bootstrap_test_bus(observer=None, store=None):
    """Build a message bus over a real calculator and recording ports."""
    calculator = CalculatorService(
        observer=observer or RecordingObserver(), store=store or RecordingStore()
    )
    return build_message_bus(calculator, COMMAND_HANDLERS)
