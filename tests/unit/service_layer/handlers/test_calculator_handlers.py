"""Unit tests for the calculator command handlers, driven through the bus."""

from decimal import Decimal

import pytest

from hexcalc.service_layer import commands
from hexcalc.service_layer.handlers import COMMAND_HANDLERS
from hexcalc.service_layer.responses import CalculationResponse
from tests.unit.service_layer.fakes import (
    RecordingObserver,
    RecordingStore,
    bootstrap_test_bus,
)

# pylint: disable=magic-value-comparison

D = Decimal


def test_every_calculator_command_has_a_handler():
    """All four calculator commands are routed."""
    assert set(COMMAND_HANDLERS) >= {
        commands.AddCommand,
        commands.SubtractCommand,
        commands.MultiplyCommand,
        commands.DivideCommand,
    }


@pytest.mark.parametrize(
    "cmd, expected",
    [
        (commands.AddCommand(D("10.50"), D("5.25")), "15.75"),
        (commands.SubtractCommand(D("10.50"), D("5.25")), "5.25"),
        (commands.MultiplyCommand(D("10.50"), D("5.25")), "55.1250"),
        (commands.DivideCommand(D("10.50"), D("5.25")), "2.00"),
        (commands.DivideCommand(D("10"), D("3"), scale=4), "3.3333"),
    ],
)
def test_handlers_return_response(cmd, expected):
    """Handling a command yields the calculator's response."""
    bus = bootstrap_test_bus()
    response = bus.handle(cmd)
    assert isinstance(response, CalculationResponse)
    assert str(response.result) == expected


def test_handler_observes_and_stores():
    """The calculator behind the bus uses the injected ports."""
    observer, store = RecordingObserver(), RecordingStore()
    bus = bootstrap_test_bus(observer=observer, store=store)
    bus.handle(commands.AddCommand(D("1"), D("2")))
    assert len(observer.observed) == 1
    assert store.find_by_id("calc-1") == observer.observed[0]
