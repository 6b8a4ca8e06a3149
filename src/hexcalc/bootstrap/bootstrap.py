"""Bootstrap the message bus with handlers, the calculator and its adapters."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hexcalc import config
from hexcalc.adapters.calculation_store import (
    InMemoryCalculationStore,
    SqlAlchemyCalculationStore,
)
from hexcalc.adapters.db.engine import make_engine
from hexcalc.adapters.observers import ConsoleObserver, LoggingObserver, NullObserver
from hexcalc.service_layer.calculator import CalculatorService
from hexcalc.service_layer.handlers import COMMAND_HANDLERS
from hexcalc.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from hexcalc.interfaces.calculation_store import CalculationStore
    from hexcalc.interfaces.observer import CalculationObserver
    from hexcalc.service_layer.commands import Command
    from hexcalc.service_layer.input_port import CalculatorInputPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    store: CalculationStore


def build_observer(kind: config.ObserverKind) -> CalculationObserver:
    """Build the observer adapter for the given kind."""
    match kind:
        case config.ObserverKind.CONSOLE:
            return ConsoleObserver()
        case config.ObserverKind.NONE:
            return NullObserver()
        case _:
            return LoggingObserver()


def build_store(url: str | None) -> CalculationStore:
    """Build a SQLAlchemy-backed store for `url`, or an in-memory one if None."""
    if url is None:
        return InMemoryCalculationStore()
    return SqlAlchemyCalculationStore(make_engine(url))


def build_message_bus(
    calculator: CalculatorInputPort,
    command_handlers: dict[type[Command], Callable[..., Any]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"calculator": calculator}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        calculator,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    observer: CalculationObserver | None = None,
    store: CalculationStore | None = None,
) -> AppContainer:
    """Wire the calculator to its observer and store and put a message bus in front.

    Adapters not passed in are built from configuration (`HEXCALC_OBSERVER`,
    `HEXCALC_DB_URL`).
    """
    if observer is None:
        observer = build_observer(config.get_observer_kind())
    if store is None:
        store = build_store(config.get_optional_db_url())
    logger.debug(
        "Bootstrapping with observer=%s, store=%s",
        type(observer).__name__,
        type(store).__name__,
    )

    calculator = CalculatorService(observer=observer, store=store)
    message_bus = build_message_bus(calculator, COMMAND_HANDLERS)

    return AppContainer(message_bus=message_bus, store=store)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return lambda message: handler(message, **deps)
