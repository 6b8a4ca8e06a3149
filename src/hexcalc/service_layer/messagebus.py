"""Message bus implementation for handling commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from hexcalc.domain.errors import DomainError

if TYPE_CHECKING:
    from .commands import Command
    from .input_port import CalculatorInputPort

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The main responsibility of the message bus is to route commands to their
    appropriate handlers and hand the handler's result back to the caller. It
    also manages logging during the dispatch process: domain rejections (bad
    operands, division by zero) are logged at INFO, anything else with a
    traceback at ERROR. Additionally, it exposes
    the calculator the handlers were wired to, for convenience.

    Args:
        calculator: The calculator input port. Handlers should already have it
            injected; it is just also available here for convenience.
        command_handlers: A mapping of command types to their handlers.
            Note that handlers should be callables that accept a single command argument.
            Additional dependencies (i.e. calculator) should be injected via closures or
            other means.

    Note:
        This implementation is synchronous and dispatches each command to
        exactly one handler. The message bus serves as the main entrypoint to
        the service layer.
    """

    def __init__(
        self,
        calculator: CalculatorInputPort,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.calculator = calculator
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            Whatever the handler returns (a `CalculationResponse` for the
            calculator commands).

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except DomainError as e:
                logger.info(
                    "Command %s rejected by handler %s: %s", cmd, handler_name, e
                )
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., Any]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
