"""Service layer handlers."""

from collections.abc import Callable
from typing import Any

from .calculator_handlers import COMMAND_HANDLERS as CALCULATOR_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., Any]] = {
    **CALCULATOR_COMMAND_HANDLERS,
}
