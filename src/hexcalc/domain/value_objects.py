"""Module including value objects used across the domain layer."""

from enum import Enum


class Operation(str, Enum):
    """Enumeration of supported arithmetic operations, keyed by operator symbol"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def __str__(self) -> str:
        return self.value
