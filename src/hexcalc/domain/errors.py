"""Domain-layer error definitions."""

from typing import Any

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Calculation related errors
# ============================================================================


class InvalidOperand(DomainError):
    """Raised when an operand is absent or is not a finite decimal."""

    def __init__(self, name: str, value: Any = None) -> None:
        if value is None:
            message = f"Operand '{name}' is required."
        else:
            message = f"Operand '{name}' must be a finite decimal, got {value!r}."
        super().__init__(message)
        self.name = name
        self.value = value


class DivisionByZero(DomainError, ZeroDivisionError):
    """Raised when the divisor of a division compares equal to zero."""

    def __init__(self, dividend: Any) -> None:
        super().__init__(f"Cannot divide {dividend} by zero.")
        self.dividend = dividend


class InvalidScale(DomainError):
    """Raised when a division scale is not a non-negative integer."""

    def __init__(self, scale: Any) -> None:
        super().__init__(
            f"Scale must be a non-negative integer number of fractional digits, got {scale!r}."
        )
        self.scale = scale


class ResultOutOfRange(DomainError):
    """Raised when a result cannot be written as a decimal without rounding.

    Exponents are bounded (see `decimal.MAX_EMAX`); a sum or product past that
    bound, or a division whose scale reaches it, has no exact representation.
    """

    def __init__(self, operation: Any, operand1: Any, operand2: Any) -> None:
        super().__init__(
            f"The result of {operand1} {operation} {operand2} is out of the representable decimal range."
        )
        self.operation = operation
        self.operand1 = operand1
        self.operand2 = operand2
