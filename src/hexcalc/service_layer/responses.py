"""Responses returned by the calculator input port."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexcalc.domain.calculation import Calculation


@dataclass(frozen=True, slots=True)
class CalculationResponse:
    """Flat snapshot of a completed calculation.

    Decoupled from `Calculation` so the model can change without changing what
    callers of the input port receive.
    """

    operand1: Decimal
    operand2: Decimal
    operation: str
    result: Decimal

    @classmethod
    def from_calculation(cls, calculation: Calculation) -> CalculationResponse:
        """Build a response from a calculation."""
        return cls(
            operand1=calculation.operand1,
            operand2=calculation.operand2,
            operation=calculation.operation.value,
            result=calculation.result,
        )

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-ready mapping with every decimal in exact string form."""
        return {
            "operand1": str(self.operand1),
            "operand2": str(self.operand2),
            "operation": self.operation,
            "result": str(self.result),
        }
