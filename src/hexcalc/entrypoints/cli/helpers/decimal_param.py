"""Click parameter type for exact decimal operands.

Operands arrive as text and are parsed straight into `decimal.Decimal`, never
through `float`, so ``0.1`` means exactly one tenth. Text that is not a finite
decimal number (``abc``, ``NaN``, ``Infinity``, ``1e``) is rejected as a usage
error naming the offending parameter.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import click


class DecimalParamType(click.ParamType):
    """Convert a CLI value into a finite `Decimal`."""

    name = "decimal"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Decimal:
        if isinstance(value, Decimal):
            parsed = value
        else:
            try:
                parsed = Decimal(str(value).strip())
            except InvalidOperation:
                self.fail(f"{value!r} is not a valid decimal number.", param, ctx)
        if not parsed.is_finite():
            self.fail(f"{value!r} is not a finite decimal number.", param, ctx)
        return parsed


DECIMAL = DecimalParamType()
