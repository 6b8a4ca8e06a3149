"""Calculation store schema.

Defines the ``calculations`` table used by `SqlAlchemyCalculationStore`. One
row per saved calculation.

| Constraint                              | Purpose                          |
|-----------------------------------------|----------------------------------|
| PRIMARY KEY(calculation_id)             | identifier returned by `save`    |
| CHECK(operation IN ('+','-','*','/'))   | only the four supported symbols  |

Operands and result are stored as exact decimal text (see `ExactDecimal`).
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Index, String, Table, text

from hexcalc.adapters.db.metadata import metadata
from hexcalc.adapters.db.sa_types import ExactDecimal, UTCDateTime

__all__ = ["calculations"]

calculations = Table(
    "calculations",
    metadata,
    Column(
        "calculation_id",
        String(36),
        primary_key=True,
        comment="Store-generated identifier (ULID or UUID).",
    ),
    Column(
        "operand1",
        ExactDecimal(),
        nullable=False,
        comment="Left-hand operand, exact decimal text.",
    ),
    Column(
        "operand2",
        ExactDecimal(),
        nullable=False,
        comment="Right-hand operand, exact decimal text.",
    ),
    Column(
        "operation",
        String(1),
        nullable=False,
        comment="Operator symbol.",
    ),
    Column(
        "result",
        ExactDecimal(),
        nullable=False,
        comment="Result of the operation, exact decimal text.",
    ),
    Column(
        "recorded_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Server-assigned UTC timestamp.",
    ),
    CheckConstraint("operation IN ('+', '-', '*', '/')", name="known_operation"),
    Index("ix_calculations_recorded_at", "recorded_at"),
    comment="One row per completed calculation.",
)
