"""Create calculations table

Revision ID: 3f9c2a71d0e4
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from hexcalc.adapters.db.sa_types import ExactDecimal, UTCDateTime

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f9c2a71d0e4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "calculations",
        sa.Column(
            "calculation_id",
            sa.String(length=36),
            nullable=False,
            comment="Store-generated identifier (ULID or UUID).",
        ),
        sa.Column(
            "operand1",
            ExactDecimal(),
            nullable=False,
            comment="Left-hand operand, exact decimal text.",
        ),
        sa.Column(
            "operand2",
            ExactDecimal(),
            nullable=False,
            comment="Right-hand operand, exact decimal text.",
        ),
        sa.Column(
            "operation",
            sa.String(length=1),
            nullable=False,
            comment="Operator symbol.",
        ),
        sa.Column(
            "result",
            ExactDecimal(),
            nullable=False,
            comment="Result of the operation, exact decimal text.",
        ),
        sa.Column(
            "recorded_at",
            UTCDateTime(),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Server-assigned UTC timestamp.",
        ),
        sa.CheckConstraint(
            "operation IN ('+', '-', '*', '/')",
            name=op.f("ck_calculations_known_operation"),
        ),
        sa.PrimaryKeyConstraint("calculation_id", name=op.f("pk_calculations")),
        comment="One row per completed calculation.",
    )
    op.create_index(
        op.f("ix_calculations_recorded_at"),
        "calculations",
        ["recorded_at"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_calculations_recorded_at"), table_name="calculations")
    op.drop_table("calculations")
