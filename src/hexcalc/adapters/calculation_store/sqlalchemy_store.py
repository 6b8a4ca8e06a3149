"""SQLAlchemy-backed CalculationStore adapter.

Persists calculations to the ``calculations`` table (see `.schema`). Each call
checks a connection out of the engine's pool and, for writes, runs in its own
transaction, so a single store instance can be shared between threads.

Database errors are mapped to `StoreUnavailableError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import insert, select
from sqlalchemy.exc import DBAPIError

from hexcalc.adapters.id_generators import ULIDGenerator
from hexcalc.domain.calculation import Calculation
from hexcalc.interfaces.calculation_store import CalculationStore, StoreUnavailableError

from .schema import calculations

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from hexcalc.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class SqlAlchemyCalculationStore(CalculationStore):
    """SQLAlchemy-backed CalculationStore.

    Args:
        engine: Engine bound to a database migrated to the latest schema.
        id_generator: Generator for new identifiers. Defaults to monotonic
            ULIDs so rows sort in save order.
    """

    def __init__(self, engine: Engine, id_generator: IdGenerator | None = None):
        self.engine = engine
        self._id_generator = id_generator or ULIDGenerator()

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def save(self, calculation: Calculation) -> str:
        calculation_id = self._id_generator.new_id()
        stmt = insert(calculations).values(
            calculation_id=calculation_id,
            operand1=calculation.operand1,
            operand2=calculation.operand2,
            operation=calculation.operation.value,
            result=calculation.result,
        )
        try:
            with self.engine.begin() as conn:
                conn.execute(stmt)
        except DBAPIError as e:  # OperationalError, IntegrityError, DataError, ...
            raise StoreUnavailableError(str(e)) from e
        logger.debug("Stored calculation %s", calculation_id)
        return calculation_id

    def find_by_id(self, calculation_id: str) -> Calculation | None:
        stmt = select(
            calculations.c.operand1,
            calculations.c.operand2,
            calculations.c.operation,
            calculations.c.result,
        ).where(calculations.c.calculation_id == calculation_id)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(stmt).mappings().one_or_none()
        except DBAPIError as e:
            raise StoreUnavailableError(str(e)) from e

        if row is None:
            return None
        return Calculation(**row)
