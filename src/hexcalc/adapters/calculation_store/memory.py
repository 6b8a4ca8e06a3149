"""In-memory implementation of the CalculationStore interface."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from hexcalc.adapters.id_generators import UUIDv4Generator
from hexcalc.interfaces.calculation_store import CalculationStore

if TYPE_CHECKING:
    from hexcalc.domain.calculation import Calculation
    from hexcalc.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class InMemoryCalculationStore(CalculationStore):
    """In-memory implementation of the CalculationStore interface.

    Calculations are kept in a dict keyed by generated identifiers (random
    UUIDv4 by default). A lock guards the dict so concurrent saves from
    parallel calls are safe.

    This implementation does not persist anything beyond the life of the
    process; it is intended for tests, demos and one-shot CLI runs.
    """

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        self._id_generator = id_generator or UUIDv4Generator()
        self._calculations: dict[str, Calculation] = {}
        self._lock = threading.Lock()

    def save(self, calculation: Calculation) -> str:
        with self._lock:
            calculation_id = self._id_generator.new_id()
            self._calculations[calculation_id] = calculation
        logger.debug("Stored calculation %s in memory", calculation_id)
        return calculation_id

    def find_by_id(self, calculation_id: str) -> Calculation | None:
        with self._lock:
            return self._calculations.get(calculation_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._calculations)
