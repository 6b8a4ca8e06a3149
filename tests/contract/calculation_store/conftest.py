"""Fixtures for calculation store contract tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from hexcalc.adapters.calculation_store import (
    InMemoryCalculationStore,
    SqlAlchemyCalculationStore,
)

if TYPE_CHECKING:
    from hexcalc.interfaces.calculation_store import CalculationStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest) -> Iterator[CalculationStore]:
    """Return an empty CalculationStore for the requested backend.

    Supported params:
      - `"memory"` → InMemoryCalculationStore
      - `"sqlite"` → SqlAlchemyCalculationStore on a migrated SQLite file

    The SQLite store uses a file (not :memory:) so every pooled connection,
    and therefore every thread, sees the same database.
    """
    match request.param:
        case "memory":
            yield InMemoryCalculationStore()
        case "sqlite":
            engine = request.getfixturevalue("sqlite_engine_file")
            yield SqlAlchemyCalculationStore(engine)
        case _:
            raise ValueError(f"unknown calculation store type: {request.param}")
