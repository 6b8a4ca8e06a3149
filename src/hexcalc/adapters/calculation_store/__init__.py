"""Calculation store adapters."""

from .memory import InMemoryCalculationStore
from .sqlalchemy_store import SqlAlchemyCalculationStore

__all__ = ["InMemoryCalculationStore", "SqlAlchemyCalculationStore"]
