"""Calculation store output port and related errors.

A store persists completed calculations and hands back an identifier that can
later be used to look them up. Identifier generation is the store's job, not
the caller's.

Implementations must tolerate concurrent `save` calls from several threads;
the calculator itself holds no lock around them.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexcalc.domain.calculation import Calculation


class CalculationStoreError(Exception):
    """Base class for calculation store errors."""


class StoreUnavailableError(CalculationStoreError):
    """Raised when the backing storage cannot be reached or rejects an operation."""


class CalculationStore(abc.ABC):
    """Contract for persisting and retrieving calculations by identifier."""

    @abc.abstractmethod
    def save(self, calculation: Calculation) -> str:
        """Persist a calculation.

        Args:
            calculation: The calculation to persist.

        Returns:
            str: A new identifier, unique within this store.

        Raises:
            StoreUnavailableError: If the backing storage fails.
        """

    @abc.abstractmethod
    def find_by_id(self, calculation_id: str) -> Calculation | None:
        """Look up a previously saved calculation.

        Args:
            calculation_id: Identifier returned by `save`.

        Returns:
            Calculation | None: The stored calculation, or None if the
                identifier is unknown.

        Raises:
            StoreUnavailableError: If the backing storage fails.
        """
