"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for an ID generator.

    Stores use an ID generator to mint the identifier returned from
    `CalculationStore.save`. Implementations must be safe to call from
    several threads at once.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
