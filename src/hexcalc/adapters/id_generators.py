"""ID generators used by the calculation stores."""

import threading
import uuid

from ulid import monotonic

from hexcalc.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component, so calculations saved with them sort in
    the order they were saved. This generator uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Randomly generated UUIDv4 identifiers.

    Not ordered in any way. This is the default for the in-memory store.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SequentialIdGenerator(IdGenerator):
    """Zero-padded sequential IDs ("0000000001", "0000000002", ...).

    Handy for tests and demos where predictable identifiers help.
    """

    def __init__(self, width: int = 10) -> None:
        self._lock = threading.Lock()
        self._counter = 0
        self._width = width

    def new_id(self) -> str:
        """Generate the next identifier in the sequence."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._width}d}"
