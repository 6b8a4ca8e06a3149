"""Contract tests for IdGenerator implementations that promise monotonic order."""

import concurrent.futures as cf
import threading

import pytest


@pytest.mark.parametrize("count", [2_000, 10_000])
def test_monotonic_order_single_thread(monotonic_id_generators, count):
    """IDs are lexicographically increasing when generated in a single thread."""
    ids = [monotonic_id_generators.new_id() for _ in range(count)]
    assert ids == sorted(ids), "IDs must be lexicographically increasing"
    assert len(set(ids)) == count


def test_monotonic_order_under_threads(monotonic_id_generators):
    """Ids taken under a shared lock come out in the order they were taken."""
    order_lock = threading.Lock()
    issued: list[str] = []

    def _take(_: int) -> None:
        with order_lock:
            issued.append(monotonic_id_generators.new_id())

    with cf.ThreadPoolExecutor(max_workers=16) as ex:
        list(ex.map(_take, range(8000)))

    assert issued == sorted(issued)
