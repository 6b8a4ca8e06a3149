"""Global pytest fixtures and hooks for HEXCALC."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.calculations",
]

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# top-level test folder -> marker applied to every test inside it
SUITE_MARKERS = {
    "unit": pytest.mark.unit,
    "contract": pytest.mark.contract,
    "integration": pytest.mark.integration,
    "functional": pytest.mark.functional,
    "e2e": pytest.mark.e2e,
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test with the suite it lives in, unless already marked."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        suite = path.relative_to(TESTS_ROOT).parts[0]
        if (mark := SUITE_MARKERS.get(suite)) is None:
            continue
        if not any(marker.name == mark.name for marker in item.iter_markers()):
            item.add_marker(mark)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's HEXCALC_* environment out of every test."""
    for name in (
        "HEXCALC_DB_URL",
        "HEXCALC_OBSERVER",
        "HEXCALC_LOGGER_LEVELS",
        "HEXCALC_LOG_PATH",
        "HEXCALC_FLIGHT_RECORDER",
        "HEXCALC_FORCE_FLUSH_FLIGHT_RECORDER",
    ):
        monkeypatch.delenv(name, raising=False)
