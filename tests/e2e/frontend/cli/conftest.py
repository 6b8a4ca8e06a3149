"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, fixtures to register it, a CliRunner, an isolated filesystem,
and a migrated SQLite database exported through HEXCALC_DB_URL.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from hexcalc.entrypoints.cli.main import hexcalc

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'hexcalc.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("hexcalc.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections.

    Click-Extra keeps commands in help sections as well as in
    `group.commands`; both are cleaned so the test command cannot leak.
    """
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `hexcalc` for the duration of a test."""
    hexcalc.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(hexcalc, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def db_env(sqlite_engine_file, sqlite_url) -> dict[str, str]:
    """Environment pointing the CLI at a migrated SQLite database.

    Depends on `sqlite_engine_file` so the schema exists before the CLI runs.
    """
    return {"HEXCALC_DB_URL": sqlite_url}
