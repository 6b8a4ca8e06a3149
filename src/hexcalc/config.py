"""Configuration utilities for HEXCALC.

This module centralizes small helpers and constants related to application
configuration. Everything is read from the environment:

- ``HEXCALC_DB_URL``: SQLAlchemy URL of the durable calculation store. When
  unset, calculations are kept in memory for the life of the process.
- ``HEXCALC_OBSERVER``: which observer adapter to use (``logging``,
  ``console`` or ``none``). Defaults to ``logging``.
"""

import os
import sys
from enum import Enum
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "HEXCALC_DB_URL"
OBSERVER_ENV_VAR = "HEXCALC_OBSERVER"

ALEMBIC_URL_KEY = "sqlalchemy.url"
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"


class DatabaseUrlNotSetError(Exception):
    """Raised when the HEXCALC_DB_URL environment variable is not set."""


class UnknownObserverError(ValueError):
    """Raised when HEXCALC_OBSERVER names an observer that does not exist."""

    def __init__(self, name: str) -> None:
        choices = ", ".join(kind.value for kind in ObserverKind)
        super().__init__(f"Unknown observer {name!r}; expected one of: {choices}.")
        self.name = name


class ObserverKind(Enum):
    """Observer adapters selectable through configuration."""

    LOGGING = "logging"
    CONSOLE = "console"
    NONE = "none"


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `HEXCALC_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `HEXCALC_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def get_optional_db_url() -> str | None:
    """Return the database URL, or None when the in-memory store should be used."""
    return os.environ.get(DB_URL_ENV_VAR) or None


def get_observer_kind() -> ObserverKind:
    """Get the configured observer kind.

    Returns:
        The `ObserverKind` named by `HEXCALC_OBSERVER` (case-insensitive),
        `ObserverKind.LOGGING` if unset.

    Raises:
        UnknownObserverError: If the variable names an unknown observer.
    """
    raw = os.environ.get(OBSERVER_ENV_VAR, "").strip().lower()
    if not raw:
        return ObserverKind.LOGGING
    try:
        return ObserverKind(raw)
    except ValueError as e:
        raise UnknownObserverError(raw) from e


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for HEXCALC's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → HEXCALC's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///hexcalc.db`). Can be
            `None` (default) only in contexts where Alembic won't need to
            connect to the DB.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to HEXCALC's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("hexcalc.adapters.db.alembic")),
    )
    return cfg
