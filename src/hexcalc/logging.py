"""Logging setup for the HEXCALC CLI.

stdout carries calculation results only, so every log record goes to stderr:

- the console handler (Rich) shows records at the level picked with
  ``-v``/``-q``, marking records from other libraries with a ``[name]`` tag;
- the optional flight recorder keeps the last DEBUG records in memory and
  dumps them to a file once a WARNING shows up (or on exit when forced).

`log_startup` then records which observer and store this run will use, which
is what most bug reports need to know first.
"""

from __future__ import annotations

import decimal
import logging
import sys
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from hexcalc import config

if TYPE_CHECKING:
    from logging import Logger
    from pathlib import Path

# pylint: disable=too-few-public-methods

PROJECT_LOGGER = "hexcalc"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def logger_prefix(name: str) -> str:
    """Console tag for records of logger `name`.

    Example:
        ```python
        >>> logger_prefix("sqlalchemy.engine.Engine")
        '[sqlalchemy]'
        >>> logger_prefix("hexcalc.service_layer.calculator")
        ''
        ```
    """
    top = name.partition(".")[0]
    return "" if top == PROJECT_LOGGER else f"[{top}]"


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to the record's console tag; never drops a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.prefix = logger_prefix(record.name)
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; ``--debug`` forces DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of the short third-party tag.
        color: Mirrors click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: `capacity` buffered records dumped to `path`.

    The file is truncated on each run and only created on the first flush,
    so a run that never warns leaves no log behind.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def describe_observer() -> str:
    """Name of the configured observer, or the raw value marked unknown."""
    try:
        return config.get_observer_kind().value
    except config.UnknownObserverError as e:
        # reported properly once a calculator command bootstraps
        return f"{e.name} (unknown)"


def describe_store() -> str:
    """``memory``, or the configured database URL with its password hidden."""
    if (url := config.get_optional_db_url()) is None:
        return "memory"
    try:
        return make_url(url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<invalid HEXCALC_DB_URL>"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    flight_recorder: MemoryHandler | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the run's configuration: one INFO summary, then DEBUG details.

    Args:
        logger: Logger to write to.
        app_version: HEXCALC version.
        level: Effective console level.
        flight_recorder: The flight recorder handler, if enabled.
        logger_levels: Per-logger level overrides from ``-L``.
    """
    store = describe_store()
    logger.info(
        "HEXCALC %s (observer=%s, store=%s, console=%s, flight-recorder=%s)",
        app_version,
        describe_observer(),
        store,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug(
        "Python: %s, decimal: %s (libmpdec %s)",
        sys.version.split()[0],
        decimal.__version__,
        getattr(decimal, "__libmpdec_version__", "n/a"),
    )
    if store != "memory":
        logger.debug(
            "SQLAlchemy: %s, Alembic: %s", sqlalchemy.__version__, alembic.__version__
        )
    if flight_recorder is not None:
        target = flight_recorder.target
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            getattr(target, "baseFilename", "<none>"),
            flight_recorder.capacity,
            flight_recorder.flushOnClose,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
