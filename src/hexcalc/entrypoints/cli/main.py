"""HEXCALC CLI entry point.

Defines the top-level ``hexcalc`` command (via Click-Extra), configures
logging for every subcommand, and registers the subcommands:

- ``hexcalc add|subtract|multiply|divide``: exact decimal arithmetic.
- ``hexcalc show``: look up a stored calculation.
- ``hexcalc db``: forward-only database management (upgrade/current/heads/history/status).

Examples
    $ hexcalc add 0.1 0.2
    0.1 + 0.2 = 0.3
    $ hexcalc divide 10 3 --scale 4 --json
    {"operand1": "10", "operand2": "3", "operation": "/", "result": "3.3333"}
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from hexcalc import __version__
from hexcalc.logging import config_console_handler, config_flight_recorder, log_startup

from .calculator import CALCULATOR_COMMANDS
from .db import db as db_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """HEXCALC command-line interface.

    HEXCALC performs exact decimal arithmetic: sums, differences and products
    never lose a digit, and quotients are rounded half-up to the number of
    fractional digits you ask for. Every calculation is traced and stored, in
    memory by default or in the database named by HEXCALC_DB_URL.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Decimal: " + hyperlink("https://docs.python.org/3/library/decimal.html"),
        "  Alembic: " + hyperlink("https://alembic.sqlalchemy.org/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("hexcalc", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="HEXCALC_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="HEXCALC_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via HEXCALC_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "and writes them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set. Console verbosity is unchanged."
    ),
    default=True,
    envvar="HEXCALC_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar="HEXCALC_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight-recorder. Repeatable (e.g. -L sqlalchemy=INFO "
        "-L hexcalc.observations=WARNING) or via HEXCALC_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    envvar="HEXCALC_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def hexcalc(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """HEXCALC command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) flight recorder
    recorder = None
    if flight_recorder:
        recorder = config_flight_recorder(
            path=log_path,
            capacity=flight_recorder_capacity,
            flush_on_close=force_flush_flight_recorder,
        )
        handlers.append(recorder)

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        flight_recorder=recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for _command in CALCULATOR_COMMANDS:
    hexcalc.add_command(_command)
hexcalc.add_command(db_group)
