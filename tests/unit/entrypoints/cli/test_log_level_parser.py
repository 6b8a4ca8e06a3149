"""Unit tests for the -L/--logger-level option parser."""

import logging
import types

import click
import pytest

from hexcalc.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

# ctx and param are unused by the callback; a stub stands in for click's context.
CTX = types.SimpleNamespace()


def test_empty_uses_library_defaults():
    """With nothing given, only the library defaults apply."""
    assert parse_log_level(CTX, None, ()) == DEFAULT_LIB_LEVELS


def test_defaults_are_not_mutated():
    """Overrides do not leak into the module-level defaults."""
    parse_log_level(CTX, None, ("sqlalchemy=DEBUG",))
    assert DEFAULT_LIB_LEVELS["sqlalchemy"] == logging.WARNING


def test_later_items_win():
    """Repeated names keep the last level given."""
    out = parse_log_level(
        CTX, None, ("hexcalc=INFO", "alembic=ERROR", "hexcalc=DEBUG")
    )
    assert out["hexcalc"] == logging.DEBUG
    assert out["alembic"] == logging.ERROR


@pytest.mark.parametrize(
    "value",
    [
        "hexcalc.observations=warning, sqlalchemy=INFO",
        ("hexcalc.observations=warning sqlalchemy=info",),
    ],
    ids=["env-string", "single-flag-with-spaces"],
)
def test_splits_on_commas_and_whitespace(value):
    """Env-var style lists are split on commas and spaces, case-insensitively."""
    out = parse_log_level(CTX, None, value)
    assert out["hexcalc.observations"] == logging.WARNING
    assert out["sqlalchemy"] == logging.INFO


def test_missing_equals_raises():
    """Items without NAME=LEVEL are rejected."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(CTX, None, ("hexcalc",))


def test_unknown_level_raises():
    """Unknown level names are rejected."""
    with pytest.raises(click.BadParameter, match="Invalid log level: LOUD"):
        parse_log_level(CTX, None, ("hexcalc=LOUD",))
