"""HEXCALC calculator commands.

The CLI input adapter for the calculator use-cases:

- ``hexcalc add A B``, ``hexcalc subtract A B``, ``hexcalc multiply A B``
- ``hexcalc divide A B [--scale N]`` (default scale 2, round-half-up)
- ``hexcalc show ID`` looks up a stored calculation

Operands are parsed into exact decimals (see `DecimalParamType`); bad operands
are usage errors (exit code 2). Domain failures such as division by zero and
store failures are reported on stderr with exit code 1.

Results go to **stdout**, either as one ``A op B = R`` line or, with
``--json``, as a JSON object whose decimals are strings (so no digit is lost
to a float round-trip).

Negative operands can be given directly (``hexcalc add -5 3``).

Note:
    Without ``HEXCALC_DB_URL`` calculations are stored in memory and vanish
    when the command exits, so ``show`` is only useful with a database.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import click

from hexcalc import config
from hexcalc.bootstrap import AppContainer, bootstrap
from hexcalc.domain.errors import DomainError
from hexcalc.interfaces.calculation_store import CalculationStoreError
from hexcalc.service_layer import commands
from hexcalc.service_layer.responses import CalculationResponse

from .helpers import DECIMAL

if TYPE_CHECKING:
    from hexcalc.service_layer.commands import Command

logger = logging.getLogger(__name__)

CONTAINER_KEY = "container"

# allow negative operands such as "-5" to be read as arguments, not options
OPERAND_CONTEXT_SETTINGS = {"ignore_unknown_options": True}


def get_container(ctx: click.Context) -> AppContainer:
    """Return the application container, bootstrapping it on first use.

    A container already stored under ``ctx.obj["container"]`` (e.g. one
    injected by tests through ``CliRunner.invoke(obj=...)``) is reused.
    """
    obj = ctx.ensure_object(dict)
    if (container := obj.get(CONTAINER_KEY)) is None:
        try:
            container = bootstrap()
        except config.UnknownObserverError as e:
            raise click.ClickException(str(e)) from e
        obj[CONTAINER_KEY] = container
    return container


def render(response: CalculationResponse, as_json: bool) -> None:
    """Write a response to stdout."""
    if as_json:
        click.echo(json.dumps(response.to_dict()))
    else:
        click.echo(
            f"{response.operand1} {response.operation} "
            f"{response.operand2} = {response.result}"
        )


def dispatch(ctx: click.Context, cmd: Command, as_json: bool) -> None:
    """Send a command through the message bus and render its response."""
    container = get_container(ctx)
    try:
        response = container.message_bus.handle(cmd)
    except (DomainError, CalculationStoreError) as e:
        raise click.ClickException(str(e)) from e
    render(response, as_json)


def operand_arguments(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the OPERAND1/OPERAND2 arguments and the --json flag."""
    fn = click.option(
        "--json", "as_json", is_flag=True, help="Print the result as JSON."
    )(fn)
    fn = click.argument("operand2", type=DECIMAL)(fn)
    fn = click.argument("operand1", type=DECIMAL)(fn)
    return fn


@click.command(context_settings=OPERAND_CONTEXT_SETTINGS)
@operand_arguments
@click.pass_context
def add(ctx: click.Context, operand1: Decimal, operand2: Decimal, as_json: bool):
    """Add OPERAND2 to OPERAND1 exactly."""
    dispatch(ctx, commands.AddCommand(operand1, operand2), as_json)


@click.command(context_settings=OPERAND_CONTEXT_SETTINGS)
@operand_arguments
@click.pass_context
def subtract(ctx: click.Context, operand1: Decimal, operand2: Decimal, as_json: bool):
    """Subtract OPERAND2 from OPERAND1 exactly."""
    dispatch(ctx, commands.SubtractCommand(operand1, operand2), as_json)


@click.command(context_settings=OPERAND_CONTEXT_SETTINGS)
@operand_arguments
@click.pass_context
def multiply(ctx: click.Context, operand1: Decimal, operand2: Decimal, as_json: bool):
    """Multiply OPERAND1 by OPERAND2 exactly."""
    dispatch(ctx, commands.MultiplyCommand(operand1, operand2), as_json)


@click.command(context_settings=OPERAND_CONTEXT_SETTINGS)
@operand_arguments
@click.option(
    "--scale",
    "-s",
    type=int,
    default=commands.DEFAULT_DIVISION_SCALE,
    show_default=True,
    help="Number of fractional digits to keep (rounded half-up).",
)
@click.pass_context
def divide(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    operand1: Decimal,
    operand2: Decimal,
    as_json: bool,
    scale: int,
):
    """Divide OPERAND1 by OPERAND2, rounded half-up to --scale digits."""
    dispatch(ctx, commands.DivideCommand(operand1, operand2, scale), as_json)


@click.command()
@click.argument("calculation_id")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def show(ctx: click.Context, calculation_id: str, as_json: bool):
    """Show the stored calculation CALCULATION_ID."""
    store = get_container(ctx).store
    try:
        calculation = store.find_by_id(calculation_id)
    except CalculationStoreError as e:
        raise click.ClickException(str(e)) from e
    if calculation is None:
        raise click.ClickException(f"No calculation found with id {calculation_id!r}.")
    render(CalculationResponse.from_calculation(calculation), as_json)


CALCULATOR_COMMANDS = (add, subtract, multiply, divide, show)
