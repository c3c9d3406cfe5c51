import logging
import typing as t

import click
from click import echo

import refspec.clickExt as clickExt
from refspec.cli import cli
from refspec.config import Config
from refspec.config import pass_config
from refspec.errors import Unclassifiable
from refspec.formatting import format_columns
from refspec.formatting import format_name
from refspec.refname import is_valid_name
from refspec.spec import RefSpecRef
from refspec.types import Operation

logger = logging.getLogger(__name__)


@cli.command(no_args_is_help=True)
@clickExt.operation_option()
@clickExt.refspecs()
def parse(operation: Operation, refspecs: t.Tuple[RefSpecRef, ...]):
    """Show the parts of each refspec."""
    for i, spec in enumerate(refspecs):
        if i:
            echo()
        echo(
            format_columns(
                {
                    "refspec": spec,
                    "operation": operation,
                    "mode": spec.mode,
                    "source": format_name(spec.source),
                    "destination": format_name(spec.destination),
                }
            )
        )


def validate_fetch_default(ctx, param, value: t.Optional[str]):
    if value is None:
        return None
    if "*" in value or not is_valid_name(value.encode()):
        raise click.BadParameter(f"'{value}' is not a valid reference name.")
    return value


@cli.command(no_args_is_help=True)
@clickExt.operation_option()
@click.option(
    "--fetch-default",
    metavar="NAME",
    callback=validate_fetch_default,
    help="Reference fetched by an empty fetch refspec (default from config).",
)
@clickExt.refspecs()
@pass_config
def classify(
    config: Config,
    operation: Operation,
    fetch_default: t.Optional[str],
    refspecs: t.Tuple[RefSpecRef, ...],
):
    """Show the instruction each refspec stands for."""
    default = fetch_default.encode() if fetch_default else config.fetch_default_name
    for spec in refspecs:
        try:
            instruction = spec.instruction(fetch_default=default)
        except Unclassifiable as err:
            raise click.ClickException(f"Cannot {operation} {err}")
        logger.debug(f"Classified '{spec}' as {instruction!r}.")
        echo(instruction)


@cli.command("format", no_args_is_help=True)
@clickExt.operation_option()
@clickExt.refspecs()
def format_(operation: Operation, refspecs: t.Tuple[RefSpecRef, ...]):
    """Print each refspec in its canonical form.

    Shorthands are expanded and sigils normalized, so the output parses to the
    same refspec.
    """
    for spec in refspecs:
        echo(spec)


@cli.command(no_args_is_help=True)
@clickExt.operation_option()
@clickExt.refspecs()
def prefixes(operation: Operation, refspecs: t.Tuple[RefSpecRef, ...]):
    """Print the ref prefixes a remote needs to advertise for the refspecs.

    Each prefix is printed once, in the order they were first found.
    """
    out: t.List[bytes] = []
    for spec in refspecs:
        spec.expand_prefixes(out)
    for prefix in dict.fromkeys(out):
        echo(format_name(prefix))
