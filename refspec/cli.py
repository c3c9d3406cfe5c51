#!/usr/bin/env python
import logging
import os
import typing as t
from importlib import import_module

import click

import refspec.clickExt as clickExt
from refspec.config import load_config
from refspec.logging import install_handler


# This should be the root module logger, even though __name__ is 'refspec.cli'
logger = logging.getLogger("refspec")


@click.group(
    cls=clickExt.CatchErrorsGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.pass_context
@click.version_option()
def cli(ctx: click.Context):
    """Parse git refspecs and show what they do."""
    # Logging should not be setup in the global scope or it breaks pytest log capturing
    install_handler(logger)

    ctx.obj = load_config()


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("command", nargs=-1)
@click.pass_context
def help(ctx: click.Context, command: t.List[str]):
    """Display help text for a command."""
    group = cli
    cmd_path = []
    for cmd_name in command:
        cmd_path.append(cmd_name)
        cmd = group.get_command(ctx, cmd_name)
        if not cmd:
            err_msg = "No help entry for '{}'.".format(" ".join(cmd_path))
            raise click.BadArgumentUsage(err_msg, ctx)

        if isinstance(cmd, click.Group):
            group = cmd
            continue
        else:
            # ctx currently thinks it's for the help command, this corrects the usage text
            ctx.info_name = " ".join(cmd_path)
            click.echo(cmd.get_help(ctx))
            return

    click.echo(group.get_help(ctx.parent or ctx))


cmd_folder = os.path.abspath(os.path.join(os.path.dirname(__file__), "commands"))
for filename in os.listdir(cmd_folder):
    if filename.endswith(".py") and not filename.startswith("__"):
        import_module(f"refspec.commands.{filename[:-3]}")
