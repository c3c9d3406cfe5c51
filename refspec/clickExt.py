import logging
import os
import sys
import typing as t

import click

from refspec.config import Config
from refspec.errors import ParseError
from refspec.parse import parse
from refspec.spec import REFSPEC
from refspec.spec import RefSpecRef
from refspec.types import Operation


logger = logging.getLogger(__name__)

T = t.TypeVar("T")


class ParamTypeG(click.ParamType, t.Generic[T]):
    def convert(
        self,
        value: t.Union[str, T],
        param: t.Optional[click.Parameter],
        ctx: t.Optional[click.Context],
    ) -> T:
        return super().convert(value, param, ctx)


def get_operation(ctx: t.Optional[click.Context]) -> Operation:
    """The operation selected for the current command, falling back to the config."""
    operation = ctx and ctx.params.get("operation", None)
    if isinstance(operation, Operation):
        return operation
    config = ctx and ctx.find_object(Config)
    return (config or Config()).operation


class RefSpec(ParamTypeG[RefSpecRef]):
    """Parses a refspec for the operation given by :func:`operation_option`."""

    name = "refspec"

    def convert(self, value: t.Union[str, RefSpecRef], param, ctx):
        if isinstance(value, RefSpecRef):
            return value

        operation = get_operation(ctx)
        try:
            refspec = parse(value, operation)
        except ParseError as err:
            self.fail(f"Invalid {operation} refspec {err}", param, ctx)
        logger.debug(f"Parsed '{value}' as {refspec!r}.")
        return refspec


def refspecs(*param_decls: str, **attrs: t.Any):
    """Alias for a variadic, required `click.argument` of type :class:`RefSpec`."""
    if not param_decls:
        param_decls = ("refspecs",)
    attrs.setdefault("nargs", -1)
    attrs.setdefault("required", True)
    attrs.setdefault("metavar", REFSPEC + "...")
    return click.argument(*param_decls, type=RefSpec(), **attrs)


def operation_option(*param_decls: str, **kwargs: t.Any):
    """`--fetch/--push` flag that resolves to an :class:`Operation`.

    Processed eagerly, so refspec arguments are parsed for the right operation.
    """

    def callback(ctx: click.Context, param: click.Parameter, value: t.Optional[bool]):
        if value is None:
            return get_operation(ctx)
        return Operation.PUSH if value else Operation.FETCH

    if not param_decls:
        param_decls = ("--push/--fetch", "operation")

    kwargs.setdefault("default", None)
    kwargs.setdefault("is_eager", True)
    kwargs.setdefault(
        "help", "Read refspecs as push or fetch refspecs (default from config)."
    )
    kwargs["callback"] = callback
    return click.option(*param_decls, **kwargs)


loglevel_flags = {
    "--debug": logging.DEBUG,
    "--quiet": logging.ERROR,
}


class CatchErrorsGroup(click.Group):
    def main(self, args=None, *params, **extra):
        module_logger = logging.getLogger("refspec")
        args = sys.argv[1:] if args is None else list(args)
        logflags = [arg for arg in args if arg in loglevel_flags]
        argv = [arg for arg in args if arg not in loglevel_flags]
        debug = "--debug" in logflags or os.getenv("REFSPEC_DEBUG", "").lower() in (
            "true",
            "yes",
            "1",
        )
        if logflags:
            module_logger.setLevel(loglevel_flags[logflags[-1]])
        elif debug:
            module_logger.setLevel(logging.DEBUG)
        else:
            module_logger.setLevel(logging.INFO)

        try:
            return super().main(args=argv, *params, **extra)
        except Exception as e:
            if debug:
                logger.exception("An unhandled exception has occurred:")
            else:
                logger.error(
                    "An unhandled exception has occurred:\n  "
                    + click.style(repr(e), "red")
                )
                logger.error(
                    "Use the --debug flag to disable clean exception handling."
                )
            sys.exit(1)
