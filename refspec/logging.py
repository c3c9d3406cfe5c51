import logging
import traceback
import typing as t
from logging import LogRecord

import click

logger = logging.getLogger(__name__)


LOGLEVEL_STYLE: t.Dict[int, t.Dict[str, t.Any]] = {
    logging.CRITICAL: {"fg": "red", "bold": True},
    logging.ERROR: {"fg": "red"},
    logging.WARNING: {"fg": "yellow"},
    logging.INFO: {},
    logging.DEBUG: {"fg": "blue", "italic": True},
}


class ClickFormatter(logging.Formatter):
    """Prefix every line of a record with its styled level name.

    INFO records are printed bare, unless debug logging is enabled. In debug mode
    the prefix also names the module the record came from, e.g. ``debug[parse]:``.
    """

    def level_prefix(self, record: LogRecord):
        style = LOGLEVEL_STYLE.get(record.levelno, {})
        debug = logger.isEnabledFor(logging.DEBUG)
        if not style and not debug:
            return ""

        label = record.levelname.lower()
        if debug:
            label += "[{}]".format(record.name.rpartition(".")[2])
        return click.style(label + ": ", **(style or {"italic": True}))

    def formatMessage(self, record: LogRecord) -> str:
        prefix = self.level_prefix(record)
        return "\n".join(prefix + line for line in record.getMessage().splitlines())

    def formatException(self, ei) -> str:
        lines = traceback.format_exception(*ei)
        return "".join(lines[:-1]) + click.style(lines[-1].rstrip("\n"), fg="red")


class EchoHandler(logging.Handler):
    """Write records with :func:`click.echo`, to whatever stderr click is using."""

    def emit(self, record: LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def install_handler(root: logging.Logger):
    """Attach a single :class:`EchoHandler` to `root` and stop propagation.

    Safe to call more than once, e.g. for every invocation of the command line.
    """
    if not any(isinstance(handler, EchoHandler) for handler in root.handlers):
        handler = EchoHandler()
        handler.setFormatter(ClickFormatter())
        root.addHandler(handler)
    # records would be printed twice if the root logger also has a handler
    root.propagate = False
