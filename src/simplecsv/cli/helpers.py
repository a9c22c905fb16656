"""CLI helper utilities shared across commands."""

import logging
import sys

import click
from pydantic import ValidationError

from ..models import CsvConfig

STDIO = "-"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: int) -> None:
    """Send simplecsv log records to stderr.

    ``-v`` shows INFO, ``-vv`` and above show DEBUG. Without the flag only
    warnings are printed.
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger("simplecsv")
    logger.setLevel(level)
    # Replace any handler from an earlier call; sys.stderr may have changed
    for handler in list(logger.handlers):
        if getattr(handler, "_simplecsv", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._simplecsv = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


def build_config(**options) -> CsvConfig:
    """Build a CsvConfig from command options.

    Raises:
        click.BadParameter: An option value is rejected by the model.
    """
    try:
        return CsvConfig(**options)
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise click.BadParameter(messages) from e


def read_text(source: str) -> str:
    """Read UTF-8 text from a path or stdin (``-``) without newline translation."""
    if source == STDIO:
        data = sys.stdin.buffer.read()
    else:
        try:
            with open(source, "rb") as f:
                data = f.read()
        except OSError as e:
            click.echo(f"Error: cannot read {source}: {e.strerror}", err=True)
            sys.exit(1)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        click.echo(f"Error: {source} is not valid UTF-8: {e}", err=True)
        sys.exit(1)


def write_text(text: str, destination: str) -> None:
    """Write UTF-8 text to a path or stdout (``-``) byte for byte."""
    data = text.encode("utf-8")
    if destination == STDIO:
        stream = sys.stdout.buffer
        stream.write(data)
        stream.flush()
        return

    try:
        with open(destination, "wb") as f:
            f.write(data)
    except OSError as e:
        click.echo(f"Error: cannot write {destination}: {e.strerror}", err=True)
        sys.exit(1)
