"""
CLI Utilities - Shared helper functions for command line operations.

This module provides formatted printing, error reporting with stable exit
codes, and access to the per-invocation options stored on the click context.
"""

import logging
import sys
from typing import NoReturn, Optional

import click

from ..core.errors import DocUriError, IoError, UriError
from ..core.uri import Uri

logger = logging.getLogger(__name__)

# Exit codes for core errors
EXIT_URI_ERROR = 2
EXIT_IO_ERROR = 3
EXIT_CONFIG_ERROR = 4


def echo_success(message: str) -> None:
    """Print a confirmation line with a green checkmark."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_bool(value: bool) -> None:
    """Print a boolean as ``true``/``false`` for scripting."""
    click.echo("true" if value else "false")


def fail(error: DocUriError) -> NoReturn:
    """
    Report a core error and exit with the matching status.

    URI errors exit with 2, reader errors with 3, anything else with 4.
    """
    echo_error(error.message)
    logger.debug(f"{type(error).__name__}: {error}", exc_info=error)

    if isinstance(error, UriError):
        sys.exit(EXIT_URI_ERROR)
    if isinstance(error, IoError):
        sys.exit(EXIT_IO_ERROR)
    sys.exit(EXIT_CONFIG_ERROR)


def get_windows(ctx: click.Context) -> Optional[bool]:
    """Return the platform override chosen with ``--platform`` (None = auto)."""
    obj = ctx.find_root().obj or {}
    return obj.get("windows")


def parse_uri(value: str) -> Uri:
    """Parse a command line argument, exiting on malformed input."""
    try:
        return Uri.from_string(value)
    except UriError as e:
        fail(e)
