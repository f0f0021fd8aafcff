"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the glyphgen
command.

Argument errors are not routed through here: they print a diagnostic and
the usage text and exit with SUCCESS, before the editor ever starts.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the glyphgen command."""
    SUCCESS = 0
    TERMINAL_ERROR = 1   # Terminal could not be initialized or drawn on
    INTERNAL_ERROR = 3   # Unexpected internal error
    INTERRUPTED = 130    # Ctrl-C during editing (128 + SIGINT)


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised while editing and exit.

    The terminal has already been restored by the time this runs, so the
    message lands on the user's shell.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from glyphgen.errors import TerminalError

    if isinstance(error, TerminalError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.TERMINAL_ERROR)

    else:
        # Unexpected internal error
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
