"""
glyphgen - LCD Glyph Generator Command-Line Interface
=====================================================

This module implements the command-line interface for the interactive glyph
editor. It opens a full-screen editor, lets the user paint a small bitmap,
and prints the finished glyph as per-row numeric literals once the terminal
has been restored.

Usage Examples
--------------
Edit a default 5x8 glyph, binary output:
    $ glyphgen

Edit a 5x10 glyph, hexadecimal output:
    $ glyphgen -r 10 -f h

Sample report:
    Glyph (3 x 2)
    Format: hex
      0x6
      0x0

Environment
-----------
GLYPHGEN_COLS, GLYPHGEN_ROWS and GLYPHGEN_FORMAT supply defaults that the
command-line options override.

Exit Codes
----------
0 - Success (also after printing usage for bad arguments)
1 - Terminal could not be used
3 - Internal error
130 - Interrupted with Ctrl-C

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import sys
from contextlib import contextmanager
from logging.handlers import MemoryHandler
from typing import Iterator, List, Optional, Tuple

import click

from glyphgen import __version__
from glyphgen.bitmap import MAX_COLS, MAX_ROWS, Bitmap, Glyph
from glyphgen.cli.errors import ExitCode, handle_cli_exception
from glyphgen.config import GlyphConfig, parse_count
from glyphgen.editor import Editor
from glyphgen.encoder import OutputFormat, encode_glyph
from glyphgen.errors import ConfigError
from glyphgen.terminal import CursesTerminal, Terminal

logger = logging.getLogger(__name__)


# =============================================================================
# Parameter Types
# =============================================================================

class LenientInt(click.ParamType):
    """
    Integer read the atoi() way: non-numeric text counts as 0.

    Range limits are not enforced here; GlyphConfig.clamped() pulls the
    value into the supported grid afterwards.
    """

    name = "integer"

    def convert(self, value, param, ctx) -> int:
        if isinstance(value, int):
            return value
        return parse_count(value)


class FormatType(click.ParamType):
    """Output format flag: 'b'/'bin' or 'h'/'hex'."""

    name = "format"

    def convert(self, value, param, ctx) -> OutputFormat:
        if isinstance(value, OutputFormat):
            return value
        try:
            return OutputFormat.from_flag(value)
        except ConfigError as e:
            self.fail(str(e), param, ctx)


class GlyphCommand(click.Command):
    """
    Command that reports argument errors without failing.

    An unknown option, a missing option argument or a bad format value
    prints a one-line diagnostic to stderr and the usage text to stdout,
    then exits with SUCCESS without starting the editor. Option parsing
    stops at the first operand; operands are accepted and ignored.
    """

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(f"Error: {e.format_message()}", err=True)
            click.echo(ctx.get_help())
            ctx.exit(ExitCode.SUCCESS)


# =============================================================================
# Helpers
# =============================================================================

class HeldLogHandler(MemoryHandler):
    """MemoryHandler that only writes its records out on an explicit flush()."""

    def __init__(self, target: logging.Handler):
        super().__init__(capacity=0, flushLevel=logging.CRITICAL + 1, target=target)

    def shouldFlush(self, record: logging.LogRecord) -> bool:
        return False


@contextmanager
def buffered_logging(verbose: bool) -> Iterator[HeldLogHandler]:
    """
    Configure logging for the duration of one command.

    stderr shares the terminal with the full-screen editor, so records are
    held and only written out when the context exits, after the terminal
    has been restored. The root logger's level and handlers are put back
    as they were.
    """
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter(
        "%(levelname)s: %(name)s: %(message)s" if verbose else "%(message)s"
    ))
    buffer = HeldLogHandler(target=stream)

    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    for handler in saved_handlers:
        root.removeHandler(handler)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=[buffer],
    )
    try:
        yield buffer
    finally:
        buffer.flush()
        root.removeHandler(buffer)
        buffer.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def run_editor(config: GlyphConfig, terminal: Optional[Terminal] = None) -> Glyph:
    """
    Run one editing session.

    The terminal is released before this function returns or raises, so the
    caller can print straight to the user's shell.

    Args:
        config: Clamped session settings
        terminal: Terminal to edit on (default: a new CursesTerminal)

    Returns:
        The finished glyph
    """
    if terminal is None:
        terminal = CursesTerminal()
    bitmap = Bitmap(rows=config.rows, cols=config.cols)
    with terminal:
        glyph = Editor(terminal, bitmap).run()
    logger.debug("Editor closed, %d lit cells", sum(map(sum, glyph.cells)))
    return glyph


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(
    cls=GlyphCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_interspersed_args": False,
    },
)
@click.option(
    "-c", "--cols",
    type=LenientInt(),
    default=None,
    help=f"Number of columns, 1-{MAX_COLS} (default: 5)",
)
@click.option(
    "-r", "--rows",
    type=LenientInt(),
    default=None,
    help=f"Number of rows, 1-{MAX_ROWS} (default: 8)",
)
@click.option(
    "-f", "--format", "output_format",
    type=FormatType(),
    default=None,
    help="Output format: b - binary, h - hex (default: b)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (printed after the editor closes)",
)
@click.argument("operands", nargs=-1)
@click.version_option(version=__version__, prog_name="glyphgen")
def main(
    cols: Optional[int],
    rows: Optional[int],
    output_format: Optional[OutputFormat],
    verbose: bool,
    operands: Tuple[str, ...],
) -> None:
    """
    Design an LCD glyph interactively and print its row encoding.

    Keys: h j k l or arrows move, f fills, d deletes, c clears, q exits.

    Out-of-range sizes are clamped to the 5x10 maximum grid.

    Examples:

        # 5x8 glyph in binary
        glyphgen

        # 4x7 glyph in hex
        glyphgen -c 4 -r 7 -f h
    """
    with buffered_logging(verbose):
        config = GlyphConfig.from_env().with_overrides(
            cols=cols, rows=rows, output_format=output_format,
        ).clamped()
        if operands:
            logger.debug("Ignoring operands: %s", " ".join(operands))
        logger.debug(
            "Editing %dx%d glyph, %s output",
            config.cols, config.rows, config.output_format.value,
        )

        try:
            glyph = run_editor(config)
        except KeyboardInterrupt:
            click.echo("Aborted!", err=True)
            sys.exit(ExitCode.INTERRUPTED)
        except Exception as e:
            handle_cli_exception(e, verbose)

    for line in encode_glyph(glyph, config.output_format):
        click.echo(line)


if __name__ == "__main__":
    main()
