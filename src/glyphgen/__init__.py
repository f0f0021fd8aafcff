"""
glyphgen - LCD Glyph Generator
==============================

An interactive terminal tool for hand-designing small monochrome bitmap
glyphs, the kind loaded into the user-defined character slots of
HD44780-style LCD controllers, and printing their row-by-row encoding.

A glyph is at most 5 columns by 10 rows. Cells are painted on or off in a
full-screen editor; on exit the glyph is printed as one binary (0b...) or
hexadecimal (0x...) literal per row, column 0 being the most significant
bit.

Main Components
---------------
- **bitmap**: Bitmap model with a bounds-checked logical cursor
- **encoder**: Row-by-row BIN/HEX encoding of a finished glyph
- **terminal**: Terminal driver (curses) and cell-to-screen projection
- **editor**: Key-driven editor loop tying the bitmap to the screen
- **config**: Session settings from defaults and environment variables

Quick Start
-----------
Encode a glyph without the editor:
    >>> from glyphgen import Bitmap, Direction, OutputFormat, encode_glyph
    >>> bitmap = Bitmap(rows=2, cols=3)
    >>> bitmap.paint(True)
    >>> bitmap.move(Direction.RIGHT)
    True
    >>> bitmap.paint(True)
    >>> encode_glyph(bitmap.snapshot(), OutputFormat.HEX)
    ['Glyph (3 x 2)', 'Format: hex', '  0x6', '  0x0']

Or use the command-line tool:
    $ glyphgen -c 3 -r 2 -f h

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

__version__ = "1.0.0"
__author__ = "Hugo José Pinto & Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from glyphgen.bitmap import MAX_COLS, MAX_ROWS, Bitmap, Direction, Glyph
from glyphgen.config import GlyphConfig, clamp, parse_count
from glyphgen.editor import Editor, EditorState
from glyphgen.encoder import OutputFormat, encode_glyph, encode_row
from glyphgen.errors import ConfigError, GlyphGenError, TerminalError
from glyphgen.terminal import (
    DARK_PIXEL,
    LIT_PIXEL,
    CursesTerminal,
    GridLayout,
    Key,
    Terminal,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Bitmap model
    "MAX_COLS",
    "MAX_ROWS",
    "Bitmap",
    "Direction",
    "Glyph",
    # Encoder
    "OutputFormat",
    "encode_glyph",
    "encode_row",
    # Terminal
    "DARK_PIXEL",
    "LIT_PIXEL",
    "CursesTerminal",
    "GridLayout",
    "Key",
    "Terminal",
    # Editor
    "Editor",
    "EditorState",
    # Configuration
    "GlyphConfig",
    "clamp",
    "parse_count",
    # Errors
    "GlyphGenError",
    "TerminalError",
    "ConfigError",
]
