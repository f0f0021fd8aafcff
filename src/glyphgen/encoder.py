"""
Glyph Encoder
=============

Turns a finished glyph into its row-by-row textual encoding.

Each bitmap row becomes one numeric literal, ready to paste into a character
generator table:

    Glyph (3 x 2)
    Format: hex
      0x6
      0x0

Column 0 is the most significant bit of every row, so the binary and the
hexadecimal forms describe the same bit pattern:

    BIN: 0b110  ->  HEX: 0x6

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from enum import Enum
from typing import List, Sequence

from glyphgen.bitmap import Glyph
from glyphgen.errors import ConfigError


class OutputFormat(Enum):
    """Textual encoding used for each glyph row."""
    BIN = "bin"  # 0b10101
    HEX = "hex"  # 0x15

    @classmethod
    def from_flag(cls, text: str) -> "OutputFormat":
        """
        Resolve a command-line format value.

        Accepts the short flags used on the command line ("b", "h") and the
        full names ("bin", "hex"), case-insensitively.

        Raises:
            ConfigError: If the value names neither format
        """
        value = text.strip().lower()
        if value in ("b", "bin"):
            return cls.BIN
        if value in ("h", "hex"):
            return cls.HEX
        raise ConfigError(f"unknown output format '{text}' (expected 'b' or 'h')")


def encode_row(bits: Sequence[bool], fmt: OutputFormat) -> str:
    """
    Encode a single bitmap row.

    Args:
        bits: Cell values left to right (column 0 first)
        fmt: Output format

    Returns:
        "0b" followed by one digit per column, or "0x" followed by the
        unpadded lowercase hex value of the row.
    """
    body = "".join("1" if bit else "0" for bit in bits)
    if fmt is OutputFormat.BIN:
        return "0b" + body
    # Same bits read as a big-endian integer
    return f"0x{int(body, 2):x}"


def encode_glyph(glyph: Glyph, fmt: OutputFormat = OutputFormat.BIN) -> List[str]:
    """
    Encode a whole glyph as report lines.

    The first two lines are headers giving the glyph size (columns first)
    and the format name; one indented line per row follows, top row first.
    """
    lines = [
        f"Glyph ({glyph.cols} x {glyph.rows})",
        f"Format: {fmt.value}",
    ]
    for row in glyph.cells:
        lines.append(f"  {encode_row(row, fmt)}")
    return lines
