"""
glyphgen Configuration
======================

Editor settings: glyph dimensions and output format. Configuration can
come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied last by the CLI)

Dimensions are never rejected. Out-of-range values are clamped into the
supported grid, and text that does not start with a number counts as 0,
the same way C's atoi() reads it:

    "3"    -> 3
    " 4x"  -> 4
    "abc"  -> 0   (then clamped to 1)
    "99"   -> 99  (then clamped to 5 columns / 10 rows)

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import os
import re
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from glyphgen.bitmap import MAX_COLS, MAX_ROWS
from glyphgen.encoder import OutputFormat
from glyphgen.errors import ConfigError

logger = logging.getLogger(__name__)

# Leading integer as read by atoi(): optional ASCII whitespace, sign, digits
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")


def parse_count(text: str) -> int:
    """
    Parse an integer the lenient atoi() way.

    Returns:
        The leading integer of the text, or 0 if there is none
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def clamp(value: int, low: int, high: int) -> int:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


@dataclass
class GlyphConfig:
    """
    Settings for one editing session.

    Attributes:
        cols: Glyph width in cells (default: 5)
        rows: Glyph height in cells (default: 8)
        output_format: Encoding of the final report (default: BIN)
    """

    cols: int = 5
    rows: int = 8
    output_format: OutputFormat = OutputFormat.BIN

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GlyphConfig":
        """
        Create GlyphConfig from environment variables.

        Environment variables (all optional):
            GLYPHGEN_COLS: Default number of columns
            GLYPHGEN_ROWS: Default number of rows
            GLYPHGEN_FORMAT: Default output format ("b" or "h")

        An unknown format is logged and ignored.

        Returns:
            GlyphConfig with values from environment variables
        """
        if environ is None:
            environ = os.environ
        config = cls()

        if cols := environ.get("GLYPHGEN_COLS"):
            config.cols = parse_count(cols)

        if rows := environ.get("GLYPHGEN_ROWS"):
            config.rows = parse_count(rows)

        if fmt := environ.get("GLYPHGEN_FORMAT"):
            try:
                config.output_format = OutputFormat.from_flag(fmt)
            except ConfigError as e:
                logger.warning("Ignoring GLYPHGEN_FORMAT: %s", e)

        return config

    def with_overrides(
        self,
        cols: Optional[int] = None,
        rows: Optional[int] = None,
        output_format: Optional[OutputFormat] = None,
    ) -> "GlyphConfig":
        """Return a copy with every non-None argument applied."""
        changes = {}
        if cols is not None:
            changes["cols"] = cols
        if rows is not None:
            changes["rows"] = rows
        if output_format is not None:
            changes["output_format"] = output_format
        return replace(self, **changes)

    def clamped(self) -> "GlyphConfig":
        """Return a copy with dimensions clamped to the supported grid."""
        cols = clamp(self.cols, 1, MAX_COLS)
        rows = clamp(self.rows, 1, MAX_ROWS)
        if (cols, rows) != (self.cols, self.rows):
            logger.debug(
                "Clamped glyph size %dx%d to %dx%d",
                self.cols, self.rows, cols, rows,
            )
        return replace(self, cols=cols, rows=rows)
