"""
Configuration Unit Tests
========================

Tests for GlyphConfig, lenient integer parsing and dimension clamping.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging

import pytest

from glyphgen.config import GlyphConfig, clamp, parse_count
from glyphgen.encoder import OutputFormat


# =============================================================================
# parse_count Tests
# =============================================================================

class TestParseCount:
    """Test atoi-style integer parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("3", 3),
        ("10", 10),
        ("007", 7),
        ("  4", 4),
        ("+2", 2),
        ("-2", -2),
        ("4x", 4),
        ("12abc", 12),
    ])
    def test_leading_integer(self, text, expected):
        assert parse_count(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "x4", "-", " ", "five", "\u0663", "\uff14"])
    def test_non_numeric_is_zero(self, text):
        assert parse_count(text) == 0


# =============================================================================
# Clamping Tests
# =============================================================================

class TestClamp:
    """Test clamping of glyph dimensions."""

    def test_clamp_helper(self):
        assert clamp(0, 1, 5) == 1
        assert clamp(3, 1, 5) == 3
        assert clamp(99, 1, 5) == 5

    @pytest.mark.parametrize("cols,expected", [(0, 1), (-4, 1), (1, 1), (3, 3), (5, 5), (6, 5), (99, 5)])
    def test_columns(self, cols, expected):
        assert GlyphConfig(cols=cols).clamped().cols == expected

    @pytest.mark.parametrize("rows,expected", [(0, 1), (-1, 1), (1, 1), (8, 8), (10, 10), (11, 10), (99, 10)])
    def test_rows(self, rows, expected):
        assert GlyphConfig(rows=rows).clamped().rows == expected

    def test_clamped_returns_copy(self):
        config = GlyphConfig(cols=99)
        clamped = config.clamped()
        assert config.cols == 99
        assert clamped.cols == 5

    def test_format_untouched(self):
        config = GlyphConfig(output_format=OutputFormat.HEX).clamped()
        assert config.output_format is OutputFormat.HEX


# =============================================================================
# Environment Tests
# =============================================================================

class TestFromEnv:
    """Test reading defaults from the environment."""

    def test_defaults(self):
        config = GlyphConfig.from_env({})
        assert config == GlyphConfig(cols=5, rows=8, output_format=OutputFormat.BIN)

    def test_all_variables(self):
        config = GlyphConfig.from_env({
            "GLYPHGEN_COLS": "3",
            "GLYPHGEN_ROWS": "7",
            "GLYPHGEN_FORMAT": "h",
        })
        assert config.cols == 3
        assert config.rows == 7
        assert config.output_format is OutputFormat.HEX

    def test_non_numeric_dimension(self):
        """Non-numeric values read as 0, clamped later."""
        config = GlyphConfig.from_env({"GLYPHGEN_COLS": "wide"})
        assert config.cols == 0
        assert config.clamped().cols == 1

    def test_bad_format_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="glyphgen.config"):
            config = GlyphConfig.from_env({"GLYPHGEN_FORMAT": "octal"})
        assert config.output_format is OutputFormat.BIN
        assert "GLYPHGEN_FORMAT" in caplog.text

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv("GLYPHGEN_ROWS", "10")
        assert GlyphConfig.from_env().rows == 10


# =============================================================================
# Override Tests
# =============================================================================

class TestOverrides:
    """Test applying command-line values over configuration."""

    def test_none_keeps_value(self):
        base = GlyphConfig(cols=3, rows=4, output_format=OutputFormat.HEX)
        assert base.with_overrides() == base

    def test_values_replace(self):
        base = GlyphConfig(cols=3, rows=4)
        config = base.with_overrides(cols=2, output_format=OutputFormat.HEX)
        assert config.cols == 2
        assert config.rows == 4
        assert config.output_format is OutputFormat.HEX

    def test_zero_is_an_override(self):
        """0 is a real value (clamped to 1), not 'unset'."""
        config = GlyphConfig().with_overrides(cols=0).clamped()
        assert config.cols == 1
