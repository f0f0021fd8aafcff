"""
glyphgen Command-Line Interface
===============================

This package provides the command-line entry point:

- **glyphgen**: interactive LCD glyph editor

The tool is implemented as a Click-based CLI application that restores the
terminal before printing its report.
"""

__all__ = ["glyphgen"]
