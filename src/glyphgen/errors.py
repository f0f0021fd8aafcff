"""
glyphgen Error Hierarchy
========================

This module defines the exception hierarchy for glyphgen. All exceptions
inherit from GlyphGenError, allowing callers to catch every tool-related
error with a single except clause if desired.

Exception Hierarchy
-------------------
GlyphGenError (base)
├── TerminalError - terminal could not be initialized or drawn on
└── ConfigError - invalid configuration value

Invalid navigation and unrecognized keys are not errors: moves past the
grid edge are silent no-ops and unbound keys are ignored by the editor.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class GlyphGenError(Exception):
    """
    Base exception for all glyphgen errors.

        try:
            run_editor(config)
        except GlyphGenError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Terminal Exceptions
# =============================================================================

class TerminalError(GlyphGenError):
    """
    The terminal could not be used for full-screen editing.

    Raised when:
    - curses cannot initialize the terminal
    - The terminal is too small to hold the glyph grid
    - A draw call lands outside the screen

    Attributes:
        message: The error description
        hint: A suggestion for fixing the problem (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message


# =============================================================================
# Configuration Exceptions
# =============================================================================

class ConfigError(GlyphGenError):
    """
    Invalid configuration value.

    Raised when a value that has no lenient interpretation is supplied,
    such as an output format other than binary or hex.
    """
    pass
