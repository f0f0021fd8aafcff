"""
Terminal Driver
===============

Character-cell terminal access for the glyph editor.

The editor talks to an abstract Terminal with a handful of drawing
primitives, so it can run against curses in real use and against a
recording stub in tests. CursesTerminal is the real implementation.

Screen Layout
-------------
Cells are drawn with gaps between them so the grid looks like an LCD
character cell. With the default GridLayout a 3x2 glyph occupies:

    row 1:    LCD Glyph Generator
    row 3:    f:fill  d:delete  c:clear  q:exit
    row 5:    □   □   □
    row 7:    □   □   □

Cell (r, c) is projected to screen (5 + 2r, 3 + 4c).

Pixel Glyphs
------------
- Dark cell: U+25A1 WHITE SQUARE
- Lit cell:  U+25A0 BLACK SQUARE

Both are multi-byte characters, so the locale must be configured before
curses starts, and drawing goes through the wide-character path.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import curses
import locale
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from glyphgen.errors import TerminalError

logger = logging.getLogger(__name__)

DARK_PIXEL = "\u25a1"  # WHITE SQUARE
LIT_PIXEL = "\u25a0"  # BLACK SQUARE


class Key(Enum):
    """Special keys delivered by read_key() as distinct tokens."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"  # Any special key without a binding


# read_key() returns either a single character or a special Key
KeyInput = Union[str, Key]


# =============================================================================
# Screen Projection
# =============================================================================

@dataclass(frozen=True)
class GridLayout:
    """
    Maps logical cells to terminal positions.

    Attributes:
        origin_y: Screen row of cell row 0
        origin_x: Screen column of cell column 0
        dy: Screen rows between cell rows
        dx: Screen columns between cell columns
    """
    origin_y: int = 5
    origin_x: int = 3
    dy: int = 2
    dx: int = 4

    def project(self, row: int, col: int) -> Tuple[int, int]:
        """Screen (y, x) of cell (row, col)."""
        return (self.origin_y + row * self.dy, self.origin_x + col * self.dx)

    @property
    def banner_y(self) -> int:
        return self.origin_y - 4

    @property
    def legend_y(self) -> int:
        return self.origin_y - 2

    def required_size(self, rows: int, cols: int, text_width: int = 0) -> Tuple[int, int]:
        """
        Smallest (height, width) that holds the grid and the header text.

        One spare column is reserved after the last cell because some
        terminals render the square glyphs two columns wide.
        """
        bottom, right = self.project(rows - 1, cols - 1)
        height = bottom + 1
        width = max(right + 2, self.origin_x + text_width)
        return (height, width)


# =============================================================================
# Terminal Interface
# =============================================================================

class Terminal(ABC):
    """
    Abstract character-cell terminal.

    Use as a context manager so shutdown() runs on every exit path:

        >>> with CursesTerminal() as term:
        ...     term.draw_text(1, 3, "hello")
        ...     term.refresh()
        ...     key = term.read_key()
    """

    @abstractmethod
    def init(self) -> None:
        """Enter full-screen mode: no line buffering, no echo, keypad on, cleared."""

    @abstractmethod
    def shutdown(self) -> None:
        """Restore the terminal mode active before init(). Safe to call twice."""

    @abstractmethod
    def draw_text(self, y: int, x: int, text: str) -> None:
        """Place text starting at (y, x)."""

    @abstractmethod
    def set_cursor(self, y: int, x: int) -> None:
        """Move the cursor without drawing."""

    @abstractmethod
    def refresh(self) -> None:
        """Commit pending output to the display."""

    @abstractmethod
    def read_key(self) -> KeyInput:
        """Block until a key is available."""

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Current screen size as (height, width)."""

    def draw_pixel(self, y: int, x: int, lit: bool) -> None:
        """Place the lit or dark square at (y, x)."""
        self.draw_text(y, x, LIT_PIXEL if lit else DARK_PIXEL)

    def __enter__(self) -> "Terminal":
        self.init()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.shutdown()


# =============================================================================
# curses Implementation
# =============================================================================

_SPECIAL_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
}


class CursesTerminal(Terminal):
    """
    Terminal backed by the curses library.

    Only one instance may be active at a time; curses owns the process-wide
    terminal state between init() and shutdown().
    """

    def __init__(self) -> None:
        self._screen: Optional["curses.window"] = None

    @property
    def is_active(self) -> bool:
        return self._screen is not None

    def init(self) -> None:
        # Wide characters only render once the locale is set
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error as e:
            logger.warning("Locale not set (%s), pixels may not render", e)
        try:
            self._screen = curses.initscr()
            curses.cbreak()
            curses.noecho()
            self._screen.keypad(True)
            self._screen.clear()
        except curses.error as e:
            self.shutdown()
            raise TerminalError(
                f"cannot initialize terminal: {e}",
                hint="run glyphgen from an interactive terminal",
            ) from e
        logger.debug("Terminal initialized, %d rows x %d cols", *self.size())

    def shutdown(self) -> None:
        if self._screen is None:
            return
        screen, self._screen = self._screen, None
        try:
            screen.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()
        logger.debug("Terminal restored")

    def draw_text(self, y: int, x: int, text: str) -> None:
        try:
            self._active_screen().addstr(y, x, text)
        except curses.error as e:
            raise TerminalError(f"cannot draw at ({y}, {x}): {e}") from e

    def set_cursor(self, y: int, x: int) -> None:
        try:
            self._active_screen().move(y, x)
        except curses.error as e:
            raise TerminalError(f"cannot move cursor to ({y}, {x}): {e}") from e

    def refresh(self) -> None:
        self._active_screen().refresh()

    def read_key(self) -> KeyInput:
        ch = self._active_screen().get_wch()
        if isinstance(ch, str):
            return ch
        return _SPECIAL_KEYS.get(ch, Key.OTHER)

    def size(self) -> Tuple[int, int]:
        return self._active_screen().getmaxyx()

    def _active_screen(self) -> "curses.window":
        if self._screen is None:
            raise TerminalError("terminal is not initialized")
        return self._screen
