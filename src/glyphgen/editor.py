"""
Glyph Editor Loop
=================

Single-threaded event loop that turns keystrokes into bitmap edits and
keeps the screen in step with the bitmap.

Key Bindings
------------
    k / UP       move up            f    fill (light) current cell
    j / DOWN     move down          d    delete (darken) current cell
    h / LEFT     move left          c    clear the whole glyph
    l / RIGHT    move right         q    quit

Any other key is ignored.

Coordinate Spaces
-----------------
The Bitmap owns the logical cursor (row, col). The GridLayout projects it
onto the screen. The editor never derives logical positions from the
terminal cursor; it only pushes the projection of the logical cursor to
the terminal after each change. After every handled key:

- the terminal cursor sits on the projection of the logical cursor
- every drawn pixel matches its bitmap cell
- pending output has been refreshed before the next key is read

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from enum import Enum, auto
from typing import Dict, Optional

from glyphgen.bitmap import Bitmap, Direction, Glyph
from glyphgen.errors import TerminalError
from glyphgen.terminal import GridLayout, Key, KeyInput, Terminal

logger = logging.getLogger(__name__)


class EditorState(Enum):
    """Editor lifecycle. EXITING is terminal."""
    EDITING = auto()
    EXITING = auto()


# =============================================================================
# KEY BINDINGS
# =============================================================================

MOVE_KEYS: Dict[KeyInput, Direction] = {
    "k": Direction.UP, Key.UP: Direction.UP,
    "j": Direction.DOWN, Key.DOWN: Direction.DOWN,
    "h": Direction.LEFT, Key.LEFT: Direction.LEFT,
    "l": Direction.RIGHT, Key.RIGHT: Direction.RIGHT,
}

# Paint key -> cell value
PAINT_KEYS: Dict[KeyInput, bool] = {
    "f": True,
    "d": False,
}

CLEAR_KEY = "c"
QUIT_KEY = "q"


class Editor:
    """
    Interactive glyph editor.

    Example:
        >>> with CursesTerminal() as term:
        ...     glyph = Editor(term, Bitmap(rows=8, cols=5)).run()
        >>> print("\\n".join(encode_glyph(glyph)))
    """

    BANNER = "LCD Glyph Generator"
    LEGEND = "f:fill  d:delete  c:clear  q:exit"

    def __init__(
        self,
        terminal: Terminal,
        bitmap: Bitmap,
        layout: Optional[GridLayout] = None,
    ):
        """
        Initialize the editor.

        Args:
            terminal: Initialized terminal to draw on
            bitmap: Bitmap to edit (mutated in place)
            layout: Screen projection (default: GridLayout())
        """
        self._terminal = terminal
        self._bitmap = bitmap
        self._layout = layout or GridLayout()
        self._state = EditorState.EDITING

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def bitmap(self) -> Bitmap:
        return self._bitmap

    @property
    def layout(self) -> GridLayout:
        return self._layout

    # =========================================================================
    # Main Loop
    # =========================================================================

    def run(self) -> Glyph:
        """
        Draw the editor and process keys until quit.

        Returns:
            Snapshot of the finished bitmap
        """
        self.start()
        while self._state is EditorState.EDITING:
            self.handle_key(self._terminal.read_key())
        return self._bitmap.snapshot()

    def start(self) -> None:
        """
        Draw the banner, legend and an all-dark grid, then seat the cursor.

        Raises:
            TerminalError: If the terminal is too small for the grid
        """
        self._check_size()

        origin_x = self._layout.origin_x
        self._terminal.draw_text(self._layout.banner_y, origin_x, self.BANNER)
        self._terminal.draw_text(self._layout.legend_y, origin_x, self.LEGEND)
        self._draw_grid()
        self._seat_cursor()
        self._terminal.refresh()

    def handle_key(self, key: KeyInput) -> EditorState:
        """
        Apply one key to the bitmap and the screen.

        Returns:
            The editor state after the key
        """
        if self._state is EditorState.EXITING:
            return self._state

        changed = False

        if key in MOVE_KEYS:
            direction = MOVE_KEYS[key]
            changed = self._bitmap.move(direction)
            logger.debug("move %s -> %s", direction.name, self._bitmap.cursor)

        elif key in PAINT_KEYS:
            lit = PAINT_KEYS[key]
            self._bitmap.paint(lit)
            self._draw_cell(*self._bitmap.cursor)
            changed = True
            logger.debug("paint %s at %s", "lit" if lit else "dark", self._bitmap.cursor)

        elif key == CLEAR_KEY:
            self._bitmap.clear_all()
            self._draw_grid()
            changed = True
            logger.debug("clear")

        elif key == QUIT_KEY:
            self._state = EditorState.EXITING
            logger.debug("quit")

        if changed:
            # Drawing moves the terminal cursor, so re-seat it last
            self._seat_cursor()
            self._terminal.refresh()

        return self._state

    # =========================================================================
    # Drawing Helpers
    # =========================================================================

    def _draw_cell(self, row: int, col: int) -> None:
        y, x = self._layout.project(row, col)
        self._terminal.draw_pixel(y, x, self._bitmap.is_lit(row, col))

    def _draw_grid(self) -> None:
        for row in range(self._bitmap.rows):
            for col in range(self._bitmap.cols):
                self._draw_cell(row, col)

    def _seat_cursor(self) -> None:
        self._terminal.set_cursor(*self._layout.project(*self._bitmap.cursor))

    def _check_size(self) -> None:
        height, width = self._terminal.size()
        need_height, need_width = self._layout.required_size(
            self._bitmap.rows,
            self._bitmap.cols,
            max(len(self.BANNER), len(self.LEGEND)),
        )
        if height < need_height or width < need_width:
            raise TerminalError(
                f"terminal is {width}x{height}, "
                f"a {self._bitmap.cols}x{self._bitmap.rows} glyph needs "
                f"{need_width}x{need_height}",
                hint="enlarge the terminal window or request fewer rows",
            )
