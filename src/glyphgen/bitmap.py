"""
Bitmap Model
============

Owns the on/off cell matrix of the glyph being edited and the logical
cursor that marks the cell under editing focus.

Coordinates are (row, col) with (0, 0) at the top-left. Cells are stored
as cells[row][col]. The logical cursor only ever moves by one cell along a
cardinal direction and never leaves the grid:

    >>> bitmap = Bitmap(rows=2, cols=3)
    >>> bitmap.move(Direction.LEFT)
    False
    >>> bitmap.move(Direction.RIGHT)
    True
    >>> bitmap.paint(True)
    >>> bitmap.snapshot().row_bits(0)
    2

The model knows nothing about the screen; projecting cells onto terminal
positions is the terminal layer's job.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

# Largest glyph supported (typical 5x8 LCD character cell plus descender rows)
MAX_ROWS = 10
MAX_COLS = 5


class Direction(Enum):
    """Cardinal movement directions as (row delta, column delta)."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class Glyph:
    """
    Immutable copy of a bitmap, handed to the encoder.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        cells: Cell values indexed [row][col], True for lit
    """
    rows: int
    cols: int
    cells: Tuple[Tuple[bool, ...], ...]

    def row_bits(self, row: int) -> int:
        """Row as an integer, column 0 being the most significant bit."""
        value = 0
        for lit in self.cells[row]:
            value = (value << 1) | int(lit)
        return value

    @property
    def is_blank(self) -> bool:
        return not any(any(row) for row in self.cells)


class Bitmap:
    """
    Editable glyph bitmap with a logical cursor.

    All operations are total: moving past an edge is a no-op and painting
    always targets the cell under the cursor.

    Example:
        >>> bitmap = Bitmap(rows=8, cols=5)
        >>> bitmap.paint(True)
        >>> bitmap.is_lit(0, 0)
        True
        >>> bitmap.clear_all()
        >>> bitmap.cursor
        (0, 0)
    """

    def __init__(self, rows: int, cols: int):
        """
        Create an all-dark bitmap with the cursor at (0, 0).

        Args:
            rows: Number of rows (1-10)
            cols: Number of columns (1-5)

        Raises:
            ValueError: If a dimension is out of range
        """
        if not 1 <= rows <= MAX_ROWS:
            raise ValueError(f"rows must be 1-{MAX_ROWS}, got {rows}")
        if not 1 <= cols <= MAX_COLS:
            raise ValueError(f"cols must be 1-{MAX_COLS}, got {cols}")

        self._rows = rows
        self._cols = cols
        self._cells: List[List[bool]] = [[False] * cols for _ in range(rows)]
        self._cursor_row = 0
        self._cursor_col = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def cursor(self) -> Tuple[int, int]:
        """Logical cursor as (row, col)."""
        return (self._cursor_row, self._cursor_col)

    # =========================================================================
    # Operations
    # =========================================================================

    def move(self, direction: Direction) -> bool:
        """
        Move the cursor one cell in the given direction.

        Returns:
            True if the cursor moved, False if the neighbour does not exist
        """
        d_row, d_col = direction.delta
        row = self._cursor_row + d_row
        col = self._cursor_col + d_col
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            return False
        self._cursor_row = row
        self._cursor_col = col
        return True

    def paint(self, lit: bool) -> None:
        """Set the cell under the cursor. The cursor does not move."""
        self._cells[self._cursor_row][self._cursor_col] = lit

    def clear_all(self) -> None:
        """Darken every cell and return the cursor to (0, 0)."""
        for row in self._cells:
            for col in range(self._cols):
                row[col] = False
        self._cursor_row = 0
        self._cursor_col = 0

    def is_lit(self, row: int, col: int) -> bool:
        return self._cells[row][col]

    def snapshot(self) -> Glyph:
        """Return an immutable copy of the current cells."""
        return Glyph(
            rows=self._rows,
            cols=self._cols,
            cells=tuple(tuple(row) for row in self._cells),
        )

    def __repr__(self) -> str:
        return (
            f"Bitmap(rows={self._rows}, cols={self._cols}, "
            f"cursor={self.cursor})"
        )
