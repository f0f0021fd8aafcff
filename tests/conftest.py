"""
glyphgen Test Configuration
===========================

Shared fixtures for the glyphgen test-suite.

It provides:
- RecordingTerminal, a Terminal stub that replays scripted keys and records
  what would have been drawn, so the editor can be tested without curses
- key_script(), which turns "f l f q" style strings into key sequences
- Fixtures that install the stub in place of the curses terminal

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Dict, Iterable, List, Optional, Tuple

import pytest

from glyphgen.bitmap import Bitmap
from glyphgen.terminal import DARK_PIXEL, LIT_PIXEL, GridLayout, Key, Terminal


# ═══════════════════════════════════════════════════════════════════════════════
# RECORDING TERMINAL
# ═══════════════════════════════════════════════════════════════════════════════


class RecordingTerminal(Terminal):
    """
    In-memory terminal that records drawing and replays scripted keys.

    Attributes:
        screen: Character at each (y, x) drawn so far
        cursor: Current (y, x) of the terminal cursor, None before init
        calls: Every driver call in order, as (name, *args) tuples
        frames: (screen copy, cursor) captured at each refresh()
        keys_read: Number of keys handed out by read_key()
    """

    def __init__(self, keys: Iterable = (), size: Tuple[int, int] = (24, 80)):
        self._keys = list(keys)
        self._size = size
        self.screen: Dict[Tuple[int, int], str] = {}
        self.cursor: Optional[Tuple[int, int]] = None
        self.calls: List[tuple] = []
        self.frames: List[Tuple[Dict[Tuple[int, int], str], Tuple[int, int]]] = []
        self.active = False
        self.init_count = 0
        self.shutdown_count = 0
        self.keys_read = 0

    def init(self) -> None:
        self.calls.append(("init",))
        self.active = True
        self.init_count += 1
        self.screen.clear()
        self.cursor = (0, 0)

    def shutdown(self) -> None:
        self.calls.append(("shutdown",))
        self.active = False
        self.shutdown_count += 1

    def draw_text(self, y: int, x: int, text: str) -> None:
        self.calls.append(("draw_text", y, x, text))
        for offset, ch in enumerate(text):
            self.screen[(y, x + offset)] = ch
        # Like curses, drawing leaves the cursor after the text
        self.cursor = (y, x + len(text))

    def set_cursor(self, y: int, x: int) -> None:
        self.calls.append(("set_cursor", y, x))
        self.cursor = (y, x)

    def refresh(self) -> None:
        self.calls.append(("refresh",))
        self.frames.append((dict(self.screen), self.cursor))

    def read_key(self):
        if not self._keys:
            raise AssertionError("key script exhausted before quit")
        key = self._keys.pop(0)
        self.calls.append(("read_key", key))
        self.keys_read += 1
        if isinstance(key, BaseException):
            raise key
        return key

    def size(self) -> Tuple[int, int]:
        return self._size

    # -------------------------------------------------------------------------
    # Inspection helpers
    # -------------------------------------------------------------------------

    def text_at(self, y: int, x: int, length: int) -> str:
        return "".join(self.screen.get((y, x + i), " ") for i in range(length))

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


_NAMED_KEYS = {
    "UP": Key.UP,
    "DOWN": Key.DOWN,
    "LEFT": Key.LEFT,
    "RIGHT": Key.RIGHT,
    "OTHER": Key.OTHER,
}


def key_script(text: str) -> list:
    """
    Parse a space-separated key script.

    Single characters are passed through; UP, DOWN, LEFT, RIGHT and OTHER
    become Key members.

        >>> key_script("f RIGHT f q")
        ['f', <Key.RIGHT: 'right'>, 'f', 'q']
    """
    return [_NAMED_KEYS.get(token, token) for token in text.split()]


def assert_screen_matches(
    terminal: RecordingTerminal,
    bitmap: Bitmap,
    layout: Optional[GridLayout] = None,
) -> None:
    """Every projected pixel matches its cell and the cursor sits on the logical cursor."""
    layout = layout or GridLayout()
    for row in range(bitmap.rows):
        for col in range(bitmap.cols):
            expected = LIT_PIXEL if bitmap.is_lit(row, col) else DARK_PIXEL
            assert terminal.screen[layout.project(row, col)] == expected, (row, col)
    assert terminal.cursor == layout.project(*bitmap.cursor)


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def terminal_factory(monkeypatch):
    """
    Fixture: Replace the CLI's curses terminal with RecordingTerminal.

    Returns a function taking a key script (string or list) and an optional
    screen size; it arms the next CLI run and returns the stub so the test
    can inspect it afterwards.
    """
    import glyphgen.cli.glyphgen as cli_module

    def arm(keys, size: Tuple[int, int] = (24, 80)) -> RecordingTerminal:
        if isinstance(keys, str):
            keys = key_script(keys)
        terminal = RecordingTerminal(keys, size=size)
        monkeypatch.setattr(cli_module, "CursesTerminal", lambda: terminal)
        return terminal

    return arm


@pytest.fixture
def clean_env(monkeypatch):
    """Fixture: Remove GLYPHGEN_* variables so defaults apply."""
    for name in ("GLYPHGEN_COLS", "GLYPHGEN_ROWS", "GLYPHGEN_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
