"""A VGA text-mode terminal kept in an in-memory video buffer."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["TerminalColor", "Terminal", "SCREEN_WIDTH", "SCREEN_HEIGHT", "TAB_STOP"]

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 25
TAB_STOP = 8
PIT_FREQ = 1193180
BELL_FREQUENCY = 1000

_CELLS = SCREEN_WIDTH * SCREEN_HEIGHT
_SCROLL_CELLS = SCREEN_WIDTH * (SCREEN_HEIGHT - 1)
_BLANK = ord(" ")


class TerminalColor(IntEnum):
    """Hardware text-mode colours."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    YELLOW = 6
    LIGHT_GREY = 7
    DARK_GREY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_BROWN = 14
    WHITE = 15


class Terminal:
    """An 80x25 text screen of (character, attribute) byte pairs with a cursor."""

    def __init__(self) -> None:
        self.video_memory = bytearray(_CELLS * 2)
        self.cursor_x = 0
        self.cursor_y = 0
        self.color = 0
        self.tone_frequency: int | None = None
        self.tone_divisor: int | None = None

    def initialize(self) -> None:
        """Home the cursor and clear the screen, choosing yellow on black if no colour is set."""
        self.cursor_x = 0
        self.cursor_y = 0
        if not self.color:
            self.set_color(TerminalColor.BLACK, TerminalColor.YELLOW)
        self._blank_cells(0, _CELLS)

    def set_color(self, background: int, text: int) -> None:
        """Set the attribute used for newly written cells."""
        self.color = (int(text) | (int(background) << 4)) & 0xFF

    def set_cursor(self, x: int, y: int) -> None:
        """Move the cursor."""
        self.cursor_x = x
        self.cursor_y = y

    def _blank_cells(self, start: int, stop: int) -> None:
        for n in range(start, stop):
            self.video_memory[n * 2] = _BLANK
            self.video_memory[n * 2 + 1] = self.color

    def _scroll(self, with_attributes: bool) -> None:
        mem = self.video_memory
        for n in range(_SCROLL_CELLS):
            src = (n + SCREEN_WIDTH) * 2
            mem[n * 2] = mem[src]
            if with_attributes:
                mem[n * 2 + 1] = mem[src + 1]
        self._blank_cells(_SCROLL_CELLS, _CELLS)
        self.cursor_y = SCREEN_HEIGHT - 1

    def _next_line(self, with_attributes: bool) -> None:
        self.cursor_y += 1
        if self.cursor_y >= SCREEN_HEIGHT:
            self._scroll(with_attributes)

    def _beep(self, frequency: int) -> None:
        self.tone_frequency = frequency
        self.tone_divisor = PIT_FREQ // frequency

    def putchar(self, c: str) -> None:
        """Write one character, handling newline, tab, return, backspace, form feed and bell."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")

        if c == "\n":
            self.cursor_x = 0
            self._next_line(with_attributes=False)
        elif c == "\t":
            self.cursor_x = (self.cursor_x + TAB_STOP) & ~(TAB_STOP - 1)
            if self.cursor_x >= SCREEN_WIDTH:
                self.cursor_x = 0
                self._next_line(with_attributes=True)
        elif c == "\r":
            self.cursor_x = 0
        elif c == "\b":
            if self.cursor_x > 0:
                self.cursor_x -= 1
                cell = self.cursor_y * SCREEN_WIDTH + self.cursor_x
                self._blank_cells(cell, cell + 1)
        elif c == "\f":
            self._blank_cells(0, _SCROLL_CELLS)
            self.cursor_x = 0
            self.cursor_y = 0
        elif c == "\a":
            self._beep(BELL_FREQUENCY)
        else:
            offset = (self.cursor_y * SCREEN_WIDTH + self.cursor_x) * 2
            self.video_memory[offset] = code
            self.video_memory[offset + 1] = self.color
            self.cursor_x += 1
            if self.cursor_x >= SCREEN_WIDTH:
                self.cursor_x = 0
                self._next_line(with_attributes=False)

        self.set_cursor(self.cursor_x, self.cursor_y)

    def write(self, text: str) -> None:
        """Write characters up to the end of ``text`` or its first NUL."""
        for ch in text:
            if ch == "\0":
                break
            self.putchar(ch)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            raise IndexError(f"cell ({x}, {y}) is off the screen")
        return (y * SCREEN_WIDTH + x) * 2

    def cell(self, x: int, y: int) -> tuple[str, int]:
        """Character and attribute at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        return chr(self.video_memory[offset]), self.video_memory[offset + 1]

    def row_text(self, y: int) -> str:
        """The characters of row ``y``."""
        start = self._offset(0, y)
        return bytes(self.video_memory[start : start + SCREEN_WIDTH * 2 : 2]).decode("latin-1")