"""Kernel entry: set up the screen, exercise the library and print a greeting."""

from __future__ import annotations

import argparse
import operator
import struct

from .heap import default_user_heap
from .stdio import printf
from .tty import SCREEN_HEIGHT, Terminal, TerminalColor

__all__ = ["sum_numbers", "main"]

_FLOAT_SIZE = 4


def sum_numbers(*args: int) -> int:
    """Sum integers as a 32-bit int."""
    total = 0
    for value in args:
        total += operator.index(value)
    total &= 0xFFFFFFFF
    return total - (1 << 32) if total >= 1 << 31 else total


def _boot() -> Terminal:
    terminal = Terminal()
    terminal.set_color(TerminalColor.LIGHT_GREEN, TerminalColor.LIGHT_RED)
    terminal.initialize()
    total = sum_numbers(4, 6)

    heap = default_user_heap()
    address = heap.alloc(_FLOAT_SIZE)
    heap.write(address, struct.pack("<f", 2.0))
    heap.free(address)

    printf(terminal, "%d\n%s\t%s\b", total, "abc", "cba")
    return terminal


def main(argv: list[str] | None = None) -> int:
    """Boot the kernel and print the text left on the screen."""
    parser = argparse.ArgumentParser(
        prog="oscalib-kernel",
        description="Boot the kernel and print the resulting screen contents.",
    )
    parser.parse_args(argv)
    terminal = _boot()
    rows = [terminal.row_text(y).rstrip() for y in range(SCREEN_HEIGHT)]
    while rows and not rows[-1]:
        rows.pop()
    print("\n".join(rows))
    return 0