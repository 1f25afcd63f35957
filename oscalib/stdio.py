"""Formatted output into strings and onto a text terminal."""

from __future__ import annotations

import math
import operator
import struct
from collections.abc import Iterable, Iterator
from typing import Any

from .stdlib import atoi
from .tty import Terminal

__all__ = ["vsnprintf", "snprintf", "sprintf", "printf", "SIZE_MAX", "BUF_MAX"]

# size_t is 32 bits wide on the target.
SIZE_MAX = (1 << 32) - 1
# printf formats into a buffer of this many bytes, terminator included.
BUF_MAX = 100
DEFAULT_PRECISION = 6
# Width used by zero-filled integers when no precision is in effect.
_DEFAULT_FILL_WIDTH = 11

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _f32(x: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


class _Arguments:
    """Hands out the variable arguments one at a time, converted to their C types."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._it: Iterator[Any] = iter(args)

    def _take(self, spec: str) -> Any:
        try:
            return next(self._it)
        except StopIteration:
            raise ValueError(f"not enough arguments for conversion %{spec}") from None

    def _integer(self, spec: str) -> int:
        value = self._take(spec)
        try:
            return operator.index(value)
        except TypeError:
            raise TypeError(
                f"conversion %{spec} needs an integer, got {type(value).__name__}"
            ) from None

    def int32(self, spec: str) -> int:
        return _wrap(self._integer(spec), 32, True)

    def uint32(self, spec: str) -> int:
        return _wrap(self._integer(spec), 32, False)

    def string(self, spec: str) -> str:
        value = self._take(spec)
        if not isinstance(value, str):
            raise TypeError(f"conversion %{spec} needs a string, got {type(value).__name__}")
        return value.split("\0", 1)[0]

    def float32(self, spec: str) -> float:
        value = self._take(spec)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"conversion %{spec} needs a number, got {type(value).__name__}")
        return _f32(float(value))


def _unsigned_digits(value: int, base: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def _itoa(value: int) -> str:
    if value < 0:
        return "-" + _unsigned_digits(-value, 10)
    return _unsigned_digits(value, 10)


def _zero_fill(num: int, precision: int, base: int, signed: bool) -> str:
    """Pad with zeros so the decimal digit count reaches ``precision``.

    The digits are always counted in base 10, and a minus sign follows the
    zeros.
    """
    if precision == 0:
        precision = _DEFAULT_FILL_WIDTH
    digits = len(str(abs(num))) if num else 1
    zeros = max(precision - digits, 0)
    body = _itoa(num) if signed else _unsigned_digits(num, base)
    return "0" * zeros + body


def _ftoa(num: float, precision: int) -> str:
    """Fixed-point text with ``precision`` truncated fraction digits."""
    if precision < 0:
        precision = DEFAULT_PRECISION
    if num == 0.0:
        return "0." + "0" * precision
    if not math.isfinite(num):
        raise ValueError(f"cannot format {num!r}")
    ipart = math.trunc(num)
    fpart = _f32(num - ipart)
    sign = ""
    if num < 0:
        sign = "-"
        ipart = -ipart
        fpart = -fpart
    fraction = []
    for _ in range(precision):
        fpart = _f32(fpart * 10)
        digit = int(fpart)
        fraction.append(_DIGITS[digit % 10])
        fpart = _f32(fpart - digit)
    return f"{sign}{_unsigned_digits(ipart, 10)}.{''.join(fraction)}"


def vsnprintf(size: int, fmt: str, args: Iterable[Any]) -> str:
    """Format ``args`` by ``fmt``, keeping at most ``size - 1`` characters.

    Conversions are d/i, u, x (lower-case hex), s and f, each in either case.
    After '.' or '*' the conversion character is the one two places on; '.'
    reads the precision with atoi starting at that character, '*' takes it
    from the arguments. The precision stays in effect for later %f
    conversions. Any other character after '%' is dropped. A size of zero
    sets no limit.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    limit = size - 1 if size > 0 else SIZE_MAX
    fmt = fmt.split("\0", 1)[0]
    arguments = _Arguments(args)
    out: list[str] = []
    precision = DEFAULT_PRECISION

    def emit(text: str) -> None:
        room = limit - len(out)
        if room > 0:
            out.extend(text[:room])

    length = len(fmt)
    i = 0
    while i < length:
        ch = fmt[i]
        if ch == "%" and i + 1 < length:
            i += 1
            spec = fmt[i]
            if spec in "iIdD":
                emit(_itoa(arguments.int32(spec)))
            elif spec in "uU":
                emit(_unsigned_digits(arguments.uint32(spec), 10))
            elif spec in "xX":
                emit(_unsigned_digits(arguments.uint32(spec), 16))
            elif spec in "sS":
                emit(arguments.string(spec))
            elif spec in "fF":
                emit(_ftoa(arguments.float32(spec), _wrap(precision, 32, True)))
            elif spec in ".*":
                i += 1
                if spec == "*":
                    precision = _wrap(arguments.int32("*"), 32, False)
                else:
                    precision = _wrap(atoi(fmt[i + 1 :]), 32, False)
                i += 1
                if i >= length:
                    break
                conv = fmt[i]
                signed_precision = _wrap(precision, 32, True)
                if conv in "iIdD":
                    emit(_zero_fill(arguments.int32(conv), signed_precision, 10, True))
                elif conv in "uU":
                    emit(_zero_fill(arguments.uint32(conv), signed_precision, 10, False))
                elif conv in "xX":
                    emit(_zero_fill(arguments.uint32(conv), signed_precision, 16, False))
                elif conv in "sS":
                    text = arguments.string(conv)
                    if precision > 0:
                        emit(text)
                elif conv in "fF":
                    emit(_ftoa(arguments.float32(conv), signed_precision))
        else:
            emit(ch)
        i += 1

    return "".join(out)


def snprintf(size: int, fmt: str, *args: Any) -> str:
    """Format into at most ``size - 1`` characters."""
    return vsnprintf(size, fmt, args)


def sprintf(fmt: str, *args: Any) -> str:
    """Format with no practical size limit."""
    return vsnprintf(SIZE_MAX, fmt, args)


def printf(terminal: Terminal, fmt: str, *args: Any) -> int:
    """Format into a buffer of BUF_MAX bytes, write it to ``terminal`` and return its length."""
    text = vsnprintf(BUF_MAX, fmt, args)
    terminal.write(text)
    return len(text)