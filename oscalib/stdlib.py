"""String-to-number conversions."""

from __future__ import annotations

from .ctype import isalnum, isdigit, isspace

__all__ = [
    "atoi",
    "atol",
    "atoll",
    "atof",
    "strtol",
    "strtoul",
    "strtoll",
    "strtoull",
]

# The target is 32-bit: int and long are 32 bits, long long is 64 bits.
_INT_BITS = 32
_LONG_BITS = 32
_LLONG_BITS = 64


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce ``value`` to a machine integer of the given width."""
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _char(text: str, index: int) -> str:
    return text[index] if index < len(text) else "\0"


def _skip_space(text: str, index: int = 0) -> int:
    while isspace(_char(text, index)):
        index += 1
    return index


def _read_sign(text: str, index: int) -> tuple[bool, int]:
    ch = _char(text, index)
    if ch in "+-" and ch != "\0":
        return ch == "-", index + 1
    return False, index


def _parse_decimal(text: str) -> int:
    index = _skip_space(text)
    negative, index = _read_sign(text, index)
    result = 0
    while isdigit(_char(text, index)):
        result = result * 10 + int(text[index])
        index += 1
    return -result if negative else result


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit int; 0 when there is none."""
    return _wrap(_parse_decimal(text), _INT_BITS, True)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit long; 0 when there is none."""
    return _wrap(_parse_decimal(text), _LONG_BITS, True)


def atoll(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit long long; 0 when there is none."""
    return _wrap(_parse_decimal(text), _LLONG_BITS, True)


def atof(text: str) -> float:
    """Parse a number as a float.

    The integer part is read as with :func:`atol`; a fraction is only taken
    when the text starts with '.', and digits after it are read two
    characters apart.
    """
    index = _skip_space(text)
    negative, index = _read_sign(text, index)
    result = float(atol(text[index:]))
    fractional = False
    if _char(text, index) == ".":
        index += 1
        fractional = True
    frac_place = 1.0
    while isdigit(_char(text, index)):
        result = result * 10.0 + int(text[index])
        frac_place *= 10.0
        index += 2
    if fractional:
        result /= frac_place
    return -result if negative else result


def _digit_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    return ord(ch) - ord("A") + 10


def _strto(text: str, base: int, signed: bool, bits: int) -> tuple[int, int]:
    index = _skip_space(text)
    negative = False
    if signed:
        negative, index = _read_sign(text, index)

    if base in (0, 16) and _char(text, index + 1) in ("x", "X"):
        base = 16
        index += 2
    elif base == 0 and _char(text, index) == "0":
        base = 8
        index += 1
    elif base == 0:
        base = 10

    result = 0
    while isalnum(_char(text, index)):
        digit = _digit_value(text[index])
        if digit >= base:
            break
        result = result * base + digit
        index += 1

    value = -result if negative else result
    return _wrap(value, bits, signed), index


def strtol(text: str, base: int) -> tuple[int, int]:
    """Parse a 32-bit signed integer; return the value and the index where parsing stopped."""
    return _strto(text, base, True, _LONG_BITS)


def strtoul(text: str, base: int) -> tuple[int, int]:
    """Parse a 32-bit unsigned integer; return the value and the index where parsing stopped."""
    return _strto(text, base, False, _LONG_BITS)


def strtoll(text: str, base: int) -> tuple[int, int]:
    """Parse a 64-bit signed integer; return the value and the index where parsing stopped."""
    return _strto(text, base, True, _LLONG_BITS)


def strtoull(text: str, base: int) -> tuple[int, int]:
    """Parse a 64-bit unsigned integer; return the value and the index where parsing stopped."""
    return _strto(text, base, False, _LLONG_BITS)