"""Character classification for 7-bit ASCII codes."""

from __future__ import annotations

__all__ = [
    "isalnum",
    "isalpha",
    "isascii",
    "isblank",
    "iscntrl",
    "isdigit",
    "isgraph",
    "islower",
    "isprint",
    "ispunct",
    "isspace",
    "isupper",
    "isxdigit",
]


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, which may be an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a character, got {type(c).__name__}")


def _between(code: int, low: str, high: str) -> bool:
    return ord(low) <= code <= ord(high)


def isalnum(c: int | str) -> bool:
    """True for decimal digits and ASCII letters."""
    code = _code(c)
    return _between(code, "0", "9") or _between(code, "a", "z") or _between(code, "A", "Z")


def isalpha(c: int | str) -> bool:
    """True for upper-case letters; the lower-case range checked is 'a'..'Z', which is empty."""
    code = _code(c)
    return _between(code, "A", "Z") or _between(code, "a", "Z")


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isblank(c: int | str) -> bool:
    """True for space and horizontal tab."""
    return _code(c) in (ord(" "), ord("\t"))


def iscntrl(c: int | str) -> bool:
    """True for codes 0 to 31 and 127."""
    code = _code(c)
    return 0 <= code <= 31 or code == 127


def isdigit(c: int | str) -> bool:
    """True for '0' to '9'."""
    return _between(_code(c), "0", "9")


def isgraph(c: int | str) -> bool:
    """True for printable characters other than space."""
    code = _code(c)
    return ord(" ") < code <= ord("~")


def islower(c: int | str) -> bool:
    """True for 'a' to 'z'."""
    return _between(_code(c), "a", "z")


def isprint(c: int | str) -> bool:
    """True for space to '~'."""
    return _between(_code(c), " ", "~")


def ispunct(c: int | str) -> bool:
    """True for the printable ASCII punctuation characters."""
    code = _code(c)
    return (
        _between(code, "!", "/")
        or _between(code, ":", "@")
        or _between(code, "[", "`")
        or _between(code, "{", "~")
    )


def isspace(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return and both tabs."""
    return _code(c) in (ord(ch) for ch in " \f\n\r\t\v")


def isupper(c: int | str) -> bool:
    """True for 'A' to 'Z'."""
    return _between(_code(c), "A", "Z")


def isxdigit(c: int | str) -> bool:
    """True for hexadecimal digits in either case."""
    code = _code(c)
    return _between(code, "0", "9") or _between(code, "A", "F") or _between(code, "a", "f")