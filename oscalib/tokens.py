"""String comparison, character search and delimiter-based tokenizing."""

from __future__ import annotations

from collections.abc import Iterator

from .strings import memcmp, strlen

__all__ = ["Tokenizer", "strcmp", "strchr", "tokenize"]


def _signed_char(code: int) -> int:
    if 0x80 <= code <= 0xFF:
        return code - 0x100
    return code


def _code_at(text: str, index: int, length: int) -> int:
    """Character code at ``index``, or 0 at or past the terminating NUL."""
    return _signed_char(ord(text[index])) if index < length else 0


def strcmp(a: str | None, b: str | None) -> int:
    """Compare two NUL-terminated strings.

    Strings of equal length compare byte by byte. When the lengths differ the
    result is the code of the longer string's character one place past the end
    of the shorter one, negated when ``b`` is the longer. A missing string
    compares below a present one.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    len_a = strlen(a)
    len_b = strlen(b)
    if len_a > len_b:
        return _code_at(a, len_b + 1, len_a)
    if len_a < len_b:
        return -_code_at(b, len_a + 1, len_b)
    return memcmp(a, b, len_a)


def _as_code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a character, got {type(c).__name__}")


def strchr(text: str | None, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``text``, or None.

    Searching for NUL gives the index of the terminator. An empty or missing
    string gives None.
    """
    code = _as_code(c)
    if not text or text[0] == "\0":
        return None
    length = strlen(text)
    if code == 0:
        return length
    for index, ch in enumerate(text[:length]):
        if ord(ch) == code:
            return index
    return None


class Tokenizer:
    """Splits text into tokens, remembering where the previous call stopped."""

    def __init__(self) -> None:
        self._text: str | None = None
        self._pos = 0

    def _is_delim(self, ch: str, delim: str) -> bool:
        return strchr(delim, ch) is not None

    def next(self, text: str | None, delim: str) -> str | None:
        """Return the next token.

        Passing ``text`` starts on a new string; passing None continues the
        previous one. Returns None once no tokens remain.
        """
        if text is not None:
            self._text = text[: strlen(text)]
            self._pos = 0
        if self._text is None:
            return None

        source = self._text
        start = self._pos
        while start < len(source) and self._is_delim(source[start], delim):
            start += 1
        if start >= len(source):
            self._text = None
            return None

        end = start
        while end < len(source) and not self._is_delim(source[end], delim):
            end += 1
        if end >= len(source):
            self._text = None
        else:
            self._pos = end + 1
        return source[start:end]


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield every token of ``text`` separated by any character of ``delim``."""
    tokenizer = Tokenizer()
    token = tokenizer.next(text, delim)
    while token is not None:
        yield token
        token = tokenizer.next(None, delim)