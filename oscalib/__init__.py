"""C-style runtime pieces: ctype, math, number parsing, strings, formatting, a text terminal, a heap and a byte vector."""

__version__ = "0.1.0"