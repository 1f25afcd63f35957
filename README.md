# oscalib

oscalib is a small C-style runtime for a 32-bit hobby kernel, written as a plain Python library. Integer results wrap to 32-bit or 64-bit machine widths where C would wrap them, and the `*f` math functions round every step to single precision.

## Modules

- `oscalib.ctype` classifies characters. It has `isalnum`, `isalpha`, `isascii`, `isblank`, `iscntrl`, `isdigit`, `isgraph`, `islower`, `isprint`, `ispunct`, `isspace`, `isupper` and `isxdigit`. Each takes an int code or a one-character string. `isalpha` accepts only upper-case letters.
- `oscalib.numeric` holds the float and integer limits (`FLT_EPSILON`, `DBL_MAX`, `INT_MAX`, `LLONG_MIN` and so on). `build_inf()` and `build_nan()` build infinity and a quiet NaN from their single-precision bit patterns.
- `oscalib.mathlib` has `fabs`, `floor`, `ceil`, `fmod`, `pow`, `exp` and `log`, each with a single-precision variant (`fabsf`, `floorf` and so on). `exp` and `log` are computed by power series. `fmod` takes the sign of the divisor and returns NaN when the divisor is zero. `log` returns NaN for arguments that are not above zero.
- `oscalib.stdlib` has `atoi`, `atol`, `atoll` and `atof`. It also has `strtol`, `strtoul`, `strtoll` and `strtoull`, which return a `(value, index)` pair, where the index is the position at which parsing stopped.
- `oscalib.strings` has `strlen`, `wcslen`, `memcpy`, `memset` and `memcmp`. They work on NUL-terminated `str` values or on bytes-like buffers. `memcpy` and `memset` write into a `bytearray`.
- `oscalib.tokens` has `strcmp`, `strchr` (which returns an index or `None`), a stateful `Tokenizer` with a `next(text, delim)` method, and a `tokenize(text, delim)` generator.
- `oscalib.vector` has `ByteVector`, a growable byte buffer:
  - You push to either end with `push_back` and `push_front`.
  - It remembers the size of the most recent element at each end, so `pop_back` and `pop_front` can each remove one element after a push at that end.
  - It also has `find`, `destroy`, `len()` and the `data` property.
- `oscalib.heap` has `Heap`, a first-fit block allocator over a simulated memory region. Blocks carry 24-byte headers, are split on allocation and are merged on `free`.
  - `alloc` raises `MemoryError` when no block fits.
  - `realloc` copies into a new block and leaves the old one allocated.
  - `read` and `write` access the payload of allocated blocks, and `blocks()` lists the layout.
  - `BlockType`, `RegionStatus`, `pack_metadata`, `unpack_metadata` and `default_user_heap()` cover the region metadata and the standard user heap.
- `oscalib.tty` has `Terminal` and `TerminalColor`. `Terminal` models an 80×25 VGA text screen as (character, attribute) byte pairs:
  - It handles newline, tab, carriage return, backspace, form feed and scrolling.
  - A bell is recorded in `tone_frequency` and `tone_divisor`.
  - `cell(x, y)` and `row_text(y)` read the screen back.
- `oscalib.stdio` has `vsnprintf`, `snprintf` and `sprintf`, which return the formatted string. It also has `printf(terminal, fmt, *args)`, which writes to a `Terminal` and returns the number of characters written.
  - The conversions are `%d`/`%i`, `%u`, `%x`, `%s` and `%f`, in either case.
  - A `.` or `*` precision zero-pads integers.
  - `printf` keeps at most 99 characters.
- `oscalib.kernel` has `sum_numbers(*args)` and `main()`, the boot routine behind the `oscalib-kernel` command.

## Install

```
pip install .
```

## Example

```python
from oscalib.tty import Terminal, TerminalColor
from oscalib.stdio import printf, snprintf
from oscalib.stdlib import strtol

term = Terminal()
term.set_color(TerminalColor.LIGHT_GREEN, TerminalColor.LIGHT_RED)
term.initialize()
printf(term, "%d\n%s\t%s", 10, "abc", "cba")
print(term.row_text(0).rstrip())   # 10
print(term.row_text(1).rstrip())   # abc     cba

print(snprintf(32, "%x", 255))     # ff
print(strtol("0x1f rest", 0))      # (31, 4)
```

## Command

```
oscalib-kernel
```

This command boots the kernel against an in-memory terminal:

1. It clears the screen.
2. It sums two numbers.
3. It allocates, writes and frees a float on the user heap.
4. It prints a short line with `printf`.
5. It writes the non-empty screen rows to standard output.

## What it does not do

Everything here runs in memory:

- The terminal does not drive a display.
- The bell does not make a sound.
- The heap does not manage real memory.

No bootloader, disk image or hardware access is included.

## Tests

```
pip install .[test]
pytest
```