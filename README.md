# ftlib

Small, dependency-free helpers for characters, byte buffers, strings,
singly linked lists, line-by-line reading of file descriptors and
printf-style formatting.

## Modules

### `ftlib.chars`

ASCII classification and case conversion. Each function takes an integer
code or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (codes 0–127),
  `is_print` (space through `~`).
- `is_white_space` — true only for the space character.
- `to_upper`, `to_lower` — convert ASCII letters; anything else comes back
  unchanged. A string argument gives a string back, an integer gives an
  integer.

### `ftlib.memory`

Operations on `bytearray` and bytes-like objects. A negative count raises
`ValueError`; a count larger than a buffer raises `IndexError`.

- `memset(buffer, value, n)` — fill the first `n` bytes, return `buffer`.
- `bzero(buffer, n)` — zero the first `n` bytes.
- `calloc(count, size)` — a new zero-filled `bytearray` of `count * size`.
- `memcpy(dest, src, n)` — copy `n` bytes to the start of `dest`.
- `memmove(buffer, dest, src, n)` — copy `n` bytes inside one buffer from
  offset `src` to offset `dest`; overlapping regions are handled.
- `memchr(data, c, n)` — index of byte `c` in the first `n` bytes, or `None`.
- `memcmp(a, b, n)` — difference of the first unequal bytes, or 0.

### `ftlib.output`

Writing to a text stream (standard output when `stream` is omitted):
`put_char_fd`, `put_str_fd`, `put_endl_fd` (adds a newline) and
`put_nbr_fd` (an integer in decimal).

### `ftlib.strings`

- `atoi(text)` — parse a leading decimal integer after whitespace and one
  optional sign; gives 0 when there are no digits; wraps to 32 bits.
- `itoa(n)` — decimal text of a 32-bit signed integer; raises
  `OverflowError` outside that range.
- `split(text, sep)`, `count_words(text, sep)` — split on one character,
  dropping empty pieces.
- `strchr`, `strrchr` — index of the first / last occurrence, or `None`;
  searching for `"\0"` gives the length of the string.
- `strjoin`, `strtrim(s, charset)`, `substr(s, start, length)`.
- `strlcpy(src, size)` and `strlcat(dest, src, size)` — return a tuple of
  the resulting text and the length the full result would have had.
- `strmapi(s, f)` — build a string from `f(index, char)`;
  `striteri(chars, f)` — call `f(index, char)` over a mutable sequence,
  replacing items with any non-`None` result.
- `strcmp`, `strncmp` — return -1, 0 or 1.
- `strnstr(big, little, length)` — index of `little` within the first
  `length` characters, 0 for an empty `little`, otherwise `None`.

### `ftlib.linkedlist`

`LinkedList` is a singly linked list of `Node` objects (`content`, `next`).
It supports `len()`, iteration over contents, `add_front`, `add_back`,
`last`, `clear(delete)`, `iterate(f)` and `map(f, delete)`. `map` returns
a new list; if `f` raises part way, the contents already produced are
passed to `delete` and the error propagates.

### `ftlib.nextline`

`LineReader(buffer_size=1)` reads a file descriptor `buffer_size` bytes at a
time and keeps unread data for each descriptor separately.
`next_line(fd)` returns the next line with its newline (the last line may
lack one) or `None` at end of input; `lines(fd)` yields every remaining
line. `get_next_line(fd)` uses one shared reader.

### `ftlib.printf`

- `format_string(fmt, *args)` — supports `%c`, `%s`, `%p`, `%d`, `%i`,
  `%u`, `%x`, `%X` and `%%`. `%s` of `None` gives `(null)`; `%p` of a null
  address gives `(nil)`; `%d`/`%i` wrap to signed 32 bits and `%u`/`%x`/`%X`
  to unsigned 32 bits. A `%` before any other character is kept as written.
  Too few arguments raise `TypeError`.
- `printf(fmt, *args, stream=None)` — write the result and return the
  number of characters counted; a `%` that does not start a known
  conversion is written but not counted.
- `put_nbr_base(number, base)`, `is_valid_base(base)`,
  `format_pointer(address)`.

## What it does not do

The formatter has no flags, field widths, precision or length modifiers,
and there is no command-line program; everything is used from Python.

## Examples

```python
from ftlib.strings import split, atoi
from ftlib.printf import format_string

split("  hello  world ", " ")      # ['hello', 'world']
atoi("   -42abc")                  # -42
format_string("%s is %x", "n", 255)  # 'n is ff'
```

Reading lines from a file descriptor:

```python
import os
from ftlib.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=32)
for line in reader.lines(fd):
    print(line, end="")
os.close(fd)
```

## Installation and tests

```
pip install ".[test]"
pytest
```