# ftprint

A small library with a minimal `printf` and a set of helpers for ASCII
characters, byte buffers, strings, a singly linked list and stream output.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
python -m pytest
```

## Formatting: `ftprint.printf`

`printf(fmt, *args, file=None)` writes the formatted text to `file`
(standard output by default) and returns the number of characters written.
`format_string(fmt, *args)` returns the same text instead of writing it.

Supported conversions:

| Spec      | Meaning                                                    |
|-----------|------------------------------------------------------------|
| `%c`      | a one-character string, or an int (its low byte)           |
| `%s`      | a string; `None` gives `(null)`                            |
| `%p`      | an address as `0x` plus lower-case hex; `None` or 0 gives `0x0` |
| `%d` `%i` | an int, wrapped to a signed 32-bit value                   |
| `%u`      | an int, wrapped to an unsigned 32-bit value                |
| `%x` `%X` | an int, wrapped to unsigned 32 bits, in lower/upper-case hex |
| `%%`      | a literal percent sign                                     |

Other behaviour:

- An unknown conversion letter produces no output and uses no argument.
- A format ending in a lone `%` raises `ValueError`.
- Too few arguments raises `TypeError`; so does a value of the wrong type
  (for example a non-int for `%d`).
- Extra arguments are ignored.

Two building blocks are public as well:

- `format_hex(n, upper=False)` returns the hex digits of a non-negative int,
  without prefix (negative values raise `ValueError`).
- `format_pointer(address)` returns the `%p` form of an address.

```python
from ftprint.printf import printf, format_string, format_hex, format_pointer

count = printf("%s has %d items (%x)\n", "box", 42, 255)
# prints "box has 42 items (ff)" and returns 22

format_string("%u%%", 7)        # "7%"
format_string("%d", 2**31)      # "-2147483648"
format_hex(3054, upper=True)    # "BEE"
format_pointer(0)               # "0x0"
```

## Helpers

### `ftprint.chars`

`is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower`,
`to_upper`. Each takes an int code or a one-character string. The
classifiers return a bool; the case converters return a value of the same
kind as their argument and change only ASCII letters.

### `ftprint.memory`

Helpers for `bytearray`/`bytes` buffers:

- `mem_set(buf, value, n)` fills the first `n` bytes and returns `buf`;
  `bzero(buf, n)` zeroes them.
- `calloc(count, size)` returns a zero-filled `bytearray`.
- `mem_chr(data, c, n)` returns the index of a byte in the first `n` bytes,
  or `None`.
- `mem_cmp(a, b, n)` returns the difference of the first unequal bytes, or 0.
- `mem_cpy(dest, src, n)` copies `n` bytes into `dest`.
- `mem_move(buf, dest, src, n)` copies `n` bytes inside one buffer between
  offsets, overlap allowed.

Counts that are negative raise `ValueError`; counts past the end of a buffer
raise `IndexError`.

### `ftprint.strings`

- `atoi(text)` parses a leading integer after whitespace and one sign.
- `itoa(n)` returns the text of a 32-bit signed int (`OverflowError` outside).
- `split(text, sep)` splits on one character, dropping empty words.
- `strchr(text, c)` / `strrchr(text, c)` return an index or `None`;
  searching for `"\0"` finds the end of the text.
- `striteri(text, func)` calls `func(index, text)` for each position of a
  mutable sequence; `strmapi(text, func)` builds a string from
  `func(index, char)`.
- `strjoin(first, second)` concatenates.
- `strlcat(dest, src, size)` and `strlcpy(src, size)` return a tuple of the
  resulting text and the length the full result would have needed.
- `strncmp(first, second, n)` compares at most `n` characters.
- `strnstr(haystack, needle, length)` finds `needle` within the first
  `length` characters.
- `strtrim(text, charset)` strips characters of `charset` from both ends.
- `substr(text, start, length)` returns a slice.

### `ftprint.linked`

`Node` (a dataclass with `content` and `next`) and `LinkedList`, which can
be built from an iterable and offers `push_front`, `push_back` (each returns
the new node), `last()`, `clear(delete)` (passes every value to `delete`,
then empties the list), `iterate(func)`, `map(func)` (returns a new list),
`len()` and iteration over values.

### `ftprint.output`

`put_char(c, stream=None)`, `put_str(s, stream=None)`,
`put_endl(s, stream=None)` and `put_nbr(n, stream=None)` write to a text
stream, standard output by default. `put_nbr` accepts 32-bit signed ints
only.

```python
from ftprint.linked import LinkedList
from ftprint.strings import split

items = LinkedList(split("  alpha beta  gamma ", " "))
list(items.map(str.upper))   # ["ALPHA", "BETA", "GAMMA"]
```

## What it does not do

`printf` has no flags, field widths, precisions or length modifiers, and no
floating-point conversions. The package is a library only; it installs no
command-line program.