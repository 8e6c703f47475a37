# libmx

A small collection of utilities for text, byte buffers and simple data
structures. It has no dependencies outside the standard library.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Modules

### `libmx.utils`

- Number formatting and parsing: `itoa`, `nbr_to_hex` (lowercase hex, rejects
  negative numbers with `ValueError`), `hex_to_nbr` (returns 0 for empty or
  invalid input).
- Integer maths: `power` (non-negative integer exponents, returns a float) and
  `isqrt`, which returns the root of a perfect square and 0 for anything else.
- Printing helpers that write to `sys.stdout` or to a given `file`:
  `print_char`, `print_str`, `print_int`, `print_unicode` (code points above
  U+10FFFF print nothing) and `print_strarr` (joins with a delimiter and ends
  with a newline).
- `is_space`: true for tab, newline, vertical tab, form feed, carriage return
  and space.
- Searching and sorting lists of strings: `strcmp`, `binary_search` (returns
  `(index, comparisons)`, or `(-1, 0)` when the key is absent), `bubble_sort`
  (in place, returns the number of swaps) and `quicksort(arr, left, right)`,
  which orders a range in place by string length and returns the number of
  swaps.
- `foreach`: calls a function on every item.

### `libmx.text`

`str_reverse`, `get_char_index`, `get_substr_index`, `strndup`, `strstr`
(returns the tail starting at the match, or `None`), `count_substr` (counts
overlapping matches), `count_words`, `strtrim`, `del_extra_spaces`,
`strsplit` (drops empty pieces), `strjoin`, `replace_substr` and
`file_to_str`, which reads a whole UTF-8 text file.

### `libmx.memory`

Byte-buffer operations modelled on the classic memory routines. They work on
`bytes`, `bytearray` and `memoryview`, report positions as offsets (or
`None` when nothing is found) and raise `ValueError` when a length runs past
a buffer: `memset`, `memcpy`, `memccpy`, `memcmp`, `memchr`, `memrchr`,
`memmem`, `memmove(buf, dst, src, length)` (overlap-safe move within one
buffer) and `realloc`, which returns a new zero-padded `bytearray`.

### `libmx.linked_list`

`LinkedList` is a singly linked list of `Node`s. It supports `push_front`,
`push_back`, `pop_front` and `pop_back` (the pops return the removed data, or
`None` on an empty list), `len()`, iteration, and an in-place insertion
`sort(cmp)`, where `cmp(a, b)` is true when `a` belongs after `b`.

### `libmx.lines`

`LineReader(stream, buf_size=1024)` reads records ending in a single-character
delimiter from a text or binary stream, `buf_size` units at a time.
`read_line(delim="\n")` returns the next record without its delimiter, or
`None` at the end; iterating over the reader yields records split on newlines.
Text left unterminated when the stream runs out is dropped.

## Examples

```python
from libmx.text import del_extra_spaces, strsplit
from libmx.utils import nbr_to_hex, bubble_sort
from libmx.linked_list import LinkedList

del_extra_spaces("  hello \t  world  ")   # "hello world"
strsplit("**a*bc**d*", "*")                # ["a", "bc", "d"]
nbr_to_hex(52)                             # "34"

names = ["delta", "alpha", "charlie"]
swaps = bubble_sort(names)                 # sorts in place, returns swap count

lst = LinkedList([3, 1, 2])
lst.push_front(0)
len(lst)                                   # 4
```

Reading records from a file:

```python
from libmx.lines import LineReader

with open("data.txt", "rb") as stream:
    for line in LineReader(stream, 16):
        print(line)
```

## What it does not do

This is a library only: it installs no command-line program.