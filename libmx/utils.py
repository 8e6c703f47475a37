"""Printing, number conversion, searching and sorting helpers."""

from __future__ import annotations

import math
import string
import sys
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TextIO

_SPACE_CHARS = "\t\n\v\f\r "
_HEX_DIGITS = frozenset(string.hexdigits)
_ULONG_MASK = (1 << 64) - 1
_MAX_CODE_POINT = 0x10FFFF


def _out(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def is_space(c: str) -> bool:
    """Return True for a tab, newline, vertical tab, form feed, carriage return or space."""
    return len(c) == 1 and c in _SPACE_CHARS


def print_char(c: str, file: TextIO | None = None) -> None:
    """Write a single character."""
    _out(file).write(c)


def print_unicode(code: int, file: TextIO | None = None) -> None:
    """Write the character with the given code point; code points past U+10FFFF write nothing."""
    if code < 0:
        raise ValueError(f"negative code point: {code}")
    if code > _MAX_CODE_POINT:
        return
    _out(file).write(chr(code))


def print_str(s: str, file: TextIO | None = None) -> None:
    """Write a string as is."""
    _out(file).write(s)


def print_strarr(
    arr: Sequence[str] | None, delim: str | None, file: TextIO | None = None
) -> None:
    """Write the strings separated by ``delim`` and end with a newline."""
    if arr is None or delim is None:
        return
    _out(file).write(delim.join(arr) + "\n")


def print_int(n: int, file: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _out(file).write(str(n))


def power(n: float, exponent: int) -> float:
    """Raise ``n`` to a non-negative integer power by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1.0
    result = float(n)
    for _ in range(exponent - 1):
        result *= n
    return result


def isqrt(x: int) -> int:
    """Return the square root of a perfect square, or 0 for anything else."""
    if x <= 0:
        return 0
    root = math.isqrt(x)
    return root if root * root == x else 0


def nbr_to_hex(nbr: int) -> str:
    """Return the lowercase hexadecimal form of a non-negative integer."""
    if nbr < 0:
        raise ValueError("number must not be negative")
    return format(nbr, "x")


def hex_to_nbr(hex_str: str | None) -> int:
    """Parse hexadecimal digits; anything empty or invalid gives 0."""
    if not hex_str or not all(ch in _HEX_DIGITS for ch in hex_str):
        return 0
    return int(hex_str, 16) & _ULONG_MASK


def itoa(number: int) -> str:
    """Return the decimal form of an integer."""
    return str(number)


def foreach(items: Iterable[Any] | None, func: Callable[[Any], Any] | None) -> None:
    """Call ``func`` on every item in order."""
    if items is None or func is None:
        return
    for item in items:
        func(item)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the result is the difference of the first differing characters."""
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def binary_search(arr: Sequence[str] | None, s: str | None) -> tuple[int, int]:
    """Search a sorted sequence; return ``(index, comparisons)``, or ``(-1, 0)`` if absent."""
    if arr is None or s is None:
        raise ValueError("array and key are required")
    low, high = 0, len(arr) - 1
    steps = 0
    while low <= high:
        mid = (low + high) // 2
        steps += 1
        order = strcmp(arr[mid], s)
        if order == 0:
            return mid, steps
        if order < 0:
            low = mid + 1
        else:
            high = mid - 1
    return -1, 0


def bubble_sort(arr: MutableSequence[str] | None) -> int:
    """Sort strings in place with bubble sort and return the number of swaps."""
    if not arr:
        return 0
    swaps = 0
    size = len(arr)
    for _ in range(size):
        for j in range(size - 1):
            if strcmp(arr[j], arr[j + 1]) > 0:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swaps += 1
    return swaps


def _partition(arr: MutableSequence[str], left: int, right: int) -> tuple[int, int]:
    swaps = 0
    mid = (left + right) // 2
    while left <= right:
        while len(arr[left]) < len(arr[mid]):
            left += 1
        while len(arr[right]) > len(arr[mid]):
            right -= 1
        if left == right:
            left += 1
            right -= 1
        elif left < right:
            if len(arr[left]) != len(arr[right]):
                arr[left], arr[right] = arr[right], arr[left]
                swaps += 1
            left += 1
            right -= 1
    return left, swaps


def quicksort(arr: MutableSequence[str] | None, left: int, right: int) -> int:
    """Sort ``arr[left..right]`` in place by string length and return the number of swaps."""
    if arr is None:
        raise ValueError("array is required")
    swaps = 0
    if left < right:
        split, swaps = _partition(arr, left, right)
        if left < split - 1:
            swaps += quicksort(arr, left, split - 1)
        if split < right:
            swaps += quicksort(arr, split, right)
    return swaps