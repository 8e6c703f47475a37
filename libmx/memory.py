"""Byte-buffer helpers in the manner of the classic memory routines."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _require(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with the byte value ``c``."""
    _require(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dst``."""
    _require(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: Buffer, c: int, n: int) -> int | None:
    """Copy bytes up to and including the first ``c``.

    Returns the offset in ``dst`` just past the copied ``c``, or None when
    ``c`` is not among the first ``n`` bytes (all ``n`` are then copied).
    """
    _require(n, dst, src)
    chunk = bytes(src[:n])
    index = chunk.find(c & 0xFF)
    if index == -1:
        dst[:n] = chunk
        return None
    dst[: index + 1] = chunk[: index + 1]
    return index + 1


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values."""
    _require(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memchr(s: Buffer, c: int, n: int) -> int | None:
    """Return the offset of the first byte ``c`` within the first ``n`` bytes."""
    _require(n, s)
    index = bytes(s[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memrchr(s: Buffer, c: int, n: int) -> int | None:
    """Return the offset of the last byte ``c`` within the first ``n`` bytes."""
    _require(n, s)
    index = bytes(s[:n]).rfind(c & 0xFF)
    return index if index >= 0 else None


def memmem(big: Buffer, little: Buffer) -> int | None:
    """Return the offset of ``little`` inside ``big``; an empty ``little`` matches at 0."""
    index = bytes(big).find(bytes(little))
    return index if index >= 0 else None


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes inside ``buf`` from offset ``src`` to ``dst``; regions may overlap."""
    if min(dst, src, length) < 0 or max(dst, src) + length > len(buf):
        raise ValueError("range lies outside the buffer")
    buf[dst : dst + length] = bytes(buf[src : src + length])
    return buf


def realloc(buf: Buffer | None, size: int) -> bytearray | None:
    """Return a new buffer of ``size`` bytes holding as much of ``buf`` as fits.

    Extra bytes are zero. A size of 0 with an existing buffer releases it and
    gives None.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if buf is None:
        return bytearray(size)
    if size == 0:
        return None
    result = bytearray(size)
    keep = min(size, len(buf))
    result[:keep] = bytes(buf[:keep])
    return result