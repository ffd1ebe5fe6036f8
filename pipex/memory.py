"""Byte-buffer helpers: search, compare, copy, move and fill."""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def find_byte(data: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value & 0xFF`` in the
    first ``n`` bytes of ``data``, or None when there is none.

    A count of zero or less finds nothing.
    """
    if n <= 0:
        return None
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0
    when all ``n`` bytes are equal.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def copy_bytes(dest: Optional[bytearray], src: Optional[Buffer], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are None nothing is done and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both destination and source are required")
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move_bytes(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset
    ``dest``; the two ranges may overlap. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("range runs past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def fill_bytes(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value & 0xFF`` and return it."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero_bytes(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    fill_bytes(buffer, 0, n)


def zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when both sizes are the largest size value.
    """
    if count < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    if count == SIZE_MAX and size == SIZE_MAX:
        raise MemoryError("requested size is too large")
    return bytearray(count * size)