"""Writing characters, strings and numbers to a stream or a descriptor.

A stream is either an object with a ``write`` method or an integer file
descriptor. A negative descriptor is ignored silently.
"""

from __future__ import annotations

import os
from typing import IO, Union

Stream = Union[int, IO[str]]


def _write(text: str, stream: Stream) -> None:
    if isinstance(stream, int):
        if stream < 0:
            return
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: str, stream: Stream) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, stream)


def put_str(text: str, stream: Stream) -> None:
    """Write a string as it is."""
    _write(text, stream)


def put_endl(text: str, stream: Stream) -> None:
    """Write a string followed by a newline."""
    _write(text + "\n", stream)


def put_number(n: int, stream: Stream) -> None:
    """Write an integer in decimal."""
    _write(str(n), stream)