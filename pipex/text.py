"""String helpers: number parsing and formatting, splitting, searching,
bounded copying, trimming and slicing.

Positions are returned as indices into the string, or None when nothing
was found. The terminating position of a string, ``len(text)``, is where
a search for the NUL character ``"\\0"`` ends when the string holds none.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _single_char(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}, got {c!r}")
    return c


def parse_int(text: str) -> int:
    """Parse a decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional ``+`` or ``-`` sign is
    read, then as many decimal digits as follow. Anything after the digits
    is ignored; text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def format_int(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator`` and drop the empty pieces.

    Runs of separators, and separators at either end, produce no empty
    words.
    """
    _single_char(separator, "separator character")
    return [word for word in text.split(separator) if word]


def find_char(text: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for ``"\\0"`` in a string without one finds its end.
    """
    _single_char(c)
    index = text.find(c)
    if index >= 0:
        return index
    if c == "\0":
        return len(text)
    return None


def rfind_char(text: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for ``"\\0"`` in a string without one finds its end.
    """
    _single_char(c)
    index = text.rfind(c)
    if index >= 0:
        return index
    if c == "\0":
        return len(text)
    return None


def join(first: Optional[str], second: str) -> str:
    """Concatenate two strings; a missing first string gives the second."""
    if first is None:
        return second
    return first + second


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, at most ``size - 1`` characters long (empty
    when ``size`` is 0), and the full length of ``src``; a length not
    smaller than ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Characters are appended only while the result stays under
    ``size - 1`` characters. Returns the new text and the length the
    full concatenation would have had: ``min(len(dest), size) + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    dest_length = len(dest)
    result = dest
    if size > 0 and dest_length < size - 1:
        result = dest + src[: size - 1 - dest_length]
    return result, min(dest_length, size) + len(src)


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first position
    where they differ, the end of a string counting as code 0, or 0 when
    the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` lying wholly within the first
    ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def trim(text: str, charset: str) -> str:
    """Strip every character of ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        raise TypeError("both text and charset are required")
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A zero length, or a start past the end of the text, gives an empty
    string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if not length or start > len(text):
        return ""
    return text[start:start + length]