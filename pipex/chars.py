"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer
character code. Only the 7-bit ASCII ranges are recognised, whatever
the locale.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def is_alpha(c: Char) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII capital; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    return _shift(c, "A", "Z", 32)


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII small letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    return _shift(c, "a", "z", -32)