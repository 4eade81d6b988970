"""Coordinate arithmetic, string helpers and pairing functions."""

from __future__ import annotations

import math
import random
import re

from labworks.robots.errors import GameError

Coords = tuple[int, int]

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def add_coords(a: Coords, b: Coords) -> Coords:
    """Add two coordinate pairs component-wise."""
    return a[0] + b[0], a[1] + b[1]


def sub_coords(a: Coords, b: Coords) -> Coords:
    """Subtract ``b`` from ``a`` component-wise."""
    return a[0] - b[0], a[1] - b[1]


def split_str(text: str, delim: str = " ") -> list[str]:
    """Split on ``delim``; a trailing delimiter yields no empty last item."""
    parts = text.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def split_by_length(text: str, length: int) -> list[str]:
    """Break text into lines of words of roughly ``length`` characters."""
    pieces = []
    line = ""
    for word in split_str(text):
        line += word + " "
        if len(line) + len(word) > length:
            pieces.append(line)
            line = ""
    pieces.append(line)
    return pieces


def to_int(value: str, minimum: int = 0, maximum: int = 0) -> int:
    """Read the leading integer of ``value``.

    When ``maximum`` is non-zero the number must lie in ``[minimum, maximum]``.
    Raises GameError on any failure.
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        raise GameError("Incorrect argument - stoi")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise GameError("Incorrect argument - stoi")
    if maximum and not minimum <= number <= maximum:
        raise GameError(
            f"Incorrect argument - n is not above {minimum} and {maximum}"
        )
    return number


def rand_int(minimum: int, maximum: int) -> int:
    """Return a random integer in ``[minimum, maximum)``."""
    return int(random.random() * (maximum - minimum) + minimum)


def cantor_index(r: int, l: int) -> int:
    """Cantor pairing of ``(r, l)``."""
    w = r + l
    return (w * w + w) // 2 + r


def cantor_pair(n: int, sign: bool) -> Coords:
    """Inverse of :func:`cantor_index`; negated when ``sign`` is false."""
    root = math.sqrt(8 * n + 1)
    w = int((root - 1.0) / 2.0)
    triangle = w * int((root + 1.0) / 2.0) // 2
    l = n - triangle if n > triangle else 0
    r = w - l
    return (l, r) if sign else (-l, -r)


def szudzik_index(x: int, y: int) -> int:
    """Szudzik pairing of two signed integers."""
    xx = x * 2 if x >= 0 else x * -2 - 1
    yy = y * 2 if y >= 0 else y * -2 - 1
    return xx * xx + xx + yy if xx >= yy else yy * yy + xx


def _unfold(value: int) -> int:
    return value // 2 if value % 2 == 0 else -((value + 1) // 2)


def szudzik_pair(z: int) -> Coords:
    """Inverse of :func:`szudzik_index`."""
    if z < 0:
        raise ValueError("Szudzik index must not be negative")
    root = math.isqrt(z)
    rest = z - root * root
    a, b = (root, rest - root) if rest >= root else (rest, root)
    return _unfold(a), _unfold(b)