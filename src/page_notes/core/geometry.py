"""
Geometry primitives for page layout metadata.

Coordinates are persisted as decimal strings. They are written with one
fractional digit and read tolerantly, truncating toward zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional


# Largest power of ten a coordinate may carry; anything beyond is malformed
MAX_EXPONENT = 15


def parse_decimal(value: Optional[str], default: int = 0) -> int:
    """Parse a decimal attribute value into an integer, or return the default."""
    if value is None:
        return default
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return default
    if not number.is_finite() or number.adjusted() > MAX_EXPONENT:
        return default
    return int(number)


def format_decimal(value: int) -> str:
    """Format an integer coordinate the way the page format expects it."""
    return f"{int(value)}.0"


@dataclass(frozen=True)
class Point:
    """A position on the page canvas."""

    x: int = 0
    y: int = 0

    def offset(self, dx: int = 0, dy: int = 0) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Width and height of a region."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Box:
    """Bounding box of a region: its position point plus its size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Closed-interval point-in-box test; points on an edge are inside."""
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def __str__(self) -> str:
        return f"({self.x},{self.y}) {self.width}x{self.height}"
