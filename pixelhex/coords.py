"""Axial hex coordinates and the cube rounding rule.

Follows the conventions of https://www.redblobgames.com/grids/hexagons/:
an axial coordinate ``(q, r)`` carries an implicit third cube coordinate
``s = -q - r``.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .ring import RingAroundHex


class DegenerateLineError(ValueError):
    """Raised when a line is requested between two identical hexes."""


class Orientation(str, Enum):
    """Orientation of a hexagon relative to the pixel axes."""

    FLAT = "flat"
    POINTY = "pointy"


def _round_half_away(value: float) -> int:
    # Python's round() goes to even on ties; the grid rounds halves away from zero.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True, slots=True)
class Axial:
    q: int = 0
    r: int = 0

    def __post_init__(self) -> None:
        try:
            q = operator.index(self.q)
            r = operator.index(self.r)
        except TypeError:
            raise TypeError(
                f"axial components must be integers, got ({self.q!r}, {self.r!r})"
            ) from None
        object.__setattr__(self, "q", q)
        object.__setattr__(self, "r", r)

    @classmethod
    def from_tuple(cls, qr: tuple[int, int]) -> Axial:
        q, r = qr
        return cls(q, r)

    @classmethod
    def from_fractional(cls, qr: tuple[float, float]) -> Axial:
        """Snap a continuous ``(q, r)`` pair to the nearest hex."""

        q_f, r_f = qr
        return cube_round(q_f, r_f)

    @property
    def s(self) -> int:
        return -self.q - self.r

    @property
    def cube(self) -> tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def to_tuple(self) -> tuple[int, int]:
        return (self.q, self.r)

    def to_floats(self) -> tuple[float, float]:
        return (float(self.q), float(self.r))

    # Arithmetic ---------------------------------------------------------

    def __add__(self, other: Axial) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Axial) -> Axial:
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q - other.q, self.r - other.r)

    def __neg__(self) -> Axial:
        return Axial(-self.q, -self.r)

    def __mul__(self, scalar: int | float) -> Axial | tuple[float, float]:
        # Integer scaling stays on the grid; float scaling leaves it.
        if isinstance(scalar, bool):
            scalar = int(scalar)
        if isinstance(scalar, Integral):
            return Axial(self.q * scalar, self.r * scalar)
        if isinstance(scalar, float):
            return (self.q * scalar, self.r * scalar)
        return NotImplemented

    __rmul__ = __mul__

    # Metrics ------------------------------------------------------------

    def length(self) -> int:
        """Hex distance from the origin."""

        return (abs(self.q) + abs(self.q + self.r) + abs(self.r)) // 2

    def distance_to(self, other: Axial) -> int:
        return (self - other).length()

    def lerp(self, other: Axial, t: float) -> tuple[float, float]:
        q1, r1 = self * (1.0 - t)
        q2, r2 = other * float(t)
        return (q1 + q2, r1 + r2)

    @staticmethod
    def point_on_line(p1: Axial, p2: Axial, dist: float) -> Axial:
        """Return the hex ``dist`` hexes along the segment from ``p1`` to ``p2``.

        Raises:
            DegenerateLineError: ``p1`` and ``p2`` are the same hex, so the
                segment has no direction.
        """

        total = p1.distance_to(p2)
        if total == 0:
            raise DegenerateLineError(f"cannot walk a line from {p1} to itself")
        return Axial.from_fractional(p1.lerp(p2, dist / total))

    # Rings --------------------------------------------------------------

    def circle(self, radius: int) -> RingAroundHex:
        from .ring import RingAroundHex

        return RingAroundHex(self, radius)

    def neighbours(self) -> RingAroundHex:
        return self.circle(1)


def cube_round(q_f: float, r_f: float) -> Axial:
    """Round fractional axial coordinates to the nearest hex.

    The coordinate with the largest rounding error is recomputed from the
    other two so that ``q + r + s == 0`` holds. ``q`` is checked first, then
    ``r``; otherwise the rounded ``s`` is the one dropped.
    """

    s_f = -q_f - r_f
    q, r, s = _round_half_away(q_f), _round_half_away(r_f), _round_half_away(s_f)
    dq, dr, ds = abs(q - q_f), abs(r - r_f), abs(s - s_f)
    if dq > dr and dq > ds:
        q = -r - s
    elif dr > ds:
        r = -q - s
    return Axial(q, r)
