from __future__ import annotations

from dataclasses import dataclass, field
from math import cos, radians, sin, sqrt

from .coords import Axial, Orientation, cube_round
from .layout import Point, SpacingLayout

SQRT3 = sqrt(3.0)
SQRT3_BY_2 = SQRT3 / 2.0
SQRT3_BY_3 = SQRT3 / 3.0


# Basis matrices from Red Blob (do not alter)
@dataclass(frozen=True, slots=True)
class HexBasis:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # first vertex, in 60° steps


FLAT_BASIS = HexBasis(
    f0=3.0 / 2.0, f1=0.0,
    f2=SQRT3_BY_2, f3=SQRT3,
    b0=2.0 / 3.0, b1=0.0,
    b2=-1.0 / 3.0, b3=SQRT3_BY_3,
    start_angle=0.0,
)
POINTY_BASIS = HexBasis(
    f0=SQRT3, f1=SQRT3_BY_2,
    f2=0.0, f3=3.0 / 2.0,
    b0=SQRT3_BY_3, b1=-1.0 / 3.0,
    b2=0.0, b3=2.0 / 3.0,
    start_angle=0.5,
)

_BASES = {Orientation.FLAT: FLAT_BASIS, Orientation.POINTY: POINTY_BASIS}


@dataclass(frozen=True, slots=True)
class IdealHex:
    """Regular hexagon geometry derived from its circumradius ``size``.

    Use :meth:`flat` or :meth:`pointy` rather than the constructor; every
    other field is computed from ``orientation`` and ``size``.
    """

    orientation: Orientation
    size: float
    width: float
    height: float
    inner_radius: float
    outer_radius: float
    vertical_spacing: float
    horizontal_spacing: float
    vertices: tuple[Point, ...] = field(repr=False)

    @classmethod
    def flat(cls, size: float) -> IdealHex:
        size = _checked_size(size)
        return cls(
            orientation=Orientation.FLAT,
            size=size,
            width=2.0 * size,
            height=SQRT3 * size,
            inner_radius=SQRT3_BY_2 * size,
            outer_radius=size,
            vertical_spacing=SQRT3 * size,
            horizontal_spacing=3.0 / 2.0 * size,
            vertices=_vertices(FLAT_BASIS, size),
        )

    @classmethod
    def pointy(cls, size: float) -> IdealHex:
        size = _checked_size(size)
        return cls(
            orientation=Orientation.POINTY,
            size=size,
            width=SQRT3 * size,
            height=2.0 * size,
            inner_radius=SQRT3_BY_2 * size,
            outer_radius=size,
            vertical_spacing=3.0 / 2.0 * size,
            horizontal_spacing=SQRT3 * size,
            vertices=_vertices(POINTY_BASIS, size),
        )

    @property
    def basis(self) -> HexBasis:
        return _BASES[self.orientation]

    def pixel_center(self, qr: Axial) -> Point:
        m = self.basis
        q, r = qr.to_floats()
        x = (m.f0 * q + m.f1 * r) * self.size
        y = (m.f2 * q + m.f3 * r) * self.size
        return (x, y)

    def fractional_axial(self, xy: Point) -> tuple[float, float]:
        m = self.basis
        px, py = xy[0] / self.size, xy[1] / self.size
        return (m.b0 * px + m.b1 * py, m.b2 * px + m.b3 * py)

    def nearest_axial(self, xy: Point) -> Axial:
        return cube_round(*self.fractional_axial(xy))

    def pixel_relative(self, xy: Point) -> Point:
        xc, yc = self.pixel_center(self.nearest_axial(xy))
        return (xy[0] - xc, xy[1] - yc)

    def corners(self, qr: Axial) -> tuple[Point, ...]:
        """Outline of the hex at ``qr`` in pixel space."""

        xc, yc = self.pixel_center(qr)
        return tuple((xc + x, yc + y) for x, y in self.vertices)

    def spacing_layout(self) -> SpacingLayout:
        return SpacingLayout(self.orientation, self.vertical_spacing, self.horizontal_spacing)


def _checked_size(size: float) -> float:
    size = float(size)
    if size <= 0:
        raise ValueError(f"hex size must be positive, got {size}")
    return size


def _vertices(basis: HexBasis, size: float) -> tuple[Point, ...]:
    points = []
    for i in range(6):
        angle = radians(60.0 * (i + basis.start_angle))
        points.append((size * cos(angle), size * sin(angle)))
    return tuple(points)
