"""Linear transforms between axial coordinates and pixel space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .coords import Axial, Orientation, cube_round

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import SpacingConfig

Point = tuple[float, float]


class HexTransform(Protocol):
    """Operations shared by every hex geometry placed on a regular grid."""

    @property
    def horizontal_spacing(self) -> float: ...

    @property
    def vertical_spacing(self) -> float: ...

    def pixel_center(self, qr: Axial) -> Point: ...

    def pixel_relative(self, xy: Point) -> Point: ...

    def nearest_axial(self, xy: Point) -> Axial: ...


@dataclass(frozen=True, slots=True)
class SpacingLayout:
    """Grid described only by the distance between neighbouring centers.

    ``horizontal_spacing`` and ``vertical_spacing`` are the pixel distances
    between adjacent hex centers along each axis. For flat-top hexes the
    vertical neighbour sits ``vertical_spacing`` below and the diagonal one
    ``horizontal_spacing`` across and half a row down; pointy-top is the
    transposed arrangement.
    """

    orientation: Orientation
    vertical_spacing: float
    horizontal_spacing: float

    @classmethod
    def flat(cls, horizontal: float, vertical: float) -> SpacingLayout:
        return cls(Orientation.FLAT, float(vertical), float(horizontal))

    @classmethod
    def pointy(cls, horizontal: float, vertical: float) -> SpacingLayout:
        return cls(Orientation.POINTY, float(vertical), float(horizontal))

    def pixel_center(self, qr: Axial) -> Point:
        q, r = qr.to_floats()
        if self.orientation == Orientation.FLAT:
            return (q * self.horizontal_spacing, (0.5 * q + r) * self.vertical_spacing)
        return ((q + r / 2.0) * self.horizontal_spacing, r * self.vertical_spacing)

    def nearest_axial(self, xy: Point) -> Axial:
        x, y = xy
        if self.orientation == Orientation.FLAT:
            q = x / self.horizontal_spacing
            r = -0.5 * x / self.horizontal_spacing + y / self.vertical_spacing
        else:
            q = x / self.horizontal_spacing - 0.5 * y / self.vertical_spacing
            r = y / self.vertical_spacing
        return cube_round(q, r)

    def pixel_relative(self, xy: Point) -> Point:
        xc, yc = self.pixel_center(self.nearest_axial(xy))
        return (xy[0] - xc, xy[1] - yc)

    def to_config(self) -> SpacingConfig:
        from .config import SpacingConfig

        return SpacingConfig(
            orientation=self.orientation,
            vertical_spacing=self.vertical_spacing,
            horizontal_spacing=self.horizontal_spacing,
        )

    @classmethod
    def from_config(cls, config: SpacingConfig) -> SpacingLayout:
        return cls(config.orientation, config.vertical_spacing, config.horizontal_spacing)
