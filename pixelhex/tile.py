"""Pixel lookup for hex tiles whose artwork is not a perfect hexagon.

Hand-drawn or pixel-art tiles on a flat-top grid rarely match the ideal
hexagon outline: edges are jagged, and neighbouring tiles interlock a pixel
or two into each other's nominal area. :class:`PixelHex` stores the actual
silhouette of one tile as a per-row ``(x_min, x_max)`` table and uses it to
correct the ideal grid's guess near tile borders.

Only flat-top tiles are supported.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from .coords import Axial, Orientation
from .layout import Point, SpacingLayout

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import PixelHexConfig

Extent = tuple[float, float]
RowSample = tuple[float, Extent]

# Nudges towards the neighbouring tile when a pixel falls left or right of
# the row's span, split by whether it lies above/at or below the center.
_LEFT_UPPER = Axial(-1, 0)
_LEFT_LOWER = Axial(-1, 1)
_RIGHT_UPPER = Axial(1, -1)
_RIGHT_LOWER = Axial(1, 0)


class HexRangeError(IndexError):
    """Raised when a pixel lies outside every row the tile table covers."""


@dataclass(frozen=True, slots=True)
class PixelHex:
    layout: SpacingLayout
    vertical_extents: Extent
    horizontal_extents: tuple[Extent, ...]

    def __post_init__(self) -> None:
        if self.layout.orientation != Orientation.FLAT:
            raise ValueError("irregular tiles are only supported on flat-top grids")

    @classmethod
    def flat(cls, samples: Sequence[RowSample]) -> PixelHex:
        """Build a tile from ``(relative_row, (x_min, x_max))`` samples.

        Rows are measured relative to the tile's own center. Every row
        between the smallest and largest sampled row must appear exactly
        once. An empty sequence yields the zero-sized tile.
        """

        if not samples:
            return cls(SpacingLayout.flat(0.0, 0.0), (0.0, 0.0), ())

        rows = [float(row) for row, _ in samples]
        y_min, y_max = min(rows), max(rows)
        x_min = min(float(extent[0]) for _, extent in samples)
        x_last = float(samples[-1][1][1])

        table: list[Extent | None] = [None] * (int(y_max - y_min) + 1)
        for row, (lo, hi) in samples:
            index = int(float(row) - y_min)
            if table[index] is not None:
                raise ValueError(f"row {row} sampled more than once")
            table[index] = (float(lo), float(hi))
        missing = [y_min + i for i, extent in enumerate(table) if extent is None]
        if missing:
            raise ValueError(f"tile samples skip rows {missing}")

        layout = SpacingLayout.flat(x_last - x_min + 1.0, y_max - y_min + 1.0)
        return cls(layout, (y_min, y_max), tuple(table))  # type: ignore[arg-type]

    @classmethod
    def from_mask(cls, mask: np.ndarray, origin: tuple[int, int] | None = None) -> PixelHex:
        return cls.flat(samples_from_mask(mask, origin))

    @property
    def horizontal_spacing(self) -> float:
        return self.layout.horizontal_spacing

    @property
    def vertical_spacing(self) -> float:
        return self.layout.vertical_spacing

    def pixel_center(self, qr: Axial) -> Point:
        return self.layout.pixel_center(qr)

    def axial(self, xy: Point) -> Axial:
        """Return the tile whose artwork covers pixel ``xy``.

        Raises:
            HexRangeError: ``xy`` is not covered by any row of the table.
        """

        if not self.horizontal_extents:
            raise HexRangeError("index out of configured range: tile table is empty")
        x, y = xy
        y_min, y_max = self.vertical_extents

        qr = self.layout.nearest_axial(xy)
        dy = y - self.pixel_center(qr)[1]
        if dy < y_min:
            qr = qr + Axial(0, -1)
        elif dy > y_max:
            qr = qr + Axial(0, 1)

        xc, yc = self.pixel_center(qr)
        dx, dy = x - xc, y - yc
        offset = dy - y_min
        if offset < 0 or int(offset) >= len(self.horizontal_extents):
            raise HexRangeError(
                f"index out of configured range: row offset {dy} of pixel {xy} "
                f"is outside [{y_min}, {y_max}]"
            )
        lo, hi = self.horizontal_extents[int(offset)]

        if dx < lo:
            return qr + (_LEFT_UPPER if dy <= 0 else _LEFT_LOWER)
        if dx > hi:
            return qr + (_RIGHT_UPPER if dy <= 0 else _RIGHT_LOWER)
        return qr

    def nearest_axial(self, xy: Point) -> Axial:
        return self.axial(xy)

    def pixel_relative(self, xy: Point) -> Point:
        xc, yc = self.pixel_center(self.axial(xy))
        return (xy[0] - xc, xy[1] - yc)

    def to_config(self) -> PixelHexConfig:
        from .config import PixelHexConfig

        return PixelHexConfig(
            spacing=self.layout.to_config(),
            vertical_extents=self.vertical_extents,
            horizontal_extents=list(self.horizontal_extents),
        )

    @classmethod
    def from_config(cls, config: PixelHexConfig) -> PixelHex:
        layout = SpacingLayout.from_config(config.spacing)
        return cls(layout, config.vertical_extents, tuple(config.horizontal_extents))


def samples_from_mask(
    mask: np.ndarray, origin: tuple[int, int] | None = None
) -> list[RowSample]:
    """Extract per-row spans from a boolean sprite mask.

    ``mask`` is indexed ``[row, column]``. Coordinates are returned relative
    to ``origin`` (``(row, column)`` of the tile center), which defaults to
    the middle of the mask. Rows without any set pixel are skipped.
    """

    grid = np.asarray(mask, dtype=bool)
    if grid.ndim != 2:
        raise ValueError(f"tile mask must be two-dimensional, got shape {grid.shape}")
    if origin is None:
        origin = (grid.shape[0] // 2, grid.shape[1] // 2)
    row0, col0 = origin

    samples: list[RowSample] = []
    for row in np.flatnonzero(grid.any(axis=1)):
        cols = np.flatnonzero(grid[row])
        samples.append(
            (float(row - row0), (float(cols[0] - col0), float(cols[-1] - col0)))
        )
    return samples
