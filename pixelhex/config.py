"""Validated configuration models for persisting tile layouts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .coords import Orientation
from .layout import SpacingLayout
from .tile import PixelHex


class SpacingConfig(BaseModel):
    """Serializable form of :class:`~pixelhex.layout.SpacingLayout`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: Orientation = Field(default=Orientation.FLAT)
    vertical_spacing: float = Field(ge=0.0)
    horizontal_spacing: float = Field(ge=0.0)


class PixelHexConfig(BaseModel):
    """Serializable form of :class:`~pixelhex.tile.PixelHex`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    spacing: SpacingConfig
    vertical_extents: tuple[float, float] = Field(default=(0.0, 0.0))
    horizontal_extents: list[tuple[float, float]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_table(self) -> PixelHexConfig:
        if not self.horizontal_extents:
            return self
        y_min, y_max = self.vertical_extents
        if y_max < y_min:
            raise ValueError("vertical_extents must be ordered (min, max)")
        expected = int(y_max - y_min) + 1
        if len(self.horizontal_extents) != expected:
            raise ValueError(
                f"horizontal_extents has {len(self.horizontal_extents)} rows, "
                f"expected {expected} for vertical_extents {self.vertical_extents}"
            )
        return self


def dumps_layout(layout: SpacingLayout) -> str:
    return layout.to_config().model_dump_json(indent=2)


def loads_layout(text: str | bytes) -> SpacingLayout:
    return SpacingLayout.from_config(SpacingConfig.model_validate_json(text))


def dumps_tile(tile: PixelHex) -> str:
    """Encode ``tile`` as JSON text."""

    return tile.to_config().model_dump_json(indent=2)


def loads_tile(text: str | bytes) -> PixelHex:
    """Decode a tile previously written by :func:`dumps_tile`."""

    return PixelHex.from_config(PixelHexConfig.model_validate_json(text))


__all__ = [
    "PixelHexConfig",
    "SpacingConfig",
    "dumps_layout",
    "dumps_tile",
    "loads_layout",
    "loads_tile",
]
