"""Coordinate math for hexagonal grids and irregular pixel hex tiles."""

from .coords import Axial, DegenerateLineError, Orientation, cube_round
from .ring import HexRing, RingAroundHex
from .layout import HexTransform, SpacingLayout
from .ideal import IdealHex
from .tile import HexRangeError, PixelHex, samples_from_mask
from .config import PixelHexConfig, SpacingConfig, dumps_layout, dumps_tile, loads_layout, loads_tile
from .config_store import TileConfigError, default_config_path, load_tile, save_tile

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "DegenerateLineError",
    "Orientation",
    "cube_round",
    "HexRing",
    "RingAroundHex",
    "HexTransform",
    "SpacingLayout",
    "IdealHex",
    "HexRangeError",
    "PixelHex",
    "samples_from_mask",
    "PixelHexConfig",
    "SpacingConfig",
    "dumps_layout",
    "dumps_tile",
    "loads_layout",
    "loads_tile",
    "TileConfigError",
    "default_config_path",
    "load_tile",
    "save_tile",
    "__version__",
]
