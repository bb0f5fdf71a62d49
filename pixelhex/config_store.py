"""Helpers for loading and saving a tile layout configuration.

The configuration is stored in a user-specific directory determined via
``platformdirs.user_config_dir``, falling back to a relative ``./config``
folder if the user directory cannot be created. Files are written
atomically so an interrupted save never leaves a truncated layout behind.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_config_dir

from .config import dumps_tile, loads_tile
from .tile import PixelHex

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tile_layout.json"


class TileConfigError(ValueError):
    """Raised when a persisted tile layout cannot be decoded."""


def default_config_path() -> Path:
    """Compute the path used to persist the tile layout configuration.

    The per-user configuration directory is preferred; when it cannot be
    created a local ``config`` directory is used instead. The directory
    exists when this function returns.
    """

    try:
        base = Path(user_config_dir("pixelhex"))
        base.mkdir(parents=True, exist_ok=True)
    except OSError:
        logger.debug("user config dir unavailable, using ./config", exc_info=True)
        base = Path("config")
        base.mkdir(parents=True, exist_ok=True)
    path = base / CONFIG_FILENAME
    logger.debug("tile layout path resolved to %s", path)
    return path


def save_tile(tile: PixelHex, path: Path | None = None) -> Path:
    """Persist ``tile`` and return the file it was written to.

    The payload goes to a temporary sibling file first, which then replaces
    the target.
    """

    target = path if path is not None else default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    temp_path = target.with_suffix(target.suffix + ".tmp")
    temp_path.write_text(dumps_tile(tile), encoding="utf-8")
    temp_path.replace(target)
    logger.debug("saved tile layout (%d rows) to %s", len(tile.horizontal_extents), target)
    return target


def load_tile(path: Path | None = None) -> PixelHex:
    """Load a tile layout, or the empty tile when nothing was saved yet.

    Raises:
        TileConfigError: the file exists but does not hold a valid layout.
    """

    source = path if path is not None else default_config_path()
    if not source.exists():
        logger.debug("no tile layout at %s, using the empty tile", source)
        return PixelHex.flat([])
    try:
        tile = loads_tile(source.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise TileConfigError(f"invalid tile layout in {source}: {exc}") from exc
    logger.debug("loaded tile layout from %s", source)
    return tile
