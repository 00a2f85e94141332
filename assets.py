# assets.py
from __future__ import annotations
from pathlib import Path
import logging

import arcade

from settings import COIN_IMAGE, Character

ASSETS_DIR = Path(__file__).parent / "assets"

logger = logging.getLogger(__name__)


def try_load_texture(path: Path):
    """Texture for `path`, or None if it is missing or unreadable."""
    try:
        return arcade.load_texture(str(path))
    except (OSError, ValueError) as e:
        # OSError covers FileNotFoundError and PIL's UnidentifiedImageError
        logger.warning("Failed to load %s: %s", path.name, e)
        return None


class SpriteAssets:
    """Loads every texture once. Failed loads stay failed for the process."""

    def __init__(self, characters: tuple[Character, ...], assets_dir: Path = ASSETS_DIR):
        self.character_textures = [try_load_texture(assets_dir / c.image) for c in characters]
        self.coin_texture = try_load_texture(assets_dir / COIN_IMAGE)

    def character(self, index: int):
        if 0 <= index < len(self.character_textures):
            return self.character_textures[index]
        return None

    def coin(self):
        return self.coin_texture
