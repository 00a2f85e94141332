# config_loader.py
from __future__ import annotations
from dataclasses import fields, replace
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from settings import Character, GameConfig

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config" / "game.json"
CONFIG_ENV = "COIN_CATCHER_CONFIG"

logger = logging.getLogger(__name__)

NUMERIC_KEYS = {f.name for f in fields(GameConfig) if f.name != "characters"}
INT_KEYS = {f.name for f in fields(GameConfig) if f.type in (int, "int")}


def _parse_character(item: Any, i: int) -> Character:
    if not isinstance(item, dict):
        raise ValueError(f"characters[{i}] must be an object")
    try:
        name = str(item["name"])
        color = tuple(int(v) for v in item["color"])
        image = str(item["image"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"characters[{i}] needs 'name', 'color' and 'image': {e}") from e
    if len(color) == 3:
        color += (255,)
    if len(color) != 4 or not all(0 <= v <= 255 for v in color):
        raise ValueError(f"characters[{i}].color must be 3 or 4 values in 0..255")
    return Character(name, color, image)


def parse_config(data: Dict[str, Any], base: GameConfig | None = None) -> GameConfig:
    if not isinstance(data, dict):
        raise ValueError("Config JSON must be an object")
    unknown = set(data) - NUMERIC_KEYS - {"characters"}
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

    overrides: Dict[str, Any] = {}
    for key in NUMERIC_KEYS & set(data):
        value = data[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'{key}' must be a number")
        if key in INT_KEYS and not isinstance(value, int):
            raise ValueError(f"'{key}' must be a whole number")
        # jump_speed is negative (upward); the rest must be positive
        if key == "jump_speed":
            if value >= 0:
                raise ValueError("'jump_speed' must be negative")
        elif key == "ground_margin":
            if value < 0:
                raise ValueError("'ground_margin' must not be negative")
        elif value <= 0:
            raise ValueError(f"'{key}' must be positive")
        overrides[key] = value

    if "characters" in data:
        chars = data["characters"]
        if not isinstance(chars, list) or not chars:
            raise ValueError("'characters' must be a non-empty list")
        overrides["characters"] = tuple(_parse_character(c, i) for i, c in enumerate(chars))

    config = replace(base or GameConfig(), **overrides)
    # the player and a coin must both fit on the canvas
    if config.width <= max(config.player_size, config.coin_size):
        raise ValueError("'width' must be larger than 'player_size' and 'coin_size'")
    if config.ground_y <= 0:
        raise ValueError("'height' must leave room for 'player_size' plus 'ground_margin'")
    return config


def load_config(path: str | Path | None = None) -> GameConfig:
    """Read a JSON config file over the defaults.

    With no path, COIN_CATCHER_CONFIG is used, then config/game.json; a
    missing default file just means defaults.
    """
    explicit = path is not None or bool(os.getenv(CONFIG_ENV))
    p = Path(path or os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH)
    if not p.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {p}")
        return GameConfig()
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{p.name} is not valid JSON: {e}") from e
    config = parse_config(data)
    logger.info("Loaded config from %s", p)
    return config
