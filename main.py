# main.py
import logging
import os
import sys

import arcade

from settings import SKY, TITLE, GameConfig
from assets import SpriteAssets
from config_loader import load_config
from screens import Screen, ScreenMachine

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


class GameWindow(arcade.Window):
    """Owns what outlives a round: config, screen state and textures."""

    def __init__(self, config: GameConfig):
        super().__init__(config.width, config.height, TITLE, resizable=False)
        arcade.set_background_color(SKY)
        self.config = config
        self.screens = ScreenMachine()
        self.assets = SpriteAssets(config.characters)

    def go(self, screen: Screen, view: arcade.View):
        self.screens.go(screen)
        self.show_view(view)


def main():
    setup_logging(os.getenv("COIN_CATCHER_DEBUG", "false").lower() == "true")
    try:
        config = load_config()
    except (OSError, ValueError) as e:
        logger.error("Bad config: %s", e)
        sys.exit(1)

    window = GameWindow(config)
    from character_select_view import CharacterSelectView
    window.show_view(CharacterSelectView())
    arcade.run()


if __name__ == "__main__":
    main()
