# settings.py
from __future__ import annotations
from dataclasses import dataclass

WIDTH, HEIGHT = 800, 600
TITLE = "Coin Catcher"

TOTAL_TIME = 45               # seconds per round
PLAYER_SIZE = 50
PLAYER_SPEED = 8.0            # px/tick
JUMP_SPEED = -18.0            # px/tick, negative is up (y-down canvas)
GRAVITY = 0.8                 # px/tick^2
GROUND_MARGIN = 10            # gap between the player's feet and the bottom edge

# Coin visuals/physics
COIN_SIZE = 45
COIN_FALL_SPEED = 5.0         # px/tick
COIN_SPAWN_RATE = 30          # one coin every 30 ticks on average
COIN_REWARD = 10

# Game over screen
REVEAL_DELAY = 3              # seconds before the retry dialog shows
TIMER_WARNING = 10            # HUD timer turns red at or below this

# Colors (RGBA)
SKY = (135, 206, 235, 255)
WHITE = (240, 240, 240, 255)
BLACK = (0, 0, 0, 255)
GRAY = (210, 210, 210, 255)
PINK = (255, 220, 220, 255)
WARNING = (255, 80, 80, 255)
GOLD = (255, 215, 0, 255)
PANEL = (22, 22, 28, 200)
HIGHLIGHT = (255, 205, 0, 255)

PLAYER_CORNER_RADIUS = 8
COIN_OUTLINE_WIDTH = 2

COIN_IMAGE = "coin.png"


@dataclass(frozen=True)
class Character:
    name: str
    color: tuple[int, int, int, int]   # tint for the fallback shape
    image: str                         # file under assets/


DEFAULT_CHARACTERS = (
    Character("Cat", (255, 50, 50, 255), "cat.webp"),
    Character("Cute", (50, 255, 50, 255), "cute.jpg"),
    Character("Ghost", (50, 50, 255, 255), "player_blue.png"),
)


@dataclass(frozen=True)
class GameConfig:
    """Tuning values for one round. Defaults mirror the module constants."""
    width: int = WIDTH
    height: int = HEIGHT
    total_time: int = TOTAL_TIME
    player_size: int = PLAYER_SIZE
    player_speed: float = PLAYER_SPEED
    jump_speed: float = JUMP_SPEED
    gravity: float = GRAVITY
    ground_margin: int = GROUND_MARGIN
    coin_size: int = COIN_SIZE
    coin_fall_speed: float = COIN_FALL_SPEED
    coin_spawn_rate: int = COIN_SPAWN_RATE
    coin_reward: int = COIN_REWARD
    characters: tuple[Character, ...] = DEFAULT_CHARACTERS

    @property
    def ground_y(self) -> float:
        return float(self.height - self.player_size - self.ground_margin)

    @property
    def max_x(self) -> float:
        return float(self.width - self.player_size)

    @property
    def spawn_chance(self) -> float:
        return 1.0 / self.coin_spawn_rate
