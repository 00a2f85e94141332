# state.py
"""Mutable state of a single round. NO ARCADE DEPENDENCIES.

Coordinates are canvas pixels with the origin at the top-left and y growing
downward; the arcade surface flips them when drawing.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math

from settings import Character, GameConfig


@dataclass
class PlayerState:
    x: float
    y: float
    size: int
    vy: float = 0.0
    jumping: bool = False

    @classmethod
    def spawn(cls, config: GameConfig) -> PlayerState:
        """Standing on the ground in the middle of the canvas."""
        return cls(x=min(config.width / 2, config.max_x), y=config.ground_y, size=config.player_size)


@dataclass
class Coin:
    x: float
    y: float
    size: int


@dataclass
class RoundState:
    score: int = 0
    time_left: int = 0
    over: bool = False


@dataclass(frozen=True)
class InputState:
    """Snapshot of the logical keys held during one tick."""
    left: bool = False
    right: bool = False
    jump: bool = False


@dataclass
class RoundContext:
    """Everything one round owns. A retry builds a new one."""
    config: GameConfig
    character_index: int
    player: PlayerState
    coins: list[Coin] = field(default_factory=list)
    round: RoundState = field(default_factory=RoundState)

    @classmethod
    def new(cls, config: GameConfig, character_index: int = 0) -> RoundContext:
        if not 0 <= character_index < len(config.characters):
            raise IndexError(f"no character at index {character_index}")
        return cls(
            config=config,
            character_index=character_index,
            player=PlayerState.spawn(config),
            round=RoundState(time_left=int(math.ceil(config.total_time))),
        )

    @property
    def character(self) -> Character:
        return self.config.characters[self.character_index]
