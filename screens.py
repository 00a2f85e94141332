# screens.py
from __future__ import annotations
from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class Screen(Enum):
    CHARACTER_SELECT = auto()
    PLAYING = auto()
    GAME_OVER = auto()


TRANSITIONS = {
    Screen.CHARACTER_SELECT: {Screen.PLAYING},
    Screen.PLAYING: {Screen.GAME_OVER, Screen.CHARACTER_SELECT},
    Screen.GAME_OVER: {Screen.PLAYING, Screen.CHARACTER_SELECT},
}


class InvalidTransition(ValueError):
    pass


class ScreenMachine:
    """Which screen is active. The game loop reads it to decide whether to keep going."""

    def __init__(self, initial: Screen = Screen.CHARACTER_SELECT):
        self._current = initial

    @property
    def current(self) -> Screen:
        return self._current

    def can_go(self, target: Screen) -> bool:
        return target is self._current or target in TRANSITIONS[self._current]

    def go(self, target: Screen) -> None:
        if target is self._current:
            return
        if target not in TRANSITIONS[self._current]:
            raise InvalidTransition(f"cannot go from {self._current.name} to {target.name}")
        logger.info("Screen %s -> %s", self._current.name, target.name)
        self._current = target
