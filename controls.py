# controls.py
"""Key handling behind the views. Key codes come from the caller
(arcade.key in the game), so this module has NO ARCADE DEPENDENCIES.
"""
from __future__ import annotations
from dataclasses import dataclass

from state import InputState


@dataclass(frozen=True)
class KeyBindings:
    left: tuple[int, ...]
    right: tuple[int, ...]
    jump: tuple[int, ...]


class HeldKeys:
    """Keys currently held during a round.

    Once locked (round over) new presses are ignored, but releases still
    clear keys so nothing stays stuck.
    """

    def __init__(self, bindings: KeyBindings):
        self.bindings = bindings
        self.held: set[int] = set()
        self.locked = False

    def press(self, symbol: int) -> bool:
        if self.locked:
            return False
        self.held.add(symbol)
        return True

    def release(self, symbol: int):
        self.held.discard(symbol)

    def clear(self):
        self.held.clear()
        self.locked = False

    def snapshot(self) -> InputState:
        b = self.bindings
        return InputState(
            left=any(k in self.held for k in b.left),
            right=any(k in self.held for k in b.right),
            jump=any(k in self.held for k in b.jump),
        )


def cycle(index: int, step: int, count: int) -> int:
    """Move a selection by `step`, wrapping at both ends."""
    return (index + step) % count
