# results.py
from __future__ import annotations

from settings import REVEAL_DELAY
from screens import Screen


def rate_score(score: int) -> str:
    if score < 300:
        return "Keep practicing"
    if score <= 500:
        return "Not bad"
    return "Great job"


class RevealCountdown:
    """Shows `seconds`, ..., 1 at one-second steps, fed by on_update(dt).

    The first number appears after one second and the last one stays up for
    a full second, so the reveal comes at seconds + 1.
    """

    def __init__(self, seconds: int = REVEAL_DELAY):
        self.seconds = seconds
        self.elapsed = 0.0

    @property
    def remaining(self) -> int:
        if self.done:
            return 0
        return self.seconds - max(0, int(self.elapsed) - 1)

    @property
    def done(self) -> bool:
        return self.elapsed >= self.seconds + 1

    def update(self, dt: float) -> bool:
        """Advance; returns True on the call that finishes the countdown."""
        if self.done:
            return False
        self.elapsed += dt
        return self.done


class ResultDialog:
    """Retry/quit choice on the game over screen, closed until the countdown ends."""

    def __init__(self, character_index: int,
                 retry_keys: tuple[int, ...], quit_keys: tuple[int, ...],
                 countdown: RevealCountdown | None = None):
        self.character_index = character_index
        self.retry_keys = retry_keys
        self.quit_keys = quit_keys
        self.countdown = countdown or RevealCountdown()

    @property
    def revealed(self) -> bool:
        return self.countdown.done

    def choose(self, symbol: int) -> tuple[Screen, int] | None:
        """Screen to go to and the character index to use, or None."""
        if not self.revealed:
            return None
        if symbol in self.retry_keys:
            return Screen.PLAYING, self.character_index
        if symbol in self.quit_keys:
            return Screen.CHARACTER_SELECT, 0
        return None
