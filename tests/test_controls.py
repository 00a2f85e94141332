"""
Tests for held-key tracking and selection cycling.
"""
import pytest

from controls import HeldKeys, KeyBindings, cycle
from state import InputState

# stand-ins for arcade key codes
LEFT, A, RIGHT, D, SPACE, UP, X = range(7)
BINDINGS = KeyBindings(left=(LEFT, A), right=(RIGHT, D), jump=(SPACE, UP))


class TestHeldKeys:
    def test_nothing_held(self):
        assert HeldKeys(BINDINGS).snapshot() == InputState()

    @pytest.mark.parametrize("key, expected", [
        (LEFT, InputState(left=True)),
        (A, InputState(left=True)),
        (RIGHT, InputState(right=True)),
        (D, InputState(right=True)),
        (SPACE, InputState(jump=True)),
        (UP, InputState(jump=True)),
        (X, InputState()),
    ])
    def test_key_mapping(self, key, expected):
        keys = HeldKeys(BINDINGS)
        keys.press(key)
        assert keys.snapshot() == expected

    def test_combined_keys(self):
        keys = HeldKeys(BINDINGS)
        for k in (A, RIGHT, UP):
            keys.press(k)
        assert keys.snapshot() == InputState(left=True, right=True, jump=True)

    def test_release(self):
        keys = HeldKeys(BINDINGS)
        keys.press(LEFT)
        keys.press(A)
        keys.release(LEFT)
        assert keys.snapshot().left
        keys.release(A)
        assert not keys.snapshot().left

    def test_locked_ignores_presses_but_not_releases(self):
        """After the round ends new presses are dropped, releases still count."""
        keys = HeldKeys(BINDINGS)
        keys.press(RIGHT)
        keys.locked = True
        assert not keys.press(SPACE)
        assert not keys.snapshot().jump
        keys.release(RIGHT)
        assert keys.snapshot() == InputState()

    def test_clear_at_round_start(self):
        keys = HeldKeys(BINDINGS)
        keys.press(LEFT)
        keys.locked = True
        keys.clear()
        assert keys.snapshot() == InputState()
        assert keys.press(RIGHT)


class TestCycle:
    @pytest.mark.parametrize("index, step, expected", [
        (0, 1, 1),
        (2, 1, 0),
        (0, -1, 2),
        (1, -1, 0),
        (4, 0, 1),
    ])
    def test_wraps(self, index, step, expected):
        assert cycle(index, step, 3) == expected
