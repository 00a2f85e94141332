"""
Tests for the game over rating, countdown and retry dialog.
"""
import pytest

from results import ResultDialog, RevealCountdown, rate_score
from screens import Screen

RETRY, ENTER, QUIT, OTHER = 1, 2, 3, 4


def revealed_dialog(character_index=2):
    dialog = ResultDialog(character_index, (RETRY, ENTER), (QUIT,))
    dialog.countdown.update(10.0)
    return dialog


class TestRateScore:
    @pytest.mark.parametrize("score, comment", [
        (0, "Keep practicing"),
        (290, "Keep practicing"),
        (300, "Not bad"),
        (500, "Not bad"),
        (510, "Great job"),
    ])
    def test_thresholds(self, score, comment):
        assert rate_score(score) == comment


class TestRevealCountdown:
    def test_shows_three_two_one(self):
        """3 until the second tick, then 2, then 1, one second each."""
        countdown = RevealCountdown(3)
        shown = []
        for _ in range(8):
            shown.append(countdown.remaining)
            countdown.update(0.5)
        assert shown == [3, 3, 3, 3, 2, 2, 1, 1]
        assert countdown.done
        assert countdown.remaining == 0

    def test_reveal_after_fourth_second(self):
        countdown = RevealCountdown(3)
        assert not countdown.update(3.9)
        assert not countdown.done
        assert countdown.update(0.2)
        assert countdown.done
        assert not countdown.update(1.0)

    def test_frame_steps(self):
        countdown = RevealCountdown(3)
        frames = 0
        while not countdown.done:
            countdown.update(1 / 60)
            frames += 1
        assert 239 <= frames <= 241


class TestResultDialog:
    def test_keys_ignored_before_reveal(self):
        dialog = ResultDialog(1, (RETRY,), (QUIT,))
        dialog.countdown.update(3.5)
        assert not dialog.revealed
        assert dialog.choose(RETRY) is None
        assert dialog.choose(QUIT) is None

    def test_retry_keeps_character(self):
        dialog = revealed_dialog(2)
        assert dialog.choose(RETRY) == (Screen.PLAYING, 2)
        assert dialog.choose(ENTER) == (Screen.PLAYING, 2)

    def test_quit_resets_selection(self):
        assert revealed_dialog(2).choose(QUIT) == (Screen.CHARACTER_SELECT, 0)

    def test_other_keys_do_nothing(self):
        assert revealed_dialog().choose(OTHER) is None
