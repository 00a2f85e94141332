# loop.py
"""One tick of a round: clock, then player, then coins.

Drawing is left to the host's on_draw, which reads the same context right
after the tick. The host calls tick() once per frame; when it returns False
the round is finished (or the game screen is no longer active) and the host
stops calling it.
"""
from __future__ import annotations
import logging
import random
from typing import Callable, Optional

from clock import RoundClock
from coins import advance_coins, maybe_spawn
from physics import step_player
from screens import Screen, ScreenMachine
from state import InputState, RoundContext

logger = logging.getLogger(__name__)


class RoundDriver:
    def __init__(self,
                 ctx: RoundContext,
                 screens: ScreenMachine,
                 clock: Optional[RoundClock] = None,
                 rng: Optional[random.Random] = None,
                 on_round_over: Optional[Callable[[RoundContext], None]] = None,
                 on_score: Optional[Callable[[int], None]] = None,
                 on_time: Optional[Callable[[int], None]] = None):
        self.ctx = ctx
        self.screens = screens
        self.clock = clock or RoundClock(ctx.config.total_time)
        self.rng = rng or random.Random()
        self.on_round_over = on_round_over
        self.on_score = on_score
        self.on_time = on_time
        self.ticks = 0
        logger.info("Round started with %s", ctx.character.name)

    @property
    def active(self) -> bool:
        return not self.ctx.round.over and self.screens.current is Screen.PLAYING

    def tick(self, inputs: InputState) -> bool:
        if not self.active:
            return False

        rs = self.ctx.round
        rs.time_left = self.clock.update()
        if self.on_time:
            self.on_time(rs.time_left)
        if rs.time_left <= 0:
            self._finish()
            return False

        self.ticks += 1
        step_player(self.ctx.player, inputs, self.ctx.config)

        maybe_spawn(self.ctx.coins, self.ctx.config, self.rng)
        if advance_coins(self.ctx) and self.on_score:
            self.on_score(rs.score)
        return True

    def _finish(self):
        self.ctx.round.over = True
        logger.info("Round over after %d ticks, score=%d", self.ticks, self.ctx.round.score)
        if self.on_round_over:
            self.on_round_over(self.ctx)
