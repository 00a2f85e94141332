# game_view.py
from __future__ import annotations
import arcade

from settings import WHITE, GRAY
from controls import HeldKeys, KeyBindings
from loop import RoundDriver
from render import draw_round, timer_color
from screens import Screen
from state import RoundContext
from surface import ArcadeSurface

BINDINGS = KeyBindings(
    left=(arcade.key.LEFT, arcade.key.A),
    right=(arcade.key.RIGHT, arcade.key.D),
    jump=(arcade.key.SPACE, arcade.key.UP),
)


class GameView(arcade.View):
    def __init__(self, character_index: int = 0):
        super().__init__()
        self.character_index = character_index
        self.config = self.window.config
        self.surface = ArcadeSurface(self, self.config.height)

        # --- Text (HUD) ---
        h = self.config.height
        self.score_text = arcade.Text("", 16, h - 36, WHITE, 18)
        self.time_text = arcade.Text("", self.config.width - 16, h - 36, WHITE, 18, anchor_x="right")
        self.help_text = arcade.Text("LEFT/RIGHT = Move   SPACE/UP = Jump   ESC = Menu",
                                     self.config.width / 2, 12, GRAY, 14, anchor_x="center")

        self.ctx: RoundContext | None = None
        self.driver: RoundDriver | None = None
        self.keys = HeldKeys(BINDINGS)
        self.setup()

    def setup(self):
        self.ctx = RoundContext.new(self.config, self.character_index)
        self.driver = RoundDriver(
            self.ctx,
            self.window.screens,
            on_round_over=self._on_round_over,
            on_score=self._show_score,
            on_time=self._show_time,
        )
        self.keys.clear()
        self._show_score(0)
        self._show_time(self.ctx.round.time_left)

    # ---------- Score/timer display ----------
    def _show_score(self, score: int):
        self.score_text.text = f"Score: {score}"

    def _show_time(self, time_left: int):
        self.time_text.text = f"Time: {time_left}"
        self.time_text.color = timer_color(time_left)

    def _on_round_over(self, ctx: RoundContext):
        self.keys.locked = True
        from game_over_view import GameOverView
        self.window.go(Screen.GAME_OVER, GameOverView(self))

    # ---------- Input ----------
    def on_key_press(self, symbol: int, modifiers: int):
        if self.keys.locked:
            return
        if symbol == arcade.key.ESCAPE:
            from character_select_view import CharacterSelectView
            self.window.go(Screen.CHARACTER_SELECT, CharacterSelectView(self.character_index))
            return
        self.keys.press(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self.keys.release(symbol)

    # ---------- Update ----------
    def on_update(self, dt: float):
        # one call = one tick; dt is not used
        self.driver.tick(self.keys.snapshot())

    # ---------- Draw ----------
    def on_draw(self):
        draw_round(self.surface, self.ctx, self.window.assets)
        self.score_text.draw()
        self.time_text.draw()
        self.help_text.draw()
