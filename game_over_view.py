# game_over_view.py
import arcade

from settings import WHITE, GRAY, GOLD, PINK
from results import ResultDialog, rate_score
from screens import Screen

RETRY_KEYS = (arcade.key.R, arcade.key.ENTER, arcade.key.RETURN)
QUIT_KEYS = (arcade.key.Q, arcade.key.ESCAPE)


class GameOverView(arcade.View):
    """Result first, then after a short countdown the retry dialog."""

    def __init__(self, game_view: arcade.View):
        super().__init__()
        self.game_view = game_view
        self.score = game_view.ctx.round.score
        self.dialog = ResultDialog(game_view.character_index, RETRY_KEYS, QUIT_KEYS)

        w, h = self.window.config.width, self.window.config.height
        self.comment = arcade.Text(rate_score(self.score), w/2, h/2 + 60, GOLD, 32, anchor_x="center")
        self.final = arcade.Text(f"Final score: {self.score}", w/2, h/2 + 10, WHITE, 24, anchor_x="center")
        self.wait = arcade.Text("", w/2, h/2 - 40, GRAY, 16, anchor_x="center")
        self.title = arcade.Text("Time's up!", w/2, h/2 + 60, PINK, 32, anchor_x="center")
        self.hint = arcade.Text("R/ENTER = Retry    Q/ESC = Quit", w/2, h/2 - 10, GRAY, 18,
                                anchor_x="center")
        self._update_wait()

    def _update_wait(self):
        self.wait.text = f"Please wait... menu in {self.dialog.countdown.remaining} s"

    def on_update(self, dt: float):
        self.dialog.countdown.update(dt)
        self._update_wait()

    def on_draw(self):
        # Draw the frozen round behind a dim overlay
        self.game_view.on_draw()
        w, h = self.window.config.width, self.window.config.height
        arcade.draw_lbwh_rectangle_filled(0, 0, w, h, (0, 0, 0, 160))
        if self.dialog.revealed:
            self.title.draw()
            self.final.draw()
            self.hint.draw()
        else:
            self.comment.draw()
            self.final.draw()
            self.wait.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        choice = self.dialog.choose(symbol)
        if choice is None:
            return
        screen, index = choice
        if screen is Screen.PLAYING:
            from game_view import GameView
            self.window.go(screen, GameView(index))
        else:
            from character_select_view import CharacterSelectView
            self.window.go(screen, CharacterSelectView(index))
