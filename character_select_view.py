# character_select_view.py
import arcade

from settings import TITLE, WHITE, GRAY, PANEL, HIGHLIGHT, PLAYER_CORNER_RADIUS
from controls import cycle
from screens import Screen
from surface import ArcadeSurface

CARD_W, CARD_H = 180, 220
CARD_GAP = 40
PORTRAIT = 120


class CharacterSelectView(arcade.View):
    def __init__(self, selected: int = 0):
        super().__init__()
        self.config = self.window.config
        self.characters = self.config.characters
        self.selected = cycle(selected, 0, len(self.characters))
        self.surface = ArcadeSurface(self, self.config.height)

        w, h = self.config.width, self.config.height
        self.title_text = arcade.Text(TITLE, w/2, h*0.85, WHITE, 36, anchor_x="center")
        self.sub_text = arcade.Text("Choose your character", w/2, h*0.77, WHITE, 20, anchor_x="center")
        self.help_text = arcade.Text("LEFT/RIGHT = Choose    ENTER/Click = Play",
                                     w/2, h*0.12, GRAY, 16, anchor_x="center")
        self.name_texts = [
            arcade.Text(c.name, x + CARD_W/2, h - (self._card_top() + CARD_H - 36), WHITE, 18,
                        anchor_x="center")
            for c, x in zip(self.characters, self._card_lefts())
        ]

    # ---------- Layout (y-down canvas coordinates) ----------
    def _card_lefts(self):
        n = len(self.characters)
        total = n * CARD_W + (n - 1) * CARD_GAP
        start = (self.config.width - total) / 2
        return [start + i * (CARD_W + CARD_GAP) for i in range(n)]

    def _card_top(self):
        return (self.config.height - CARD_H) / 2

    def _card_at(self, x: float, y: float):
        """Index of the card under a canvas point, or None."""
        top = self._card_top()
        if not top <= y <= top + CARD_H:
            return None
        for i, left in enumerate(self._card_lefts()):
            if left <= x <= left + CARD_W:
                return i
        return None

    # ---------- Draw ----------
    def on_draw(self):
        self.surface.clear(PANEL)
        top = self._card_top()
        for i, (c, left) in enumerate(zip(self.characters, self._card_lefts())):
            if i == self.selected:
                self.surface.fill_rect(left - 4, top - 4, CARD_W + 8, CARD_H + 8, HIGHLIGHT)
            self.surface.fill_rect(left, top, CARD_W, CARD_H, PANEL)
            px = left + (CARD_W - PORTRAIT) / 2
            py = top + 24
            tex = self.window.assets.character(i)
            if tex is not None:
                self.surface.draw_image(tex, px, py, PORTRAIT, PORTRAIT)
            else:
                self.surface.fill_rounded_rect(px, py, PORTRAIT, PORTRAIT, PLAYER_CORNER_RADIUS, c.color)
        self.title_text.draw()
        self.sub_text.draw()
        for t in self.name_texts:
            t.draw()
        self.help_text.draw()

    # ---------- Input ----------
    def _start(self, index: int):
        from game_view import GameView
        self.window.go(Screen.PLAYING, GameView(index))

    def on_key_press(self, symbol: int, modifiers: int):
        n = len(self.characters)
        if symbol in (arcade.key.LEFT, arcade.key.A):
            self.selected = cycle(self.selected, -1, n)
        elif symbol in (arcade.key.RIGHT, arcade.key.D):
            self.selected = cycle(self.selected, 1, n)
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN):
            self._start(self.selected)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        index = self._card_at(x, self.config.height - y)
        if index is not None:
            self.selected = index
            self._start(index)
