# surface.py
import arcade

from settings import HEIGHT


class ArcadeSurface:
    """render.Surface on top of arcade's draw calls.

    Callers use a y-down canvas; arcade is y-up, so every y is flipped
    against the canvas height.
    """

    def __init__(self, target, height: float = HEIGHT):
        self.target = target   # arcade.View or arcade.Window
        self.height = height

    def _bottom(self, y: float, h: float) -> float:
        return self.height - y - h

    def clear(self, color):
        self.target.clear(color=color)

    def fill_rect(self, x, y, w, h, color):
        arcade.draw_lbwh_rectangle_filled(x, self._bottom(y, h), w, h, color)

    def fill_rounded_rect(self, x, y, w, h, radius, color):
        # arcade has no rounded rectangle: a cross of two rects plus four corner discs
        r = max(0.0, min(radius, w / 2, h / 2))
        bottom = self._bottom(y, h)
        arcade.draw_lbwh_rectangle_filled(x + r, bottom, w - 2 * r, h, color)
        arcade.draw_lbwh_rectangle_filled(x, bottom + r, w, h - 2 * r, color)
        for cx in (x + r, x + w - r):
            for cy in (bottom + r, bottom + h - r):
                arcade.draw_circle_filled(cx, cy, r, color)

    def draw_image(self, texture, x, y, w, h):
        arcade.draw_texture_rect(texture, arcade.LBWH(x, self._bottom(y, h), w, h))

    def circle(self, cx, cy, r, fill, stroke, stroke_width):
        y = self.height - cy
        arcade.draw_circle_filled(cx, y, r, fill)
        arcade.draw_circle_outline(cx, y, r, stroke, stroke_width)
