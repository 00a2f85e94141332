"""
Tests for drawing a round onto a recording surface.
"""
import copy

from render import draw_round, timer_color
from settings import BLACK, GOLD, PLAYER_CORNER_RADIUS, SKY, TIMER_WARNING, WARNING, WHITE
from state import Coin, RoundContext


class RecordingSurface:
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def fill_rounded_rect(self, x, y, w, h, radius, color):
        self.calls.append(("rounded", x, y, w, h, radius, color))

    def draw_image(self, texture, x, y, w, h):
        self.calls.append(("image", texture, x, y, w, h))

    def circle(self, cx, cy, r, fill, stroke, stroke_width):
        self.calls.append(("circle", cx, cy, r, fill, stroke, stroke_width))


class StubSprites:
    def __init__(self, characters=(), coin=None):
        self.characters = list(characters)
        self.coin_texture = coin

    def character(self, index):
        return self.characters[index] if index < len(self.characters) else None

    def coin(self):
        return self.coin_texture


class TestDrawRound:
    def test_fallback_shapes_without_images(self, ctx, config):
        ctx.coins.append(Coin(x=100, y=20, size=config.coin_size))
        surface = RecordingSurface()
        draw_round(surface, ctx, StubSprites())
        assert surface.calls == [
            ("clear", SKY),
            ("rounded", 400, 540, 50, 50, PLAYER_CORNER_RADIUS, ctx.character.color),
            ("circle", 122.5, 42.5, 22.5, GOLD, BLACK, 2),
        ]

    def test_sprites_when_ready(self, ctx, config):
        ctx.coins.append(Coin(x=100, y=20, size=config.coin_size))
        ctx.coins.append(Coin(x=300, y=80, size=config.coin_size))
        surface = RecordingSurface()
        draw_round(surface, ctx, StubSprites(["cat"], coin="coin"))
        assert surface.calls == [
            ("clear", SKY),
            ("image", "cat", 400, 540, 50, 50),
            ("image", "coin", 100, 20, 45, 45),
            ("image", "coin", 300, 80, 45, 45),
        ]

    def test_selected_character_only(self, config):
        ctx = RoundContext.new(config, 1)
        surface = RecordingSurface()
        # only character 0 loaded: character 1 falls back to its tint
        draw_round(surface, ctx, StubSprites(["cat"]))
        assert surface.calls[1][0] == "rounded"
        assert surface.calls[1][-1] == config.characters[1].color

    def test_draw_order_background_player_coins(self, ctx, config):
        ctx.coins.append(Coin(x=0, y=0, size=config.coin_size))
        surface = RecordingSurface()
        draw_round(surface, ctx, StubSprites())
        assert [c[0] for c in surface.calls] == ["clear", "rounded", "circle"]

    def test_does_not_mutate_state(self, ctx, config):
        ctx.coins.append(Coin(x=10, y=10, size=config.coin_size))
        ctx.player.jumping = True
        ctx.player.vy = -5.0
        before = copy.deepcopy(ctx)
        draw_round(RecordingSurface(), ctx, StubSprites())
        assert ctx == before


class TestTimerColor:
    def test_normal_above_warning(self):
        assert timer_color(45) == WHITE
        assert timer_color(TIMER_WARNING + 1) == WHITE

    def test_warning_at_and_below_threshold(self):
        assert TIMER_WARNING == 10
        assert timer_color(10) == WARNING
        assert timer_color(0) == WARNING
