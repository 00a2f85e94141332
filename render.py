# render.py
"""Draw a round. Reads state only; NO ARCADE DEPENDENCIES.

The surface takes top-left, y-down canvas coordinates. See surface.py for
the arcade implementation.
"""
from __future__ import annotations
from typing import Any, Optional, Protocol

from settings import (BLACK, COIN_OUTLINE_WIDTH, GOLD, PLAYER_CORNER_RADIUS, SKY,
                      TIMER_WARNING, WARNING, WHITE)
from state import RoundContext

Color = tuple


class Surface(Protocol):
    def clear(self, color: Color) -> None: ...
    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...
    def fill_rounded_rect(self, x: float, y: float, w: float, h: float,
                          radius: float, color: Color) -> None: ...
    def draw_image(self, texture: Any, x: float, y: float, w: float, h: float) -> None: ...
    def circle(self, cx: float, cy: float, r: float, fill: Color,
               stroke: Color, stroke_width: float) -> None: ...


class Sprites(Protocol):
    """Ready textures or None; see assets.SpriteAssets."""
    def character(self, index: int) -> Optional[Any]: ...
    def coin(self) -> Optional[Any]: ...


def draw_round(surface: Surface, ctx: RoundContext, sprites: Sprites) -> None:
    surface.clear(SKY)
    draw_player(surface, ctx, sprites)
    draw_coins(surface, ctx, sprites)


def draw_player(surface: Surface, ctx: RoundContext, sprites: Sprites) -> None:
    p = ctx.player
    tex = sprites.character(ctx.character_index)
    if tex is not None:
        surface.draw_image(tex, p.x, p.y, p.size, p.size)
    else:
        surface.fill_rounded_rect(p.x, p.y, p.size, p.size, PLAYER_CORNER_RADIUS, ctx.character.color)


def draw_coins(surface: Surface, ctx: RoundContext, sprites: Sprites) -> None:
    tex = sprites.coin()
    for c in ctx.coins:
        if tex is not None:
            surface.draw_image(tex, c.x, c.y, c.size, c.size)
        else:
            r = c.size / 2
            surface.circle(c.x + r, c.y + r, r, GOLD, BLACK, COIN_OUTLINE_WIDTH)


def timer_color(time_left: int) -> Color:
    """HUD timer colour; red for the last TIMER_WARNING seconds."""
    return WARNING if time_left <= TIMER_WARNING else WHITE
