# physics.py
"""Per-tick player movement. One call is one frame; dt is not used."""
from __future__ import annotations

from settings import GameConfig
from state import InputState, PlayerState


def step_player(player: PlayerState, inputs: InputState, config: GameConfig) -> None:
    # Horizontal: both directions apply when both are held (left first).
    # Steps are clamped so x never leaves [0, max_x].
    if inputs.left and player.x > 0:
        player.x = max(0.0, player.x - config.player_speed)
    if inputs.right and player.x < config.max_x:
        player.x = min(config.max_x, player.x + config.player_speed)

    # Single jump: no re-trigger while airborne
    if inputs.jump and not player.jumping:
        player.vy = config.jump_speed
        player.jumping = True

    if player.jumping:
        player.vy += config.gravity
        player.y += player.vy

        ground_y = config.ground_y
        if player.y >= ground_y:
            player.y = ground_y
            player.vy = 0.0
            player.jumping = False
