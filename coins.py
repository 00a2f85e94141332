# coins.py
"""Falling coins: spawning, fall motion, pickup and pruning."""
from __future__ import annotations
import logging
import random

from settings import GameConfig
from state import Coin, RoundContext

logger = logging.getLogger(__name__)


def overlaps(ax: float, ay: float, asize: float, bx: float, by: float, bsize: float) -> bool:
    """Strict AABB test. Boxes that only share an edge do not overlap."""
    return (ax < bx + bsize and
            ax + asize > bx and
            ay < by + bsize and
            ay + asize > by)


def maybe_spawn(coins: list[Coin], config: GameConfig, rng: random.Random) -> Coin | None:
    """Bernoulli trial: one coin just above the top edge with chance 1/spawn_rate."""
    if rng.random() >= config.spawn_chance:
        return None
    coin = Coin(x=rng.random() * (config.width - config.coin_size),
                y=-config.coin_size,
                size=config.coin_size)
    coins.append(coin)
    logger.debug("Spawned coin at x=%.1f", coin.x)
    return coin


def advance_coins(ctx: RoundContext) -> int:
    """Move every coin down, collect the ones touching the player, drop the ones off-screen.

    Returns the number of coins collected this tick.
    """
    config = ctx.config
    player = ctx.player
    collected = 0
    kept: list[Coin] = []
    for coin in ctx.coins:
        coin.y += config.coin_fall_speed

        if overlaps(coin.x, coin.y, coin.size, player.x, player.y, player.size):
            collected += 1
            continue
        if coin.y < config.height:
            kept.append(coin)

    ctx.coins = kept
    if collected:
        ctx.round.score += collected * config.coin_reward
        logger.debug("Collected %d coin(s), score=%d", collected, ctx.round.score)
    return collected
