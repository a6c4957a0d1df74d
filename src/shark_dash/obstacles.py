"""
obstacles.py: Per-tick obstacle motion, jump-over scoring and off-screen pruning.
"""

import logging
import math
from dataclasses import replace
from typing import Iterable, Tuple

from .constants import (
    SHARK_DEPTH, SWIM_PHASE_STEP, SWIM_AMPLITUDE, SHARK_WIDTH,
    PLAYER_WIDTH, DESPAWN_X,
)
from .data_models import Bird, Obstacle, PlayerState, Shark, Vec2

logger = logging.getLogger(__name__)


def move_obstacle(obstacle: Obstacle) -> Obstacle:
    """Scrolls one obstacle left and applies its type-specific vertical motion."""
    x = obstacle.position.x - obstacle.speed
    y = obstacle.position.y

    if isinstance(obstacle, Shark):
        phase = obstacle.swim_phase + SWIM_PHASE_STEP
        y = SHARK_DEPTH + math.sin(phase) * SWIM_AMPLITUDE
        return replace(obstacle, position=Vec2(x, y), swim_phase=phase)

    if obstacle.is_dead:
        y -= obstacle.speed
    return replace(obstacle, position=Vec2(x, y))


def jumped_over(shark: Shark, player: PlayerState) -> bool:
    """True once the shark's trailing edge is past the boat's leading edge."""
    return shark.position.x + SHARK_WIDTH < player.position.x + PLAYER_WIDTH


def advance_all(obstacles: Iterable[Obstacle], player: PlayerState) -> Tuple[Tuple[Obstacle, ...], int]:
    """
    Moves every obstacle one tick, in spawn order.
    Returns the moved obstacles and the points earned for sharks cleared this tick.
    """
    moved = []
    points = 0
    for obstacle in obstacles:
        obstacle = move_obstacle(obstacle)

        if isinstance(obstacle, Shark) and not obstacle.has_been_scored and jumped_over(obstacle, player):
            obstacle = replace(obstacle, has_been_scored=True)
            points += 1
            logger.debug("Jumped over shark #%d at x=%.1f", obstacle.id, obstacle.position.x)

        moved.append(obstacle)
    return tuple(moved), points


def prune(obstacles: Iterable[Obstacle]) -> Tuple[Obstacle, ...]:
    """Drops obstacles that are fully off the left edge."""
    kept = []
    for obstacle in obstacles:
        if obstacle.position.x > DESPAWN_X:
            kept.append(obstacle)
        elif isinstance(obstacle, Shark):
            logger.debug("Shark #%d destroyed (scored=%s)", obstacle.id, obstacle.has_been_scored)
    return tuple(kept)


def is_active(obstacle: Obstacle) -> bool:
    """Dead birds no longer interact with the player."""
    return not (isinstance(obstacle, Bird) and obstacle.is_dead)
