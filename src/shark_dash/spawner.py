"""
spawner.py: Randomized obstacle creation off the right edge of the playfield.
"""

import logging
import random
from typing import Optional

from .constants import (
    SPAWN_INTERVAL_MIN_MS, SPAWN_INTERVAL_MAX_MS, SHARK_PROBABILITY,
    SPAWN_X, SHARK_DEPTH, SHARK_SPEED, BIRD_ALTITUDE, BIRD_SPEED, TWO_PI,
)
from .data_models import Bird, Obstacle, Shark, Vec2

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """Decides when to spawn and builds the new obstacle."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def roll_interval(self) -> float:
        """A fresh interval in [1000, 5000) ms."""
        return SPAWN_INTERVAL_MIN_MS + self.rng.random() * (SPAWN_INTERVAL_MAX_MS - SPAWN_INTERVAL_MIN_MS)

    def maybe_spawn(self, now_ms: float, last_spawn_ms: float, next_id: int) -> Optional[Obstacle]:
        """
        Returns a new obstacle with id ``next_id`` or None.

        The interval is re-rolled on every call, so a long gap is likely to
        pass one of the many short rolls before it expires.
        """
        interval = self.roll_interval()
        if now_ms - last_spawn_ms <= interval:
            return None

        if self.rng.random() < SHARK_PROBABILITY:
            obstacle = Shark(
                id=next_id,
                position=Vec2(float(SPAWN_X), float(SHARK_DEPTH)),
                speed=SHARK_SPEED,
                swim_phase=self.rng.random() * TWO_PI,
            )
        else:
            obstacle = Bird(
                id=next_id,
                position=Vec2(float(SPAWN_X), float(BIRD_ALTITUDE)),
                speed=BIRD_SPEED,
            )

        logger.debug("Spawning %s #%d at %s", obstacle.kind, obstacle.id, obstacle.position)
        return obstacle
