"""
collisions.py: Player-vs-obstacle resolution and the score/game-over effects it produces.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from .constants import BIRD_FALL_SPEED
from .data_models import Bird, Obstacle, PlayerState, Shark
from .obstacles import is_active
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionResult:
    obstacles: Tuple[Obstacle, ...]
    points: int = 0
    shark_hit: Optional[Shark] = None

    @property
    def is_terminal(self) -> bool:
        return self.shark_hit is not None


def resolve_collisions(
    player: PlayerState,
    obstacles: Iterable[Obstacle],
    physics: Optional[PhysicsCore] = None,
) -> CollisionResult:
    """
    Tests the player against every obstacle.

    A live bird that overlaps the boat dies, speeds up to its fall rate and
    earns a point. Any overlapping shark ends the game and stays in place.
    Points from several birds in one tick are summed.
    """
    physics = physics or PhysicsCore()
    resolved = []
    points = 0
    shark_hit = None

    for obstacle in obstacles:
        if not is_active(obstacle) or not physics.check_collision(player, obstacle):
            resolved.append(obstacle)
            continue

        if isinstance(obstacle, Shark):
            logger.info("Shark collision with #%d at %s, player at %s",
                        obstacle.id, obstacle.position, player.position)
            if shark_hit is None:
                shark_hit = obstacle
            resolved.append(obstacle)
        elif isinstance(obstacle, Bird):
            logger.debug("Bird #%d hit, +1", obstacle.id)
            points += 1
            resolved.append(replace(obstacle, is_dead=True, speed=BIRD_FALL_SPEED))

    return CollisionResult(obstacles=tuple(resolved), points=points, shark_hit=shark_hit)
