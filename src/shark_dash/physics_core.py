"""
physics_core.py: The shared, deterministic kinematic functions and collision geometry.
"""

from dataclasses import dataclass, replace

from .constants import (
    GRAVITY, JUMP_IMPULSE, WATER_HEIGHT,
    PLAYER_HITBOX_WIDTH, PLAYER_HITBOX_HEIGHT,
    PLAYER_HITBOX_OFFSET_X, PLAYER_HITBOX_OFFSET_Y,
    SHARK_WIDTH, SHARK_HEIGHT, BIRD_WIDTH, BIRD_HEIGHT,
)
from .data_models import Obstacle, PlayerState, Shark, Vec2


@dataclass(frozen=True)
class Box:
    """Axis-aligned box anchored at its bottom-left corner."""
    left: float
    bottom: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    def overlaps(self, other: "Box") -> bool:
        horizontal = self.left < other.right and self.right > other.left
        vertical = self.bottom < other.top and self.top > other.bottom
        return horizontal and vertical


class PhysicsCore:
    """
    Shared deterministic physics used by the game engine.
    All methods return new values; nothing is mutated.
    """

    WATER_HEIGHT = WATER_HEIGHT

    def advance_player(self, player: PlayerState) -> PlayerState:
        """
        Integrates one tick of vertical motion and resolves water contact.
        """
        y = player.position.y + player.velocity.y
        vy = player.velocity.y - GRAVITY

        if y <= self.WATER_HEIGHT:
            return replace(
                player,
                position=Vec2(player.position.x, self.WATER_HEIGHT),
                velocity=Vec2(player.velocity.x, 0.0),
                is_jumping=False,
            )

        return replace(
            player,
            position=Vec2(player.position.x, y),
            velocity=Vec2(player.velocity.x, vy),
        )

    def jump(self, player: PlayerState, game_over: bool = False) -> PlayerState:
        """Applies the jump impulse; a request while airborne or after game over is ignored."""
        if player.is_jumping or game_over:
            return player
        return replace(
            player,
            velocity=Vec2(player.velocity.x, JUMP_IMPULSE),
            is_jumping=True,
        )

    def player_box(self, player: PlayerState) -> Box:
        return Box(
            player.position.x + PLAYER_HITBOX_OFFSET_X,
            player.position.y + PLAYER_HITBOX_OFFSET_Y,
            PLAYER_HITBOX_WIDTH,
            PLAYER_HITBOX_HEIGHT,
        )

    def obstacle_box(self, obstacle: Obstacle) -> Box:
        if isinstance(obstacle, Shark):
            return Box(obstacle.position.x, obstacle.position.y, SHARK_WIDTH, SHARK_HEIGHT)
        return Box(obstacle.position.x, obstacle.position.y, BIRD_WIDTH, BIRD_HEIGHT)

    def check_collision(self, player: PlayerState, obstacle: Obstacle) -> bool:
        """Checks the player's hit box against one obstacle."""
        return self.player_box(player).overlaps(self.obstacle_box(obstacle))
