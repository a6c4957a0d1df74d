"""
game_engine.py: The per-tick world simulation.

Each step is a pure pipeline over immutable state:
physics -> spawn -> motion/scoring -> collision -> prune.
Termination is reported as an explicit signal instead of being set
from inside the obstacle transforms.
"""

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .collisions import resolve_collisions
from .data_models import PlayerState, SessionState
from .obstacles import advance_all, prune
from .physics_core import PhysicsCore
from .spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class GameOverReason(Enum):
    SHARK = "shark"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class Continue:
    """The game keeps running."""


@dataclass(frozen=True)
class GameOver:
    final_score: int
    final_game_time: int
    reason: GameOverReason


Signal = Union[Continue, GameOver]
CONTINUE = Continue()


@dataclass(frozen=True)
class TickResult:
    state: SessionState
    player: PlayerState
    signal: Signal = CONTINUE

    @property
    def game_over(self) -> Optional[GameOver]:
        return self.signal if isinstance(self.signal, GameOver) else None


def end_game(state: SessionState, reason: GameOverReason) -> Tuple[SessionState, GameOver]:
    """Freezes the state and captures the final score and time."""
    signal = GameOver(
        final_score=state.score,
        final_game_time=state.time_remaining,
        reason=reason,
    )
    state = replace(
        state,
        game_over=True,
        final_score=signal.final_score,
        final_game_time=signal.final_game_time,
    )
    return state, signal


@dataclass
class GameEngine(PhysicsCore):
    """
    The engine driving a single-player session.
    Inherits player physics and collision geometry from PhysicsCore.
    """
    rng: random.Random = field(default_factory=random.Random)
    spawner: ObstacleSpawner = field(init=False)

    def __post_init__(self):
        self.spawner = ObstacleSpawner(self.rng)

    def step(self, state: SessionState, player: PlayerState, now_ms: float) -> TickResult:
        """
        Advances the world by one frame tick.
        A finished game is returned untouched.
        """
        if state.game_over:
            return TickResult(state, player)

        # 1. Player physics
        player = self.advance_player(player)

        # 2. Spawn check
        obstacles = state.obstacles
        spawned = self.spawner.maybe_spawn(now_ms, state.last_spawn_ms, state.next_obstacle_id)
        if spawned is not None:
            obstacles = obstacles + (spawned,)
            state = replace(
                state,
                next_obstacle_id=state.next_obstacle_id + 1,
                last_spawn_ms=now_ms,
            )

        # 3. Motion and jump-over scoring
        obstacles, jump_points = advance_all(obstacles, player)

        # 4. Collisions
        collision = resolve_collisions(player, obstacles, physics=self)

        # 5. Prune off-screen obstacles last
        state = replace(
            state,
            obstacles=prune(collision.obstacles),
            score=state.score + jump_points + collision.points,
        )

        if collision.is_terminal:
            state, signal = end_game(state, GameOverReason.SHARK)
            logger.info("Game over: shark #%d, score %d", collision.shark_hit.id, signal.final_score)
            return TickResult(state, player, signal)

        return TickResult(state, player)

    def count_down(self, state: SessionState, player: PlayerState) -> TickResult:
        """One second of the game clock. Reaching exactly 0 ends the game."""
        if state.game_over:
            return TickResult(state, player)

        state = replace(state, time_remaining=max(state.time_remaining - 1, 0))
        if state.time_remaining == 0:
            state, signal = end_game(state, GameOverReason.TIMEOUT)
            logger.info("Game over: time up, score %d", signal.final_score)
            return TickResult(state, player, signal)

        return TickResult(state, player)
