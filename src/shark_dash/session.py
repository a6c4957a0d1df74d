"""
session.py: The game session state machine (Playing <-> GameOver).

The session is the only writer of game state. The renderer reads
``snapshot()``; the input layer calls ``request_jump()``.
"""

import logging
import random
from typing import Callable, List, Optional

from .data_models import PlayerState, SessionState, Snapshot
from .game_engine import GameEngine, GameOver, TickResult

logger = logging.getLogger(__name__)

GameOverListener = Callable[[GameOver], None]


class GameSession:
    def __init__(self, now_ms: float = 0.0, rng: Optional[random.Random] = None):
        self.engine = GameEngine(rng=rng or random.Random())
        self.state = SessionState(last_spawn_ms=now_ms)
        self.player = PlayerState()
        self._listeners: List[GameOverListener] = []

    # -------- Queries --------

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def is_playing(self) -> bool:
        return not self.state.game_over

    def snapshot(self) -> Snapshot:
        return Snapshot(
            player=self.player,
            obstacles=self.state.obstacles,
            score=self.state.score,
            time_remaining=self.state.time_remaining,
            game_over=self.state.game_over,
        )

    # -------- Transitions --------

    def on_game_over(self, listener: GameOverListener):
        """Registers a callback fired once per Playing -> GameOver transition."""
        self._listeners.append(listener)

    def tick(self, now_ms: float) -> TickResult:
        """Frame tick: physics, spawn, motion, collision."""
        return self._apply(self.engine.step(self.state, self.player, now_ms))

    def countdown(self) -> TickResult:
        """Countdown tick, once per second."""
        return self._apply(self.engine.count_down(self.state, self.player))

    def request_jump(self, now_ms: float) -> bool:
        """
        The single input action: jump while playing, restart after game over.
        Returns True if the request changed anything.
        """
        if self.state.game_over:
            self.restart(now_ms)
            return True

        jumped = self.engine.jump(self.player, self.state.game_over)
        if jumped is self.player:
            return False
        self.player = jumped
        return True

    def restart(self, now_ms: float):
        """Resets the session in place and re-arms the spawn clock."""
        self.state = SessionState(last_spawn_ms=now_ms)
        self.player = PlayerState()
        logger.info("Game restarted")

    def _apply(self, result: TickResult) -> TickResult:
        was_over = self.state.game_over
        self.state = result.state
        self.player = result.player

        if not was_over and result.game_over is not None:
            for listener in self._listeners:
                listener(result.game_over)
        return result
