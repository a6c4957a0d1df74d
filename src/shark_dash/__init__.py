"""
Shark Dash: an endless water runner. Jump the sharks, hit the birds, beat the clock.
"""

from .data_models import Bird, LeaderboardEntry, PlayerState, SessionState, Shark, Snapshot
from .game_engine import GameEngine, GameOver, GameOverReason, TickResult
from .scheduler import GameScheduler
from .session import GameSession

__version__ = "0.1.0"
