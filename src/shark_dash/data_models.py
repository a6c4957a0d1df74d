"""
data_models.py: Data structures for the game state.

Every gameplay record is frozen; each tick produces new values with
``dataclasses.replace`` instead of mutating the previous ones.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Union

from .constants import GAME_DURATION_S, PLAYER_X, WATER_HEIGHT


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class PlayerState:
    """The boat. ``position.y`` is measured up from the water baseline."""
    position: Vec2 = field(default_factory=lambda: Vec2(PLAYER_X, WATER_HEIGHT))
    velocity: Vec2 = field(default_factory=Vec2)
    is_jumping: bool = False


@dataclass(frozen=True)
class Shark:
    """Submerged obstacle: lethal on contact, worth a point when jumped over."""
    id: int
    position: Vec2
    speed: float
    swim_phase: float
    has_been_scored: bool = False
    kind: str = field(default="shark", init=False)


@dataclass(frozen=True)
class Bird:
    """Flying obstacle: worth a point when hit, then falls out of the sky."""
    id: int
    position: Vec2
    speed: float
    is_dead: bool = False
    kind: str = field(default="bird", init=False)


Obstacle = Union[Shark, Bird]


@dataclass(frozen=True)
class SessionState:
    """Everything a running game owns apart from the player."""
    score: int = 0
    time_remaining: int = GAME_DURATION_S
    game_over: bool = False
    obstacles: Tuple[Obstacle, ...] = ()
    next_obstacle_id: int = 0
    last_spawn_ms: float = 0.0
    final_score: Optional[int] = None
    final_game_time: Optional[int] = None


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per tick."""
    player: PlayerState
    obstacles: Tuple[Obstacle, ...]
    score: int
    time_remaining: int
    game_over: bool


@dataclass(frozen=True)
class LeaderboardEntry:
    """A stored score record."""
    id: int
    player_name: str
    score: int
    game_time: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: dict) -> "LeaderboardEntry":
        """Builds an entry from a backend row (``created_at`` as ISO text or datetime)."""
        created_at = row["created_at"]
        if isinstance(created_at, str):
            created_at = parse_timestamp(created_at)
        return cls(
            id=int(row["id"]),
            player_name=row["player_name"],
            score=int(row["score"]),
            game_time=int(row["game_time"]),
            created_at=created_at,
        )


_FRACTION = re.compile(r"\.(\d+)")
_HOUR_OFFSET = re.compile(r"(:\d{2}(?:\.\d+)?)([+-]\d{2})$")


def parse_timestamp(text: str) -> datetime:
    """
    Parses ISO timestamps as Postgres returns them: ``Z`` suffix and
    trimmed fractional seconds are padded to what ``fromisoformat`` accepts.
    """
    text = text.strip().replace("Z", "+00:00")
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    text = _HOUR_OFFSET.sub(r"\1\2:00", text)
    return datetime.fromisoformat(text)


def format_clock(seconds: int) -> str:
    """Formats seconds as ``m:ss``."""
    return f"{seconds // 60}:{seconds % 60:02d}"
