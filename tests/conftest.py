import random
from datetime import datetime, timezone

import pytest

from shark_dash.data_models import Bird, LeaderboardEntry, PlayerState, Shark, Vec2


class ScriptedRandom(random.Random):
    """Returns queued values from random(), then falls back to a fixed seed."""

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        if self.values:
            return self.values.pop(0)
        return super().random()


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture
def player():
    return PlayerState()


def make_shark(x, y=95.0, phase=0.0, id=0, scored=False):
    return Shark(id=id, position=Vec2(x, y), speed=3.0, swim_phase=phase, has_been_scored=scored)


def make_bird(x, y=220.0, id=0, dead=False, speed=2.0):
    return Bird(id=id, position=Vec2(x, y), speed=speed, is_dead=dead)


def make_entry(id, name, score, game_time=60):
    return LeaderboardEntry(
        id=id,
        player_name=name,
        score=score,
        game_time=game_time,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )
