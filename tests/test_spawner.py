import math
import random

import pytest

from shark_dash.constants import (
    BIRD_ALTITUDE, BIRD_SPEED, SHARK_DEPTH, SHARK_SPEED, SPAWN_X,
    SPAWN_INTERVAL_MIN_MS, SPAWN_INTERVAL_MAX_MS,
)
from shark_dash.data_models import Bird, Shark
from shark_dash.spawner import ObstacleSpawner


def test_no_spawn_before_interval(scripted_random):
    spawner = ObstacleSpawner(scripted_random([0.0]))
    # interval rolls to exactly 1000 ms, which must be exceeded
    assert spawner.maybe_spawn(now_ms=1000, last_spawn_ms=0, next_id=0) is None


def test_spawns_shark(scripted_random):
    spawner = ObstacleSpawner(scripted_random([0.0, 0.5, 0.25]))
    obstacle = spawner.maybe_spawn(now_ms=1001, last_spawn_ms=0, next_id=7)

    assert isinstance(obstacle, Shark)
    assert obstacle.id == 7
    assert obstacle.kind == "shark"
    assert (obstacle.position.x, obstacle.position.y) == (SPAWN_X, SHARK_DEPTH)
    assert obstacle.speed == SHARK_SPEED
    assert obstacle.swim_phase == pytest.approx(math.pi / 2)
    assert not obstacle.has_been_scored


def test_spawns_bird(scripted_random):
    spawner = ObstacleSpawner(scripted_random([0.0, 0.7]))
    obstacle = spawner.maybe_spawn(now_ms=2000, last_spawn_ms=0, next_id=3)

    assert isinstance(obstacle, Bird)
    assert obstacle.kind == "bird"
    assert (obstacle.position.x, obstacle.position.y) == (SPAWN_X, BIRD_ALTITUDE)
    assert obstacle.speed == BIRD_SPEED
    assert not obstacle.is_dead


def test_interval_is_rerolled_on_every_check(scripted_random):
    spawner = ObstacleSpawner(scripted_random([0.99, 0.0, 0.9]))
    assert spawner.maybe_spawn(now_ms=2000, last_spawn_ms=0, next_id=0) is None
    assert spawner.maybe_spawn(now_ms=2000, last_spawn_ms=0, next_id=0) is not None


def test_interval_range():
    spawner = ObstacleSpawner(random.Random(42))
    rolls = [spawner.roll_interval() for _ in range(2000)]
    assert all(SPAWN_INTERVAL_MIN_MS <= r < SPAWN_INTERVAL_MAX_MS for r in rolls)


def test_type_mix_is_mostly_sharks():
    spawner = ObstacleSpawner(random.Random(1))
    spawned = [spawner.maybe_spawn(now_ms=10_000, last_spawn_ms=0, next_id=i) for i in range(2000)]
    sharks = sum(isinstance(o, Shark) for o in spawned)
    assert 0.65 < sharks / len(spawned) < 0.75
    assert all(0 <= o.swim_phase < 2 * math.pi for o in spawned if isinstance(o, Shark))
