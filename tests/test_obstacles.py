import math

import pytest

from shark_dash.constants import SHARK_DEPTH
from shark_dash.obstacles import advance_all, is_active, move_obstacle, prune

from conftest import make_bird, make_shark


def test_shark_scrolls_and_bobs():
    moved = move_obstacle(make_shark(100, phase=0.0))
    assert moved.position.x == 97
    assert moved.swim_phase == pytest.approx(0.1)
    assert moved.position.y == pytest.approx(SHARK_DEPTH + math.sin(0.1) * 8)


def test_live_bird_flies_level():
    moved = move_obstacle(make_bird(100, 220))
    assert (moved.position.x, moved.position.y) == (98, 220)


def test_dead_bird_falls_at_its_speed():
    moved = move_obstacle(make_bird(100, 220, dead=True, speed=5.0))
    assert (moved.position.x, moved.position.y) == (95, 215)


def test_shark_scored_once_trailing_edge_passes(player):
    obstacles, points = advance_all([make_shark(43)], player)
    assert points == 0
    assert not obstacles[0].has_been_scored

    obstacles, points = advance_all(obstacles, player)
    assert obstacles[0].position.x == 37
    assert points == 1
    assert obstacles[0].has_been_scored

    obstacles, points = advance_all(obstacles, player)
    assert points == 0
    assert obstacles[0].has_been_scored


def test_birds_never_score_by_passing(player):
    _, points = advance_all([make_bird(-50, 220)], player)
    assert points == 0


def test_order_is_preserved(player):
    obstacles, _ = advance_all([make_shark(300, id=0), make_bird(200, id=1), make_shark(500, id=2)], player)
    assert [o.id for o in obstacles] == [0, 1, 2]


def test_prune_threshold():
    kept = prune([make_shark(-100, id=0), make_bird(-99.9, id=1), make_bird(-150, id=2)])
    assert [o.id for o in kept] == [1]


def test_dead_birds_are_inactive():
    assert is_active(make_bird(0))
    assert not is_active(make_bird(0, dead=True))
    assert is_active(make_shark(0, scored=True))
