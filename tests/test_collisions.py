from shark_dash.collisions import resolve_collisions
from shark_dash.constants import BIRD_FALL_SPEED

from conftest import make_bird, make_shark


def test_live_bird_hit_scores_and_dies(player):
    result = resolve_collisions(player, [make_bird(20, 140)])
    bird = result.obstacles[0]

    assert result.points == 1
    assert not result.is_terminal
    assert bird.is_dead
    assert bird.speed == BIRD_FALL_SPEED


def test_dead_bird_is_ignored(player):
    dead = make_bird(20, 140, dead=True, speed=BIRD_FALL_SPEED)
    result = resolve_collisions(player, [dead])
    assert result.points == 0
    assert result.obstacles == (dead,)


def test_simultaneous_bird_hits_all_count(player):
    result = resolve_collisions(player, [make_bird(20, 140, id=0), make_bird(40, 130, id=1)])
    assert result.points == 2
    assert all(b.is_dead for b in result.obstacles)


def test_shark_hit_is_terminal_and_shark_stays(player):
    shark = make_shark(40, 103)
    result = resolve_collisions(player, [shark, make_bird(300)])

    assert result.is_terminal
    assert result.shark_hit == shark
    assert result.obstacles[0] == shark
    assert len(result.obstacles) == 2


def test_no_overlap_no_effect(player):
    obstacles = (make_shark(300), make_bird(20, 220))
    result = resolve_collisions(player, obstacles)
    assert result.points == 0
    assert not result.is_terminal
    assert result.obstacles == obstacles
