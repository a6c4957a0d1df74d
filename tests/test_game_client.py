from shark_dash.game_client import BRONZE, GOLD, SILVER, WHITE, rank_style


def test_podium_ranks_get_medal_colours():
    assert rank_style(1) == ("1st", GOLD)
    assert rank_style(2) == ("2nd", SILVER)
    assert rank_style(3) == ("3rd", BRONZE)


def test_other_ranks_are_plain():
    assert rank_style(4) == ("#4", WHITE)
    assert rank_style(10) == ("#10", WHITE)
