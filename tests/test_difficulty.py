import pytest

from game.asteroids import DIFFICULTIES, UnknownDifficultyError, cycle_difficulty, get_difficulty


@pytest.mark.parametrize("name, speed, spawn, fire", [
    ("easy", (40, 60), 1.6, 250),
    ("medium", (60, 90), 1.0, 200),
    ("hard", (90, 130), 0.7, 150),
])
def test_table_values(name, speed, spawn, fire):
    d = get_difficulty(name)
    assert d.speed_range == speed
    assert d.spawn_interval == spawn
    assert d.fire_interval_ms == fire


def test_table_is_closed():
    assert set(DIFFICULTIES) == {"easy", "medium", "hard"}


@pytest.mark.parametrize("name", ["", "EASY", "insane", None])
def test_unknown_difficulty_fails_fast(name):
    with pytest.raises(UnknownDifficultyError):
        get_difficulty(name)


def test_unknown_difficulty_is_value_error():
    assert issubclass(UnknownDifficultyError, ValueError)


@pytest.mark.parametrize("name, step, expected", [
    ("easy", 1, "medium"),
    ("medium", 1, "hard"),
    ("hard", 1, "easy"),
    ("easy", -1, "hard"),
    ("medium", -1, "easy"),
])
def test_cycle_difficulty_wraps(name, step, expected):
    assert cycle_difficulty(name, step) == expected


def test_cycle_difficulty_unknown():
    with pytest.raises(UnknownDifficultyError):
        cycle_difficulty("nightmare", 1)
