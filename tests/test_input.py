import pytest

from game.asteroids import InputState, InputTracker, zone_at


def test_nothing_held():
    assert InputTracker().snapshot() == InputState()


def test_default_key_bindings():
    tracker = InputTracker()
    tracker.key_down("a")
    tracker.key_down(" ")
    assert tracker.snapshot() == InputState(left=True, right=False, fire=True)

    tracker.key_up("a")
    tracker.key_down("ArrowRight")
    assert tracker.snapshot() == InputState(left=False, right=True, fire=True)


def test_unbound_keys_are_ignored():
    tracker = InputTracker()
    tracker.key_down("q")
    assert tracker.snapshot() == InputState()


def test_touch_zones_match_keys():
    tracker = InputTracker()
    tracker.press_zone("left")
    tracker.press_zone("fire")
    assert tracker.snapshot() == InputState(left=True, fire=True)

    tracker.release_zone("left")
    assert tracker.snapshot() == InputState(fire=True)


def test_key_and_zone_for_same_action():
    tracker = InputTracker()
    tracker.key_down("z")
    tracker.press_zone("fire")
    tracker.key_up("z")
    assert tracker.snapshot().fire


def test_custom_bindings():
    tracker = InputTracker({"left": (65361,), "right": (65363,), "fire": (32,)})
    tracker.key_down(65363)
    assert tracker.snapshot() == InputState(right=True)


def test_unknown_zone_and_action():
    with pytest.raises(ValueError):
        InputTracker().press_zone("jump")
    with pytest.raises(ValueError):
        InputTracker({"jump": ("w",)})


def test_release_all():
    tracker = InputTracker()
    tracker.key_down("a")
    tracker.press_zone("right")
    tracker.release_all()
    assert tracker.snapshot() == InputState()


def test_snapshot_is_immutable():
    snap = InputTracker().snapshot()
    with pytest.raises(AttributeError):
        snap.left = True


@pytest.mark.parametrize("x, expected", [
    (0, "left"),
    (159, "left"),
    (160, "fire"),
    (319, "fire"),
    (320, "right"),
    (479, "right"),
])
def test_zone_columns(x, expected):
    assert zone_at(x, 10, 480) == expected


@pytest.mark.parametrize("x, y", [(100, 29), (100, 400), (-1, 10), (480, 10)])
def test_outside_zone_strip(x, y):
    assert zone_at(x, y, 480) is None


def test_zone_strip_top_edge_counts():
    assert zone_at(100, 28, 480) == "left"
