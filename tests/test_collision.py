import pytest

from raycube.collision import collides, is_blocking, out_of_bounds
from raycube.model import PI, Player, Scene


def _room():
    rows = ["11111", "10001", "10001", "10001", "11111"]
    return Scene(grid=[list(r) for r in rows])


@pytest.mark.parametrize("c", ["1", "D", " "])
def test_blocking_chars(c):
    assert is_blocking(c) is True


@pytest.mark.parametrize("c", ["0", "d", "N"])
def test_passable_chars(c):
    assert is_blocking(c) is False


@pytest.mark.parametrize(
    "y, x, expected",
    [(0, 0, False), (4, 4, False), (-1, 0, True), (0, 5, True), (5, 2, True)],
)
def test_out_of_bounds(y, x, expected):
    assert out_of_bounds(_room(), y, x) is expected


def test_free_move_in_middle():
    scene = _room()
    player = Player(x=2.5, y=2.5, angle=0.5 * PI)
    assert [collides(scene, player, k) for k in "WASD"] == [False] * 4


def test_forward_into_wall():
    player = Player(x=2.5, y=1.2, angle=0.5 * PI)
    assert collides(_room(), player, "W") is True
    assert collides(_room(), player, "S") is False


def test_sideways_into_wall():
    player = Player(x=1.2, y=2.5, angle=0.5 * PI)
    assert collides(_room(), player, "A") is True
    assert collides(_room(), player, "D") is False


def test_closed_door_blocks_open_door_does_not():
    scene = _room()
    scene.set_cell(1, 2, "D")
    player = Player(x=2.5, y=2.1, angle=0.5 * PI)
    assert collides(scene, player, "W") is True
    scene.set_cell(1, 2, "d")
    assert collides(scene, player, "W") is False


def test_probe_outside_map_collides():
    scene = Scene(grid=[list("000"), list("000"), list("000")])
    player = Player(x=1.5, y=0.1, angle=0.5 * PI)
    assert collides(scene, player, "W") is True


def test_unknown_key_never_collides():
    player = Player(x=1.2, y=1.2, angle=0.5 * PI)
    assert collides(_room(), player, "Q") is False