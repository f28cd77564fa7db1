"""Wall collision probes around the player."""

from __future__ import annotations

import math

from .model import COL, PI

_BLOCKING = frozenset("1D ")

# Probe headings, relative to the player's angle, for each movement key.
_PROBES = {
    "W": (0.0, -0.25 * PI, 0.25 * PI),
    "S": (-PI, -0.75 * PI, 0.75 * PI),
    "D": (-1.5 * PI, -1.25 * PI, -1.75 * PI),
    "A": (-0.5 * PI, -0.25 * PI, -0.75 * PI),
}


def out_of_bounds(scene, y, x):
    """True when (y, x) lies outside the map's rows and columns."""
    return x < 0 or x >= scene.cols or y < 0 or y >= scene.rows


def is_blocking(c):
    """Walls, closed doors and void cells block movement."""
    return c in _BLOCKING


def _wrap(angle):
    if angle < 0:
        angle += 2 * PI
    elif angle > 2 * PI:
        angle -= 2 * PI
    return angle


def _probe_blocked(scene, player, angle):
    y = int(player.y - math.sin(angle) * COL)
    x = int(player.x - math.cos(angle) * COL)
    if out_of_bounds(scene, y, x) or not scene.in_bounds(y, x):
        return True
    return is_blocking(scene.grid[y][x])


def collides(scene, player, key):
    """True when moving with ``key`` (W, A, S or D) would run into something."""
    offsets = _PROBES.get(key, ())
    return any(
        _probe_blocked(scene, player, _wrap(player.angle + offset))
        for offset in offsets
    )