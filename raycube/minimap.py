"""Top-down minimap centred on the player, with a cone of sight rays."""

from __future__ import annotations

import math

import numpy as np

from .collision import is_blocking
from .model import DIM, MAPSIZE, MINIRAYS, PI

_BORDER = (0x00, 0xFF, 0x00, 0xFF)
_VOID = (0x44, 0x44, 0x44, 0xFF)
_PLAYER = (0xD7, 0xFF, 0x33, 0xFF)
_RAY = (0xFF, 0x00, 0x00, 0xFF)
_CELL_COLORS = {
    "0": (0xFF, 0xFF, 0xFF, 0xFF),
    "1": (0x00, 0x00, 0x00, 0xFF),
    "D": (0xFF, 0xFF, 0x00, 0xFF),
    "d": (0x00, 0xFF, 0xFF, 0xFF),
}
_BORDER_WIDTH = 3
_MARK_LOW = 150
_MARK_HIGH = 170
_HALF = MAPSIZE // 2


def _in_mark(y, x):
    return _MARK_LOW <= x <= _MARK_HIGH and _MARK_LOW <= y <= _MARK_HIGH


def _cell_image(scene):
    cells = np.empty((scene.rows, scene.cols, 4), dtype=np.uint8)
    cells[:] = _VOID
    for y, row in enumerate(scene.grid):
        for x, c in enumerate(row):
            color = _CELL_COLORS.get(c)
            if color is not None:
                cells[y, x] = color
    return cells


def _draw_cells(image, scene, player):
    offsets = np.arange(MAPSIZE)
    my = int(player.y * DIM - _HALF) + offsets
    mx = int(player.x * DIM - _HALF) + offsets
    valid_y = (my >= 0) & (my < scene.rows * DIM)
    valid_x = (mx >= 0) & (mx < scene.cols * DIM)
    inside = valid_y[:, None] & valid_x[None, :]

    image[:] = _VOID
    cells = _cell_image(scene)
    if cells.size:
        ys = np.where(valid_y, my // DIM, 0)
        xs = np.where(valid_x, mx // DIM, 0)
        sampled = cells[ys[:, None], xs[None, :]]
        image[inside] = sampled[inside]

    mark = slice(_MARK_LOW, _MARK_HIGH + 1)
    image[mark, mark][inside[mark, mark]] = _PLAYER


def _draw_border(image):
    image[:_BORDER_WIDTH] = _BORDER
    image[MAPSIZE - _BORDER_WIDTH:] = _BORDER
    image[:, :_BORDER_WIDTH] = _BORDER
    image[:, MAPSIZE - _BORDER_WIDTH:] = _BORDER


def _draw_ray(image, scene, player, angle):
    delta_y = math.sin(angle)
    delta_x = math.cos(angle)
    ray_y, ray_x = player.y, player.x
    map_y = map_x = _HALF
    low, high = 2, MAPSIZE - 3
    while low < map_x < high and low < map_y < high:
        ray_y -= delta_y * (1.0 / DIM)
        ray_x -= delta_x * (1.0 / DIM)
        map_y = int((ray_y - player.y) * DIM + _HALF)
        map_x = int((ray_x - player.x) * DIM + _HALF)
        cy, cx = int(ray_y), int(ray_x)
        if not scene.in_bounds(cy, cx) or is_blocking(scene.grid[cy][cx]):
            break
        if not _in_mark(map_y, map_x):
            image[map_y, map_x] = _RAY


def _draw_rays(image, scene, player):
    angle = player.angle - 0.25 * PI
    for _ in range(MINIRAYS):
        angle += (0.5 * PI) / MINIRAYS
        if angle < 0:
            angle += 2 * PI
        elif angle > 2 * PI:
            angle -= 2 * PI
        _draw_ray(image, scene, player, angle)


def render_minimap(scene, player):
    """Render the minimap as a ``(MAPSIZE, MAPSIZE, 4)`` RGBA ``uint8`` array."""
    image = np.empty((MAPSIZE, MAPSIZE, 4), dtype=np.uint8)
    _draw_cells(image, scene, player)
    _draw_border(image)
    _draw_rays(image, scene, player)
    return image