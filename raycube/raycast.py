"""Grid ray casting and frame rendering."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from .model import HEIGHT, WIDTH, Side

_OPEN_DOOR = "open_door"
_CLOSED_DOOR = "closed_door"


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray stopped and which texture it shows."""

    column: int
    ray_dir_x: float
    ray_dir_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: Side
    wall_dist: float
    texture: str


def _delta(primary, other):
    """Distance the ray travels between two grid lines of one axis."""
    if primary == 0:
        return math.inf if other != 0 else math.nan
    return math.sqrt(1 + (other * other) / (primary * primary))


def _start(ray, pos, cell, delta):
    """Step direction and distance to the first grid line on one axis."""
    if ray < 0:
        return -1, (pos - cell) * delta
    return 1, (cell + 1.0 - pos) * delta


def _door_in_door(scene, player, side, step_x, step_y, map_x, map_y):
    """True when the player stands in an open door and the ray hits its frame."""
    px, py = int(player.x), int(player.y)
    if not scene.in_bounds(py, px) or scene.grid[py][px] != "d":
        return False
    if side is Side.VERTICAL:
        return map_y == py and map_x - step_x == px and step_x in (-1, 1)
    return map_x == px and map_y - step_y == py and step_y in (-1, 1)


def cast_ray(scene, player, column, width=WIDTH):
    """Cast the ray for ``column`` of a ``width``-wide view and report the hit."""
    cam_x = 2 * column / width - 1
    ray_x = -player.delta_x - player.plane_x * cam_x
    ray_y = -player.delta_y - player.plane_y * cam_x
    map_x, map_y = int(player.x), int(player.y)
    delta_x = _delta(ray_x, ray_y)
    delta_y = _delta(ray_y, ray_x)
    step_x, side_x = _start(ray_x, player.x, map_x, delta_x)
    step_y, side_y = _start(ray_y, player.y, map_y, delta_y)

    override = None
    through_open = False
    side = Side.VERTICAL
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = Side.VERTICAL
        else:
            side_y += delta_y
            map_y += step_y
            side = Side.HORIZONTAL
        if not scene.in_bounds(map_y, map_x):
            break
        c = scene.grid[map_y][map_x]
        if c == "1":
            if through_open:
                override = _OPEN_DOOR
            break
        if c == "D":
            override = _CLOSED_DOOR
            break
        through_open = c == "d"

    if side is Side.VERTICAL:
        texture = "EA" if step_x == -1 else "WE"
        wall_dist = (map_x - player.x + (1 - step_x) // 2) / ray_x
    else:
        texture = "SO" if step_y == -1 else "NO"
        wall_dist = (map_y - player.y + (1 - step_y) // 2) / ray_y

    if scene.has_doors:
        if override is not None:
            texture = override
        if _door_in_door(scene, player, side, step_x, step_y, map_x, map_y):
            texture = _OPEN_DOOR

    return RayHit(
        column=column,
        ray_dir_x=ray_x,
        ray_dir_y=ray_y,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        side=side,
        wall_dist=wall_dist,
        texture=texture,
    )


def _draw_column(strip, hit, player, texture, height, ceiling, floor):
    tex_h, tex_w = texture.shape[:2]
    if hit.wall_dist > 0:
        wall_height = int(height / hit.wall_dist)
    else:
        wall_height = height * 4
    top = -(wall_height // 2) + height // 2
    bottom = wall_height // 2 + height // 2

    if hit.side is Side.VERTICAL:
        wall_x = player.y + hit.wall_dist * hit.ray_dir_y
    else:
        wall_x = player.x + hit.wall_dist * hit.ray_dir_x
    if not math.isfinite(wall_x):
        wall_x = 0.0
    wall_x -= math.floor(wall_x)

    span = bottom - top
    tex_step = tex_h / span if span else 0.0
    tex_y = 0.0 if bottom < height else (bottom - height) * tex_step
    tex_x = int(wall_x * tex_w)
    if hit.side is Side.VERTICAL and hit.step_x < 0:
        tex_x = tex_w - tex_x - 1
    elif hit.side is Side.HORIZONTAL and hit.step_y > 0:
        tex_x = tex_w - tex_x - 1
    tex_x = min(max(tex_x, 0), tex_w - 1)

    if top < 0 or bottom >= height:
        top, bottom = 0, height
    count = bottom - top
    if count > 0:
        rows = np.minimum(tex_y + tex_step * np.arange(count), tex_h - 1)
        strip[top:bottom, :3] = texture[rows.astype(np.intp), tex_x, :3]
        strip[top:bottom, 3] = 255
    strip[max(bottom, 0):height] = floor
    strip[: max(min(top, height), 0)] = ceiling


def render_frame(scene, player, textures: Mapping, width=WIDTH, height=HEIGHT):
    """Render the view as a ``(height, width, 4)`` RGBA ``uint8`` array."""
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    ceiling = np.array((*scene.ceiling, 255), dtype=np.uint8)
    floor = np.array((*scene.floor, 255), dtype=np.uint8)
    arrays = {}
    for column in range(width):
        hit = cast_ray(scene, player, column, width)
        if hit.texture not in arrays:
            arrays[hit.texture] = np.asarray(textures[hit.texture])
        _draw_column(
            frame[:, column], hit, player, arrays[hit.texture], height, ceiling, floor
        )
    return frame