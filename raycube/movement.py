"""Player movement, turning and door toggling."""

from __future__ import annotations

import enum
import math

from .collision import collides
from .model import PI, SPEED, WIDTH

_TURN_STEP = 0.1
_MOUSE_SCALE = 0.05 / 30
_DOOR_STEPS = 40
_DOOR_STRIDE = 0.025
_DOOR_BIAS = 0.2
_DOOR_CLOSE_AFTER = 5


class Move(enum.Enum):
    """Movement keys."""

    FORWARD = "W"
    BACK = "S"
    LEFT = "A"
    RIGHT = "D"


def step(scene, player, move):
    """Move the player one step unless blocked; return True when it moved."""
    move = Move(move)
    if collides(scene, player, move.value):
        return False
    dx = player.delta_x * SPEED
    dy = player.delta_y * SPEED
    if move is Move.FORWARD:
        player.y -= dy
        player.x -= dx
    elif move is Move.BACK:
        player.y += dy
        player.x += dx
    elif move is Move.LEFT:
        player.x -= dy
        player.y += dx
    else:
        player.x += dy
        player.y -= dx
    return True


def turn(player, clockwise):
    """Rotate the player by a fixed step, keeping the angle within [0, 2*PI]."""
    angle = player.angle
    if clockwise:
        angle += _TURN_STEP
        if angle > 2 * PI:
            angle -= 2 * PI
    else:
        angle -= _TURN_STEP
        if angle < 0:
            angle += 2 * PI
    player.face(angle)


def mouse_turn(player, mouse_x, width=WIDTH):
    """Turn by the cursor's offset from the centre; return True when it turned."""
    center = width // 2
    if mouse_x == center:
        return False
    angle = player.angle + (mouse_x - center) * _MOUSE_SCALE
    if angle > 2 * PI:
        angle -= 2 * PI
    if angle < 2 * PI:
        angle += 2 * PI
    player.face(angle)
    return True


def toggle_door(scene, player):
    """Open or close the door just ahead; return True when one was reached."""
    py, px = int(player.y), int(player.x)
    if scene.in_bounds(py, px) and scene.grid[py][px] in ("D", "d"):
        return False
    delta_y = math.sin(player.angle) + _DOOR_BIAS
    delta_x = math.cos(player.angle) + _DOOR_BIAS
    y, x = player.y, player.x
    for i in range(_DOOR_STEPS):
        y -= delta_y * _DOOR_STRIDE
        x -= delta_x * _DOOR_STRIDE
        cy, cx = int(y), int(x)
        if not scene.in_bounds(cy, cx):
            continue
        c = scene.grid[cy][cx]
        if c == "D":
            scene.set_cell(cy, cx, "d")
            return True
        if c == "d":
            if i > _DOOR_CLOSE_AFTER:
                scene.set_cell(cy, cx, "D")
            return True
    return False