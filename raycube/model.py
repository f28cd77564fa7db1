"""Core data types and constants shared by the engine."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

WIDTH = 1920
HEIGHT = 1080
N_TORCH_TXTRS = 5
DIM = 40
SPEED = 0.06
PI = 3.14159265359
COL = 0.24
MAPSIZE = 320
OFFSET = 10
MINIRAYS = 20


class Side(enum.IntEnum):
    """Which kind of grid line a ray crossed when it hit a wall."""

    VERTICAL = 0
    HORIZONTAL = 1


@dataclass
class Player:
    """Player position, heading and the derived direction and camera plane."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    delta_x: float = field(init=False, default=0.0)
    delta_y: float = field(init=False, default=0.0)
    plane_x: float = field(init=False, default=0.0)
    plane_y: float = field(init=False, default=0.0)

    def __post_init__(self):
        self.face(self.angle)

    def face(self, angle):
        """Set the heading and recompute direction and camera plane."""
        self.angle = angle
        self.delta_x = math.cos(angle)
        self.delta_y = math.sin(angle)
        self.plane_x = math.cos(angle + PI / 2)
        self.plane_y = math.sin(angle + PI / 2)


@dataclass
class Scene:
    """A parsed map: grid of cells, colours and texture paths."""

    grid: list[list[str]]
    floor: tuple[int, int, int] = (0, 0, 0)
    ceiling: tuple[int, int, int] = (0, 0, 0)
    textures: dict[str, str] = field(default_factory=dict)
    has_doors: bool = False

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    def in_bounds(self, y, x):
        """True when (y, x) lies inside the grid."""
        return 0 <= y < self.rows and 0 <= x < len(self.grid[y])

    def cell(self, y, x):
        """Return the character at (y, x); IndexError outside the grid."""
        if not self.in_bounds(y, x):
            raise IndexError(f"cell ({y}, {x}) outside the map")
        return self.grid[y][x]

    def set_cell(self, y, x, c):
        """Replace the character at (y, x)."""
        if len(c) != 1:
            raise ValueError("a cell holds exactly one character")
        if not self.in_bounds(y, x):
            raise IndexError(f"cell ({y}, {x}) outside the map")
        self.grid[y][x] = c