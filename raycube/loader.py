"""Read a scene file into a validated Scene and the player's starting pose."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import MapParseError, UsageError
from .model import PI, Player, Scene
from .scanner import FileSummary, is_map_char, is_whitespace, scan_lines

_TEXTURE_IDS = ("NO", "SO", "WE", "EA")
_REQUIRED = 6
_START_ANGLES = {"N": 0.5 * PI, "W": 2 * PI, "S": 1.5 * PI, "E": PI}


def check_extension(path):
    """Return ``path`` when it names a ``.cub`` file; raise UsageError(2) otherwise."""
    text = str(path)
    if len(text) < 5 or not text.endswith(".cub"):
        raise UsageError(2)
    return path


def read_lines(path):
    """Return the file's lines with their line endings kept."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise UsageError(3) from exc


def _skip_whitespace(text, i):
    while i < len(text) and is_whitespace(text[i]):
        i += 1
    return i


def texture_paths(lines):
    """Map each wall identifier (NO, SO, WE, EA) to the path given for it."""
    paths = {}
    found = 0
    for line in lines:
        rest = line[_skip_whitespace(line, 0):]
        if rest[:1] in ("F", "C"):
            found += 1
        elif rest[:2] in _TEXTURE_IDS:
            start = _skip_whitespace(rest, 2)
            paths[rest[:2]] = rest[start:].rstrip("\n")
            found += 1
        if found == _REQUIRED:
            break
    return paths


def build_grid(lines: Sequence[str], summary: FileSummary):
    """Copy the map rows into a rectangular grid.

    Rows are padded with spaces to the widest row and the player's start
    character is replaced by floor. Returns ``(grid, angle)`` where ``angle``
    is the heading the start character gives.
    """
    rows = list(lines[summary.map_start:summary.map_start + summary.rows])
    if summary.map_start < 0 or len(rows) < summary.rows:
        raise MapParseError(5)
    angle = 0.0
    grid = []
    for line in rows:
        row = []
        ended = False
        for x in range(summary.cols):
            c = line[x] if x < len(line) else "\n"
            if c in ("\n", "\0"):
                ended = True
            if ended:
                row.append(" ")
                continue
            if c in _START_ANGLES:
                angle = _START_ANGLES[c]
            row.append("0" if is_map_char(c, 4) else c)
        grid.append(row)
    return grid, angle


def door_is_valid(grid, y, x):
    """A door must sit off the border, between two walls, with floor on both open sides."""
    rows = len(grid)
    cols = len(grid[y])
    if y == 0 or x == 0 or y == rows - 1 or x == cols - 1:
        return False
    up, down = grid[y - 1][x], grid[y + 1][x]
    left, right = grid[y][x - 1], grid[y][x + 1]
    if up == "1" and down == "1" and left == "0" and right == "0":
        return True
    return left == "1" and right == "1" and up == "0" and down == "0"


def _check_edges(grid):
    last = len(grid) - 1
    for y, row in enumerate(grid):
        if y in (0, last) and "0" in row:
            raise MapParseError(2)
        if row and (row[0] == "0" or row[-1] == "0"):
            raise MapParseError(2)


def _check_inner(grid):
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if is_map_char(c, 5):
                neighbours = (
                    grid[y + 1][x],
                    grid[y - 1][x],
                    grid[y][x + 1],
                    grid[y][x - 1],
                )
                if not all(is_map_char(n, 7) for n in neighbours):
                    raise MapParseError(2)
            elif c == "D" and not door_is_valid(grid, y, x):
                raise MapParseError(2)


def validate_grid(grid):
    """Raise MapParseError(2) unless the map is closed and every door is valid."""
    _check_edges(grid)
    _check_inner(grid)


def load_scene(path):
    """Load, validate and return ``(scene, player)`` from a ``.cub`` file."""
    check_extension(path)
    lines = read_lines(path)
    summary = scan_lines(lines)
    textures = texture_paths(lines)
    grid, angle = build_grid(lines, summary)
    validate_grid(grid)
    scene = Scene(
        grid=grid,
        floor=summary.floor,
        ceiling=summary.ceiling,
        textures=textures,
        has_doors=summary.has_doors,
    )
    player = Player(x=summary.player_x, y=summary.player_y, angle=angle)
    return scene, player