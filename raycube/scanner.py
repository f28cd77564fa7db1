"""First validation pass over a scene file's lines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import FileCheckError

_WHITESPACE = frozenset(" \t\v\f\r")
_DIGITS = frozenset("0123456789")
_MAP_CHARS = "NSWE01D "
_PLAYER_CHARS = frozenset("NSWE")
_DOOR_CHARS = frozenset("Dd")
_PLAIN_CELLS = frozenset("01 ")
_LINE_END = frozenset("\n\0")
_TEXTURE_IDS = ("NO", "SO", "WE", "EA")
_IDENTIFIERS = ("NO", "SO", "WE", "EA", "F", "C")
_REQUIRED = 6


def is_whitespace(c):
    """Space, tab, vertical tab, form feed or carriage return (not newline)."""
    return c in _WHITESPACE


def is_map_char(c, length):
    """True when c is among the first ``length`` characters of "NSWE01D "."""
    return len(c) == 1 and c in _MAP_CHARS[: max(length, 0)]


def _char(text, i):
    return text[i] if i < len(text) else ""


def _skip_whitespace(text, i):
    while is_whitespace(_char(text, i)):
        i += 1
    return i


def _skip_digits(text, i):
    while _char(text, i) in _DIGITS:
        i += 1
    return i


def _channel(text):
    """Read one colour channel; None when it is missing, too large or malformed."""
    if _char(text, 0) in ("\n", ""):
        return None
    i = 1 if text[0] == "+" else 0
    value = 0
    while _char(text, i) in _DIGITS:
        value = value * 10 + int(text[i])
        if value > 255:
            return None
        i += 1
    end = _char(text, i)
    if end not in (",", "\n", "") and not is_whitespace(end):
        return None
    return value


def parse_color(text):
    """Parse "R,G,B\\n" following a colour identifier into an (r, g, b) tuple."""
    i = _skip_whitespace(text, 0)
    channels = []
    for n in range(3):
        channels.append(_channel(text[i:]))
        i = _skip_digits(text, i)
        if n < 2:
            if _char(text, i) != ",":
                raise FileCheckError(1)
            i += 1
    if None in channels:
        raise FileCheckError(1)
    i = _skip_whitespace(text, i)
    if _char(text, i) != "\n":
        raise FileCheckError(1)
    return tuple(channels)


@dataclass
class FileSummary:
    """What the first pass learned about a scene file."""

    floor: tuple[int, int, int] | None = None
    ceiling: tuple[int, int, int] | None = None
    rows: int = 0
    cols: int = 0
    player_count: int = 0
    player_x: float = 0.0
    player_y: float = 0.0
    has_doors: bool = False
    map_start: int = -1
    data_count: int = 0
    after_map: bool = False
    identifiers: Counter = field(default_factory=Counter)


def _count_identifier(summary, line):
    for ident in _IDENTIFIERS:
        if line.startswith(ident):
            summary.identifiers[ident] += 1
            break
    if any(count > 1 for count in summary.identifiers.values()):
        raise FileCheckError(3)


def _check_texture(summary, line):
    if not is_whitespace(_char(line, 2)):
        raise FileCheckError(2)
    _count_identifier(summary, line)
    if _char(line, _skip_whitespace(line, 2)) == "\n":
        raise FileCheckError(2)
    summary.data_count += 1


def _check_color(summary, line):
    if not is_whitespace(_char(line, 1)):
        raise FileCheckError(1)
    _count_identifier(summary, line)
    color = parse_color(line[1:])
    if line[0] == "F":
        summary.floor = color
    else:
        summary.ceiling = color
    summary.data_count += 1


def _check_map_row(summary, index, line):
    if summary.data_count != _REQUIRED:
        raise FileCheckError(3)
    width = 0
    for x, c in enumerate(line):
        if c in _LINE_END:
            break
        if c in _PLAYER_CHARS:
            summary.player_count += 1
            summary.player_y = summary.rows + 0.5
            summary.player_x = x + 0.5
        elif c in _DOOR_CHARS:
            summary.has_doors = True
        elif c not in _PLAIN_CELLS:
            raise FileCheckError(4)
        width += 1
    summary.cols = max(summary.cols, width)
    if summary.rows == 0:
        summary.map_start = index
    summary.rows += 1


def _check_line(summary, index, line):
    i = _skip_whitespace(line, 0)
    c = _char(line, i)
    rest = line[i:]
    if summary.after_map or (
        summary.data_count == _REQUIRED and c not in ("\n", "1")
    ):
        raise FileCheckError(4)
    if c in ("F", "C"):
        _check_color(summary, rest)
    elif rest[:2] in _TEXTURE_IDS:
        _check_texture(summary, rest)
    elif c in ("1", "0"):
        _check_map_row(summary, index, line)
    elif c not in ("\n", ""):
        raise FileCheckError(5)
    elif summary.rows > 0:
        summary.after_map = True


def scan_lines(lines: Iterable[str]) -> FileSummary:
    """Validate newline-terminated lines of a scene file and summarise them."""
    summary = FileSummary()
    empty = True
    for index, line in enumerate(lines):
        empty = False
        _check_line(summary, index, line)
    if empty:
        raise FileCheckError(10)
    if summary.data_count < _REQUIRED or summary.rows == 0:
        raise FileCheckError(6)
    if summary.cols < 3 or summary.rows < 3:
        raise FileCheckError(4)
    if summary.player_count != 1:
        raise FileCheckError(8)
    return summary