"""Exceptions raised while loading and running a scene."""

from __future__ import annotations

from typing import ClassVar


class CubError(Exception):
    """Base error; ``code`` selects the message from the class's table."""

    messages: ClassVar[dict[int, str]] = {}
    exit_code: ClassVar[int] = 1

    def __init__(self, code):
        self.code = code
        self.message = self.messages.get(code, "")
        super().__init__(self.message)


class UsageError(CubError):
    """Bad command-line arguments or an unreadable scene file."""

    messages = {
        1: "ERROR: Invalid amount of arguments",
        2: "ERROR: Incorrect file type",
        3: "ERROR: Couldn't open file",
    }


class FileCheckError(CubError):
    """The scene file failed the first validation pass."""

    messages = {
        1: "ERROR: invalid ground/ceiling color line",
        2: "ERROR: invalid texture line",
        3: "ERROR: invalid amount of required info",
        4: "ERROR: invalid maps",
        5: "ERROR: Invalid identifier in file",
        6: "ERROR: Missing map information",
        8: "ERROR: invalid player amount",
        9: "ERROR: couldn't close map_fd",
        10: "ERROR: empty file or failed malloc gnl",
    }


class MapParseError(CubError):
    """Textures or the map grid could not be built from the scene file."""

    messages = {
        1: "ERROR: Couldn't load texture",
        2: "ERROR: Invalid map",
        3: "ERROR: couldn't close map_fd",
        4: "ERROR: Failed mallocing map grid",
        5: "ERROR: GNL failed malloc",
    }


class ExecutionError(CubError):
    """The window, images or runtime assets could not be set up."""

    messages = {
        1: "ERROR: MLX failed initializing",
        2: "ERROR: failed creating minimap image",
        3: "ERROR: failed putting minimap image to window",
        4: "ERROR: failed drawing minimap rays",
        5: "ERROR: Couldn't load door texture",
        6: "ERROR: Couldn't load torch textures",
        7: "ERROR: failed putting torch txtr to image to window",
        8: "ERROR: failed putting torch image to window",
        9: "ERROR: failed allocating memory",
        10: "ERROR: failed opening walls, ceiling, floor to img",
        11: "ERROR: failed putting walls, ceiling, floor to window",
    }