"""Texture loading and the animated torch overlay."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from .errors import ExecutionError
from .model import N_TORCH_TXTRS


def load_texture(path):
    """Load an image file as a ``(height, width, 4)`` RGBA ``uint8`` array.

    Raises OSError when the file is missing or is not an image.
    """
    with Image.open(path) as img:
        return np.array(img.convert("RGBA"), dtype=np.uint8)


def load_torch_frames(directory):
    """Load ``torch1.png`` to ``torch5.png`` from ``directory``."""
    base = Path(directory)
    frames = []
    for number in range(1, N_TORCH_TXTRS + 1):
        try:
            frames.append(load_texture(base / f"torch{number}.png"))
        except OSError as exc:
            raise ExecutionError(6) from exc
    return frames


class TorchAnimation:
    """Cycles through frames, advancing at most once per ``interval`` seconds."""

    def __init__(self, frames, interval=0.1):
        self.frames = list(frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        self.interval = interval
        self.index = 0
        self.last_frame = 0.0

    @property
    def frame(self):
        """The frame currently shown."""
        return self.frames[self.index]

    def update(self, now):
        """Advance to the next frame if enough time has passed; return the index."""
        if now - self.last_frame < self.interval:
            return self.index
        self.index = (self.index + 1) % len(self.frames)
        self.last_frame = now
        return self.index