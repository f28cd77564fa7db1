"""Grid raycasting maze explorer for .cub scene files: loader, renderer, minimap and pygame front end."""

__version__ = "0.1.0"