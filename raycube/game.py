"""Window, input loop and the command that starts a scene."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .errors import CubError, ExecutionError, MapParseError, UsageError  # noqa: E402
from .loader import load_scene  # noqa: E402
from .minimap import render_minimap  # noqa: E402
from .model import HEIGHT, OFFSET, WIDTH, Player  # noqa: E402
from .movement import Move, mouse_turn, step, toggle_door, turn  # noqa: E402
from .raycast import render_frame  # noqa: E402
from .textures import TorchAnimation, load_texture, load_torch_frames  # noqa: E402

_WALL_IDS = ("NO", "SO", "WE", "EA")
_DOOR_FILES = {"closed_door": "closed_door.png", "open_door": "open_door.png"}
_MOVE_KEYS = (
    (pygame.K_w, Move.FORWARD),
    (pygame.K_s, Move.BACK),
    (pygame.K_a, Move.LEFT),
    (pygame.K_d, Move.RIGHT),
)
_WATCHED = (
    pygame.K_ESCAPE,
    pygame.K_w,
    pygame.K_s,
    pygame.K_a,
    pygame.K_d,
    pygame.K_LEFT,
    pygame.K_RIGHT,
)
_TORCH_X_FROM_RIGHT = 300
_TORCH_Y_FROM_BOTTOM = 650
_FPS = 60


def _default_player(scene):
    for y, row in enumerate(scene.grid):
        for x, c in enumerate(row):
            if c == "0":
                return Player(x=x + 0.5, y=y + 0.5)
    raise ValueError("the map has no floor cell to start on")


def _surface(array):
    height, width = array.shape[:2]
    return pygame.image.frombuffer(array.tobytes(), (width, height), "RGBA").copy()


class Game:
    """A running scene: textures, player state and the event loop."""

    def __init__(self, scene, asset_dir):
        self.scene = scene
        self.asset_dir = Path(asset_dir)
        self.player = _default_player(scene)
        self.width = WIDTH
        self.height = HEIGHT
        self.textures = self._load_walls()
        if scene.has_doors:
            self.textures.update(self._load_doors())
        self.torch = TorchAnimation(load_torch_frames(self.asset_dir))
        self.running = True

    def _load_walls(self):
        textures = {}
        for ident in _WALL_IDS:
            path = self.scene.textures.get(ident)
            if path is None:
                raise MapParseError(1)
            try:
                textures[ident] = load_texture(path)
            except OSError as exc:
                raise MapParseError(1) from exc
        return textures

    def _load_doors(self):
        textures = {}
        for name, filename in _DOOR_FILES.items():
            try:
                textures[name] = load_texture(self.asset_dir / filename)
            except OSError as exc:
                raise ExecutionError(5) from exc
        return textures

    def handle_keys(self, pressed):
        """Apply held keys (a set of pygame key codes); True when the view changed."""
        if pygame.K_ESCAPE in pressed:
            self.running = False
            return False
        changed = False
        for key, move in _MOVE_KEYS:
            if key in pressed and step(self.scene, self.player, move):
                changed = True
        if pygame.K_LEFT in pressed:
            turn(self.player, clockwise=False)
            changed = True
        elif pygame.K_RIGHT in pressed:
            turn(self.player, clockwise=True)
            changed = True
        return changed

    def handle_event(self, event):
        """Handle a window event; True when the view changed."""
        if event.type == pygame.QUIT:
            self.running = False
            return False
        if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_SPACE:
            return toggle_door(self.scene, self.player)
        return False

    def _views(self):
        frame = render_frame(
            self.scene, self.player, self.textures, self.width, self.height
        )
        return _surface(frame), _surface(render_minimap(self.scene, self.player))

    def run(self):
        """Open the window and run until it is closed or Escape is pressed."""
        try:
            pygame.init()
            screen = pygame.display.set_mode((self.width, self.height))
        except pygame.error as exc:
            pygame.quit()
            raise ExecutionError(1) from exc
        try:
            pygame.display.set_caption("Cub3D")
            pygame.mouse.set_visible(False)
            center = (self.width // 2, self.height // 2)
            pygame.mouse.set_pos(center)
            torches = [_surface(frame) for frame in self.torch.frames]
            torch_pos = (
                self.width - _TORCH_X_FROM_RIGHT,
                self.height - _TORCH_Y_FROM_BOTTOM,
            )
            view, mini = self._views()
            clock = pygame.time.Clock()
            while self.running:
                changed = False
                for event in pygame.event.get():
                    changed |= self.handle_event(event)
                if not self.running:
                    break
                state = pygame.key.get_pressed()
                pressed = {key for key in _WATCHED if state[key]}
                changed |= self.handle_keys(pressed)
                if not self.running:
                    break
                if pygame.K_LEFT not in pressed and pygame.K_RIGHT not in pressed:
                    mouse_x, _ = pygame.mouse.get_pos()
                    if mouse_turn(self.player, mouse_x, self.width):
                        pygame.mouse.set_pos(center)
                        changed = True
                if changed:
                    view, mini = self._views()
                self.torch.update(time.monotonic())
                screen.blit(view, (0, 0))
                screen.blit(mini, (OFFSET, OFFSET))
                screen.blit(torches[self.torch.index], torch_pos)
                pygame.display.flip()
                clock.tick(_FPS)
        finally:
            pygame.quit()


def main(argv=None):
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise UsageError(1)
        scene, player = load_scene(args[0])
        game = Game(scene, Path("textures"))
        game.player = player
        game.run()
    except CubError as exc:
        print(exc.message, file=sys.stderr)
        return exc.exit_code
    print("Cub3d finished!")
    return 0


if __name__ == "__main__":
    sys.exit(main())