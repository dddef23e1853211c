"""The game window, its input handling and the command entry point."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from .blocks import BlockType
from .camera import SCREEN_HEIGHT, SCREEN_WIDTH, Movement
from .textures import DEFAULT_ASSET_DIR, AssetDir
from .world import World

WINDOW_TITLE = "Voxelcraft"

_PICK_KEYS = {
    ord("1"): BlockType.SNOW,
    ord("2"): BlockType.GRASS,
    ord("3"): BlockType.WATER,
    ord("4"): BlockType.GLASS,
    ord("5"): BlockType.SAND,
    ord("6"): BlockType.GRAVEL,
    ord("7"): BlockType.PLANKS,
    ord("8"): BlockType.BRICKS,
    ord("9"): BlockType.WOOD,
    ord("0"): BlockType.LEAVES,
}


def picked_block_for_key(symbol: int) -> Optional[BlockType]:
    """The block a number key selects, or None for any other key."""
    return _PICK_KEYS.get(symbol)


class GameWindow:
    """Opens the window, feeds input to the world and draws every frame."""

    def __init__(
        self,
        asset_dir: AssetDir = DEFAULT_ASSET_DIR,
        rng: Optional[random.Random] = None,
        fullscreen: bool = True,
    ) -> None:
        import pyglet
        from pyglet.window import key, mouse

        if fullscreen:
            self.window = pyglet.window.Window(caption=WINDOW_TITLE, fullscreen=True)
        else:
            self.window = pyglet.window.Window(
                SCREEN_WIDTH, SCREEN_HEIGHT, caption=WINDOW_TITLE
            )
        self.window.set_exclusive_mouse(True)

        self._keys = key.KeyStateHandler()
        self._controls = {
            key.W: Movement.FORWARD,
            key.S: Movement.BACKWARD,
            key.A: Movement.LEFT,
            key.D: Movement.RIGHT,
            key.SPACE: Movement.UP,
            key.LCTRL: Movement.DOWN,
            key.LSHIFT: Movement.SPRINT,
            key.UP: Movement.ARROW_UP,
            key.DOWN: Movement.ARROW_DOWN,
            key.LEFT: Movement.ARROW_LEFT,
            key.RIGHT: Movement.ARROW_RIGHT,
        }
        self._break_key = key.BACKSPACE
        self._place_key = key.GRAVE
        self._place_button = mouse.RIGHT

        self.world = World(asset_dir, rng)
        self.picked_block = BlockType.SNOW
        self._mouse_dx = 0.0
        self._mouse_dy = 0.0
        self._elapsed = 0.0

        self.window.push_handlers(self._keys)
        self.window.push_handlers(
            self.on_draw,
            self.on_key_press,
            self.on_mouse_press,
            self.on_mouse_motion,
            self.on_mouse_drag,
        )
        pyglet.clock.schedule(self._tick)

    def _tick(self, dt: float) -> None:
        self._elapsed += dt

    def on_draw(self) -> None:
        held = {movement for symbol, movement in self._controls.items() if self._keys[symbol]}
        delta_time, self._elapsed = self._elapsed, 0.0
        dx, dy = self._mouse_dx, self._mouse_dy
        self._mouse_dx = self._mouse_dy = 0.0
        self.world.render(held, dx, dy, delta_time)

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol in (self._break_key, self._place_key):
            self.world.interact(symbol == self._place_key, self.picked_block)
        picked = picked_block_for_key(symbol)
        if picked is not None:
            self.picked_block = picked

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        self.world.interact(button == self._place_button, self.picked_block)

    def on_mouse_motion(self, x: int, y: int, dx: float, dy: float) -> None:
        # The window's y axis points up; the camera expects downward motion positive.
        self._mouse_dx += dx
        self._mouse_dy -= dy

    def on_mouse_drag(
        self, x: int, y: int, dx: float, dy: float, buttons: int, modifiers: int
    ) -> None:
        self.on_mouse_motion(x, y, dx, dy)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="voxelcraft", description="Build and dig in a block world.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=DEFAULT_ASSET_DIR,
        help="directory holding the blocks/ and skybox/ images",
    )
    parser.add_argument("--windowed", action="store_true", help="run in a window, not full screen")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parser().parse_args(argv)

    import pyglet
    import pyglet.gl
    import pyglet.window

    try:
        game = GameWindow(args.assets, fullscreen=not args.windowed)
    except (pyglet.window.WindowException, pyglet.gl.ContextException) as exc:
        print(f"voxelcraft: cannot open window: {exc}", file=sys.stderr)
        return 1
    pyglet.app.run()
    game.window.close()
    return 0