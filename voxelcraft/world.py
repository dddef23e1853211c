"""The game world: camera, terrain chunk, sky and crosshair."""

from __future__ import annotations

import random
from typing import AbstractSet, Optional

import numpy as np

from .blocks import BlockType
from .camera import MAX_DISTANCE, SCREEN_HEIGHT, SCREEN_WIDTH, Camera, Movement
from .chunk import Chunk
from .crosshair import Crosshair
from .raycast import RaycastHit, raycast_block
from .skybox import Skybox
from .textures import DEFAULT_ASSET_DIR, AssetDir, load_all_textures
from .transforms import perspective, translate

FIELD_OF_VIEW = 60.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0

CUBE_VERTICES = (
    -0.5, -0.5, -0.5, 0.0, 0.0,
    0.5, -0.5, -0.5, 1.0, 0.0,
    0.5, 0.5, -0.5, 1.0, 1.0,
    0.5, 0.5, -0.5, 1.0, 1.0,
    -0.5, 0.5, -0.5, 0.0, 1.0,
    -0.5, -0.5, -0.5, 0.0, 0.0,
    -0.5, -0.5, 0.5, 0.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 1.0,
    -0.5, -0.5, 0.5, 0.0, 0.0,
    -0.5, 0.5, 0.5, 1.0, 0.0,
    -0.5, 0.5, -0.5, 1.0, 1.0,
    -0.5, -0.5, -0.5, 0.0, 1.0,
    -0.5, -0.5, -0.5, 0.0, 1.0,
    -0.5, -0.5, 0.5, 0.0, 0.0,
    -0.5, 0.5, 0.5, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 0.0,
    0.5, 0.5, -0.5, 1.0, 1.0,
    0.5, -0.5, -0.5, 0.0, 1.0,
    0.5, -0.5, -0.5, 0.0, 1.0,
    0.5, -0.5, 0.5, 0.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 0.0,
    -0.5, -0.5, -0.5, 0.0, 1.0,
    0.5, -0.5, -0.5, 1.0, 1.0,
    0.5, -0.5, 0.5, 1.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 0.0,
    -0.5, -0.5, 0.5, 0.0, 0.0,
    -0.5, -0.5, -0.5, 0.0, 1.0,
    -0.5, 0.5, -0.5, 0.0, 1.0,
    0.5, 0.5, -0.5, 1.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 0.0,
    -0.5, 0.5, 0.5, 0.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 1.0,
)

BLOCK_VERTEX_SHADER = """#version 330 core
layout (location = 0) in vec3 aPos;
layout (location = 1) in vec2 aTexCoord;

out vec2 TexCoord;

uniform mat4 model;
uniform mat4 view;
uniform mat4 projection;

void main() {
    gl_Position = projection * view * model * vec4(aPos, 1.0);
    TexCoord = aTexCoord;
}
"""

BLOCK_FRAGMENT_SHADER = """#version 330 core
in vec2 TexCoord;
out vec4 FragColor;
uniform sampler2D texture1;

void main() {
    FragColor = texture(texture1, TexCoord);
}
"""


def projection_matrix(width: int, height: int) -> np.ndarray:
    """The world's perspective projection for a screen of the given size."""
    if height == 0:
        raise ValueError("screen height must be non-zero")
    return perspective(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE)


def _uniform(matrix: np.ndarray) -> tuple:
    return tuple(float(v) for v in np.asarray(matrix, dtype=float).flatten(order="F"))


class _Renderer:
    """OpenGL objects for drawing the world; built once a context exists."""

    def __init__(self, asset_dir: AssetDir) -> None:
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        gl.glEnable(gl.GL_DEPTH_TEST)
        self.program = ShaderProgram(
            Shader(BLOCK_VERTEX_SHADER, "vertex"),
            Shader(BLOCK_FRAGMENT_SHADER, "fragment"),
        )
        self.program.use()
        self.program["texture1"] = 0

        rows = list(zip(*[iter(CUBE_VERTICES)] * 5))
        positions = [c for row in rows for c in row[:3]]
        tex_coords = [c for row in rows for c in row[3:]]
        self.cube = self.program.vertex_list(
            len(rows), gl.GL_TRIANGLES,
            aPos=("f", positions), aTexCoord=("f", tex_coords),
        )
        self.skybox = Skybox(asset_dir)
        self.crosshair = Crosshair()

    def draw(self, chunk: Chunk, view: np.ndarray, projection: np.ndarray) -> None:
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.skybox.draw(view, projection)

        self.program.use()
        self.program["view"] = _uniform(view)
        self.program["projection"] = _uniform(projection)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        for position in chunk.exposed_positions():
            self.program["model"] = _uniform(translate(position))
            gl.glBindTexture(gl.GL_TEXTURE_2D, chunk.get_block(position).texture_id)
            self.cube.draw(gl.GL_TRIANGLES)

        self.crosshair.draw()


class World:
    """Holds the camera and terrain, and draws them with sky and crosshair.

    With an ``asset_dir`` the block textures are loaded at once, which needs a
    current OpenGL context; without one every block has texture 0. Drawing
    resources are created on the first call to :meth:`render`.
    """

    def __init__(
        self,
        asset_dir: Optional[AssetDir] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.asset_dir = asset_dir
        self.textures = load_all_textures(asset_dir) if asset_dir is not None else {}
        self.camera = Camera()
        self.chunk = Chunk(self.textures, rng)
        self._renderer: Optional[_Renderer] = None

    def render(
        self,
        held: AbstractSet[Movement],
        mouse_dx: float,
        mouse_dy: float,
        delta_time: float,
    ) -> None:
        """Advance the camera and draw one frame."""
        self.camera.update(held, mouse_dx, mouse_dy, delta_time)
        if self._renderer is None:
            assets = self.asset_dir if self.asset_dir is not None else DEFAULT_ASSET_DIR
            self._renderer = _Renderer(assets)
        self._renderer.draw(
            self.chunk,
            self.camera.view_matrix(),
            projection_matrix(SCREEN_WIDTH, SCREEN_HEIGHT),
        )

    def interact(self, place: bool, picked_block: BlockType) -> Optional[RaycastHit]:
        """Break the block in view, or place ``picked_block`` against it."""
        return raycast_block(
            self.chunk,
            self.camera.position,
            self.camera.front,
            MAX_DISTANCE,
            place,
            picked_block,
            self.textures,
        )