"""A cube-mapped sky drawn behind everything else."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np

from .textures import DEFAULT_ASSET_DIR, AssetDir
from .transforms import strip_translation

SKYBOX_FACES = ("right", "left", "top", "bottom", "front", "back")

SKYBOX_VERTICES = (
    -1.0, 1.0, -1.0,
    -1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, 1.0, -1.0,
    -1.0, 1.0, -1.0,

    -1.0, -1.0, 1.0,
    -1.0, -1.0, -1.0,
    -1.0, 1.0, -1.0,
    -1.0, 1.0, -1.0,
    -1.0, 1.0, 1.0,
    -1.0, -1.0, 1.0,

    1.0, -1.0, -1.0,
    1.0, -1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, -1.0,
    1.0, -1.0, -1.0,

    -1.0, -1.0, 1.0,
    -1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, -1.0, 1.0,
    -1.0, -1.0, 1.0,

    -1.0, 1.0, -1.0,
    1.0, 1.0, -1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    -1.0, 1.0, 1.0,
    -1.0, 1.0, -1.0,

    -1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    1.0, -1.0, 1.0,
)

SKYBOX_VERTEX_SHADER = """#version 330 core
layout (location = 0) in vec3 aPos;
out vec3 TexCoords;

uniform mat4 view;
uniform mat4 projection;

void main() {
    TexCoords = aPos;
    vec4 clip = projection * view * vec4(aPos, 1.0);
    gl_Position = clip.xyww;
}
"""

SKYBOX_FRAGMENT_SHADER = """#version 330 core
in vec3 TexCoords;
out vec4 FragColor;
uniform samplerCube skybox;

void main() {
    FragColor = texture(skybox, TexCoords);
}
"""


def face_paths(asset_dir: AssetDir = DEFAULT_ASSET_DIR) -> List[Path]:
    """Cube-map face images in the order +X, -X, +Y, -Y, +Z, -Z."""
    return [Path(asset_dir) / "skybox" / f"{face}.bmp" for face in SKYBOX_FACES]


def _uniform(matrix: np.ndarray) -> tuple:
    return tuple(float(v) for v in np.asarray(matrix, dtype=float).flatten(order="F"))


def _load_cubemap(paths: Sequence[Path]) -> int:
    from pyglet import gl, image
    from pyglet.image.codecs import ImageDecodeException

    names = (gl.GLuint * 1)()
    gl.glGenTextures(1, names)
    texture_id = int(names[0])
    gl.glBindTexture(gl.GL_TEXTURE_CUBE_MAP, texture_id)
    gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)

    for index, path in enumerate(paths):
        try:
            picture = image.load(str(path)).get_image_data()
        except (OSError, ImageDecodeException):
            continue
        # Negative pitch yields rows top-down: cube faces are not flipped.
        pixels = picture.get_data("RGB", -picture.width * 3)
        gl.glTexImage2D(
            gl.GL_TEXTURE_CUBE_MAP_POSITIVE_X + index, 0, gl.GL_RGB,
            picture.width, picture.height, 0, gl.GL_RGB, gl.GL_UNSIGNED_BYTE, pixels,
        )

    gl.glTexParameteri(gl.GL_TEXTURE_CUBE_MAP, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(gl.GL_TEXTURE_CUBE_MAP, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(gl.GL_TEXTURE_CUBE_MAP, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(gl.GL_TEXTURE_CUBE_MAP, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(gl.GL_TEXTURE_CUBE_MAP, gl.GL_TEXTURE_WRAP_R, gl.GL_CLAMP_TO_EDGE)
    return texture_id


class Skybox:
    """Sky cube with its own shader, geometry and cube-map texture.

    Needs a current OpenGL context.
    """

    def __init__(self, asset_dir: AssetDir = DEFAULT_ASSET_DIR) -> None:
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        self.faces = face_paths(asset_dir)
        self.program = ShaderProgram(
            Shader(SKYBOX_VERTEX_SHADER, "vertex"),
            Shader(SKYBOX_FRAGMENT_SHADER, "fragment"),
        )
        self.program.use()
        self.program["skybox"] = 0
        self._vertices = self.program.vertex_list(
            len(SKYBOX_VERTICES) // 3, gl.GL_TRIANGLES, aPos=("f", SKYBOX_VERTICES)
        )
        self.texture_id = _load_cubemap(self.faces)

    def draw(self, view: np.ndarray, projection: np.ndarray) -> None:
        """Draw the sky; only the rotation of ``view`` is used."""
        from pyglet import gl

        gl.glDepthFunc(gl.GL_LEQUAL)
        self.program.use()
        self.program["view"] = _uniform(strip_translation(view))
        self.program["projection"] = _uniform(projection)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_CUBE_MAP, self.texture_id)
        self._vertices.draw(gl.GL_TRIANGLES)
        gl.glDepthFunc(gl.GL_LESS)

    def delete(self) -> None:
        """Release the geometry, texture and shader."""
        from pyglet import gl

        self._vertices.delete()
        gl.glDeleteTextures(1, (gl.GLuint * 1)(self.texture_id))
        self.program.delete()