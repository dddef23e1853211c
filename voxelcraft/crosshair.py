"""A plus-shaped marker at the centre of the screen."""

from __future__ import annotations

import numpy as np

from .transforms import ortho

CROSSHAIR_VERTICES = (
    -0.01, 0.0,
    0.01, 0.0,
    0.0, -0.01,
    0.0, 0.01,
)

CROSSHAIR_VERTEX_SHADER = """#version 330 core
layout (location = 0) in vec2 aPos;
uniform mat4 projection;
void main() {
    gl_Position = projection * vec4(aPos, 0.0, 1.0);
}
"""

CROSSHAIR_FRAGMENT_SHADER = """#version 330 core
out vec4 FragColor;
void main() {
    FragColor = vec4(1.0);
}
"""


def crosshair_projection() -> np.ndarray:
    """Orthographic projection covering normalised screen coordinates."""
    return ortho(-1.0, 1.0, -1.0, 1.0)


class Crosshair:
    """White crosshair lines; needs a current OpenGL context."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        self.program = ShaderProgram(
            Shader(CROSSHAIR_VERTEX_SHADER, "vertex"),
            Shader(CROSSHAIR_FRAGMENT_SHADER, "fragment"),
        )
        self._vertices = self.program.vertex_list(
            len(CROSSHAIR_VERTICES) // 2, gl.GL_LINES, aPos=("f", CROSSHAIR_VERTICES)
        )

    def draw(self) -> None:
        """Draw the two crosshair lines."""
        from pyglet import gl

        self.program.use()
        matrix = crosshair_projection()
        self.program["projection"] = tuple(float(v) for v in matrix.flatten(order="F"))
        self._vertices.draw(gl.GL_LINES)