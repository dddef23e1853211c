"""4x4 matrix helpers for a right-handed, OpenGL-style clip space.

Matrices act on column vectors: ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _vec3(values: Sequence[float]) -> np.ndarray:
    vector = np.asarray(values, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected three components, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def perspective(fovy_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection mapping depth [near, far] to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(math.radians(fovy_degrees) / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = f / aspect
    matrix[1, 1] = f
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """View matrix placing ``eye`` at the origin, looking toward ``center``."""
    eye_v = _vec3(eye)
    forward = _normalize(_vec3(center) - eye_v)
    side = _normalize(np.cross(forward, _vec3(up)))
    true_up = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = true_up
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye_v))
    matrix[1, 3] = -float(np.dot(true_up, eye_v))
    matrix[2, 3] = float(np.dot(forward, eye_v))
    return matrix


def translate(offset: Sequence[float]) -> np.ndarray:
    """Matrix moving points by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """Two-dimensional orthographic projection."""
    if left == right or bottom == top:
        raise ValueError("orthographic bounds must enclose a non-empty area")
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -1.0
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    return matrix


def strip_translation(matrix: np.ndarray) -> np.ndarray:
    """Keep only the rotational 3x3 part of a 4x4 matrix."""
    source = np.asarray(matrix, dtype=float)
    if source.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {source.shape}")
    result = np.identity(4)
    result[:3, :3] = source[:3, :3]
    return result