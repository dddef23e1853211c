"""First-person camera driven by held controls and mouse motion."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import AbstractSet, Optional, Sequence

import numpy as np

from .transforms import look_at

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

MOUSE_SENSITIVITY = 0.1
ARROW_SENSITIVITY = 1.5

STARTING_CAMERA_POSITION = (0.0, 10.0, 0.0)
MAX_DISTANCE = 500.0

DEFAULT_SPEED = 4.0
PITCH_LIMIT = 89.0


class Movement(Enum):
    """Controls the camera reads while they are held down."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPRINT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()


class Camera:
    """A free-flying camera with yaw and pitch in degrees."""

    def __init__(self, position: Optional[Sequence[float]] = None) -> None:
        start = STARTING_CAMERA_POSITION if position is None else position
        self._position = np.array(start, dtype=float)
        self._front = np.array([0.0, 0.0, -1.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self.speed = DEFAULT_SPEED
        self.yaw = -90.0
        self.pitch = 0.0

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @property
    def up(self) -> np.ndarray:
        return self._up.copy()

    def update(
        self,
        held: AbstractSet[Movement],
        mouse_dx: float,
        mouse_dy: float,
        delta_time: float,
    ) -> None:
        """Move by the held controls and turn by keys and mouse motion."""
        velocity = self.speed * delta_time
        if Movement.SPRINT in held:
            velocity *= 2

        front, up = self._front, self._up
        if Movement.FORWARD in held:
            self._position += front * velocity
        if Movement.BACKWARD in held:
            self._position -= front * velocity
        if Movement.LEFT in held or Movement.RIGHT in held:
            right = np.cross(front, up)
            right /= np.linalg.norm(right)
            if Movement.LEFT in held:
                self._position -= right * velocity
            if Movement.RIGHT in held:
                self._position += right * velocity
        if Movement.UP in held:
            self._position += up * velocity
        if Movement.DOWN in held:
            self._position -= up * velocity

        if Movement.ARROW_UP in held:
            self.pitch -= ARROW_SENSITIVITY
        if Movement.ARROW_LEFT in held:
            self.yaw -= ARROW_SENSITIVITY
        if Movement.ARROW_RIGHT in held:
            self.yaw += ARROW_SENSITIVITY
        if Movement.ARROW_DOWN in held:
            self.pitch += ARROW_SENSITIVITY

        self.yaw += mouse_dx * MOUSE_SENSITIVITY
        self.pitch -= mouse_dy * MOUSE_SENSITIVITY
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))

        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self._front = direction / np.linalg.norm(direction)

    def view_matrix(self) -> np.ndarray:
        """The view matrix looking along the camera's front vector."""
        return look_at(self._position, self._position + self._front, self._up)