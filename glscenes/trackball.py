"""A virtual trackball that turns mouse drags into rotations."""

from __future__ import annotations

import math
import time
from typing import Callable

import numpy as np

from .transforms import normalize, rotate

__all__ = ["TrackBall"]

_EPSILON = float(np.finfo(np.float32).eps)


class _ElapsedTimer:
    def __init__(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        return self._clock() - self._start

    def restart(self) -> float:
        now = self._clock()
        elapsed = now - self._start
        self._start = now
        return elapsed


class TrackBall:
    """Rotation driven by dragging on a hemisphere over the viewport.

    After the mouse is released the last drag keeps turning the model at a
    constant angular velocity.
    """

    max_velocity = math.radians(720.0 / 1000.0)

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.axis = np.ones(3)
        self.velocity = 0.0
        self.tracking = False
        self._rotation = np.identity(4)
        self._last_position = np.zeros(3)
        self._timer = _ElapsedTimer(clock)
        self._viewport_width = 0.0
        self._viewport_height = 0.0

    def mouse_move(self, position) -> None:
        """Rotate by the drag from the last position to ``position``."""
        if not self.tracking:
            return

        msecs = self._timer.restart() * 1000.0

        current = self.project(position)
        if np.all(np.abs(self._last_position - current) < _EPSILON):
            return

        axis = np.cross(self._last_position, current)
        angle = float(np.linalg.norm(axis))
        self.axis = normalize(axis)

        velocity = angle / (msecs + _EPSILON)
        self.velocity = min(max(velocity, 0.0), self.max_velocity)

        self._rotation = rotate(np.identity(4), angle, self.axis) @ self._rotation
        self._last_position = current

    def mouse_press(self, position) -> None:
        """Start tracking a drag at ``position``."""
        self._rotation = self.rotation()
        self.tracking = True
        self._timer.restart()
        self._last_position = self.project(position)
        self.velocity = 0.0

    def mouse_release(self, position) -> None:
        """Finish the drag at ``position``."""
        self.mouse_move(position)
        self.tracking = False

    def resize_viewport(self, width: int, height: int) -> None:
        self._viewport_width = float(width)
        self._viewport_height = float(height)

    def rotation(self) -> np.ndarray:
        """Return the current rotation as a 4x4 matrix."""
        if self.tracking:
            return self._rotation.copy()
        angle = self.velocity * self._timer.elapsed() * 1000.0
        return rotate(np.identity(4), angle, self.axis) @ self._rotation

    def project(self, position) -> np.ndarray:
        """Map window coordinates onto the unit hemisphere facing the viewer."""
        if self._viewport_width == 0 or self._viewport_height == 0:
            raise ValueError("viewport size is not set")
        x, y = (float(value) for value in position)
        v = np.array(
            [
                2.0 * x / self._viewport_width - 1.0,
                1.0 - 2.0 * y / self._viewport_height,
                0.0,
            ]
        )
        squared_length = float(np.dot(v, v))
        if squared_length >= 1.0:
            return normalize(v)
        v[2] = math.sqrt(1.0 - squared_length)
        return v