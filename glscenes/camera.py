"""A look-at camera that can dolly, truck and pan."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .transforms import look_at, normalize, perspective, rotate, translate

__all__ = ["Camera"]


def _vector(*values: float):
    return lambda: np.array(values, dtype=float)


@dataclass(eq=False)
class Camera:
    """Camera position, look-at point and up direction with derived matrices."""

    eye: np.ndarray = field(default_factory=_vector(0.0, 0.5, 2.5))
    at: np.ndarray = field(default_factory=_vector(0.0, 0.5, 0.0))
    up: np.ndarray = field(default_factory=_vector(0.0, 1.0, 0.0))
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    proj_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self) -> None:
        self.eye = np.asarray(self.eye, dtype=float).reshape(3).copy()
        self.at = np.asarray(self.at, dtype=float).reshape(3).copy()
        self.up = np.asarray(self.up, dtype=float).reshape(3).copy()

    def compute_view_matrix(self) -> None:
        """Recompute the world-to-camera matrix."""
        self.view_matrix = look_at(self.eye, self.at, self.up)

    def compute_projection_matrix(self, width: int, height: int) -> None:
        """Recompute the projection for a viewport of the given size."""
        aspect = float(width) / float(height)
        self.proj_matrix = perspective(math.radians(70.0), aspect, 0.1, 5.0)

    def _forward(self) -> np.ndarray:
        return normalize(self.at - self.eye)

    def dolly(self, speed: float) -> None:
        """Move forward (positive speed) or backward along the view direction."""
        step = self._forward() * speed
        self.eye = self.eye + step
        self.at = self.at + step
        self.compute_view_matrix()

    def truck(self, speed: float) -> None:
        """Move right (positive speed) or left, keeping the view direction."""
        left = np.cross(self.up, self._forward())
        step = left * speed
        self.at = self.at - step
        self.eye = self.eye - step
        self.compute_view_matrix()

    def pan(self, speed: float) -> None:
        """Turn the camera about its up axis; positive speed turns right."""
        transform = translate(np.identity(4), self.eye)
        transform = rotate(transform, -speed, self.up)
        transform = translate(transform, -self.eye)
        self.at = (transform @ np.append(self.at, 1.0))[:3]
        self.compute_view_matrix()