"""A field of spinning boxes flying towards a camera at the origin."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .transforms import (
    look_at,
    normalize,
    ortho,
    perspective,
    rotate,
    scale,
    translate,
    wrap_angle,
)

__all__ = [
    "Projection",
    "Star",
    "Starfield",
    "projection_matrix",
    "NUM_STARS",
    "DEFAULT_FOV",
    "MIN_FOV",
    "MAX_FOV",
]

NUM_STARS = 500
DEFAULT_FOV = 30.0
MIN_FOV = 5.0
MAX_FOV = 179.0

_STAR_SCALE = 0.2
_SPEED = 10.0
_FAR_Z = -100.0
_RESPAWN_Z = 0.1
_XY_RANGE = 20.0
_NEAR_PLANE = 0.01
_FAR_PLANE = 100.0


class Projection(Enum):
    """Projection modes offered by the scene."""

    PERSPECTIVE = "Perspective"
    ORTHOGRAPHIC = "Orthographic"


@dataclass(eq=False)
class Star:
    """Position of one star and the axis it spins about."""

    position: np.ndarray
    rotation: np.ndarray


class Starfield:
    """Stars that move 10 units per second towards the camera and respawn far away."""

    def __init__(self, rng: random.Random | None = None, num_stars: int = NUM_STARS) -> None:
        if num_stars < 0:
            raise ValueError("number of stars must not be negative")
        self.rng = rng or random.Random()
        self.angle = 0.0
        self.view_matrix = look_at((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
        self.stars: list[Star] = []
        for _ in range(num_stars):
            star = Star(np.zeros(3), np.array([1.0, 0.0, 0.0]))
            self.randomize_star(star)
            self.stars.append(star)

    def randomize_star(self, star: Star) -> None:
        """Give ``star`` a random position and a random unit rotation axis.

        x and y fall in [-20, 20], z in [-100, 0].
        """
        uniform = self.rng.uniform
        star.position = np.array(
            [
                uniform(-_XY_RANGE, _XY_RANGE),
                uniform(-_XY_RANGE, _XY_RANGE),
                uniform(_FAR_Z, 0.0),
            ]
        )
        star.rotation = normalize(
            np.array([uniform(-1.0, 1.0), uniform(-1.0, 1.0), uniform(-1.0, 1.0)])
        )

    def update(self, delta_time: float) -> None:
        """Advance the spin angle and the stars by ``delta_time`` seconds."""
        self.angle = wrap_angle(self.angle + math.radians(90.0) * delta_time)
        for star in self.stars:
            star.position[2] += delta_time * _SPEED
            if star.position[2] > _RESPAWN_Z:
                self.randomize_star(star)
                star.position[2] = _FAR_Z

    def model_matrices(self) -> list[np.ndarray]:
        """Return the model matrix of every star, in order."""
        matrices = []
        for star in self.stars:
            matrix = translate(np.identity(4), star.position)
            matrix = scale(matrix, _STAR_SCALE)
            matrix = rotate(matrix, self.angle, star.rotation)
            matrices.append(matrix)
        return matrices


def projection_matrix(mode: Projection, aspect: float, fov: float = DEFAULT_FOV) -> np.ndarray:
    """Return the projection for ``mode``; ``fov`` is in degrees and only used in perspective."""
    mode = Projection(mode)
    if mode is Projection.PERSPECTIVE:
        return perspective(math.radians(fov), aspect, _NEAR_PLANE, _FAR_PLANE)
    return ortho(
        -_XY_RANGE * aspect,
        _XY_RANGE * aspect,
        -_XY_RANGE,
        _XY_RANGE,
        _NEAR_PLANE,
        _FAR_PLANE,
    )