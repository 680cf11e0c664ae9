"""Randomly placed regular polygons with radial colour gradients."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

import numpy as np

__all__ = ["PolygonSpec", "regular_polygon", "random_polygon", "DEFAULT_DELAY_MS"]

DEFAULT_DELAY_MS = 200
MIN_SIDES = 3
MAX_SIDES = 20


@dataclass(eq=False)
class PolygonSpec:
    """A polygon ready to draw as a triangle fan, with its placement."""

    sides: int
    positions: np.ndarray
    colors: np.ndarray
    translation: tuple[float, float]
    scale: float

    @property
    def vertex_count(self) -> int:
        """Number of fan vertices: centre, border, and the closing vertex."""
        return self.sides + 2


def regular_polygon(sides: int, center_color, border_color) -> tuple[np.ndarray, np.ndarray]:
    """Return fan positions ``(n, 2)`` and colours ``(n, 3)`` of a unit polygon.

    The first vertex is the centre; the first border vertex is repeated at the
    end to close the fan. Fewer than three sides are raised to three.
    """
    sides = max(MIN_SIDES, sides)
    step = math.tau / sides
    border = [(math.cos(i * step), math.sin(i * step)) for i in range(sides)]
    positions = [(0.0, 0.0), *border, border[0]]
    colors = [tuple(center_color)] + [tuple(border_color)] * (sides + 1)
    return (
        np.array(positions, dtype=np.float32),
        np.array(colors, dtype=np.float32).reshape(-1, 3),
    )


def random_polygon(rng: random.Random | None = None) -> PolygonSpec:
    """Return a polygon of 3 to 20 sides with random colours, position and size."""
    rng = rng or random.Random()
    sides = rng.randint(MIN_SIDES, MAX_SIDES)
    center_color = tuple(rng.uniform(0.0, 1.0) for _ in range(3))
    border_color = tuple(rng.uniform(0.0, 1.0) for _ in range(3))
    positions, colors = regular_polygon(sides, center_color, border_color)
    translation = (rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
    scale = rng.uniform(0.01, 0.25)
    return PolygonSpec(sides, positions, colors, translation, scale)