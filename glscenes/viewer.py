"""View state of the interactive model viewer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .transforms import inverse_transpose, look_at, ortho, perspective

__all__ = [
    "ViewProjection",
    "FrontFace",
    "ViewerState",
    "normal_matrix",
    "MIN_ZOOM",
    "MAX_ZOOM",
]

MIN_ZOOM = -1.5
MAX_ZOOM = 1.0
_ZOOM_STEP = 1.0 / 5.0


class ViewProjection(Enum):
    """Projection modes offered by the viewer."""

    PERSPECTIVE = "Perspective"
    ORTHOGRAPHIC = "Orthographic"


class FrontFace(Enum):
    """Winding order that marks a triangle as front facing."""

    CCW = "CCW"
    CW = "CW"


@dataclass
class ViewerState:
    """Zoom, projection, culling and shader choices of the viewer."""

    zoom: float = 0.0
    projection: ViewProjection = ViewProjection.PERSPECTIVE
    front_face: FrontFace = FrontFace.CCW
    face_culling: bool = False
    shader_names: tuple[str, ...] = field(default=("normal", "depth"))
    current_shader: int = -1
    triangles_to_draw: int = 0

    def handle_wheel(self, y: int) -> None:
        """Zoom out for positive wheel movement, in otherwise, within limits."""
        self.zoom += _ZOOM_STEP if y > 0 else -_ZOOM_STEP
        self.zoom = min(max(self.zoom, MIN_ZOOM), MAX_ZOOM)

    def view_matrix(self) -> np.ndarray:
        """Return the view from the positive z axis towards the origin."""
        return look_at((0.0, 0.0, 2.0 + self.zoom), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))

    def projection_matrix(self, width: int, height: int) -> np.ndarray:
        """Return the projection for a viewport of the given size."""
        if self.projection is ViewProjection.PERSPECTIVE:
            aspect = float(width) / float(height)
            return perspective(math.radians(45.0), aspect, 0.1, 5.0)
        return ortho(-1.0, 1.0, -1.0, 1.0, 0.1, 5.0)

    def select_shader(self, index: int) -> bool:
        """Make shader ``index`` current; return whether the choice changed."""
        if not 0 <= index < len(self.shader_names):
            raise IndexError(f"shader index {index} out of range")
        if index == self.current_shader:
            return False
        self.current_shader = index
        return True


def normal_matrix(model_matrix, view_matrix) -> np.ndarray:
    """Return the 3x3 matrix that carries normals into camera space."""
    model_view = np.asarray(view_matrix, dtype=float) @ np.asarray(model_matrix, dtype=float)
    return inverse_transpose(model_view[:3, :3])