"""Matrix and vector helpers following OpenGL conventions.

Matrices are 4x4 numpy arrays used with column vectors (``m @ v``).
Projection matrices map to a right-handed clip space with depth in [-1, 1].
"""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "perspective",
    "ortho",
    "look_at",
    "translate",
    "rotate",
    "scale",
    "normalize",
    "inverse_transpose",
    "wrap_angle",
]


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection; ``fovy`` is in radians."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Return an orthographic projection."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic volume must have non-zero extent")
    result = np.identity(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def look_at(eye, center, up) -> np.ndarray:
    """Return a view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    result = np.identity(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(upward, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed (on the right) by a translation."""
    transform = np.identity(4)
    transform[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ transform


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    a = normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    transform = np.identity(4)
    transform[:3, :3] = c * np.identity(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return np.asarray(matrix, dtype=float) @ transform


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a scale; ``factors`` may be a scalar or a 3-vector."""
    values = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    transform = np.identity(4)
    transform[0, 0], transform[1, 1], transform[2, 2] = values
    return np.asarray(matrix, dtype=float) @ transform


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length (NaN for a zero vector)."""
    v = np.asarray(vector, dtype=float)
    length = np.linalg.norm(v)
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / length


def inverse_transpose(matrix) -> np.ndarray:
    """Return the transpose of the inverse of a square matrix."""
    return np.linalg.inv(np.asarray(matrix, dtype=float)).T


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into the range [0, 2*pi)."""
    return abs(angle % math.tau)