"""Indexed triangle meshes with normals, texture coordinates and material."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .objfile import ObjData, load_obj

__all__ = ["Vertex", "Model"]

_DEFAULT_KA = (0.1, 0.1, 0.1, 1.0)
_DEFAULT_KD = (0.7, 0.7, 0.7, 1.0)
_DEFAULT_KS = (1.0, 1.0, 1.0, 1.0)
_DEFAULT_SHININESS = 25.0


@dataclass(frozen=True)
class Vertex:
    """One unique mesh vertex; equal vertices are merged when loading."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tex_coord: tuple[float, float] = (0.0, 0.0)


def _rgba(rgb) -> tuple[float, float, float, float]:
    r, g, b = (float(value) for value in rgb)
    return (r, g, b, 1.0)


class Model:
    """A mesh ready for indexed triangle drawing.

    Positions, normals and texture coordinates are float32 arrays of shape
    ``(n, 3)``, ``(n, 3)`` and ``(n, 2)``; ``indices`` is a uint32 array with
    three entries per triangle.
    """

    def __init__(self) -> None:
        self.positions = np.zeros((0, 3), dtype=np.float32)
        self.normals = np.zeros((0, 3), dtype=np.float32)
        self.tex_coords = np.zeros((0, 2), dtype=np.float32)
        self.indices = np.zeros(0, dtype=np.uint32)
        self.ka = _DEFAULT_KA
        self.kd = _DEFAULT_KD
        self.ks = _DEFAULT_KS
        self.shininess = _DEFAULT_SHININESS
        self.diffuse_texture: Path | None = None
        self.has_normals = False
        self.has_tex_coords = False

    @property
    def is_uv_mapped(self) -> bool:
        return self.has_tex_coords

    @property
    def vertices(self) -> list[Vertex]:
        """Return the unique vertices in index order."""
        return [
            Vertex(tuple(p), tuple(n), tuple(t))
            for p, n, t in zip(
                self.positions.tolist(), self.normals.tolist(), self.tex_coords.tolist()
            )
        ]

    def load(self, data: ObjData, standardize: bool = True) -> None:
        """Build the mesh from parsed OBJ data."""
        self._load(data, standardize, None)

    def load_from_file(self, path, standardize: bool = True) -> None:
        """Read an OBJ file and build the mesh; raises ``ObjError`` on failure."""
        path = Path(path)
        data = load_obj(path)
        if data.warnings:
            print(f"Warning: {chr(10).join(data.warnings)}")
        self._load(data, standardize, path.parent)

    def load_diffuse_texture(self, path) -> None:
        """Use the image at ``path`` as diffuse texture; missing files are ignored."""
        path = Path(path)
        if not path.exists():
            return
        self.diffuse_texture = path

    def _load(self, data: ObjData, standardize: bool, base_path: Path | None) -> None:
        positions = np.asarray(data.vertices, dtype=np.float32).reshape(-1, 3)
        normals = np.asarray(data.normals, dtype=np.float32).reshape(-1, 3)
        tex_coords = np.asarray(data.texcoords, dtype=np.float32).reshape(-1, 2)

        self.has_normals = False
        self.has_tex_coords = False

        lookup: dict[Vertex, int] = {}
        unique: list[Vertex] = []
        indices: list[int] = []
        for shape in data.shapes:
            for corner in shape.indices:
                normal = (0.0, 0.0, 0.0)
                if corner.normal_index >= 0:
                    self.has_normals = True
                    normal = tuple(normals[corner.normal_index].tolist())
                tex_coord = (0.0, 0.0)
                if corner.texcoord_index >= 0:
                    self.has_tex_coords = True
                    tex_coord = tuple(tex_coords[corner.texcoord_index].tolist())
                vertex = Vertex(
                    tuple(positions[corner.vertex_index].tolist()), normal, tex_coord
                )
                if vertex not in lookup:
                    lookup[vertex] = len(unique)
                    unique.append(vertex)
                indices.append(lookup[vertex])

        self.positions = np.array([v.position for v in unique], dtype=np.float32).reshape(-1, 3)
        self.normals = np.array([v.normal for v in unique], dtype=np.float32).reshape(-1, 3)
        self.tex_coords = np.array([v.tex_coord for v in unique], dtype=np.float32).reshape(-1, 2)
        self.indices = np.array(indices, dtype=np.uint32)

        if data.materials:
            material = data.materials[0]
            self.ka = _rgba(material.ambient)
            self.kd = _rgba(material.diffuse)
            self.ks = _rgba(material.specular)
            self.shininess = float(material.shininess)
            if material.diffuse_texname:
                texture = (
                    base_path / material.diffuse_texname
                    if base_path is not None
                    else Path(material.diffuse_texname)
                )
                self.load_diffuse_texture(texture)
        else:
            self.ka = _DEFAULT_KA
            self.kd = _DEFAULT_KD
            self.ks = _DEFAULT_KS
            self.shininess = _DEFAULT_SHININESS

        if standardize:
            self.standardize()
        if not self.has_normals:
            self.compute_normals()

    def standardize(self) -> None:
        """Centre the mesh at the origin and scale its bounding-box diagonal to 2."""
        if len(self.positions) == 0:
            return
        upper = self.positions.max(axis=0)
        lower = self.positions.min(axis=0)
        center = (lower + upper) / np.float32(2.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            scaling = np.float32(2.0) / np.float32(np.linalg.norm(upper - lower))
            self.positions = ((self.positions - center) * scaling).astype(np.float32)

    def compute_normals(self) -> None:
        """Replace vertex normals with the normalised sum of adjacent face normals."""
        normals = np.zeros_like(self.positions)
        faces = self.indices[: len(self.indices) // 3 * 3].reshape(-1, 3).astype(np.intp)
        a = self.positions[faces[:, 0]]
        b = self.positions[faces[:, 1]]
        c = self.positions[faces[:, 2]]
        face_normals = np.cross(b - a, c - b).astype(np.float32)
        for column in range(3):
            np.add.at(normals, faces[:, column], face_normals)
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        with np.errstate(divide="ignore", invalid="ignore"):
            self.normals = (normals / lengths).astype(np.float32)
        self.has_normals = True

    def num_triangles(self) -> int:
        return len(self.indices) // 3

    def index_count(self, num_triangles: int = -1) -> int:
        """Return how many indices to draw; a negative count means all."""
        return len(self.indices) if num_triangles < 0 else num_triangles * 3