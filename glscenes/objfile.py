"""Reading Wavefront OBJ meshes and their MTL material libraries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

__all__ = [
    "ObjError",
    "ObjIndex",
    "Material",
    "Shape",
    "ObjData",
    "parse_mtl",
    "parse_obj",
    "load_obj",
    "dedupe_positions",
]


class ObjError(Exception):
    """Raised when an OBJ file cannot be read or is malformed."""


@dataclass(frozen=True)
class ObjIndex:
    """Zero-based attribute indices of one face corner; -1 means absent."""

    vertex_index: int
    normal_index: int = -1
    texcoord_index: int = -1


@dataclass
class Material:
    """The material properties the scenes use."""

    name: str
    ambient: tuple[float, float, float] = (0.0, 0.0, 0.0)
    diffuse: tuple[float, float, float] = (0.0, 0.0, 0.0)
    specular: tuple[float, float, float] = (0.0, 0.0, 0.0)
    shininess: float = 1.0
    diffuse_texname: str = ""


@dataclass
class Shape:
    """A named group of triangulated faces."""

    name: str = ""
    indices: list[ObjIndex] = field(default_factory=list)
    num_face_vertices: list[int] = field(default_factory=list)
    material_ids: list[int] = field(default_factory=list)


@dataclass
class ObjData:
    """Flat attribute arrays, shapes and materials of a parsed OBJ file."""

    vertices: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    texcoords: list[float] = field(default_factory=list)
    shapes: list[Shape] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _floats(tokens: list[str], count: int, lineno: int) -> tuple[float, ...]:
    try:
        values = [float(token) for token in tokens[:count]]
    except ValueError as err:
        raise ObjError(f"line {lineno}: invalid number ({err})") from None
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def _content_lines(text: str):
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        keyword, _, rest = line.partition(" ")
        yield lineno, keyword, rest.strip()


def parse_mtl(text: str) -> list[Material]:
    """Parse the text of an MTL file into materials, in file order."""
    materials: list[Material] = []
    current: Material | None = None
    for lineno, keyword, rest in _content_lines(text):
        tokens = rest.split()
        if keyword == "newmtl":
            current = Material(name=rest)
            materials.append(current)
            continue
        if current is None:
            continue
        if keyword == "Ka":
            current.ambient = _floats(tokens, 3, lineno)
        elif keyword == "Kd":
            current.diffuse = _floats(tokens, 3, lineno)
        elif keyword == "Ks":
            current.specular = _floats(tokens, 3, lineno)
        elif keyword == "Ns":
            (current.shininess,) = _floats(tokens, 1, lineno)
        elif keyword == "map_Kd" and tokens:
            current.diffuse_texname = tokens[-1]
    return materials


def _resolve(raw: str, count: int, what: str, lineno: int) -> int:
    try:
        number = int(raw)
    except ValueError:
        raise ObjError(f"line {lineno}: invalid {what} index {raw!r}") from None
    if number == 0:
        raise ObjError(f"line {lineno}: {what} index must not be zero")
    index = number - 1 if number > 0 else count + number
    if not 0 <= index < count:
        raise ObjError(f"line {lineno}: {what} index {number} out of range")
    return index


def _face_corner(token: str, data: ObjData, lineno: int) -> ObjIndex:
    parts = token.split("/")
    if len(parts) > 3:
        raise ObjError(f"line {lineno}: invalid face element {token!r}")
    vertex = _resolve(parts[0], len(data.vertices) // 3, "vertex", lineno)
    texcoord = normal = -1
    if len(parts) > 1 and parts[1]:
        texcoord = _resolve(parts[1], len(data.texcoords) // 2, "texcoord", lineno)
    if len(parts) > 2 and parts[2]:
        normal = _resolve(parts[2], len(data.normals) // 3, "normal", lineno)
    return ObjIndex(vertex, normal, texcoord)


def _load_libraries(names: list[str], search_path, data: ObjData) -> None:
    for name in names:
        if search_path is None:
            data.warnings.append(f"Material file [ {name} ] not loaded: no search path")
            continue
        path = Path(search_path) / name
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            data.warnings.append(
                f"Material file [ {name} ] not found in a path : {search_path}"
            )
            continue
        data.materials.extend(parse_mtl(text))


def parse_obj(text: str, mtl_search_path=None) -> ObjData:
    """Parse OBJ text, triangulating polygons as fans.

    Material libraries named by ``mtllib`` are read from ``mtl_search_path``.
    """
    data = ObjData()
    shape = Shape()
    material_id = -1

    for lineno, keyword, rest in _content_lines(text):
        tokens = rest.split()
        if keyword == "v":
            data.vertices.extend(_floats(tokens, 3, lineno))
        elif keyword == "vn":
            data.normals.extend(_floats(tokens, 3, lineno))
        elif keyword == "vt":
            data.texcoords.extend(_floats(tokens, 2, lineno))
        elif keyword == "f":
            corners = [_face_corner(token, data, lineno) for token in tokens]
            if len(corners) < 3:
                data.warnings.append(f"Degenerated face found at line {lineno}")
                continue
            first = corners[0]
            for second, third in zip(corners[1:], corners[2:]):
                shape.indices.extend((first, second, third))
                shape.num_face_vertices.append(3)
                shape.material_ids.append(material_id)
        elif keyword in ("o", "g"):
            if shape.indices:
                data.shapes.append(shape)
                shape = Shape(name=rest)
            else:
                shape.name = rest
        elif keyword == "mtllib":
            _load_libraries(tokens, mtl_search_path, data)
        elif keyword == "usemtl":
            names = [material.name for material in data.materials]
            if rest in names:
                material_id = names.index(rest)
            else:
                material_id = -1
                data.warnings.append(f"material [ '{rest}' ] not found in .mtl")

    if shape.indices:
        data.shapes.append(shape)
    return data


def load_obj(path) -> ObjData:
    """Read an OBJ file; material libraries are looked up beside it."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        raise ObjError(
            f"Failed to load model {path} (Cannot open file [{path}])"
        ) from None
    try:
        return parse_obj(text, path.parent)
    except ObjError as err:
        raise ObjError(f"Failed to load model {path} ({err})") from None


def dedupe_positions(data: ObjData) -> tuple[np.ndarray, np.ndarray]:
    """Merge corners with equal positions.

    Returns an ``(n, 3)`` float32 array of unique positions in order of first
    use and the uint32 index of each face corner into it.
    """
    lookup: dict[tuple[float, float, float], int] = {}
    positions: list[tuple[float, float, float]] = []
    indices: list[int] = []
    for shape in data.shapes:
        for corner in shape.indices:
            start = 3 * corner.vertex_index
            position = tuple(data.vertices[start : start + 3])
            if position not in lookup:
                lookup[position] = len(positions)
                positions.append(position)
            indices.append(lookup[position])
    return (
        np.array(positions, dtype=np.float32).reshape(-1, 3),
        np.array(indices, dtype=np.uint32),
    )