import numpy as np
import pytest

from glscenes.model import Model, Vertex
from glscenes.objfile import ObjError, parse_obj

QUAD = """
v 0 0 0
v 2 0 0
v 2 2 0
v 0 2 0
f 1 2 3 4
"""

TRIANGLE = """
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
"""


def _model(text, standardize=True):
    model = Model()
    model.load(parse_obj(text), standardize)
    return model


def test_quad_shares_vertices():
    model = _model(QUAD)
    assert len(model.vertices) == 4
    assert len(model.indices) == 6
    assert model.num_triangles() == 2


def test_index_count():
    model = _model(QUAD)
    assert model.index_count(-1) == len(model.indices)
    assert model.index_count(1) == 3
    assert model.index_count(0) == 0


def test_standardize_centres_and_scales():
    model = _model(QUAD)
    upper = model.positions.max(axis=0)
    lower = model.positions.min(axis=0)
    np.testing.assert_allclose((upper + lower) / 2, 0.0, atol=1e-6)
    assert np.linalg.norm(upper - lower) == pytest.approx(2.0, rel=1e-6)


def test_without_standardize_positions_kept():
    model = _model(QUAD, standardize=False)
    np.testing.assert_allclose(model.positions[1], [2.0, 0.0, 0.0])


def test_computed_normal_of_counter_clockwise_triangle():
    model = _model(TRIANGLE, standardize=False)
    assert model.has_normals
    for normal in model.normals:
        np.testing.assert_allclose(normal, [0.0, 0.0, 1.0], atol=1e-6)


def test_computed_normals_are_unit_length():
    model = _model(QUAD)
    np.testing.assert_allclose(np.linalg.norm(model.normals, axis=1), 1.0, rtol=1e-6)


def test_file_normals_kept_and_split_vertices():
    text = TRIANGLE.replace("f 1 2 3", "vn 1 0 0\nvn 0 1 0\nf 1//1 2//1 3//1\nf 1//2 2//2 3//2")
    model = _model(text, standardize=False)
    assert model.has_normals
    assert len(model.vertices) == 6
    assert model.vertices[0] == Vertex((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0))


def test_tex_coords_mark_uv_mapped():
    text = TRIANGLE.replace("f 1 2 3", "vt 0.5 0.25\nf 1/1 2/1 3/1")
    model = _model(text, standardize=False)
    assert model.is_uv_mapped
    np.testing.assert_allclose(model.tex_coords[0], [0.5, 0.25])


def test_no_tex_coords_not_uv_mapped():
    assert not _model(TRIANGLE).is_uv_mapped


def test_default_material():
    model = _model(TRIANGLE)
    assert model.ka == pytest.approx((0.1, 0.1, 0.1, 1.0))
    assert model.kd == pytest.approx((0.7, 0.7, 0.7, 1.0))
    assert model.ks == pytest.approx((1.0, 1.0, 1.0, 1.0))
    assert model.shininess == 25.0


def test_load_from_file_uses_first_material(tmp_path):
    (tmp_path / "tex.png").write_bytes(b"\x89PNG")
    (tmp_path / "scene.mtl").write_text(
        "newmtl wood\nKa 0.2 0.3 0.4\nKd 0.5 0.6 0.7\nKs 0.8 0.9 1.0\nNs 40\nmap_Kd tex.png\n"
        "newmtl other\nKa 1 1 1\n"
    )
    (tmp_path / "scene.obj").write_text("mtllib scene.mtl\nusemtl wood\n" + TRIANGLE)
    model = Model()
    model.load_from_file(tmp_path / "scene.obj")
    assert model.ka == pytest.approx((0.2, 0.3, 0.4, 1.0))
    assert model.kd == pytest.approx((0.5, 0.6, 0.7, 1.0))
    assert model.ks == pytest.approx((0.8, 0.9, 1.0, 1.0))
    assert model.shininess == 40.0
    assert model.diffuse_texture == tmp_path / "tex.png"


def test_missing_texture_ignored(tmp_path):
    model = Model()
    model.load_diffuse_texture(tmp_path / "absent.jpg")
    assert model.diffuse_texture is None


def test_existing_texture_recorded(tmp_path):
    image = tmp_path / "map.jpg"
    image.write_bytes(b"data")
    model = Model()
    model.load_diffuse_texture(image)
    assert model.diffuse_texture == image


def test_load_from_missing_file_raises(tmp_path):
    with pytest.raises(ObjError, match="Failed to load model"):
        Model().load_from_file(tmp_path / "nothing.obj")


def test_reload_replaces_mesh():
    model = _model(QUAD)
    model.load(parse_obj(TRIANGLE))
    assert model.num_triangles() == 1
    assert len(model.vertices) == 3