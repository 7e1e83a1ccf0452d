"""
Tests for OBJ loading.
"""

import logging

import numpy as np
import pytest

from read_trimesh import EmptyMeshError, MeshFormat, load_mesh

from samples import (
    SQUARE_FACES,
    SQUARE_VERTICES,
    TRIANGLE_FACES,
    TRIANGLE_VERTICES,
    write_obj,
)


def test_single_triangle(tmp_path):
    path = write_obj(tmp_path / "object.obj", TRIANGLE_VERTICES, [("object", TRIANGLE_FACES)])
    mesh = load_mesh(path)

    assert mesh.mesh_format is MeshFormat.OBJ
    np.testing.assert_allclose(mesh.vertices, TRIANGLE_VERTICES)
    np.testing.assert_array_equal(mesh.faces, TRIANGLE_FACES)


def test_groups_share_one_index_space(tmp_path):
    path = write_obj(
        tmp_path / "groups.obj",
        SQUARE_VERTICES,
        [("first", SQUARE_FACES[:1]), ("second", SQUARE_FACES[1:])],
    )
    mesh = load_mesh(path)

    assert mesh.num_vertices == 4
    np.testing.assert_array_equal(mesh.faces, SQUARE_FACES)


def test_quads_are_skipped_with_warning(tmp_path, caplog):
    vertices = np.vstack([SQUARE_VERTICES, SQUARE_VERTICES + [0.0, 0.0, 1.0]])
    path = write_obj(
        tmp_path / "mixed.obj",
        vertices,
        [("tris", [[0, 1, 2]]), ("quads", [[4, 5, 6, 7]]), ("more_tris", [[0, 2, 3]])],
    )
    with caplog.at_level(logging.WARNING, logger="read_trimesh"):
        mesh = load_mesh(path)

    np.testing.assert_array_equal(mesh.faces, [[0, 1, 2], [0, 2, 3]])
    assert "Skipped 1 non-triangular faces" in caplog.text


def test_pentagon_is_skipped(tmp_path):
    vertices = np.array([[0, 0, 0], [1, 0, 0], [1.5, 1, 0], [0.5, 2, 0], [-0.5, 1, 0]], dtype=float)
    path = write_obj(tmp_path / "pentagon.obj", vertices, [("a", [[0, 1, 2]]), ("b", [[0, 1, 2, 3, 4]])])
    mesh = load_mesh(path)
    np.testing.assert_array_equal(mesh.faces, [[0, 1, 2]])


def test_only_quads_is_empty_result(tmp_path):
    path = write_obj(tmp_path / "quad.obj", SQUARE_VERTICES, [("quad", [[0, 1, 2, 3]])])
    with pytest.raises(EmptyMeshError):
        load_mesh(path)


def test_scale_applies_to_obj(tmp_path):
    path = write_obj(tmp_path / "object.obj", TRIANGLE_VERTICES, [("object", TRIANGLE_FACES)])
    mesh = load_mesh(path, scale=0.001)
    np.testing.assert_allclose(mesh.vertices, TRIANGLE_VERTICES * 0.001)


def test_texture_and_normal_references(tmp_path):
    path = tmp_path / "textured.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\n"
        "vt 0 0\nvt 1 0\nvt 1 1\nvt 0 1\n"
        "vn 0 0 1\n"
        "f 1/1/1 2/2/1 3/3/1\n"
        "f 1/1/1 3/3/1 4/4/1\n"
    )
    mesh = load_mesh(path)

    np.testing.assert_allclose(mesh.vertices, SQUARE_VERTICES)
    np.testing.assert_array_equal(mesh.faces, SQUARE_FACES)


@pytest.mark.parametrize("face", ["f 1//1 2//1 3//1", "f 1/1 2/1 3/1"])
def test_shared_normal_or_texture_coordinate(tmp_path, face):
    path = tmp_path / "shared.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvn 0 0 1\n" + face + "\n")
    mesh = load_mesh(path)

    assert mesh.num_vertices == 3
    np.testing.assert_array_equal(mesh.faces, [[0, 1, 2]])


def test_relative_indices(tmp_path):
    path = tmp_path / "relative.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
        "f -3 -2 -1\n"
        "v 1 1 0\n"
        "f -3 -1 -2\n"
    )
    mesh = load_mesh(path)

    np.testing.assert_array_equal(mesh.faces, [[0, 1, 2], [1, 3, 2]])


def test_quad_with_normals_is_skipped(tmp_path, caplog):
    path = tmp_path / "quad_normals.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nvn 0 0 1\n"
        "f 1//1 2//1 3//1 4//1\n"
        "f 1//1 2//1 3//1\n"
    )
    with caplog.at_level(logging.WARNING, logger="read_trimesh"):
        mesh = load_mesh(path)

    np.testing.assert_array_equal(mesh.faces, [[0, 1, 2]])
    assert "Skipped 1 non-triangular faces" in caplog.text
