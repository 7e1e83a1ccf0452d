"""
Tests for the load entry points.
"""

import numpy as np
import pytest
import trimesh

from read_trimesh import (
    InvalidScaleError,
    MeshFileNotFoundError,
    MeshIOError,
    MeshLoadError,
    MeshLoader,
    TriangleMesh,
    UnsupportedFormatError,
    load_mesh,
    load_trimesh,
)

from samples import (
    SQUARE_FACES,
    SQUARE_VERTICES,
    TRIANGLE_FACES,
    TRIANGLE_VERTICES,
    write_ascii_ply,
    write_ascii_stl,
    write_dae,
    write_obj,
)


@pytest.fixture(params=["ply", "stl", "obj", "dae"])
def triangle_file(request, tmp_path):
    path = tmp_path / f"triangle.{request.param}"
    if request.param == "ply":
        return write_ascii_ply(path, TRIANGLE_VERTICES, TRIANGLE_FACES)
    if request.param == "stl":
        return write_ascii_stl(path, TRIANGLE_VERTICES[None])
    if request.param == "obj":
        return write_obj(path, TRIANGLE_VERTICES, [("object", TRIANGLE_FACES)])
    return write_dae(
        path, [{"name": "triangle", "positions": TRIANGLE_VERTICES, "triangles": TRIANGLE_FACES}]
    )


def test_every_format_gives_the_same_triangle(triangle_file):
    mesh = load_mesh(triangle_file)

    assert isinstance(mesh, TriangleMesh)
    assert mesh.source_path == triangle_file
    np.testing.assert_allclose(mesh.vertices, TRIANGLE_VERTICES, rtol=1e-6)
    np.testing.assert_array_equal(mesh.faces, TRIANGLE_FACES)


def test_scale_is_applied_once(triangle_file):
    mesh = load_mesh(triangle_file, scale=0.001)
    np.testing.assert_allclose(mesh.vertices, TRIANGLE_VERTICES * 0.001, rtol=1e-6)


def test_missing_file(tmp_path):
    path = tmp_path / "missing.ply"
    with pytest.raises(MeshFileNotFoundError) as excinfo:
        load_mesh(path)
    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == str(path)
    assert "not found" in str(excinfo.value)


def test_directory_is_not_a_mesh(tmp_path):
    directory = tmp_path / "folder.obj"
    directory.mkdir()
    with pytest.raises(MeshIOError):
        load_mesh(directory)


def test_unsupported_extension_before_file_check(tmp_path):
    with pytest.raises(UnsupportedFormatError):
        load_mesh(tmp_path / "missing.xyz")


def test_all_failures_share_a_base_class(tmp_path):
    path = tmp_path / "mesh.gltf"
    path.write_text("{}")
    with pytest.raises(MeshLoadError):
        load_mesh(path)


def test_non_finite_scale(triangle_file):
    with pytest.raises(InvalidScaleError):
        load_mesh(triangle_file, scale=float("nan"))


def test_format_specific_loaders_return_unscaled_arrays(tmp_path):
    path = write_ascii_ply(tmp_path / "square.ply", SQUARE_VERTICES, SQUARE_FACES)
    vertices, faces = MeshLoader.load_ply(path)
    np.testing.assert_allclose(vertices, SQUARE_VERTICES)
    np.testing.assert_array_equal(faces, SQUARE_FACES)

    with pytest.raises(MeshFileNotFoundError):
        MeshLoader.load_obj(tmp_path / "missing.obj")


def test_load_trimesh_without_processing(tmp_path):
    path = write_ascii_stl(tmp_path / "square.stl", SQUARE_VERTICES[SQUARE_FACES])
    mesh = load_trimesh(path, process=False)

    assert isinstance(mesh, trimesh.Trimesh)
    assert len(mesh.vertices) == 6
    assert len(mesh.faces) == 2


def test_load_trimesh_merges_duplicates_by_default(tmp_path):
    path = write_ascii_stl(tmp_path / "square.stl", SQUARE_VERTICES[SQUARE_FACES])
    mesh = load_trimesh(path, scale=2.0)

    assert len(mesh.vertices) == 4
    np.testing.assert_allclose(mesh.bounds, [[0.0, 0.0, 0.0], [2.0, 2.0, 0.0]])
