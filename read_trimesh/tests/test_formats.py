"""
Tests for extension-based format dispatch.
"""

from pathlib import Path

import pytest

from read_trimesh import FormatSniffer, MeshFormat, UnsupportedFormatError


@pytest.mark.parametrize(
    "path, expected",
    [
        ("mesh.PLY", MeshFormat.PLY),
        ("mesh.ply", MeshFormat.PLY),
        ("mesh.stl", MeshFormat.STL),
        ("mesh.obj", MeshFormat.OBJ),
        ("mesh.dae", MeshFormat.DAE),
        ("models/robot.Dae", MeshFormat.DAE),
        (Path("dir.with.dots") / "part.STL", MeshFormat.STL),
    ],
)
def test_extension_dispatch(path, expected):
    assert FormatSniffer.sniff(path) is expected


@pytest.mark.parametrize("path", ["mesh.xyz", "mesh", "mesh.ply.gz", ".ply"])
def test_unsupported_extension(path):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        FormatSniffer.sniff(path)
    assert isinstance(excinfo.value, ValueError)
    assert "Unsupported file extension" in str(excinfo.value)


def test_sniff_does_not_touch_the_file(tmp_path):
    # The file does not exist; only the name matters
    assert FormatSniffer.sniff(tmp_path / "missing.obj") is MeshFormat.OBJ
