"""
Triangle Mesh Reader

This module loads triangular surface meshes from PLY, STL, OBJ and Collada
(DAE) files into one vertex/face representation, optionally uniformly scaled.
"""

from .errors import (
    EmptyMeshError,
    IndexOutOfBoundsError,
    InvalidScaleError,
    MeshDecodeError,
    MeshFileNotFoundError,
    MeshIOError,
    MeshLoadError,
    MissingElementError,
    MissingPropertyError,
    StructuralError,
    UnsupportedFormatError,
    UnsupportedPropertyTypeError,
    UnsupportedTopologyError,
)
from .formats import FormatSniffer, MeshFormat
from .mesh import TriangleMesh
from .mesh_loader import MeshLoader, load_mesh, load_trimesh

__all__ = [
    "load_mesh",
    "load_trimesh",
    "MeshLoader",
    "TriangleMesh",
    "MeshFormat",
    "FormatSniffer",
    "MeshLoadError",
    "UnsupportedFormatError",
    "MeshIOError",
    "MeshFileNotFoundError",
    "MeshDecodeError",
    "StructuralError",
    "MissingElementError",
    "MissingPropertyError",
    "UnsupportedPropertyTypeError",
    "IndexOutOfBoundsError",
    "UnsupportedTopologyError",
    "EmptyMeshError",
    "InvalidScaleError",
]
