"""
MeshLoader component for loading PLY, STL, OBJ and DAE geometry files.
"""

import logging
import os
from typing import Union

import numpy as np
import trimesh

from .assembly import MeshAssembler
from .dae_loader import DaeLoader
from .errors import MeshFileNotFoundError, MeshIOError
from .formats import FormatSniffer, MeshFormat
from .mesh import TriangleMesh
from .obj_loader import ObjLoader
from .ply_loader import PlyLoader
from .stl_loader import StlLoader

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

# Each adapter exposes load(path) -> (vertices, faces) with unscaled, local data
ADAPTERS = {
    MeshFormat.PLY: PlyLoader,
    MeshFormat.STL: StlLoader,
    MeshFormat.OBJ: ObjLoader,
    MeshFormat.DAE: DaeLoader,
}


class MeshLoader:
    """Handles loading mesh files of any supported format."""

    @staticmethod
    def validate_path(path: PathLike) -> str:
        """Raise a descriptive error unless ``path`` is an existing file.

        Args:
            path: Path to validate.

        Returns:
            The path as a string.

        Raises:
            MeshFileNotFoundError: If the path does not exist.
            MeshIOError: If the path is not a regular file.
        """
        path = os.fspath(path)
        if not os.path.exists(path):
            raise MeshFileNotFoundError(f"Mesh file not found: {path}", path=path)
        if not os.path.isfile(path):
            raise MeshIOError(f"Mesh path is not a file: {path}", path=path)
        return path

    @staticmethod
    def load_ply(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
        """Load PLY file, return unscaled (vertices, faces)."""
        return PlyLoader.load(MeshLoader.validate_path(path))

    @staticmethod
    def load_stl(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
        """Load STL file, return unscaled (vertices, faces)."""
        return StlLoader.load(MeshLoader.validate_path(path))

    @staticmethod
    def load_obj(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
        """Load OBJ file, return unscaled (vertices, faces)."""
        return ObjLoader.load(MeshLoader.validate_path(path))

    @staticmethod
    def load_dae(path: PathLike) -> tuple[np.ndarray, np.ndarray]:
        """Load DAE file, return unscaled merged (vertices, faces)."""
        return DaeLoader.load(MeshLoader.validate_path(path))

    @staticmethod
    def load(file_path: PathLike, scale: float = 1.0) -> TriangleMesh:
        """Load a mesh file, apply uniform scaling and validate the result.

        The format is chosen from the file extension. The scale is applied
        once, after all sub-meshes have been merged.

        Args:
            file_path: Path to a .ply, .stl, .obj or .dae file.
            scale: Factor applied to every vertex coordinate. 1.0 is a no-op.

        Returns:
            The loaded TriangleMesh.

        Raises:
            MeshLoadError: Any subclass, describing why the load failed.
            ValueError: If scale is not finite.
        """
        scale = MeshAssembler.validate_scale(scale)
        mesh_format = FormatSniffer.sniff(file_path)
        path = MeshLoader.validate_path(file_path)

        vertices, faces = ADAPTERS[mesh_format].load(path)
        vertices = MeshAssembler.apply_scale(vertices, scale)
        mesh = MeshAssembler.assemble(vertices, faces, mesh_format, path)

        logger.info(
            "Loaded %s mesh %s: %d vertices, %d faces",
            mesh_format.name, path, mesh.num_vertices, mesh.num_faces,
        )
        return mesh

    @staticmethod
    def load_trimesh(
        file_path: PathLike, scale: float = 1.0, process: bool = True
    ) -> trimesh.Trimesh:
        """Load a mesh file into a trimesh.Trimesh.

        Args:
            file_path: Path to a .ply, .stl, .obj or .dae file.
            scale: Factor applied to every vertex coordinate.
            process: Let trimesh merge duplicate vertices. Pass False to keep
                the loaded arrays exactly.
        """
        return MeshLoader.load(file_path, scale).to_trimesh(process=process)


def load_mesh(file_path: PathLike, scale: float = 1.0) -> TriangleMesh:
    """Load a triangle mesh from a PLY, STL, OBJ or DAE file.

    Example:
        >>> mesh = load_mesh("part.ply", scale=0.001)  # millimetres to metres
        >>> mesh.vertices.shape, mesh.faces.shape
    """
    return MeshLoader.load(file_path, scale)


def load_trimesh(
    file_path: PathLike, scale: float = 1.0, process: bool = True
) -> trimesh.Trimesh:
    """Load a mesh file straight into a trimesh.Trimesh. See MeshLoader.load_trimesh."""
    return MeshLoader.load_trimesh(file_path, scale, process)
