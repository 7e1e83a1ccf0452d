"""
StlLoader component for loading STL geometry files.
"""

import logging

import numpy as np
import trimesh

from .config import FACE_DTYPE, VERTEX_DTYPE
from .errors import MeshDecodeError, MeshIOError

logger = logging.getLogger(__name__)


class StlLoader:
    """Handles loading STL triangle streams into indexed arrays."""

    @staticmethod
    def read_triangles(path: str) -> np.ndarray:
        """Read every facet of an ASCII or binary STL file.

        Returns:
            float64 array of shape (n, 3, 3): n triangles, three corners each.

        Raises:
            MeshIOError: If the file cannot be read.
            MeshDecodeError: If the file format is invalid.
        """
        try:
            with open(path, "rb") as stream:
                loaded = trimesh.load(stream, file_type="stl", process=False)
        except OSError as e:
            raise MeshIOError(
                f"Could not read STL file '{path}': {e}", path=path, mesh_format="stl"
            ) from e
        except Exception as e:
            raise MeshDecodeError(
                f"Invalid STL format in file: {path}", path=path, mesh_format="stl"
            ) from e

        # Multi-solid ASCII files come back as a scene
        if isinstance(loaded, trimesh.Scene):
            geometries = [g for g in loaded.geometry.values() if isinstance(g, trimesh.Trimesh)]
        else:
            geometries = [loaded]

        if not geometries:
            return np.empty((0, 3, 3), dtype=VERTEX_DTYPE)
        return np.concatenate(
            [np.asarray(g.triangles, dtype=VERTEX_DTYPE).reshape(-1, 3, 3) for g in geometries]
        )

    @staticmethod
    def load(path: str) -> tuple[np.ndarray, np.ndarray]:
        """Load STL file, return (vertices, faces).

        Every triangle contributes three new vertices; coincident corners of
        neighbouring triangles are not merged.

        Returns:
            vertices: float64 array of shape (3n, 3)
            faces: int64 array of shape (n, 3), face i is [3i, 3i + 1, 3i + 2]
        """
        triangles = StlLoader.read_triangles(path)
        vertices = triangles.reshape(-1, 3)
        faces = np.arange(len(vertices), dtype=FACE_DTYPE).reshape(-1, 3)
        logger.debug("STL %s: %d triangles", path, len(faces))
        return vertices, faces
