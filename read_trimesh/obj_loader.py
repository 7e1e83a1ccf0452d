"""
ObjLoader component for loading Wavefront OBJ files.
"""

import logging

import numpy as np
import tinyobjloader

from .config import FACE_DTYPE, VERTEX_DTYPE
from .errors import MeshDecodeError

logger = logging.getLogger(__name__)


class ObjLoader:
    """Handles loading OBJ files, keeping triangle faces only."""

    @staticmethod
    def read(path: str) -> tinyobjloader.ObjReader:
        """Parse an OBJ file without triangulating its faces.

        Texture and normal references (``f v/vt/vn``, ``f v//vn``) and
        relative (negative) indices are resolved by the decoder.

        Raises:
            MeshDecodeError: If the file cannot be parsed.
        """
        reader = tinyobjloader.ObjReader()
        config = tinyobjloader.ObjReaderConfig()
        config.triangulate = False

        try:
            ok = reader.ParseFromFile(path, config)
        except Exception as e:
            raise MeshDecodeError(
                f"Failed to load OBJ file '{path}': {e}", path=path, mesh_format="obj"
            ) from e
        if not ok:
            raise MeshDecodeError(
                f"Failed to load OBJ file '{path}': {reader.Error().strip()}",
                path=path,
                mesh_format="obj",
            )

        warning = reader.Warning()
        if warning:
            logger.debug("OBJ %s: %s", path, warning.strip())
        return reader

    @staticmethod
    def shape_faces(shape) -> tuple[np.ndarray, int]:
        """Split one shape's faces into triangles and a count of the rest.

        Returns:
            Tuple of (triangles (M, 3) int64, number of skipped faces).
        """
        arity = np.asarray(shape.mesh.num_face_vertices, dtype=np.int64)
        corners = np.fromiter(
            (index.vertex_index for index in shape.mesh.indices),
            dtype=FACE_DTYPE,
            count=len(shape.mesh.indices),
        )
        if len(arity) == 0:
            return np.empty((0, 3), dtype=FACE_DTYPE), 0

        # Faces are stored back to back; each starts after the corners of those before it
        starts = np.concatenate([[0], np.cumsum(arity)[:-1]])
        triangle_starts = starts[arity == 3]
        triangles = corners[triangle_starts[:, None] + np.arange(3)]
        return triangles.reshape(-1, 3), int(np.count_nonzero(arity != 3))

    @staticmethod
    def load(path: str) -> tuple[np.ndarray, np.ndarray]:
        """Load OBJ file, return (vertices, faces).

        All groups and objects index one file-wide vertex array, so their
        triangle blocks are concatenated in file order without renumbering.
        Quads and larger polygons are skipped with a warning.

        Returns:
            vertices: float64 array of shape (N, 3)
            faces: int64 array of shape (M, 3)
        """
        reader = ObjLoader.read(path)

        vertices = np.asarray(reader.GetAttrib().vertices, dtype=VERTEX_DTYPE).reshape(-1, 3)

        blocks = []
        skipped = 0
        for shape in reader.GetShapes():
            triangles, dropped = ObjLoader.shape_faces(shape)
            blocks.append(triangles)
            skipped += dropped

        if skipped:
            logger.warning(
                "Skipped %d non-triangular faces in OBJ file %s", skipped, path
            )

        if blocks:
            faces = np.concatenate(blocks)
        else:
            faces = np.empty((0, 3), dtype=FACE_DTYPE)
        logger.debug("OBJ %s: %d vertices, %d triangles", path, len(vertices), len(faces))
        return vertices, faces
