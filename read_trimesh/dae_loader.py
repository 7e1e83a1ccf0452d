"""
DaeLoader component for loading Collada documents.

Each <geometry> holding <triangles> becomes one sub-mesh; the sub-meshes are
merged in document order. Polylists, polygons and lines are ignored.
"""

import logging
from typing import Optional

import collada
import numpy as np
from collada.common import DaeBrokenRefError, DaeUnsupportedError
from collada.triangleset import TriangleSet

from .config import FACE_DTYPE, VERTEX_DTYPE
from .errors import EmptyMeshError, MeshDecodeError, MeshIOError
from .merging import merge_submeshes

logger = logging.getLogger(__name__)


class DaeLoader:
    """Handles loading triangle geometry from Collada (.dae) files."""

    @staticmethod
    def read(path: str) -> collada.Collada:
        try:
            with open(path, "rb") as stream:
                return collada.Collada(
                    stream, ignore=[DaeUnsupportedError, DaeBrokenRefError]
                )
        except OSError as e:
            raise MeshIOError(
                f"Failed to open .dae file '{path}': {e}", path=path, mesh_format="dae"
            ) from e
        except Exception as e:
            raise MeshDecodeError(
                f"Failed to parse .dae file '{path}': {e}", path=path, mesh_format="dae"
            ) from e

    @staticmethod
    def geometry_submesh(geometry) -> Optional[tuple[np.ndarray, np.ndarray]]:
        """Collect the triangles of one geometry.

        Triangle groups that share a position source share its vertices.

        Returns:
            (vertices, faces) local to this geometry, or None if it holds no
            triangles.
        """
        vertex_blocks = []
        face_blocks = []
        source_offsets: dict[str, int] = {}
        count = 0

        for primitive in geometry.primitives:
            if not isinstance(primitive, TriangleSet):
                logger.debug(
                    "Skipping %s in geometry %s", type(primitive).__name__, geometry.id
                )
                continue

            positions = primitive.vertex
            indices = primitive.vertex_index
            if positions is None or indices is None or len(indices) == 0:
                continue

            source_id = primitive.sources["VERTEX"][0][2]
            if source_id not in source_offsets:
                block = np.asarray(positions, dtype=VERTEX_DTYPE).reshape(len(positions), -1)[:, :3]
                source_offsets[source_id] = count
                vertex_blocks.append(block)
                count += len(block)

            face_blocks.append(
                np.asarray(indices, dtype=FACE_DTYPE).reshape(-1, 3) + source_offsets[source_id]
            )

        if not face_blocks:
            return None
        return np.vstack(vertex_blocks), np.vstack(face_blocks)

    @staticmethod
    def load(path: str) -> tuple[np.ndarray, np.ndarray]:
        """Load DAE file, return merged (vertices, faces).

        Raises:
            EmptyMeshError: If no geometry holds triangles.
        """
        document = DaeLoader.read(path)

        submeshes = []
        for geometry in document.geometries:
            submesh = DaeLoader.geometry_submesh(geometry)
            if submesh is None:
                logger.debug("Geometry %s has no triangles, skipped", geometry.id)
                continue
            logger.debug(
                "Geometry %s: %d vertices, %d triangles",
                geometry.id, len(submesh[0]), len(submesh[1]),
            )
            submeshes.append(submesh)

        if not submeshes:
            raise EmptyMeshError(
                f"No triangle geometry found in '{path}'", path=path, mesh_format="dae"
            )
        return merge_submeshes(submeshes)
