"""
Concatenation of independently indexed sub-meshes into one index space.
"""

import logging
from typing import Sequence

import numpy as np

from .config import FACE_DTYPE, VERTEX_DTYPE

logger = logging.getLogger(__name__)


def merge_submeshes(
    submeshes: Sequence[tuple[np.ndarray, np.ndarray]],
) -> tuple[np.ndarray, np.ndarray]:
    """Merge (vertices, faces) pairs in the given order.

    Faces of each sub-mesh are shifted by the number of vertices of all
    sub-meshes before it. Coincident vertices are not deduplicated.

    Args:
        submeshes: Sequence of (vertices (Ni, 3), faces (Mi, 3)) pairs whose
            face indices are local to their own vertex array.

    Returns:
        Tuple of merged (vertices, faces).
    """
    if not submeshes:
        return np.empty((0, 3), dtype=VERTEX_DTYPE), np.empty((0, 3), dtype=FACE_DTYPE)

    if len(submeshes) == 1:
        logger.debug("Found single mesh")
        vertices, faces = submeshes[0]
        return np.asarray(vertices, dtype=VERTEX_DTYPE), np.asarray(faces, dtype=FACE_DTYPE)

    vertex_blocks = []
    face_blocks = []
    offset = 0
    for vertices, faces in submeshes:
        vertex_blocks.append(np.asarray(vertices, dtype=VERTEX_DTYPE).reshape(-1, 3))
        face_blocks.append(np.asarray(faces, dtype=FACE_DTYPE).reshape(-1, 3) + offset)
        offset += len(vertices)

    logger.debug("Merged %d meshes into %d vertices", len(submeshes), offset)
    return np.vstack(vertex_blocks), np.vstack(face_blocks)
