"""
MeshAssembler component for scaling and validating decoded meshes.
"""

import logging
import math
from typing import Optional

import numpy as np

from .config import FACE_DTYPE, IDENTITY_SCALE_TOLERANCE, VERTEX_DTYPE
from .errors import EmptyMeshError, IndexOutOfBoundsError, InvalidScaleError, StructuralError
from .formats import MeshFormat
from .mesh import TriangleMesh

logger = logging.getLogger(__name__)


class MeshAssembler:
    """Handles the steps shared by every format after decoding."""

    @staticmethod
    def validate_scale(scale: float) -> float:
        """Return ``scale`` as a float.

        Raises:
            InvalidScaleError: If scale is NaN or infinite.
        """
        scale = float(scale)
        if not math.isfinite(scale):
            raise InvalidScaleError(f"Scale must be a finite number, got {scale}")
        return scale

    @staticmethod
    def apply_scale(vertices: np.ndarray, scale: float) -> np.ndarray:
        """Multiply every coordinate by ``scale``.

        Scales within float32 epsilon of 1.0 return ``vertices`` unchanged.
        Non-positive scales are applied as given (negative values mirror).

        Args:
            vertices: Vertex array of shape (N, 3).
            scale: Uniform scale factor.

        Returns:
            Scaled vertex array of shape (N, 3).
        """
        scale = MeshAssembler.validate_scale(scale)
        if abs(scale - 1.0) <= IDENTITY_SCALE_TOLERANCE:
            return vertices
        if scale <= 0.0:
            logger.warning("Applying non-positive scale %s", scale)
        return vertices * scale

    @staticmethod
    def assemble(
        vertices: np.ndarray,
        faces: np.ndarray,
        mesh_format: Optional[MeshFormat] = None,
        path: Optional[str] = None,
    ) -> TriangleMesh:
        """Build a TriangleMesh after checking its structural invariants.

        The arrays are copied and marked read-only.

        Raises:
            EmptyMeshError: If there are no vertices or no faces.
            StructuralError: If the arrays are not (N, 3) shaped.
            IndexOutOfBoundsError: If a face references a missing vertex.
        """
        fmt = mesh_format.value if mesh_format is not None else None
        vertices = np.array(vertices, dtype=VERTEX_DTYPE)
        faces = np.array(faces, dtype=FACE_DTYPE)

        if vertices.size == 0:
            raise EmptyMeshError(
                f"Mesh loaded from '{path}' has no vertices", path=path, mesh_format=fmt
            )
        if faces.size == 0:
            raise EmptyMeshError(
                f"Mesh loaded from '{path}' has no faces", path=path, mesh_format=fmt
            )
        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise StructuralError(
                f"Vertices must have shape (N, 3), got {vertices.shape}",
                path=path,
                mesh_format=fmt,
            )
        if faces.ndim != 2 or faces.shape[1] != 3:
            raise StructuralError(
                f"Faces must have shape (M, 3), got {faces.shape}",
                path=path,
                mesh_format=fmt,
            )

        n = len(vertices)
        invalid = np.flatnonzero(((faces < 0) | (faces >= n)).any(axis=1))
        if len(invalid):
            first = int(invalid[0])
            raise IndexOutOfBoundsError(
                f"Face {first} {faces[first].tolist()} in '{path}' references a vertex "
                f"outside [0, {n}) ({len(invalid)} invalid faces)",
                path=path,
                mesh_format=fmt,
            )

        vertices.flags.writeable = False
        faces.flags.writeable = False
        return TriangleMesh(vertices=vertices, faces=faces, mesh_format=mesh_format, source_path=path)
