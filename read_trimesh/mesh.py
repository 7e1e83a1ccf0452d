"""
Canonical triangle mesh returned by every load call.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import trimesh

from .formats import MeshFormat


@dataclass(frozen=True)
class TriangleMesh:
    """Vertex positions plus triangle indices into them.

    Attributes:
        vertices: float64 array of shape (N, 3).
        faces: int64 array of shape (M, 3); every entry is in [0, N).

    Meshes built by the loader hold read-only arrays.
        mesh_format: Format the mesh was decoded from.
        source_path: Path the mesh was loaded from.
    """
    vertices: np.ndarray
    faces: np.ndarray
    mesh_format: Optional[MeshFormat] = None
    source_path: Optional[str] = None

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_faces(self) -> int:
        return len(self.faces)

    @property
    def bounds(self) -> np.ndarray:
        """Return (2, 3) array of the min and max corners."""
        return np.vstack([self.vertices.min(axis=0), self.vertices.max(axis=0)])

    def to_trimesh(self, process: bool = False) -> trimesh.Trimesh:
        """Build a trimesh.Trimesh from this mesh.

        Args:
            process: Let trimesh merge duplicate vertices and drop degenerate
                data. With False the vertex and face arrays are kept as-is.
        """
        return trimesh.Trimesh(
            vertices=self.vertices.copy(),
            faces=self.faces.copy(),
            process=process,
        )
