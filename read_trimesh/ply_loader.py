"""
PlyLoader component for reading PLY element/property data.
"""

import logging

import numpy as np
from plyfile import PlyData, PlyElement, PlyListProperty

from .config import (
    FACE_DTYPE,
    PLY_COORDINATE_PROPERTIES,
    PLY_FACE_ELEMENT,
    PLY_FACE_INDEX_PROPERTIES,
    PLY_VERTEX_ELEMENT,
)
from .errors import (
    MeshDecodeError,
    MeshIOError,
    MissingElementError,
    MissingPropertyError,
    UnsupportedPropertyTypeError,
    UnsupportedTopologyError,
)
from .ply_types import coerce_coordinates, coerce_indices

logger = logging.getLogger(__name__)


class PlyLoader:
    """Handles decoding PLY files into vertex and triangle arrays."""

    @staticmethod
    def read(path: str) -> PlyData:
        """Parse a PLY file, ASCII or binary of either byte order.

        Raises:
            MeshIOError: If the file cannot be read.
            MeshDecodeError: If the file is not valid PLY.
        """
        try:
            with open(path, "rb") as stream:
                return PlyData.read(stream, mmap=False)
        except OSError as e:
            raise MeshIOError(
                f"Could not read PLY file '{path}': {e}", path=path, mesh_format="ply"
            ) from e
        except Exception as e:
            raise MeshDecodeError(
                f"Could not parse PLY file '{path}': {e}", path=path, mesh_format="ply"
            ) from e

    @staticmethod
    def get_element(ply: PlyData, name: str, path: str) -> PlyElement:
        for element in ply.elements:
            if element.name == name:
                return element
        raise MissingElementError(
            f"No '{name}' element found in PLY file '{path}'",
            path=path,
            mesh_format="ply",
            field=name,
        )

    @staticmethod
    def find_property(element: PlyElement, name: str):
        for prop in element.properties:
            if prop.name == name:
                return prop
        return None

    @staticmethod
    def find_face_index_property(element: PlyElement, path: str) -> PlyListProperty:
        """Locate the list property holding per-face vertex indices.

        Known names are tried first; otherwise the element's only list
        property is used.
        """
        for name in PLY_FACE_INDEX_PROPERTIES:
            prop = PlyLoader.find_property(element, name)
            if prop is not None:
                break
        else:
            list_props = [p for p in element.properties if isinstance(p, PlyListProperty)]
            if len(list_props) != 1:
                raise MissingPropertyError(
                    f"Missing '{PLY_FACE_INDEX_PROPERTIES[0]}' property in PLY "
                    f"'{element.name}' element of '{path}'",
                    path=path,
                    mesh_format="ply",
                    field=PLY_FACE_INDEX_PROPERTIES[0],
                )
            prop = list_props[0]

        if not isinstance(prop, PlyListProperty):
            raise UnsupportedPropertyTypeError(
                f"PLY face property '{prop.name}' in '{path}' must be a list property",
                path=path,
                mesh_format="ply",
                field=prop.name,
            )
        return prop

    @staticmethod
    def extract_vertices(element: PlyElement, path: str) -> np.ndarray:
        """Return (N, 3) float64 positions from the x, y, z properties.

        Properties are found by name, so their declaration order and
        declared numeric types do not matter.
        """
        columns = []
        for name in PLY_COORDINATE_PROPERTIES:
            prop = PlyLoader.find_property(element, name)
            if prop is None:
                raise MissingPropertyError(
                    f"Missing '{name}' coordinate in PLY '{element.name}' element of '{path}'",
                    path=path,
                    mesh_format="ply",
                    field=name,
                )
            if isinstance(prop, PlyListProperty):
                raise UnsupportedPropertyTypeError(
                    f"PLY coordinate '{name}' in '{path}' is a list, expected a scalar",
                    path=path,
                    mesh_format="ply",
                    field=name,
                )
            columns.append(coerce_coordinates(element.data[name], prop.val_dtype, name, path))
        return np.column_stack(columns)

    @staticmethod
    def extract_faces(element: PlyElement, path: str) -> np.ndarray:
        """Return (M, 3) int64 indices; every face must list exactly three.

        Raises:
            UnsupportedTopologyError: If any face is not a triangle.
        """
        prop = PlyLoader.find_face_index_property(element, path)
        records = element.data[prop.name]
        if len(records) == 0:
            return np.empty((0, 3), dtype=FACE_DTYPE)

        arity = np.fromiter((len(r) for r in records), dtype=np.int64, count=len(records))
        bad = np.flatnonzero(arity != 3)
        if len(bad):
            first = int(bad[0])
            raise UnsupportedTopologyError(
                f"PLY face {first} in '{path}' has {int(arity[first])} indices, "
                f"only triangles are supported ({len(bad)} non-triangular faces)",
                path=path,
                mesh_format="ply",
                field=prop.name,
            )
        return coerce_indices(np.vstack(list(records)), prop.val_dtype, prop.name, path)

    @staticmethod
    def load(path: str) -> tuple[np.ndarray, np.ndarray]:
        """Load PLY file, return (vertices, faces).

        Returns:
            vertices: float64 array of shape (N, 3)
            faces: int64 array of shape (M, 3)
        """
        ply = PlyLoader.read(path)
        vertex_element = PlyLoader.get_element(ply, PLY_VERTEX_ELEMENT, path)
        face_element = PlyLoader.get_element(ply, PLY_FACE_ELEMENT, path)

        vertices = PlyLoader.extract_vertices(vertex_element, path)
        faces = PlyLoader.extract_faces(face_element, path)
        logger.debug("PLY %s: %d vertices, %d faces", path, len(vertices), len(faces))
        return vertices, faces
