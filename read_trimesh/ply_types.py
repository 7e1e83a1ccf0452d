"""
Width- and sign-aware coercion of PLY property columns.

PLY files may declare coordinates and face indices with any of the scalar
types (char/uchar, short/ushort, int/uint, float/double, or the sized
aliases). The decoder hands back each column with its declared numpy dtype;
the tables below map every accepted (kind, itemsize) pair to the dtype it is
widened to before the final conversion, so no high-order bits are lost.
"""

from typing import Optional

import numpy as np

from .config import FACE_DTYPE, VERTEX_DTYPE
from .errors import IndexOutOfBoundsError, UnsupportedPropertyTypeError


# (kind, itemsize) -> widened dtype for coordinate columns
COORDINATE_WIDENING: dict[tuple[str, int], type] = {
    ("i", 1): np.int64,
    ("i", 2): np.int64,
    ("i", 4): np.int64,
    ("i", 8): np.int64,
    ("u", 1): np.uint64,
    ("u", 2): np.uint64,
    ("u", 4): np.uint64,
    ("u", 8): np.uint64,
    ("f", 4): np.float64,
    ("f", 8): np.float64,
}

# (kind, itemsize) -> widened dtype for face index entries; floats are not indices
INDEX_WIDENING: dict[tuple[str, int], type] = {
    key: widened for key, widened in COORDINATE_WIDENING.items() if key[0] in "iu"
}

_MAX_INDEX = int(np.iinfo(FACE_DTYPE).max)


def numeric_kind(declared) -> tuple[str, int]:
    """Return the (kind, itemsize) tag of a declared dtype, ignoring byte order."""
    dtype = np.dtype(declared)
    return dtype.kind, dtype.itemsize


def coerce_coordinates(
    values: np.ndarray,
    declared,
    name: str,
    path: Optional[str] = None,
) -> np.ndarray:
    """Convert a coordinate column of any accepted numeric type to float64.

    Args:
        values: Column as read by the decoder.
        declared: Declared dtype of the property (e.g. 'f4', 'u2', '>i4').
        name: Property name, used in error messages.
        path: Source file, used in error messages.

    Returns:
        float64 array with the same length as ``values``.

    Raises:
        UnsupportedPropertyTypeError: If the declared type is not numeric.
    """
    widened = COORDINATE_WIDENING.get(numeric_kind(declared))
    if widened is None:
        raise UnsupportedPropertyTypeError(
            f"PLY property '{name}' has unsupported type {np.dtype(declared).name}",
            path=path,
            mesh_format="ply",
            field=name,
        )
    return np.asarray(values).astype(widened).astype(VERTEX_DTYPE)


def coerce_indices(
    values: np.ndarray,
    declared,
    name: str,
    path: Optional[str] = None,
) -> np.ndarray:
    """Convert face index entries of any accepted integer type to int64.

    Raises:
        UnsupportedPropertyTypeError: If the declared type is not an integer.
        IndexOutOfBoundsError: If an unsigned 64-bit index does not fit int64.
    """
    widened = INDEX_WIDENING.get(numeric_kind(declared))
    if widened is None:
        raise UnsupportedPropertyTypeError(
            f"PLY face property '{name}' must hold integer indices, "
            f"got {np.dtype(declared).name}",
            path=path,
            mesh_format="ply",
            field=name,
        )
    wide = np.asarray(values).astype(widened)
    if widened is np.uint64 and wide.size and int(wide.max()) > _MAX_INDEX:
        raise IndexOutOfBoundsError(
            f"PLY face property '{name}' holds index {int(wide.max())} "
            f"which exceeds the supported range",
            path=path,
            mesh_format="ply",
            field=name,
        )
    return wide.astype(FACE_DTYPE)
