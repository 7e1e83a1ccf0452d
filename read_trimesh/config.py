"""
Module-level constants shared by the loaders.

There is no runtime configuration: a load call is fully described by its
path and scale. These values only name the fixed tables the pipeline uses.
"""
import numpy as np


# Package logger namespace, configured by logging_config.setup_logging()
LOGGER_NAME: str = "read_trimesh"

# Canonical output dtypes
VERTEX_DTYPE = np.float64
FACE_DTYPE = np.int64

# Lower-cased file suffix -> format name (see formats.MeshFormat)
EXTENSION_FORMATS: dict[str, str] = {
    ".ply": "ply",
    ".stl": "stl",
    ".obj": "obj",
    ".dae": "dae",
}

# PLY element/property names
PLY_VERTEX_ELEMENT: str = "vertex"
PLY_FACE_ELEMENT: str = "face"
PLY_COORDINATE_PROPERTIES: tuple[str, ...] = ("x", "y", "z")
PLY_FACE_INDEX_PROPERTIES: tuple[str, ...] = ("vertex_indices", "vertex_index")

# Scales closer than this to 1.0 are treated as the identity
IDENTITY_SCALE_TOLERANCE: float = float(np.finfo(np.float32).eps)
