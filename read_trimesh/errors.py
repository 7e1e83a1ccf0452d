"""
Exception hierarchy raised by the mesh loading pipeline.

Every failure of a load call is a subclass of :class:`MeshLoadError`. Each kind
also derives from the builtin exception a caller would naturally catch for it
(``ValueError`` for bad content, ``OSError`` for unreadable files).
"""

from typing import Optional


class MeshLoadError(Exception):
    """Base class for all mesh loading failures.

    Attributes:
        path: Path of the file being loaded, if known.
        mesh_format: Format name ("ply", "stl", "obj", "dae"), if known.
        field: Offending element, property or primitive name, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        mesh_format: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.mesh_format = mesh_format
        self.field = field

    def __str__(self) -> str:
        return self.message


class UnsupportedFormatError(MeshLoadError, ValueError):
    """The file extension does not name a supported format."""


class MeshIOError(MeshLoadError, OSError):
    """The file could not be opened or read."""


class MeshFileNotFoundError(MeshIOError, FileNotFoundError):
    """The file does not exist."""


class InvalidScaleError(MeshLoadError, ValueError):
    """The scale factor is NaN or infinite."""


class MeshDecodeError(MeshLoadError, ValueError):
    """The decoder rejected the file as malformed for its format."""


class StructuralError(MeshLoadError, ValueError):
    """The decoded content lacks a required part or violates mesh invariants."""


class MissingElementError(StructuralError):
    """A required element (e.g. PLY "vertex" or "face") is absent."""


class MissingPropertyError(StructuralError):
    """A required property (e.g. PLY "x" or "vertex_indices") is absent."""


class UnsupportedPropertyTypeError(StructuralError):
    """A property is declared with a numeric type that cannot be coerced."""


class IndexOutOfBoundsError(StructuralError):
    """A face references a vertex index outside the vertex array."""


class UnsupportedTopologyError(MeshLoadError, ValueError):
    """A face has a number of corners other than three."""


class EmptyMeshError(MeshLoadError, ValueError):
    """Decoding produced no vertices or no faces."""
