"""
FormatSniffer component for mapping file paths to mesh formats.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Union

from .config import EXTENSION_FORMATS
from .errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


class MeshFormat(Enum):
    """The closed set of supported mesh file formats."""
    PLY = "ply"
    STL = "stl"
    OBJ = "obj"
    DAE = "dae"


class FormatSniffer:
    """Selects a mesh format from a file extension. File content is never read."""

    @staticmethod
    def sniff(path: Union[str, os.PathLike]) -> MeshFormat:
        """Return the format named by the extension of ``path``.

        Args:
            path: Path to a mesh file. The extension is compared case-insensitively.

        Returns:
            The matching MeshFormat.

        Raises:
            UnsupportedFormatError: If the extension is not .ply, .stl, .obj or .dae.
        """
        suffix = Path(path).suffix.lower()
        name = EXTENSION_FORMATS.get(suffix)
        if name is None:
            supported = ", ".join(sorted(EXTENSION_FORMATS))
            raise UnsupportedFormatError(
                f"Unsupported file extension {suffix or '(none)'!r} for '{os.fspath(path)}', "
                f"supported extensions are {supported}",
                path=os.fspath(path),
            )
        mesh_format = MeshFormat(name)
        logger.debug("Dispatching %s as %s", path, mesh_format.name)
        return mesh_format
