"""
Inspect a mesh file from the command line.

Usage:
    python -m read_trimesh part.ply --scale 0.001
"""

import argparse
import logging
import sys

from .errors import MeshLoadError
from .logging_config import setup_logging
from .mesh_loader import load_mesh


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="read_trimesh",
        description="Load a PLY, STL, OBJ or DAE mesh and print a summary",
    )
    parser.add_argument(
        "path",
        help="Path to the mesh file",
    )
    parser.add_argument(
        "-s", "--scale",
        type=float,
        default=1.0,
        help="Uniform scale applied to every vertex (default: 1.0)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log output to this file",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        mesh = load_mesh(args.path, args.scale)
    except MeshLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    lower, upper = mesh.bounds
    print(f"format:   {mesh.mesh_format.name}")
    print(f"vertices: {mesh.num_vertices}")
    print(f"faces:    {mesh.num_faces}")
    print(f"bounds:   [{lower[0]:.6g}, {lower[1]:.6g}, {lower[2]:.6g}] "
          f"to [{upper[0]:.6g}, {upper[1]:.6g}, {upper[2]:.6g}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
