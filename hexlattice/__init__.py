"""Hex-grid coordinate algebra and a graph-backed grid container."""

from .config import GridSettings
from .conversions import (
    CoordSys,
    axial_round,
    axial_to_cube,
    axial_to_offset,
    convert,
    coord_system,
    cube_lerp,
    cube_round,
    cube_to_axial,
    cube_to_double,
    cube_to_offset,
    double_to_cube,
    offset_to_axial,
    offset_to_cube,
    to_cube,
)
from .coords import Axial, Coordinate, Cube, CubeAxis, Double, DoubleLayout, Offset, OffsetLayout
from .distance import (
    hex_distance,
    hex_distance_axial,
    hex_distance_cube,
    hex_distance_double,
    hex_distance_offset,
)
from .errors import (
    CellNotFoundError,
    HexLatticeError,
    InvalidCoordinateError,
    LayoutMismatchError,
    NoPathError,
    ShapeDomainError,
)
from .grid import HexGrid
from .neighbors import (
    diagonals_cube,
    neighbors_axial,
    neighbors_axial_bounded,
    neighbors_cube,
    neighbors_double,
    neighbors_offset,
    neighbors_offset_bounded,
)
from .search import astar, breadth_first_path, reachable
from .shapes import filled_hex, line, parallelogram, rectangle, ring, spiral

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "CellNotFoundError",
    "CoordSys",
    "Coordinate",
    "Cube",
    "CubeAxis",
    "Double",
    "DoubleLayout",
    "GridSettings",
    "HexGrid",
    "HexLatticeError",
    "InvalidCoordinateError",
    "LayoutMismatchError",
    "NoPathError",
    "Offset",
    "OffsetLayout",
    "ShapeDomainError",
    "astar",
    "axial_round",
    "axial_to_cube",
    "axial_to_offset",
    "breadth_first_path",
    "convert",
    "coord_system",
    "cube_lerp",
    "cube_round",
    "cube_to_axial",
    "cube_to_double",
    "cube_to_offset",
    "diagonals_cube",
    "double_to_cube",
    "filled_hex",
    "hex_distance",
    "hex_distance_axial",
    "hex_distance_cube",
    "hex_distance_double",
    "hex_distance_offset",
    "line",
    "neighbors_axial",
    "neighbors_axial_bounded",
    "neighbors_cube",
    "neighbors_double",
    "neighbors_offset",
    "neighbors_offset_bounded",
    "offset_to_axial",
    "offset_to_cube",
    "parallelogram",
    "reachable",
    "rectangle",
    "ring",
    "spiral",
    "to_cube",
]
