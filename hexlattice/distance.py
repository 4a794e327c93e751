from __future__ import annotations

from .conversions import offset_to_cube, to_cube
from .coords import Axial, Coordinate, Cube, Double, Offset


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def hex_distance_axial(a: Axial, b: Axial) -> int:
    ax, ay, az = a.q, -a.q - a.r, a.r
    bx, by, bz = b.q, -b.q - b.r, b.r
    return (abs(ax - bx) + abs(ay - by) + abs(az - bz)) // 2


def hex_distance_double(a: Double, b: Double) -> int:
    return a.distance_to(b)


def hex_distance_offset(a: Offset, b: Offset) -> int:
    # Each side is converted with its own layout tag.
    return hex_distance_cube(offset_to_cube(a), offset_to_cube(b))


def hex_distance(a: Coordinate, b: Coordinate) -> int:
    """Return the step distance between two coordinates of any system."""

    return hex_distance_cube(to_cube(a), to_cube(b))


__all__ = [
    "hex_distance",
    "hex_distance_axial",
    "hex_distance_cube",
    "hex_distance_double",
    "hex_distance_offset",
]
