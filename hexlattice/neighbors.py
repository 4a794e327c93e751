from __future__ import annotations

from typing import Iterable

from .conversions import (
    cube_to_double,
    cube_to_offset,
    double_to_cube,
    offset_to_cube,
)
from .coords import Axial, CUBE_DIAGONALS, CUBE_DIRECTIONS, Cube, Double, Offset

_AXIAL_DIRS = tuple(Axial(dx, dz) for dx, _dy, dz in CUBE_DIRECTIONS)


def neighbors_axial(a: Axial) -> Iterable[Axial]:
    for d in _AXIAL_DIRS:
        yield Axial(a.q + d.q, a.r + d.r)


def neighbors_cube(c: Cube) -> Iterable[Cube]:
    for dx, dy, dz in CUBE_DIRECTIONS:
        yield Cube(c.x + dx, c.y + dy, c.z + dz)


def diagonals_cube(c: Cube) -> Iterable[Cube]:
    for dx, dy, dz in CUBE_DIAGONALS:
        yield Cube(c.x + dx, c.y + dy, c.z + dz)


def neighbors_double(d: Double) -> Iterable[Double]:
    for n in neighbors_cube(double_to_cube(d)):
        yield cube_to_double(n, d.layout)


def neighbors_offset(o: Offset) -> Iterable[Offset]:
    # Offset deltas depend on the parity of the row (or column); going through
    # cube coordinates keeps the canonical direction order for all four layouts.
    for n in neighbors_cube(offset_to_cube(o)):
        yield cube_to_offset(n, o.layout)


def _inside(col: int, row: int, width: int, height: int) -> bool:
    return 0 <= col < width and 0 <= row < height


def neighbors_axial_bounded(a: Axial, width: int, height: int) -> Iterable[Axial]:
    """Neighbours with ``0 <= q < width`` and ``0 <= r < height``."""

    return (n for n in neighbors_axial(a) if _inside(n.q, n.r, width, height))


def neighbors_offset_bounded(o: Offset, width: int, height: int) -> Iterable[Offset]:
    """Neighbours that stay inside a ``width`` x ``height`` offset map."""

    return (n for n in neighbors_offset(o) if _inside(n.col, n.row, width, height))


__all__ = [
    "diagonals_cube",
    "neighbors_axial",
    "neighbors_axial_bounded",
    "neighbors_cube",
    "neighbors_double",
    "neighbors_offset",
    "neighbors_offset_bounded",
]
