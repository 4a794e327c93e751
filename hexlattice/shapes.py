"""Deterministic coordinate generators for common hex-map shapes.

Every generator is a pure function of its arguments and returns a list of
:class:`~hexlattice.coords.Cube` in a documented order, so two calls with the
same arguments always produce the same sequence.
"""

from __future__ import annotations

from typing import Tuple

from .conversions import cube_lerp, cube_round, offset_to_cube, to_cube
from .coords import CUBE_DIRECTIONS, Coordinate, Cube, CubeAxis, Offset, OffsetLayout
from .errors import ShapeDomainError

# Small asymmetric nudge keeps lerp samples off cell edges.
_LINE_NUDGE = (1e-6, 2e-6, -3e-6)


def _require_non_negative(name: str, value: int) -> None:
    if not isinstance(value, int) or value < 0:
        raise ShapeDomainError(f"{name} must be a non-negative integer, got {value!r}")


def ring(center: Coordinate, radius: int) -> list[Cube]:
    """Cells at exactly ``radius`` steps, clockwise from the north-east corner."""

    _require_non_negative("radius", radius)
    hub = to_cube(center)
    if radius == 0:
        return [hub]

    cells: list[Cube] = []
    for side in range(6):
        dx, dy, dz = CUBE_DIRECTIONS[side]
        current = hub + Cube(dx, dy, dz) * radius
        walk = (side + 2) % 6
        for _ in range(radius):
            cells.append(current)
            current = current.neighbor(walk)
    return cells


def spiral(center: Coordinate, radius: int) -> list[Cube]:
    """Rings ``0..radius`` concatenated, innermost first."""

    _require_non_negative("radius", radius)
    cells: list[Cube] = []
    for step in range(radius + 1):
        cells.extend(ring(center, step))
    return cells


def filled_hex(center: Coordinate, radius: int) -> list[Cube]:
    """Every cell within ``radius`` steps, ordered by x then z."""

    _require_non_negative("radius", radius)
    hub = to_cube(center)
    cells: list[Cube] = []
    for dx in range(-radius, radius + 1):
        for dz in range(max(-radius, -dx - radius), min(radius, -dx + radius) + 1):
            cells.append(hub + Cube(dx, -dx - dz, dz))
    return cells


def rectangle(
    width: int,
    height: int,
    layout: OffsetLayout,
    origin: Tuple[int, int] = (0, 0),
) -> list[Cube]:
    """Offset-rectangle of ``width`` columns by ``height`` rows, row-major."""

    _require_non_negative("width", width)
    _require_non_negative("height", height)
    if not isinstance(layout, OffsetLayout):
        raise ShapeDomainError(f"rectangle needs an OffsetLayout, got {layout!r}")
    col0, row0 = origin
    return [
        offset_to_cube(Offset(col0 + col, row0 + row, layout))
        for row in range(height)
        for col in range(width)
    ]


def parallelogram(
    first: int,
    second: int,
    axes: Tuple[CubeAxis, CubeAxis] = (CubeAxis.X, CubeAxis.Z),
    origin: Coordinate | None = None,
) -> list[Cube]:
    """Cells spanned by ``first`` steps along ``axes[0]`` and ``second`` along ``axes[1]``."""

    _require_non_negative("first", first)
    _require_non_negative("second", second)
    primary, secondary = axes
    if primary is secondary:
        raise ShapeDomainError("parallelogram axes must differ")
    (remaining,) = set(CubeAxis) - {primary, secondary}
    base = Cube.ORIGIN if origin is None else to_cube(origin)

    cells: list[Cube] = []
    for a in range(first):
        for b in range(second):
            parts = {primary: a, secondary: b, remaining: -a - b}
            offset = Cube(parts[CubeAxis.X], parts[CubeAxis.Y], parts[CubeAxis.Z])
            cells.append(base + offset)
    return cells


def line(start: Coordinate, end: Coordinate) -> list[Cube]:
    """Cells on the straight segment from ``start`` to ``end``, both included."""

    a = to_cube(start)
    b = to_cube(end)
    steps = a.distance_to(b)
    if steps == 0:
        return [a]

    ax, ay, az = (value + nudge for value, nudge in zip(a.to_tuple(), _LINE_NUDGE))
    bx, by, bz = (value + nudge for value, nudge in zip(b.to_tuple(), _LINE_NUDGE))
    return [
        cube_round(*cube_lerp((ax, ay, az), (bx, by, bz), step / steps))
        for step in range(steps + 1)
    ]


__all__ = [
    "filled_hex",
    "line",
    "parallelogram",
    "rectangle",
    "ring",
    "spiral",
]
