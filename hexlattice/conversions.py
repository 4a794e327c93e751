from __future__ import annotations

from enum import Enum
from typing import Tuple

from .coords import (
    Axial,
    Coordinate,
    Cube,
    Double,
    DoubleLayout,
    Offset,
    OffsetLayout,
)
from .errors import InvalidCoordinateError

FractionalCube = Tuple[float, float, float]


class CoordSys(Enum):
    """Labels for the supported coordinate systems."""

    CUBE = "cube"
    AXIAL = "axial"
    DOUBLE = "double"
    OFFSET = "offset"


def axial_to_cube(a: Axial) -> Cube:
    x = a.q
    z = a.r
    y = -x - z
    return Cube(x, y, z)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.x, c.z)


def cube_to_double(c: Cube, layout: DoubleLayout) -> Double:
    if layout == DoubleLayout.DOUBLED_WIDTH:
        col = 2 * c.x + c.z
        row = c.z
    elif layout == DoubleLayout.DOUBLED_HEIGHT:
        col = c.x
        row = 2 * c.z + c.x
    else:
        raise InvalidCoordinateError(f"Unknown doubled layout {layout!r}")
    return Double(col, row, layout)


def double_to_cube(d: Double) -> Cube:
    col, row, layout = d.col, d.row, d.layout
    if layout == DoubleLayout.DOUBLED_WIDTH:
        x = (col - row) // 2
        z = row
    elif layout == DoubleLayout.DOUBLED_HEIGHT:
        x = col
        z = (row - col) // 2
    else:
        raise InvalidCoordinateError(f"Unknown doubled layout {layout!r}")
    return Cube(x, -x - z, z)


def _shove(line: int, layout: OffsetLayout) -> int:
    """Half-cell shift applied to an offset row (or column) index."""

    if layout in (OffsetLayout.ODD_R, OffsetLayout.ODD_Q):
        return (line - (line & 1)) // 2
    return (line + (line & 1)) // 2


def axial_to_offset(a: Axial, layout: OffsetLayout) -> Offset:
    if not isinstance(layout, OffsetLayout):
        raise InvalidCoordinateError(f"Unknown offset layout {layout!r}")
    if layout.shoves_rows:
        return Offset(a.q + _shove(a.r, layout), a.r, layout)
    return Offset(a.q, a.r + _shove(a.q, layout), layout)


def offset_to_axial(o: Offset) -> Axial:
    if o.layout.shoves_rows:
        return Axial(o.col - _shove(o.row, o.layout), o.row)
    return Axial(o.col, o.row - _shove(o.col, o.layout))


def cube_to_offset(c: Cube, layout: OffsetLayout) -> Offset:
    return axial_to_offset(cube_to_axial(c), layout)


def offset_to_cube(o: Offset) -> Cube:
    return axial_to_cube(offset_to_axial(o))


def coord_system(coord: Coordinate) -> CoordSys:
    if isinstance(coord, Cube):
        return CoordSys.CUBE
    if isinstance(coord, Axial):
        return CoordSys.AXIAL
    if isinstance(coord, Double):
        return CoordSys.DOUBLE
    if isinstance(coord, Offset):
        return CoordSys.OFFSET
    raise InvalidCoordinateError(f"{coord!r} is not a hex coordinate")


def to_cube(coord: Coordinate) -> Cube:
    """Convert any supported coordinate to its cube equivalent."""

    system = coord_system(coord)
    if system is CoordSys.CUBE:
        return coord  # type: ignore[return-value]
    if system is CoordSys.AXIAL:
        return axial_to_cube(coord)  # type: ignore[arg-type]
    if system is CoordSys.DOUBLE:
        return double_to_cube(coord)  # type: ignore[arg-type]
    return offset_to_cube(coord)  # type: ignore[arg-type]


def convert(
    coord: Coordinate,
    system: CoordSys,
    layout: OffsetLayout | DoubleLayout | None = None,
) -> Coordinate:
    """Convert ``coord`` into ``system``, routing through cube coordinates.

    Doubled and offset targets need an explicit ``layout`` of the matching
    enum; the layout is never guessed.
    """

    cube = to_cube(coord)
    if system is CoordSys.CUBE:
        return cube
    if system is CoordSys.AXIAL:
        return cube_to_axial(cube)
    if system is CoordSys.DOUBLE:
        if not isinstance(layout, DoubleLayout):
            raise InvalidCoordinateError("Doubled targets need a DoubleLayout")
        return cube_to_double(cube, layout)
    if system is CoordSys.OFFSET:
        if not isinstance(layout, OffsetLayout):
            raise InvalidCoordinateError("Offset targets need an OffsetLayout")
        return cube_to_offset(cube, layout)
    raise InvalidCoordinateError(f"Unknown coordinate system {system!r}")


# --- Fractional coordinates ----------------------------------------------------


def cube_lerp(a: Cube | FractionalCube, b: Cube | FractionalCube, t: float) -> FractionalCube:
    ax, ay, az = a.to_tuple() if isinstance(a, Cube) else a
    bx, by, bz = b.to_tuple() if isinstance(b, Cube) else b
    return (
        ax + (bx - ax) * t,
        ay + (by - ay) * t,
        az + (bz - az) * t,
    )


def cube_round(x: float, y: float, z: float) -> Cube:
    """Snap a fractional cube position to the nearest lattice cell."""

    rx = round(x)
    ry = round(y)
    rz = round(z)

    x_diff = abs(rx - x)
    y_diff = abs(ry - y)
    z_diff = abs(rz - z)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -ry - rz
    elif y_diff > z_diff:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return Cube(int(rx), int(ry), int(rz))


def axial_round(q: float, r: float) -> Axial:
    return cube_to_axial(cube_round(q, -q - r, r))


__all__ = [
    "CoordSys",
    "FractionalCube",
    "axial_round",
    "axial_to_cube",
    "axial_to_offset",
    "convert",
    "coord_system",
    "cube_lerp",
    "cube_round",
    "cube_to_axial",
    "cube_to_double",
    "cube_to_offset",
    "double_to_cube",
    "offset_to_axial",
    "offset_to_cube",
    "to_cube",
]
