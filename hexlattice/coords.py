"""Coordinate value types for the four supported hex addressing systems.

Direction convention
--------------------
Neighbours are enumerated starting with the north-east cell and proceeding
clockwise, assuming pointy-top hexes drawn with the y axis pointing down:

====  ===========  ===============
idx   direction    cube delta
====  ===========  ===============
0     north-east   ``(+1,  0, -1)``
1     east         ``(+1, -1,  0)``
2     south-east   ``( 0, -1, +1)``
3     south-west   ``(-1,  0, +1)``
4     west         ``(-1, +1,  0)``
5     north-west   ``( 0, +1, -1)``
====  ===========  ===============

Diagonals follow the same rule; diagonal ``i`` sits between neighbours ``i + 1``
and ``i + 2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

from .errors import InvalidCoordinateError, LayoutMismatchError

CubeDelta = Tuple[int, int, int]

CUBE_DIRECTIONS: Tuple[CubeDelta, ...] = (
    (+1, 0, -1),
    (+1, -1, 0),
    (0, -1, +1),
    (-1, 0, +1),
    (-1, +1, 0),
    (0, +1, -1),
)

CUBE_DIAGONALS: Tuple[CubeDelta, ...] = (
    (+1, -2, +1),
    (-1, -1, +2),
    (-2, +1, +1),
    (-1, +2, -1),
    (+1, +1, -2),
    (+2, -1, -1),
)


def _require_ints(kind: str, *values: object) -> None:
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidCoordinateError(
                f"{kind} components must be integers, got {value!r}"
            )


class CubeAxis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class OffsetLayout(Enum):
    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"

    @property
    def shoves_rows(self) -> bool:
        """True for the pointy-top layouts that shift every other row."""

        return self in (OffsetLayout.ODD_R, OffsetLayout.EVEN_R)


class DoubleLayout(Enum):
    DOUBLED_WIDTH = "doubled_width"  # pointy-top, columns step by two
    DOUBLED_HEIGHT = "doubled_height"  # flat-top, rows step by two


@dataclass(frozen=True, slots=True, order=True)
class Cube:
    """Canonical three-axis coordinate with ``x + y + z == 0``."""

    x: int
    y: int
    z: int

    ORIGIN: ClassVar["Cube"]

    def __post_init__(self) -> None:
        _require_ints("Cube", self.x, self.y, self.z)
        if self.x + self.y + self.z != 0:
            raise InvalidCoordinateError(
                f"For cube coords, x + y + z must be 0; got ({self.x}, {self.y}, {self.z})"
            )

    @classmethod
    def from_tuple(cls, values: Tuple[int, int, int]) -> "Cube":
        x, y, z = values
        return cls(x, y, z)

    def to_tuple(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.z

    # Vector arithmetic -----------------------------------------------------

    def __add__(self, other: "Cube") -> "Cube":
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Cube") -> "Cube":
        if not isinstance(other, Cube):
            return NotImplemented
        return Cube(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: int) -> "Cube":
        if not isinstance(factor, int):
            return NotImplemented
        return Cube(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Cube":
        return Cube(-self.x, -self.y, -self.z)

    # Adjacency -------------------------------------------------------------

    def neighbor(self, index: int) -> "Cube":
        dx, dy, dz = CUBE_DIRECTIONS[index % 6]
        return Cube(self.x + dx, self.y + dy, self.z + dz)

    def neighbors(self) -> list["Cube"]:
        return [self.neighbor(index) for index in range(6)]

    def diagonal(self, index: int) -> "Cube":
        dx, dy, dz = CUBE_DIAGONALS[index % 6]
        return Cube(self.x + dx, self.y + dy, self.z + dz)

    def diagonals(self) -> list["Cube"]:
        return [self.diagonal(index) for index in range(6)]

    def distance_to(self, other: "Cube") -> int:
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        dz = abs(self.z - other.z)
        return (dx + dy + dz) // 2

    # Rotation and reflection ----------------------------------------------

    def rotate_cw(self, turns: int = 1, center: "Cube | None" = None) -> "Cube":
        """Rotate clockwise by ``turns`` sixths of a full turn about ``center``."""

        _require_ints("Rotation", turns)
        pivot = Cube.ORIGIN if center is None else center
        x, y, z = (self - pivot).to_tuple()
        for _ in range(turns % 6):
            x, y, z = -z, -x, -y
        return Cube(x, y, z) + pivot

    def rotate_ccw(self, turns: int = 1, center: "Cube | None" = None) -> "Cube":
        """Rotate counter-clockwise by ``turns`` sixths of a full turn about ``center``."""

        _require_ints("Rotation", turns)
        pivot = Cube.ORIGIN if center is None else center
        x, y, z = (self - pivot).to_tuple()
        for _ in range(turns % 6):
            x, y, z = -y, -z, -x
        return Cube(x, y, z) + pivot

    def rotate(self, turns: int, center: "Cube | None" = None) -> "Cube":
        """Rotate by 60 degree steps; positive turns are clockwise."""

        _require_ints("Rotation", turns)
        if turns >= 0:
            return self.rotate_cw(turns, center)
        return self.rotate_ccw(-turns, center)

    def reflect(self, axis: CubeAxis, center: "Cube | None" = None) -> "Cube":
        """Mirror across the line through ``center`` running along ``axis``."""

        pivot = Cube.ORIGIN if center is None else center
        x, y, z = (self - pivot).to_tuple()
        if axis is CubeAxis.X:
            mirrored = Cube(x, z, y)
        elif axis is CubeAxis.Y:
            mirrored = Cube(z, y, x)
        elif axis is CubeAxis.Z:
            mirrored = Cube(y, x, z)
        else:
            raise InvalidCoordinateError(f"Unknown axis {axis!r}")
        return mirrored + pivot


Cube.ORIGIN = Cube(0, 0, 0)


@dataclass(frozen=True, slots=True, order=True)
class Axial:
    q: int
    r: int

    ORIGIN: ClassVar["Axial"]

    def __post_init__(self) -> None:
        _require_ints("Axial", self.q, self.r)

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: "Axial") -> "Axial":
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: "Axial") -> "Axial":
        if not isinstance(other, Axial):
            return NotImplemented
        return Axial(self.q - other.q, self.r - other.r)

    def __mul__(self, factor: int) -> "Axial":
        if not isinstance(factor, int):
            return NotImplemented
        return Axial(self.q * factor, self.r * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Axial":
        return Axial(-self.q, -self.r)

    def distance_to(self, other: "Axial") -> int:
        dq = abs(self.q - other.q)
        dr = abs(self.r - other.r)
        ds = abs(self.s - other.s)
        return (dq + dr + ds) // 2


Axial.ORIGIN = Axial(0, 0)


@dataclass(frozen=True, slots=True)
class Double:
    """Doubled coordinate; ``col`` and ``row`` always share parity."""

    col: int
    row: int
    layout: DoubleLayout

    def __post_init__(self) -> None:
        _require_ints("Double", self.col, self.row)
        if not isinstance(self.layout, DoubleLayout):
            raise InvalidCoordinateError(f"Unknown doubled layout {self.layout!r}")
        if (self.col - self.row) % 2 != 0:
            raise InvalidCoordinateError(
                f"Doubled coordinate ({self.col}, {self.row}) has mismatched parity"
            )

    def distance_to(self, other: "Double") -> int:
        if other.layout is not self.layout:
            raise LayoutMismatchError(
                f"Cannot measure {self.layout.value} against {other.layout.value}"
            )
        dcol = abs(self.col - other.col)
        drow = abs(self.row - other.row)
        if self.layout is DoubleLayout.DOUBLED_WIDTH:
            return drow + max(0, (dcol - drow) // 2)
        return dcol + max(0, (drow - dcol) // 2)


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # q-like
    row: int  # r-like
    layout: OffsetLayout

    def __post_init__(self) -> None:
        _require_ints("Offset", self.col, self.row)
        if not isinstance(self.layout, OffsetLayout):
            raise InvalidCoordinateError(f"Unknown offset layout {self.layout!r}")


Coordinate = Cube | Axial | Double | Offset


__all__ = [
    "Axial",
    "CUBE_DIAGONALS",
    "CUBE_DIRECTIONS",
    "Coordinate",
    "Cube",
    "CubeAxis",
    "Double",
    "DoubleLayout",
    "Offset",
    "OffsetLayout",
]
