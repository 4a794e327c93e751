"""Exception hierarchy shared by every hexlattice module."""

from __future__ import annotations


class HexLatticeError(Exception):
    """Base class for all errors raised by hexlattice."""


class InvalidCoordinateError(HexLatticeError, ValueError):
    """A coordinate was built from values that name no cell of the lattice."""


class LayoutMismatchError(InvalidCoordinateError):
    """An offset or doubled coordinate carries a layout other than the expected one."""


class ShapeDomainError(HexLatticeError, ValueError):
    """A generator or search received a parameter outside its domain."""


class CellNotFoundError(HexLatticeError, KeyError):
    """A strict grid accessor was asked for a cell that is not present."""

    def __init__(self, coord: object) -> None:
        super().__init__(coord)
        self.coord = coord

    def __str__(self) -> str:
        return f"no cell at {self.coord!r}"


class NoPathError(HexLatticeError):
    """Two present cells are not connected in the adjacency graph."""

    def __init__(self, start: object, goal: object) -> None:
        super().__init__(f"no path from {start!r} to {goal!r}")
        self.start = start
        self.goal = goal


__all__ = [
    "CellNotFoundError",
    "HexLatticeError",
    "InvalidCoordinateError",
    "LayoutMismatchError",
    "NoPathError",
    "ShapeDomainError",
]
