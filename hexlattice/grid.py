"""Sparse hex-grid container backed by a networkx adjacency graph.

Cells are nodes keyed by :class:`~hexlattice.coords.Cube`, with the caller's
payload stored on the node under ``"payload"``. An edge joins two cells exactly
when both are present and one step apart, so holes and irregular borders need
no special handling. Obstacles are simply cells that were never inserted.
"""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Sequence,
    TypeAlias,
    TypeVar,
)

import networkx as nx

from .config import GridSettings
from .conversions import cube_to_axial, cube_to_double, cube_to_offset, to_cube
from .coords import Axial, Coordinate, Cube, Double, Offset
from .errors import (
    CellNotFoundError,
    LayoutMismatchError,
    NoPathError,
    ShapeDomainError,
)
from . import shapes

log = logging.getLogger(__name__)

T = TypeVar("T")
CellCost = Callable[[Cube], float]

if TYPE_CHECKING:  # pragma: no cover - typing only
    HexGraph: TypeAlias = nx.Graph[Cube]
else:  # pragma: no cover - runtime alias without subscripting
    HexGraph: TypeAlias = nx.Graph

_MISSING: Any = object()
_COORD_TYPES = (Cube, Axial, Double, Offset)


class HexGrid(Generic[T]):
    """Mapping of hex cells to payloads with lattice adjacency kept as graph edges.

    Every method that takes a coordinate accepts any of the four systems.
    Offset and doubled coordinates must carry the layouts fixed by
    ``settings`` unless ``settings.strict_layouts`` is off. Only ``in`` is
    lenient about this and answers ``False`` for a foreign layout.

    The grid is not thread-safe; concurrent writers must be serialised by the
    caller.
    """

    def __init__(self, settings: GridSettings | None = None) -> None:
        self.settings = settings if settings is not None else GridSettings()
        self._graph: HexGraph = nx.Graph()

    # --- Construction --------------------------------------------------------

    @classmethod
    def from_coords(
        cls,
        coords: Iterable[Coordinate],
        payload: T | None = None,
        *,
        factory: Callable[[Cube], T] | None = None,
        settings: GridSettings | None = None,
    ) -> "HexGrid[T]":
        """Build a grid holding ``coords``; ``factory`` overrides ``payload`` per cell."""

        grid: HexGrid[T] = cls(settings)
        for coord in coords:
            cube = grid._key(coord)
            grid.insert(cube, factory(cube) if factory is not None else payload)
        return grid

    @classmethod
    def hexagon(
        cls,
        radius: int,
        payload: T | None = None,
        *,
        factory: Callable[[Cube], T] | None = None,
        center: Coordinate | None = None,
        settings: GridSettings | None = None,
    ) -> "HexGrid[T]":
        hub = Cube.ORIGIN if center is None else cls(settings)._key(center)
        return cls.from_coords(
            shapes.filled_hex(hub, radius), payload, factory=factory, settings=settings
        )

    @classmethod
    def rectangle(
        cls,
        width: int,
        height: int,
        payload: T | None = None,
        *,
        factory: Callable[[Cube], T] | None = None,
        settings: GridSettings | None = None,
    ) -> "HexGrid[T]":
        """Offset rectangle laid out in ``settings.offset_layout``."""

        resolved = settings if settings is not None else GridSettings()
        coords = shapes.rectangle(width, height, resolved.offset_layout)
        return cls.from_coords(coords, payload, factory=factory, settings=resolved)

    # --- Keys ----------------------------------------------------------------

    def _key(self, coord: Coordinate) -> Cube:
        if self.settings.strict_layouts:
            if isinstance(coord, Offset) and coord.layout is not self.settings.offset_layout:
                raise LayoutMismatchError(
                    f"{coord!r} does not use the grid's {self.settings.offset_layout.value} layout"
                )
            if isinstance(coord, Double) and coord.layout is not self.settings.double_layout:
                raise LayoutMismatchError(
                    f"{coord!r} does not use the grid's {self.settings.double_layout.value} layout"
                )
        return to_cube(coord)

    def _present(self, coord: Coordinate) -> Cube:
        cube = self._key(coord)
        if cube not in self._graph:
            raise CellNotFoundError(cube)
        return cube

    # --- Cell storage --------------------------------------------------------

    def insert(self, coord: Coordinate, payload: T) -> None:
        """Add or replace the cell at ``coord`` and link it to present neighbours."""

        cube = self._key(coord)
        if cube in self._graph:
            self._graph.nodes[cube]["payload"] = payload
            return
        self._graph.add_node(cube, payload=payload)
        for neighbor in cube.neighbors():
            if neighbor in self._graph:
                self._graph.add_edge(cube, neighbor)
        log.debug("Inserted cell %s with %d edges", cube, self._graph.degree(cube))

    def remove(self, coord: Coordinate) -> bool:
        """Remove the cell and its edges; returns ``False`` if it was absent."""

        cube = self._key(coord)
        if cube not in self._graph:
            return False
        self._graph.remove_node(cube)
        log.debug("Removed cell %s", cube)
        return True

    def pop(self, coord: Coordinate, default: Any = _MISSING) -> Any:
        """Remove the cell and return its payload, like :meth:`dict.pop`."""

        cube = self._key(coord)
        if cube not in self._graph:
            if default is _MISSING:
                raise CellNotFoundError(cube)
            return default
        payload = self._graph.nodes[cube]["payload"]
        self.remove(cube)
        return payload

    def get(self, coord: Coordinate, default: T | None = None) -> T | None:
        """Payload at ``coord`` or ``default``.

        A stored ``None`` payload looks the same as an absent cell; use
        ``coord in grid`` when the difference matters.
        """

        cube = self._key(coord)
        if cube not in self._graph:
            return default
        return self._graph.nodes[cube]["payload"]

    def update(self, coord: Coordinate, func: Callable[[T], T]) -> T | None:
        """Replace the payload with ``func(payload)`` and return the new payload.

        Returns ``None`` when the cell is absent, which is indistinguishable
        from ``func`` itself returning ``None``; check ``coord in grid`` first
        if that matters.
        """

        cube = self._key(coord)
        if cube not in self._graph:
            return None
        data = self._graph.nodes[cube]
        data["payload"] = func(data["payload"])
        return data["payload"]

    def clear(self) -> None:
        self._graph.clear()

    def __getitem__(self, coord: Coordinate) -> T:
        return self._graph.nodes[self._present(coord)]["payload"]

    def __setitem__(self, coord: Coordinate, payload: T) -> None:
        self.insert(coord, payload)

    def __delitem__(self, coord: Coordinate) -> None:
        self._graph.remove_node(self._present(coord))

    def __contains__(self, coord: object) -> bool:
        # Membership never raises: foreign layouts are simply not cells here.
        if not isinstance(coord, _COORD_TYPES):
            return False
        try:
            cube = self._key(coord)
        except LayoutMismatchError:
            return False
        return cube in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __iter__(self) -> Iterator[Cube]:
        return iter(self._graph.nodes)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(cells={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()})"
        )

    def coords(self) -> list[Cube]:
        return list(self._graph.nodes)

    def values(self) -> list[T]:
        return [data["payload"] for _, data in self._graph.nodes(data=True)]

    def items(self) -> list[tuple[Cube, T]]:
        return [(cube, data["payload"]) for cube, data in self._graph.nodes(data=True)]

    # --- Topology ------------------------------------------------------------

    @property
    def graph(self) -> HexGraph:
        """Read-only view of the adjacency graph."""

        return self._graph.copy(as_view=True)

    def neighbors(self, coord: Coordinate) -> list[Cube]:
        """Present lattice neighbours, in the canonical clockwise-from-north-east order."""

        cube = self._key(coord)
        if cube in self._graph:
            adjacent = self._graph.adj[cube]
            return [n for n in cube.neighbors() if n in adjacent]
        return [n for n in cube.neighbors() if n in self._graph]

    def edges(self) -> list[tuple[Cube, Cube]]:
        return list(self._graph.edges)

    def degree(self, coord: Coordinate) -> int:
        return int(self._graph.degree(self._present(coord)))

    def components(self) -> list[set[Cube]]:
        return [set(component) for component in nx.connected_components(self._graph)]

    def distance(self, a: Coordinate, b: Coordinate) -> int:
        """Exact step distance; neither coordinate has to be present."""

        return self._key(a).distance_to(self._key(b))

    def line(self, a: Coordinate, b: Coordinate) -> list[Cube]:
        return shapes.line(self._key(a), self._key(b))

    def cells_on_line(self, a: Coordinate, b: Coordinate) -> list[Cube]:
        return [cube for cube in self.line(a, b) if cube in self._graph]

    # --- Traversal -----------------------------------------------------------

    def path(
        self, a: Coordinate, b: Coordinate, *, cost: CellCost | None = None
    ) -> list[Cube]:
        """Shortest route between two present cells over the adjacency graph.

        Without ``cost`` every step counts one and a breadth-first search is
        used. With ``cost`` the price of entering each cell is ``cost(cell)``
        and an A* search scaled by ``settings.min_step_cost`` is used.
        """

        start = self._present(a)
        goal = self._present(b)
        try:
            if cost is None:
                return list(nx.shortest_path(self._graph, start, goal))

            min_step = self.settings.min_step_cost

            def heuristic(node: Cube, target: Cube) -> float:
                return node.distance_to(target) * min_step

            return list(
                nx.astar_path(
                    self._graph,
                    start,
                    goal,
                    heuristic=heuristic,
                    weight=self._weight_function(cost),
                )
            )
        except nx.NetworkXNoPath as exc:
            log.debug("No path between %s and %s", start, goal)
            raise NoPathError(start, goal) from exc

    def path_cost(self, path: Sequence[Coordinate], cost: CellCost | None = None) -> float:
        """Total price of walking ``path``; each step must follow an edge."""

        cubes = [self._key(coord) for coord in path]
        total = 0.0
        for origin, destination in zip(cubes, cubes[1:]):
            if not self._graph.has_edge(origin, destination):
                raise NoPathError(origin, destination)
            total += 1.0 if cost is None else _checked_cost(cost, destination)
        return total

    def reachable(self, start: Coordinate, steps: int) -> dict[Cube, int]:
        """Cells within ``steps`` edges of ``start`` mapped to their edge count."""

        if steps < 0:
            raise ShapeDomainError("steps must be non-negative")
        origin = self._present(start)
        return dict(nx.single_source_shortest_path_length(self._graph, origin, cutoff=steps))

    @staticmethod
    def _weight_function(cost: CellCost) -> Callable[[Cube, Cube, dict], float]:
        def weight(_origin: Cube, destination: Cube, _data: dict) -> float:
            return _checked_cost(cost, destination)

        return weight

    # --- Conversion ----------------------------------------------------------

    def to_axial(self, coord: Coordinate) -> Axial:
        return cube_to_axial(self._key(coord))

    def to_offset(self, coord: Coordinate) -> Offset:
        return cube_to_offset(self._key(coord), self.settings.offset_layout)

    def to_double(self, coord: Coordinate) -> Double:
        return cube_to_double(self._key(coord), self.settings.double_layout)

    def offset(self, col: int, row: int) -> Cube:
        """Cube for ``(col, row)`` read in the grid's offset layout."""

        return to_cube(Offset(col, row, self.settings.offset_layout))


def _checked_cost(cost: CellCost, cell: Cube) -> float:
    value = float(cost(cell))
    if value <= 0:
        raise ShapeDomainError(f"cost for {cell} must be positive, got {value}")
    return value


__all__ = ["CellCost", "HexGraph", "HexGrid"]
