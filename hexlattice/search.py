"""Graph searches driven by neighbour callables.

These work on any node type, including the unbounded hex lattice, where the
caller supplies ``passable`` for obstacles. Both path searches give up after
``max_expansions`` expanded nodes, so a missing route always terminates;
``max_depth``/``max_cost`` tighten that bound.
"""

from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import Any, Callable, Hashable, Iterable, Tuple

from .errors import ShapeDomainError

log = logging.getLogger(__name__)

NeighborFn = Callable[[Any], Iterable[Any]]

DEFAULT_MAX_EXPANSIONS = 50_000


def _always(_node: Any) -> bool:
    return True


def _check_expansions(max_expansions: int) -> None:
    if isinstance(max_expansions, bool) or not isinstance(max_expansions, int) or max_expansions < 1:
        raise ShapeDomainError(f"max_expansions must be a positive integer, got {max_expansions!r}")


def _walk_back(came_from: dict, node: Hashable) -> list:
    rev = [node]
    while node in came_from:
        node = came_from[node]
        rev.append(node)
    rev.reverse()
    return rev


def breadth_first_path(
    start: Hashable,
    goal: Hashable,
    neighbors: NeighborFn,
    *,
    passable: Callable[[Any], bool] = _always,
    max_depth: int | None = None,
    max_expansions: int = DEFAULT_MAX_EXPANSIONS,
) -> list | None:
    """Shortest unweighted path as a list of nodes, or ``None`` if unreachable.

    ``None`` is also returned once ``max_expansions`` nodes have been expanded
    without reaching ``goal``.
    """

    if max_depth is not None and max_depth < 0:
        raise ShapeDomainError("max_depth must be non-negative")
    _check_expansions(max_expansions)
    if start == goal:
        return [start]

    came_from: dict[Hashable, Hashable] = {}
    seen = {start}
    frontier: deque[tuple[Hashable, int]] = deque([(start, 0)])
    expanded = 0
    while frontier:
        current, depth = frontier.popleft()
        if max_depth is not None and depth >= max_depth:
            continue
        if expanded >= max_expansions:
            log.debug("Breadth-first search gave up after %d expansions", expanded)
            return None
        expanded += 1
        for nxt in neighbors(current):
            if nxt in seen or not passable(nxt):
                continue
            seen.add(nxt)
            came_from[nxt] = current
            if nxt == goal:
                return _walk_back(came_from, nxt)
            frontier.append((nxt, depth + 1))
    return None


def astar(
    start: Hashable,
    goal: Hashable,
    neighbors: NeighborFn,
    heuristic: Callable[[Any, Any], float],
    *,
    cost: Callable[[Any, Any], float] = lambda a, b: 1.0,
    passable: Callable[[Any], bool] = _always,
    max_cost: float | None = None,
    max_expansions: int = DEFAULT_MAX_EXPANSIONS,
) -> Tuple[list | None, float]:
    """Generic A* over arbitrary node types. Returns (path_list, total_cost) or (None, inf) if no path."""
    _check_expansions(max_expansions)
    g = {start: 0.0}
    open_heap: list[tuple[float, int, float, Hashable]] = []
    push_id = 0
    heapq.heappush(open_heap, (heuristic(start, goal), push_id, 0.0, start))
    came_from: dict[Hashable, Hashable] = {}
    expanded = 0

    while open_heap:
        _, _, queued_g, current = heapq.heappop(open_heap)
        if queued_g > g[current]:
            continue  # stale entry, a cheaper route was queued later
        if current == goal:
            return _walk_back(came_from, current), g[goal]
        if expanded >= max_expansions:
            log.debug("A* search gave up after %d expansions", expanded)
            break
        expanded += 1

        for nxt in neighbors(current):
            if not passable(nxt):
                continue
            step = float(cost(current, nxt))
            if step <= 0:
                raise ShapeDomainError(f"step cost must be positive, got {step}")
            tentative = g[current] + step
            if max_cost is not None and tentative > max_cost:
                continue
            if tentative < g.get(nxt, float("inf")):
                came_from[nxt] = current
                g[nxt] = tentative
                push_id += 1
                heapq.heappush(
                    open_heap,
                    (tentative + float(heuristic(nxt, goal)), push_id, tentative, nxt),
                )

    return None, float("inf")


def reachable(
    start: Hashable,
    steps: int,
    neighbors: NeighborFn,
    *,
    passable: Callable[[Any], bool] = _always,
) -> dict[Hashable, int]:
    """Map every node within ``steps`` moves of ``start`` to its move count."""

    if steps < 0:
        raise ShapeDomainError("steps must be non-negative")
    seen: dict[Hashable, int] = {start: 0}
    fringe = [start]
    for depth in range(1, steps + 1):
        next_fringe = []
        for node in fringe:
            for nxt in neighbors(node):
                if nxt in seen or not passable(nxt):
                    continue
                seen[nxt] = depth
                next_fringe.append(nxt)
        fringe = next_fringe
    return seen


__all__ = ["astar", "breadth_first_path", "reachable"]
