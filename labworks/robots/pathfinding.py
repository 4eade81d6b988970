"""Path search on game maps."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable
from itertools import count

from labworks.robots.constants import Cell, Direction
from labworks.robots.convert import to_direction
from labworks.robots.errors import WayNotFoundError
from labworks.robots.gamemap import GameMap
from labworks.robots.utils import cantor_index, sub_coords

Coords = tuple[int, int]


def heuristic(p1: Coords, p2: Coords) -> int:
    """Manhattan distance between two cells."""
    return abs(p1[0] - p2[0]) + abs(p1[1] - p2[1])


def _trace(parents: dict[Coords, Coords | None], current: Coords) -> list[Direction]:
    way = []
    parent = parents[current]
    while parent is not None:
        way.append(to_direction(sub_coords(current, parent)))
        current, parent = parent, parents[parent]
    return way


def a_star_search(
    game_map: GameMap,
    start: Coords,
    dest: Coords,
    is_robot: Callable[[Coords], bool] | None = None,
) -> list[Direction]:
    """Find a shortest walk from ``start`` to ``dest`` over walkable cells.

    The steps come last-first, so ``way.pop()`` gives the next move.
    Cells for which ``is_robot`` is true are avoided. Raises
    WayNotFoundError when ``dest`` cannot be reached.
    """
    parents: dict[Coords, Coords | None] = {start: None}
    costs = {start: 0}
    closed: set[Coords] = set()
    order = count(1)
    heap = [(heuristic(start, dest), 0, start)]

    while heap:
        _, _, current = heapq.heappop(heap)
        if current in closed:
            continue
        closed.add(current)
        if current == dest:
            return _trace(parents, current)

        for neighbour in game_map.good_neighbours(current, dest):
            if neighbour in closed or (is_robot is not None and is_robot(neighbour)):
                continue
            cost = costs[current] + 1
            if neighbour not in costs or cost < costs[neighbour]:
                costs[neighbour] = cost
                parents[neighbour] = current
                heapq.heappush(
                    heap, (cost + heuristic(neighbour, dest), next(order), neighbour)
                )

    raise WayNotFoundError("Last is not equal to destination")


def dijkstra_search(
    game_map: GameMap,
    start: Coords,
    is_traversable: Callable[[Coords], bool],
) -> list[Direction]:
    """Find the walk to the nearest unexplored cell of ``game_map``.

    A cell is unexplored when it is unknown or outside the map. The steps
    come last-first. Raises WayNotFoundError when every reachable cell is known.
    """
    width, height = game_map.size
    budget = cantor_index(width + 1, height + 1)

    parents: dict[Coords, Coords | None] = {start: None}
    queue = deque([start])

    for _ in range(budget):
        if not queue:
            break
        current = queue.popleft()
        if game_map.get_cell(current) in (Cell.UNKNOWN, Cell.NONE):
            return _trace(parents, current)
        for neighbour in GameMap.cell_neighbours(current):
            if neighbour in parents or not is_traversable(neighbour):
                continue
            parents[neighbour] = current
            queue.append(neighbour)

    raise WayNotFoundError("All cells are scanned or surrounded.")