# floodfill/grid/fill.py
from __future__ import annotations
from collections import deque
from typing import Callable, Optional

from floodfill.grid.neighbors import Coord, NeighborFn, neighbors4

Predicate = Callable[[int, int], bool]
Action = Callable[[int, int], None]

def flood_fill(
    seed_x: int,
    seed_y: int,
    width: int,
    height: int,
    to_fill: Optional[Predicate],
    fill: Optional[Action],
    neighbors: Optional[NeighborFn] = None,
) -> None:
    """
    Breadth-first fill of a width x height grid starting at (seed_x, seed_y).

    The seed is always filled. Every other in-bounds cell reachable through
    `neighbors` is tested with `to_fill` at most once; cells that pass are
    handed to `fill` (exactly once each) and expanded in turn.

    Missing `to_fill`/`fill` or a seed outside the grid makes this a no-op.
    `neighbors` defaults to 4-connectivity.
    """
    if neighbors is None:
        neighbors = neighbors4

    if to_fill is None:
        return  # nothing decides what to fill
    if fill is None:
        return  # filling would do nothing
    if not (0 <= seed_x < width and 0 <= seed_y < height):
        return  # seed outside the grid

    # 1 = queued or already filled
    done = bytearray(width * height)
    done[seed_y * width + seed_x] = 1

    q: deque[Coord] = deque([(seed_x, seed_y)])
    while q:
        x, y = q.popleft()
        fill(x, y)
        for nx, ny in neighbors(x, y):
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            i = ny * width + nx
            if done[i]:
                continue
            # mark before testing so each cell is tested only once
            done[i] = 1
            if to_fill(nx, ny):
                q.append((nx, ny))

def collect_region(
    seed_x: int,
    seed_y: int,
    width: int,
    height: int,
    to_fill: Optional[Predicate],
    neighbors: Optional[NeighborFn] = None,
) -> set[Coord]:
    """Same traversal as flood_fill, but returns the filled cells."""
    region: set[Coord] = set()

    def record(x: int, y: int) -> None:
        region.add((x, y))

    flood_fill(seed_x, seed_y, width, height, to_fill, record, neighbors)
    return region
