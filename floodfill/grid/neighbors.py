# floodfill/grid/neighbors.py
from __future__ import annotations
from typing import Callable, Iterable

Coord = tuple[int, int]
NeighborFn = Callable[[int, int], list[Coord]]

OFFSETS_4: tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
OFFSETS_8: tuple[Coord, ...] = (
    (1, 0), (1, 1), (1, -1),
    (-1, 0), (-1, 1), (-1, -1),
    (0, 1), (0, -1),
)

def neighbors4(x: int, y: int) -> list[Coord]:
    """Left, right, up, down. No bounds check."""
    return [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]

def neighbors8(x: int, y: int) -> list[Coord]:
    """Orthogonal + diagonal neighbours. No bounds check."""
    return [(x + dx, y + dy) for dx, dy in OFFSETS_8]

def from_offsets(offsets: Iterable[Coord]) -> NeighborFn:
    """
    Build a neighbour function from (dx, dy) steps, e.g. knight moves:
    from_offsets([(1, 2), (2, 1), (-1, 2), ...]).
    """
    table = tuple((int(dx), int(dy)) for dx, dy in offsets)

    def neighbors(x: int, y: int) -> list[Coord]:
        return [(x + dx, y + dy) for dx, dy in table]

    return neighbors
