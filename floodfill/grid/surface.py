# floodfill/grid/surface.py
from __future__ import annotations
import pygame
from typing import Optional

from floodfill.grid.fill import Action, Predicate, flood_fill
from floodfill.grid.neighbors import NeighborFn

ColorLike = tuple[int, int, int] | tuple[int, int, int, int] | pygame.Color

def same_color(surface: pygame.Surface, x: int, y: int) -> Predicate:
    """True where a pixel matches the colour at (x, y) when this was called."""
    target = surface.get_at((x, y))

    def matches(px: int, py: int) -> bool:
        return surface.get_at((px, py)) == target

    return matches

def paint(surface: pygame.Surface, color: ColorLike) -> Action:
    c = pygame.Color(color)

    def put(px: int, py: int) -> None:
        surface.set_at((px, py), c)

    return put

def bucket_fill(
    surface: pygame.Surface,
    x: int,
    y: int,
    color: ColorLike,
    *,
    neighbors: Optional[NeighborFn] = None,
) -> int:
    """
    Paint-bucket: recolour the same-colour region containing (x, y).
    Returns the number of pixels painted (0 if the seed is off the surface).
    """
    w, h = surface.get_size()
    if not (0 <= x < w and 0 <= y < h):
        return 0

    put = paint(surface, color)
    painted = 0

    def count_and_put(px: int, py: int) -> None:
        nonlocal painted
        put(px, py)
        painted += 1

    # lock once for the whole fill instead of per get_at/set_at
    surface.lock()
    try:
        flood_fill(x, y, w, h, same_color(surface, x, y), count_and_put, neighbors)
    finally:
        surface.unlock()
    return painted
