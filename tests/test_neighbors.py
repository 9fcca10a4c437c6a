"""Tests for the stock neighbour generators."""
from __future__ import annotations

from floodfill.grid.neighbors import OFFSETS_4, OFFSETS_8, from_offsets, neighbors4, neighbors8


def test_four_neighbours_are_orthogonal():
    assert set(neighbors4(5, 5)) == {(4, 5), (6, 5), (5, 4), (5, 6)}
    assert len(neighbors4(5, 5)) == 4


def test_eight_neighbours_add_diagonals():
    got = neighbors8(0, 0)
    assert len(got) == 8
    assert set(got) == {(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(0, 0)}


def test_no_bounds_check():
    assert (-1, 0) in neighbors4(0, 0)
    assert (-1, -1) in neighbors8(0, 0)


def test_from_offsets_reproduces_stock_tables():
    assert set(from_offsets(OFFSETS_4)(3, 7)) == set(neighbors4(3, 7))
    assert from_offsets(OFFSETS_8)(3, 7) == neighbors8(3, 7)


def test_from_offsets_copies_input():
    offsets = [(1, 0)]
    step = from_offsets(offsets)
    offsets.append((0, 1))
    assert step(0, 0) == [(1, 0)]
