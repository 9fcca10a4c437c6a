"""Pytest configuration - shared fill helpers."""
from __future__ import annotations

import pytest


class Recorder:
    """Counts every predicate/action call made by a fill."""

    def __init__(self, predicate=lambda x, y: True):
        self.predicate = predicate
        self.tested: list[tuple[int, int]] = []
        self.filled: list[tuple[int, int]] = []

    def to_fill(self, x, y):
        self.tested.append((x, y))
        return self.predicate(x, y)

    def fill(self, x, y):
        self.filled.append((x, y))


@pytest.fixture
def recorder():
    return Recorder
