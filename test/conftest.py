"""
Shared helpers: build boards from pictures and recount areas from scratch.
"""

import pytest

from gamma.engine.moves import commit_change, plan_change
from gamma.engine.state import Grid, Position


def grid_from_rows(rows: list[str], players: int, max_areas: int) -> Grid:
    """
    Build a Grid from rows drawn top row first, one character per field
    ('.' free, '1'-'9' player). Area counts are kept consistent by going
    through plan/commit, but the area limit is not enforced.
    """
    height = len(rows)
    width = len(rows[0])
    grid = Grid.create(width, height, players, max_areas)
    for row_index, row in enumerate(rows):
        y = height - 1 - row_index
        for x, ch in enumerate(row):
            if ch != ".":
                commit_change(grid, plan_change(grid, int(ch), Position(x, y)))
    return grid


def count_areas(grid: Grid, owner: int) -> int:
    """Number of areas of owner, counted by flooding the whole board."""
    seen = set()
    areas = 0
    for start in grid.positions():
        if start in seen or grid.owner_at(start) != owner:
            continue
        areas += 1
        stack = [start]
        seen.add(start)
        while stack:
            position = stack.pop()
            for neighbor in grid.neighbors(position):
                if neighbor not in seen and grid.owner_at(neighbor) == owner:
                    seen.add(neighbor)
                    stack.append(neighbor)
    return areas


@pytest.fixture()
def make_grid():
    return grid_from_rows
