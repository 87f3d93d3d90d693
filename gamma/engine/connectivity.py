"""
Connectivity queries over one owner's fields.
An area is a maximal set of fields of the same owner connected by
east/north/west/south adjacency.
"""

from collections import deque

from gamma.engine import FREE_OWNER
from gamma.engine.state import Grid, Position

# (position, owner): answer as if that single field had that owner
Assumption = tuple[Position, int]


def _owner(grid: Grid, position: Position, assume: Assumption | None) -> int | None:
    if assume is not None and position == assume[0] and grid.contains(position):
        return assume[1]
    return grid.owner_at(position)


def same_region(
    grid: Grid,
    a: Position,
    b: Position,
    assume: Assumption | None = None,
) -> bool:
    """
    Check whether a and b lie in the same area.

    Both fields must have the same owner and be connected by a path of that
    owner's fields. For two free fields this tells whether they are connected
    through free fields.

    Args:
        grid: Board to search
        a: Position the search starts from
        b: Position to reach
        assume: Optional (position, owner) override, so a candidate ownership
                change can be measured without touching the board

    Returns:
        True if a path exists, False otherwise (including off-board endpoints)
    """
    owner = _owner(grid, a, assume)
    if owner is None or owner != _owner(grid, b, assume):
        return False

    a = Position(*a)
    b = Position(*b)
    queue = deque([a])
    visited = {a}

    while queue:
        position = queue.popleft()
        if position == b:
            return True

        for neighbor in grid.neighbors(position):
            if neighbor in visited:
                continue
            if _owner(grid, neighbor, assume) != owner:
                continue
            visited.add(neighbor)
            queue.append(neighbor)

    return False


def count_adjacent_regions(
    grid: Grid,
    owner: int,
    position: Position,
    include_center: bool,
    assume: Assumption | None = None,
) -> int:
    """
    Count the distinct areas of owner that touch position.

    With include_center the position itself counts as a neighbour, so an area
    consisting of position alone is counted too. Areas of the pseudo-owner are
    never counted (the area limit does not apply to free fields).
    """
    if owner == FREE_OWNER:
        return 0

    neighbors = grid.neighbors(position, include_center)
    result = 0
    for i, neighbor in enumerate(neighbors):
        if _owner(grid, neighbor, assume) != owner:
            continue
        # A neighbour starts a new area unless it joins an earlier one
        if not any(same_region(grid, neighbor, earlier, assume) for earlier in neighbors[:i]):
            result += 1
    return result
