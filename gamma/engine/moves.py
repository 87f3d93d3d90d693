"""
Move validation and ownership changes.

Changing the owner of one field can only merge or split areas that touch that
field, so each owner's area count is kept up to date from the number of
adjacent areas before and after the change instead of recounting the board.
A change is planned without mutating the board, checked against the area
limit, and only then committed.
"""

from dataclasses import dataclass

from gamma.engine import FREE_OWNER
from gamma.engine.connectivity import count_adjacent_regions
from gamma.engine.state import Grid, Position


@dataclass(frozen=True)
class OwnershipChange:
    """A planned reassignment of one field, with its effect on both owners' area counts."""
    position: Position
    old_owner: int
    new_owner: int
    new_owner_area_delta: int
    old_owner_area_delta: int


@dataclass
class MoveCheck:
    """Outcome of validating a move: the change to commit, or why it was rejected."""
    change: OwnershipChange | None
    error: str | None = None

    @property
    def valid(self) -> bool:
        return self.change is not None


def plan_change(grid: Grid, new_owner: int, position: Position) -> OwnershipChange:
    """
    Compute the effect of giving the field at position to new_owner.
    The board is not modified. position must be on the board.
    """
    position = Position(*position)
    old_owner = grid.cell_at(position).owner
    assume = (position, new_owner)

    new_before = count_adjacent_regions(grid, new_owner, position, True)
    old_before = count_adjacent_regions(grid, old_owner, position, True)
    new_after = count_adjacent_regions(grid, new_owner, position, True, assume)
    old_after = count_adjacent_regions(grid, old_owner, position, True, assume)

    return OwnershipChange(
        position=position,
        old_owner=old_owner,
        new_owner=new_owner,
        new_owner_area_delta=new_after - new_before,
        old_owner_area_delta=old_after - old_before,
    )


def within_limits(grid: Grid, change: OwnershipChange) -> bool:
    """True if neither affected owner would own more than max_areas areas after the change."""
    new_areas = grid.owners[change.new_owner].busy_areas + change.new_owner_area_delta
    old_areas = grid.owners[change.old_owner].busy_areas + change.old_owner_area_delta
    return new_areas <= grid.max_areas and old_areas <= grid.max_areas


def would_stay_within_limits(grid: Grid, new_owner: int, position: Position) -> bool:
    """Check whether reassigning position to new_owner keeps both owners within the area limit."""
    if not grid.contains(position):
        return False
    return within_limits(grid, plan_change(grid, new_owner, position))


def commit_change(grid: Grid, change: OwnershipChange) -> None:
    """Apply a planned change. This is the only place a Grid is mutated."""
    grid.cell_at(change.position).owner = change.new_owner

    new_record = grid.owners[change.new_owner]
    old_record = grid.owners[change.old_owner]
    new_record.busy_fields += 1
    old_record.busy_fields -= 1
    new_record.busy_areas += change.new_owner_area_delta
    old_record.busy_areas += change.old_owner_area_delta


# ===== Validation =====

def check_move(grid: Grid, player: int, position: Position) -> MoveCheck:
    """Validate an ordinary move: player puts a pawn on a free field."""
    if not grid.is_player(player):
        return MoveCheck(None, f"Player {player} is not in range 1..{grid.number_of_players}")

    cell = grid.cell_at(position)
    if cell is None:
        return MoveCheck(None, f"Position {tuple(position)} is outside the board")
    if cell.owner != FREE_OWNER:
        return MoveCheck(None, f"Field {tuple(position)} is already taken by player {cell.owner}")

    change = plan_change(grid, player, position)
    if not within_limits(grid, change):
        return MoveCheck(None, f"Player {player} would exceed {grid.max_areas} area(s)")
    return MoveCheck(change)


def check_golden_move(grid: Grid, player: int, position: Position) -> MoveCheck:
    """Validate a golden move: player takes over a field owned by another player."""
    if not grid.is_player(player):
        return MoveCheck(None, f"Player {player} is not in range 1..{grid.number_of_players}")
    if grid.owners[player].golden_move_used:
        return MoveCheck(None, f"Player {player} has already used the golden move")

    cell = grid.cell_at(position)
    if cell is None:
        return MoveCheck(None, f"Position {tuple(position)} is outside the board")
    if cell.owner == FREE_OWNER:
        return MoveCheck(None, f"Field {tuple(position)} is free")
    if cell.owner == player:
        return MoveCheck(None, f"Field {tuple(position)} already belongs to player {player}")

    change = plan_change(grid, player, position)
    if not within_limits(grid, change):
        return MoveCheck(
            None,
            f"Taking {tuple(position)} would leave player {player} or player {cell.owner} "
            f"with more than {grid.max_areas} area(s)",
        )
    return MoveCheck(change)


# ===== Moves =====

def move(grid: Grid, player: int, x: int, y: int) -> bool:
    """Put a pawn of player on (x, y). Returns False and leaves the board untouched if illegal."""
    check = check_move(grid, player, Position(x, y))
    if not check.valid:
        return False
    commit_change(grid, check.change)
    return True


def golden_move(grid: Grid, player: int, x: int, y: int) -> bool:
    """Take over another player's field at (x, y), once per game."""
    check = check_golden_move(grid, player, Position(x, y))
    if not check.valid:
        return False
    commit_change(grid, check.change)
    grid.owners[player].golden_move_used = True
    return True
