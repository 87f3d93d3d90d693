"""
Query functions for UI integration.
These functions help front ends understand what moves are available
without mutating game state.
"""

from dataclasses import dataclass
from typing import Any

from gamma.engine.actions import Action, GOLDEN_MOVE, MOVE
from gamma.engine.moves import check_golden_move, check_move
from gamma.engine.state import Grid, Position


@dataclass
class ValidationResult:
    """Result of action validation."""
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "error": self.error}


# ===== Action Validation =====

def validate_action(grid: Grid, action: Action) -> ValidationResult:
    """
    Validate an action without applying it.
    Returns ValidationResult with valid=True or valid=False with error message.
    """
    try:
        position = Position(int(action.payload["x"]), int(action.payload["y"]))
    except (KeyError, TypeError, ValueError):
        return ValidationResult(False, "Action payload needs integer x and y")

    if action.type == MOVE:
        check = check_move(grid, action.player, position)
    elif action.type == GOLDEN_MOVE:
        check = check_golden_move(grid, action.player, position)
    else:
        return ValidationResult(False, f"Unknown action type: {action.type}")

    return ValidationResult(check.valid, check.error)


# ===== Player Accounting =====

def busy_fields(grid: Grid, player: int) -> int:
    """Number of fields owned by player, 0 if player is out of range."""
    if not grid.is_player(player):
        return 0
    return grid.owners[player].busy_fields


def free_fields(grid: Grid, player: int) -> int:
    """
    Number of fields where player could make an ordinary move right now.
    Checks every field of the board, so the answer always matches the current state.
    """
    if not grid.is_player(player):
        return 0
    return sum(1 for position in grid.positions() if check_move(grid, player, position).valid)


def golden_move_possible(grid: Grid, player: int) -> bool:
    """True if player has not used the golden move and some other player owns a field."""
    if not grid.is_player(player) or grid.owners[player].golden_move_used:
        return False
    taken = grid.width * grid.height - grid.owners[0].busy_fields
    return taken > grid.owners[player].busy_fields


def get_player_stats(grid: Grid, player: int) -> dict[str, Any]:
    """Stats for one player; player must be in range."""
    record = grid.owners[player]
    return {
        "player": player,
        "busy_fields": record.busy_fields,
        "busy_areas": record.busy_areas,
        "free_fields": free_fields(grid, player),
        "golden_move_used": record.golden_move_used,
        "golden_move_possible": golden_move_possible(grid, player),
    }


def get_game_summary(grid: Grid) -> dict[str, Any]:
    """
    Get a summary of the current game state for UI display.
    """
    players = [get_player_stats(grid, p) for p in range(1, grid.number_of_players + 1)]
    return {
        "width": grid.width,
        "height": grid.height,
        "number_of_players": grid.number_of_players,
        "max_areas": grid.max_areas,
        "free_fields_total": grid.owners[0].busy_fields,
        "players": players,
        # No player can claim a free field any more
        "game_over": all(p["free_fields"] == 0 for p in players),
    }
