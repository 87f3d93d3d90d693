"""
Main game reducer.
Applies actions to a session, enforcing the move rules.
Returns (applied, events) where events describe what happened.
"""

from gamma.engine.actions import ACTION_TYPES, Action, GOLDEN_MOVE, MOVE
from gamma.engine.events import (
    GameEvent,
    field_claimed,
    golden_move_made,
    move_rejected,
)
from gamma.engine.moves import check_golden_move, check_move, commit_change
from gamma.engine.session import GameSession
from gamma.engine.state import Position


def apply_action(session: GameSession, action: Action) -> tuple[bool, list[GameEvent]]:
    """
    Apply a single action to the session.

    Illegal moves are not errors: the board is left unchanged and a
    move_rejected event carries the reason.

    Args:
        session: Session to act on
        action: Action to apply

    Returns:
        Tuple of (applied, events)

    Raises:
        ValueError: for an unknown action type
    """
    if action.type not in ACTION_TYPES:
        raise ValueError(f"Unknown action type: {action.type}")

    grid = session.grid
    x = action.payload.get("x")
    y = action.payload.get("y")
    if not isinstance(x, int) or not isinstance(y, int):
        return False, [move_rejected(action.type, action.player, x, y, "Coordinates must be integers")]

    position = Position(x, y)
    if action.type == MOVE:
        check = check_move(grid, action.player, position)
    else:
        check = check_golden_move(grid, action.player, position)

    if not check.valid:
        return False, [move_rejected(action.type, action.player, x, y, check.error)]

    commit_change(grid, check.change)
    record = grid.owners[action.player]
    events: list[GameEvent] = []
    if action.type == GOLDEN_MOVE:
        record.golden_move_used = True
        events.append(golden_move_made(action.player, check.change.old_owner, x, y))
    events.append(field_claimed(action.player, x, y, record.busy_fields, record.busy_areas))
    return True, events
