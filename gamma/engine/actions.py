"""
Action definitions for the game.
Actions are immutable, deterministic instructions.
"""

from dataclasses import dataclass

MOVE = "move"
GOLDEN_MOVE = "golden_move"

ACTION_TYPES = (MOVE, GOLDEN_MOVE)


@dataclass(frozen=True)
class Action:
    """Base action class. All actions have a type, player, and payload."""
    type: str  # "move" or "golden_move"
    player: int  # index of the player performing the action
    payload: dict  # Action-specific data


def move(player: int, x: int, y: int) -> Action:
    """
    Put a pawn of player on a free field.
    Example: move(1, 0, 0)
    """
    return Action(type=MOVE, player=player, payload={"x": x, "y": y})


def golden_move(player: int, x: int, y: int) -> Action:
    """
    Take over a field owned by another player. Each player may do this once per game,
    and only if neither player ends up with more areas than allowed.
    """
    return Action(type=GOLDEN_MOVE, player=player, payload={"x": x, "y": y})
