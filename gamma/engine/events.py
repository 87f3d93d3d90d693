"""
Game events for UI hooks and logging.
Events describe what happened during action processing.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}


# ===== Event Type Constants =====

FIELD_CLAIMED = "field_claimed"
GOLDEN_MOVE_MADE = "golden_move_made"
MOVE_REJECTED = "move_rejected"


# ===== Event Factory Functions =====

def field_claimed(player: int, x: int, y: int, busy_fields: int, busy_areas: int) -> GameEvent:
    return GameEvent(FIELD_CLAIMED, {
        "player": player,
        "x": x,
        "y": y,
        "busy_fields": busy_fields,
        "busy_areas": busy_areas,
    })


def golden_move_made(player: int, previous_owner: int, x: int, y: int) -> GameEvent:
    """Emitted when player takes over a field of previous_owner."""
    return GameEvent(GOLDEN_MOVE_MADE, {
        "player": player,
        "previous_owner": previous_owner,
        "x": x,
        "y": y,
    })


def move_rejected(action_type: str, player: int, x: Any, y: Any, reason: str) -> GameEvent:
    return GameEvent(MOVE_REJECTED, {
        "action_type": action_type,
        "player": player,
        "x": x,
        "y": y,
        "reason": reason,
    })
