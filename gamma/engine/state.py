"""
Board state representation.
A Grid owns every field of the board and the per-owner aggregates.
Owner 0 is the pseudo-owner of all free fields; owners 1..N are the players.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, NamedTuple

from gamma.engine import DIRECTIONS, FREE_OWNER


class Position(NamedTuple):
    """Board coordinates. Signed, so neighbours of edge fields can be computed before bounds checks."""
    x: int
    y: int


@dataclass
class Field:
    """A single cell of the board."""
    owner: int = FREE_OWNER


@dataclass
class OwnerRecord:
    """Aggregates for one owner (index 0 is the pseudo-owner of free fields)."""
    busy_fields: int = 0
    busy_areas: int = 0  # always 0 for the pseudo-owner, its areas are never counted
    golden_move_used: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "busy_fields": self.busy_fields,
            "busy_areas": self.busy_areas,
            "golden_move_used": self.golden_move_used,
        }


@dataclass
class Grid:
    """Complete board state."""
    width: int
    height: int
    number_of_players: int
    max_areas: int
    # Row-major: the field at (x, y) lives at index x + y * width
    fields: list[Field] = field(default_factory=list)
    # owner index -> OwnerRecord, length number_of_players + 1
    owners: list[OwnerRecord] = field(default_factory=list)

    @classmethod
    def create(cls, width: int, height: int, players: int, max_areas: int) -> "Grid":
        """
        Create an empty board where every field belongs to the pseudo-owner.

        Raises:
            ValueError: if any parameter is not a positive integer
        """
        for name, value in (("width", width), ("height", height),
                            ("players", players), ("max_areas", max_areas)):
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        # Reserve the whole board up front so an impossible size fails here
        # (MemoryError / OverflowError) instead of part way through filling it
        fields: list[Field] = [None] * (width * height)
        owners: list[OwnerRecord] = [None] * (players + 1)
        for i in range(len(fields)):
            fields[i] = Field()
        for i in range(len(owners)):
            owners[i] = OwnerRecord()
        owners[FREE_OWNER].busy_fields = width * height
        return cls(
            width=width,
            height=height,
            number_of_players=players,
            max_areas=max_areas,
            fields=fields,
            owners=owners,
        )

    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, position: Position) -> Field | None:
        """Return the field at position, or None if it lies outside the board."""
        if not self.contains(position):
            return None
        return self.fields[position[0] + position[1] * self.width]

    def owner_at(self, position: Position) -> int | None:
        cell = self.cell_at(position)
        return cell.owner if cell is not None else None

    def neighbors(self, position: Position, include_center: bool = False) -> list[Position]:
        """
        Return the neighbours of position in the order east, north, west, south.
        With include_center the position itself is appended as a fifth neighbour.
        Off-board positions are included; callers do the bounds check.
        """
        count = 5 if include_center else 4
        x, y = position
        return [Position(x + dx, y + dy) for dx, dy in DIRECTIONS[:count]]

    def is_player(self, player: int) -> bool:
        """True if player is a real player index (1..number_of_players)."""
        return isinstance(player, int) and 1 <= player <= self.number_of_players

    def positions(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)

    # ===== Serialization Methods =====

    def to_dict(self) -> dict[str, Any]:
        """Snapshot for API responses. rows[0] is the top row of the board."""
        return {
            "width": self.width,
            "height": self.height,
            "number_of_players": self.number_of_players,
            "max_areas": self.max_areas,
            "owners": [o.to_dict() for o in self.owners],
            "rows": [
                [self.fields[x + y * self.width].owner for x in range(self.width)]
                for y in range(self.height - 1, -1, -1)
            ],
        }
