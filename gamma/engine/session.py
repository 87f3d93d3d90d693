"""
Game session: owns one board for its whole lifetime and exposes the public operations
used by the batch, interactive and HTTP front ends.
"""

from gamma.engine import moves, queries
from gamma.engine.render import render_board
from gamma.engine.state import Grid


class SessionClosedError(RuntimeError):
    """Raised when a session is used after close()."""


class GameSession:
    """A single game. Not thread-safe: hosts must serialise calls into one session."""

    def __init__(self, width: int, height: int, players: int, max_areas: int):
        self._grid: Grid | None = Grid.create(width, height, players, max_areas)

    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise SessionClosedError("Game session has been closed")
        return self._grid

    @property
    def closed(self) -> bool:
        return self._grid is None

    def close(self) -> None:
        """Release the board. Closing an already closed session does nothing."""
        self._grid = None

    def move(self, player: int, x: int, y: int) -> bool:
        return moves.move(self.grid, player, x, y)

    def golden_move(self, player: int, x: int, y: int) -> bool:
        return moves.golden_move(self.grid, player, x, y)

    def busy_fields(self, player: int) -> int:
        return queries.busy_fields(self.grid, player)

    def free_fields(self, player: int) -> int:
        return queries.free_fields(self.grid, player)

    def golden_move_possible(self, player: int) -> bool:
        return queries.golden_move_possible(self.grid, player)

    def render(self) -> str:
        return render_board(self.grid)

    def summary(self) -> dict:
        return queries.get_game_summary(self.grid)


def new_session(width: int, height: int, players: int, max_areas: int) -> GameSession | None:
    """
    Create a game session.
    Returns None if a parameter is invalid or the board cannot be allocated.
    """
    try:
        return GameSession(width, height, players, max_areas)
    except (ValueError, MemoryError, OverflowError):
        return None
