"""
Text rendering of the board.
The layout is relied on by batch transcripts and the interactive mode, so keep it stable.
"""

from gamma.engine import FREE_FIELD_SYMBOL, FREE_OWNER
from gamma.engine.queries import busy_fields
from gamma.engine.state import Grid


def column_width(grid: Grid) -> int:
    """Width of one board column: the number of decimal digits of the highest player index."""
    return len(str(grid.number_of_players))


def format_owner(owner: int) -> str:
    return FREE_FIELD_SYMBOL if owner == FREE_OWNER else str(owner)


def render_board(grid: Grid) -> str:
    """
    Render the board, top row first.

    Every field is right-aligned in a column as wide as the longest player index.
    Columns are separated by a single space only when that width exceeds one digit.
    Each row ends with a newline.
    """
    width = column_width(grid)
    separator = "" if width == 1 else " "
    lines = []
    for y in range(grid.height - 1, -1, -1):
        row = grid.fields[y * grid.width:(y + 1) * grid.width]
        lines.append(separator.join(format_owner(f.owner).rjust(width) for f in row) + "\n")
    return "".join(lines)


def print_game_state(grid: Grid, verbose: bool = False):
    """
    Pretty-print the board followed by one line per player.

    Args:
        grid: Board to print
        verbose: If True, also show area counts and golden move usage
    """
    print(render_board(grid), end="")
    for player in range(1, grid.number_of_players + 1):
        line = f"PLAYER {player} {busy_fields(grid, player)}"
        if verbose:
            record = grid.owners[player]
            line += f" areas={record.busy_areas}/{grid.max_areas}"
            if record.golden_move_used:
                line += " golden=used"
        print(line)
