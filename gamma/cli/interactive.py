"""
Interactive mode: players take turns at a prompt.

Commands at the prompt:
    m x y  (or just: x y)   put a pawn on (x, y)
    g x y                   golden move on (x, y)
    c                       skip the turn
    q                       end the game (EOF does the same)
"""

from typing import Callable

from gamma.config import MAX_ARG_VALUE
from gamma.engine.actions import golden_move, move
from gamma.engine.events import FIELD_CLAIMED, GOLDEN_MOVE_MADE
from gamma.engine.reducer import apply_action
from gamma.engine.render import print_game_state
from gamma.engine.session import GameSession


def print_header(session: GameSession, player: int):
    """Print the board and the status line of the player to move."""
    print(session.render(), end="")
    golden = " G" if session.golden_move_possible(player) else ""
    print(f"PLAYER {player} {session.busy_fields(player)} {session.free_fields(player)}{golden}")


def next_player(session: GameSession, player: int) -> int | None:
    """
    Return the next player (in turn order) who still has a free field to take,
    or None if nobody has.
    """
    n = session.grid.number_of_players
    for _ in range(n):
        player = player % n + 1
        if session.free_fields(player) > 0:
            return player
    return None


def parse_coordinate(token: str) -> int | None:
    """ASCII digits with an optional leading '-', as accepted by batch mode plus negatives."""
    digits = token[1:] if token.startswith("-") else token
    if not digits.isascii() or not digits.isdigit():
        return None
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(MAX_ARG_VALUE)):
        return None
    value = int(digits)
    return -value if token.startswith("-") else value


def parse_turn(player: int, line: str):
    """Turn a prompt line into an Action, "skip", "quit", or None if it cannot be understood."""
    tokens = line.split()
    if not tokens:
        return None
    choice = tokens[0].lower()
    if choice == "q" and len(tokens) == 1:
        return "quit"
    if choice == "c" and len(tokens) == 1:
        return "skip"

    if choice in ("m", "g"):
        coords = tokens[1:]
    else:
        coords = tokens
    if len(coords) != 2:
        return None
    x, y = parse_coordinate(coords[0]), parse_coordinate(coords[1])
    if x is None or y is None:
        return None
    return golden_move(player, x, y) if choice == "g" else move(player, x, y)


def interactive(session: GameSession, input_fn: Callable[[str], str] = input):
    """Run the game at the prompt until nobody can move or the players quit."""
    player = 1
    game_over = False

    while not game_over:
        print_header(session, player)

        turn_done = False
        while not turn_done:
            try:
                line = input_fn("> ")
            except EOFError:
                game_over = True
                break

            choice = parse_turn(player, line)
            if choice is None:
                print("Unknown command. Use: m x y | g x y | c | q")
            elif choice == "quit":
                game_over = True
                break
            elif choice == "skip":
                turn_done = True
            else:
                applied, events = apply_action(session, choice)
                for e in events:
                    p = e.payload
                    if e.type == GOLDEN_MOVE_MADE:
                        print(f"  Player {p['player']} took ({p['x']}, {p['y']}) from player {p['previous_owner']}")
                    elif e.type == FIELD_CLAIMED:
                        pass  # Board will show this
                    else:
                        print(f"  Invalid move: {p['reason']}")
                turn_done = applied

        if not game_over:
            upcoming = next_player(session, player)
            if upcoming is None:
                game_over = True
            else:
                player = upcoming

    print_game_state(session.grid)
