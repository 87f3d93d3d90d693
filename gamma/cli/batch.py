"""
Batch mode: one command per line, one answer per command.
"""

from typing import TextIO

from gamma.engine.session import GameSession


def run_command(session: GameSession, command: str, args: list[int], out: TextIO) -> bool:
    """
    Execute one batch command and write its answer to out.

    Commands:
        m player x y   -> 1 if the move was made, else 0
        g player x y   -> 1 if the golden move was made, else 0
        b player       -> number of fields owned by player
        f player       -> number of free fields player could take
        q player       -> 1 if player can still make a golden move, else 0
        p              -> the board

    Returns:
        False if the command is unknown or has the wrong number of arguments
    """
    if command in ("m", "g"):
        if len(args) != 3:
            return False
        make = session.move if command == "m" else session.golden_move
        out.write(f"{int(make(*args))}\n")
    elif command == "b":
        if len(args) != 1:
            return False
        out.write(f"{session.busy_fields(args[0])}\n")
    elif command == "f":
        if len(args) != 1:
            return False
        out.write(f"{session.free_fields(args[0])}\n")
    elif command == "q":
        if len(args) != 1:
            return False
        out.write(f"{int(session.golden_move_possible(args[0]))}\n")
    elif command == "p":
        if args:
            return False
        out.write(session.render())
    else:
        return False
    return True
