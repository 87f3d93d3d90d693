#!/usr/bin/env python3
"""
Line-oriented entry point.

The first valid line must create a game:
    B width height players areas   -> batch mode
    I width height players areas   -> interactive mode
Each successful creation prints "OK <line>". Every invalid line prints
"ERROR <line>" to stderr. Empty lines and lines starting with '#' are skipped.
Usage: python main.py [input_file]
"""

import sys
from typing import TextIO

from gamma.cli.batch import run_command
from gamma.cli.interactive import interactive
from gamma.config import MAX_ARG_VALUE, MAX_TOKENS
from gamma.engine.session import GameSession, new_session

BATCH = "batch"
INTERACTIVE = "interactive"


def parse_line(line: str) -> tuple[str, list[int]] | None:
    """
    Split a line into a one-character command and its unsigned integer arguments.
    Returns None if the line is malformed.
    """
    tokens = line.split()
    if not tokens or len(tokens) > MAX_TOKENS:
        return None
    command = tokens[0]
    if len(command) != 1:
        return None

    args = []
    for token in tokens[1:]:
        # Digits only: no signs, no leading '+'
        if not token.isascii() or not token.isdigit():
            return None
        # Leading zeros are allowed; anything longer than MAX_ARG_VALUE is rejected unconverted
        digits = token.lstrip("0") or "0"
        if len(digits) > len(str(MAX_ARG_VALUE)):
            return None
        value = int(digits)
        if value > MAX_ARG_VALUE:
            return None
        args.append(value)
    return command, args


def run(
    lines,
    out: TextIO | None = None,
    err: TextIO | None = None,
    input_fn=input,
) -> GameSession | None:
    """
    Process input lines until they run out or interactive mode finishes.
    Returns the session that was played, if any.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    mode = None
    session: GameSession | None = None

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\n")
        if line == "" or line.startswith("#"):
            continue

        correct = False
        parsed = parse_line(line)
        if parsed is not None:
            command, args = parsed
            if mode == BATCH:
                correct = run_command(session, command, args, out)
            elif command in ("B", "I") and len(args) == 4:
                session = new_session(*args)
                if session is not None:
                    mode = BATCH if command == "B" else INTERACTIVE
                    out.write(f"OK {line_number}\n")
                    correct = True

        if not correct:
            print(f"ERROR {line_number}", file=err)

        if mode == INTERACTIVE:
            out.flush()
            interactive(session, input_fn)
            break

    return session


def main() -> None:
    if len(sys.argv) > 1:
        try:
            with open(sys.argv[1], "r") as f:
                session = run(f)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        session = run(sys.stdin)
    if session is not None:
        session.close()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
