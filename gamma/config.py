"""
Single place for default game and front-end configuration.
Values can be overridden with environment variables (read once at import).
"""

import os

# Defaults for POST /games when the request omits a parameter.
DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
DEFAULT_PLAYERS = 2
DEFAULT_MAX_AREAS = 3

# Largest board the HTTP front end will allocate (width * height).
MAX_BOARD_FIELDS = int(os.environ.get("GAMMA_MAX_BOARD_FIELDS", "1000000"))

# Largest number of players the HTTP front end will accept.
MAX_PLAYERS = int(os.environ.get("GAMMA_MAX_PLAYERS", "100"))

CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "GAMMA_CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")
    if o.strip()
]

# Command-line input: arguments are unsigned 32-bit, a command takes at most 4 of them.
MAX_ARG_VALUE = 2**32 - 1
MAX_TOKENS = 5
