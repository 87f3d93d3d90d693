"""
Gamma territory game engine
Core engine without web framework or UI: board, connectivity and move rules.
"""

# Pseudo-owner of every field that has no pawn on it.
FREE_OWNER = 0
FREE_FIELD_SYMBOL = "."

# Neighbour offsets in a fixed order: east, north, west, south, then the field itself.
DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1), (0, 0))
