"""Configuration values. Kept as plain module constants; only the database location can be overridden from the environment."""

import os

DATABASE_URL = os.environ.get(
    "CHESS_DIAGRAM_DATABASE_URL", "sqlite:///./chess_diagram.db"
)

# Diagram defaults (used when the attributes of a diagram leave them out and nothing is stored yet)
DEFAULT_SQUARE_SIZE = 32
MIN_SQUARE_SIZE = 12
MAX_SQUARE_SIZE = 64
DEFAULT_SHOW_COORDINATES = True
