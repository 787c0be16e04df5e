"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) send/receive these, which decouples the data model specific to
each layer from the information that needs to cross the boundary.
"""

from dataclasses import dataclass

from src.core.config import DEFAULT_SHOW_COORDINATES, DEFAULT_SQUARE_SIZE


@dataclass
class BoardOptions:
    """Transport-safe representation of the default look of a diagram."""

    square_size: int = DEFAULT_SQUARE_SIZE
    show_coordinates: bool = DEFAULT_SHOW_COORDINATES
