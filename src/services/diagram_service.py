"""Orchestration of communication from the diagram attributes to the position model and the stored options (and the reverse direction)."""

import logging

from src.api.models import BoardOptionsRequest, FENDiagramRequest, WidgetArgs
from src.chess.position import Position
from src.core.models import BoardOptions
from src.db.repository import OptionsRepository

logger = logging.getLogger(__name__)


class DiagramService:
    """Orchestration of layers for FEN diagrams."""

    def __init__(self, repository: OptionsRepository) -> None:
        self.repo = repository

    def widget_args(self, request: FENDiagramRequest) -> WidgetArgs:
        """
        Turn the attributes of a [fen] diagram into the arguments of the chessboard widget.
        ----
        Raises InvalidFENError if the content cannot be decoded, so the caller can show the reason instead of a board.
        """
        position = Position()
        counters = position.set_fen(request.content)
        defaults = self.repo.get_defaults()

        return WidgetArgs(
            position=position.fen(counters),
            square_markers=request.csl,
            arrow_markers=request.cal,
            flip=request.flip,
            square_size=(
                request.square_size
                if request.square_size is not None
                else defaults.square_size
            ),
            show_coordinates=(
                request.show_coordinates
                if request.show_coordinates is not None
                else defaults.show_coordinates
            ),
        )

    def describe(self, fen: str) -> str:
        """Text diagram of a FEN string (fallback when the widget cannot be shown)."""
        return Position.from_fen(fen).ascii()

    def default_options(self) -> BoardOptions:
        return self.repo.get_defaults()

    def update_default_options(self, request: BoardOptionsRequest) -> BoardOptions:
        """Handle a request to change the default look of the diagrams."""
        options = BoardOptions(
            square_size=request.square_size,
            show_coordinates=request.show_coordinates,
        )
        stored = self.repo.save_defaults(options)
        logger.info(
            "Default board options updated: square_size=%d, show_coordinates=%s",
            stored.square_size,
            stored.show_coordinates,
        )
        return stored
