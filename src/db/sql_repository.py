"""Implementation of (Options)Repository using SQLAlchemy"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import BoardOptions
from src.db.schema import DEFAULT_OPTIONS_ID, DBBoardOptions


class SQLOptionsRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_defaults(self) -> BoardOptions:
        """Stored defaults, or the configured ones if nothing was stored yet."""
        options_db = self._fetch_options()
        if options_db is None:
            return BoardOptions()
        return self._to_model(options_db)

    def save_defaults(self, options: BoardOptions) -> BoardOptions:
        """Replace the stored defaults and return what got stored."""
        options_db = self._fetch_options()
        if options_db is None:
            options_db = DBBoardOptions(id=DEFAULT_OPTIONS_ID)
            self.db.add(options_db)
        options_db.square_size = options.square_size
        options_db.show_coordinates = options.show_coordinates
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError("Could not store the default board options.") from e
        self.db.refresh(options_db)
        return self._to_model(options_db)

    def _fetch_options(self) -> DBBoardOptions | None:
        return self.db.get(DBBoardOptions, DEFAULT_OPTIONS_ID)

    def _to_model(self, options_db: DBBoardOptions) -> BoardOptions:
        """Convert SQLAlchemy model to data transfer model."""
        return BoardOptions(
            square_size=options_db.square_size,
            show_coordinates=options_db.show_coordinates,
        )
