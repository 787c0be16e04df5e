"""Unit tests for src/db/sql_repository.py"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.config import DEFAULT_SHOW_COORDINATES, DEFAULT_SQUARE_SIZE
from src.core.exceptions import RepositoryError
from src.db.schema import DEFAULT_OPTIONS_ID, DBBoardOptions
from src.db.sql_repository import BoardOptions, SQLOptionsRepository


def test_defaults_when_nothing_stored(db_session_repo: Session) -> None:
    """Configured defaults come back, without writing anything to the database."""
    repo = SQLOptionsRepository(db_session_repo)
    assert repo.get_defaults() == BoardOptions(
        DEFAULT_SQUARE_SIZE, DEFAULT_SHOW_COORDINATES
    )
    assert db_session_repo.get(DBBoardOptions, DEFAULT_OPTIONS_ID) is None


def test_save_defaults(db_session_repo: Session) -> None:
    model = BoardOptions(square_size=24, show_coordinates=False)

    repo = SQLOptionsRepository(db_session_repo)
    stored = repo.save_defaults(model)
    assert isinstance(stored, BoardOptions)
    assert stored == model
    assert repo.get_defaults() == model


def test_save_defaults_twice_keeps_a_single_row(db_session_repo: Session) -> None:
    repo = SQLOptionsRepository(db_session_repo)
    repo.save_defaults(BoardOptions(square_size=24, show_coordinates=False))
    repo.save_defaults(BoardOptions(square_size=48, show_coordinates=True))

    assert db_session_repo.query(DBBoardOptions).count() == 1
    assert repo.get_defaults() == BoardOptions(square_size=48, show_coordinates=True)


def test_defaults_shared_between_sessions(
    db_session_repo: Session, db_session_shared: Session
) -> None:
    """What one session stores, another session reads."""
    SQLOptionsRepository(db_session_repo).save_defaults(
        BoardOptions(square_size=16, show_coordinates=True)
    )
    assert SQLOptionsRepository(db_session_shared).get_defaults() == BoardOptions(
        square_size=16, show_coordinates=True
    )


def test_failed_commit_raises_repository_error(db_session_repo: Session) -> None:
    repo = SQLOptionsRepository(db_session_repo)
    with patch.object(db_session_repo, "commit", side_effect=SQLAlchemyError("boom")):
        with pytest.raises(RepositoryError):
            repo.save_defaults(BoardOptions(square_size=24, show_coordinates=False))
    assert repo.get_defaults() == BoardOptions()
