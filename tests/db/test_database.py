"""Unit tests for src/db/database.py"""

from sqlalchemy.orm import Session

from src.db import database


def test_get_db_yields_a_session_and_closes_it() -> None:
    generator = database.get_db()
    session = next(generator)
    assert isinstance(session, Session)
    generator.close()
