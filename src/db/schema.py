"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.config import DEFAULT_SHOW_COORDINATES, DEFAULT_SQUARE_SIZE

# The default options live in a single row
DEFAULT_OPTIONS_ID = 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBBoardOptions(Base):
    __tablename__ = "board_options"
    id: Mapped[int] = mapped_column(primary_key=True)
    square_size: Mapped[int] = mapped_column(default=DEFAULT_SQUARE_SIZE)
    show_coordinates: Mapped[bool] = mapped_column(default=DEFAULT_SHOW_COORDINATES)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
