"""Requests and Response models"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.config import MAX_SQUARE_SIZE, MIN_SQUARE_SIZE
from src.core.exceptions import InvalidRequestError

# Whitespace and <br /> tags that editors like to leave around the content of a diagram
_PADDING = r"(?:\s|<br *\/>)*"
_CONTENT_PADDING = re.compile(rf"^{_PADDING}|{_PADDING}$", re.IGNORECASE)

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}

_DIGITS = re.compile(r"[0-9]+")


def parse_boolean(value: Any) -> Optional[bool]:
    """Attributes come in as text most of the time: 'true', 'false', '1', '0', ... None if not a boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value) if value in (0, 1) else None
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    return None


def parse_square_size(value: Any) -> Optional[int]:
    """Square size in pixels, None if it is not a number within the allowed range."""
    if isinstance(value, str):
        digits = value.strip()
        if _DIGITS.fullmatch(digits) is None:
            return None
        # out of range anyway, and int() refuses huge digit runs
        if len(digits) > len(str(MAX_SQUARE_SIZE)):
            return None
        value = int(digits)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not (MIN_SQUARE_SIZE <= value <= MAX_SQUARE_SIZE):
        return None
    return value


# --- REQUEST MODELS ---
class FENDiagramRequest(BaseModel):
    """
    Attributes and content of a [fen] diagram.

    An attribute that cannot be interpreted is treated as missing: the diagram falls back to the default options
    instead of failing.
    """

    content: str
    csl: Optional[str] = None  # colored square markers
    cal: Optional[str] = None  # colored arrow markers
    flip: Optional[bool] = None
    square_size: Optional[int] = None
    show_coordinates: Optional[bool] = None

    @field_validator("content", mode="before")
    @classmethod
    def trim_content(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise InvalidRequestError("The content of a diagram must be a FEN string.")
        return _CONTENT_PADDING.sub("", value)

    @field_validator("flip", "show_coordinates", mode="before")
    @classmethod
    def validate_flags(cls, value: Any) -> Optional[bool]:
        return parse_boolean(value)

    @field_validator("square_size", mode="before")
    @classmethod
    def validate_size(cls, value: Any) -> Optional[int]:
        return parse_square_size(value)


class BoardOptionsRequest(BaseModel):
    """New default look of the diagrams."""

    square_size: int
    show_coordinates: bool

    @field_validator("show_coordinates", mode="before")
    @classmethod
    def validate_flag(cls, value: Any) -> bool:
        flag = parse_boolean(value)
        if flag is None:
            raise InvalidRequestError(
                f"Cannot interpret show_coordinates: {value!r} as a boolean."
            )
        return flag

    @field_validator("square_size", mode="before")
    @classmethod
    def validate_size(cls, value: Any) -> int:
        size = parse_square_size(value)
        if size is None:
            raise InvalidRequestError(
                f"square_size must be a number between {MIN_SQUARE_SIZE} and {MAX_SQUARE_SIZE}, got {value!r}."
            )
        return size


# --- RESPONSE MODELS ---
class WidgetArgs(BaseModel):
    """Arguments handed to the front-end chessboard widget. Serialize with `model_dump(by_alias=True, exclude_none=True)`."""

    model_config = ConfigDict(populate_by_name=True)

    position: str
    square_markers: Optional[str] = Field(default=None, alias="squareMarkers")
    arrow_markers: Optional[str] = Field(default=None, alias="arrowMarkers")
    flip: Optional[bool] = None
    square_size: int = Field(alias="squareSize")
    show_coordinates: bool = Field(alias="showCoordinates")
