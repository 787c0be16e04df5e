from typing import Any

import pytest

from src.api.models import BoardOptionsRequest, FENDiagramRequest, WidgetArgs
from src.core.config import MAX_SQUARE_SIZE, MIN_SQUARE_SIZE
from src.core.exceptions import InvalidRequestError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


# -- Validation - FENDiagramRequest --
def test_only_content_is_required() -> None:
    request = FENDiagramRequest(content=STARTING_FEN)
    assert request.content == STARTING_FEN
    assert request.csl is None
    assert request.cal is None
    assert request.flip is None
    assert request.square_size is None
    assert request.show_coordinates is None


@pytest.mark.parametrize(
    "content",
    [
        f"  {STARTING_FEN}\n",
        f"<br />{STARTING_FEN}<br/>",
        f"\n<BR />\n {STARTING_FEN} <br   />\n",
    ],
)
def test_content_is_trimmed(content: str) -> None:
    """Editors leave whitespace and line breaks around the content of a diagram"""
    assert FENDiagramRequest(content=content).content == STARTING_FEN


def test_content_must_be_text() -> None:
    with pytest.raises(InvalidRequestError):
        FENDiagramRequest(content=None)


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("true", True),
        ("FALSE", False),
        ("1", True),
        ("0", False),
        (1, True),
        ("no", False),
    ],
)
def test_boolean_attributes(value: Any, expected: bool) -> None:
    request = FENDiagramRequest(
        content=STARTING_FEN, flip=value, show_coordinates=value
    )
    assert request.flip is expected
    assert request.show_coordinates is expected


@pytest.mark.parametrize("value", ["maybe", "2", 2, "", 3.5])
def test_invalid_boolean_attribute_is_ignored(value: Any) -> None:
    """A diagram with a bad attribute is still shown, using the defaults"""
    request = FENDiagramRequest(
        content=STARTING_FEN, flip=value, show_coordinates=value
    )
    assert request.flip is None
    assert request.show_coordinates is None


@pytest.mark.parametrize(
    "value, expected",
    [
        (MIN_SQUARE_SIZE, MIN_SQUARE_SIZE),
        (MAX_SQUARE_SIZE, MAX_SQUARE_SIZE),
        ("40", 40),
        (" 24 ", 24),
    ],
)
def test_square_size(value: Any, expected: int) -> None:
    request = FENDiagramRequest(content=STARTING_FEN, square_size=value)
    assert request.square_size == expected


@pytest.mark.parametrize(
    "value",
    [
        MIN_SQUARE_SIZE - 1,
        MAX_SQUARE_SIZE + 1,
        "500",
        "big",
        "-20",
        "\u00b2",
        "1" * 5000,
        32.5,
        True,
    ],
)
def test_invalid_square_size_is_ignored(value: Any) -> None:
    request = FENDiagramRequest(content=STARTING_FEN, square_size=value)
    assert request.square_size is None


def test_markers_are_passed_through() -> None:
    request = FENDiagramRequest(content=STARTING_FEN, csl="Re4,Gd5", cal="Ge2e4")
    assert request.csl == "Re4,Gd5"
    assert request.cal == "Ge2e4"


# -- Validation - BoardOptionsRequest --
def test_board_options_request() -> None:
    request = BoardOptionsRequest(square_size="28", show_coordinates="false")
    assert request.square_size == 28
    assert request.show_coordinates is False


@pytest.mark.parametrize(
    "square_size, show_coordinates",
    [
        (None, True),
        (32, None),
        (100, True),
        ("\u00b2", True),
        (32, "perhaps"),
    ],
)
def test_invalid_board_options_request(square_size: Any, show_coordinates: Any) -> None:
    with pytest.raises(InvalidRequestError):
        BoardOptionsRequest(square_size=square_size, show_coordinates=show_coordinates)


# -- WidgetArgs --
def test_widget_args_use_camel_case() -> None:
    args = WidgetArgs(
        position=STARTING_FEN,
        square_markers="Re4",
        square_size=32,
        show_coordinates=False,
    )
    assert args.model_dump(by_alias=True, exclude_none=True) == {
        "position": STARTING_FEN,
        "squareMarkers": "Re4",
        "squareSize": 32,
        "showCoordinates": False,
    }
