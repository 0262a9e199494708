import pytest

from tui_layout import (
    Position,
    align_line,
    join_horizontal,
    join_vertical,
    place,
    place_horizontal,
    place_vertical,
    split_remainder,
)


def test_position_aliases() -> None:
    assert Position.TOP is Position.START
    assert Position.LEFT is Position.START
    assert Position.BOTTOM is Position.END
    assert Position.RIGHT is Position.END


@pytest.mark.parametrize(
    "remainder, pos, expected",
    [
        (4, Position.START, (0, 4)),
        (4, Position.END, (4, 0)),
        (4, Position.CENTER, (2, 2)),
        (3, Position.CENTER, (1, 2)),
        (0, Position.CENTER, (0, 0)),
        (-2, Position.END, (0, 0)),
    ],
)
def test_split_remainder(remainder: int, pos: Position, expected) -> None:
    assert split_remainder(remainder, pos) == expected


def test_align_line_counts_cells() -> None:
    assert align_line("界", 4, Position.CENTER) == " 界 "
    assert align_line("abc", 2, Position.END) == "abc"


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Position.TOP, "ac\nb "),
        (Position.BOTTOM, "a \nbc"),
        (Position.CENTER, "ac\nb "),
    ],
)
def test_join_horizontal_two_and_one(pos: Position, expected: str) -> None:
    assert join_horizontal(pos, "a\nb", "c") == expected


def test_join_horizontal_center_three_and_one() -> None:
    assert join_horizontal(Position.CENTER, "a\nb\nc", "x") == "a \nbx\nc "


def test_join_horizontal_pads_ragged_block() -> None:
    assert join_horizontal(Position.TOP, "ab\nc", "x") == "abx\nc  "


def test_join_horizontal_separator() -> None:
    assert join_horizontal(Position.TOP, "a", "b", separator=" | ") == "a | b"


def test_join_horizontal_passes_escapes() -> None:
    assert join_horizontal(Position.TOP, "\x1b[1ma\x1b[0m", "b") == "\x1b[1ma\x1b[0mb"


def test_join_with_no_blocks() -> None:
    assert join_horizontal(Position.TOP) == ""
    assert join_vertical(Position.LEFT) == ""


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Position.LEFT, "abcde\nabc  "),
        (Position.CENTER, "abcde\n abc "),
        (Position.RIGHT, "abcde\n  abc"),
    ],
)
def test_join_vertical(pos: Position, expected: str) -> None:
    assert join_vertical(pos, "abcde", "abc") == expected


def test_join_vertical_odd_remainder_goes_right() -> None:
    assert join_vertical(Position.CENTER, "abcd", "a") == "abcd\n a  "


def test_join_vertical_wide_characters() -> None:
    assert join_vertical(Position.LEFT, "界界", "a") == "界界\na   "


def test_place_center() -> None:
    assert place(5, 3, Position.CENTER, Position.CENTER, "x") == "     \n  x  \n     "


def test_place_bottom_right() -> None:
    assert place(4, 2, Position.RIGHT, Position.BOTTOM, "ab") == "    \n  ab"


def test_place_clips_and_cuts() -> None:
    assert place(3, 1, Position.LEFT, Position.TOP, "abcdef\nxyz") == "abc"


@pytest.mark.parametrize("w, h", [(0, 3), (3, 0), (-1, -1)])
def test_place_empty_canvas(w: int, h: int) -> None:
    assert place(w, h, Position.CENTER, Position.CENTER, "x") == ""


def test_place_horizontal() -> None:
    assert place_horizontal(6, Position.CENTER, "ab\nabcd") == "  ab  \n abcd "
    assert place_horizontal(0, Position.CENTER, "ab") == ""


def test_place_vertical() -> None:
    assert place_vertical(3, Position.TOP, "ab") == "ab\n  \n  "
    assert place_vertical(1, Position.BOTTOM, "a\nb") == "a"
