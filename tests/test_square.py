import itertools

import pytest

from chesskit.errors import ParseError, ParseFailure
from chesskit.parsing import parse, parse_from
from chesskit.square import (
    NUM_SQUARES,
    File,
    PartialSquare,
    Rank,
    Square,
    file_from_index,
    index,
)

ALL_SQUARES = [Square(f, r) for f, r in itertools.product(File, Rank)]


def test_square_formats_from_file_and_rank():
    assert format(Square(File.E, Rank.R4)) == "e4"
    assert str(Square(File.E, Rank.R4)) == "e4"


def test_corner_indices():
    assert index(Square(File.A, Rank.R8)) == 0
    assert index(Square(File.H, Rank.R1)) == NUM_SQUARES - 1


def test_indices_are_unique_and_cover_board():
    assert sorted(index(s) for s in ALL_SQUARES) == list(range(NUM_SQUARES))


@pytest.mark.parametrize("square", ALL_SQUARES)
def test_square_round_trip(square):
    assert parse(Square, format(square)) == square


def test_default_square_is_first_index():
    assert index(Square()) == index(Square(File.A, Rank.R8))


def test_parse_square_value():
    assert parse(Square, "e4") == Square(File.E, Rank.R4)


@pytest.mark.parametrize(
    "text, error",
    [
        ("ax", ParseError.INVALID_RANK),
        ("x4", ParseError.INVALID_FILE),
        ("", ParseError.INVALID_FILE),
        ("e4 ", ParseError.EXPECTING_END_OF_STRING),
    ],
)
def test_parse_square_errors(text, error):
    with pytest.raises(ParseFailure) as exc:
        parse(Square, text)
    assert exc.value.error is error


def test_parse_from_allows_trailing_text():
    result = parse_from(Square, "e4xd5")
    assert result.value == Square(File.E, Rank.R4)
    assert result.end == 2


@pytest.mark.parametrize("rank", list(Rank))
def test_rank_round_trip(rank):
    assert parse(Rank, format(rank)) is rank


def test_parse_rank_values_and_errors():
    assert parse(Rank, "8") is Rank.R8
    with pytest.raises(ParseFailure) as exc:
        parse(Rank, "x")
    assert exc.value.error is ParseError.INVALID_RANK


@pytest.mark.parametrize("file", list(File))
def test_file_round_trip(file):
    assert parse(File, format(file)) is file
    assert file_from_index(file.value) is file


def test_file_from_index_out_of_range():
    assert file_from_index(len(File)) is None
    assert file_from_index(-1) is None


def test_partial_square_formats_present_parts():
    assert format(PartialSquare(File.E, None)) == "e"
    assert format(PartialSquare(None, Rank.R7)) == format(Rank.R7)
    assert format(PartialSquare()) == ""
    full = PartialSquare(File.E, Rank.R7)
    assert format(full) == format(Square(File.E, Rank.R7))


def test_spec_is_rejected():
    with pytest.raises(ValueError):
        File.A.__format__("v")
    with pytest.raises(ValueError):
        Rank.R1.__format__("v")
    with pytest.raises(ValueError):
        Square().__format__("v")
    with pytest.raises(ValueError):
        PartialSquare().__format__("v")