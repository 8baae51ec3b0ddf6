import itertools

import pytest

from chesskit.castling import CastlingRights, CastlingSide
from chesskit.color import Color
from chesskit.errors import ParseError, ParseFailure
from chesskit.parsing import parse

ALL_BITS = range(1 << CastlingRights.NUM_CASTLING_RIGHTS)
ALL = CastlingRights()
NONE = CastlingRights(0)
COMBOS = list(itertools.product(Color, CastlingSide))


def test_default_construction_enables_all():
    assert CastlingRights().all()


@pytest.mark.parametrize("bits", ALL_BITS)
def test_bits_construction_keeps_raw_bits(bits):
    assert CastlingRights(bits).to_bits() == bits


def test_out_of_range_bits_rejected():
    with pytest.raises(ValueError):
        CastlingRights(16)


@pytest.mark.parametrize("bits", ALL_BITS)
def test_compares_equal(bits):
    rights = CastlingRights(bits)
    rebuilt = CastlingRights(rights.to_bits())
    assert rights == rebuilt
    assert not (rights != rebuilt)


def test_compares_different_values():
    for lhs, rhs in itertools.permutations(ALL_BITS, 2):
        assert CastlingRights(lhs) != CastlingRights(rhs)


@pytest.mark.parametrize("bits", ALL_BITS)
def test_can_castle_matches_bits(bits):
    rights = CastlingRights(bits)
    built = 0
    for i, (color, side) in enumerate(COMBOS):
        if rights.can_castle(side, color):
            built |= 1 << i
    assert built == rights.to_bits()


@pytest.mark.parametrize("bits", ALL_BITS)
def test_all_any_none(bits):
    rights = CastlingRights(bits)
    assert rights.all() == (rights == ALL)
    assert (not rights.any()) == (rights == NONE)
    assert rights.none() == (rights == NONE)


@pytest.mark.parametrize("color,side", COMBOS)
def test_enable_by_side_and_color(color, side):
    rights = CastlingRights(0)
    rights.enable(side, color)
    for test_color, test_side in COMBOS:
        expected = test_color == color and test_side == side
        assert rights.can_castle(test_side, test_color) == expected


@pytest.mark.parametrize("color", list(Color))
def test_enable_by_color(color):
    rights = CastlingRights(0)
    rights.enable(color=color)
    for test_color, test_side in COMBOS:
        assert rights.can_castle(test_side, test_color) == (test_color == color)


def test_enable_all():
    rights = CastlingRights(0)
    rights.enable()
    assert rights.all()


@pytest.mark.parametrize("color,side", COMBOS)
def test_disable_by_side_and_color(color, side):
    rights = CastlingRights()
    rights.disable(side, color)
    for test_color, test_side in COMBOS:
        expected = test_color != color or test_side != side
        assert rights.can_castle(test_side, test_color) == expected


@pytest.mark.parametrize("color", list(Color))
def test_disable_by_color(color):
    rights = CastlingRights()
    rights.disable(color=color)
    for test_color, test_side in COMBOS:
        assert rights.can_castle(test_side, test_color) == (test_color != color)


def test_disable_all():
    rights = CastlingRights()
    rights.disable()
    assert rights.none()


def test_side_without_color_rejected():
    with pytest.raises(TypeError):
        CastlingRights().disable(CastlingSide.KINGSIDE)


def test_hash_produces_unique_values():
    hashes = {hash(CastlingRights(bits)) for bits in ALL_BITS}
    assert len(hashes) == len(ALL_BITS)


@pytest.mark.parametrize("bits", ALL_BITS)
def test_round_trip(bits):
    rights = CastlingRights(bits)
    assert parse(CastlingRights, format(rights)) == rights


@pytest.mark.parametrize("bits", ALL_BITS)
def test_format_has_one_symbol_per_right(bits):
    text = CastlingRights(bits).__format__("")
    assert len(text) == max(1, bin(bits).count("1"))


@pytest.mark.parametrize(
    "bits,expected",
    [
        (0, "-"),
        (0b1111, "KQkq"),
        (0b0111, "KQk"),
        (0b0011, "KQ"),
        (0b0001, "K"),
        (0b0010, "Q"),
        (0b0100, "k"),
        (0b1000, "q"),
    ],
)
def test_format_expected_output(bits, expected):
    assert format(CastlingRights(bits)) == expected


@pytest.mark.parametrize(
    "text,error",
    [
        ("x", ParseError.INVALID_CASTLING_AVAILABILITY),
        ("", ParseError.INVALID_CASTLING_AVAILABILITY),
        ("qkQK", ParseError.EXPECTING_END_OF_STRING),
        ("QQQ", ParseError.EXPECTING_END_OF_STRING),
    ],
)
def test_parse_invalid_input(text, error):
    with pytest.raises(ParseFailure) as info:
        parse(CastlingRights, text)
    assert info.value.error is error


def test_format_rejects_spec():
    with pytest.raises(ValueError):
        format(CastlingRights(), "v")


def test_castling_side_format():
    assert CastlingSide.KINGSIDE.__format__("") == "kingside"
    assert CastlingSide.QUEENSIDE.__format__("") == "queenside"
    assert str(CastlingSide.QUEENSIDE) == "queenside"