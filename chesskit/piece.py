"""Piece types, promotable piece types and colored pieces."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .color import Color
from .errors import ParseError, ParseFailure
from .optional_format import select_spec
from .parsing import ParseAs, ParseResult, register_parser

_PIECE_LETTERS = "PNBRQK"
_PROMOTABLE_LETTERS = "NBRQ"
_SPECS = ("v", "u", "l")


def _format_type(name: str, letter: str, spec: str) -> str:
    chosen = select_spec(spec, _SPECS)
    if chosen == "u":
        return letter.upper()
    if chosen == "l":
        return letter.lower()
    return name


class PieceType(enum.Enum):
    """The type of a chess piece."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    def __format__(self, spec: str) -> str:
        """``v`` (default) gives the name, ``u``/``l`` the upper/lower letter."""
        return _format_type(self.name.lower(), _PIECE_LETTERS[self.value], spec)

    def __str__(self) -> str:
        return format(self, "")


class PromotablePieceType(enum.Enum):
    """The piece types a pawn may promote to."""

    KNIGHT = 0
    BISHOP = 1
    ROOK = 2
    QUEEN = 3

    def __format__(self, spec: str) -> str:
        """``v`` (default) gives the name, ``u``/``l`` the upper/lower letter."""
        return _format_type(self.name.lower(), _PROMOTABLE_LETTERS[self.value], spec)

    def __str__(self) -> str:
        return format(self, "")


def to_piece_type(promotion: PromotablePieceType) -> PieceType:
    """The piece type corresponding to a promotable piece type."""
    return PieceType[promotion.name]


@dataclass(frozen=True)
class Piece:
    """A chess piece: a type and a color."""

    type: PieceType = PieceType.PAWN
    color: Color = Color.WHITE

    def __format__(self, spec: str) -> str:
        """``v`` (default) gives "color type", ``c`` the FEN letter."""
        if select_spec(spec, ("v", "c")) == "c":
            case = "l" if self.color is Color.BLACK else "u"
            return format(self.type, case)
        return f"{self.color} {self.type}"

    def __str__(self) -> str:
        return format(self, "")


def _letter_parser(target, letters: str, error: ParseError):
    def parser(text: str, start: int) -> ParseResult:
        if start < len(text):
            found = letters.find(text[start])
            if found >= 0:
                return ParseResult(target(found), start + 1)
        raise ParseFailure(error)

    return parser


def _parse_piece(text: str, start: int) -> ParseResult[Piece]:
    if start < len(text):
        char = text[start]
        found = _PIECE_LETTERS.find(char)
        if found >= 0:
            return ParseResult(Piece(PieceType(found), Color.WHITE), start + 1)
        found = _PIECE_LETTERS.lower().find(char)
        if found >= 0:
            return ParseResult(Piece(PieceType(found), Color.BLACK), start + 1)
    raise ParseFailure(ParseError.INVALID_PIECE)


register_parser(
    PieceType,
    ParseAs.UPPERCASE,
    _letter_parser(PieceType, _PIECE_LETTERS, ParseError.INVALID_PIECE_TYPE),
)
register_parser(
    PieceType,
    ParseAs.LOWERCASE,
    _letter_parser(PieceType, _PIECE_LETTERS.lower(), ParseError.INVALID_PIECE_TYPE),
)
register_parser(
    PromotablePieceType,
    ParseAs.UPPERCASE,
    _letter_parser(
        PromotablePieceType,
        _PROMOTABLE_LETTERS,
        ParseError.INVALID_PROMOTABLE_PIECE_TYPE,
    ),
)
register_parser(
    PromotablePieceType,
    ParseAs.LOWERCASE,
    _letter_parser(
        PromotablePieceType,
        _PROMOTABLE_LETTERS.lower(),
        ParseError.INVALID_PROMOTABLE_PIECE_TYPE,
    ),
)
register_parser(Piece, ParseAs.DEFAULT, _parse_piece)