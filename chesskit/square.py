"""Files, ranks, squares and partial squares of the chessboard."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .errors import ParseError, ParseFailure
from .optional_format import format_optional
from .parsing import ParseAs, ParseResult, parse_from, register_parser

NUM_FILES = 8
NUM_RANKS = 8
NUM_SQUARES = NUM_FILES * NUM_RANKS

_FILE_SYMBOLS = "abcdefgh"
_RANK_SYMBOLS = "87654321"


def _reject_spec(spec: str, kind: str) -> None:
    if spec:
        raise ValueError(f"{kind} takes no format spec, got {spec!r}")


class File(enum.Enum):
    """A file (column) of the chessboard, from a to h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def __format__(self, spec: str) -> str:
        _reject_spec(spec, "File")
        return _FILE_SYMBOLS[self.value]

    def __str__(self) -> str:
        return format(self, "")


class Rank(enum.Enum):
    """A rank (row) of the chessboard, ordered from the 8th down to the 1st."""

    R8 = 0
    R7 = 1
    R6 = 2
    R5 = 3
    R4 = 4
    R3 = 5
    R2 = 6
    R1 = 7

    def __format__(self, spec: str) -> str:
        _reject_spec(spec, "Rank")
        return _RANK_SYMBOLS[self.value]

    def __str__(self) -> str:
        return format(self, "")


def file_from_index(value: int) -> Optional[File]:
    """The file with the given zero-based index, or None when out of range."""
    if 0 <= value < NUM_FILES:
        return File(value)
    return None


@dataclass(frozen=True)
class Square:
    """A square on the chessboard."""

    file: File = File.A
    rank: Rank = Rank.R8

    def __format__(self, spec: str) -> str:
        _reject_spec(spec, "Square")
        return f"{self.file}{self.rank}"

    def __str__(self) -> str:
        return format(self, "")


def index(square: Square) -> int:
    """Linear index of a square, counting from a8 along each rank."""
    return square.rank.value * NUM_FILES + square.file.value


@dataclass(frozen=True)
class PartialSquare:
    """A square whose file, rank or both may be unknown, as in a SAN origin."""

    file: Optional[File] = None
    rank: Optional[Rank] = None

    def __format__(self, spec: str) -> str:
        _reject_spec(spec, "PartialSquare")
        return format_optional(self.file) + format_optional(self.rank)

    def __str__(self) -> str:
        return format(self, "")


def _parse_symbol(text: str, start: int, symbols: str, error: ParseError) -> int:
    if start < len(text):
        found = symbols.find(text[start])
        if found >= 0:
            return found
    raise ParseFailure(error)


def _parse_file(text: str, start: int) -> ParseResult[File]:
    found = _parse_symbol(text, start, _FILE_SYMBOLS, ParseError.INVALID_FILE)
    return ParseResult(File(found), start + 1)


def _parse_rank(text: str, start: int) -> ParseResult[Rank]:
    found = _parse_symbol(text, start, _RANK_SYMBOLS, ParseError.INVALID_RANK)
    return ParseResult(Rank(found), start + 1)


def _parse_square(text: str, start: int) -> ParseResult[Square]:
    file = parse_from(File, text, start)
    rank = parse_from(Rank, text, file.end)
    return ParseResult(Square(file.value, rank.value), rank.end)


register_parser(File, ParseAs.DEFAULT, _parse_file)
register_parser(Rank, ParseAs.DEFAULT, _parse_rank)
register_parser(Square, ParseAs.DEFAULT, _parse_square)