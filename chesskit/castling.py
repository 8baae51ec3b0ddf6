"""Castling sides and castling rights."""

from __future__ import annotations

import enum
from typing import Optional

from .color import Color
from .errors import ParseError, ParseFailure
from .parsing import ParseAs, ParseResult, register_parser

NUM_CASTLING_RIGHTS = 4
_SYMBOLS = "KQkq"
_ALL_BITS = (1 << NUM_CASTLING_RIGHTS) - 1


class CastlingSide(enum.Enum):
    """The side of the board a king castles towards."""

    KINGSIDE = 0
    QUEENSIDE = 1

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"CastlingSide takes no format spec, got {spec!r}")
        return "kingside" if self is CastlingSide.KINGSIDE else "queenside"

    def __str__(self) -> str:
        return format(self, "")


def _bit(side: CastlingSide, color: Color) -> int:
    return 1 << (color.value * len(CastlingSide) + side.value)


def _mask(side: Optional[CastlingSide], color: Optional[Color]) -> int:
    if color is None:
        if side is not None:
            raise TypeError("a castling side needs a color")
        return _ALL_BITS
    if side is None:
        return _bit(CastlingSide.KINGSIDE, color) | _bit(CastlingSide.QUEENSIDE, color)
    return _bit(side, color)


class CastlingRights:
    """The castling rights of both sides, one bit per right in "KQkq" order."""

    __slots__ = ("_bits",)

    NUM_CASTLING_RIGHTS = NUM_CASTLING_RIGHTS

    def __init__(self, bits: int = _ALL_BITS) -> None:
        if not 0 <= bits <= _ALL_BITS:
            raise ValueError(f"castling bits out of range: {bits}")
        self._bits = bits

    def can_castle(self, side: CastlingSide, color: Color) -> bool:
        """Whether ``color`` may still castle towards ``side``."""
        return bool(self._bits & _bit(side, color))

    def enable(
        self, side: Optional[CastlingSide] = None, color: Optional[Color] = None
    ) -> None:
        """Grant one right, both rights of a color, or every right."""
        self._bits |= _mask(side, color)

    def disable(
        self, side: Optional[CastlingSide] = None, color: Optional[Color] = None
    ) -> None:
        """Revoke one right, both rights of a color, or every right."""
        self._bits &= ~_mask(side, color) & _ALL_BITS

    def all(self) -> bool:
        """Whether every right is held."""
        return self._bits == _ALL_BITS

    def any(self) -> bool:
        """Whether at least one right is held."""
        return self._bits != 0

    def none(self) -> bool:
        """Whether no right is held."""
        return self._bits == 0

    def to_bits(self) -> int:
        """The rights as an integer, bit ``i`` standing for ``"KQkq"[i]``."""
        return self._bits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CastlingRights):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"CastlingRights({self._bits:#06b})"

    def __format__(self, spec: str) -> str:
        """The FEN castling field: the held letters of "KQkq", or "-"."""
        if spec:
            raise ValueError(f"CastlingRights takes no format spec, got {spec!r}")
        if self.none():
            return "-"
        return "".join(
            symbol for i, symbol in enumerate(_SYMBOLS) if self._bits & (1 << i)
        )

    def __str__(self) -> str:
        return format(self, "")


def _parse_castling_rights(text: str, start: int) -> ParseResult[CastlingRights]:
    if start >= len(text):
        raise ParseFailure(ParseError.INVALID_CASTLING_AVAILABILITY)
    if text[start] == "-":
        return ParseResult(CastlingRights(0), start + 1)

    bits = 0
    pos = start
    for i, symbol in enumerate(_SYMBOLS):
        if pos < len(text) and text[pos] == symbol:
            bits |= 1 << i
            pos += 1

    if bits == 0:
        raise ParseFailure(ParseError.INVALID_CASTLING_AVAILABILITY)
    return ParseResult(CastlingRights(bits), pos)


register_parser(CastlingRights, ParseAs.DEFAULT, _parse_castling_rights)