"""Moves in UCI notation and bare origin/destination moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .optional_format import format_optional
from .parsing import ParseAs, ParseResult, parse_from, register_parser, try_parse_from
from .piece import PromotablePieceType
from .square import Square


@dataclass(frozen=True)
class RawMove:
    """A move as just an origin and a destination square."""

    origin: Square
    destination: Square

    def reversed(self) -> "RawMove":
        """The move going back from the destination to the origin."""
        return RawMove(self.destination, self.origin)


@dataclass(frozen=True)
class UciMove:
    """A move in UCI notation, such as ``e2e4`` or ``a7a8q``."""

    origin: Square
    destination: Square
    promotion: Optional[PromotablePieceType] = None

    def raw_move(self) -> RawMove:
        """The origin and destination without the promotion."""
        return RawMove(self.origin, self.destination)

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError(f"UciMove takes no format spec, got {spec!r}")
        return f"{self.origin}{self.destination}{format_optional(self.promotion, '[l]')}"

    def __str__(self) -> str:
        return format(self, "")


def _parse_uci_move(text: str, start: int) -> ParseResult[UciMove]:
    origin = parse_from(Square, text, start)
    destination = parse_from(Square, text, origin.end)
    promotion = try_parse_from(
        PromotablePieceType, text, destination.end, ParseAs.LOWERCASE
    )
    move = UciMove(origin.value, destination.value, promotion.value)
    return ParseResult(move, promotion.end)


register_parser(UciMove, ParseAs.DEFAULT, _parse_uci_move)