"""Side colors and their notation."""

from __future__ import annotations

import enum

from .errors import ParseError, ParseFailure
from .optional_format import select_spec
from .parsing import ParseAs, ParseResult, register_parser

_SYMBOLS = "wb"


class Color(enum.Enum):
    """The color of a side or piece."""

    WHITE = 0
    BLACK = 1

    def other(self) -> "Color":
        """The opposing color."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    def __format__(self, spec: str) -> str:
        """``v`` (default) gives the name, ``c`` the FEN letter."""
        if select_spec(spec, ("v", "c")) == "c":
            return _SYMBOLS[self.value]
        return "white" if self is Color.WHITE else "black"

    def __str__(self) -> str:
        return format(self, "")


def _parse_color(text: str, start: int) -> ParseResult[Color]:
    if start < len(text):
        index = _SYMBOLS.find(text[start])
        if index >= 0:
            return ParseResult(Color(index), start + 1)
    raise ParseFailure(ParseError.INVALID_COLOR)


register_parser(Color, ParseAs.DEFAULT, _parse_color)