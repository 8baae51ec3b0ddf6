"""Parser registry and the parse entry points built on it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, TypeVar

from .errors import ParseError, ParseFailure

T = TypeVar("T")


class ParseAs(enum.Enum):
    """Built-in notations a type may be parsed as."""

    DEFAULT = "default"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    FEN = "fen"
    PGN = "pgn"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """A parsed value and the index just past the consumed text."""

    value: T
    end: int


Parser = Callable[[str, int], ParseResult[Any]]

_PARSERS: dict[tuple[Any, Hashable], Parser] = {}


def register_parser(target: Any, parse_as: Hashable, parser: Parser) -> Parser:
    """Register ``parser`` for ``target`` under the notation key ``parse_as``.

    A parser takes the text and a start index, returns a ParseResult and
    raises ParseFailure when the text does not match.
    """
    _PARSERS[(target, parse_as)] = parser
    return parser


def _lookup(target: Any, parse_as: Hashable) -> Parser:
    try:
        return _PARSERS[(target, parse_as)]
    except KeyError:
        name = getattr(target, "__name__", repr(target))
        raise LookupError(f"no parser registered for {name} as {parse_as!r}") from None


def parse_from(
    target: Any,
    text: str,
    start: int = 0,
    parse_as: Hashable = ParseAs.DEFAULT,
) -> ParseResult[Any]:
    """Parse a ``target`` from ``text`` at ``start``, allowing trailing text."""
    return _lookup(target, parse_as)(text, start)


def try_parse_from(
    target: Any,
    text: str,
    start: int = 0,
    parse_as: Hashable = ParseAs.DEFAULT,
) -> ParseResult[Any]:
    """Like parse_from, but yields a None value at ``start`` on failure."""
    parser = _lookup(target, parse_as)
    try:
        return parser(text, start)
    except ParseFailure:
        return ParseResult(None, start)


def parse(target: Any, text: str, parse_as: Hashable = ParseAs.DEFAULT) -> Any:
    """Parse the whole of ``text`` as a ``target`` and return the value."""
    result = parse_from(target, text, 0, parse_as)
    if result.end != len(text):
        raise ParseFailure(ParseError.EXPECTING_END_OF_STRING)
    return result.value