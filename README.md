# chesskit

A small chess toolkit with no dependencies. It gives you value types for
the parts of a chess board: colors, files, ranks, squares, pieces, castling
rights, UCI moves and piece placements. It also has text parsing, `format`
support and generators for pseudo-legal moves and attackers.

## Installation

```
pip install chesskit
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install "chesskit[test]"
pytest
```

## Modules

| Module                     | Contents                                                                                          |
|----------------------------|---------------------------------------------------------------------------------------------------|
| `chesskit.errors`          | `ParseError`, `MoveError`, `PiecePlacementError`, `PositionError` enums and the `ParseFailure` exception |
| `chesskit.parsing`         | `parse`, `parse_from`, `try_parse_from`, `register_parser`, `ParseAs`, `ParseResult`              |
| `chesskit.optional_format` | `format_optional` and `select_spec`                                                               |
| `chesskit.color`           | `Color` (with `other()`)                                                                          |
| `chesskit.square`          | `File`, `Rank`, `Square`, `PartialSquare`, `index`, `file_from_index`                             |
| `chesskit.piece`           | `PieceType`, `PromotablePieceType`, `Piece`, `to_piece_type`                                      |
| `chesskit.castling`        | `CastlingSide`, `CastlingRights`                                                                  |
| `chesskit.uci_move`        | `UciMove`, `RawMove`                                                                              |
| `chesskit.placement`       | `PiecePlacement`, a board of 64 squares that each hold a piece or nothing                         |
| `chesskit.movegen`         | Generators for pseudo-legal moves and attackers                                                   |

Squares are indexed from a8 (`index == 0`) to h1 (`index == 63`). `Rank`
members go from `Rank.R8` down to `Rank.R1`.

## Parsing

`parse(target, text, parse_as=ParseAs.DEFAULT)` reads the whole string as
one value. When the input is bad it raises `ParseFailure`, a subclass of
`ValueError`, and the `ParseError` kind is in its `error` attribute. If a
valid value is followed by more text, the error is
`ParseError.EXPECTING_END_OF_STRING`.

These parsers are registered:

| Type                  | Notation                                  | Example        |
|-----------------------|-------------------------------------------|----------------|
| `Color`               | `ParseAs.DEFAULT`                         | `w`, `b`       |
| `File`, `Rank`        | `ParseAs.DEFAULT`                         | `e`, `4`       |
| `Square`              | `ParseAs.DEFAULT`                         | `e4`           |
| `PieceType`           | `ParseAs.UPPERCASE` / `ParseAs.LOWERCASE` | `R` / `r`      |
| `PromotablePieceType` | `ParseAs.UPPERCASE` / `ParseAs.LOWERCASE` | `Q` / `q`      |
| `Piece`               | `ParseAs.DEFAULT`                         | `N` (white), `n` (black) |
| `CastlingRights`      | `ParseAs.DEFAULT`                         | `KQkq`, `Kq`, `-` |
| `UciMove`             | `ParseAs.DEFAULT`                         | `e2e4`, `a7a8q` |

```python
from chesskit.parsing import parse, ParseAs
from chesskit.errors import ParseFailure, ParseError
from chesskit.square import Square
from chesskit.piece import PieceType
from chesskit.uci_move import UciMove

square = parse(Square, "e4")
rook = parse(PieceType, "R", ParseAs.UPPERCASE)
move = parse(UciMove, "a7a8q")

try:
    parse(Square, "x4")
except ParseFailure as failure:
    assert failure.error is ParseError.INVALID_FILE
```

`parse_from(target, text, start=0, parse_as=...)` starts reading at an
offset. It allows text after the value and returns a `ParseResult` with
`value` and `end`, which is the index just past the text it read.
`try_parse_from` does the same, but when the text does not match it
returns `ParseResult(None, start)` and does not raise. If no parser is
registered for a target and notation, both raise `LookupError`.

You can add your own notations. `register_parser(target, key, parser)`
takes any hashable key. The parser is given `(text, start)` and must
return a `ParseResult`, or raise `ParseFailure`:

```python
from chesskit.parsing import register_parser, parse, ParseResult
from chesskit.errors import ParseError, ParseFailure
from chesskit.piece import PieceType

def german(text, start):
    letters = "BSLTDK"
    if start < len(text) and text[start] in letters:
        return ParseResult(PieceType(letters.index(text[start])), start + 1)
    raise ParseFailure(ParseError.INVALID_PIECE_TYPE)

register_parser(PieceType, "german", german)
parse(PieceType, "S", "german")  # PieceType.KNIGHT
```

## Formatting

All of the types work with `format` and f-strings. The format spec
chooses the style, and an unknown spec raises `ValueError`.

| Type                                | Specs                                                        |
|-------------------------------------|--------------------------------------------------------------|
| `Color`                             | `v` (default) `white`; `c` `w`                               |
| `PieceType`, `PromotablePieceType`  | `v` (default) `queen`; `u` `Q`; `l` `q`                      |
| `Piece`                             | `v` (default) `white queen`; `c` `Q` / `q`                   |
| `File`, `Rank`, `Square`, `PartialSquare` | none: `e`, `4`, `e4`, `e` / `4` / `e4` / empty          |
| `CastlingSide`                      | none: `kingside`, `queenside`                                |
| `CastlingRights`                    | none: `KQkq`, `Kq`, `-`                                      |
| `UciMove`                           | none: `e2e4`, `a7a8q`                                        |
| `PiecePlacement`                    | `fen` (default), `ascii`, `lists`                            |

```python
from chesskit.placement import PiecePlacement

board = PiecePlacement.starting()
print(f"{board:fen}")    # rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
print(f"{board:ascii}")  # eight rows; empty squares are shown as '.'
print(f"{board:lists}")  # { white rooks: [a1, h1], ... }
```

`format_optional(value, spec)` formats a value that may be `None`. The
spec has the shape `prefix[inner]suffix?fallback`. When the value is
present, the output is the prefix, then the value formatted with `inner`,
then the suffix. When the value is `None`, the output is only the fallback:

```python
from chesskit.optional_format import format_optional
from chesskit.piece import PromotablePieceType

format_optional(PromotablePieceType.QUEEN, "=[u]")  # '=Q'
format_optional(None, "=[u]?-")                     # '-'
```

## Castling rights

`CastlingRights(bits=0b1111)` keeps one bit for each right, in `KQkq`
order. The rights can be changed in place with `enable` and `disable`.
Pass a side and a color to change one right, only a color to change both
of that color's rights, or nothing to change every right. The queries are
`can_castle`, `all`, `any`, `none` and `to_bits`.

## Piece placements and move generation

A `PiecePlacement` is built from 64 `Piece`-or-`None` entries, ordered
from a8 to h1. With no argument it holds the standard starting position.
It has `piece_at`, `has_piece_at(square, condition)` (the condition may be
`None`, a `PieceType`, a `Color` or a `Piece`) and `piece_locations()`.

The generators in `chesskit.movegen` yield squares. Each one takes a
placement, a square and a color:

- pseudo-legal destinations: `pseudo_legal_knight_moves`,
  `pseudo_legal_king_moves`, `pseudo_legal_pawn_pushes`,
  `pseudo_legal_rook_moves`, `pseudo_legal_bishop_moves`,
  `pseudo_legal_queen_moves`
- pieces of the given color that reach a square: `pawns_attacking`,
  `pawn_moving_to`, `knights_reaching`, `kings_reaching`, `rooks_reaching`,
  `bishops_reaching`, `queens_reaching`, `orthogonal_sliders_reaching`,
  `diagonal_sliders_reaching`, `pieces_attacking`
- empty-board patterns: `knight_moves`, `king_moves`, `pawn_captures`

```python
from chesskit.movegen import pseudo_legal_knight_moves, pieces_attacking
from chesskit.placement import PiecePlacement
from chesskit.square import Square, File, Rank
from chesskit.color import Color

board = PiecePlacement.starting()
moves = list(pseudo_legal_knight_moves(board, Square(File.G, Rank.R1), Color.WHITE))
attackers = list(pieces_attacking(board, Square(File.F, Rank.R3), Color.WHITE))
```

## What this package does not do

- There is no full position type. Side to move, en passant square and
  move clocks are not modelled, so full FEN strings and PGN games cannot
  be read or written. `ParseAs.FEN` and `ParseAs.PGN` exist, but no
  parsers are registered for them.
- A `PiecePlacement` cannot be parsed from text. It can only be formatted.
- SAN moves are not supported.
- Move generation is pseudo-legal only. Nothing checks whether a king is
  left in check, and there is no castling, en passant, check, checkmate
  or draw detection.
- `MoveError`, `PiecePlacementError` and `PositionError` are defined as
  error kinds, but nothing in the package raises or returns them.
- There is no command-line program.