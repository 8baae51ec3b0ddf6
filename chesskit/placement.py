"""The arrangement of pieces on the board and its notations."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Union

from .color import Color
from .optional_format import format_optional, select_spec
from .piece import Piece, PieceType
from .square import NUM_FILES, NUM_SQUARES, File, Rank, Square, index

Condition = Union[None, PieceType, Color, Piece]

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _row(types: Iterable[PieceType], color: Color) -> list[Optional[Piece]]:
    return [Piece(piece_type, color) for piece_type in types]


_STANDARD_START: tuple[Optional[Piece], ...] = (
    *_row(_BACK_RANK, Color.BLACK),
    *_row([PieceType.PAWN] * NUM_FILES, Color.BLACK),
    *([None] * (4 * NUM_FILES)),
    *_row([PieceType.PAWN] * NUM_FILES, Color.WHITE),
    *_row(_BACK_RANK, Color.WHITE),
)


def _square_at(position: int) -> Square:
    return Square(File(position % NUM_FILES), Rank(position // NUM_FILES))


class PiecePlacement:
    """The piece, if any, on each of the 64 squares, indexed from a8 to h1."""

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Optional[Sequence[Optional[Piece]]] = None) -> None:
        board = _STANDARD_START if pieces is None else tuple(pieces)
        if len(board) != NUM_SQUARES:
            raise ValueError(f"a placement needs {NUM_SQUARES} squares, got {len(board)}")
        self._pieces = board

    @classmethod
    def starting(cls) -> "PiecePlacement":
        """The standard starting arrangement."""
        return cls()

    @property
    def pieces(self) -> tuple[Optional[Piece], ...]:
        """The board contents in square-index order."""
        return self._pieces

    def piece_at(self, square: Square) -> Optional[Piece]:
        """The piece on ``square``, or None when it is empty."""
        return self._pieces[index(square)]

    def has_piece_at(self, square: Square, condition: Condition = None) -> bool:
        """Whether ``square`` holds a piece matching ``condition``.

        The condition may be None (any piece), a PieceType, a Color or a Piece.
        """
        piece = self.piece_at(square)
        if piece is None:
            return False
        if condition is None:
            return True
        if isinstance(condition, PieceType):
            return piece.type is condition
        if isinstance(condition, Color):
            return piece.color is condition
        return piece == condition

    def piece_locations(self) -> dict[Color, dict[PieceType, list[Square]]]:
        """The squares of each present piece, grouped by color then type."""
        grouped: dict[Color, dict[PieceType, list[Square]]] = {
            color: {piece_type: [] for piece_type in PieceType} for color in Color
        }
        for position, piece in enumerate(self._pieces):
            if piece is not None:
                grouped[piece.color][piece.type].append(_square_at(position))
        return {
            color: {t: squares for t, squares in by_type.items() if squares}
            for color, by_type in grouped.items()
            if any(by_type.values())
        }

    def _ranks(self) -> Iterator[tuple[Optional[Piece], ...]]:
        for start in range(0, NUM_SQUARES, NUM_FILES):
            yield self._pieces[start : start + NUM_FILES]

    def _format_fen(self) -> str:
        rows = []
        for rank in self._ranks():
            parts = []
            empty = 0
            for piece in rank:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    parts.append(str(empty))
                    empty = 0
                parts.append(format(piece, "c"))
            if empty:
                parts.append(str(empty))
            rows.append("".join(parts))
        return "/".join(rows)

    def _format_ascii(self) -> str:
        return "\n".join(
            "".join(format_optional(piece, "[c]?.") for piece in rank)
            for rank in self._ranks()
        )

    def _format_lists(self) -> str:
        entries = []
        for color, by_type in self.piece_locations().items():
            for piece_type, squares in by_type.items():
                plural = "s" if len(squares) > 1 else ""
                listed = ", ".join(str(square) for square in squares)
                entries.append(f"{color} {piece_type}{plural}: [{listed}]")
        return "{ " + ", ".join(entries) + " }"

    def __format__(self, spec: str) -> str:
        """``fen`` (default), ``ascii`` (one row per rank) or ``lists``."""
        chosen = select_spec(spec, ("fen", "ascii", "lists"))
        if chosen == "ascii":
            return self._format_ascii()
        if chosen == "lists":
            return self._format_lists()
        return self._format_fen()

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"PiecePlacement.from_fen({self._format_fen()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PiecePlacement):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        return hash(self._pieces)