"""Pseudo-legal move generation and attack detection on a piece placement."""

from __future__ import annotations

import enum
from itertools import chain
from typing import Callable, Iterable, Iterator, Optional

from .color import Color
from .piece import Piece, PieceType
from .placement import PiecePlacement
from .square import NUM_FILES, NUM_RANKS, File, Rank, Square


class SlidingDirection(enum.Enum):
    """The two kinds of line a sliding piece can move along."""

    ORTHOGONAL = 0
    DIAGONAL = 1


_KNIGHT_STEPS = (
    (1, -2),
    (2, -1),
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
)
_KING_STEPS = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
_ROOK_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_BISHOP_DIRECTIONS = ((-1, -1), (1, -1), (-1, 1), (1, 1))
_QUEEN_DIRECTIONS = _ROOK_DIRECTIONS + _BISHOP_DIRECTIONS

Predicate = Callable[[Piece], bool]


def _shift(square: Square, file_step: int, rank_step: int) -> Optional[Square]:
    file_value = square.file.value + file_step
    rank_value = square.rank.value + rank_step
    if 0 <= file_value < NUM_FILES and 0 <= rank_value < NUM_RANKS:
        return Square(File(file_value), Rank(rank_value))
    return None


def _steps(square: Square, steps: Iterable[tuple[int, int]]) -> Iterator[Square]:
    for file_step, rank_step in steps:
        target = _shift(square, file_step, rank_step)
        if target is not None:
            yield target


def _forward(color: Color) -> int:
    """Rank-index step of a pawn advance; rank indices grow towards rank 1."""
    return -1 if color is Color.WHITE else 1


def _pawn_start_rank(color: Color) -> Rank:
    return Rank.R2 if color is Color.WHITE else Rank.R7


def _pawn_double_push_rank(color: Color) -> Rank:
    return Rank.R4 if color is Color.WHITE else Rank.R5


def _ray(square: Square, file_step: int, rank_step: int) -> Iterator[Square]:
    current = _shift(square, file_step, rank_step)
    while current is not None:
        yield current
        current = _shift(current, file_step, rank_step)


def _sliding_moves(
    square: Square, directions: Iterable[tuple[int, int]]
) -> Iterator[Iterator[Square]]:
    for file_step, rank_step in directions:
        yield _ray(square, file_step, rank_step)


def knight_moves(square: Square) -> Iterator[Square]:
    """Squares a knight on ``square`` could jump to on an empty board."""
    return _steps(square, _KNIGHT_STEPS)


def king_moves(square: Square) -> Iterator[Square]:
    """Squares adjacent to ``square``."""
    return _steps(square, _KING_STEPS)


def pawn_captures(square: Square, color: Color) -> Iterator[Square]:
    """Squares a pawn of ``color`` on ``square`` attacks."""
    forward = _forward(color)
    return _steps(square, ((-1, forward), (1, forward)))


def _pawn_sliding_move(origin: Square, color: Color) -> Iterator[Square]:
    forward = _forward(color)
    one = _shift(origin, 0, forward)
    if one is None:
        return
    yield one
    if origin.rank is _pawn_start_rank(color):
        two = _shift(one, 0, forward)
        if two is not None:
            yield two


def _pawn_reverse_sliding_move(square: Square, color: Color) -> Iterator[Square]:
    backward = -_forward(color)
    one = _shift(square, 0, backward)
    if one is None:
        return
    yield one
    if square.rank is _pawn_double_push_rank(color):
        two = _shift(one, 0, backward)
        if two is not None:
            yield two


def _squares_with(
    squares: Iterable[Square], placement: PiecePlacement, condition
) -> Iterator[Square]:
    return (sq for sq in squares if placement.has_piece_at(sq, condition))


def _squares_without(
    squares: Iterable[Square], placement: PiecePlacement, condition
) -> Iterator[Square]:
    return (sq for sq in squares if not placement.has_piece_at(sq, condition))


def _first_matching_piece(
    squares: Iterable[Square], placement: PiecePlacement, predicate: Predicate
) -> Iterator[Square]:
    """The first occupied square of ``squares``, if its piece satisfies ``predicate``."""
    for square in squares:
        piece = placement.piece_at(square)
        if piece is not None:
            if predicate(piece):
                yield square
            return


def _can_slide(piece_type: PieceType, direction: SlidingDirection) -> bool:
    if piece_type is PieceType.QUEEN:
        return True
    if direction is SlidingDirection.DIAGONAL:
        return piece_type is PieceType.BISHOP
    return piece_type is PieceType.ROOK


def _of_type(piece_type: PieceType, color: Color) -> Predicate:
    return lambda piece: piece.type is piece_type and piece.color is color


def _sliding_in(direction: SlidingDirection, color: Color) -> Predicate:
    return lambda piece: _can_slide(piece.type, direction) and piece.color is color


def _first_in_each_ray(
    rays: Iterable[Iterator[Square]], placement: PiecePlacement, predicate: Predicate
) -> Iterator[Square]:
    for ray in rays:
        yield from _first_matching_piece(ray, placement, predicate)


def _take_while_empty_or_capture(
    ray: Iterable[Square], placement: PiecePlacement, color: Color
) -> Iterator[Square]:
    for square in ray:
        piece = placement.piece_at(square)
        if piece is not None:
            if piece.color is not color:
                yield square
            return
        yield square


def _slide(
    placement: PiecePlacement,
    square: Square,
    color: Color,
    directions: Iterable[tuple[int, int]],
) -> Iterator[Square]:
    for ray in _sliding_moves(square, directions):
        yield from _take_while_empty_or_capture(ray, placement, color)


def pseudo_legal_knight_moves(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Knight destinations not occupied by a piece of ``color``."""
    return _squares_without(knight_moves(square), placement, color)


def pseudo_legal_king_moves(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """King destinations not occupied by a piece of ``color``."""
    return _squares_without(king_moves(square), placement, color)


def pseudo_legal_pawn_pushes(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Non-capturing pawn advances, stopping at the first occupied square."""
    for destination in _pawn_sliding_move(square, color):
        if placement.has_piece_at(destination):
            return
        yield destination


def pseudo_legal_rook_moves(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Orthogonal slides up to and including the first enemy piece."""
    return _slide(placement, square, color, _ROOK_DIRECTIONS)


def pseudo_legal_bishop_moves(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Diagonal slides up to and including the first enemy piece."""
    return _slide(placement, square, color, _BISHOP_DIRECTIONS)


def pseudo_legal_queen_moves(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Orthogonal and diagonal slides up to and including the first enemy piece."""
    return _slide(placement, square, color, _QUEEN_DIRECTIONS)


def pawns_attacking(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Squares of pawns of ``color`` that attack ``square``."""
    return _squares_with(
        pawn_captures(square, color.other()),
        placement,
        Piece(PieceType.PAWN, color),
    )


def pawn_moving_to(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """The pawn of ``color`` that could push onto the empty ``square``, if any."""
    if placement.has_piece_at(square):
        return
    yield from _first_matching_piece(
        _pawn_reverse_sliding_move(square, color),
        placement,
        _of_type(PieceType.PAWN, color),
    )


def knights_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Squares of knights of ``color`` that can jump to ``square``."""
    return _squares_with(
        knight_moves(square), placement, Piece(PieceType.KNIGHT, color)
    )


def kings_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Squares of kings of ``color`` adjacent to ``square``."""
    return _squares_with(king_moves(square), placement, Piece(PieceType.KING, color))


def orthogonal_sliders_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Rooks and queens of ``color`` with a clear orthogonal line to ``square``."""
    return _first_in_each_ray(
        _sliding_moves(square, _ROOK_DIRECTIONS),
        placement,
        _sliding_in(SlidingDirection.ORTHOGONAL, color),
    )


def rooks_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Rooks of ``color`` with a clear orthogonal line to ``square``."""
    return _first_in_each_ray(
        _sliding_moves(square, _ROOK_DIRECTIONS),
        placement,
        _of_type(PieceType.ROOK, color),
    )


def diagonal_sliders_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Bishops and queens of ``color`` with a clear diagonal to ``square``."""
    return _first_in_each_ray(
        _sliding_moves(square, _BISHOP_DIRECTIONS),
        placement,
        _sliding_in(SlidingDirection.DIAGONAL, color),
    )


def bishops_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Bishops of ``color`` with a clear diagonal to ``square``."""
    return _first_in_each_ray(
        _sliding_moves(square, _BISHOP_DIRECTIONS),
        placement,
        _of_type(PieceType.BISHOP, color),
    )


def queens_reaching(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Queens of ``color`` with a clear line to ``square``."""
    return _first_in_each_ray(
        _sliding_moves(square, _QUEEN_DIRECTIONS),
        placement,
        _of_type(PieceType.QUEEN, color),
    )


def pieces_attacking(
    placement: PiecePlacement, square: Square, color: Color
) -> Iterator[Square]:
    """Squares of every piece of ``color`` that attacks ``square``."""
    return chain(
        pawns_attacking(placement, square, color),
        knights_reaching(placement, square, color),
        kings_reaching(placement, square, color),
        orthogonal_sliders_reaching(placement, square, color),
        diagonal_sliders_reaching(placement, square, color),
    )