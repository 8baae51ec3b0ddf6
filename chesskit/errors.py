"""Error kinds reported by parsing, placement, position and move checks."""

from __future__ import annotations

from enum import Enum, unique


class _DescribedError(Enum):
    """An error kind whose value is a human-readable description."""

    def __str__(self) -> str:
        return str(self.value)


@unique
class MoveError(_DescribedError):
    """Reasons a move may be considered invalid."""

    KING_OR_ROOK_MOVED = "castling failed because the king or rook has already moved"
    KING_PATH_BLOCKED = "castling is blocked by pieces in the king's path"
    ROOK_PATH_BLOCKED = "castling is blocked by pieces in the rook's path"
    KING_PATH_UNDER_ATTACK = (
        "castling would move the king through or into a square under attack"
    )
    NO_VALID_ORIGIN = "no valid origin square found for the move"
    AMBIGUOUS_ORIGIN = "the origin square of the move is ambiguous"
    ILLEGAL_MOVE = "the piece at the origin cannot legally move to the destination"
    WRONG_PIECE_COLOR_AT_ORIGIN = (
        "the piece at the origin does not belong to the player making the move"
    )
    NO_PIECE_AT_ORIGIN = "the origin square is empty"
    MOVE_LEAVES_OWN_KING_IN_CHECK = "the move would leave the player's own king in check"
    PROMOTION_ON_INVALID_RANK = "promotion attempted on a non-final rank"
    NON_PAWN_PROMOTION_ATTEMPT = "attempted to promote a piece that is not a pawn"
    MISSING_PROMOTION_PIECE = "promotion piece was not specified when required"
    HALFMOVE_CLOCK_OVERFLOW = "the move would cause the halfmove clock to overflow"
    FULLMOVE_NUMBER_OVERFLOW = "the move would cause the fullmove number to overflow"


@unique
class PiecePlacementError(_DescribedError):
    """Errors that can occur while building a piece placement."""

    MISSING_KING = "one side is missing its king"
    MULTIPLE_KINGS_OF_SAME_COLOR = "a side has more than one king"
    PAWN_ON_BACK_RANK = "a pawn is placed on the back rank"
    PAWN_ON_PROMOTION_RANK = "a pawn is placed on the promotion rank"


@unique
class PositionError(_DescribedError):
    """Errors that can occur while building a position."""

    SIDE_NOT_TO_MOVE_IS_UNDER_ATTACK = (
        "the king of the side not to move is attacked by the side to move"
    )
    FULLMOVE_NUMBER_OUT_OF_RANGE = "fullmove number is out of the valid range"
    HALFMOVE_CLOCK_OUT_OF_RANGE = (
        "halfmove clock is inconsistent with the fullmove number and active color"
    )
    INVALID_CASTLING_RIGHTS_FOR_PIECE_POSITIONS = (
        "castling rights conflict with the positions of the kings or rooks"
    )
    EN_PASSANT_TARGET_SQUARE_OCCUPIED = "the en passant target square is occupied"
    EN_PASSANT_NO_CAPTURABLE_PAWN = (
        "no opponent pawn can be captured on the en passant target square"
    )
    EN_PASSANT_TARGET_SQUARE_INVALID_RANK = (
        "the en passant target square is on an invalid rank for the active color"
    )


@unique
class ParseError(_DescribedError):
    """Errors that can occur while parsing text notation."""

    INVALID_FILE = "invalid file"
    INVALID_RANK = "invalid rank"
    INVALID_COLOR = "invalid color"
    INVALID_PIECE_TYPE = "invalid piece type"
    INVALID_PROMOTABLE_PIECE_TYPE = "invalid promotable piece type"
    INVALID_PIECE = "invalid piece"
    INVALID_CASTLING_AVAILABILITY = "invalid castling availability"
    INVALID_PIECE_PLACEMENT = "invalid piece placement"
    INVALID_HALFMOVE_CLOCK = "invalid halfmove clock"
    INVALID_FULLMOVE_NUMBER = "invalid fullmove number"
    INVALID_POSITION = "invalid position"
    INVALID_SAN_MOVE = "invalid SAN move"
    INVALID_GAME_RESULT = "invalid game result"
    INVALID_MOVE = "invalid move"
    INVALID_TAG = "invalid tag"
    INVALID_QUOTE = "invalid quote"
    INVALID_RIGHT_BRACKET = "invalid right bracket"
    DUPLICATED_FEN_TAG = "duplicated FEN tag"
    EXPECTING_SPACE = "expecting a space"
    EXPECTING_END_OF_STRING = "expecting end of string"


class ParseFailure(ValueError):
    """Raised when text cannot be parsed; carries the ParseError kind."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(str(error))
        self.error = error