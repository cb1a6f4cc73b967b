"""Chess board model: FEN rank decoding and board assembly."""

import enum
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from common.base.logging_config import get_logger
logger = get_logger(__name__)

FILES = 'abcdefgh'
BOARD_SIZE = 8
DIGITS = '0123456789'

class Color(enum.Enum):
    """Piece color, valued by its FEN side-to-move letter."""
    WHITE = "w"
    BLACK = "b"

class Kind(enum.Enum):
    """Piece kind, valued by its lowercase FEN letter."""
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

class ActiveColor(enum.Enum):
    """Side to move, as far as the input tells us."""
    WHITE = "White"
    BLACK = "Black"
    UNKNOWN = "Unknown"

    @classmethod
    def from_token(cls, token: Optional[str]) -> 'ActiveColor':
        """
        Resolve a side-to-move token.

        :param token: "w", "b" or None
        :return: Matching ActiveColor, UNKNOWN for anything else
        """
        if token == "w":
            return cls.WHITE
        if token == "b":
            return cls.BLACK
        return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not ActiveColor.UNKNOWN

@dataclass(frozen=True)
class Piece:
    """A colored chess piece."""
    color: Color
    kind: Kind

    @classmethod
    def from_fen(cls, char: str) -> Optional['Piece']:
        """
        Build a piece from a FEN letter.

        :param char: One of pnbrqkPNBRQK
        :return: Piece, or None if the character is not a piece letter
        """
        try:
            kind = Kind(char.lower())
        except ValueError:
            return None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, kind)

    @property
    def fen(self) -> str:
        """FEN letter for this piece."""
        letter = self.kind.value
        return letter.upper() if self.color is Color.WHITE else letter

@dataclass(frozen=True)
class Square:
    """
    One board square.

    An empty square has no piece. A square decoded from a character that
    is not part of the FEN alphabet has no piece either, but keeps the
    offending character in ``unknown`` and is not considered empty. Both
    render as a blank cell.
    """
    piece: Optional[Piece] = None
    unknown: str = ""

    @property
    def is_empty(self) -> bool:
        return self.piece is None and not self.unknown

    @property
    def is_unknown(self) -> bool:
        return bool(self.unknown)

EMPTY = Square()

class MalformedPlacement(ValueError):
    """Raised when a placement field does not split into 8 ranks."""
    def __init__(self, placement: str, rank_count: int):
        self.placement = placement
        self.rank_count = rank_count
        super().__init__(f"FEN must have 8 ranks, got {rank_count}: {placement!r}")

class MalformedRank(ValueError):
    """Raised when a rank does not decode to exactly 8 squares."""
    def __init__(self, rank: int, token: str, width: int):
        self.rank = rank
        self.token = token
        self.width = width
        super().__init__(f"Rank {rank} ({token!r}) has {width} squares, expected 8")

def decode_rank(token: str) -> Tuple[Square, ...]:
    """
    Expand one run-length encoded FEN rank into squares.

    Digits expand to that many empty squares, each digit on its own, so
    "44" gives eight empty squares. The width is not checked here.

    :param token: Rank string, e.g. "r1bqkb1r"
    :return: Squares from file a onwards
    """
    squares = []
    for char in token:
        if char in DIGITS:
            squares.extend([EMPTY] * int(char))
            continue

        piece = Piece.from_fen(char)
        if piece is None:
            logger.debug(f"Unknown character {char!r} in rank {token!r}")
            squares.append(Square(unknown=char))
        else:
            squares.append(Square(piece))
    return tuple(squares)

@dataclass(frozen=True)
class Board:
    """
    An 8x8 position plus side to move.

    ``ranks`` is kept in FEN order: index 0 is rank 8 and each rank starts
    at file a.
    """
    ranks: Tuple[Tuple[Square, ...], ...]
    active_color: ActiveColor = ActiveColor.UNKNOWN

    @staticmethod
    def parity(rank_index: int, file_index: int) -> int:
        """
        Light/dark classification of a square.

        :param rank_index: 0 for rank 8 through 7 for rank 1
        :param file_index: 0 for file a through 7 for file h
        :return: 0 for a light square, 1 for a dark one
        """
        return (rank_index + file_index) % 2

    def rank(self, number: int) -> Tuple[Square, ...]:
        """Squares of rank *number* (1-8), file a first."""
        if not 1 <= number <= BOARD_SIZE:
            raise ValueError(f"Rank must be between 1 and 8, got {number}")
        return self.ranks[BOARD_SIZE - number]

    def square(self, name: str) -> Square:
        """Square by algebraic name, e.g. "e4"."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in DIGITS:
            raise ValueError(f"Invalid square name: {name!r}")
        squares = self.rank(int(name[1]))
        file_index = FILES.index(name[0])
        if file_index >= len(squares):
            return EMPTY
        return squares[file_index]

    def iter_squares(self) -> Iterator[Tuple[int, int, Square]]:
        """Yield (rank_index, file_index, square) in FEN order."""
        for rank_index, squares in enumerate(self.ranks):
            for file_index, square in enumerate(squares):
                yield rank_index, file_index, square

    def to_placement(self) -> str:
        """
        Re-encode the board as a canonical FEN piece-placement field.

        Unknown squares are written back as their original character.
        """
        rows = []
        for squares in self.ranks:
            row_chars = []
            empty_count = 0
            for square in squares:
                if square.is_empty:
                    empty_count += 1
                    continue
                if empty_count > 0:
                    row_chars.append(str(empty_count))
                    empty_count = 0
                row_chars.append(square.unknown or square.piece.fen)
            if empty_count > 0:
                row_chars.append(str(empty_count))
            rows.append("".join(row_chars))
        return "/".join(rows)

def build_board(placement: str, color_token: Optional[str] = None,
                strict: bool = True) -> Board:
    """
    Assemble a board from a piece-placement field.

    :param placement: Field such as "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
    :param color_token: Optional side-to-move token ("w" or "b")
    :param strict: Reject ranks that do not decode to 8 squares
    :return: Board with ranks in FEN order
    :raises MalformedPlacement: if the field does not have 8 ranks
    :raises MalformedRank: in strict mode, if a rank is not 8 squares wide
    """
    tokens = placement.split('/')
    if len(tokens) != BOARD_SIZE:
        raise MalformedPlacement(placement, len(tokens))

    ranks = []
    for rank_index, token in enumerate(tokens):
        squares = decode_rank(token)
        if len(squares) != BOARD_SIZE:
            rank_number = BOARD_SIZE - rank_index
            if strict:
                raise MalformedRank(rank_number, token, len(squares))
            logger.warning(f"Rank {rank_number} ({token!r}) has {len(squares)} squares, rendering as-is")
        ranks.append(squares)

    return Board(tuple(ranks), ActiveColor.from_token(color_token))
