"""
Legal move generator for NoGo.
"""

import logging
from typing import List, Tuple

from .board import Board, Player

logger = logging.getLogger(__name__)

# Go-style column letters, "I" is skipped
COLUMN_LABELS = "ABCDEFGHJKLMNOPQRST"


class Move:
    """Represents the placement of one stone at a board cell."""

    def __init__(self, index: int, player: Player):
        self.index = index
        self.player = player

    @property
    def row(self) -> int:
        return self.index // Board.SIZE

    @property
    def col(self) -> int:
        return self.index % Board.SIZE

    def apply(self, board: Board) -> bool:
        """Place this stone on ``board`` in place. Returns False when illegal."""
        return board.place(self.index, self.player)

    def to_coordinate(self) -> str:
        """Coordinate such as ``C4``: column letter, then rows counted from the bottom."""
        return f"{COLUMN_LABELS[self.col]}{Board.SIZE - self.row}"

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return self.index == other.index and self.player == other.player

    def __hash__(self):
        return hash((self.index, self.player))

    def __repr__(self):
        return f"Move({self.player.name[0]}@{self.to_coordinate()})"

    __str__ = __repr__


def parse_move(text: str, player: Player) -> Move:
    """
    Parse a coordinate such as ``C4`` into a Move for ``player``.

    Raises:
        ValueError: If the coordinate is malformed or off the board
    """
    text = text.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Invalid move coordinate: {text!r}")

    col = COLUMN_LABELS.find(text[0])
    try:
        rank = int(text[1:])
    except ValueError:
        raise ValueError(f"Invalid move coordinate: {text!r}") from None

    if col < 0 or col >= Board.SIZE or not 1 <= rank <= Board.SIZE:
        raise ValueError(f"Move coordinate off the board: {text!r}")

    row = Board.SIZE - rank
    return Move(row * Board.SIZE + col, player)


class LegalMoveGenerator:
    """Generates legal placements for a given board state and player."""

    def __init__(self):
        self._placements = {
            player: [Move(index, player) for index in range(Board.CELLS)]
            for player in Player
        }

    def all_placements(self, player: Player) -> List[Move]:
        """
        One placement per board cell for ``player``, in cell order.

        A fresh list is returned, so callers may shuffle it.
        """
        return list(self._placements[player])

    def get_legal_moves(self, board: Board, player: Player) -> List[Move]:
        """
        Get all legal moves for a given player on the current board.

        Order is stable (ascending cell index) for a given board.
        """
        return [move for move in self._placements[player] if board.can_place(move.index, player)]

    def has_legal_moves(self, board: Board, player: Player) -> bool:
        """Check whether ``player`` has at least one legal move."""
        return any(board.can_place(move.index, player) for move in self._placements[player])

    def is_move_legal(self, board: Board, player: Player, move: Move) -> bool:
        """Check a single move, rejecting moves that belong to the other player."""
        if move.player != player:
            return False
        return board.can_place(move.index, player)

    def apply(self, board: Board, move: Move) -> Tuple[Board, bool]:
        """
        Apply ``move`` to a copy of ``board``.

        Returns:
            Tuple of (resulting board, whether the move was legal). On an
            illegal move the returned board equals the input.
        """
        after = board.copy()
        legal = move.apply(after)
        return after, legal
