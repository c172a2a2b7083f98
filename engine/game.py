"""
Main NoGo game engine with turn order and game management.
"""

import logging
from typing import Any, Dict, List, Optional

from .board import Board, Player
from .move_generator import LegalMoveGenerator, Move

logger = logging.getLogger(__name__)


class NoGoGame:
    """
    Main NoGo game engine.

    Black moves first and turns alternate. A player who has no legal
    placement on their turn loses.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Player = Player.BLACK):
        self.board = board.copy() if board is not None else Board()
        self.current_player = current_player
        self.move_generator = LegalMoveGenerator()
        self.game_history: List[Dict[str, Any]] = []

    def get_current_player(self) -> Player:
        return self.current_player

    def get_legal_moves(self, player: Optional[Player] = None) -> List[Move]:
        if player is None:
            player = self.current_player
        return self.move_generator.get_legal_moves(self.board, player)

    def make_move(self, move: Move) -> bool:
        """
        Make a move for the current player.

        Returns:
            True if move was successful, False otherwise
        """
        if not self.move_generator.is_move_legal(self.board, self.current_player, move):
            logger.debug(f"Rejected move {move} for {self.current_player.name}")
            return False

        move.apply(self.board)
        self.game_history.append({
            'turn_number': len(self.game_history) + 1,
            'player_to_move': self.current_player.name,
            'action': move.to_coordinate(),
            'board_state': self.board.grid.tolist(),
        })
        self.current_player = self.current_player.opponent()
        return True

    def is_game_over(self) -> bool:
        """The game is over once the side to move has no legal placement."""
        return not self.move_generator.has_legal_moves(self.board, self.current_player)

    def get_winner(self) -> Optional[Player]:
        """Winner of a finished game, or None while the game is still running."""
        if not self.is_game_over():
            return None
        return self.current_player.opponent()
