"""
Random player for NoGo that places a legal stone uniformly at random.
"""

import random
from typing import Optional

from engine.board import Board, Player
from engine.move_generator import LegalMoveGenerator, Move


class RandomPlayer:
    """
    Baseline player: shuffles every placement and plays the first legal one.

    This is the same policy the search uses for one playout ply.
    """

    def __init__(self, player: Player, seed: Optional[int] = None, name: str = "random"):
        self.who = player
        self.name = name
        self.rng = random.Random(seed)
        self.move_generator = LegalMoveGenerator()
        self._space = self.move_generator.all_placements(player)

    @property
    def role(self) -> str:
        return self.who.name.lower()

    def open_episode(self, flag: str = "") -> None:
        pass

    def close_episode(self, flag: str = "") -> None:
        pass

    def take_action(self, board: Board) -> Optional[Move]:
        self.rng.shuffle(self._space)
        for move in self._space:
            if board.can_place(move.index, self.who):
                return move
        return None
