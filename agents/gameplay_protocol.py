"""
Gameplay agent protocol shared by the arena and the search player.
"""

from __future__ import annotations

from typing import Optional, Protocol

from engine.board import Board
from engine.move_generator import Move


class GameplayAgentProtocol(Protocol):
    """
    Minimal gameplay contract: pick a move for the agent's own side.
    """

    name: str

    def take_action(self, board: Board) -> Optional[Move]:
        ...

    def open_episode(self, flag: str = "") -> None:
        ...

    def close_episode(self, flag: str = "") -> None:
        ...
