"""
Search player: the agent shell around UCTSearch.
"""

import logging
from typing import Optional, Union

from agents.config import AgentConfig
from engine.board import Board, Player
from engine.move_generator import Move
from mcts.uct_search import UCTSearch

logger = logging.getLogger(__name__)

ROLE_TO_PLAYER = {
    "black": Player.BLACK,
    "white": Player.WHITE,
}


class MCTSPlayer:
    """
    Plays one side of a NoGo game using UCT search.

    The player owns the configuration and a single seeded search engine.
    Every turn runs one independent search; nothing in the tree survives
    between turns.

    Example:
        >>> player = MCTSPlayer("name=uct role=black N=500 c=0.5 seed=1")
        >>> move = player.take_action(Board())
    """

    def __init__(self, config: Union[AgentConfig, str] = ""):
        if isinstance(config, str):
            config = AgentConfig.from_args(config, defaults={"name": "mcts"})
        self.config = config
        self.who = ROLE_TO_PLAYER[config.role]
        self.search = UCTSearch(
            self.who,
            iterations=config.iterations,
            exploration_weight=config.exploration_weight,
            seed=config.seed,
        )
        self.last_stats = {}

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def role(self) -> str:
        return self.config.role

    def open_episode(self, flag: str = "") -> None:
        logger.debug(f"{self.name} ({self.role}) opens episode {flag}".rstrip())

    def close_episode(self, flag: str = "") -> None:
        logger.debug(f"{self.name} ({self.role}) closes episode {flag}".rstrip())

    def notify(self, message: str) -> None:
        """Record a ``key=value`` message in the agent metadata."""
        key, _, value = message.partition("=")
        self.config.meta[key] = value

    def take_action(self, board: Board) -> Optional[Move]:
        """
        Choose a move for this player's side on ``board``.

        Returns:
            The chosen move, or None if the side has no legal placement
        """
        result = self.search.think(board)
        self.last_stats = result["stats"]
        return result["move"]
