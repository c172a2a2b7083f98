"""
Arena script for running NoGo matches between two agents.
"""

import os
import sys
import time
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from agents.gameplay_protocol import GameplayAgentProtocol
from agents.registry import build_agent
from engine.board import Player
from engine.game import NoGoGame
from mcts.errors import SearchError
from utils.logging_setup import setup_arena_logging, write_run_summary

logger = logging.getLogger(__name__)


class ArenaMatch:
    """
    A single game between a black and a white agent.
    """

    def __init__(self, black: GameplayAgentProtocol, white: GameplayAgentProtocol):
        self.agents = {Player.BLACK: black, Player.WHITE: white}

        self.winner: Optional[str] = None
        self.winner_seat: Optional[str] = None
        self.moves_made = 0
        self.game_duration = 0.0
        self.error: Optional[str] = None
        self.moves: List[str] = []

    def play_match(self, max_moves: int = 200) -> Dict[str, Any]:
        """
        Play a complete game.

        Args:
            max_moves: Safety cap on moves per game

        Returns:
            Match results dictionary
        """
        start_time = time.time()
        game = NoGoGame()
        for agent in self.agents.values():
            agent.open_episode()

        try:
            while not game.is_game_over() and self.moves_made < max_moves:
                current_player = game.get_current_player()
                agent = self.agents[current_player]

                move = agent.take_action(game.board)
                if move is None or not game.make_move(move):
                    # An agent that cannot or will not move forfeits
                    logger.info(f"{agent.name} ({current_player.name}) has no valid move, game over")
                    self._set_winner(current_player.opponent())
                    break

                self.moves_made += 1
                self.moves.append(move.to_coordinate())
                logger.debug(f"Move {self.moves_made}: {agent.name} plays {move.to_coordinate()}")

            if self.winner_seat is None:
                winner = game.get_winner()
                if winner is not None:
                    self._set_winner(winner)
        except SearchError as e:
            logger.exception(f"Search failed after {self.moves_made} moves")
            self.error = str(e)
        finally:
            for agent in self.agents.values():
                agent.close_episode()
            self.game_duration = time.time() - start_time

        logger.info(f"Game finished after {self.moves_made} moves: winner={self.winner}")
        return self.get_results()

    def _set_winner(self, player: Player) -> None:
        self.winner_seat = player.name.lower()
        self.winner = self.agents[player].name

    def get_results(self) -> Dict[str, Any]:
        """Get match results."""
        return {
            "black": self.agents[Player.BLACK].name,
            "white": self.agents[Player.WHITE].name,
            "winner": self.winner,
            "winner_seat": self.winner_seat,
            "moves_made": self.moves_made,
            "moves": list(self.moves),
            "game_duration": self.game_duration,
            "error": self.error,
        }


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Count wins per seat across games.

    Seats rather than names are counted so two agents sharing a name still
    get separate tallies; ``agents`` lists the names seen in each seat.
    """
    wins = {"black": 0, "white": 0}
    agents: Dict[str, List[str]] = {"black": [], "white": []}
    for result in results:
        for seat in agents:
            if result[seat] not in agents[seat]:
                agents[seat].append(result[seat])
        if result.get("winner_seat") is not None:
            wins[result["winner_seat"]] += 1
    return {
        "games": len(results),
        "agents": agents,
        "wins": wins,
        "errors": sum(1 for r in results if r["error"]),
    }


def run_arena(black_type: str, black_args: str, white_type: str, white_args: str,
              games: int = 1, max_moves: int = 200,
              black_config: Optional[str] = None,
              white_config: Optional[str] = None) -> Dict[str, Any]:
    """Build fresh agents per game and play ``games`` games."""
    results = []
    for game_idx in range(games):
        black = build_agent(black_type, "black", black_args, black_config)
        white = build_agent(white_type, "white", white_args, white_config)
        logger.info(f"Game {game_idx + 1}/{games}: {black.name} (black) vs {white.name} (white)")
        results.append(ArenaMatch(black, white).play_match(max_moves=max_moves))
    return {"summary": summarize(results), "games": results}


def main():
    parser = argparse.ArgumentParser(description="Play NoGo games between two agents")
    parser.add_argument("--black", default="mcts", choices=["mcts", "random"], help="Black agent type")
    parser.add_argument("--white", default="random", choices=["mcts", "random"], help="White agent type")
    parser.add_argument("--black-args", default="name=mcts N=1000 c=0.5", help="key=value args for black")
    parser.add_argument("--white-args", default="name=random", help="key=value args for white")
    parser.add_argument("--black-config", default=None, help="YAML/JSON config for a black search agent")
    parser.add_argument("--white-config", default=None, help="YAML/JSON config for a white search agent")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument("--max-moves", type=int, default=200, help="Move cap per game")
    parser.add_argument("--output-dir", default="arena_results", help="Directory for logs and summaries")
    parser.add_argument("--name", default=None, help="Label for the run directory (default: <black>_vs_<white>)")
    parser.add_argument("--verbose", action="store_true", help="Log every move to the run log")
    args = parser.parse_args()

    run_dir, _ = setup_arena_logging(
        Path(args.output_dir), args.black, args.white,
        experiment_name=args.name,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    report = run_arena(
        args.black, args.black_args, args.white, args.white_args,
        games=args.games, max_moves=args.max_moves,
        black_config=args.black_config, white_config=args.white_config,
    )

    summary_path = write_run_summary(run_dir, report)

    logger.info(f"Summary: {report['summary']}")
    logger.info(f"Results written to {summary_path}")


if __name__ == "__main__":
    main()
