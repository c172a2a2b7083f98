"""
UCT tree search for NoGo.

Each call to ``think``/``select_move`` grows a fresh tree from the given
position for a fixed number of random-playout simulations, then answers
with the most visited root child. The tree is torn down before returning.
"""

import logging
import math
import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from engine.board import Board, Player
from engine.move_generator import LegalMoveGenerator, Move

from .errors import ActionReconstructionMismatch
from .node import SearchNode, create_node, release

logger = logging.getLogger(__name__)


@dataclass
class SearchSession:
    """
    Mutable state for one move decision.

    ``simulation_count`` counts simulations across the whole tree and feeds
    the score formula. ``update_path`` holds the nodes visited by the
    iteration in progress, root first.
    """
    simulation_count: float = 0.0
    update_path: List[SearchNode] = field(default_factory=list)
    trace: List[Tuple[int, ...]] = field(default_factory=list)
    _current_trace: List[int] = field(default_factory=list)

    def begin_iteration(self, root: SearchNode) -> None:
        self.update_path.append(root)
        self._current_trace = []

    def record_choice(self, child: SearchNode, index: int) -> None:
        self.update_path.append(child)
        self._current_trace.append(index)

    def end_iteration(self) -> None:
        self.trace.append(tuple(self._current_trace))


class UCTSearch:
    """
    Monte Carlo tree search with lazy expansion and random playouts.

    Args:
        player: Side the search plays for
        iterations: Number of simulations per decision (N)
        exploration_weight: Coefficient of the exploration term (c)
        seed: Seed for the single random generator used by tie-break and
            playout shuffles
        move_generator: Move enumerator, a fresh LegalMoveGenerator by default
    """

    def __init__(self,
                 player: Player,
                 iterations: int = 1000,
                 exploration_weight: float = 0.5,
                 seed: Optional[int] = None,
                 move_generator: Optional[LegalMoveGenerator] = None):
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        if not math.isfinite(exploration_weight):
            raise ValueError(f"exploration_weight must be finite, got {exploration_weight}")

        self.player = player
        self.iterations = iterations
        self.exploration_weight = exploration_weight
        self.rng = random.Random(seed)
        self.move_generator = move_generator or LegalMoveGenerator()

        # Playout orderings persist between plies and decisions, each ply
        # reshuffles the previous order.
        self._playout_space = {side: self.move_generator.all_placements(side) for side in Player}

    def select_move(self, board: Board) -> Optional[Move]:
        """Return the chosen move, or None when no legal move exists."""
        return self.think(board)["move"]

    def think(self, board: Board) -> Dict[str, Any]:
        """
        Run one full decision from ``board``.

        Returns:
            Dictionary with ``move`` (Move or None) and ``stats``.

        Raises:
            ActionReconstructionMismatch: If no legal move reproduces the
                chosen child position
        """
        start = time.perf_counter()
        session = SearchSession()
        root = create_node(board)

        try:
            while session.simulation_count < self.iterations:
                session.begin_iteration(root)
                self._descend(root, True, session)
                session.end_iteration()

            session.simulation_count = 0.0

            if not root.expanded:
                self._expand(root, True)

            stats = self._collect_stats(root, session)
            if not root.children:
                logger.info(f"No legal move for {self.player.name}")
                stats["elapsed_ms"] = (time.perf_counter() - start) * 1000
                return {"move": None, "stats": stats}

            best_index = self._most_visited_child(root)
            move = self._reconstruct_move(root.position, root.children[best_index].position)

            stats["best_child"] = best_index
            stats["elapsed_ms"] = (time.perf_counter() - start) * 1000
            logger.debug(
                f"UCT {self.player.name}: {move} after {self.iterations} simulations, "
                f"{stats['nodes']} nodes, {stats['elapsed_ms']:.1f}ms"
            )
            return {"move": move, "stats": stats}
        finally:
            release(root)

    def _descend(self, node: SearchNode, our_turn: bool, session: SearchSession) -> None:
        """Selection and expansion, one path per iteration."""
        if node.visit_count == 0:
            self._backpropagate(self._simulate(node, our_turn, session), session)
            return

        if not node.expanded:
            self._expand(node, our_turn)

        if not node.children:
            self._backpropagate(self._simulate(node, our_turn, session), session)
            return

        children = node.children
        best_index = -1
        best_score = -math.inf

        if node.visited_children() < len(children):
            order = list(range(len(children)))
            self.rng.shuffle(order)
            for i in order:
                child = children[i]
                if child.visit_count == 0 and child.score > best_score:
                    best_score = child.score
                    best_index = i
        else:
            for i, child in enumerate(children):
                if child.score > best_score:
                    best_score = child.score
                    best_index = i

        chosen = children[best_index]
        session.record_choice(chosen, best_index)
        self._descend(chosen, not our_turn, session)

    def _expand(self, node: SearchNode, our_turn: bool) -> None:
        """Materialise one child per legal move of the side to move."""
        side = self.player if our_turn else self.player.opponent()
        for move in self.move_generator.all_placements(side):
            after, legal = self.move_generator.apply(node.position, move)
            if legal:
                node.children.append(create_node(after))
        node.expanded = True

    def _simulate(self, node: SearchNode, our_turn: bool, session: SearchSession) -> bool:
        """
        Random playout from ``node``.

        Each ply shuffles every placement for the side to move and plays the
        first legal one. The side left without a legal placement loses.
        Returns True when the searching player wins.
        """
        after = node.position.copy()
        side = self.player if our_turn else self.player.opponent()

        while True:
            space = self._playout_space[side]
            self.rng.shuffle(space)
            if not any(move.apply(after) for move in space):
                break
            side = side.opponent()

        session.simulation_count += 1
        return side.opponent() == self.player

    def _backpropagate(self, win: bool, session: SearchSession) -> None:
        for node in session.update_path:
            node.update(win, session.simulation_count, self.exploration_weight)
        session.update_path.clear()

    @staticmethod
    def _most_visited_child(root: SearchNode) -> int:
        best_index = -1
        best_visits = -math.inf
        for i, child in enumerate(root.children):
            if child.visit_count > best_visits:
                best_visits = child.visit_count
                best_index = i
        return best_index

    def _reconstruct_move(self, position: Board, target: Board) -> Move:
        for move in self.move_generator.get_legal_moves(position, self.player):
            after, legal = self.move_generator.apply(position, move)
            if legal and after == target:
                return move
        raise ActionReconstructionMismatch(
            f"No legal move for {self.player.name} reproduces the selected child position"
        )

    def _collect_stats(self, root: SearchNode, session: SearchSession) -> Dict[str, Any]:
        return {
            "iterations": self.iterations,
            "root_visits": root.visit_count,
            "root_wins": root.win_count,
            "child_visits": [child.visit_count for child in root.children],
            "child_scores": [child.score for child in root.children],
            "nodes": root.subtree_size(),
            "trace": list(session.trace),
        }


def select_move(board: Board,
                player: Player,
                iterations: int = 1000,
                exploration_weight: float = 0.5,
                seed: Optional[int] = None) -> Optional[Move]:
    """One-shot search with a throwaway engine."""
    search = UCTSearch(player, iterations=iterations,
                       exploration_weight=exploration_weight, seed=seed)
    return search.select_move(board)
