"""
Search tree nodes and their lifetime management.
"""

import math
from typing import List, Optional

from engine.board import Board

# Unvisited nodes carry this score so they win the first comparison
SCORE_SENTINEL = 10000.0


class SearchNode:
    """
    One position reached during search, plus accumulated statistics.

    Counts are kept as floats. ``children`` is filled at most once, in move
    enumeration order; ``expanded`` records that this happened even when
    the position turned out to have no legal continuation.
    """

    def __init__(self, position: Board):
        self.position: Optional[Board] = position.copy()
        self.visit_count = 0.0
        self.win_count = 0.0
        self.score = SCORE_SENTINEL
        self.children: List['SearchNode'] = []
        self.expanded = False
        self.released = False

    def visited_children(self) -> int:
        """Number of children with at least one completed simulation."""
        return sum(1 for child in self.children if child.visit_count > 0)

    def update(self, win: bool, simulation_count: float, weight: float) -> None:
        """
        Record one simulation that passed through this node.

        The exploration term uses ``log`` with no square root, scaled by the
        node's own visit count.
        """
        self.visit_count += 1
        if win:
            self.win_count += 1
        self.score = (self.win_count / self.visit_count
                      + weight * math.log(simulation_count) / self.visit_count)

    def subtree_size(self) -> int:
        """Count this node and all of its descendants."""
        return 1 + sum(child.subtree_size() for child in self.children)

    def __repr__(self):
        return (f"SearchNode(visits={self.visit_count:g}, wins={self.win_count:g}, "
                f"score={self.score:.4f}, children={len(self.children)})")


def create_node(position: Board) -> SearchNode:
    """Create a node with zero statistics and a private copy of ``position``."""
    return SearchNode(position)


def release(node: SearchNode) -> None:
    """
    Tear down ``node`` and everything below it.

    Children are released before their parent. A released node holds no
    position and no children.
    """
    for child in node.children:
        release(child)
    node.children = []
    node.position = None
    node.released = True
