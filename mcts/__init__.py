"""
UCT tree search package.
"""

from .errors import ActionReconstructionMismatch, SearchError
from .node import SCORE_SENTINEL, SearchNode, create_node, release
from .uct_search import SearchSession, UCTSearch, select_move

__all__ = [
    'SearchNode', 'SCORE_SENTINEL', 'create_node', 'release',
    'SearchSession', 'UCTSearch', 'select_move',
    'SearchError', 'ActionReconstructionMismatch',
]
