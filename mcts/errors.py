"""
Exceptions raised by the tree search.
"""


class SearchError(RuntimeError):
    """Base class for tree search failures."""


class ActionReconstructionMismatch(SearchError):
    """
    No enumerated move reproduces the position of the chosen root child.

    This means the move generator's ``apply`` and ``get_legal_moves`` disagree
    (non-deterministic ordering or inconsistent board equality). It is a logic
    error and is never retried.
    """
