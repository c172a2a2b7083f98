"""
NoGo Board implementation with a 9x9 grid and placement rules.
"""

import numpy as np
from typing import List, Optional, Set
from enum import Enum


class Player(Enum):
    """Player enumeration."""
    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Player':
        return Player.WHITE if self is Player.BLACK else Player.BLACK


class Board:
    """
    NoGo game board implementation.

    The board is a 9x9 grid where:
    - 0 represents an empty point
    - 1-2 represent stones (BLACK, WHITE)

    Cells are addressed by flat index ``row * SIZE + col``. A placement is
    legal when the point is empty and, once the stone is down, neither the
    placed group nor any neighbouring opponent group is left without a
    liberty. NoGo forbids both suicide and capture.
    """

    SIZE = 9
    CELLS = SIZE * SIZE

    def __init__(self):
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=int)
        self.last_player: Optional[Player] = None
        self.move_count = 0

    def is_valid_cell(self, index: int) -> bool:
        """Check if a flat cell index is within board bounds."""
        return 0 <= index < self.CELLS

    def get_cell(self, index: int) -> int:
        """Get the value at a cell, or -1 for an invalid index."""
        if not self.is_valid_cell(index):
            return -1
        row, col = divmod(index, self.SIZE)
        return int(self.grid[row, col])

    def is_empty(self, index: int) -> bool:
        """Check if a cell is empty."""
        return self.get_cell(index) == 0

    def get_player_at(self, index: int) -> Optional[Player]:
        """Get the player at a cell, or None if empty."""
        value = self.get_cell(index)
        if value <= 0:
            return None
        return Player(value)

    def get_neighbors(self, index: int) -> List[int]:
        """Get the edge-adjacent cells of a cell."""
        row, col = divmod(index, self.SIZE)
        neighbors = []
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.SIZE and 0 <= nc < self.SIZE:
                neighbors.append(nr * self.SIZE + nc)
        return neighbors

    def _has_liberty(self, index: int) -> bool:
        """Flood-fill the group containing ``index`` looking for an empty neighbour."""
        grid = self.grid
        color = grid[divmod(index, self.SIZE)]
        seen: Set[int] = {index}
        stack = [index]
        while stack:
            current = stack.pop()
            for neighbor in self.get_neighbors(current):
                value = grid[divmod(neighbor, self.SIZE)]
                if value == 0:
                    return True
                if value == color and neighbor not in seen:
                    seen.add(neighbor)
                    stack.append(neighbor)
        return False

    def can_place(self, index: int, player: Player) -> bool:
        """
        Check if ``player`` may place a stone at ``index``.

        The board is left unchanged.
        """
        if not isinstance(player, Player) or not self.is_empty(index):
            return False

        row, col = divmod(index, self.SIZE)
        self.grid[row, col] = player.value
        try:
            # Suicide
            if not self._has_liberty(index):
                return False
            # Capture
            opponent_value = player.opponent().value
            for neighbor in self.get_neighbors(index):
                if self.grid[divmod(neighbor, self.SIZE)] == opponent_value:
                    if not self._has_liberty(neighbor):
                        return False
            return True
        finally:
            self.grid[row, col] = 0

    def place(self, index: int, player: Player) -> bool:
        """
        Place a stone on the board.

        Returns True if placement was successful, False otherwise. The board
        is only modified on success.
        """
        if not self.can_place(index, player):
            return False

        row, col = divmod(index, self.SIZE)
        self.grid[row, col] = player.value
        self.last_player = player
        self.move_count += 1
        return True

    def count_stones(self, player: Player) -> int:
        """Number of stones ``player`` has on the board."""
        return int(np.sum(self.grid == player.value))

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.last_player = self.last_player
        new_board.move_count = self.move_count
        return new_board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __hash__(self):
        return hash(self.grid.tobytes())

    def __str__(self) -> str:
        """String representation of the board."""
        symbols = {0: ".", Player.BLACK.value: "X", Player.WHITE.value: "O"}
        result = []
        for row in range(self.SIZE):
            result.append("".join(symbols[int(value)] for value in self.grid[row]))
        return "\n".join(result)
