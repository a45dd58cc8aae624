"""
Board module for Reversi.
Handles the grid of stones, capture search and flipping.
Uses a numpy array as the board representation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import numpy as np


@dataclass(frozen=True)
class Position:
    """A cell on the board. ``x`` is the column, ``y`` is the row."""
    x: int
    y: int

    def __post_init__(self):
        for v in (self.x, self.y):
            if not isinstance(v, int) or isinstance(v, bool):
                raise ValueError(
                    f"x and y must be integers. actual x: {self.x!r}, y: {self.y!r}."
                )
        if not (0 <= self.x < Board.SIZE and 0 <= self.y < Board.SIZE):
            raise ValueError(
                f"x and y must be 0 to {Board.SIZE - 1} integers. actual x: {self.x}, y: {self.y}."
            )

    def step(self, dx: int, dy: int) -> Optional['Position']:
        """Return the neighbouring position, or None if it is off the board."""
        x, y = self.x + dx, self.y + dy
        if 0 <= x < Board.SIZE and 0 <= y < Board.SIZE:
            return Position(x, y)
        return None


class Stone(Enum):
    """Stone colors. Values are chosen so that negation gives the opponent."""
    BLACK = -1
    WHITE = 1

    @property
    def opponent(self) -> 'Stone':
        return Stone(-self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()


class OccupiedCellError(ValueError):
    """Raised when a stone is placed on a cell that already holds one."""

    def __init__(self, position: Position):
        super().__init__(f"There are already stones there. x: {position.x}, y: {position.y}")
        self.position = position


class Board:
    """
    Represents the Reversi game board.
    Each cell of the 8x8 grid holds EMPTY or the value of a Stone.
    """

    # Board dimensions
    SIZE = 8

    EMPTY = 0

    # Directions as (dx, dy): E, W, S, N, SE, NE, SW, NW
    DIRECTIONS: Tuple[Tuple[int, int], ...] = (
        (1, 0),
        (-1, 0),
        (0, 1),
        (0, -1),
        (1, 1),
        (1, -1),
        (-1, 1),
        (-1, -1),
    )

    def __init__(self):
        """Initialize a new Reversi board with the four center stones."""
        self._board = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._board[3, 3] = Stone.BLACK.value
        self._board[4, 4] = Stone.BLACK.value
        self._board[3, 4] = Stone.WHITE.value
        self._board[4, 3] = Stone.WHITE.value

    def ref(self, p: Position) -> Optional[Stone]:
        """Return the stone at ``p``, or None if the cell is empty."""
        value = self._board[p.y, p.x]
        if value == self.EMPTY:
            return None
        return Stone(int(value))

    def _scan(self, origin: Position, dx: int, dy: int, stone: Stone) -> List[Position]:
        """
        Walk from ``origin`` (exclusive) in one direction collecting opponent stones.

        The run counts only if it is closed by a stone of ``stone``'s color.
        Running into an empty cell or off the board yields an empty list.
        """
        run = []
        p = origin.step(dx, dy)
        while p is not None:
            found = self.ref(p)
            if found is None:
                return []
            if found is stone:
                return run
            run.append(p)
            p = p.step(dx, dy)
        return []

    def search(self, p: Position, stone: Stone) -> List[Position]:
        """
        Get the positions that placing ``stone`` at ``p`` would flip.

        Args:
            p: Target cell of the placement
            stone: Color being placed

        Returns:
            List of captured positions over all 8 directions (may be empty)
        """
        captured = []
        for dx, dy in self.DIRECTIONS:
            captured.extend(self._scan(p, dx, dy, stone))
        return captured

    def place(self, p: Position, stone: Stone) -> List[Position]:
        """
        Place ``stone`` at ``p`` and flip everything it captures.

        Nothing is written when the placement captures no stones.

        Returns:
            The flipped positions; empty if the board was left unchanged

        Raises:
            OccupiedCellError: if ``p`` already holds a stone
        """
        if self.ref(p) is not None:
            raise OccupiedCellError(p)

        flipped = self.search(p, stone)
        if not flipped:
            return []

        for q in flipped:
            self._board[q.y, q.x] = stone.value
        self._board[p.y, p.x] = stone.value
        return flipped

    def count(self, stone: Stone) -> int:
        """Number of stones of the given color on the board."""
        return int(np.count_nonzero(self._board == stone.value))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array indexed [y, x]; 0 for empty, otherwise a Stone value
        """
        return self._board.copy()

    def __str__(self) -> str:
        """Return a string representation of the board."""
        return render_grid(self._board)


def render_grid(grid: np.ndarray) -> str:
    """Plain text dump of a board grid, one row per line."""
    symbols = {Board.EMPTY: '.', Stone.BLACK.value: 'B', Stone.WHITE.value: 'W'}
    rows = []
    for y in range(Board.SIZE):
        rows.append(' '.join(symbols[int(grid[y, x])] for x in range(Board.SIZE)))
    return "\n".join(rows)
