"""
Reversi game module.
Handles turn order and hands out read-only snapshots of the game state.
"""
from dataclasses import dataclass
from typing import Tuple
import logging
import numpy as np
from .board import Board, Position, Stone, render_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a placement attempt."""
    position: Position
    stone: Stone
    flipped: Tuple[Position, ...] = ()

    @property
    def placed(self) -> bool:
        """True if a stone was put down (at least one stone was captured)."""
        return len(self.flipped) > 0


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Independent copy of the board and the side to move.

    Mutating ``board`` never touches the game it came from.
    """
    board: np.ndarray
    turn: Stone

    def stone_at(self, p: Position):
        value = int(self.board[p.y, p.x])
        return None if value == Board.EMPTY else Stone(value)

    def count(self, stone: Stone) -> int:
        return int(np.count_nonzero(self.board == stone.value))

    def score(self) -> Tuple[int, int]:
        """Stone counts as (black, white)."""
        return self.count(Stone.BLACK), self.count(Stone.WHITE)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.turn is other.turn and np.array_equal(self.board, other.board)

    def __str__(self) -> str:
        black, white = self.score()
        return "\n".join([
            render_grid(self.board),
            f"Current player: {self.turn.label}",
            f"Score - Black: {black}, White: {white}",
        ])


class ReversiGame:
    """
    Main game class for Reversi that owns the board and whose turn it is.
    """

    def __init__(self):
        """Initialize a new Reversi game. White moves first."""
        self.board = Board()
        self.current_player = Stone.WHITE

    def place(self, position: Position) -> MoveResult:
        """
        Put the current player's stone at ``position``.

        A placement that captures nothing is skipped: no stone is added and
        the turn does not change.

        Args:
            position: Target cell

        Returns:
            MoveResult describing what was flipped

        Raises:
            OccupiedCellError: if the cell already holds a stone
        """
        stone = self.current_player
        flipped = self.board.place(position, stone)
        result = MoveResult(position, stone, tuple(flipped))

        if result.placed:
            self.current_player = stone.opponent
            logger.debug("%s placed at (%d, %d), flipped %d",
                         stone.label, position.x, position.y, len(flipped))
        else:
            logger.debug("%s at (%d, %d) captures nothing, skipped",
                         stone.label, position.x, position.y)
        return result

    def snapshot(self) -> GameState:
        """Return a read-only deep copy of the board and turn."""
        board = self.board.get_board_state()
        board.flags.writeable = False
        return GameState(board, self.current_player)

    def get_current_player(self) -> Stone:
        return self.current_player

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current stone count (black, white).
        """
        return self.board.count(Stone.BLACK), self.board.count(Stone.WHITE)

    def __str__(self) -> str:
        return str(self.snapshot())
