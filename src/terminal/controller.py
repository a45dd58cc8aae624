"""
Keyboard controller: owns the cursor and drives the game from keypresses.
"""
import sys
import logging
from typing import Optional, TextIO

from ..game import OccupiedCellError, Position, ReversiGame
from ..logger import Logger
from .keys import Key
from .view import ReversiView

logger = logging.getLogger(__name__)

CURSORS = {
    'up': (0, -1),
    'down': (0, 1),
    'left': (-1, 0),
    'right': (1, 0),
}

TRIGGERS = ('enter', 'space')


def is_quit(key: Key) -> bool:
    """escape, q or ctrl+c."""
    return key.name in ('escape', 'q') or (key.ctrl and key.name == 'c')


class ReversiController:
    """Translates keys into cursor moves and placements, then redraws."""

    def __init__(self, game: ReversiGame, view: ReversiView,
                 out: Optional[TextIO] = None, game_logger: Optional[Logger] = None):
        self.cursor = Position(0, 0)
        self.game = game
        self.view = view
        self.out = out or sys.stdout
        self.game_logger = game_logger
        self.moves = 0
        self.render()

    def input(self, key: Key) -> bool:
        """
        Handle one keypress.

        Returns:
            False once the player has asked to quit, True otherwise
        """
        if is_quit(key):
            self.out.write(self.view.park() + '\n')
            self.out.flush()
            logger.info("Quit requested after %d moves", self.moves)
            return False

        if key.name in CURSORS:
            self._handle_cursor(key.name)

        if key.name in TRIGGERS:
            self._place()

        self.render()
        return True

    def _handle_cursor(self, name: str):
        dx, dy = CURSORS[name]
        moved = self.cursor.step(dx, dy)
        # At an edge the cursor stays put
        if moved is not None:
            self.cursor = moved

    def _place(self):
        try:
            result = self.game.place(self.cursor)
        except OccupiedCellError as e:
            logger.debug("Ignored placement: %s", e)
            return
        if result.placed:
            self.moves += 1
            if self.game_logger is not None:
                self.game_logger.log_move(self.moves, result, self.game.snapshot())

    def render(self):
        self.out.write(self.view.render(self.cursor, self.game.snapshot()) + '\n')
        self.out.flush()
