"""
Text rendering of the Reversi board.
"""
from ..config import DisplayConfig
from ..game import Board, GameState, Position, Stone


class ReversiView:
    """Draws a snapshot and the cursor as a frame that is redrawn in place."""

    BORDER = '-' * (Board.SIZE * 4 + 1)

    def __init__(self, display: DisplayConfig = None):
        self.display = display or DisplayConfig()
        self.glyphs = {
            None: self.display.empty_glyph,
            Stone.BLACK: self.display.black_glyph,
            Stone.WHITE: self.display.white_glyph,
        }

    @property
    def height(self) -> int:
        """Lines in one frame: the turn line plus the bordered grid."""
        return 1 + Board.SIZE * 2 + 1

    def status(self, state: GameState) -> str:
        line = f"{state.turn.label}'s turn"
        if self.display.show_score:
            black, white = state.score()
            line += f"  (Black: {black}, White: {white})"
        return line

    def render(self, cursor: Position, state: GameState) -> str:
        """
        Build one frame.

        The frame ends by moving the terminal cursor back to its first line
        so the next frame overwrites it.
        """
        lines = [self.status(state), self.BORDER]
        for y in range(Board.SIZE):
            cells = []
            for x in range(Board.SIZE):
                if cursor.x == x and cursor.y == y:
                    cells.append(self.display.cursor_glyph)
                else:
                    cells.append(self.glyphs[state.stone_at(Position(x, y))])
            lines.append('|' + '|'.join(cells) + '|')
            lines.append(self.BORDER)
        return '\n'.join(lines) + f'\x1b[{self.height}A'

    def park(self) -> str:
        """Move the terminal cursor below the last frame."""
        return f'\x1b[{self.height}B'
