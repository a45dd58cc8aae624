"""
Tests for the board view.
"""
from src.config import DisplayConfig
from src.game import Position, ReversiGame
from src.terminal.view import ReversiView


def test_frame_layout():
    view = ReversiView()
    frame = ReversiView().render(Position(0, 0), ReversiGame().snapshot())
    assert frame.endswith('\x1b[18A')

    lines = frame[:-len('\x1b[18A')].split('\n')
    assert len(lines) == view.height
    assert lines[0] == "White's turn"
    assert lines[1] == '-' * 33
    assert lines[2] == '| ☆ |' + '|'.join(['   '] * 7) + '|'
    assert lines[8] == '|' + '|'.join(['   '] * 3 + [' ● ', ' ○ '] + ['   '] * 3) + '|'
    assert lines[10] == '|' + '|'.join(['   '] * 3 + [' ○ ', ' ● '] + ['   '] * 3) + '|'
    assert all(len(line) == 33 for line in lines[1:])


def test_cursor_replaces_cell():
    frame = ReversiView().render(Position(3, 3), ReversiGame().snapshot())
    row = frame.split('\n')[8]
    assert row == '|' + '|'.join(['   '] * 3 + [' ☆ ', ' ○ '] + ['   '] * 3) + '|'


def test_custom_glyphs_and_score():
    display = DisplayConfig(black_glyph=' X ', white_glyph=' O ', cursor_glyph='[ ]', show_score=True)
    game = ReversiGame()
    game.place(Position(2, 3))
    frame = ReversiView(display).render(Position(7, 7), game.snapshot())
    lines = frame.split('\n')

    assert lines[0] == "Black's turn  (Black: 1, White: 4)"
    assert lines[8] == '|' + '|'.join(['   '] * 2 + [' O ', ' O ', ' O '] + ['   '] * 3) + '|'
    assert lines[16].endswith('[ ]|')


def test_park():
    assert ReversiView().park() == '\x1b[18B'


if __name__ == "__main__":
    test_frame_layout()
    test_cursor_replaces_cell()
    test_custom_glyphs_and_score()
    test_park()
    print("View tests passed!")
