"""
Test script for the Reversi game implementation.
"""
import numpy as np
import pytest

from src.game.board import OccupiedCellError, Position, Stone
from src.game.game import ReversiGame

CENTER = {
    Position(3, 3): Stone.BLACK,
    Position(4, 4): Stone.BLACK,
    Position(3, 4): Stone.WHITE,
    Position(4, 3): Stone.WHITE,
}


def test_initial_board():
    """Test the initial board setup."""
    game = ReversiGame()
    state = game.snapshot()

    # Check board size
    assert state.board.shape == (8, 8), "Board should be 8x8"

    for y in range(8):
        for x in range(8):
            p = Position(x, y)
            assert state.stone_at(p) == CENTER.get(p), f"Unexpected stone at {p}"

    # Check empty squares
    empty_count = np.sum(state.board == 0)
    assert empty_count == 60, "Should have 60 empty squares initially"

    assert game.get_current_player() is Stone.WHITE, "White should move first"


def test_make_move():
    """Test making a move and capturing pieces."""
    game = ReversiGame()

    result = game.place(Position(2, 3))
    assert result.placed, "Should be a valid move"
    assert result.flipped == (Position(3, 3),), "Should capture exactly (3, 3)"

    state = game.snapshot()
    assert state.stone_at(Position(2, 3)) is Stone.WHITE, "Move should place white piece"
    assert state.stone_at(Position(3, 3)) is Stone.WHITE, "Should capture black piece"
    assert state.turn is Stone.BLACK, "Should be black's turn"
    assert game.get_score() == (1, 4)
    assert np.count_nonzero(state.board) == 5


def test_move_without_capture_is_skipped():
    """A placement that flips nothing leaves board and turn alone."""
    game = ReversiGame()
    game.place(Position(2, 3))
    before = game.snapshot()

    result = game.place(Position(0, 0))

    assert not result.placed
    assert result.flipped == ()
    assert game.snapshot() == before
    assert game.get_current_player() is Stone.BLACK, "Turn should not change"


def test_occupied_cell_rejected():
    """Placing on a stone raises and changes nothing."""
    game = ReversiGame()
    before = game.snapshot()

    for p in CENTER:
        with pytest.raises(OccupiedCellError):
            game.place(p)

    assert game.snapshot() == before


def test_turn_alternates_and_counts():
    """Each successful placement adds one stone and flips the captured run."""
    game = ReversiGame()
    moves = [Position(2, 3), Position(2, 2), Position(3, 2)]
    expected_turns = [Stone.BLACK, Stone.WHITE, Stone.BLACK]

    for p, expected_turn in zip(moves, expected_turns):
        mover = game.get_current_player()
        black, white = game.get_score()
        before = black if mover is Stone.BLACK else white

        result = game.place(p)

        assert result.placed, f"{mover.label} at {p} should capture"
        black, white = game.get_score()
        after = black if mover is Stone.BLACK else white
        assert after == before + 1 + len(result.flipped)
        assert black + white == 4 + moves.index(p) + 1
        assert game.get_current_player() is expected_turn


def test_stones_can_flip_back():
    """A captured stone is recaptured by a later placement."""
    game = ReversiGame()
    game.place(Position(2, 3))  # White takes (3, 3)
    result = game.place(Position(2, 2))  # Black takes it back along the diagonal

    assert Position(3, 3) in result.flipped
    assert game.snapshot().stone_at(Position(3, 3)) is Stone.BLACK


def test_snapshot_is_independent():
    """Snapshots are deep copies."""
    game = ReversiGame()
    first = game.snapshot()
    second = game.snapshot()
    assert first == second

    with pytest.raises(ValueError):
        first.board[0, 0] = Stone.BLACK.value

    edited = first.board.copy()
    edited[0, 0] = Stone.BLACK.value
    assert not np.array_equal(edited, second.board)
    assert first == second
    assert game.snapshot() == second
    assert game.snapshot().stone_at(Position(0, 0)) is None

    game.place(Position(2, 3))
    assert first == second, "Earlier snapshots do not follow later moves"
    assert game.snapshot() != first


def test_state_str():
    game = ReversiGame()
    text = str(game)
    assert text.splitlines()[3] == ". . . B W . . ."
    assert "Current player: White" in text
    assert "Score - Black: 2, White: 2" in text


if __name__ == "__main__":
    print("Running Reversi game tests...\n")

    test_initial_board()
    test_make_move()
    test_move_without_capture_is_skipped()
    test_occupied_cell_rejected()
    test_turn_alternates_and_counts()
    test_stones_can_flip_back()
    test_snapshot_is_independent()
    test_state_str()

    print("\nAll tests passed successfully!")
