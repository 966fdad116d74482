import pytest
from codebreaker.engine import BoardFullError, Feedback, InvalidCodeError
from codebreaker.game import MOVES_ALLOWED, Board


def test_board_scores_guesses_from_secret():
    board = Board("rybg")
    assert board.moves_allowed == MOVES_ALLOWED == 12
    assert board.add_guess("rryy") == Feedback(1, 1)
    assert board.moves_used == 1 and board.moves_left == 11
    assert not board.code_broken and not board.is_over

    assert board.add_guess("RYBG").solved
    assert board.code_broken and board.is_over
    assert [fb for _, fb in board.rows] == [Feedback(1, 1), Feedback(4, 0)]


def test_board_invalid_guess_uses_no_row():
    board = Board("rybg")
    with pytest.raises(InvalidCodeError):
        board.add_guess("rrxx")
    assert board.moves_used == 0


def test_board_full():
    board = Board("rybg", moves_allowed=2)
    board.add_guess("mmmm")
    board.add_guess("cccc")
    assert board.is_over and not board.code_broken
    with pytest.raises(BoardFullError):
        board.add_guess("rybg")


def test_board_stores_supplied_feedback():
    board = Board("rybg")
    assert board.add_guess("rryy", (1, 1)) == Feedback(1, 1)
    assert board.expected_feedback("rryy") == Feedback(1, 1)


def test_board_rejects_bad_secret():
    with pytest.raises(InvalidCodeError):
        Board("rybgm")


def test_render_plain():
    board = Board("rybg")
    board.add_guess("rryy")
    lines = board.render(colorize=False).splitlines()
    assert len(lines) == 2 + 12 + 1
    assert lines[2] == "| r  r  y  y | ✓ ⚠ ° ° |"
    assert lines[3] == "| °  °  °  ° | ° ° ° ° |"
    assert str(board) == board.render(colorize=False)
    assert board.reveal_secret(colorize=False) == "r, y, b, g"


def test_render_colorized_has_ansi_codes():
    board = Board("rybg")
    board.add_guess("rryy")
    assert "\x1b[" in board.render()
    assert "\x1b[" in board.reveal_secret()
