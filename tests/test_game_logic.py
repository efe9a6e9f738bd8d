import pytest

from tictactoe_ai.game_logic import (
    DRAWN, IN_PROGRESS, WINNING_LINES, Board, GameStatus, Mark, Outcome,
    evaluate, find_winner, winning_line,
)


def test_new_board_is_empty():
    b = Board()
    assert len(b) == 9
    assert b.empty_cells() == list(range(9))
    assert not b.is_full()
    assert all(b.cell(i) is Mark.EMPTY for i in range(9))


def test_place_returns_new_board_and_leaves_original():
    b = Board()
    b2 = b.place(4, Mark.X)
    assert b.cell(4) is Mark.EMPTY
    assert b2.cell(4) is Mark.X
    assert b2.empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]
    assert b != b2


def test_place_on_occupied_cell_fails():
    b = Board().place(0, Mark.X)
    with pytest.raises(ValueError):
        b.place(0, Mark.O)


def test_place_empty_mark_fails():
    with pytest.raises(ValueError):
        Board().place(0, Mark.EMPTY)


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_bad_index_fails_loudly(index):
    b = Board()
    with pytest.raises(IndexError):
        b.cell(index)
    with pytest.raises(IndexError):
        b.place(index, Mark.X)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        Board([Mark.EMPTY] * 8)


def test_from_string_and_back():
    b = Board.from_string("XO.|.X.|..O")
    assert b.cell(0) is Mark.X
    assert b.cell(1) is Mark.O
    assert b.cell(8) is Mark.O
    assert b.count(Mark.X) == 2
    assert b.to_string() == "XO..X...O"
    assert str(b) == "XO.\n.X.\n..O"
    assert eval(repr(b), {"Board": Board}) == b


def test_from_string_rejects_unknown_chars():
    with pytest.raises(ValueError):
        Board.from_string("XO?......")


def test_boards_hash_by_contents():
    assert len({Board(), Board(), Board().place(0, Mark.X)}) == 2


def test_mark_other():
    assert Mark.X.other() is Mark.O
    assert Mark.O.other() is Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.other()


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
def test_every_line_wins(line, mark):
    b = Board()
    for i in line:
        b = b.place(i, mark)
    assert evaluate(b) == GameStatus.won(mark)
    assert find_winner(b) is mark
    assert winning_line(b) == line


def test_first_line_in_fixed_order_is_reported():
    # X holds both the top row and the left column
    b = Board.from_string("XXX|XOO|XOO")
    assert winning_line(b) == (0, 1, 2)


def test_full_board_without_line_is_drawn():
    b = Board.from_string("XOX|XOO|OXX")
    assert b.is_full()
    assert evaluate(b) == DRAWN
    assert evaluate(b).winner is None
    assert winning_line(b) is None


def test_win_on_full_board_beats_draw():
    b = Board.from_string("XOX|OXO|OXX")
    assert evaluate(b) == GameStatus.won(Mark.X)


def test_open_board_in_progress():
    b = Board.from_string("XO.|...|...")
    status = evaluate(b)
    assert status == IN_PROGRESS
    assert status.outcome is Outcome.IN_PROGRESS
    assert not status.is_terminal


def test_find_winner_works_on_plain_lists():
    cells = [Mark.O, Mark.O, Mark.O] + [Mark.EMPTY] * 6
    assert find_winner(cells) is Mark.O


def test_find_winner_accepts_a_board():
    b = Board.from_string("XXX|OO.|...")
    assert find_winner(b) is Mark.X
    assert b[0] is Mark.X
    assert find_winner(Board.from_string("XO.|...|...")) is None


def test_winning_line_accepts_plain_lists():
    cells = list(Board.from_string("O..|XO.|X.O"))
    assert winning_line(cells) == (0, 4, 8)
    assert find_winner(cells) is Mark.O


def test_bool_is_not_a_cell_index():
    b = Board()
    with pytest.raises(IndexError):
        b.cell(True)
    with pytest.raises(IndexError):
        b.place(False, Mark.X)
    with pytest.raises(IndexError):
        b[True]
