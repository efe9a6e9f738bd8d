from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

BOARD_SIZE = 3                        # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, columns, diagonals; order is fixed so the first match is deterministic
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(Enum):
    """
    contents of one cell
    """
    EMPTY = ''
    X = 'X'      # human
    O = 'O'      # computer

    def other(self):
        """
        opposing player mark
        """
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("empty cell has no opponent")


_CHAR_TO_MARK = {'X': Mark.X, 'O': Mark.O, '.': Mark.EMPTY, ' ': Mark.EMPTY}


class Board:
    """
    immutable tic-tac-toe grid, cells 0-8 in row-major order
    """
    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Iterable[Mark]] = None):
        if cells is None:
            cells = (Mark.EMPTY,) * CELL_COUNT
        cells = tuple(cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"board needs {CELL_COUNT} cells, got {len(cells)}")
        if not all(isinstance(c, Mark) for c in cells):
            raise TypeError("board cells must be Mark values")
        self._cells = cells

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        build from 9 chars of X, O and '.' (or space) for empty;
        '|' and newlines are ignored so a 3-line layout works too
        """
        chars = [ch for ch in text if ch not in '|\n']
        try:
            return cls(_CHAR_TO_MARK[ch.upper()] for ch in chars)
        except KeyError as e:
            raise ValueError(f"unknown board char {e.args[0]!r}") from None

    @property
    def cells(self) -> Tuple[Mark, ...]:
        return self._cells

    def cell(self, index: int) -> Mark:
        """
        mark at index; anything outside 0-8 is a caller bug
        """
        _check_index(index)
        return self._cells[index]

    def place(self, index: int, mark: Mark) -> "Board":
        """
        new board with mark at index; this board is left untouched
        """
        _check_index(index)
        if mark is Mark.EMPTY:
            raise ValueError("cannot place an empty mark")
        if self._cells[index] is not Mark.EMPTY:
            raise ValueError(f"cell {index} already holds {self._cells[index].value}")
        cells = list(self._cells)
        cells[index] = mark
        return Board(cells)

    def empty_cells(self) -> List[int]:
        return [i for i, c in enumerate(self._cells) if c is Mark.EMPTY]

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    def count(self, mark: Mark) -> int:
        return self._cells.count(mark)

    def __getitem__(self, index):
        return self.cell(index)

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return CELL_COUNT

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Board.from_string({self.to_string()!r})"

    def __str__(self):
        s = self.to_string()
        return '\n'.join(s[r*BOARD_SIZE:(r+1)*BOARD_SIZE] for r in range(BOARD_SIZE))

    def to_string(self) -> str:
        return ''.join(c.value or '.' for c in self._cells)


def _check_index(index):
    # bool is an int subclass but never a cell index
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELL_COUNT:
        raise IndexError(f"cell index must be 0-{CELL_COUNT - 1}, got {index!r}")


class Outcome(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    DRAWN = 'drawn'


@dataclass(frozen=True)
class GameStatus:
    """
    result of evaluating a board; winner is set only for WON
    """
    outcome: Outcome
    winner: Optional[Mark] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @classmethod
    def won(cls, winner: Mark) -> "GameStatus":
        return cls(Outcome.WON, winner)


IN_PROGRESS = GameStatus(Outcome.IN_PROGRESS)
DRAWN = GameStatus(Outcome.DRAWN)


def winning_line(cells) -> Optional[Tuple[int, int, int]]:
    """
    indices of the first complete line, used to highlight the win;
    accepts a Board or any 9-item sequence of marks
    """
    if isinstance(cells, Board):
        cells = cells.cells
    for line in WINNING_LINES:
        a, b, c = line
        if cells[a] is not Mark.EMPTY and cells[a] == cells[b] == cells[c]:
            return line
    return None


def find_winner(cells) -> Optional[Mark]:
    """
    mark owning the first complete line, or None
    """
    line = winning_line(cells)
    return cells[line[0]] if line else None


def evaluate(board: Board) -> GameStatus:
    """
    won / drawn / in progress for a board, no side effects
    """
    winner = find_winner(board.cells)
    if winner is not None:
        return GameStatus.won(winner)
    if board.is_full():
        return DRAWN
    return IN_PROGRESS
