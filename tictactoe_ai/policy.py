import logging
import random
from enum import Enum

from .config import MEDIUM_OPTIMAL_PROBABILITY
from .engine import MinimaxEngine


class Difficulty(Enum):
    """
    computer opponent strength
    """
    EASY = "easy"        # random moves
    MEDIUM = "medium"    # coin flip between random and minimax, every move
    HARD = "hard"        # full minimax

    @property
    def label(self):
        return self.value.capitalize()


class MovePolicy:
    """
    picks the computer's move for a difficulty
    """

    def __init__(self, engine=None, rng=None, seed=None,
                 optimal_probability=MEDIUM_OPTIMAL_PROBABILITY):
        """
        rng: anything with random() and choice(), e.g. random.Random;
        built from seed when not given
        """
        if not 0.0 <= optimal_probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {optimal_probability}")
        self.engine = engine or MinimaxEngine()
        self.rng = rng if rng is not None else random.Random(seed)
        self.optimal_probability = optimal_probability

    def random_move(self, board):
        empty = board.empty_cells()
        if not empty:
            raise ValueError("no legal move on a full board")
        return self.rng.choice(empty)

    def optimal_move(self, board):
        return self.engine.best_move(board)

    def choose_move(self, board, difficulty):
        """
        index of an empty cell to play O on; the board must not be full
        """
        if board.is_full():
            raise ValueError("no legal move on a full board")

        if difficulty is Difficulty.EASY:
            move = self.random_move(board)
        elif difficulty is Difficulty.HARD:
            move = self.optimal_move(board)
        elif difficulty is Difficulty.MEDIUM:
            # re-rolled on every move, not once per game
            if self.rng.random() < 1.0 - self.optimal_probability:
                move = self.random_move(board)
            else:
                move = self.optimal_move(board)
        else:
            raise ValueError(f"unknown difficulty: {difficulty!r}")

        logging.debug(f"{difficulty.label} policy chose cell {move}")
        return move
