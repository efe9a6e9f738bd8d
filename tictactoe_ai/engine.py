"""
Minimax search with alpha-beta pruning.

Scores are from the computer's point of view: O maximizes, X minimizes.
A win is worth WIN_SCORE minus the plies it took, so the engine prefers the
quickest win and the slowest loss. Draws are 0.
"""
import logging
import math
from typing import Dict, List

from .config import WIN_SCORE
from .game_logic import Board, Mark, find_winner


class MinimaxEngine:
    """
    deterministic optimal player for O
    """

    def __init__(self, win_score: int = WIN_SCORE):
        self.win_score = win_score
        self.nodes_evaluated = 0   # per search, for the debug log

    def minimax(self, cells: List[Mark], depth: int, is_maximizing: bool,
                alpha: float = -math.inf, beta: float = math.inf) -> float:
        """
        Value of a position.

        Args:
            cells: scratch list of 9 marks; moves are placed and undone in
                place, so it is unchanged on return.
            depth: plies already searched from the root of this call.
            is_maximizing: True when O is to move.
            alpha: best value the maximizer can already guarantee.
            beta: best value the minimizer can already guarantee.
        """
        self.nodes_evaluated += 1

        winner = find_winner(cells)
        if winner is Mark.O:
            return self.win_score - depth
        if winner is Mark.X:
            return depth - self.win_score
        if Mark.EMPTY not in cells:
            return 0

        if is_maximizing:
            best = -math.inf
            for i in range(len(cells)):
                if cells[i] is not Mark.EMPTY:
                    continue
                cells[i] = Mark.O
                value = self.minimax(cells, depth + 1, False, alpha, beta)
                cells[i] = Mark.EMPTY
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break  # prune
            return best

        best = math.inf
        for i in range(len(cells)):
            if cells[i] is not Mark.EMPTY:
                continue
            cells[i] = Mark.X
            value = self.minimax(cells, depth + 1, True, alpha, beta)
            cells[i] = Mark.EMPTY
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                break  # prune
        return best

    def move_values(self, board: Board) -> Dict[int, float]:
        """
        value of playing O at each empty cell, in ascending index order
        """
        self.nodes_evaluated = 0
        cells = list(board.cells)
        values = {}
        for i in board.empty_cells():
            cells[i] = Mark.O
            values[i] = self.minimax(cells, 0, False)
            cells[i] = Mark.EMPTY
        return values

    def best_move(self, board: Board) -> int:
        """
        Optimal cell for O.

        Ties go to the lowest index, so the same board always gives the
        same move.

        Raises:
            ValueError: the board has no empty cell.
        """
        values = self.move_values(board)
        if not values:
            raise ValueError("no legal move on a full board")

        best_index, best_value = None, -math.inf
        for index, value in values.items():
            if value > best_value:
                best_index, best_value = index, value

        logging.debug(f"minimax evaluated {self.nodes_evaluated} nodes, "
                      f"best move {best_index} (score {best_value})")
        return best_index
