import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from . import config
from .game_logic import Board, GameStatus, Mark, Outcome, evaluate, winning_line
from .policy import Difficulty, MovePolicy


class Phase(Enum):
    """
    state of the current game
    """
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_OPPONENT = "awaiting_opponent"
    WON = "won"
    DRAWN = "drawn"


class StatusMessage(Enum):
    """
    what the status line shows; value is the display text
    """
    CHOOSE_DIFFICULTY = "Choose Difficulty to Start"
    HUMAN_TURN = "Your Turn"
    OPPONENT_TURN = "AI Thinking..."
    WON_HUMAN = "You Win!"
    WON_OPPONENT = "AI Wins!"
    DRAWN = "It's a Draw!"

    @property
    def text(self):
        return self.value


@dataclass(frozen=True)
class ScoreTally:
    """
    wins and draws across the games of one session
    """
    human: int = 0
    opponent: int = 0
    draws: int = 0

    def record(self, status: GameStatus) -> "ScoreTally":
        # new tally with the finished game counted
        if status.outcome is Outcome.DRAWN:
            return ScoreTally(self.human, self.opponent, self.draws + 1)
        if status.winner is Mark.X:
            return ScoreTally(self.human + 1, self.opponent, self.draws)
        if status.winner is Mark.O:
            return ScoreTally(self.human, self.opponent + 1, self.draws)
        raise ValueError(f"cannot score an unfinished game: {status}")


@dataclass(frozen=True)
class SessionSnapshot:
    """
    read-only view of the session for rendering
    """
    board: Board
    difficulty: Optional[Difficulty]
    phase: Optional[Phase]
    message: StatusMessage
    winner: Optional[Mark]
    winning_line: Optional[Tuple[int, int, int]]
    scores: ScoreTally
    clickable: Tuple[bool, ...]


class GameSession(QObject):
    """
    Turn flow, scoring and the computer's delayed reply for one player.

    X (human) always moves first. After each human move that leaves the game
    open, a single-shot timer is armed; when it fires the move policy picks
    O's reply. Every reset stops the timer, so a reply computed for an old
    board can never land on a new one.
    """
    state_changed = Signal()          # anything in the snapshot changed
    game_finished = Signal(str)       # final status text
    opponent_thinking = Signal()      # reply timer armed

    def __init__(self, policy=None, thinking_delay_ms=None, parent=None):
        super().__init__(parent)
        if thinking_delay_ms is None:
            thinking_delay_ms = config.thinking_delay_ms()
        if thinking_delay_ms < 0:
            raise ValueError(f"thinking delay must be >= 0, got {thinking_delay_ms}")
        self.policy = policy or MovePolicy(seed=config.random_seed())

        self._opponent_timer = QTimer(self)
        self._opponent_timer.setSingleShot(True)
        self._opponent_timer.setInterval(thinking_delay_ms)
        self._opponent_timer.timeout.connect(self._on_opponent_timer)

        self._difficulty = None
        self._board = Board()
        self._turn = Mark.X
        self._scores = ScoreTally()

    # ------------------------------------------------------------------
    # read side
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def difficulty(self) -> Optional[Difficulty]:
        return self._difficulty

    @property
    def scores(self) -> ScoreTally:
        return self._scores

    @property
    def thinking_delay_ms(self) -> int:
        return self._opponent_timer.interval()

    @property
    def opponent_pending(self) -> bool:
        return self._opponent_timer.isActive()

    @property
    def status(self) -> GameStatus:
        return evaluate(self._board)

    @property
    def phase(self) -> Optional[Phase]:
        """
        None until a difficulty is chosen
        """
        if self._difficulty is None:
            return None
        status = self.status
        if status.outcome is Outcome.WON:
            return Phase.WON
        if status.outcome is Outcome.DRAWN:
            return Phase.DRAWN
        if self._turn is Mark.X:
            return Phase.AWAITING_HUMAN
        return Phase.AWAITING_OPPONENT

    def snapshot(self) -> SessionSnapshot:
        phase = self.phase
        status = self.status
        return SessionSnapshot(
            board=self._board,
            difficulty=self._difficulty,
            phase=phase,
            message=self._message(phase, status),
            winner=status.winner,
            winning_line=winning_line(self._board),
            scores=self._scores,
            clickable=tuple(phase is Phase.AWAITING_HUMAN and c is Mark.EMPTY
                            for c in self._board),
        )

    @staticmethod
    def _message(phase, status):
        if phase is None:
            return StatusMessage.CHOOSE_DIFFICULTY
        if phase is Phase.WON:
            return StatusMessage.WON_HUMAN if status.winner is Mark.X else StatusMessage.WON_OPPONENT
        if phase is Phase.DRAWN:
            return StatusMessage.DRAWN
        if phase is Phase.AWAITING_HUMAN:
            return StatusMessage.HUMAN_TURN
        return StatusMessage.OPPONENT_TURN

    # ------------------------------------------------------------------
    # requests from the window
    # ------------------------------------------------------------------

    def select_difficulty(self, difficulty: Difficulty):
        """
        start a fresh session at this difficulty; scores start from zero
        """
        if not isinstance(difficulty, Difficulty):
            raise ValueError(f"unknown difficulty: {difficulty!r}")
        logging.info(f"difficulty set to {difficulty.label}")
        self._difficulty = difficulty
        self._scores = ScoreTally()
        self._start_game()

    @Slot(int)
    def click_cell(self, index: int) -> bool:
        """
        human move; returns False (and changes nothing) when the move
        is not allowed right now
        """
        mark = self._board.cell(index)   # bad index raises
        phase = self.phase
        if phase is not Phase.AWAITING_HUMAN or mark is not Mark.EMPTY:
            logging.debug(f"ignored click on cell {index} ({phase}, cell {mark.value or 'empty'})")
            return False
        self._apply_move(index, Mark.X)
        return True

    @Slot()
    def new_game(self):
        """
        clear the board, keep difficulty and scores
        """
        if self._difficulty is None:
            return
        logging.info("new game")
        self._start_game()

    @Slot()
    def reset_scores(self):
        """
        zero the scores and clear the board, keep difficulty
        """
        if self._difficulty is None:
            return
        logging.info("scores reset")
        self._scores = ScoreTally()
        self._start_game()

    @Slot()
    def return_to_difficulty_selection(self):
        """
        drop the whole session: difficulty, board and scores
        """
        logging.info("back to difficulty selection")
        self._opponent_timer.stop()
        self._difficulty = None
        self._board = Board()
        self._turn = Mark.X
        self._scores = ScoreTally()
        self.state_changed.emit()

    def stop(self):
        # cancel a pending reply, e.g. when the window closes
        self._opponent_timer.stop()

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------

    def _start_game(self):
        self._opponent_timer.stop()
        self._board = Board()
        self._turn = Mark.X
        self.state_changed.emit()

    def _apply_move(self, index, mark):
        self._board = self._board.place(index, mark)
        logging.info(f"{mark.value} plays cell {index}")
        status = evaluate(self._board)

        if status.is_terminal:
            self._scores = self._scores.record(status)
            message = self._message(self.phase, status)
            s = self._scores
            logging.info(f"game over: {message.text} "
                         f"(you {s.human}, ai {s.opponent}, draws {s.draws})")
            self.state_changed.emit()
            self.game_finished.emit(message.text)
            return

        self._turn = mark.other()
        if self._turn is Mark.O:
            self._opponent_timer.start()
            self.state_changed.emit()
            self.opponent_thinking.emit()
        else:
            self.state_changed.emit()

    @Slot()
    def _on_opponent_timer(self):
        # the timer is stopped on every reset; this guards a queued timeout
        if self.phase is not Phase.AWAITING_OPPONENT:
            logging.debug("stale opponent timer ignored")
            return
        move = self.policy.choose_move(self._board, self._difficulty)
        self._apply_move(move, Mark.O)
