import os

# headless Qt; must be set before the first QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from tictactoe_ai.session import GameSession


class ScriptedPolicy:
    """
    plays a fixed list of O moves, in order
    """
    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = 0

    def choose_move(self, board, difficulty):
        move = self.moves[self.calls]
        self.calls += 1
        assert move in board.empty_cells(), f"scripted move {move} not legal on {board!r}"
        return move


def wait_until(predicate, timeout_ms=2000):
    # spin the Qt event loop until predicate() holds
    waited = 0
    while not predicate():
        if waited >= timeout_ms:
            raise AssertionError("timed out waiting for condition")
        QTest.qWait(10)
        waited += 10


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def make_session(qapp):
    created = []

    def factory(policy=None, delay=0):
        s = GameSession(policy, thinking_delay_ms=delay)
        created.append(s)
        return s

    yield factory
    for s in created:
        s.stop()
        s.deleteLater()
