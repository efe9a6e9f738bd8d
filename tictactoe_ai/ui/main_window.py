from ..config import WINDOW_TITLE
from ..policy import Difficulty
from ..session import GameSession, StatusMessage
from .board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

MESSAGE_STYLES = {
    StatusMessage.CHOOSE_DIFFICULTY: "color: #eee;",
    StatusMessage.HUMAN_TURN: "color: #8acaff; font-weight: bold;",
    StatusMessage.OPPONENT_TURN: "color: #ff8a8a;",
    StatusMessage.WON_HUMAN: "color: lime; font-weight: bold;",
    StatusMessage.WON_OPPONENT: "color: #ff8a8a; font-weight: bold;",
    StatusMessage.DRAWN: "color: #ffd700; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window: difficulty picker, board, score board
    """
    def __init__(self, session=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession(parent=self)
        self.board_widget = BoardWidget(self.session, parent=self)
        self.difficulty_buttons = {}

        self._setup_ui()
        self.session.state_changed.connect(self._refresh)
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QGroupBox { color: #ccc; font-weight: bold; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()              # top menu
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.main_layout.addWidget(self.message_label)

        self._create_difficulty_controls()   # easy/medium/hard picker
        self.main_layout.addWidget(self.difficulty_group)

        self.game_area = QWidget()
        game_layout = QHBoxLayout(self.game_area)
        game_layout.setContentsMargins(0, 0, 0, 0)
        board_column = QVBoxLayout()
        board_column.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self._create_game_controls()         # new game / reset / change
        board_column.addWidget(self.controls_widget)
        game_layout.addLayout(board_column, 2)
        self._create_score_board()
        game_layout.addWidget(self.score_group, 1)
        self.main_layout.addWidget(self.game_area, 1)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.session.new_game)
        self.change_difficulty_action = QAction("Change Difficulty", self)
        self.change_difficulty_action.triggered.connect(self.session.return_to_difficulty_selection)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (self.new_game_action, self.change_difficulty_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_difficulty_controls(self):
        '''one button per difficulty'''
        self.difficulty_group = QGroupBox("Choose Difficulty")
        layout = QHBoxLayout()
        layout.addStretch()
        for difficulty in Difficulty:
            btn = QPushButton(difficulty.label)
            btn.setMinimumWidth(90)
            btn.clicked.connect(lambda checked=False, d=difficulty: self.session.select_difficulty(d))
            self.difficulty_buttons[difficulty] = btn
            layout.addWidget(btn)
        layout.addStretch()
        self.difficulty_group.setLayout(layout)

    def _create_game_controls(self):
        # new game + reset scores, change difficulty underneath
        self.controls_widget = QWidget()
        vl = QVBoxLayout(self.controls_widget)
        vl.setContentsMargins(0, 0, 0, 0)
        hl = QHBoxLayout()
        self.new_game_button = QPushButton("New Game"); self.new_game_button.clicked.connect(self.session.new_game)
        self.reset_scores_button = QPushButton("Reset Scores"); self.reset_scores_button.clicked.connect(self.session.reset_scores)
        for w in (self.new_game_button, self.reset_scores_button): hl.addWidget(w)
        vl.addLayout(hl)
        self.change_difficulty_button = QPushButton("Change Difficulty")
        self.change_difficulty_button.setStyleSheet("background-color: #8a2b2b; color: white;")
        self.change_difficulty_button.clicked.connect(self.session.return_to_difficulty_selection)
        vl.addWidget(self.change_difficulty_button)

    def _create_score_board(self):
        '''wins/draws counters + algorithm blurb'''
        self.score_group = QGroupBox("Score Board")
        grid = QGridLayout()
        self.human_score_label = QLabel("0")
        self.ai_score_label = QLabel("0")
        self.draws_score_label = QLabel("0")
        rows = (("You (X)", self.human_score_label, "#8acaff"),
                ("AI (O)", self.ai_score_label, "#ff8a8a"),
                ("Draws", self.draws_score_label, "#ccc"))
        for r, (name, value_label, color) in enumerate(rows):
            name_label = QLabel(name); name_label.setStyleSheet(f"color: {color};")
            value_label.setStyleSheet(f"color: {color}; font-weight: bold;")
            value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            grid.addWidget(name_label, r, 0); grid.addWidget(value_label, r, 1)
        self.difficulty_label = QLabel("")
        self.difficulty_label.setStyleSheet("color: #aaa;")
        grid.addWidget(self.difficulty_label, len(rows), 0, 1, 2)
        info = QLabel("Challenge the unbeatable AI powered by the Minimax algorithm.\n"
                      "The AI adapts to the chosen difficulty.")
        info.setWordWrap(True); info.setStyleSheet("color: #888;")
        info.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Minimum)
        grid.addWidget(info, len(rows) + 1, 0, 1, 2)
        grid.setRowStretch(len(rows) + 2, 1)
        self.score_group.setLayout(grid)

    @Slot()
    def _refresh(self):
        # redraw everything from one snapshot
        snap = self.session.snapshot()
        playing = snap.difficulty is not None
        self.difficulty_group.setVisible(not playing)
        self.game_area.setVisible(playing)
        self.new_game_action.setEnabled(playing)
        self.change_difficulty_action.setEnabled(playing)

        self.message_label.setStyleSheet(MESSAGE_STYLES[snap.message])
        self.message_label.setText(snap.message.text)
        self.human_score_label.setText(str(snap.scores.human))
        self.ai_score_label.setText(str(snap.scores.opponent))
        self.draws_score_label.setText(str(snap.scores.draws))
        self.difficulty_label.setText(f"Difficulty: {snap.difficulty.label}" if playing else "")
        self.board_widget.setCursor(Qt.PointingHandCursor if any(snap.clickable) else Qt.ArrowCursor)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.session.click_cell(index)

    def closeEvent(self, event):
        # no reply may fire into a closed window
        self.session.stop()
        event.accept()
