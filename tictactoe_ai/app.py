import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from . import config
from .policy import Difficulty, MovePolicy
from .session import GameSession
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette using predefined constants.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def _non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tictactoe-ai",
        description="Play tic-tac-toe against a minimax computer opponent.",
    )
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty],
                        help="start straight away at this difficulty")
    parser.add_argument("--delay", type=_non_negative_int, default=None, metavar="MS",
                        help=f"computer thinking delay (default {config.THINKING_DELAY_MS}, "
                             f"env {config.ENV_PREFIX}DELAY_MS)")
    parser.add_argument("--seed", type=int, default=None,
                        help=f"seed for random moves (env {config.ENV_PREFIX}SEED)")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
                        help=f"logging level (default {config.LOG_LEVEL})")
    return parser


def parse_args(argv=None):
    """
    command line over environment over defaults
    """
    args = build_parser().parse_args(argv)
    if args.delay is None:
        args.delay = config.thinking_delay_ms()
    if args.seed is None:
        args.seed = config.random_seed()
    if args.log_level is None:
        args.log_level = config.log_level()
    return args


def setup_logging(level):
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    logging.info(f"starting (delay {args.delay} ms, seed {args.seed})")

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    session = GameSession(MovePolicy(seed=args.seed), thinking_delay_ms=args.delay)
    window = TicTacToeWindow(session)
    session.setParent(window)
    if args.difficulty:
        session.select_difficulty(Difficulty(args.difficulty))
    window.show()
    return app.exec()
