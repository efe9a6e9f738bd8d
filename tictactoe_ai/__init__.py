"""
tic-tac-toe against a minimax computer opponent, with a PySide6 window
"""

__version__ = "1.0.0"
