"""
PySide6 widgets: board and main window
"""
