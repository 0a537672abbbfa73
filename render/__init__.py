"""
Render module for TicTacToe.
Draws the board image shown by the desktop UI.
"""

from .config import RenderConfig
from .board_renderer import BoardRenderer
