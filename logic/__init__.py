"""
Logic module for Cosmic TicTacToe.
Handles game state, rules, the bot opponent, and game flow.

Human vs human, or human vs a bot that plays either random moves
or perfect (minimax) moves.
"""

__version__ = "1.0.0"

from .board import Mark, Outcome, Board, empty_board, empty_cells, side_to_move
from .win_checker import WinChecker, evaluate
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, Move, apply_move, reset_game
from .ai_player import AIPlayer, Difficulty, select_move
from .config import GameConfig
from .scheduler import BlockingScheduler
from .game_controller import GameController, Notification
