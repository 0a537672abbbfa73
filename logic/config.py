"""
Game configuration for TicTacToe.
Players, bot pacing, and default difficulty.
"""

from .ai_player import Difficulty
from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags in main.py override these per run.
    """

    # ==================== PLAYERS ====================
    HUMAN_PLAYER = Mark.X   # Human always moves first
    BOT_PLAYER = Mark.O

    # ==================== BOT SETTINGS ====================
    # Pause before the bot answers, purely for pacing (milliseconds)
    BOT_MOVE_DELAY_MS = 500

    DEFAULT_DIFFICULTY = Difficulty.RANDOM
    VS_BOT_DEFAULT = False

    # Seed for the RANDOM policy (None = unseeded)
    RANDOM_SEED = None

    # Alpha-beta pruning for the OPTIMAL policy (same moves, fewer nodes)
    USE_PRUNING = False
