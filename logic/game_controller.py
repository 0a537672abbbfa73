"""
Game flow for TicTacToe.

Ties together the game state, the AI, and the bot timer:

1. A human clicks a cell
2. The move is applied and the board is checked for a result
3. If the game goes on and it is the bot's turn, the bot's move is
   scheduled after a short delay
4. Reset or a mode change cancels a pending bot move
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .ai_player import AIPlayer, Difficulty
from .config import GameConfig
from .game_state import GameState
from .scheduler import BlockingScheduler
from .win_checker import WinChecker


@dataclass
class Notification:
    """An end-of-game message for the presentation layer."""
    title: str
    description: str


class GameController:
    """
    Controller for one TicTacToe session.

    Modes:
    - Human vs human: both marks are played by clicks
    - Human vs bot: the human plays X, the bot answers as O
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler=None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the controller.

        Args:
            config: Game configuration. Uses defaults if not provided.
            scheduler: Object with schedule(delay_ms, callback) -> handle
                and cancel(handle). Defaults to a blocking scheduler.
            rng: Random source for the RANDOM difficulty.
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler or BlockingScheduler()

        if rng is None:
            rng = random.Random(self.config.RANDOM_SEED)

        self.human_player = self.config.HUMAN_PLAYER
        self.bot_player = self.config.BOT_PLAYER
        self.vs_bot = self.config.VS_BOT_DEFAULT
        self.difficulty = self.config.DEFAULT_DIFFICULTY

        self.game_state = GameState()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.bot_player, rng=rng, prune=self.config.USE_PRUNING)

        self.last_notification: Optional[Notification] = None

        # Pending bot timer; the generation changes on every reset or
        # mode switch so a timer that slipped through cannot act
        self._pending_handle = None
        self._has_pending = False
        self._generation = 0

        self._listeners: List[Callable[[], None]] = []

    # ==================== QUERIES ====================

    @property
    def bot_pending(self) -> bool:
        return self._has_pending

    @property
    def is_bot_turn(self) -> bool:
        return (
            self.vs_bot
            and not self.game_state.is_game_over
            and self.game_state.current_player == self.bot_player
        )

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.game_state.board)

    def status_text(self) -> str:
        """The status line shown above the board."""
        outcome = self.game_state.outcome
        if outcome.is_terminal:
            if outcome.winner is None:
                return "The cosmos ends in balance!"
            return f"Player {outcome.winner.value} conquers!"
        return f"Next move: {self.game_state.current_player.value}"

    # ==================== LISTENERS ====================

    def add_listener(self, callback: Callable[[], None]):
        """Register a callback run after every state change."""
        self._listeners.append(callback)

    def _notify(self):
        for callback in self._listeners:
            callback()

    # ==================== ACTIONS ====================

    def handle_click(self, index: int) -> bool:
        """
        Handle a human click on a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was applied.
        """
        if self.is_bot_turn:
            print("Wait for the bot to move!")
            return False

        return self._play(index)

    def set_vs_bot(self, vs_bot: bool):
        """Switch between human-vs-human and human-vs-bot."""
        self._cancel_pending()
        self.vs_bot = vs_bot
        print(f"Mode set to: {'VS Bot' if vs_bot else 'VS Player'}")

        if self.is_bot_turn:
            self._schedule_bot_move()

        self._notify()

    def set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level (applies to the next bot move)."""
        self.difficulty = difficulty
        print(f"Difficulty set to: {difficulty.value}")
        self._notify()

    def reset_game(self):
        """Reset the game for a new round."""
        print("Resetting game...")
        self._cancel_pending()
        self.game_state.reset()
        self.last_notification = None
        self._notify()

    def bot_move(self) -> bool:
        """
        Let the bot play its move now.

        Returns:
            True if the bot moved.
        """
        if not self.is_bot_turn:
            return False

        move = self.ai.select_move(self.game_state.board, self.difficulty)
        if move is None:
            print("ERROR: AI could not find a move!")
            return False

        print(f"Bot ({self.difficulty.value}) plays {move}")
        return self._play(move)

    def shutdown(self):
        """Drop any pending bot move (e.g. when the window closes)."""
        self._cancel_pending()

    # ==================== INTERNALS ====================

    def _play(self, index: int) -> bool:
        if not self.game_state.make_move(index):
            return False

        outcome = self.game_state.outcome
        if outcome.is_terminal:
            self._announce_result()
        elif self.is_bot_turn:
            self._schedule_bot_move()

        self._notify()
        return True

    def _announce_result(self):
        winner = self.game_state.winner
        if winner is None:
            self.last_notification = Notification(
                title="It's a draw!",
                description="Nobody wins this time."
            )
        else:
            self.last_notification = Notification(
                title=f"Player {winner.value} wins!",
                description="Congratulations! 🎉"
            )
        print(f"{self.last_notification.title} {self.last_notification.description}")

    def _schedule_bot_move(self):
        self._cancel_pending()
        generation = self._generation
        self._has_pending = True
        handle = self.scheduler.schedule(
            self.config.BOT_MOVE_DELAY_MS,
            lambda: self._on_bot_timer(generation)
        )
        # A blocking scheduler has already run the callback by now
        if self._has_pending and generation == self._generation:
            self._pending_handle = handle

    def _on_bot_timer(self, generation: int):
        if generation != self._generation:
            return
        self._has_pending = False
        self._pending_handle = None
        self.bot_move()

    def _cancel_pending(self):
        self._generation += 1
        if self._has_pending:
            self.scheduler.cancel(self._pending_handle)
        self._has_pending = False
        self._pending_handle = None
