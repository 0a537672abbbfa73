"""
Main entry point for Cosmic TicTacToe.

Launches the desktop UI by default, or a console game with --no-ui.

Run this script to play TicTacToe against a friend or the bot!
"""

import argparse
from typing import Optional

from logic.ai_player import Difficulty
from logic.config import GameConfig
from logic.game_controller import GameController


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Commands:
    - 0-8: place your mark in that cell
    - m: toggle VS Bot / VS Player
    - d: toggle difficulty (random / optimal)
    - r: reset the game
    - q: quit
    """

    def __init__(self, config: Optional[GameConfig] = None, input_func=input):
        """
        Initialize the console game.

        Args:
            config: Game configuration.
            input_func: Where commands are read from (input() by default).
        """
        self.controller = GameController(config)
        self.input_func = input_func
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "="*60)
        print("   Cosmic TicTacToe - Console")
        print("="*60)
        print("Enter a cell (0-8), 'm' mode, 'd' difficulty, 'r' reset, 'q' quit\n")

        self.is_running = True
        self._show()

        while self.is_running:
            try:
                command = self.input_func("> ").strip().lower()
            except EOFError:
                break
            self.handle_command(command)

        print("Goodbye!")

    def handle_command(self, command: str):
        """
        Handle one line of input.

        Args:
            command: The text typed by the player.
        """
        controller = self.controller

        if command == "q":
            self.is_running = False
            return
        if command == "r":
            controller.reset_game()
        elif command == "m":
            controller.set_vs_bot(not controller.vs_bot)
        elif command == "d":
            if controller.difficulty == Difficulty.RANDOM:
                controller.set_difficulty(Difficulty.OPTIMAL)
            else:
                controller.set_difficulty(Difficulty.RANDOM)
        elif command.isdecimal():
            if not controller.handle_click(int(command)):
                return
        else:
            print(f"Unknown command: {command!r}")
            return

        self._show()

    def _show(self):
        self.controller.game_state.print_board()
        mode = f"VS Bot ({self.controller.difficulty.value})" if self.controller.vs_bot else "VS Player"
        print(f"{self.controller.status_text()}   [{mode}]")


def build_config(args: argparse.Namespace) -> GameConfig:
    """Apply command-line overrides on top of the default configuration."""
    config = GameConfig()
    config.VS_BOT_DEFAULT = args.vs_bot
    config.DEFAULT_DIFFICULTY = Difficulty(args.difficulty)
    config.RANDOM_SEED = args.seed
    if args.bot_delay_ms is not None:
        config.BOT_MOVE_DELAY_MS = args.bot_delay_ms
    return config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cosmic TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--vs-bot",
        action="store_true",
        help="Play against the bot (the bot plays O)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.value,
        help="Bot difficulty"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random bot"
    )
    parser.add_argument(
        "--bot-delay-ms",
        type=int,
        default=None,
        help=f"Pause before the bot moves (default: {GameConfig.BOT_MOVE_DELAY_MS})"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config)
        ui.run()
        return

    game = ConsoleGame(config)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
