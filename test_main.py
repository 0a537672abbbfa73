"""
Tests for the command line and console mode.
"""

from logic.ai_player import Difficulty
from logic.board import Mark, Outcome
from main import ConsoleGame, build_config, parse_args


def scripted(commands):
    """input() replacement that plays back a list of commands."""
    it = iter(commands)

    def _input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_default_args():
    args = parse_args([])
    config = build_config(args)

    assert not args.no_ui
    assert config.VS_BOT_DEFAULT is False
    assert config.DEFAULT_DIFFICULTY == Difficulty.RANDOM
    assert config.BOT_MOVE_DELAY_MS == 500


def test_args_override_config():
    args = parse_args(["--no-ui", "--vs-bot", "--difficulty", "optimal",
                       "--seed", "5", "--bot-delay-ms", "0"])
    config = build_config(args)

    assert args.no_ui
    assert config.VS_BOT_DEFAULT is True
    assert config.DEFAULT_DIFFICULTY == Difficulty.OPTIMAL
    assert config.RANDOM_SEED == 5
    assert config.BOT_MOVE_DELAY_MS == 0


def test_console_two_players():
    config = build_config(parse_args(["--bot-delay-ms", "0"]))
    game = ConsoleGame(config, input_func=scripted(["0", "3", "1", "4", "2", "q"]))
    game.start()

    assert game.controller.game_state.outcome == Outcome.X_WINS


def test_console_vs_optimal_bot():
    config = build_config(parse_args(["--vs-bot", "--difficulty", "optimal", "--bot-delay-ms", "0"]))
    game = ConsoleGame(config, input_func=scripted(["0"]))
    game.start()

    # Bot answered right away with the centre
    assert game.controller.game_state.board[4] == Mark.O


def test_console_commands(capsys):
    config = build_config(parse_args(["--bot-delay-ms", "0"]))
    game = ConsoleGame(config, input_func=scripted(["4", "r", "m", "d", "hello", "q"]))
    game.start()

    controller = game.controller
    assert controller.game_state.moves == []
    assert controller.vs_bot
    assert controller.difficulty == Difficulty.OPTIMAL

    out = capsys.readouterr().out
    assert "Unknown command: 'hello'" in out
    assert "Goodbye!" in out


def test_console_rejects_bad_cell(capsys):
    config = build_config(parse_args([]))
    game = ConsoleGame(config, input_func=scripted(["9", "q"]))
    game.start()

    assert game.controller.game_state.moves == []
    assert "Invalid position" in capsys.readouterr().out


def test_console_declines_non_decimal_digits(capsys):
    # Superscript two passes str.isdigit() but int() cannot parse it
    config = build_config(parse_args([]))
    game = ConsoleGame(config, input_func=scripted(["²", "4", "q"]))
    game.start()

    assert "Unknown command: '²'" in capsys.readouterr().out
    assert [m.index for m in game.controller.game_state.moves] == [4]
