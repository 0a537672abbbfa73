"""
Game state management for TicTacToe.
Applies moves, tracks move history, and resets the board.
"""

from typing import Optional, List
from dataclasses import dataclass, field

from .board import (
    Board, Mark, Outcome, empty_board, empty_cells, side_to_move,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


def apply_move(board: Board, index: int, mark: Mark) -> Optional[Board]:
    """
    Place a mark on the board.

    Args:
        board: The current board (left untouched).
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board identical to the input except cell `index`,
        or None if the move is rejected (out of range, cell filled,
        or game already over).

    The mark is not checked against whose turn it is. Callers that want
    boards with legal X/O counts pass side_to_move(board), as
    GameState.make_move does.
    """
    if not _validator.validate_move(board, index, mark).is_valid:
        return None

    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def reset_game() -> Board:
    """Start a new game: 9 empty cells, X to move."""
    return empty_board()


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board
    - Move history

    Whose turn it is and the outcome are derived from the board,
    so they can never drift out of sync with it.
    """

    board: Board = field(default_factory=empty_board)

    moves: List[Move] = field(default_factory=list)

    @property
    def current_player(self) -> Mark:
        return side_to_move(self.board)

    @property
    def outcome(self) -> Outcome:
        return _win_checker.evaluate(self.board)

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    @property
    def is_draw(self) -> bool:
        return self.outcome == Outcome.DRAW

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    def make_move(self, index: int) -> bool:
        """
        Make a move for the current player.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        player = self.current_player
        result = _validator.validate_move(self.board, index, player)
        if not result.is_valid:
            print(result.error_message)
            return False

        self.board = apply_move(self.board, index, player)
        self.moves.append(Move(
            player=player,
            index=index,
            move_number=len(self.moves)
        ))
        return True

    def get_empty_cells(self) -> List[int]:
        return empty_cells(self.board)

    def reset(self):
        """Clear the board and move history."""
        self.board = reset_game()
        self.moves = []

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(board=self.board, moves=list(self.moves))

    def print_board(self):
        """Print the board to console."""
        print()
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                mark = self.board[index]
                cells.append(mark.value if mark is not None else str(index))
            print(" " + " | ".join(cells))
            if row < 2:
                print("---+---+---")

        outcome = self.outcome
        if outcome.is_terminal:
            if outcome.winner:
                print(f"\n🏆 {outcome.winner.value} WINS!")
            else:
                print("\n🤝 It's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # X takes the left column
    for index in [0, 1, 3, 4, 6]:
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.print_board()

    assert game.winner == Mark.X

    print("\nGame state test done!")
