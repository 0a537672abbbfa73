"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .board import Board, Mark, NUM_CELLS, empty_cells
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(
        self,
        board: Board,
        index: int,
        mark: Mark
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark in (0-8).
            mark: The mark being placed.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not isinstance(mark, Mark):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid mark {mark!r}. Must be X or O."
            )

        # bool is an int subclass, reject it explicitly
        if isinstance(index, bool) or not isinstance(index, int) \
                or not (0 <= index < NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{NUM_CELLS - 1}."
            )

        if self.win_checker.evaluate(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on the board.

        Args:
            board: Current board.

        Returns:
            List of empty cell indices, empty if the game is over.
        """
        if self.win_checker.evaluate(board).is_terminal:
            return []
        return empty_cells(board)
