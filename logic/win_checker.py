"""
Win checker for TicTacToe.
Classifies a board as won, drawn, or still in progress.
"""

from typing import Optional, Tuple
from .board import Board, Mark, Outcome, is_full


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (flat indices, row-major)
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Lines are scanned in WINNING_LINES order and the first
        complete line decides.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The winning line as a tuple of 3 indices, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        A full board with a winning line is a win, never a draw.
        """
        if self.check_winner(board) is not None:
            return False
        return is_full(board)

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify a board.

        Args:
            board: The board to classify.

        Returns:
            The Outcome (win for either side, draw, or in progress).
        """
        winner = self.check_winner(board)

        if winner is not None:
            return Outcome.win_for(winner)
        if is_full(board):
            return Outcome.DRAW
        return Outcome.IN_PROGRESS


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Classify a board (module-level shortcut for WinChecker.evaluate)."""
    return _checker.evaluate(board)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    cases = [
        ("XXX OO_ ___", Outcome.X_WINS),    # horizontal
        ("OX_ OX_ O__", Outcome.O_WINS),    # vertical
        ("XO_ _XO __X", Outcome.X_WINS),    # diagonal
        ("XO_ _O_ ___", Outcome.IN_PROGRESS),
        ("XOX XOO OXX", Outcome.DRAW),
    ]

    for text, expected in cases:
        outcome = checker.evaluate(board_from_string(text))
        print(f"  {text}: {outcome.value}")
        assert outcome == expected

    print("\nWinChecker test done!")
