"""
AI player for TicTacToe.
Chooses the bot's move either at random or with the Minimax algorithm.
"""

import random
from enum import Enum
from typing import Optional, Dict

from .board import Board, Mark, Outcome
from .move_validator import MoveValidator
from .win_checker import WinChecker


class Difficulty(Enum):
    """AI difficulty levels."""
    RANDOM = "random"      # Uniform random moves
    OPTIMAL = "optimal"    # Full minimax


# Leaf values, always from X's point of view
SCORES = {
    Outcome.X_WINS: 1,
    Outcome.O_WINS: -1,
    Outcome.DRAW: 0,
}


class AIPlayer:
    """
    An AI that plays TicTacToe.

    On OPTIMAL it runs an exhaustive minimax: X maximizes, O minimizes,
    and ties between equally good moves go to the lowest cell index.
    It will win if possible, block the opponent if needed, and never
    lose. On RANDOM it picks any empty cell with equal probability.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        prune: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source for the RANDOM policy. Pass a seeded
                random.Random for reproducible games.
            prune: Use alpha-beta pruning below the root. Root moves are
                still scored exactly, so the chosen move does not change.
        """
        self.player = player
        self.rng = rng or random.Random()
        self.prune = prune
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def select_move(
        self,
        board: Board,
        difficulty: Difficulty,
        mark: Optional[Mark] = None
    ) -> Optional[int]:
        """
        Choose a move for `mark` (defaults to the AI's own mark).

        Args:
            board: Current board. Never modified.
            difficulty: RANDOM or OPTIMAL.
            mark: The mark to play.

        Returns:
            Cell index, or None if there is no legal move
            (board full or game already over).
        """
        if difficulty == Difficulty.RANDOM:
            return self.get_random_move(board)
        return self.get_best_move(board, mark)

    def get_random_move(self, board: Board) -> Optional[int]:
        """Get a random valid move (no blocking or winning heuristic)."""
        valid_moves = self.validator.get_valid_moves(board)
        if not valid_moves:
            return None
        return self.rng.choice(valid_moves)

    def get_best_move(self, board: Board, mark: Optional[Mark] = None) -> Optional[int]:
        """
        Get the minimax-optimal move.

        Args:
            board: Current board.
            mark: The mark to play (defaults to the AI's own mark).

        Returns:
            Index of best move, or None if no moves available.
        """
        mark = mark or self.player
        scores = self.score_moves(board, mark)

        if not scores:
            return None

        # Strict comparison in scan order keeps the earliest index on ties
        best_move = None
        best_score = None
        for index, score in scores.items():
            if best_score is None:
                better = True
            elif mark == Mark.X:
                better = score > best_score
            else:
                better = score < best_score

            if better:
                best_score = score
                best_move = index

        print(f"AI evaluated {self.moves_evaluated} positions. Best move: {best_move} (score: {best_score})")

        return best_move

    def score_moves(self, board: Board, mark: Optional[Mark] = None) -> Dict[int, int]:
        """
        Score every legal move for `mark`.

        Args:
            board: Current board.
            mark: The mark to play (defaults to the AI's own mark).

        Returns:
            Mapping of cell index to minimax value (X's point of view),
            in scan order. Empty if the game is over.
        """
        mark = mark or self.player
        self.moves_evaluated = 0

        scores = {}
        for index in self.validator.get_valid_moves(board):
            child = self._place(board, index, mark)
            scores[index] = self.minimax(child, is_maximizing=(mark == Mark.O))
        return scores

    def minimax(
        self,
        board: Board,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        """
        Minimax search, with optional alpha-beta pruning.

        Args:
            board: Position to evaluate.
            is_maximizing: True if X is to move.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            +1 if X wins with best play, -1 if O wins, 0 for a draw.
        """
        self.moves_evaluated += 1

        outcome = self.win_checker.evaluate(board)
        if outcome.is_terminal:
            return SCORES[outcome]

        mark = Mark.X if is_maximizing else Mark.O

        if is_maximizing:
            max_score = -2
            for index, cell in enumerate(board):
                if cell is not None:
                    continue
                score = self.minimax(self._place(board, index, mark), False, alpha, beta)
                max_score = max(max_score, score)
                if self.prune:
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        break  # Prune
            return max_score
        else:
            min_score = 2
            for index, cell in enumerate(board):
                if cell is not None:
                    continue
                score = self.minimax(self._place(board, index, mark), True, alpha, beta)
                min_score = min(min_score, score)
                if self.prune:
                    beta = min(beta, score)
                    if beta <= alpha:
                        break  # Prune
            return min_score

    @staticmethod
    def _place(board: Board, index: int, mark: Mark) -> Board:
        return board[:index] + (mark,) + board[index + 1:]


def select_move(
    board: Board,
    difficulty: Difficulty,
    mark_to_play: Mark,
    rng: Optional[random.Random] = None
) -> Optional[int]:
    """
    Choose the bot's next move.

    Args:
        board: Current board. Never modified.
        difficulty: RANDOM or OPTIMAL.
        mark_to_play: The mark the bot is playing.
        rng: Random source for the RANDOM policy.

    Returns:
        Cell index, or None if the board is full or already decided.
    """
    return AIPlayer(mark_to_play, rng=rng).select_move(board, difficulty)


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = board_from_string("XX_ _O_ ___")
    print("\nAI is O. X is about to win with 2!")
    move = ai.get_best_move(board)
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = board_from_string("OO_ XX_ X__")
    print("\nAI is O. Can win with 2!")
    move = ai.get_best_move(board)
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
