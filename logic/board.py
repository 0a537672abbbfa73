"""
Board representation for TicTacToe.

The board is a tuple of 9 cells laid out row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8

Each cell is None (empty) or a Mark. Boards are never mutated in place;
every operation builds a new tuple.
"""

from enum import Enum
from typing import Optional, List, Tuple


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Mark(Enum):
    """The two player symbols."""
    X = "X"     # Moves first, maximizing side
    O = "O"     # Bot by default, minimizing side

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class Outcome(Enum):
    """Classification of a board."""
    IN_PROGRESS = "in_progress"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw / unfinished game."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None

    @staticmethod
    def win_for(mark: Mark) -> "Outcome":
        return Outcome.X_WINS if mark == Mark.X else Outcome.O_WINS


Board = Tuple[Optional[Mark], ...]


def empty_board() -> Board:
    """Create a board with all 9 cells empty."""
    return (None,) * NUM_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of the empty cells, in scan order (0 before 8)."""
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def side_to_move(board: Board) -> Mark:
    """Infer the side to move from the board (X plays first)."""
    x_count = sum(1 for cell in board if cell == Mark.X)
    o_count = sum(1 for cell in board if cell == Mark.O)
    return Mark.X if x_count == o_count else Mark.O


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a flat index to (row, col)."""
    return divmod(index, BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a flat index."""
    return row * BOARD_SIZE + col


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9-character string such as "XX_OO____".

    Any character other than X or O is read as an empty cell.
    Whitespace and '|' separators are ignored.
    """
    chars = [c for c in text.upper() if c not in " |\n\t"]
    if len(chars) != NUM_CELLS:
        raise ValueError(f"Expected {NUM_CELLS} cells, got {len(chars)}")

    cells = []
    for c in chars:
        if c == "X":
            cells.append(Mark.X)
        elif c == "O":
            cells.append(Mark.O)
        else:
            cells.append(None)
    return tuple(cells)


def board_to_string(board: Board) -> str:
    return "".join(cell.value if cell is not None else "_" for cell in board)
