"""
Board renderer for TicTacToe.
Draws the board, marks, and winning line into an image, and maps
clicks on that image back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Sequence, Tuple

from logic.board import Board, Mark
from .config import RenderConfig


class BoardRenderer:
    """
    Renders a board to a BGR image (numpy array).

    The image is square, BOARD_OUTPUT_SIZE pixels wide, split into
    3x3 cells of CELL_OUTPUT_SIZE pixels.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
        """
        self.config = config or RenderConfig()

    def cell_center(self, index: int) -> Tuple[int, int]:
        """
        Pixel centre of a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            (x, y) in pixels.
        """
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """
        Find the cell under a pixel position.

        Args:
            x: Horizontal position in the board image.
            y: Vertical position in the board image.

        Returns:
            Cell index (0-8), or None if outside the board.
        """
        size = self.config.CELL_OUTPUT_SIZE * self.config.BOARD_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        col = int(x) // self.config.CELL_OUTPUT_SIZE
        row = int(y) // self.config.CELL_OUTPUT_SIZE
        return row * self.config.BOARD_SIZE + col

    def render(
        self,
        board: Board,
        winning_line: Optional[Sequence[int]] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: The board to draw.
            winning_line: Indices of the winning triple to highlight.

        Returns:
            BGR image of the board.
        """
        cfg = self.config
        size = cfg.BOARD_OUTPUT_SIZE
        cell_size = cfg.CELL_OUTPUT_SIZE

        img = np.zeros((size, size, 3), dtype=np.uint8)
        img[:] = cfg.BACKGROUND_COLOR

        # Cell backgrounds
        pad = cfg.GRID_THICKNESS
        for index, mark in enumerate(board):
            row, col = divmod(index, cfg.BOARD_SIZE)
            x1, y1 = col * cell_size + pad, row * cell_size + pad
            x2, y2 = (col + 1) * cell_size - pad, (row + 1) * cell_size - pad
            color = cfg.CELL_COLOR if mark is None else cfg.FILLED_CELL_COLOR
            cv2.rectangle(img, (x1, y1), (x2, y2), color, -1)

        # Grid lines
        for i in range(1, cfg.BOARD_SIZE):
            # Vertical lines
            cv2.line(img, (i * cell_size, 0), (i * cell_size, size),
                     cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            # Horizontal lines
            cv2.line(img, (0, i * cell_size), (size, i * cell_size),
                     cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        for index, mark in enumerate(board):
            if mark == Mark.X:
                self._draw_x(img, index)
            elif mark == Mark.O:
                self._draw_o(img, index)
            elif cfg.SHOW_INDICES:
                self._draw_index(img, index)

        if winning_line:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            cv2.line(img, start, end, cfg.WIN_LINE_COLOR,
                     cfg.WIN_LINE_THICKNESS, cfg.LINE_TYPE)

        return img

    def _marker_size(self) -> int:
        cell_size = self.config.CELL_OUTPUT_SIZE
        return cell_size // 2 - int(cell_size * self.config.MARK_MARGIN)

    def _draw_x(self, img: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        s = self._marker_size()
        cv2.line(img, (cx - s, cy - s), (cx + s, cy + s),
                 self.config.X_COLOR, self.config.MARK_THICKNESS, self.config.LINE_TYPE)
        cv2.line(img, (cx + s, cy - s), (cx - s, cy + s),
                 self.config.X_COLOR, self.config.MARK_THICKNESS, self.config.LINE_TYPE)

    def _draw_o(self, img: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        cv2.circle(img, (cx, cy), self._marker_size(),
                   self.config.O_COLOR, self.config.MARK_THICKNESS, self.config.LINE_TYPE)

    def _draw_index(self, img: np.ndarray, index: int):
        cfg = self.config
        cell_size = cfg.CELL_OUTPUT_SIZE
        row, col = divmod(index, cfg.BOARD_SIZE)
        # Small label in the top-left corner of the cell
        org = (col * cell_size + 12, row * cell_size + 28)
        cv2.putText(img, str(index), org, cfg.INDEX_FONT,
                    cfg.INDEX_FONT_SCALE, cfg.INDEX_COLOR, 1, cfg.LINE_TYPE)
