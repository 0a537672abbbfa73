"""
Render configuration for TicTacToe.
Sizes and colours used when drawing the board.

All colours are BGR tuples (OpenCV order).
"""

import cv2


class RenderConfig:
    """
    Configuration class for board rendering.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size for the board image (pixels)
    BOARD_OUTPUT_SIZE = 420
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 140 pixels per cell

    # ==================== COLOURS ====================
    BACKGROUND_COLOR = (62, 26, 46)     # Deep purple
    CELL_COLOR = (110, 40, 90)
    FILLED_CELL_COLOR = (150, 50, 120)
    GRID_COLOR = (250, 160, 190)
    X_COLOR = (255, 212, 0)             # Cyan-blue
    O_COLOR = (107, 107, 255)           # Soft red
    WIN_LINE_COLOR = (0, 215, 255)      # Gold

    # ==================== STROKES ====================
    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    WIN_LINE_THICKNESS = 8

    # Gap between a mark and its cell border (fraction of a cell)
    MARK_MARGIN = 0.25

    LINE_TYPE = cv2.LINE_AA

    # Cell index labels in empty cells
    SHOW_INDICES = True
    INDEX_COLOR = (170, 120, 160)
    INDEX_FONT = cv2.FONT_HERSHEY_SIMPLEX
    INDEX_FONT_SCALE = 0.6
