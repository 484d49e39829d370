"""
Engine configuration for the TicTacToe decision engine.
Board geometry, scores, display symbols and logging settings.
"""

import logging


class EngineConfig:
    """
    Configuration class for engine settings.
    Change these values to tune display and logging!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored flat in row-major order
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== SCORING ====================
    # Fixed utility values seen from the maximizer.
    # No depth discount: a slow forced win scores the same as a fast one.
    WIN_SCORE = 1
    LOSS_SCORE = -1
    DRAW_SCORE = 0

    # ==================== DISPLAY SYMBOLS ====================
    X_SYMBOL = "X"
    O_SYMBOL = "O"
    EMPTY_SYMBOL = "-"

    # Extra characters accepted as an empty cell when parsing positions
    EMPTY_ALIASES = ("-", ".", " ", "_")

    # ==================== GAME SETTINGS ====================
    # X always moves first; the AI plays O unless told otherwise
    DEFAULT_AI_MARK = "O"
    DEFAULT_MODE = "ai"  # "ai" or "human"

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Log node/cutoff counts after every top-level search
    LOG_SEARCH_STATS = True
