"""
AI player for the TicTacToe engine.
Uses minimax with alpha-beta pruning to choose the best move.
"""

import logging
from typing import Optional

from .board import Mark, Position, next_mark, terminal_state
from .config import EngineConfig
from .search import SearchStats, best_move

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe perfectly.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Among equally good moves it takes the lowest cell index.
    """

    def __init__(self, mark: Mark = Mark.O):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
        """
        if mark not in (Mark.X, Mark.O):
            raise ValueError(f"AI must play X or O, got {mark!r}")
        self.mark = Mark(mark)

        # Stats of the last search (for debugging)
        self.moves_evaluated = 0
        self.last_score: Optional[int] = None

    def get_best_move(self, position: Position) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            position: Current board.

        Returns:
            Cell index of the best move, or None if it is not the AI's turn
            or the game is over.
        """
        self.moves_evaluated = 0
        self.last_score = None

        if terminal_state(position).is_terminal:
            logger.warning("Game is over, %s has nothing to play", self.mark.symbol)
            return None

        if next_mark(position) != self.mark:
            logger.warning("It's not %s's turn!", self.mark.symbol)
            return None

        stats = SearchStats()
        move, score = best_move(position, self.mark, stats)

        self.moves_evaluated = stats.nodes
        self.last_score = score
        logger.info(
            "AI evaluated %d positions. Best move: %s (score: %d)",
            self.moves_evaluated, move, score
        )
        return move

    def get_move_suggestion(self, position: Position) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            position: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(position)

        if move is None:
            return "No moves available!"

        row, col = divmod(move, EngineConfig.BOARD_SIZE)
        verdict = {
            EngineConfig.WIN_SCORE: "forced win",
            EngineConfig.DRAW_SCORE: "draw with best play",
            EngineConfig.LOSS_SCORE: "loses against best play",
        }[self.last_score]

        # 1-based, matching the console index map
        return f"Place {self.mark.symbol} on cell {move + 1} (row {row + 1}, col {col + 1}): {verdict}"
