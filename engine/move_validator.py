"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules without raising.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import (
    InvalidMove,
    Mark,
    Position,
    check_move,
    legal_moves,
    next_mark,
    terminal_state,
)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Cell index must be 0-8
    3. Can only place on empty cells
    4. Players alternate, X first
    """

    def validate_move(
        self,
        position: Position,
        index: int,
        mark: Optional[Mark] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            position: Current board.
            index: Cell to place on (0-8).
            mark: The mark being placed. When given, it must be that
                mark's turn. Defaults to whoever is to move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if terminal_state(position).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        expected = next_mark(position)
        if mark is None:
            mark = expected

        try:
            check_move(position, index, mark)
        except InvalidMove as e:
            return ValidationResult(is_valid=False, error_message=str(e))

        if mark != expected:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {expected.symbol}'s turn, not {Mark(mark).symbol}'s"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, position: Position) -> List[int]:
        """
        Get all valid moves for the player to move.

        Returns:
            Cell indices in ascending order, empty once the game is over.
        """
        if terminal_state(position).is_terminal:
            return []
        return legal_moves(position)
