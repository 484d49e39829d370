"""
Game state management for a TicTacToe session.
Tracks the board, current player and result for the caller driving a game.
The engine itself never stores any of this.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .board import (
    InvalidMove,
    Mark,
    Outcome,
    Position,
    new_position,
    place,
    render,
    terminal_state,
    winning_line,
)
from .move_validator import MoveValidator

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    The state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Current player (X moves first)
    - Game status (ongoing, won, draw) and the winning line
    """

    position: Position = field(default_factory=new_position)

    # X always moves first
    current_player: Mark = Mark.X

    # Number of marks placed so far (0-9)
    move_count: int = 0

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False
    winning_line: Optional[Tuple[int, int, int]] = None

    def make_move(self, index: int) -> Outcome:
        """
        Place the current player's mark.

        Args:
            index: Cell index (0-8).

        Returns:
            The outcome after the move.

        Raises:
            InvalidMove: The validator rejected the move.
        """
        result = MoveValidator().validate_move(self.position, index, self.current_player)
        if not result.is_valid:
            raise InvalidMove(result.error_message)

        place(self.position, index, self.current_player)
        self.move_count += 1
        logger.debug("%s played cell %d", self.current_player.symbol, index)

        outcome = self.update_outcome()
        if not outcome.is_terminal:
            self.current_player = self.current_player.opposite()
        return outcome

    def update_outcome(self) -> Outcome:
        """Refresh winner/draw flags from the board."""
        outcome = terminal_state(self.position)
        self.winner = outcome.winner
        self.is_draw = outcome is Outcome.DRAW
        self.is_game_over = outcome.is_terminal
        self.winning_line = winning_line(self.position)
        return outcome

    def status_message(self) -> str:
        """Text for the status line."""
        if self.winner is not None:
            return f"Player {self.winner.symbol} Wins!"
        if self.is_draw:
            return "It's a Draw!"
        return f"{self.current_player.symbol}'s Turn"

    def reset(self):
        """Clear the board for a new game. X moves first again."""
        self.position = new_position()
        self.current_player = Mark.X
        self.move_count = 0
        self.winner = None
        self.is_draw = False
        self.is_game_over = False
        self.winning_line = None

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            position=np.copy(self.position),
            current_player=self.current_player,
            move_count=self.move_count,
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
            winning_line=self.winning_line
        )

    def board_text(self) -> str:
        """The board as text, with the winning line bracketed."""
        return render(self.position, highlight=self.winning_line)


@dataclass
class Scoreboard:
    """Wins and draws for the running session. Nothing is saved to disk."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, game: GameState):
        """Count a finished game."""
        if not game.is_game_over:
            return
        if game.winner == Mark.X:
            self.x_wins += 1
        elif game.winner == Mark.O:
            self.o_wins += 1
        else:
            self.draws += 1

    def reset(self):
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def __str__(self) -> str:
        return f"X: {self.x_wins}   O: {self.o_wins}   Draws: {self.draws}"
