"""
TicTacToe decision engine.
Perfect-play search over a 3x3 board: the board model answers terminal
queries, the search engine picks an optimal move.
"""

from .config import EngineConfig
from .board import (
    BoardError,
    InvalidMove,
    InvalidPosition,
    LINES,
    Mark,
    Outcome,
    legal_moves,
    new_position,
    next_mark,
    place,
    position_from,
    remove,
    render,
    terminal_state,
    to_string,
    trial_move,
    winning_line,
)
from .search import SearchResult, SearchStats, best_move, evaluate, score_moves
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer
from .game_state import GameState, Scoreboard

__version__ = "1.0.0"
