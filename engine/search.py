"""
Search engine for the TicTacToe engine.
Exhaustive minimax with alpha-beta pruning over the board model.

Scores are always seen from one fixed side, the maximizer, for the whole
top-level call: +1 maximizer wins, -1 the other side wins, 0 draw.
"""

import logging
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

from .board import (
    Mark,
    Outcome,
    Position,
    legal_moves,
    position_from,
    terminal_state,
    trial_move,
)
from .config import EngineConfig

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    """Best move (None once the game is over) and its score."""
    move: Optional[int]
    score: int


@dataclass
class SearchStats:
    """Counters filled in by a search (for debugging)."""
    nodes: int = 0
    cutoffs: int = 0


def _check_side(mark: Mark, name: str) -> Mark:
    if mark not in (Mark.X, Mark.O):
        raise ValueError(f"{name} must be Mark.X or Mark.O, got {mark!r}")
    return Mark(mark)


def outcome_score(outcome: Outcome, maximizer: Mark) -> int:
    """
    Fixed utility of a finished game for the maximizer.

    Args:
        outcome: A terminal outcome.
        maximizer: The side scores are seen from.

    Returns:
        WIN_SCORE, LOSS_SCORE or DRAW_SCORE.
    """
    winner = outcome.winner
    if winner is None:
        return EngineConfig.DRAW_SCORE
    if winner == maximizer:
        return EngineConfig.WIN_SCORE
    return EngineConfig.LOSS_SCORE


def evaluate(
    position: Position,
    side_to_move: Mark,
    maximizer: Mark,
    alpha: float = float('-inf'),
    beta: float = float('inf'),
    stats: Optional[SearchStats] = None
) -> int:
    """
    Minimax value of a position with alpha-beta pruning.

    Every hypothetical move is undone before returning, so `position` is
    unchanged afterwards.

    Args:
        position: Board to evaluate. Mutated during the search.
        side_to_move: Whose turn it is in `position`.
        maximizer: The side scores are seen from.
        alpha: Best score the maximizer is already guaranteed.
        beta: Best score the minimizer is already guaranteed.
        stats: Optional counters.

    Returns:
        The game-theoretic score for the maximizer.
    """
    if stats is not None:
        stats.nodes += 1

    outcome = terminal_state(position)
    if outcome.is_terminal:
        return outcome_score(outcome, maximizer)

    opponent = side_to_move.opposite()

    if side_to_move == maximizer:
        best = float('-inf')
        for index in legal_moves(position):
            with trial_move(position, index, side_to_move):
                score = evaluate(position, opponent, maximizer, alpha, beta, stats)
            best = max(best, score)
            alpha = max(alpha, best)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break  # Prune
        return best
    else:
        best = float('inf')
        for index in legal_moves(position):
            with trial_move(position, index, side_to_move):
                score = evaluate(position, opponent, maximizer, alpha, beta, stats)
            best = min(best, score)
            beta = min(beta, best)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break  # Prune
        return best


def score_moves(
    position: Position,
    side_to_move: Mark,
    stats: Optional[SearchStats] = None
) -> Dict[int, int]:
    """
    Exact score of every legal move for `side_to_move`.

    Each move gets a fresh full window, so the scores are exact rather
    than bounds. The caller's position is copied, never mutated.

    Returns:
        {cell index: score}, in ascending index order.
    """
    side_to_move = _check_side(side_to_move, "side_to_move")
    board = position_from(position)
    opponent = side_to_move.opposite()

    scores = {}
    for index in legal_moves(board):
        with trial_move(board, index, side_to_move):
            scores[index] = evaluate(board, opponent, side_to_move, stats=stats)
    return scores


def best_move(
    position: Position,
    side_to_move: Mark,
    stats: Optional[SearchStats] = None
) -> SearchResult:
    """
    Pick the optimal move for `side_to_move`.

    Ties go to the lowest cell index. Scores carry no depth discount, so
    a slower forced win on a lower index beats an immediate win.

    Args:
        position: Current board (not modified).
        side_to_move: The mark to play, also the maximizer.
        stats: Optional counters.

    Returns:
        SearchResult(move, score). (None, 0) if the game is already
        over (won or full board).
    """
    side_to_move = _check_side(side_to_move, "side_to_move")
    board = position_from(position)
    if terminal_state(board).is_terminal:
        return SearchResult(None, EngineConfig.DRAW_SCORE)

    if stats is None and EngineConfig.LOG_SEARCH_STATS:
        stats = SearchStats()

    scores = score_moves(board, side_to_move, stats)

    best_index = None
    best_score = float('-inf')
    for index, score in scores.items():
        if score > best_score:
            best_index, best_score = index, score

    if stats is not None:
        logger.debug(
            "%s searched %d positions (%d cutoffs). Best move: %s (score: %d)",
            side_to_move.symbol, stats.nodes, stats.cutoffs, best_index, best_score
        )
    return SearchResult(best_index, best_score)
