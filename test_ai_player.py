"""
Tests for the AI player.
"""

import pytest

from engine.ai_player import AIPlayer
from engine.board import Mark, Outcome, new_position, place, position_from, terminal_state


def test_ai_blocks_a_winning_move():
    ai = AIPlayer(Mark.O)
    # X is about to win with cell 2
    assert ai.get_best_move(position_from("XX--O----")) == 2


def test_ai_takes_a_winning_move():
    ai = AIPlayer(Mark.O)
    assert ai.get_best_move(position_from("OO--X-X-X")) == 2
    assert ai.last_score == 1
    assert ai.moves_evaluated > 0


def test_ai_waits_for_its_turn():
    ai = AIPlayer(Mark.O)
    assert ai.get_best_move(new_position()) is None
    assert ai.moves_evaluated == 0
    assert ai.last_score is None


def test_ai_does_not_play_after_game_over():
    ai = AIPlayer(Mark.O)
    assert ai.get_best_move(position_from("XXXOO----")) is None


def test_ai_rejects_empty_mark():
    with pytest.raises(ValueError):
        AIPlayer(Mark.EMPTY)


def test_move_suggestion():
    ai = AIPlayer(Mark.X)
    suggestion = ai.get_move_suggestion(position_from("XX-OO----"))
    assert suggestion == "Place X on cell 3 (row 1, col 3): forced win"


def test_move_suggestion_without_moves():
    ai = AIPlayer(Mark.X)
    assert ai.get_move_suggestion(position_from("XOXXOOOXX")) == "No moves available!"


def test_self_play_is_a_draw():
    players = {Mark.X: AIPlayer(Mark.X), Mark.O: AIPlayer(Mark.O)}
    position = new_position()
    mark = Mark.X
    moves = []

    while not terminal_state(position).is_terminal:
        move = players[mark].get_best_move(position)
        assert move is not None
        place(position, move, mark)
        moves.append(move)
        mark = mark.opposite()

    assert moves[0] == 0
    assert len(moves) == 9
    assert terminal_state(position) is Outcome.DRAW
