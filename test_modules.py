"""
Tests for the caller-side modules: move validation, game state,
scoreboard and the console game.
"""

import builtins

import pytest

import main
from engine.board import InvalidMove, Mark, Outcome, position_from
from engine.game_state import GameState, Scoreboard
from engine.move_validator import MoveValidator


def feed_input(monkeypatch, lines):
    """Make input() return `lines` one by one, then raise EOFError."""
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_legal_move():
    result = MoveValidator().validate_move(position_from("X--------"), 4)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_occupied_cell():
    result = MoveValidator().validate_move(position_from("X--------"), 0)
    assert not result.is_valid
    assert "occupied" in result.error_message


def test_validator_rejects_out_of_range():
    result = MoveValidator().validate_move(position_from("---------"), 9)
    assert not result.is_valid
    assert "0-8" in result.error_message


def test_validator_rejects_wrong_turn():
    result = MoveValidator().validate_move(position_from("X--------"), 4, Mark.X)
    assert not result.is_valid
    assert result.error_message == "It's O's turn, not X's"


def test_validator_rejects_moves_after_game_over():
    validator = MoveValidator()
    position = position_from("XXXOO----")
    assert validator.validate_move(position, 8).error_message == "Game is already over!"
    assert validator.get_valid_moves(position) == []


def test_validator_lists_valid_moves():
    assert MoveValidator().get_valid_moves(position_from("X---O----")) == [1, 2, 3, 5, 6, 7, 8]


# ==================== GAME STATE ====================

def test_game_alternates_players():
    game = GameState()
    assert game.status_message() == "X's Turn"
    assert game.make_move(4) is Outcome.ONGOING
    assert game.current_player is Mark.O
    assert game.move_count == 1
    assert game.status_message() == "O's Turn"


def test_game_rejects_illegal_move():
    game = GameState()
    game.make_move(4)
    with pytest.raises(InvalidMove, match="occupied"):
        game.make_move(4)
    assert game.current_player is Mark.O
    assert game.move_count == 1


def test_game_detects_win():
    game = GameState()
    for index in (0, 3, 1, 4):
        game.make_move(index)
    assert game.make_move(2) is Outcome.X_WINS
    assert game.is_game_over
    assert game.winner is Mark.X
    assert game.winning_line == (0, 1, 2)
    assert game.current_player is Mark.X
    assert game.status_message() == "Player X Wins!"
    assert "[X]|[X]|[X]" in game.board_text()
    with pytest.raises(InvalidMove, match="over"):
        game.make_move(8)


def test_game_detects_draw():
    game = GameState()
    # X O X / X O O / O X X
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        game.make_move(index)
    assert game.is_draw
    assert game.winner is None
    assert game.status_message() == "It's a Draw!"


def test_game_copy_is_independent():
    game = GameState()
    game.make_move(0)
    clone = game.copy()
    clone.make_move(4)
    assert game.position[4] == Mark.EMPTY
    assert game.move_count == 1
    assert clone.move_count == 2


def test_game_reset_starts_a_new_game():
    game = GameState()
    for index in (0, 3, 1, 4, 2):
        game.make_move(index)
    assert game.is_game_over

    game.reset()
    assert (game.position == Mark.EMPTY).all()
    assert game.current_player is Mark.X
    assert game.move_count == 0
    assert game.winner is None
    assert not game.is_draw
    assert not game.is_game_over
    assert game.winning_line is None
    assert game.status_message() == "X's Turn"
    assert game.make_move(4) is Outcome.ONGOING


def test_scoreboard_counts_finished_games_only():
    scoreboard = Scoreboard()
    game = GameState()
    scoreboard.record(game)
    assert str(scoreboard) == "X: 0   O: 0   Draws: 0"

    for index in (0, 3, 1, 4, 2):
        game.make_move(index)
    scoreboard.record(game)
    assert scoreboard.x_wins == 1

    scoreboard.reset()
    assert (scoreboard.x_wins, scoreboard.o_wins, scoreboard.draws) == (0, 0, 0)


# ==================== CONSOLE ====================

def test_console_human_vs_human_game(monkeypatch, capsys):
    feed_input(monkeypatch, ["1", "4", "1", "2", "5", "3", "n"])
    console = main.TicTacToeConsole(vs_ai=False)
    console.start()

    out = capsys.readouterr().out
    assert "Illegal move: Cell 0 is already occupied by X" in out
    assert "Player X Wins!" in out
    assert console.scoreboard.x_wins == 1
    assert not console.is_running


def test_console_ai_answers_human(monkeypatch, capsys):
    feed_input(monkeypatch, ["5", "q"])
    console = main.TicTacToeConsole(vs_ai=True, ai_mark=Mark.O)
    console.start()

    assert console.game_state.position[4] == Mark.X
    assert console.game_state.position[0] == Mark.O
    assert ">>> AI plays cell 1" in capsys.readouterr().out


def test_console_ai_can_move_first(monkeypatch):
    feed_input(monkeypatch, ["q"])
    console = main.TicTacToeConsole(vs_ai=True, ai_mark=Mark.X)
    console.start()
    assert console.game_state.position[0] == Mark.X
    assert console.game_state.current_player is Mark.O


def test_console_commands(capsys):
    console = main.TicTacToeConsole(vs_ai=True)
    console.handle_command("0")
    assert "Please type a number 1-9" in capsys.readouterr().out

    console.handle_command("h")
    assert "Hint: Place X on cell 1" in capsys.readouterr().out

    console.handle_command("3")
    console.scoreboard.draws = 2
    console.handle_command("m")
    assert not console.vs_ai
    assert console.game_state.move_count == 0
    assert console.scoreboard.draws == 0

    console.is_running = True
    console.handle_command("q")
    assert not console.is_running


def test_console_stops_on_end_of_input(monkeypatch):
    feed_input(monkeypatch, [])
    console = main.TicTacToeConsole(vs_ai=False)
    console.start()
    assert not console.is_running
    assert console.game_state.move_count == 0


def test_main_parses_arguments(monkeypatch, capsys):
    feed_input(monkeypatch, ["q"])
    main.main(["--mode", "human", "--log-level", "WARNING"])
    out = capsys.readouterr().out
    assert "Player vs Player" in out
    assert "Goodbye!" in out
