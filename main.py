"""
Console game for the TicTacToe engine.

This script ties together:
- Game state (board, turns, result, scoreboard)
- Move validation
- The AI player (perfect-play search)

Run this script to play TicTacToe against the engine or a friend!
"""

import logging
from typing import Optional

from engine.ai_player import AIPlayer
from engine.board import InvalidMove, Mark
from engine.config import EngineConfig
from engine.game_state import GameState, Scoreboard

INDEX_MAP = "1|2|3\n4|5|6\n7|8|9"

HELP_TEXT = "Commands: 1-9 play a cell, h hint, m switch mode, r reset scores, q quit"


class TicTacToeConsole:
    """
    Text front-end for a TicTacToe session.

    Game flow:
    1. X moves first
    2. In AI mode the AI answers every human move
    3. When the game ends the result is tallied and a new game can start
    """

    def __init__(
        self,
        vs_ai: bool = True,
        ai_mark: Mark = Mark.O,
        show_hints: bool = False
    ):
        """
        Initialize the console game.

        Args:
            vs_ai: Play against the AI (True) or another human (False).
            ai_mark: Which mark the AI plays.
            show_hints: Print the best move before every human turn.
        """
        self.vs_ai = vs_ai
        self.show_hints = show_hints
        self.ai = AIPlayer(ai_mark)

        self.game_state = GameState()
        self.scoreboard = Scoreboard()
        self.is_running = False

    @property
    def mode_name(self) -> str:
        return "Player vs AI" if self.vs_ai else "Player vs Player"

    def start(self):
        """Start the game."""
        print("\n" + "=" * 40)
        print(f"   TicTacToe - {self.mode_name}")
        print("=" * 40)
        print(f"\nIndex map:\n{INDEX_MAP}\n")
        print(HELP_TEXT)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.game_state.is_game_over:
                self._show_game_result()
                if not self._ask_play_again():
                    self.is_running = False
                    break
                self._reset_game()
                continue

            print("\n" + self.game_state.board_text())
            print(self.game_state.status_message())

            if self._is_ai_turn():
                self._ai_move()
            else:
                self._human_turn()

    def _is_ai_turn(self) -> bool:
        return self.vs_ai and self.game_state.current_player == self.ai.mark

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return input(prompt).strip().lower()
        except EOFError:
            return None

    def _human_turn(self):
        """Read and handle one line of input."""
        if self.show_hints:
            print(self._hint())

        text = self._read(f"Play {self.game_state.current_player.symbol} at [1-9]: ")
        if text is None:
            self.is_running = False
            return
        self.handle_command(text)

    def handle_command(self, text: str):
        """
        Handle one line of user input.

        Args:
            text: A cell number 1-9 or a command letter.
        """
        if text == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif text == "r":
            self._full_reset()
        elif text == "m":
            self._toggle_mode()
        elif text == "h":
            print(self._hint())
        elif text.isdecimal() and 1 <= int(text) <= 9:
            self._play_cell(int(text) - 1)
        else:
            print(f"Please type a number 1-9. {HELP_TEXT}")

    def _play_cell(self, index: int):
        try:
            self.game_state.make_move(index)
        except InvalidMove as e:
            print(f"Illegal move: {e}")

    def _hint(self) -> str:
        advisor = AIPlayer(self.game_state.current_player)
        return f"Hint: {advisor.get_move_suggestion(self.game_state.position)}"

    def _ai_move(self):
        """Let the AI play its move."""
        print("\n>>> AI is thinking...")

        move = self.ai.get_best_move(self.game_state.position)
        if move is None:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        self.game_state.make_move(move)
        print(f">>> AI plays cell {move + 1}")

    def _show_game_result(self):
        """Show the final game result and tally it."""
        self.scoreboard.record(self.game_state)

        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)
        print("\n" + self.game_state.board_text())
        print(f"\n{self.game_state.status_message()}")
        print(f"Score: {self.scoreboard}")

    def _ask_play_again(self) -> bool:
        answer = self._read("\nPlay again? [y/n]: ")
        return answer is not None and answer.startswith("y")

    def _reset_game(self):
        """Reset the board for a new round. Scores are kept."""
        self.game_state.reset()
        print("\nNew game!")

    def _full_reset(self):
        """Reset scores and the board."""
        self.scoreboard.reset()
        self._reset_game()
        print(f"Scores reset. Score: {self.scoreboard}")

    def _toggle_mode(self):
        """Switch between Player vs AI and Player vs Player."""
        self.vs_ai = not self.vs_ai
        print(f"\nMode: {self.mode_name}")
        self._full_reset()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a perfect-play engine")
    parser.add_argument(
        "--mode",
        choices=["ai", "human"],
        default=EngineConfig.DEFAULT_MODE,
        help="Opponent type"
    )
    parser.add_argument(
        "--ai-mark",
        choices=["X", "O"],
        default=EngineConfig.DEFAULT_AI_MARK,
        help="Mark the AI plays (X moves first)"
    )
    parser.add_argument(
        "--hint",
        action="store_true",
        help="Show the best move before every human turn"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=logging.getLevelName(EngineConfig.LOG_LEVEL),
        help="Logging level for engine messages"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=EngineConfig.LOG_FORMAT)

    console = TicTacToeConsole(
        vs_ai=args.mode == "ai",
        ai_mark=Mark.from_symbol(args.ai_mark),
        show_hints=args.hint
    )

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
