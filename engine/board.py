"""
Board model for the TicTacToe engine.
A position is a flat numpy array of 9 cells in row-major order:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8

Each cell holds a Mark value (X = 1, O = -1, EMPTY = 0).
"""

from contextlib import contextmanager
from enum import Enum, IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .config import EngineConfig


class BoardError(Exception):
    """Base class for board errors."""


class InvalidMove(BoardError):
    """Placing on an occupied cell, off the board, or with a non-mark."""


class InvalidPosition(BoardError):
    """A position that cannot be built from the given cells."""


class Mark(IntEnum):
    """The content of a cell."""
    EMPTY = 0
    X = 1
    O = -1

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark(-self.value)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """
        Look up a mark by its display symbol.

        Args:
            symbol: "X", "O" (any case) or one of the empty aliases.

        Returns:
            The matching Mark.
        """
        key = symbol.upper()
        if key == EngineConfig.X_SYMBOL:
            return cls.X
        if key == EngineConfig.O_SYMBOL:
            return cls.O
        if symbol in EngineConfig.EMPTY_ALIASES:
            return cls.EMPTY
        raise InvalidPosition(f"Unknown cell symbol {symbol!r}")


_SYMBOLS = {
    Mark.X: EngineConfig.X_SYMBOL,
    Mark.O: EngineConfig.O_SYMBOL,
    Mark.EMPTY: EngineConfig.EMPTY_SYMBOL,
}


class Outcome(Enum):
    """Result of a position. Always derived, never stored on the board."""
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"
    ONGOING = "ongoing"

    @classmethod
    def win_for(cls, mark: Mark) -> "Outcome":
        if mark == Mark.X:
            return cls.X_WINS
        if mark == Mark.O:
            return cls.O_WINS
        raise ValueError(f"{mark!r} cannot win")

    @property
    def winner(self) -> Optional[Mark]:
        if self is Outcome.X_WINS:
            return Mark.X
        if self is Outcome.O_WINS:
            return Mark.O
        return None

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.ONGOING


# All 8 winning lines as cell indices (rows, columns, diagonals)
LINES = np.array([
    # Rows
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],
    [2, 4, 6],
], dtype=np.intp)
LINES.setflags(write=False)

Position = np.ndarray
Cell = Union[Mark, int, str]


def new_position() -> Position:
    """Create an empty board."""
    return np.zeros(EngineConfig.NUM_CELLS, dtype=np.int8)


def _cell_value(cell: Cell) -> Mark:
    if isinstance(cell, str):
        return Mark.from_symbol(cell)
    if isinstance(cell, (int, np.integer)) and int(cell) in (-1, 0, 1):
        return Mark(int(cell))
    raise InvalidPosition(f"Invalid cell value {cell!r}")


def position_from(cells: Union[str, Iterable[Cell]]) -> Position:
    """
    Build a position from a string or a sequence of cells.

    Args:
        cells: Either a 9 character string such as "XX-OO----" or 9 marks,
            symbols or ints (1, -1, 0) in row-major order.

    Returns:
        A new position array.

    Raises:
        InvalidPosition: Wrong length or unknown cell content.
    """
    values = [_cell_value(cell) for cell in cells]
    if len(values) != EngineConfig.NUM_CELLS:
        raise InvalidPosition(
            f"A position needs {EngineConfig.NUM_CELLS} cells, got {len(values)}"
        )
    return np.array(values, dtype=np.int8)


def to_string(position: Position) -> str:
    """Compact form of a position, e.g. "XX-OO----"."""
    return "".join(Mark(int(cell)).symbol for cell in position)


def render(position: Position, highlight: Optional[Iterable[int]] = None) -> str:
    """
    Render the position as a 3x3 grid.

    Args:
        position: The board.
        highlight: Cells to mark with brackets (e.g. the winning line).

    Returns:
        Multi-line string.
    """
    highlight = set(highlight or ())
    size = EngineConfig.BOARD_SIZE
    rows = []
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            symbol = Mark(int(position[index])).symbol
            cells.append(f"[{symbol}]" if index in highlight else f" {symbol} ")
        rows.append("|".join(cells))
    separator = "+".join(["---"] * size)
    return f"\n{separator}\n".join(rows)


def _check_index(index: int):
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise InvalidMove(f"Invalid cell {index!r}. Must be an integer 0-8.")
    if not 0 <= index < EngineConfig.NUM_CELLS:
        raise InvalidMove(f"Invalid cell {index}. Must be 0-8.")


def check_move(position: Position, index: int, mark: Mark):
    """Raise InvalidMove unless `mark` may be placed at `index`."""
    if mark not in (Mark.X, Mark.O):
        raise InvalidMove(f"Cannot place {mark!r}, only X or O")
    _check_index(index)
    if position[index] != Mark.EMPTY:
        occupant = Mark(int(position[index])).symbol
        raise InvalidMove(f"Cell {index} is already occupied by {occupant}")


def place(position: Position, index: int, mark: Mark) -> Position:
    """
    Put a mark on an empty cell.

    Args:
        position: The board, modified in place.
        index: Cell index (0-8).
        mark: Mark.X or Mark.O.

    Returns:
        The same position object.

    Raises:
        InvalidMove: Occupied cell, bad index, or not a player mark.
    """
    check_move(position, index, mark)
    position[index] = mark
    return position


def remove(position: Position, index: int) -> Position:
    """Clear a cell again. Only meant to undo a hypothetical move."""
    _check_index(index)
    position[index] = Mark.EMPTY
    return position


@contextmanager
def trial_move(position: Position, index: int, mark: Mark) -> Iterator[Position]:
    """
    Place a mark for the duration of a `with` block.

    The cell is cleared again however the block exits, including `break`
    out of a loop and exceptions.
    """
    place(position, index, mark)
    try:
        yield position
    finally:
        remove(position, index)


def _first_winning_line(cells: np.ndarray) -> Optional[int]:
    sums = cells[LINES].sum(axis=1)
    hits = np.flatnonzero(np.abs(sums) == EngineConfig.BOARD_SIZE)
    if hits.size == 0:
        return None
    return int(hits[0])


def terminal_state(position: Position) -> Outcome:
    """
    Classify a position.

    Lines are scanned in order and the first line held entirely by one mark
    decides the winner. Wins are checked before the draw (full board).

    Args:
        position: The board.

    Returns:
        X_WINS, O_WINS, DRAW or ONGOING.
    """
    cells = np.asarray(position)
    line = _first_winning_line(cells)
    if line is not None:
        return Outcome.win_for(Mark(int(cells[LINES[line][0]])))
    if not (cells == Mark.EMPTY).any():
        return Outcome.DRAW
    return Outcome.ONGOING


def winning_line(position: Position) -> Optional[Tuple[int, int, int]]:
    """Get the first complete line, or None if nobody has won."""
    line = _first_winning_line(np.asarray(position))
    if line is None:
        return None
    return tuple(int(i) for i in LINES[line])


def legal_moves(position: Position) -> List[int]:
    """All empty cell indices, in ascending order."""
    return np.flatnonzero(np.asarray(position) == Mark.EMPTY).tolist()


def next_mark(position: Position) -> Mark:
    """
    Whose turn it is, assuming X moved first.

    Returns Mark.X when both marks appear equally often, otherwise Mark.O.
    """
    cells = np.asarray(position)
    x_count = int((cells == Mark.X).sum())
    o_count = int((cells == Mark.O).sum())
    return Mark.X if x_count <= o_count else Mark.O
