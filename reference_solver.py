"""
Reference TicTacToe solver used by the tests.

Deliberately independent of the engine: plain negamax over tuples,
no pruning, its own line table.
"""

from functools import lru_cache
from typing import List, Optional, Tuple

REF_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]

Cells = Tuple[int, ...]


def ref_winner(cells: Cells) -> Optional[int]:
    for a, b, c in REF_LINES:
        if cells[a] != 0 and cells[a] == cells[b] == cells[c]:
            return cells[a]
    return None


def ref_is_terminal(cells: Cells) -> bool:
    return ref_winner(cells) is not None or 0 not in cells


def ref_side_to_move(cells: Cells) -> int:
    return 1 if cells.count(1) == cells.count(-1) else -1


def ref_children(cells: Cells, side: int):
    for index, cell in enumerate(cells):
        if cell == 0:
            yield index, cells[:index] + (side,) + cells[index + 1:]


@lru_cache(maxsize=None)
def reference_value(cells: Cells, side: int) -> int:
    """Unpruned minimax value of `cells` for `side`, which is to move."""
    winner = ref_winner(cells)
    if winner is not None:
        return 1 if winner == side else -1
    if 0 not in cells:
        return 0
    return max(-reference_value(child, -side) for _, child in ref_children(cells, side))


def enumerate_reachable() -> List[Cells]:
    """Every position reachable from the empty board with X moving first."""
    start = (0,) * 9
    seen = {start}
    stack = [start]
    while stack:
        cells = stack.pop()
        if ref_is_terminal(cells):
            continue
        for _, child in ref_children(cells, ref_side_to_move(cells)):
            if child not in seen:
                seen.add(child)
                stack.append(child)
    return sorted(seen)
