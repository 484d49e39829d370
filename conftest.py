"""
Shared fixtures for the TicTacToe engine tests.
"""

from typing import List

import pytest

from reference_solver import Cells, enumerate_reachable


@pytest.fixture(scope="session")
def reachable_states() -> List[Cells]:
    """Every position reachable from the empty board with X moving first."""
    return enumerate_reachable()
