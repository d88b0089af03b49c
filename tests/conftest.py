import matplotlib
import pytest

from calendar_solver.layout import default_puzzle
from calendar_solver.types import Piece, Puzzle

matplotlib.use("Agg")

DOMINO = ((0, 0), (1, 0))


@pytest.fixture
def puzzle() -> Puzzle:
    return default_puzzle()


@pytest.fixture
def mini_puzzle() -> Puzzle:
    """Two rows of three: one month label, five days, two dominoes."""
    return Puzzle(
        row_lengths=(3, 3),
        pieces=(Piece(1, DOMINO, "#636EFA", "a"), Piece(2, DOMINO, "#EF553B", "b")),
        months=("Jan",),
        reserved_count=2,
        name="mini",
    )
