import plotly.graph_objects as go
import pytest

from calendar_solver.api import solve_and_plot, solve_date, solve_reserved, survey_dates
from calendar_solver.backtrack import PuzzleError
from calendar_solver.types import RESERVED


def test_solve_date_reserves_month_and_day(mini_puzzle):
    result = solve_date(mini_puzzle, 1, 3)
    assert result.solved
    assert result.board.rows == ((RESERVED, 1, 1), (RESERVED, 2, 2))


def test_solve_date_reports_unsolvable(mini_puzzle):
    result = solve_date(mini_puzzle, 1, 2)
    assert result.status == "unsolvable"
    assert result.board is None


def test_solve_reserved_validates_reserved_count(mini_puzzle):
    with pytest.raises(PuzzleError):
        solve_reserved(mini_puzzle, [(0, 0)])
    assert solve_reserved(mini_puzzle, [(0, 0)], validate=False).status == "unsolvable"


def test_survey_dates(mini_puzzle):
    assert survey_dates(mini_puzzle) == {
        (1, 1): "solved",
        (1, 2): "unsolvable",
        (1, 3): "solved",
        (1, 4): "unsolvable",
        (1, 5): "solved",
    }


def test_solve_and_plot(mini_puzzle):
    fig, result = solve_and_plot(mini_puzzle, 1, 5)
    assert isinstance(fig, go.Figure)
    assert fig.layout.title.text == "Jan 5"
    assert result.solved

    with pytest.raises(RuntimeError):
        solve_and_plot(mini_puzzle, 1, 4)
