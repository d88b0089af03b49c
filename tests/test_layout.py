import pytest

from calendar_solver.layout import (
    DEFAULT_ROW_LENGTHS,
    MONTHS,
    cell_labels,
    date_cells,
    day_cell,
    day_count,
    label_for,
    month_cell,
)


def test_labels_run_months_then_days():
    labels = cell_labels(DEFAULT_ROW_LENGTHS, MONTHS)
    assert len(labels) == 43
    assert labels[(0, 0)] == "Jan"
    assert labels[(0, 5)] == "Jun"
    assert labels[(1, 0)] == "Jul"
    assert labels[(1, 5)] == "Dec"
    assert labels[(2, 0)] == "1"
    assert labels[(5, 6)] == "28"
    assert labels[(6, 2)] == "31"


def test_labels_without_months_are_all_days():
    labels = cell_labels((2, 1), ())
    assert labels == {(0, 0): "1", (0, 1): "2", (1, 0): "3"}


def test_date_cells(puzzle):
    assert day_count(puzzle) == 31
    assert month_cell(puzzle, 1) == (0, 0)
    assert month_cell(puzzle, 12) == (1, 5)
    assert day_cell(puzzle, 1) == (2, 0)
    assert day_cell(puzzle, 31) == (6, 2)
    assert date_cells(puzzle, 11, 5) == ((1, 4), (2, 4))


@pytest.mark.parametrize(("month", "day"), [(0, 1), (13, 1), (1, 0), (1, 32)])
def test_date_out_of_range(puzzle, month, day):
    with pytest.raises(ValueError):
        date_cells(puzzle, month, day)


def test_label_for(puzzle):
    assert label_for(puzzle, (1, 4)) == "Nov"
    assert label_for(puzzle, (2, 4)) == "5"
    with pytest.raises(IndexError):
        label_for(puzzle, (0, 6))
