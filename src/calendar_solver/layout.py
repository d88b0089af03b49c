"""Calendar board layout: the default puzzle and date labels.

Cells are labelled in row-major order: the first ``len(months)`` cells are
months, every following cell is a day counted from 1. On the default board the
two short top rows hold the twelve months and the 31 days fill the rest.
"""

from .types import Cell, Piece, Puzzle

MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

DEFAULT_ROW_LENGTHS: tuple[int, ...] = (6, 6, 7, 7, 7, 7, 3)

DEFAULT_PIECES: tuple[Piece, ...] = (
    Piece(1, ((0, 0), (1, 0), (2, 0), (3, 0), (3, 1)), "#FF5733", "L"),
    Piece(2, ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)), "#33FF57", "rect"),
    Piece(3, ((0, 0), (0, 1), (1, 1), (2, 0), (2, 1)), "#3357FF", "U"),
    Piece(4, ((0, 0), (1, 0), (1, 1), (1, 2), (2, 2)), "#FF33A1", "Z"),
    Piece(5, ((0, 1), (1, 1), (2, 1), (3, 1), (1, 0)), "#A133FF", "Y"),
    Piece(6, ((0, 0), (0, 1), (1, 0), (1, 1), (2, 0)), "#FE9957", "P"),
    Piece(7, ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)), "#33B0FF", "V"),
    Piece(8, ((0, 0), (1, 0), (2, 0), (2, 1), (3, 1)), "#C0FA49", "N"),
)


def default_puzzle() -> Puzzle:
    return Puzzle(
        row_lengths=DEFAULT_ROW_LENGTHS,
        pieces=DEFAULT_PIECES,
        months=MONTHS,
        reserved_count=2,
        name="cubastic",
    )


def _row_major_cells(row_lengths: tuple[int, ...]) -> list[Cell]:
    return [(r, c) for r, n in enumerate(row_lengths) for c in range(n)]


def cell_labels(
    row_lengths: tuple[int, ...], months: tuple[str, ...] = MONTHS
) -> dict[Cell, str]:
    """Label of every cell: month names first, then day numbers."""
    labels: dict[Cell, str] = {}
    for i, cell in enumerate(_row_major_cells(row_lengths)):
        if i < len(months):
            labels[cell] = months[i]
        else:
            labels[cell] = str(i - len(months) + 1)
    return labels


def label_for(puzzle: Puzzle, cell: Cell) -> str:
    labels = cell_labels(puzzle.row_lengths, puzzle.months)
    if cell not in labels:
        raise IndexError(f"Cell {cell} is outside the board")
    return labels[cell]


def day_count(puzzle: Puzzle) -> int:
    return puzzle.total_cells - len(puzzle.months)


def month_cell(puzzle: Puzzle, month: int) -> Cell:
    """Cell of a 1-based month."""
    if not 1 <= month <= len(puzzle.months):
        raise ValueError(
            f"month must be in 1..{len(puzzle.months)}, got {month}"
        )
    return _row_major_cells(puzzle.row_lengths)[month - 1]


def day_cell(puzzle: Puzzle, day: int) -> Cell:
    if not 1 <= day <= day_count(puzzle):
        raise ValueError(f"day must be in 1..{day_count(puzzle)}, got {day}")
    return _row_major_cells(puzzle.row_lengths)[len(puzzle.months) + day - 1]


def date_cells(puzzle: Puzzle, month: int, day: int) -> tuple[Cell, Cell]:
    return month_cell(puzzle, month), day_cell(puzzle, day)
