import logging
from collections.abc import Iterable
from pathlib import Path

import plotly.graph_objects as go

from .backtrack import SolveResult, Status, solve, validate_puzzle
from .layout import date_cells, day_count, default_puzzle
from .plotting import plot_board
from .types import Cell, Puzzle
from .yaml_io import load_puzzle_yaml

logger = logging.getLogger(__name__)


def _repo_root() -> Path:
    # src/calendar_solver/api.py -> src -> repo root
    return Path(__file__).resolve().parents[2]


def puzzles_assets_dir() -> Path:
    return _repo_root() / "assets" / "puzzles"


def list_puzzle_assets() -> list[str]:
    """List available puzzle YAML filenames under assets/puzzles."""
    d = puzzles_assets_dir()
    if not d.exists():
        return []
    return sorted(p.name for p in d.glob("*.yaml") if p.is_file())


def resolve_puzzle_asset(name: str) -> Path:
    """Resolve a puzzle YAML within assets/puzzles by filename.

    Only allows selecting files directly under assets/puzzles (no path
    separators) to avoid arbitrary file access.
    """
    n = str(name or "").strip()
    if not n:
        raise ValueError("Puzzle name is empty")
    if "/" in n or "\\" in n or n.startswith("."):
        raise ValueError(f"Invalid puzzle name: {n!r}")
    if not n.lower().endswith(".yaml"):
        n = f"{n}.yaml"

    p = puzzles_assets_dir() / n
    if not p.exists():
        raise FileNotFoundError(f"Puzzle not found: {n}")
    return p


def load_puzzle(path: str | Path | None = None) -> Puzzle:
    """Load a puzzle YAML file, or the built-in calendar puzzle for None."""
    if path is None:
        return default_puzzle()
    return load_puzzle_yaml(path)


def solve_reserved(
    puzzle: Puzzle,
    reserved: Iterable[Cell],
    *,
    max_nodes: int | None = None,
    validate: bool = True,
) -> SolveResult:
    """Reserve the given cells on an empty board and run the search."""
    board = puzzle.empty_board(reserved)
    if validate:
        validate_puzzle(
            board, puzzle.pieces, reserved_count=puzzle.reserved_count
        )
    result = solve(board, puzzle.pieces, max_nodes=max_nodes)
    logger.debug(
        "%s reserved=%s -> %s (%d nodes)",
        puzzle.name,
        board.reserved_cells(),
        result.status,
        result.nodes,
    )
    return result


def solve_date(
    puzzle: Puzzle,
    month: int,
    day: int,
    *,
    max_nodes: int | None = None,
    validate: bool = True,
) -> SolveResult:
    """Solve the board with the month and day cells reserved."""
    return solve_reserved(
        puzzle,
        date_cells(puzzle, month, day),
        max_nodes=max_nodes,
        validate=validate,
    )


def survey_dates(
    puzzle: Puzzle, *, max_nodes: int | None = None
) -> dict[tuple[int, int], Status]:
    """Search status of every month/day pair on the board."""
    out: dict[tuple[int, int], Status] = {}
    for month in range(1, len(puzzle.months) + 1):
        for day in range(1, day_count(puzzle) + 1):
            out[(month, day)] = solve_date(
                puzzle, month, day, max_nodes=max_nodes
            ).status
    return out


def solve_and_plot(
    puzzle: Puzzle,
    month: int,
    day: int,
    *,
    max_nodes: int | None = None,
    theme: str = "light",
) -> tuple[go.Figure, SolveResult]:
    """Solve a date and return (figure, result)."""
    result = solve_date(puzzle, month, day, max_nodes=max_nodes)
    if result.board is None:
        raise RuntimeError(
            f"No solution for month={month} day={day}: {result.status}"
        )
    title = f"{puzzle.months[month - 1]} {day}"
    fig = plot_board(result.board, puzzle, title=title, theme=theme)
    return fig, result
