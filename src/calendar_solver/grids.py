from collections.abc import Iterable

from .types import Cell, Grid, Shape


def rotate_cells(shape: Iterable[Cell]) -> Shape:
    """Quarter turn: (x, y) -> (y, -x)."""
    return tuple((y, -x) for x, y in shape)


def reflect_cells(shape: Iterable[Cell]) -> Shape:
    """Mirror across the column axis: (x, y) -> (-x, y)."""
    return tuple((-x, y) for x, y in shape)


def normalize_cells(shape: Iterable[Cell]) -> Shape:
    """Translate so min row and min column are 0, then sort by (row, col).

    Two shapes cover the same relative cell set iff their normalized forms
    are equal.
    """
    cells = list(shape)
    if not cells:
        raise ValueError("shape must be non-empty")
    min_r = min(r for r, _ in cells)
    min_c = min(c for _, c in cells)
    return tuple(sorted((r - min_r, c - min_c) for r, c in cells))


def orientations(shape: Iterable[Cell]) -> tuple[Shape, ...]:
    """All distinct normalized rotations and reflections of a shape.

    Four quarter turns, each collected together with its reflection, cover
    the eight symmetries of the square. Duplicates from internal symmetry
    collapse; the first-seen order is kept so the result is deterministic.
    """
    seen: dict[Shape, None] = {}
    current = tuple(shape)
    for _ in range(4):
        current = rotate_cells(current)
        seen.setdefault(normalize_cells(current))
        seen.setdefault(normalize_cells(reflect_cells(current)))
    return tuple(seen)


def shape_bounds(shape: Iterable[Cell]) -> tuple[int, int]:
    """(height, width) of a normalized shape's bounding box."""
    cells = normalize_cells(shape)
    return (
        max(r for r, _ in cells) + 1,
        max(c for _, c in cells) + 1,
    )


def shape_to_grid(shape: Iterable[Cell]) -> Grid:
    """Boolean grid of a shape, normalized to its bounding box.

    Convention: True = cell present.
    """
    cells = normalize_cells(shape)
    h, w = shape_bounds(cells)
    grid = [[False for _ in range(w)] for _ in range(h)]
    for r, c in cells:
        grid[r][c] = True
    return grid


def grid_to_cells(grid: Grid) -> set[Cell]:
    cells: set[Cell] = set()
    for r, row in enumerate(grid):
        for c, v in enumerate(row):
            if v:
                cells.add((r, c))
    return cells
