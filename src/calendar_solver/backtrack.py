import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

from .grids import orientations
from .types import EMPTY, RESERVED, Board, Cell, Piece, Shape

logger = logging.getLogger(__name__)

Status = Literal["solved", "unsolvable", "node_limit"]


class PuzzleError(ValueError):
    """Board and inventory that break a precondition of the search."""


@dataclass(frozen=True)
class SolveResult:
    board: Board | None
    status: Status
    nodes: int = 0

    @property
    def solved(self) -> bool:
        return self.status == "solved"


class _NodeLimitReached(Exception):
    pass


def _is_free(rows: tuple[tuple[int, ...], ...], cell: Cell) -> bool:
    r, c = cell
    return 0 <= r < len(rows) and 0 <= c < len(rows[r]) and rows[r][c] == EMPTY


def candidate_placements(
    board: Board, target: Cell, shape: Shape
) -> Iterator[tuple[Cell, ...]]:
    """Legal placements of one orientation that cover `target`.

    Every cell of the shape is tried as the anchor aligned onto the target.
    A placement is yielded as its absolute cells, in shape order.
    """
    tr, tc = target
    rows = board.rows
    for ar, ac in shape:
        dr, dc = tr - ar, tc - ac
        placed = tuple((r + dr, c + dc) for r, c in shape)
        if all(_is_free(rows, cell) for cell in placed):
            yield placed


def solve(
    board: Board,
    pieces: Sequence[Piece],
    *,
    max_nodes: int | None = None,
) -> SolveResult:
    """Cover every EMPTY cell of `board` with `pieces` by backtracking.

    The first empty cell in row-major order is always the target; pieces,
    their orientations and the anchor cells are tried in order, and the first
    complete cover is returned. `board` is never mutated.

    `max_nodes` caps the number of placements recursed into. When the cap is
    hit the result has status "node_limit" and no board.
    """
    inventory = tuple((p, orientations(p.cells)) for p in pieces)
    nodes = 0

    def _search(
        current: Board, remaining: tuple[tuple[Piece, tuple[Shape, ...]], ...]
    ) -> Board | None:
        nonlocal nodes
        target = current.first_empty()
        if target is None:
            return current

        for i, (piece, shapes) in enumerate(remaining):
            rest = remaining[:i] + remaining[i + 1 :]
            for shape in shapes:
                for placed in candidate_placements(current, target, shape):
                    nodes += 1
                    if max_nodes is not None and nodes > max_nodes:
                        raise _NodeLimitReached
                    found = _search(current.with_piece(placed, piece.id), rest)
                    if found is not None:
                        return found
        return None

    try:
        solution = _search(board, inventory)
    except _NodeLimitReached:
        logger.debug("search stopped at node limit %s", max_nodes)
        return SolveResult(None, "node_limit", max_nodes or 0)

    status: Status = "solved" if solution is not None else "unsolvable"
    logger.debug("search finished: status=%s nodes=%d", status, nodes)
    return SolveResult(solution, status, nodes)


def validate_puzzle(
    board: Board,
    pieces: Sequence[Piece],
    *,
    reserved_count: int | None = None,
) -> None:
    """Raise PuzzleError if the board/inventory cannot be a valid instance.

    Checks unique piece ids, an unpainted board, the reserved-cell count
    (when given) and that the piece area equals the number of free cells.
    """
    ids = [p.id for p in pieces]
    if len(set(ids)) != len(ids):
        raise PuzzleError("Piece ids must be unique")

    occupied = sum(1 for cell in board.cells() if board.get(cell) > EMPTY)
    if occupied:
        raise PuzzleError(f"Board already has {occupied} occupied cells")

    reserved = board.count(RESERVED)
    if reserved_count is not None and reserved != reserved_count:
        raise PuzzleError(
            f"Expected {reserved_count} reserved cells, got {reserved}"
        )

    free = board.count(EMPTY)
    area = sum(p.area for p in pieces)
    if area != free:
        raise PuzzleError(
            f"Piece area {area} does not match {free} free cells"
        )
