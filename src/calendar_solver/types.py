from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Cell = tuple[int, int]
Shape = tuple[Cell, ...]
Grid = list[list[bool]]

RESERVED = -1
EMPTY = 0


@dataclass(frozen=True)
class Piece:
    id: int
    cells: Shape
    color: str = "#c0c0c0"
    name: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"Piece {self.id!r}: id must be an int")
        if self.id <= 0:
            raise ValueError(f"Piece {self.id}: id must be positive")
        cells = tuple((int(r), int(c)) for r, c in self.cells)
        if not cells:
            raise ValueError(f"Piece {self.id}: cells must be non-empty")
        if len(set(cells)) != len(cells):
            raise ValueError(f"Piece {self.id}: cells contain duplicates")
        object.__setattr__(self, "cells", cells)

    @property
    def area(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Board:
    """Irregular grid of cell states.

    Each value is RESERVED, EMPTY or a positive piece id. Rows keep their
    length for the lifetime of the board; every mutation returns a new board.
    """

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(
            row if isinstance(row, tuple) else tuple(row) for row in self.rows
        )
        if not rows:
            raise ValueError("Board must have at least one row")
        for r, row in enumerate(rows):
            if not row:
                raise ValueError(f"Board row {r} is empty")
            for c, v in enumerate(row):
                if v < RESERVED:
                    raise ValueError(f"Board cell ({r},{c}) has invalid value {v}")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def empty(
        cls, row_lengths: Iterable[int], reserved: Iterable[Cell] = ()
    ) -> "Board":
        lengths = tuple(row_lengths)
        for i, n in enumerate(lengths):
            if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
                raise ValueError(f"row_lengths[{i}] must be a positive int")
        board = cls(tuple((EMPTY,) * n for n in lengths))
        return board.with_reserved(reserved)

    @property
    def row_lengths(self) -> tuple[int, ...]:
        return tuple(len(row) for row in self.rows)

    def contains(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < len(self.rows) and 0 <= c < len(self.rows[r])

    def get(self, cell: Cell) -> int:
        if not self.contains(cell):
            raise IndexError(f"Cell {cell} is outside the board")
        r, c = cell
        return self.rows[r][c]

    def __getitem__(self, cell: Cell) -> int:
        return self.get(cell)

    def cells(self) -> Iterator[Cell]:
        """Row-major iteration over all cells."""
        for r, row in enumerate(self.rows):
            for c in range(len(row)):
                yield (r, c)

    def count(self, value: int) -> int:
        return sum(row.count(value) for row in self.rows)

    def first_empty(self) -> Cell | None:
        for r, row in enumerate(self.rows):
            for c, v in enumerate(row):
                if v == EMPTY:
                    return (r, c)
        return None

    def is_complete(self) -> bool:
        return self.first_empty() is None

    def _with_values(self, values: dict[Cell, int]) -> "Board":
        # Only the touched rows are copied; the rest are shared.
        rows = list(self.rows)
        touched: dict[int, list[int]] = {}
        for (r, c), v in values.items():
            if not self.contains((r, c)):
                raise IndexError(f"Cell {(r, c)} is outside the board")
            if r not in touched:
                touched[r] = list(rows[r])
            touched[r][c] = v
        for r, row in touched.items():
            rows[r] = tuple(row)
        return Board(tuple(rows))

    def with_piece(self, cells: Iterable[Cell], piece_id: int) -> "Board":
        if piece_id <= 0:
            raise ValueError("piece_id must be positive")
        return self._with_values({cell: piece_id for cell in cells})

    def with_reserved(self, cells: Iterable[Cell]) -> "Board":
        return self._with_values({cell: RESERVED for cell in cells})

    def with_empty(self, cells: Iterable[Cell]) -> "Board":
        return self._with_values({cell: EMPTY for cell in cells})

    def cleared(self) -> "Board":
        """Copy with every non-reserved cell back to EMPTY."""
        return Board(
            tuple(
                tuple(RESERVED if v == RESERVED else EMPTY for v in row)
                for row in self.rows
            )
        )

    def reserved_cells(self) -> list[Cell]:
        return [cell for cell in self.cells() if self.get(cell) == RESERVED]


@dataclass(frozen=True)
class Puzzle:
    row_lengths: tuple[int, ...]
    pieces: tuple[Piece, ...]
    months: tuple[str, ...] = ()
    reserved_count: int = 2
    name: str = "puzzle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "row_lengths", tuple(self.row_lengths))
        object.__setattr__(self, "pieces", tuple(self.pieces))
        object.__setattr__(self, "months", tuple(self.months))
        if not self.row_lengths or any(n <= 0 for n in self.row_lengths):
            raise ValueError(f"Puzzle {self.name}: row lengths must be positive")
        if self.reserved_count < 0:
            raise ValueError(f"Puzzle {self.name}: reserved_count must be >= 0")
        ids = [p.id for p in self.pieces]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Puzzle {self.name}: piece ids must be unique")
        if len(self.months) > self.total_cells:
            raise ValueError(f"Puzzle {self.name}: more month labels than cells")

    @property
    def total_cells(self) -> int:
        return sum(self.row_lengths)

    @property
    def piece_area(self) -> int:
        return sum(p.area for p in self.pieces)

    def empty_board(self, reserved: Iterable[Cell] = ()) -> Board:
        return Board.empty(self.row_lengths, reserved)

