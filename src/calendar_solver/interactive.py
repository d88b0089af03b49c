from __future__ import annotations

from dataclasses import dataclass, field

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.widgets import Button

from .backtrack import solve
from .plotting import draw_board
from .types import EMPTY, RESERVED, Board, Cell, Puzzle

PROMPT = "Click cells to mark the month and the day."


def toggle_reserved(board: Board, cell: Cell, limit: int) -> Board:
    """Reserve an empty cell or free a reserved one.

    New reservations are ignored once `limit` cells are reserved.
    """
    if not board.contains(cell):
        return board
    v = board[cell]
    if v == RESERVED:
        return board.with_empty([cell])
    if v == EMPTY and board.count(RESERVED) < limit:
        return board.with_reserved([cell])
    return board


@dataclass
class SolverState:
    puzzle: Puzzle
    max_nodes: int | None = None
    board: Board = field(init=False)
    solved: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.board = self.puzzle.empty_board()

    def click(self, cell: Cell) -> None:
        if not self.solved:
            self.board = toggle_reserved(self.board, cell, self.puzzle.reserved_count)

    def solve(self) -> str:
        """Run the search on the current reservations; returns a status line."""
        if self.solved:
            return "Already solved. Reset to pick another date."
        reserved = self.board.count(RESERVED)
        if reserved != self.puzzle.reserved_count:
            return (
                f"Select exactly {self.puzzle.reserved_count} cells "
                f"({reserved} selected)."
            )
        result = solve(self.board, self.puzzle.pieces, max_nodes=self.max_nodes)
        if result.board is not None:
            self.board = result.board
            self.solved = True
            return f"Solution found ({result.nodes} nodes)."
        if result.status == "node_limit":
            return "Search stopped at the node limit."
        return "No solution found."

    def reset(self) -> None:
        self.board = self.puzzle.empty_board()
        self.solved = False


def interactive_solver(puzzle: Puzzle, *, max_nodes: int | None = None) -> None:
    """Board window: click to reserve cells, then Solve or Reset."""
    sns.set_theme(style="white")

    fig = plt.figure(figsize=(7, 7))
    ax = fig.add_axes((0.05, 0.2, 0.9, 0.75))

    ax_solve = fig.add_axes((0.05, 0.05, 0.15, 0.06))
    btn_solve = Button(ax_solve, "Solve")
    ax_reset = fig.add_axes((0.22, 0.05, 0.15, 0.06))
    btn_reset = Button(ax_reset, "Reset")

    ax_text = fig.add_axes((0.42, 0.03, 0.55, 0.1))
    ax_text.axis("off")
    status_text = ax_text.text(0.0, 0.5, PROMPT, va="center")

    state = SolverState(puzzle, max_nodes)

    def _render() -> None:
        draw_board(ax, state.board, puzzle)
        fig.canvas.draw_idle()

    def _on_click(event) -> None:
        if event.inaxes is not ax or event.xdata is None:
            return
        state.click((int(event.ydata), int(event.xdata)))
        _render()

    def _on_solve(_event) -> None:
        status_text.set_text(state.solve())
        _render()

    def _on_reset(_event) -> None:
        state.reset()
        status_text.set_text(PROMPT)
        _render()

    fig.canvas.mpl_connect("button_press_event", _on_click)
    btn_solve.on_clicked(_on_solve)
    btn_reset.on_clicked(_on_reset)

    _render()
    plt.show()
