import numpy as np
import plotly.graph_objects as go
from matplotlib.axes import Axes
from matplotlib.patches import Rectangle

from .grids import shape_to_grid
from .layout import cell_labels
from .types import EMPTY, RESERVED, Board, Piece, Puzzle

MISSING = -2

RESERVED_COLOR = "#555555"
EMPTY_COLOR = "#808080"


def _discrete_colorscale(colors: list[str]) -> list[tuple[float, str]]:
    """Build a Plotly colorscale with hard steps for integer categories."""
    if not colors:
        raise ValueError("colors must be non-empty")

    n = len(colors)
    if n == 1:
        return [(0.0, colors[0]), (1.0, colors[0])]

    scale: list[tuple[float, str]] = []
    for i, c in enumerate(colors):
        lo = i / n
        hi = (i + 1) / n
        scale.append((lo, c))
        scale.append((hi, c))
    scale[0] = (0.0, scale[0][1])
    scale[-1] = (1.0, scale[-1][1])
    return scale


def qualitative_palette(n: int) -> list[str]:
    base = [
        "#636EFA",
        "#EF553B",
        "#00CC96",
        "#AB63FA",
        "#FFA15A",
        "#19D3F3",
        "#FF6692",
        "#B6E880",
        "#FF97FF",
        "#FECB52",
    ]
    if n <= len(base):
        return base[:n]
    return [base[i % len(base)] for i in range(n)]


def _theme(theme: str) -> dict[str, str]:
    theme = str(theme or "light").lower()
    if theme == "dark":
        return {
            "grid_bg": "rgba(0,0,0,1)",
            "text_color": "white",
        }
    return {
        "grid_bg": "rgba(255,255,255,1)",
        "text_color": "black",
    }


def _piece_colors(pieces: tuple[Piece, ...] | list[Piece]) -> dict[int, str]:
    fallback = qualitative_palette(max(1, len(pieces)))
    return {
        p.id: (p.color or fallback[i]) for i, p in enumerate(pieces)
    }


def board_to_array(board: Board, *, missing: int = MISSING) -> np.ndarray:
    """Cell values as a rectangular int array; cells past a row's end are `missing`."""
    h = len(board.rows)
    w = max(board.row_lengths)
    out = np.full((h, w), missing, dtype=int)
    for r, row in enumerate(board.rows):
        out[r, : len(row)] = row
    return out


def format_board(board: Board, puzzle: Puzzle | None = None) -> str:
    """Text rendering: piece ids, `..` for empty and labels for reserved cells."""
    labels = (
        cell_labels(board.row_lengths, puzzle.months) if puzzle is not None else {}
    )
    lines: list[str] = []
    for r, row in enumerate(board.rows):
        parts: list[str] = []
        for c, v in enumerate(row):
            if v == RESERVED:
                parts.append(f"{labels.get((r, c), '##'):>3}")
            elif v == EMPTY:
                parts.append(" ..")
            else:
                parts.append(f"{v:>3}")
        lines.append("".join(parts))
    return "\n".join(lines)


def print_board(board: Board, puzzle: Puzzle | None = None) -> None:
    print(format_board(board, puzzle))


def plot_board(
    board: Board,
    puzzle: Puzzle,
    *,
    title: str = "Board",
    theme: str = "light",
) -> go.Figure:
    """Return a Plotly heatmap of the board, colored by piece.

    Empty and reserved cells carry their month/day label.
    """
    values = board_to_array(board)
    labels = cell_labels(board.row_lengths, puzzle.months)
    colors_by_id = _piece_colors(puzzle.pieces)
    piece_index = {pid: i + 3 for i, pid in enumerate(colors_by_id)}

    # 0 = missing, 1 = empty, 2 = reserved, 3.. = pieces in inventory order.
    z = np.zeros(values.shape, dtype=int)
    text = np.full(values.shape, "", dtype=object)
    for (r, c), label in labels.items():
        v = int(values[r, c])
        if v == EMPTY:
            z[r, c] = 1
            text[r, c] = label
        elif v == RESERVED:
            z[r, c] = 2
            text[r, c] = label
        else:
            z[r, c] = piece_index.get(v, 1)

    t = _theme(theme)
    colors = [t["grid_bg"], EMPTY_COLOR, RESERVED_COLOR, *colors_by_id.values()]
    zmax = len(colors) - 1

    fig = go.Figure(
        data=[
            go.Heatmap(
                z=z,
                zmin=0,
                zmax=zmax,
                colorscale=_discrete_colorscale(colors),
                showscale=False,
                text=text.tolist(),
                texttemplate="%{text}",
                hoverinfo="skip",
                xgap=2,
                ygap=2,
            )
        ]
    )
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=50, b=10),
        height=450,
        plot_bgcolor=t["grid_bg"],
        font=dict(color=t["text_color"]),
    )
    fig.update_xaxes(
        showticklabels=False,
        showgrid=False,
        zeroline=False,
        constrain="domain",
    )
    fig.update_yaxes(
        showticklabels=False,
        showgrid=False,
        zeroline=False,
        scaleanchor="x",
        autorange="reversed",
    )
    return fig


def plot_pieces_row(
    pieces: list[Piece], *, margin: int = 1, theme: str = "light"
) -> go.Figure:
    """Plot all pieces next to each other in one row.

    Pieces are laid out left-to-right in inventory order with `margin` empty
    columns between them.
    """
    margin = max(0, int(margin))
    if not pieces:
        return go.Figure()

    grids = [shape_to_grid(p.cells) for p in pieces]
    h = max(len(g) for g in grids)
    w = sum(len(g[0]) for g in grids) + (len(grids) - 1) * margin

    grid_int = np.zeros((h, w), dtype=int)
    x0 = 0
    for i, g in enumerate(grids):
        for y, row in enumerate(g):
            for x, v in enumerate(row):
                if v:
                    grid_int[y, x0 + x] = i + 1
        x0 += len(g[0]) + margin

    t = _theme(theme)
    colors = [t["grid_bg"], *_piece_colors(pieces).values()]
    fig = go.Figure(
        data=[
            go.Heatmap(
                z=grid_int,
                zmin=0,
                zmax=len(pieces),
                colorscale=_discrete_colorscale(colors),
                showscale=False,
                hoverinfo="skip",
                xgap=1,
                ygap=1,
            )
        ]
    )
    fig.update_layout(
        title="Pieces",
        margin=dict(l=10, r=10, t=50, b=10),
        height=260,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor=t["grid_bg"],
        font=dict(color=t["text_color"]),
    )
    fig.update_xaxes(showticklabels=False, showgrid=False, zeroline=False)
    fig.update_yaxes(
        showticklabels=False,
        showgrid=False,
        zeroline=False,
        scaleanchor="x",
        autorange="reversed",
    )
    return fig


def draw_board(ax: Axes, board: Board, puzzle: Puzzle) -> None:
    """Draw the board onto a matplotlib axis (one square per cell)."""
    ax.clear()
    labels = cell_labels(board.row_lengths, puzzle.months)
    colors_by_id = _piece_colors(puzzle.pieces)

    for (r, c), label in labels.items():
        v = board[(r, c)]
        if v == RESERVED:
            face, edge = RESERVED_COLOR, "red"
        elif v == EMPTY:
            face, edge = EMPTY_COLOR, "#333333"
        else:
            face, edge = colors_by_id.get(v, EMPTY_COLOR), "#333333"
        ax.add_patch(
            Rectangle(
                (c + 0.05, r + 0.05),
                0.9,
                0.9,
                facecolor=face,
                edgecolor=edge,
                linewidth=2.5 if v == RESERVED else 1.0,
            )
        )
        if v <= EMPTY:
            ax.text(
                c + 0.5,
                r + 0.5,
                label,
                ha="center",
                va="center",
                color="white",
                fontweight="bold",
            )

    ax.set_xlim(0, max(board.row_lengths))
    ax.set_ylim(len(board.rows), 0)
    ax.set_aspect("equal")
    ax.axis("off")
