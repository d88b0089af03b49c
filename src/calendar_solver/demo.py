from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.colors import ListedColormap

from .grids import orientations, shape_to_grid
from .types import Grid, Piece


def plot_grid(
    grid: Grid,
    *,
    ax: Axes,
    title: str,
    true_color: str = "#222222",
    false_color: str = "#ffffff",
) -> None:
    """Plot a boolean grid with square cells using seaborn.

    Convention: True = cell present (colored), False = absent (white).
    """
    data = np.array(grid, dtype=int)
    cmap = ListedColormap([false_color, true_color])
    sns.heatmap(
        data,
        ax=ax,
        cmap=cmap,
        vmin=0,
        vmax=1,
        cbar=False,
        square=True,
        linewidths=0.8,
        linecolor="#cccccc",
        xticklabels=False,
        yticklabels=False,
    )
    ax.set_title(title)
    ax.set_aspect("equal")
    ax.set_xlabel("")
    ax.set_ylabel("")


def demo_orientations(pieces: list[Piece], *, show: bool = True) -> plt.Figure:
    """One row per piece, one column per distinct orientation."""
    sns.set_theme(style="white")
    rows = [(p, orientations(p.cells)) for p in pieces]
    ncols = max((len(shapes) for _, shapes in rows), default=1)
    nrows = max(1, len(rows))

    fig, axes = plt.subplots(
        nrows=nrows,
        ncols=ncols,
        figsize=(1.6 * ncols, 1.6 * nrows),
        squeeze=False,
    )

    for i, (piece, shapes) in enumerate(rows):
        for j in range(ncols):
            ax = axes[i][j]
            if j < len(shapes):
                plot_grid(
                    shape_to_grid(shapes[j]),
                    ax=ax,
                    title=f"{piece.name or piece.id} #{j}",
                    true_color=piece.color,
                )
            else:
                ax.axis("off")

    fig.tight_layout()
    if show:
        plt.show()
    return fig
