"""
Score-matrix heat-map with the traceback path overlaid
"""
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .backtrack import traceback_path  # noqa: F401  re-exported
from .grid import Grid


def _labels(seq: str, n: int) -> List[str]:
    """Tick labels: '-' for the empty prefix, then one symbol per row/column"""
    return ["-"] + [seq[k] if k < len(seq) else "" for k in range(n - 1)]


def plot_score_grid(
    score: Grid,
    seq1: str = "",
    seq2: str = "",
    path: Optional[List[Tuple[int, int]]] = None,
    figsize: Tuple[int, int] = (8, 7),
    annotate: bool = True,
    cmap: str = "viridis",
    font_size: int = 9,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Draw the score grid as a heat-map.
    - rows are labelled with seq1, columns with seq2 (first row/col = empty prefix)
    - `path` (e.g. from traceback_path) is drawn as a red line
    """
    fig, ax = plt.subplots(figsize=figsize)
    data = score.to_numpy()
    im = ax.imshow(data, cmap=cmap, aspect="equal")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    if annotate:
        lo, hi = data.min(), data.max()
        mid = (lo + hi) / 2.0
        for (i, j), value in np.ndenumerate(data):
            ax.text(j, i, f"{int(value)}", ha="center", va="center", fontsize=font_size,
                    color="black" if value > mid else "white")

    ax.set_xticks(range(score.cols))
    ax.set_yticks(range(score.rows))
    ax.set_xticklabels(_labels(seq2, score.cols), fontsize=font_size + 1)
    ax.set_yticklabels(_labels(seq1, score.rows), fontsize=font_size + 1)
    ax.xaxis.tick_top()

    if path:
        ys, xs = zip(*path)
        ax.plot(xs, ys, "r-", lw=2, alpha=0.8)
        ax.plot(xs[0], ys[0], "ro", ms=6)

    if title:
        ax.set_title(title, fontsize=font_size + 3, fontweight="bold", pad=20)

    plt.tight_layout()
    return fig
