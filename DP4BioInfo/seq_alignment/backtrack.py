"""
Reconstruct an optimal subsequence / alignment from a traceback grid
"""

from typing import List, Sequence, Tuple

from .builder import Direction
from .grid import Grid


GAP = "-"


def traceback(
    trace: Grid,
    u: Sequence[str],
    v: Sequence[str],
    start: Tuple[int, int],
    stop_at_boundary: bool = True,
    gap: str = GAP
) -> Tuple[str, str, int, int]:
    """
    Walk backward from `start` following the recorded directions.

    The walk ends at a STOP cell, or when it reaches row 0 / column 0. With
    ``stop_at_boundary=False`` it keeps going along the boundary to (0, 0),
    aligning the remaining prefix against gaps.

    Returns:
        (aligned_u, aligned_v, i, j) where (i, j) is the cell the walk ended on.
    """
    i, j = start
    if not (0 <= i < trace.rows and 0 <= j < trace.cols):
        raise IndexError(f"Start cell ({i}, {j}) outside {trace.rows} x {trace.cols} grid")

    tags = trace.data
    aligned_u: List[str] = []
    aligned_v: List[str] = []

    while i > 0 and j > 0:
        tag = tags[i, j]
        if tag == Direction.STOP:
            break
        if tag == Direction.DIAGONAL:
            aligned_u.append(u[i - 1])
            aligned_v.append(v[j - 1])
            i -= 1
            j -= 1
        elif tag == Direction.UP:
            aligned_u.append(u[i - 1])
            aligned_v.append(gap)
            i -= 1
        elif tag == Direction.LEFT:
            aligned_u.append(gap)
            aligned_v.append(v[j - 1])
            j -= 1
        else:
            raise ValueError(f"Cell ({i}, {j}) has no traceback direction")

    if not stop_at_boundary:
        while i > 0:
            aligned_u.append(u[i - 1])
            aligned_v.append(gap)
            i -= 1
        while j > 0:
            aligned_u.append(gap)
            aligned_v.append(v[j - 1])
            j -= 1

    aligned_u.reverse()
    aligned_v.reverse()
    return "".join(aligned_u), "".join(aligned_v), i, j


def reconstruct_lcs(trace: Grid, u: Sequence[str]) -> str:
    """Longest common subsequence from an LCS traceback grid"""
    i, j = trace.rows - 1, trace.cols - 1
    tags = trace.data
    out: List[str] = []

    while i > 0 and j > 0:
        tag = tags[i, j]
        if tag == Direction.DIAGONAL:
            out.append(u[i - 1])
            i -= 1
            j -= 1
        elif tag == Direction.UP:
            i -= 1
        elif tag == Direction.LEFT:
            j -= 1
        else:
            raise ValueError(f"Cell ({i}, {j}) has no LCS traceback direction")

    out.reverse()
    return "".join(out)


def reconstruct_global(
    trace: Grid,
    u: Sequence[str],
    v: Sequence[str],
    gap: str = GAP
) -> Tuple[str, str]:
    """Full-length global alignment, from (m, n) back to (0, 0)"""
    aligned_u, aligned_v, _, _ = traceback(
        trace, u, v, (trace.rows - 1, trace.cols - 1),
        stop_at_boundary=False, gap=gap
    )
    return aligned_u, aligned_v


def reconstruct_local(
    score: Grid,
    trace: Grid,
    u: Sequence[str],
    v: Sequence[str],
    gap: str = GAP
) -> Tuple[str, str, Tuple[int, int], Tuple[int, int]]:
    """
    Best local alignment, starting from the grid maximum.

    Returns the aligned strings plus the half-open spans [start, end)
    of `u` and `v` covered by the alignment.
    """
    if score.shape != trace.shape:
        raise ValueError(f"Score grid {score.shape} and traceback grid {trace.shape} differ in shape")
    _, end_i, end_j = score.max_with_position()
    aligned_u, aligned_v, start_i, start_j = traceback(
        trace, u, v, (end_i, end_j), stop_at_boundary=True, gap=gap
    )
    return aligned_u, aligned_v, (start_i, end_i), (start_j, end_j)


_STEP = {
    Direction.DIAGONAL: (-1, -1),
    Direction.UP: (-1, 0),
    Direction.LEFT: (0, -1),
}


def traceback_path(
    trace: Grid,
    start: Tuple[int, int],
    stop_at_boundary: bool = True
) -> List[Tuple[int, int]]:
    """Cells visited by the traceback walk, from `start` backwards"""
    i, j = start
    path = [(i, j)]
    tags = trace.data
    while i > 0 and j > 0:
        tag = tags[i, j]
        if tag == Direction.STOP:
            break
        try:
            di, dj = _STEP[Direction(int(tag))]
        except (KeyError, ValueError):
            raise ValueError(f"Cell ({i}, {j}) has no traceback direction") from None
        i, j = i + di, j + dj
        path.append((i, j))
    if not stop_at_boundary:
        while i > 0:
            i -= 1
            path.append((i, j))
        while j > 0:
            j -= 1
            path.append((i, j))
    return path
