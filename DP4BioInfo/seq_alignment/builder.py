"""
Dynamic-programming matrix builder shared by LCS, Needleman-Wunsch
and Smith-Waterman.

A single fill loop walks the (m+1) x (n+1) grid in row-major order; the
per-cell decision is delegated to a Recurrence object selected by mode.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Literal, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .grid import Grid
from .scoring import ScoringPolicy


Mode = Literal["lcs", "global", "local"]


class Direction(IntEnum):
    """Traceback tag stored in each cell of the traceback grid"""
    NONE = 0       # boundary cell, never followed
    DIAGONAL = 1   # consumed u[i-1] and v[j-1]
    UP = 2         # consumed u[i-1], gap in v
    LEFT = 3       # consumed v[j-1], gap in u
    STOP = 4       # local alignment restart point


class AlignmentMatrices(NamedTuple):
    score: Grid
    trace: Grid


class Recurrence(ABC):
    """Boundary values and per-cell choice for one DP variant"""

    name: str = ""

    @abstractmethod
    def boundary(self, i: int, j: int) -> int:
        """Score of boundary cell (i, 0) or (0, j)"""

    @abstractmethod
    def cell(self, a: str, b: str, diag: int, up: int, left: int) -> Tuple[int, Direction]:
        """
        Score and tag for an interior cell.

        `a`, `b` are u[i-1] and v[j-1]; `diag`, `up`, `left` are the
        already-computed scores at (i-1, j-1), (i-1, j) and (i, j-1).
        """


class LCSRecurrence(Recurrence):
    """Unweighted equality; UP wins ties against LEFT"""

    name = "lcs"

    def boundary(self, i: int, j: int) -> int:
        return 0

    def cell(self, a, b, diag, up, left):
        if a == b:
            return diag + 1, Direction.DIAGONAL
        if up >= left:
            return up, Direction.UP
        return left, Direction.LEFT


class GlobalRecurrence(Recurrence):
    """Needleman-Wunsch with a linear gap penalty"""

    name = "global"

    def __init__(self, policy: ScoringPolicy):
        self.policy = policy

    def boundary(self, i: int, j: int) -> int:
        # one of i, j is 0, so this is the number of leading gaps
        return (i + j) * self.policy.gap

    def candidates(self, a, b, diag, up, left) -> Tuple[int, int, int]:
        gap = self.policy.gap
        return diag + self.policy.substitution(a, b), up + gap, left + gap

    def choose(self, d: int, u: int, l: int) -> Tuple[int, Direction]:
        # diagonal > up > left on ties
        if d >= u and d >= l:
            return d, Direction.DIAGONAL
        if d < u and u >= l:
            return u, Direction.UP
        return l, Direction.LEFT

    def cell(self, a, b, diag, up, left):
        return self.choose(*self.candidates(a, b, diag, up, left))


class LocalRecurrence(GlobalRecurrence):
    """Smith-Waterman: free boundary, negative cells reset to a STOP"""

    name = "local"

    def boundary(self, i: int, j: int) -> int:
        return 0

    def cell(self, a, b, diag, up, left):
        d, u, l = self.candidates(a, b, diag, up, left)
        if d < 0 and u < 0 and l < 0:
            return 0, Direction.STOP
        return self.choose(d, u, l)


def recurrence_for(mode: Mode, policy: Optional[ScoringPolicy] = None) -> Recurrence:
    """Pick the recurrence for 'lcs', 'global' or 'local'"""
    if mode == "lcs":
        return LCSRecurrence()
    if policy is None:
        policy = ScoringPolicy()
    if mode == "global":
        return GlobalRecurrence(policy)
    if mode == "local":
        return LocalRecurrence(policy)
    raise ValueError(f"Unknown mode: {mode!r} (expected 'lcs', 'global' or 'local')")


def build_matrices(
    u: Sequence[str],
    v: Sequence[str],
    recurrence: Recurrence,
    verbose: bool = False
) -> AlignmentMatrices:
    """
    Fill the score and traceback grids for sequences `u` (rows) and `v` (columns).

    Both grids are frozen before being returned.
    """
    u_syms = list(u)
    v_syms = list(v)
    rows, cols = len(u_syms) + 1, len(v_syms) + 1

    score = Grid(rows, cols, 0, dtype=np.int64)
    trace = Grid(rows, cols, Direction.NONE, dtype=np.int8)
    s = score.data
    b = trace.data

    for i in range(rows):
        s[i, 0] = recurrence.boundary(i, 0)
    for j in range(1, cols):
        s[0, j] = recurrence.boundary(0, j)

    if verbose:
        print(f"\nFilling {recurrence.name} matrix for sequences of length {rows - 1} x {cols - 1}")
        print(f"Total cells to compute: {(rows - 1) * (cols - 1)}")
        print("Computing ", end="")

    for i in range(1, rows):
        a = u_syms[i - 1]
        for j in range(1, cols):
            value, tag = recurrence.cell(
                a, v_syms[j - 1],
                int(s[i - 1, j - 1]), int(s[i - 1, j]), int(s[i, j - 1])
            )
            s[i, j] = value
            b[i, j] = tag

        if verbose and i % max(1, (rows - 1) // 10) == 0:
            print("█", end="", flush=True)

    if verbose:
        print(" 100.0%")
        print("✓ Matrix computation complete!")

    return AlignmentMatrices(score.freeze(), trace.freeze())


def lcs_matrices(u: Sequence[str], v: Sequence[str]) -> AlignmentMatrices:
    """Score/traceback grids for the longest common subsequence; score[m, n] is its length"""
    return build_matrices(u, v, LCSRecurrence())


def align_global(u: Sequence[str], v: Sequence[str], policy: ScoringPolicy) -> AlignmentMatrices:
    """Needleman-Wunsch grids; score[m, n] is the optimal global score"""
    return build_matrices(u, v, GlobalRecurrence(policy))


def align_local(u: Sequence[str], v: Sequence[str], policy: ScoringPolicy) -> AlignmentMatrices:
    """Smith-Waterman grids; the grid maximum is the optimal local score"""
    return build_matrices(u, v, LocalRecurrence(policy))
