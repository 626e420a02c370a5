"""
Sequence Alignment Module
Provides LCS, global/local pairwise alignment and Hamming distance
"""

from .grid import Grid
from .scoring import ScoringPolicy
from .builder import (
    AlignmentMatrices,
    Direction,
    Recurrence,
    LCSRecurrence,
    GlobalRecurrence,
    LocalRecurrence,
    recurrence_for,
    build_matrices,
    lcs_matrices,
    align_global,
    align_local
)
from .backtrack import (
    traceback,
    traceback_path,
    reconstruct_lcs,
    reconstruct_global,
    reconstruct_local
)
from .distances import (
    LengthMismatchError,
    hamming,
    hamming_matrix,
    hamming_matrix_async
)
from .pairwise import (
    PairwiseAligner,
    AlignmentResult,
    LCSResult,
    pairwise
)

__all__ = [
    "Grid",
    "ScoringPolicy",
    "AlignmentMatrices",
    "Direction",
    "Recurrence",
    "LCSRecurrence",
    "GlobalRecurrence",
    "LocalRecurrence",
    "recurrence_for",
    "build_matrices",
    "lcs_matrices",
    "align_global",
    "align_local",
    "traceback",
    "traceback_path",
    "reconstruct_lcs",
    "reconstruct_global",
    "reconstruct_local",
    "LengthMismatchError",
    "hamming",
    "hamming_matrix",
    "hamming_matrix_async",
    "PairwiseAligner",
    "AlignmentResult",
    "LCSResult",
    "pairwise"
]
