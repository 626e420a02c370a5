"""
Hamming distance between equal-length sequences.

- hamming()              : single pair, O(length)
- hamming_matrix()       : all pairs of a {name: sequence} dict, NumPy broadcasting
- hamming_matrix_async() : same, run in a thread pool for event-loop callers
"""
from __future__ import annotations

import asyncio
from typing import Dict, List, Sequence, Tuple

import numpy as np


class LengthMismatchError(ValueError):
    """Raised when sequences that must be equal length are not"""

    def __init__(self, len1: int, len2: int):
        self.len1 = len1
        self.len2 = len2
        super().__init__(f"Sequences must have the same length ({len1} != {len2})")


def hamming(u: Sequence[str], v: Sequence[str]) -> int:
    """
    Number of positions at which `u` and `v` differ.

    Example:
        >>> hamming("ATGAT", "TTAGT")
        3
    """
    if len(u) != len(v):
        raise LengthMismatchError(len(u), len(v))
    return sum(1 for a, b in zip(u, v) if a != b)


def _encode(seqs: Dict[str, str]) -> Tuple[np.ndarray, List[str]]:
    """{name: seq} -> (n, L) array of single characters"""
    names = list(seqs.keys())
    if not names:
        raise ValueError("No sequences given.")
    lengths = {len(seqs[name]) for name in names}
    if len(lengths) > 1:
        shortest, longest = min(lengths), max(lengths)
        raise LengthMismatchError(shortest, longest)
    L = lengths.pop()
    arr = np.empty((len(names), L), dtype="<U1")
    for k, name in enumerate(names):
        arr[k] = list(seqs[name])
    return arr, names


def hamming_matrix(sequences: Dict[str, str]) -> Tuple[np.ndarray, List[str]]:
    """
    Pairwise Hamming distances.

    Parameters
    ----------
    sequences : dict
        {name: sequence}, all of the same length.

    Returns
    -------
    (D, names) : (np.ndarray, list)
        D is an (n, n) int matrix, names gives its row/column order.
    """
    X, names = _encode(sequences)
    # (n, n, L) mismatch mask
    D = (X[:, None, :] != X[None, :, :]).sum(axis=2).astype(np.int64)
    return D, names


async def hamming_matrix_async(sequences: Dict[str, str]) -> Tuple[np.ndarray, List[str]]:
    """Async version: runs hamming_matrix in the default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hamming_matrix, sequences)
