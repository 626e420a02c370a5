"""
Dense 2-D grid used for the score and traceback matrices
"""

import operator
from typing import Any, Tuple

import numpy as np


class Grid:
    """Row-major grid backed by a numpy array with bounds-checked access"""

    def __init__(self, rows: int, cols: int, fill: Any = 0, dtype=np.int64):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {rows} x {cols}")
        self._data = np.full((rows, cols), fill, dtype=dtype)

    @classmethod
    def from_array(cls, array) -> "Grid":
        """Wrap an existing 2-D array (copied)"""
        arr = np.array(array, copy=True)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got {arr.ndim} dimension(s)")
        grid = cls.__new__(cls)
        grid._data = arr
        return grid

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self):
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """Underlying array (read-only once the grid is frozen)"""
        return self._data

    def _check(self, key) -> Tuple[int, int]:
        try:
            i, j = key
            i, j = operator.index(i), operator.index(j)
        except (TypeError, ValueError):
            raise IndexError(f"Grid index must be a (row, col) pair of integers, got {key!r}") from None
        if not (0 <= i < self.rows) or not (0 <= j < self.cols):
            raise IndexError(
                f"Grid index ({i}, {j}) out of range for {self.rows} x {self.cols} grid"
            )
        return i, j

    def __getitem__(self, key):
        i, j = self._check(key)
        return self._data[i, j].item()

    def __setitem__(self, key, value) -> None:
        i, j = self._check(key)
        self._data[i, j] = value

    def get(self, i: int, j: int):
        return self[i, j]

    def set(self, i: int, j: int, value) -> None:
        self[i, j] = value

    def freeze(self) -> "Grid":
        """Make the grid read-only; later writes raise ValueError"""
        self._data.flags.writeable = False
        return self

    @property
    def frozen(self) -> bool:
        return not self._data.flags.writeable

    def max(self):
        """Largest cell value (first one in row-major order on ties)"""
        return self.max_with_position()[0]

    def max_with_position(self) -> Tuple[Any, int, int]:
        """
        Largest cell value with its coordinates.

        np.argmax scans in C (row-major) order and returns the first
        occurrence, so ties resolve to the top-most, then left-most cell.
        """
        if self._data.size == 0:
            raise ValueError("max of an empty grid is undefined")
        i, j = np.unravel_index(int(np.argmax(self._data)), self._data.shape)
        return self._data[i, j].item(), int(i), int(j)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def render(self, width: int = 4) -> str:
        """Cells laid out row by row, each right-aligned to `width`"""
        lines = []
        for row in self._data:
            lines.append("".join(f"{int(x):>{width}d}" for x in row))
        return "\n".join(lines)

    def print(self, width: int = 4) -> None:
        print(self.render(width))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, dtype={self._data.dtype})"
