import asyncio

import numpy as np
import pytest

from DP4BioInfo.seq_alignment import (
    LengthMismatchError,
    hamming,
    hamming_matrix,
    hamming_matrix_async,
)


def test_hamming_example():
    assert hamming("ATGAT", "TTAGT") == 3


@pytest.mark.parametrize("u,v", [("ATGAT", "TTAGT"), ("GATTACA", "GACTATA"), ("", "")])
def test_hamming_is_symmetric(u, v):
    assert hamming(u, v) == hamming(v, u)


@pytest.mark.parametrize("u", ["", "A", "ACGTACGT"])
def test_hamming_of_self_is_zero(u):
    assert hamming(u, u) == 0


def test_hamming_length_mismatch():
    with pytest.raises(LengthMismatchError) as excinfo:
        hamming("ATGAT", "TTAG")
    assert excinfo.value.len1 == 5
    assert excinfo.value.len2 == 4
    assert isinstance(excinfo.value, ValueError)


def test_hamming_matrix():
    D, names = hamming_matrix({"a": "ATGAT", "b": "TTAGT", "c": "ATGAA"})
    assert names == ["a", "b", "c"]
    assert D.tolist() == [
        [0, 3, 1],
        [3, 0, 4],
        [1, 4, 0],
    ]
    assert np.array_equal(D, D.T)


def test_hamming_matrix_length_mismatch():
    with pytest.raises(LengthMismatchError):
        hamming_matrix({"a": "ACGT", "b": "ACG"})


def test_hamming_matrix_empty():
    with pytest.raises(ValueError):
        hamming_matrix({})


def test_hamming_matrix_async():
    D, names = asyncio.run(hamming_matrix_async({"x": "AC", "y": "AG"}))
    assert names == ["x", "y"]
    assert D.tolist() == [[0, 1], [1, 0]]
