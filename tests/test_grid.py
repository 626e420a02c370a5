import numpy as np
import pytest

from DP4BioInfo.seq_alignment import Grid


def test_fill_and_dimensions():
    g = Grid(3, 4, 7)
    assert g.rows == 3
    assert g.cols == 4
    assert g.shape == (3, 4)
    assert all(g[i, j] == 7 for i in range(3) for j in range(4))


def test_get_set_roundtrip():
    g = Grid(2, 2)
    g[1, 0] = -5
    g.set(0, 1, 9)
    assert g.get(1, 0) == -5
    assert g[0, 1] == 9
    assert g[0, 0] == 0


@pytest.mark.parametrize("i,j", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
def test_out_of_range_access(i, j):
    g = Grid(2, 3)
    with pytest.raises(IndexError):
        g[i, j]
    with pytest.raises(IndexError):
        g[i, j] = 1


def test_non_pair_index():
    with pytest.raises(IndexError):
        Grid(2, 2)[1]


def test_negative_dimensions():
    with pytest.raises(ValueError):
        Grid(-1, 2)


def test_max_first_in_row_major_order():
    g = Grid(2, 3, 0)
    g[1, 0] = 7
    g[0, 2] = 7
    assert g.max() == 7
    assert g.max_with_position() == (7, 0, 2)


def test_max_of_negative_grid():
    g = Grid(2, 2, -3)
    g[1, 1] = -1
    assert g.max_with_position() == (-1, 1, 1)


def test_max_of_empty_grid():
    with pytest.raises(ValueError):
        Grid(0, 3).max()


def test_freeze_blocks_writes():
    g = Grid(2, 2).freeze()
    assert g.frozen
    with pytest.raises(ValueError):
        g[0, 0] = 1


def test_from_array_copies():
    arr = np.array([[1, 2], [3, 4]])
    g = Grid.from_array(arr)
    arr[0, 0] = 100
    assert g[0, 0] == 1
    assert g.max_with_position() == (4, 1, 1)
    with pytest.raises(ValueError):
        Grid.from_array([1, 2, 3])


def test_to_numpy_is_a_copy():
    g = Grid(1, 2, 3)
    out = g.to_numpy()
    out[0, 0] = 0
    assert g[0, 0] == 3


def test_render():
    g = Grid.from_array([[0, -4], [-4, 5]])
    assert g.render(width=3) == "  0 -4\n -4  5"


def test_equality():
    assert Grid(2, 2, 1) == Grid(2, 2, 1)
    assert Grid(2, 2, 1) != Grid(2, 2, 0)
    assert Grid(2, 2) != Grid(2, 3)


@pytest.mark.parametrize("key", [(slice(0, 1), 0), (0, slice(None)), (0.5, 0), ("a", 0)])
def test_non_integer_index(key):
    g = Grid(2, 2)
    with pytest.raises(IndexError):
        g[key]
    with pytest.raises(IndexError):
        g[key] = 1


def test_numpy_integer_index():
    g = Grid(2, 3)
    g[np.int64(1), np.int32(2)] = 4
    assert g[1, 2] == 4
