import numpy as np
import pytest

from surfergrid import Grid, ValidationError

# --- Construction ---

def test_simple_4x3_grid():
    """
    Tests a grid built from nested lists.
    """
    grid = Grid([
        [0, 1, 1, 2],
        [2, 3, 5, 1],
        [1, 3, 2, 1]],
        0, 0, 30, 20)

    assert grid.format is None
    assert grid.row_count() == 3
    assert grid.column_count() == 4
    assert grid.shape == (3, 4)
    assert grid.values[1, 2] == 5
    assert (grid.xmin, grid.ymin, grid.xmax, grid.ymax) == (0, 0, 30, 20)
    assert grid.blank_value == 1.70141e+38

def test_none_samples_are_masked(sample_grid):
    assert sample_grid.values[2, 2] is np.ma.masked
    assert sample_grid.values[0, 0] == 0

def test_empty_grid():
    grid = Grid()
    assert grid.values is None
    assert grid.row_count() is None
    assert grid.column_count() is None
    assert grid.shape is None
    assert repr(grid) == 'Grid(empty)'

def test_from_ndarray_masks_nan():
    grid = Grid(np.array([[1.0, np.nan], [3.0, 4.0]]), 0, 0, 1, 1)
    assert grid.values[0, 1] is np.ma.masked
    assert grid.values[1, 0] == 3.0

def test_from_masked_array_keeps_mask():
    data = np.ma.MaskedArray([[1.0, 2.0], [3.0, 4.0]], mask=[[False, False], [True, False]])
    grid = Grid(data, 0, 0, 1, 1)
    assert grid.values[1, 0] is np.ma.masked

    data[0, 0] = 99.0
    assert grid.values[0, 0] == 1.0, "Grid should own a copy of its samples"

@pytest.mark.parametrize('rows', [
    [[1, 2, 3]],                    # single row
    [[1], [2], [3]],                # single column
    [],                             # no rows
    [[1, 2], [3]],                  # ragged
    [[1, 'a'], [3, 4]],             # not numeric
    [[[1, 2], [3, 4]], [[5, 6], [7, 8]]],  # 3-D
])
def test_invalid_samples(rows):
    with pytest.raises(ValidationError):
        Grid(rows, 0, 0, 1, 1)

def test_size_limits():
    with pytest.raises(ValidationError):
        Grid(np.zeros((2, 32768)), 0, 0, 1, 1)

    grid = Grid(np.zeros((2, 32767), dtype=np.float32), 0, 0, 1, 1)
    assert grid.column_count() == 32767

def test_invalid_bounds():
    with pytest.raises(ValidationError):
        Grid([[0, 0], [0, 0]], 0, 0, None, 10)

# --- Mutation and comparison ---

def test_in_place_edits(sample_grid):
    sample_grid.values[0, 0] = np.ma.masked
    sample_grid.values[2, 2] = 5

    assert sample_grid.values[0, 0] is np.ma.masked
    assert sample_grid.values[2, 2] == 5

def test_copy_is_independent(sample_grid):
    other = sample_grid.copy()
    assert other == sample_grid

    other.values[0, 0] = 42
    assert other != sample_grid
    assert sample_grid.values[0, 0] == 0

def test_equality_uses_float32_precision():
    a = Grid([[0.1, 0.2], [0.3, 0.4]], 0, 0, 1, 1)
    b = Grid([[float(np.float32(0.1)), 0.2], [0.3, 0.4]], 0, 0, 1, 1)
    c = Grid([[0.1, 0.2], [0.3, None]], 0, 0, 1, 1)

    assert a == b
    assert a != c
    assert a != Grid([[0.1, 0.2], [0.3, 0.4]], 0, 0, 2, 1)
    assert Grid() == Grid()

def test_values_cannot_be_replaced(sample_grid):
    """
    Tests that the dimensions stay fixed: the sample array can be edited
    but not swapped for another one.
    """
    with pytest.raises(AttributeError):
        sample_grid.values = np.ma.MaskedArray([[1.0]])

    assert sample_grid.shape == (3, 4)
