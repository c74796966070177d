# -*- coding: utf-8 -*-
"""
   surfergrid.core.grid
   --------------------

   Defines the main Grid object: a rectangular array of optionally missing
   samples plus the bounding box of its nodes.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.

"""

from typing import Optional

import numpy as np

import surfergrid.__config__ as CONFIG
from .datastructures import GridFormat, GridHeader
from .errors import ValidationError
from .utils import float32_bits

# Import the Mixins that provide the functionality
from .io import IOMixin
from .info import InfoMixin
from .stats import StatsMixin


def validate_size(nrow, ncol):
    """
    Checks grid dimensions against the range accepted by Surfer.

    Raises
    ------
    ValidationError
        If either dimension is outside ``[2, 32767]``.
    """
    low, high = CONFIG.min_grid_size, CONFIG.max_grid_size
    if not (low <= nrow <= high and low <= ncol <= high):
        raise ValidationError(f"The acceptable grid size is {low} to {high}, "
                              f"got {nrow} rows and {ncol} columns.")


def as_grid_values(values) -> np.ma.MaskedArray:
    """
    Converts caller supplied samples to the grid's masked representation.

    Parameters
    ----------
    values : sequence of sequences, np.ndarray or np.ma.MaskedArray
        Row-major samples. In nested sequences a missing sample is ``None``;
        in a plain array it is NaN; a masked array keeps its own mask.

    Returns
    -------
    np.ma.MaskedArray
        A new float64 masked array with a full boolean mask.

    Raises
    ------
    ValidationError
        If the rows are ragged, the input is not 2-D, a sample is not
        numeric or the dimensions are out of range.
    """
    try:
        if np.ma.isMaskedArray(values):
            data = np.ma.getdata(values).astype(np.float64)
            mask = np.ma.getmaskarray(values).copy()
        elif isinstance(values, np.ndarray):
            data = values.astype(np.float64)
            mask = np.isnan(data)
        else:
            rows = [list(row) for row in values]
            if len({len(row) for row in rows}) > 1:
                raise ValidationError("Grid rows must all have the same length.")
            mask = np.array([[sample is None for sample in row] for row in rows], dtype=bool)
            data = np.array([[0.0 if sample is None else sample for sample in row] for row in rows],
                            dtype=np.float64)
    except ValidationError:
        raise
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Grid samples must be numbers or None: {e}") from e

    if data.ndim != 2:
        raise ValidationError(f"Grid samples must be a 2-D array, got {data.ndim} dimension(s).")
    validate_size(*data.shape)

    data[mask] = 0.0
    return np.ma.MaskedArray(data, mask=mask)


class Grid(IOMixin, InfoMixin, StatsMixin):
    """
    Represents a Surfer grid.

    Attributes
    ----------
    values : np.ma.MaskedArray or None
        Row-major float64 samples, masked where there is no data. The first
        row lies at `ymin`, the first column at `xmin`. ``None`` until the
        grid is populated. The attribute cannot be reassigned.
    xmin, xmax, ymin, ymax : float or None
        Bounding box of the grid nodes.
    format : GridFormat or None
        The encoding the grid was decoded from, ``None`` for a grid built
        in memory.

    Examples
    --------
    >>> grid = Grid([[0, 1, 1, 2], [2, 3, 5, 1], [1, 3, 2, 1]], 0, 0, 30, 20)
    >>> grid.row_count(), grid.column_count()
    (3, 4)

    """

    def __init__(self, values=None, xmin=None, ymin=None, xmax=None, ymax=None):
        self.format: Optional[GridFormat] = None
        self._values = None
        self.xmin = None
        self.ymin = None
        self.xmax = None
        self.ymax = None

        if values is not None:
            bounds = (xmin, ymin, xmax, ymax)
            if not all(isinstance(b, (int, float, np.number)) for b in bounds):
                raise ValidationError(f"Grid bounds must be numbers, got {bounds}.")
            self._values = as_grid_values(values)
            self.xmin, self.ymin, self.xmax, self.ymax = (float(b) for b in bounds)

    def _populate(self, values: np.ma.MaskedArray, header: GridHeader, fmt: GridFormat):
        """Fills the grid from freshly decoded samples and header."""
        self._values = values
        self.xmin = header.xmin
        self.xmax = header.xmax
        self.ymin = header.ymin
        self.ymax = header.ymax
        self.format = fmt

    @property
    def values(self) -> Optional[np.ma.MaskedArray]:
        """
        The samples. Read-only: the grid dimensions are fixed once the grid
        is built or decoded, but elements may be edited in place.
        """
        return self._values

    @property
    def blank_value(self) -> float:
        """Surfer's blanking value."""
        return CONFIG.blank_value

    @property
    def shape(self):
        """(rows, columns), or ``None`` when the grid holds no data."""
        return None if self.values is None else self.values.shape

    def row_count(self):
        """Returns number of grid rows."""
        return None if self.values is None else self.values.shape[0]

    def column_count(self):
        """Returns number of grid columns."""
        return None if self.values is None else self.values.shape[1]

    def copy(self) -> 'Grid':
        """Returns an independent copy of the grid."""
        new = Grid()
        if self.values is not None:
            new._values = self._values.copy()
        new.xmin, new.ymin, new.xmax, new.ymax = self.xmin, self.ymin, self.xmax, self.ymax
        new.format = self.format
        return new

    def __eq__(self, other):
        """Grids are equal when bounds, blanks and float32-truncated samples match."""
        if not isinstance(other, Grid):
            return NotImplemented
        if (self.xmin, self.ymin, self.xmax, self.ymax) != (other.xmin, other.ymin, other.xmax, other.ymax):
            return False
        if self.values is None or other.values is None:
            return self.values is None and other.values is None
        if self.values.shape != other.values.shape:
            return False

        mask = np.ma.getmaskarray(self.values)
        if not np.array_equal(mask, np.ma.getmaskarray(other.values)):
            return False
        ours = float32_bits(self.values.filled(0.0))
        theirs = float32_bits(other.values.filled(0.0))
        return bool(np.array_equal(ours, theirs))

    __hash__ = None

    def __repr__(self):
        if self.values is None:
            return 'Grid(empty)'
        return (f"Grid({self.row_count()}x{self.column_count()}, "
                f"x=[{self.xmin}, {self.xmax}], y=[{self.ymin}, {self.ymax}], "
                f"format={None if self.format is None else self.format.name})")
