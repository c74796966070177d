# -*- coding: utf-8 -*-
"""
   surfergrid.core.info
   --------------------
   Provides a Mixin for retrieving the spatial layout of a Grid and for
   exporting it to other in-memory representations.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.
"""

import numpy as np
import pandas as pd

import surfergrid.__config__ as CONFIG
from .errors import EmptyGridError, ValidationError

class InfoMixin:
    """
    Mixin for methods that retrieve node coordinates and grid metadata.
    """

    def get_xvect(self):
        """Returns the grid's x-coordinate vector."""
        if self.values is None: raise EmptyGridError("Grid holds no data.")
        return np.linspace(self.xmin, self.xmax, self.column_count())

    def get_yvect(self):
        """Returns the grid's y-coordinate vector."""
        if self.values is None: raise EmptyGridError("Grid holds no data.")
        return np.linspace(self.ymin, self.ymax, self.row_count())

    def get_xyvect(self):
        """Returns the grid's x and y-coordinate vectors."""
        return self.get_xvect(), self.get_yvect()

    def get_xygrid(self):
        """
        Returns the node x and y-coordinate 2D grids.

        Returns
        -------
        X : np.ndarray
            2D array of the node x-coordinates, shaped like `values`.
        Y : np.ndarray
            2D array of the node y-coordinates, shaped like `values`.
        """
        x, y = self.get_xyvect()
        return np.meshgrid(x, y)

    def get_grid_extent(self):
        """
        Returns the spatial extent of the grid.

        Returns
        -------
        tuple
            A tuple containing (xmin, xmax, ymin, ymax).
        """
        if self.values is None: raise EmptyGridError("Grid holds no data.")
        return (self.xmin, self.xmax, self.ymin, self.ymax)

    def get_grid_corners(self):
        """
        Returns the grid corner coordinates (BL, BR, TL, TR).
        """
        xmin, xmax, ymin, ymax = self.get_grid_extent()
        return np.array([[xmin, xmax, xmin, xmax], [ymin, ymin, ymax, ymax]])

    def get_node_spacing(self):
        """
        Returns the spacing between adjacent nodes.

        Returns
        -------
        tuple
            (xsize, ysize): distance between columns and between rows.
        """
        xmin, xmax, ymin, ymax = self.get_grid_extent()
        xsize = (xmax - xmin) / (self.column_count() - 1)
        ysize = (ymax - ymin) / (self.row_count() - 1)
        return (xsize, ysize)

    def get_grid_centroid(self) -> tuple:
        """Returns the geometric center (x, y) of the grid's extent."""
        xmin, xmax, ymin, ymax = self.get_grid_extent()
        return (xmin + (xmax - xmin) / 2.0, ymin + (ymax - ymin) / 2.0)

    def to_dict(self):
        """
        Exports grid and metadata to a dictionary.

        Missing samples are NaN in the exported 'values' array.

        Returns
        -------
        dict
            A dictionary containing key grid parameters.

        Raises
        ------
        EmptyGridError
            If the grid holds no data.
        """
        xsize, ysize = self.get_node_spacing()
        extrema = self.extrema()

        return {
            "values": self.values.filled(np.nan),
            "nrow": self.row_count(),
            "ncol": self.column_count(),
            "xmin": self.xmin,
            "xmax": self.xmax,
            "ymin": self.ymin,
            "ymax": self.ymax,
            "xsize": xsize,
            "ysize": ysize,
            "zmin": extrema.min,
            "zmax": extrema.max,
            "blankvalue": CONFIG.blank_value,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Creates a Grid from a dictionary in the :meth:`to_dict` layout.

        'xmax'/'ymax' may be replaced by 'xsize'/'ysize', and 'xmin'/'ymin'
        by the lower left corner 'xll'/'yll'. NaN samples become missing.

        Raises
        ------
        ValidationError
            If the bounds cannot be determined or the samples are invalid.
        """
        values = np.asarray(data['values'], dtype=np.float64)
        if values.ndim != 2:
            raise ValidationError("Grid samples must be a 2-D array.")
        nrow, ncol = values.shape

        xmin = data.get('xmin', data.get('xll'))
        ymin = data.get('ymin', data.get('yll'))
        if xmin is None or ymin is None:
            raise ValidationError('Missing grid information. '
                                  '"xll" and "yll" or "xmin", "ymin" should be provided.')

        xmax = data.get('xmax')
        if xmax is None:
            if data.get('xsize') is None:
                raise ValidationError('Missing grid information. '
                                      '"xsize" or "xmax" should be provided.')
            xmax = xmin + data['xsize'] * (ncol - 1)

        ymax = data.get('ymax')
        if ymax is None:
            if data.get('ysize') is None:
                raise ValidationError('Missing grid information. '
                                      '"ysize" or "ymax" should be provided.')
            ymax = ymin + data['ysize'] * (nrow - 1)

        return cls(values, xmin, ymin, xmax, ymax)

    def to_dataframe(self):
        """
        Lists the grid nodes as an XYZ table.

        Returns
        -------
        pandas.DataFrame
            One row per node, row-major, with columns 'x', 'y' and 'z'
            ('z' is NaN for missing samples).
        """
        X, Y = self.get_xygrid()
        return pd.DataFrame({
            'x': X.ravel(),
            'y': Y.ravel(),
            'z': self.values.filled(np.nan).ravel(),
        })
