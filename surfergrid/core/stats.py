"""
   surfergrid.core.stats
   ---------------------
   Provides a Mixin for statistical methods on grid samples.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.
"""

import logging

import numpy as np

from .datastructures import Extrema
from .errors import EmptyGridError

logger = logging.getLogger(__name__)

class StatsMixin:
    """
    Mixin for methods that retrieve statistics from the grid samples.

    Every statistic is recomputed from `values` on each call, so in-place
    edits of the samples are always reflected.
    """

    def _require_data(self):
        if self.values is None:
            raise EmptyGridError("Grid holds no data.")

    def extrema(self) -> Extrema:
        """
        Returns the smallest and largest non-missing samples.

        Returns
        -------
        Extrema
            Both ends are ``None`` when every sample is missing.

        Raises
        ------
        EmptyGridError
            If the grid holds no data.
        """
        self._require_data()

        present = self.values.compressed()
        if present.size == 0:
            return Extrema()

        return Extrema(float(present.min()), float(present.max()))

    def minimum(self):
        """Returns minimum value among grid nodes."""
        return self.extrema().min

    def maximum(self):
        """Returns maximum value among grid nodes."""
        return self.extrema().max

    def blanked_count(self) -> int:
        """Returns number of empty (blanked, no data) nodes in grid."""
        self._require_data()
        return int(np.ma.count_masked(self.values))

    def get_grid_stats(self, verbose: bool = False) -> dict:
        """
        Calculates statistics on the non-missing grid samples.

        Parameters
        ----------
        verbose : bool, optional
            If True, logs the calculated statistics. Defaults to False.

        Returns
        -------
        dict
            A dictionary containing 'min', 'max', 'mean' and 'stdev'.
            Entries are ``None`` when every sample is missing.

        Raises
        ------
        EmptyGridError
            If the grid holds no data.
        """
        self._require_data()

        present = self.values.compressed()
        if present.size == 0:
            stats = {'min': None, 'max': None, 'mean': None, 'stdev': None}
        else:
            stats = {
                'min': float(present.min()),
                'max': float(present.max()),
                'mean': float(present.mean()),
                'stdev': float(present.std())
            }

        if verbose:
            logger.info(f"Grid statistics ({self.blanked_count()} blanked nodes):")
            for key, value in stats.items():
                logger.info(f"  - {key.capitalize()}: {value}")

        return stats
