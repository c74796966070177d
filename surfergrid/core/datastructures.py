# -*- coding: utf-8 -*-
"""
   surfergrid.core.datastructures
   ------------------------------

   Defines the small value types shared by the grid model and the codecs.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.

"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import UnsupportedFormatError


# --- Grid file encodings ---

class GridFormat(Enum):
    """
    The on-disk encodings of a Surfer 6 grid.

    Each member's value is the 4-character identification tag that opens
    a file of that encoding.

    """
    TEXT = 'DSAA'
    BINARY = 'DSBB'

    @property
    def tag(self) -> str:
        """The identification tag as written on disk."""
        return self.value

    @classmethod
    def parse(cls, value) -> 'GridFormat':
        """
        Resolves a caller supplied format to a GridFormat member.

        Parameters
        ----------
        value : GridFormat or str
            A member, its identification tag ('DSAA', 'DSBB') or its
            name ('text', 'binary', case-insensitive).

        Raises
        ------
        UnsupportedFormatError
            If `value` names no known encoding.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value.upper() == member.name:
                    return member
        raise UnsupportedFormatError(value)


# --- Summary values ---

@dataclass(frozen=True)
class Extrema:
    """
    Smallest and largest non-missing sample of a grid.

    Attributes
    ----------
    min : float, optional
        Minimum sample value, ``None`` if every sample is missing.
    max : float, optional
        Maximum sample value, ``None`` if every sample is missing.

    """
    min: Optional[float] = None
    max: Optional[float] = None


@dataclass
class GridHeader:
    """
    Header fields shared by the text and binary encodings.

    Attributes
    ----------
    ncol : int
        Number of grid columns (nodes along X).
    nrow : int
        Number of grid rows (nodes along Y).
    xmin, xmax, ymin, ymax : float
        Bounding box of the grid nodes.
    zmin, zmax : float, optional
        Sample range declared by the file. Informational only.

    """
    ncol: int
    nrow: int
    xmin: float
    xmax: float
    ymin: float
    ymax: float
    zmin: Optional[float] = None
    zmax: Optional[float] = None
