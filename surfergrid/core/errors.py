# -*- coding: utf-8 -*-
"""
   surfergrid.core.errors
   ----------------------

   Exceptions raised by the grid model and the grid file codecs.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.
"""


class GridError(Exception):
    """Base error for grid model and grid file operations."""


class ValidationError(GridError, ValueError):
    """Grid dimensions out of range or non-rectangular input."""


class EmptyGridError(GridError, ValueError):
    """Operation requires a grid holding data."""


class UnrecognizedFormatError(GridError):
    """The identification tag matches no known grid encoding.

    Attributes
    ----------
    tag : str
        The literal tag read from the stream.
    """

    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Unknown grid file format {tag!r}")


class UnsupportedFormatError(GridError):
    """Encoding requested for an unknown target format.

    Attributes
    ----------
    requested : object
        The format value requested by the caller.
    """

    def __init__(self, requested):
        self.requested = requested
        super().__init__(f"Unsupported {requested!r} format")


class MalformedHeaderError(GridError):
    """Header lines or fields are missing or cannot be parsed."""


class MalformedDataError(GridError):
    """A sample token cannot be parsed or the sample count is wrong."""


class TruncatedDataError(GridError):
    """The stream ended before every declared row was read.

    Attributes
    ----------
    row : int
        Index of the row that could not be read.
    row_count : int
        Number of rows declared in the header.
    """

    def __init__(self, row, row_count):
        self.row = row
        self.row_count = row_count
        super().__init__(f"Error reading row {row}/{row_count}, unexpected end of file")
