# -*- coding: utf-8 -*-
'''
    surfergrid.core.io
    ---------------------------

    High-level grid input and output.

    :copyright: Copyright 2018-2025 surfergrid contributors.
    :license: GNU GPL v3.

'''

import os

# --- IO Classe Mixin ---
class IOMixin:
    """
    Mixin containing the high-level Input/Output methods for the Grid class.

    A source or target is either a path (``str`` or ``os.PathLike``) or an
    open binary stream owned by the caller.
    """

    @classmethod
    def from_file(cls, filename):
        """
        Creates a Grid by reading a Surfer grid file.

        Parameters
        ----------
        filename : str or os.PathLike
            The path to the grid file. The encoding is detected from the
            identification tag.

        Returns
        -------
        Grid
            The populated grid; its `format` attribute holds the detected
            encoding.
        """
        return cls().read(filename)

    def read(self, source):
        """
        Populates this grid from a path or a readable binary stream.

        The grid is left untouched if decoding fails.

        Returns
        -------
        Grid
            The grid itself.
        """
        from .grd import decode, read_grd

        if isinstance(source, (str, os.PathLike)):
            read_grd(source, grid=self)
        else:
            decode(source, grid=self)
        return self

    def write(self, target, fmt=None):
        """
        Writes this grid to a path or a writable binary stream.

        Parameters
        ----------
        target : str, os.PathLike or binary stream
            Output file path or stream.
        fmt : GridFormat or str, optional
            Output encoding. Defaults to the Surfer 6 text format.

        Returns
        -------
        Grid
            The grid itself.
        """
        from .grd import encode, write_grd

        if isinstance(target, (str, os.PathLike)):
            write_grd(self, target, fmt)
        else:
            encode(self, target, fmt)
        return self
