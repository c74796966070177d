# -*- coding: utf-8 -*-
"""
surfergrid
----------

Reading and writing of Golden Software Surfer 6 grid files (text DSAA and
binary DSBB) with byte-exact round trips.

:copyright: Copyright 2018-2025 surfergrid contributors.
:license: GNU GPL v3.
"""

# --- Package Metadata ---
__version__ = "0.1.0"
__author__ = "surfergrid contributors"
__license__ = "GPLv3"
__software__ = 'surfergrid'
__description__ = 'Surfer 6 text and binary grid file codec'

# --- Codec Registration ---
# Importing the core subpackage triggers the @register_decoder and
# @register_encoder decorators of the codec modules.
from . import core


# --- Public API ---
from .core import (
    Grid,
    GridFormat,
    Extrema,
    decode,
    encode,
    read_grd,
    write_grd,
    get_grid_formats,
    GridError,
    ValidationError,
    EmptyGridError,
    UnrecognizedFormatError,
    UnsupportedFormatError,
    MalformedHeaderError,
    MalformedDataError,
    TruncatedDataError,
)

# Constants for Grid.write(), mirroring the identification tags.
TEXT = GridFormat.TEXT
BINARY = GridFormat.BINARY

__all__ = ['Grid', 'GridFormat', 'Extrema', 'decode', 'encode', 'read_grd', 'write_grd',
           'get_grid_formats', 'TEXT', 'BINARY', 'GridError', 'ValidationError',
           'EmptyGridError', 'UnrecognizedFormatError', 'UnsupportedFormatError',
           'MalformedHeaderError', 'MalformedDataError', 'TruncatedDataError']
