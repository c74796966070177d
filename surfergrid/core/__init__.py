# -*- coding: utf-8 -*-
"""
The core subpackage of surfergrid, containing the Grid object and the
Surfer 6 grid file codecs.

:copyright: Copyright 2018-2025 surfergrid contributors.
:license: GNU GPL v3.
"""

# --- Import core modules to trigger registrations and build the subpackage API ---
from . import registry  # Import the registry first, as the codec modules use it.
from . import errors
from . import datastructures

# --- The Grid class, assembled from its mixins.
from .grid import Grid

# Import all modules that contain registered decoders/encoders to populate the registry.
from . import grd

from .datastructures import GridFormat, Extrema, GridHeader
from .errors import (GridError, ValidationError, EmptyGridError, UnrecognizedFormatError,
                     UnsupportedFormatError, MalformedHeaderError, MalformedDataError,
                     TruncatedDataError)
from .grd import decode, encode, read_grd, write_grd, read_format_from_file
from .registry import get_grid_formats

import logging
import surfergrid.__config__ as CONFIG
# --- Basic Logging Configuration ---
# Sets up a default handler that prints INFO level messages and higher to the console.
logging.basicConfig(
    level=CONFIG.log_level,
    format=CONFIG.log_format
)
