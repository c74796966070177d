# -*- coding: utf-8 -*-.
"""
   surfergrid.core.grd
   -------------------------

   Module to manage Golden Software Surfer 6 grid files input and output.

   Two encodings of the same grid are handled: the text format (tag DSAA)
   and the binary format (tag DSBB). Both are read from and written to
   binary streams owned by the caller.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.
"""

from .registry import register_decoder, register_encoder, GRID_DECODERS, GRID_ENCODERS

import logging
import os
import re
import struct
import numpy as np

import surfergrid.__config__ as CONFIG
from .datastructures import Extrema, GridFormat, GridHeader
from .errors import (EmptyGridError, MalformedDataError, MalformedHeaderError,
                     TruncatedDataError, UnrecognizedFormatError, UnsupportedFormatError)
from .grid import Grid, validate_size
from .utils import float32_bits, format_number, no_data_mask, to_float32

logger = logging.getLogger(__name__)

# --- Constants ---
FORMAT_SIZE = 4
FLOAT_SIZE = 4

# ncol, nrow (short) then xmin, xmax, ymin, ymax (double)
BINARY_GRID_INFO = struct.Struct('<hh4d')
# zmin, zmax slots (double, or no-data pattern + padding)
EXTREMUM_SLOT_SIZE = 8
BINARY_HEADER_SIZE = BINARY_GRID_INFO.size + 2 * EXTREMUM_SLOT_SIZE

# Identification tag lookup, the only place tags map to formats
TAG_FORMAT_MAP = {fmt.tag: fmt for fmt in GridFormat}

TEXT_LINE_BREAK = re.compile(r'\r?\n')


# --- Low-Level Functions ---
def _read_exact(stream, size):
    """Reads up to `size` bytes, returning fewer only at end of stream."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


def read_format_from_stream(stream):
    ''' Return the grid format from the identification tag.

    Consumes the first 4 bytes of `stream`.

    Returns
    -------
    frmt : GridFormat
        Encoding of the grid stream.

    Raises
    ------
    UnrecognizedFormatError
        If the tag is neither DSAA nor DSBB.

    '''

    tag_id = _read_exact(stream, FORMAT_SIZE).decode('latin1')

    frmt = TAG_FORMAT_MAP.get(tag_id)
    if frmt is None:
        raise UnrecognizedFormatError(tag_id)

    return frmt


def read_format_from_file(filename):
    ''' Return the grid format of a file from its identification tag. '''

    with open(filename, 'rb') as file:
        return read_format_from_stream(file)


def _header_pair(lines, index, name, convert):
    ''' Parse the two leading fields of a text header line. '''

    try:
        first, second = lines[index].split()[:2]
        return convert(first), convert(second)
    except (IndexError, ValueError) as e:
        raise MalformedHeaderError(f"Invalid or missing {name} on line {index + 1} "
                                   f"of Surfer 6 text grid") from e


def _text_extremum(token):
    return None if token == CONFIG.no_data_text else float(token)


@register_decoder(GridFormat.TEXT, 'Surfer 6 text grid (*.grd)')
def read_surfer6ascii(stream):
    ''' Read Golden Software Surfer 6 text grid data.

    The identification tag must already be consumed. Sample tokens form a
    single whitespace-separated stream in row-major order; line breaks
    carry no meaning, so rows may wrap over any number of lines.

    Returns
    -------
    header : GridHeader
        Grid size, node bounding box and declared z range.
    values : np.ma.MaskedArray
        Samples, masked where the no-data token was read.

    '''

    text = stream.read().decode('latin1')
    lines = TEXT_LINE_BREAK.split(text)

    # Line 1 holds the identification tag
    ncol, nrow = _header_pair(lines, 1, 'grid size', int)
    validate_size(nrow, ncol)
    xmin, xmax = _header_pair(lines, 2, 'X limits', float)
    ymin, ymax = _header_pair(lines, 3, 'Y limits', float)
    zmin, zmax = _header_pair(lines, 4, 'Z limits', _text_extremum)

    header = GridHeader(ncol, nrow, xmin, xmax, ymin, ymax, zmin, zmax)
    logger.debug(f"Surfer 6 text grid header: {header}")

    tokens = ' '.join(lines[5:]).split()
    expected = ncol * nrow
    if len(tokens) < expected:
        raise TruncatedDataError(len(tokens) // ncol, nrow)
    if len(tokens) > expected:
        raise MalformedDataError(f"Expected {expected} values for a {nrow}x{ncol} grid "
                                 f"but {len(tokens)} encountered.")

    # Data
    data = np.zeros(expected)
    mask = np.zeros(expected, dtype=bool)
    for i, token in enumerate(tokens):
        if token == CONFIG.no_data_text:
            mask[i] = True
            continue
        try:
            data[i] = float(token)
        except ValueError:
            raise MalformedDataError(f"Invalid value {token!r} at row {i // ncol}, "
                                     f"column {i % ncol}") from None

    values = np.ma.MaskedArray(data.reshape(nrow, ncol), mask=mask.reshape(nrow, ncol))

    return header, values


def _binary_extremum(slot):
    if struct.unpack_from('<I', slot)[0] == CONFIG.no_data_bits:
        return None
    return struct.unpack('<d', slot)[0]


@register_decoder(GridFormat.BINARY, 'Surfer 6 binary grid (*.grd)')
def read_surfer6bin(stream):
    ''' Read Golden Software Surfer 6 binary grid data.

    The identification tag must already be consumed. A sample is missing
    when its raw 32-bit pattern is the no-data pattern; the comparison is
    made on the bits, never on the float value.

    Returns
    -------
    header : GridHeader
        Grid size, node bounding box and declared z range.
    values : np.ma.MaskedArray
        Samples, masked where the no-data pattern was read.

    '''

    buffer = _read_exact(stream, BINARY_HEADER_SIZE)
    if len(buffer) != BINARY_HEADER_SIZE:
        raise MalformedHeaderError(f"Surfer 6 binary grid header truncated: expected "
                                   f"{BINARY_HEADER_SIZE} bytes but {len(buffer)} encountered.")

    # Grid info
    ncol, nrow, xmin, xmax, ymin, ymax = BINARY_GRID_INFO.unpack_from(buffer)
    validate_size(nrow, ncol)
    offset = BINARY_GRID_INFO.size
    zmin = _binary_extremum(buffer[offset:offset + EXTREMUM_SLOT_SIZE])
    zmax = _binary_extremum(buffer[offset + EXTREMUM_SLOT_SIZE:])

    header = GridHeader(ncol, nrow, xmin, xmax, ymin, ymax, zmin, zmax)
    logger.debug(f"Surfer 6 binary grid header: {header}")

    # Data, grown row by row so memory follows the bytes actually read
    rows = []
    row_size = ncol * FLOAT_SIZE

    for row in range(nrow):  # Y
        buffer = _read_exact(stream, row_size)
        if len(buffer) != row_size:
            raise TruncatedDataError(row, nrow)
        rows.append(buffer)

    raw = b''.join(rows)
    mask = no_data_mask(np.frombuffer(raw, dtype='<u4')).reshape(nrow, ncol)
    data = np.frombuffer(raw, dtype='<f4').astype(np.float64).reshape(nrow, ncol)

    data[mask] = 0.0
    values = np.ma.MaskedArray(data, mask=mask)

    return header, values


def _text_value(value):
    ''' Format a sample or extremum, truncated to float32. '''

    if value is None:
        return CONFIG.no_data_text
    return format_number(to_float32(value))


@register_encoder(GridFormat.TEXT, 'Surfer 6 text grid (*.grd)')
def write_surfer6ascii(grid, stream, extrema: Extrema):
    ''' Write a grid as Golden Software Surfer 6 text.

    Lines end with CRLF. A line break follows every 10th value of a row
    and each row ends with a blank line.

    '''

    newline = CONFIG.text_newline
    delimiter = CONFIG.text_delimiter
    per_line = CONFIG.text_values_per_line

    # Headers - grid size and limits
    headers = [GridFormat.TEXT.tag,
               f"{grid.column_count()}{delimiter}{grid.row_count()}",
               f"{format_number(grid.xmin)}{delimiter}{format_number(grid.xmax)}",
               f"{format_number(grid.ymin)}{delimiter}{format_number(grid.ymax)}",
               f"{_text_value(extrema.min)}{delimiter}{_text_value(extrema.max)}"]
    stream.write((newline.join(headers) + newline).encode('latin1'))

    # Data
    samples = grid.values.filled(0.0).astype(np.float32)
    mask = np.ma.getmaskarray(grid.values)

    for row in range(grid.row_count()):  # Y
        parts = []
        for col in range(grid.column_count()):  # X
            if col > 0 and col % per_line == 0:
                parts.append(newline)
            if mask[row, col]:
                parts.append(CONFIG.no_data_text)
            else:
                parts.append(format_number(samples[row, col]))
            parts.append(delimiter)
        parts.append(newline * 2)
        stream.write(''.join(parts).encode('latin1'))


def _binary_extremum_slot(value):
    if value is None:
        return struct.pack('<I', CONFIG.no_data_bits) + bytes(EXTREMUM_SLOT_SIZE - 4)
    return struct.pack('<d', value)


@register_encoder(GridFormat.BINARY, 'Surfer 6 binary grid (*.grd)')
def write_surfer6bin(grid, stream, extrema: Extrema):
    ''' Write a grid as Golden Software Surfer 6 binary.

    Missing samples, and a missing extremum in the header, are written as
    the raw no-data bit pattern.

    '''

    # Surfer 6 binary grid tag
    stream.write(GridFormat.BINARY.tag.encode('latin1'))

    # Grid info
    stream.write(BINARY_GRID_INFO.pack(grid.column_count(), grid.row_count(),
                                       grid.xmin, grid.xmax, grid.ymin, grid.ymax))
    stream.write(_binary_extremum_slot(extrema.min))
    stream.write(_binary_extremum_slot(extrema.max))

    # Data
    bits = float32_bits(grid.values.filled(0.0))
    mask = np.ma.getmaskarray(grid.values)

    collisions = int(np.count_nonzero(no_data_mask(bits) & ~mask))
    if collisions:
        logger.warning(f"{collisions} sample(s) equal the no-data value once truncated "
                       f"to float32 and will read back as blanked.")

    bits[mask] = CONFIG.no_data_bits
    for row in bits:  # Y
        stream.write(row.tobytes())


# --- High-Level Functions ---
def decode(stream, grid=None):
    """
    Reads a Surfer 6 grid from a binary stream.

    The encoding is detected from the 4-byte identification tag.

    Parameters
    ----------
    stream : binary file-like
        Readable stream positioned at the start of the grid.
    grid : Grid, optional
        Grid to populate. A new one is created if not given. It is only
        modified once the whole stream has been decoded.

    Returns
    -------
    grid : Grid
        The populated grid.
    fmt : GridFormat
        The detected encoding.

    Raises
    ------
    UnrecognizedFormatError
        If the identification tag is unknown.
    MalformedHeaderError, MalformedDataError, TruncatedDataError, ValidationError
        If the grid content is invalid.
    """

    fmt = read_format_from_stream(stream)
    decoder = GRID_DECODERS.get(fmt)
    if decoder is None:
        raise UnrecognizedFormatError(fmt.tag)

    header, values = decoder['function'](stream)

    if grid is None:
        grid = Grid()
    grid._populate(values, header, fmt)

    return grid, fmt


def _resolve_encoder(fmt):
    fmt = GridFormat.parse(CONFIG.default_format_tag if fmt is None else fmt)
    encoder = GRID_ENCODERS.get(fmt)
    if encoder is None:
        raise UnsupportedFormatError(fmt)
    return fmt, encoder['function']


def encode(grid, stream, fmt=None):
    """
    Writes a grid to a binary stream.

    Parameters
    ----------
    grid : Grid
        The populated grid to write. It is not modified.
    stream : binary file-like
        Writable stream.
    fmt : GridFormat or str, optional
        Output encoding ('DSAA'/'text' or 'DSBB'/'binary'). Defaults to
        the text format.

    Returns
    -------
    fmt : GridFormat
        The encoding written.

    Raises
    ------
    UnsupportedFormatError
        If `fmt` names no known encoding.
    EmptyGridError
        If the grid holds no data.
    ValidationError
        If the sample array no longer has a valid grid size.
    """

    fmt, encoder = _resolve_encoder(fmt)
    if grid.values is None:
        raise EmptyGridError("No grid data available to export.")
    validate_size(*grid.values.shape)

    extrema = grid.extrema()
    encoder(grid, stream, extrema)

    return fmt


def read_grd(filename, grid=None):
    """
    Reads a Golden Software Surfer 6 grid file.

    Parameters
    ----------
    filename : str or os.PathLike
        The path to the .grd file.
    grid : Grid, optional
        Grid to populate.

    Returns
    -------
    grid : Grid
        The populated grid.
    fmt : GridFormat
        The detected encoding.
    """

    with open(filename, 'rb') as file:
        grid, fmt = decode(file, grid)

    logger.info(f"{fmt.name.capitalize()} grid {grid.row_count()}x{grid.column_count()} "
                f"read from '{filename}'.")
    return grid, fmt


def write_grd(grid, filename, fmt=None):
    """
    Writes a grid to a Golden Software Surfer 6 grid file.

    The format is checked before the file is opened, and a partially
    written file is removed if encoding fails.

    Parameters
    ----------
    grid : Grid
        The populated grid to write.
    filename : str or os.PathLike
        The path for the output .grd file.
    fmt : GridFormat or str, optional
        Output encoding. Defaults to the text format.

    Returns
    -------
    fmt : GridFormat
        The encoding written.
    """

    fmt, _ = _resolve_encoder(fmt)
    if grid.values is None:
        raise EmptyGridError("No grid data available to export.")

    with open(filename, 'wb') as file:
        try:
            encode(grid, file, fmt)
        except Exception:
            file.close()
            os.remove(filename)
            raise

    logger.info(f"{fmt.name.capitalize()} grid {grid.row_count()}x{grid.column_count()} "
                f"written to '{filename}'.")
    return fmt
