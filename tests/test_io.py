import io
import os

import numpy as np
import pytest

import surfergrid
from surfergrid import (Grid, GridFormat, read_grd, write_grd, EmptyGridError,
                        UnrecognizedFormatError, UnsupportedFormatError)
from surfergrid.core.grd import read_format_from_file

def test_from_file_text(sample_text_path):
    grid = Grid.from_file(sample_text_path)

    assert grid.format is surfergrid.TEXT
    assert grid.shape == (3, 4)
    assert grid.blanked_count() == 1

def test_from_file_binary(sample_binary_path):
    grid = Grid.from_file(str(sample_binary_path))

    assert grid.format is surfergrid.BINARY
    assert grid.values[2, 2] is np.ma.masked

def test_read_format_from_file(sample_text_path, sample_binary_path):
    assert read_format_from_file(sample_text_path) is GridFormat.TEXT
    assert read_format_from_file(sample_binary_path) is GridFormat.BINARY

def test_read_populates_existing_grid(sample_binary_path):
    grid = Grid()
    result = grid.read(sample_binary_path)

    assert result is grid
    assert grid.row_count() == 3

def test_read_grd_returns_format(sample_text_path):
    grid, fmt = read_grd(sample_text_path)
    assert fmt is GridFormat.TEXT
    assert grid.format is fmt

def test_read_write_text_file(tmp_path, sample_text_path):
    grid = Grid.from_file(sample_text_path)
    grid.values[0, 0] = np.ma.masked
    grid.values[1, 2] = 5

    out = tmp_path / 'out.grd'
    grid.write(out)  # Default is text format

    assert out.read_bytes().startswith(b'DSAA\r\n')
    result = Grid.from_file(out)
    assert result.blanked_count() == 2
    assert result.values[0, 0] is np.ma.masked
    assert result.values[1, 2] == 5

def test_read_write_binary_file(tmp_path, sample_binary_path):
    grid = Grid.from_file(sample_binary_path)

    out = tmp_path / 'out.grd'
    assert write_grd(grid, out, GridFormat.BINARY) is GridFormat.BINARY

    assert out.read_bytes() == sample_binary_path.read_bytes()

@pytest.mark.parametrize('fmt, tag', [
    ('DSAA', b'DSAA'),
    ('DSBB', b'DSBB'),
    ('text', b'DSAA'),
    ('Binary', b'DSBB'),
    (GridFormat.BINARY, b'DSBB'),
])
def test_write_format_names(sample_grid, fmt, tag):
    stream = io.BytesIO()
    sample_grid.write(stream, fmt)
    assert stream.getvalue()[:4] == tag

def test_text_and_binary_hold_the_same_grid(tmp_path, sample_grid):
    text_path = tmp_path / 'a.grd'
    binary_path = tmp_path / 'b.grd'
    sample_grid.write(text_path, surfergrid.TEXT)
    sample_grid.write(binary_path, surfergrid.BINARY)

    assert Grid.from_file(text_path) == Grid.from_file(binary_path) == sample_grid

def test_unsupported_format_creates_no_file(tmp_path, sample_grid):
    out = tmp_path / 'out.grd'
    with pytest.raises(UnsupportedFormatError) as excinfo:
        sample_grid.write(out, 'DSRB')

    assert excinfo.value.requested == 'DSRB'
    assert not out.exists()

def test_failed_write_removes_file(tmp_path, sample_grid, monkeypatch):
    from surfergrid.core import grd

    def failing_encoder(grid, stream, extrema):
        stream.write(b'DSAA\r\n')
        raise OSError('disk full')

    monkeypatch.setitem(grd.GRID_ENCODERS[GridFormat.TEXT], 'function', failing_encoder)

    out = tmp_path / 'out.grd'
    with pytest.raises(OSError, match='disk full'):
        sample_grid.write(out)
    assert not out.exists()

def test_write_empty_grid(tmp_path):
    with pytest.raises(EmptyGridError):
        Grid().write(tmp_path / 'out.grd')
    assert not os.path.exists(tmp_path / 'out.grd')

def test_unrecognized_tag(tmp_path):
    path = tmp_path / 'surfer7.grd'
    path.write_bytes(b'DSRB' + bytes(100))

    with pytest.raises(UnrecognizedFormatError) as excinfo:
        Grid.from_file(path)
    assert excinfo.value.tag == 'DSRB'

def test_short_stream_tag():
    with pytest.raises(UnrecognizedFormatError) as excinfo:
        Grid().read(io.BytesIO(b'DS'))
    assert excinfo.value.tag == 'DS'

def test_failed_read_leaves_grid_untouched(sample_grid, sample_binary):
    with pytest.raises(surfergrid.TruncatedDataError):
        sample_grid.read(io.BytesIO(sample_binary[:-1]))

    assert sample_grid.format is None
    assert sample_grid.values[1, 2] == 5
