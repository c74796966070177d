import struct

import pytest

from surfergrid import Grid

NO_DATA_BITS = 0x7effffee

# 4x3 grid written by Surfer, with one blanked node at row 2, column 2
SAMPLE_ROWS = [
    [0, 1, 1, 2],
    [2, 3, 5, 1],
    [1, 3, None, 1]]

SAMPLE_TEXT = (b"DSAA\r\n"
               b"4 3\r\n"
               b"0 30\r\n"
               b"0 20\r\n"
               b"0 5\r\n"
               b"0 1 1 2 \r\n\r\n"
               b"2 3 5 1 \r\n\r\n"
               b"1 3 1.70141e+038 1 \r\n\r\n")


def pack_binary_grid(rows, xmin, xmax, ymin, ymax, zmin, zmax):
    """Packs a Surfer 6 binary grid by hand, value by value."""
    content = b'DSBB' + struct.pack('<hh', len(rows[0]), len(rows))
    content += struct.pack('<6d', xmin, xmax, ymin, ymax, zmin, zmax)
    for row in rows:
        for value in row:
            if value is None:
                content += struct.pack('<I', NO_DATA_BITS)
            else:
                content += struct.pack('<f', value)
    return content


@pytest.fixture
def sample_grid():
    """The 4x3 sample grid built in memory."""
    return Grid(SAMPLE_ROWS, 0, 0, 30, 20)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_binary():
    return pack_binary_grid(SAMPLE_ROWS, 0, 30, 0, 20, 0, 5)


@pytest.fixture
def sample_text_path(tmp_path, sample_text):
    """A Surfer 6 text sample file on disk."""
    path = tmp_path / 'sample1.text.grd'
    path.write_bytes(sample_text)
    return path


@pytest.fixture
def sample_binary_path(tmp_path, sample_binary):
    """A Surfer 6 binary sample file on disk."""
    path = tmp_path / 'sample1.binary.grd'
    path.write_bytes(sample_binary)
    return path
