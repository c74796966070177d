# -*- coding: utf-8 -*-
"""
   surfergrid.core.utils
   ---------------------

   Provides low-level, pure utility functions used by the grid model and
   the codecs.

   :copyright: Copyright 2018-2025 surfergrid contributors.
   :license: GNU GPL v3.

"""

from decimal import Decimal

import numpy as np

import surfergrid.__config__ as CONFIG

# --- Float32 precision ---
def to_float32(value: float) -> float:
    """
    Truncates a number to 32-bit floating point precision.

    Parameters
    ----------
    value : float
        The number to truncate.

    Returns
    -------
    float
        The nearest float32 value, widened back to a Python float.
    """
    return float(np.float32(value))


def float32_bits(values: np.ndarray) -> np.ndarray:
    """Returns the raw little-endian uint32 bit patterns of `values` as float32."""
    return np.ascontiguousarray(values, dtype='<f4').view('<u4')


def no_data_mask(bits: np.ndarray) -> np.ndarray:
    """Returns True where a raw float32 bit pattern is the Surfer no-data pattern."""
    return bits == CONFIG.no_data_bits


# --- Number formatting ---
def format_number(value: float) -> str:
    """
    Formats a number with the shortest digits that round-trip.

    The layout follows the ECMAScript ``Number#toString`` rules used by the
    grid files this package exchanges: integers carry no decimal point and
    the exponent form is only used outside ``1e-6 <= |x| < 1e21``.

    Parameters
    ----------
    value : float
        The number to format.

    Returns
    -------
    str
        The formatted number.

    Examples
    --------
    >>> format_number(30.0)
    '30'
    >>> format_number(0.1)
    '0.1'
    >>> format_number(1.70141e38)
    '1.70141e+38'
    """
    value = float(value)
    if np.isnan(value):
        return 'NaN'
    if np.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'
    if value < 0:
        return '-' + format_number(-value)

    # value == 0.d1d2...dk x 10**n
    _, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = ''.join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        return digits + '0' * (n - k)
    if 0 < n <= 21:
        return digits[:n] + '.' + digits[n:]
    if -6 < n <= 0:
        return '0.' + '0' * (-n) + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + '.' + digits[1:]
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
