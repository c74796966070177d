# -*- coding: utf-8 -*-
'''
    surfergrid.core.registry
    ---------------------------

    Codec tables keyed by grid format. The high-level `decode` and `encode`
    look formats up here, so a new variant (e.g. Surfer 7) only has to
    register its own pair of functions.

    :copyright: Copyright 2025 surfergrid contributors.
    :license: GNU GPL v3.

'''

# GridFormat -> {'function', 'description'}
GRID_DECODERS = {}
def register_decoder(grid_format, description):
    """
    A decorator that registers the decoder of a grid format.

    The decorated function receives a binary stream positioned just after
    the 4-byte identification tag and returns ``(header, values)``: a
    `GridHeader` and the samples as a masked array. It must raise rather
    than return a partial grid.

    Parameters
    ----------
    grid_format : GridFormat
        The encoding handled by the function.
    description : str
        A user-friendly description (e.g., "Surfer 6 text grid (*.grd)").
    """
    def decorator(func):
        GRID_DECODERS[grid_format] = {
            'function': func,
            'description': description,
        }
        return func
    return decorator

# GridFormat -> {'function', 'description'}
GRID_ENCODERS = {}

def register_encoder(grid_format, description):
    """
    A decorator that registers the encoder of a grid format.

    The decorated function is called as ``func(grid, stream, extrema)``
    with a populated, size-checked grid and its precomputed `Extrema`, and
    writes the whole file, identification tag included.

    Parameters
    ----------
    grid_format : GridFormat
        The encoding produced by the function.
    description : str
        A user-friendly description (e.g., "Surfer 6 binary grid (*.grd)").
    """
    def decorator(func):
        GRID_ENCODERS[grid_format] = {
            'function': func,
            'description': description
        }
        return func
    return decorator

def get_grid_formats():
    """Returns a list of (description, grid_format) for every decodable format."""
    return sorted([(details['description'], fmt) for fmt, details in GRID_DECODERS.items()],
                  key=lambda item: item[0])
