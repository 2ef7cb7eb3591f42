'''Coercion and shape checking of point sets prior to superposition'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any

import logging
LOGGER = logging.getLogger(__name__)

import numpy as np

from .arraytypes import Shape, N


# Custom Exceptions
class InvalidArgumentError(ValueError):
    '''Raised when a pair of point sets cannot be superimposed onto one another'''
    pass

class ColumnCountError(InvalidArgumentError):
    '''Raised when a point set is not an Nx3 array of points in 3D space'''
    def __init__(self, argument : str, shape : tuple[int, ...]) -> None:
        self.argument = argument
        self.shape = shape
        super().__init__(f'{argument} must have three columns (got array of shape {shape})')

class RowCountMismatchError(InvalidArgumentError):
    '''Raised when two point sets do not contain the same number of points'''
    def __init__(self, n_rows_u : int, n_rows_v : int) -> None:
        self.n_rows_u = n_rows_u
        self.n_rows_v = n_rows_v
        super().__init__(f'u and v must have the same number of rows (got {n_rows_u} and {n_rows_v})')


def as_point_set(positions : Any, argument : str) -> np.ndarray[Shape[N, 3], float]:
    '''
    Convert an array-like of coordinates into a floating-point Nx3 array,
    raising a ColumnCountError (which names "argument") if it is not one
    '''
    points = np.asarray(positions, dtype=float) # DEV: makes a copy only when the input isn't already a float array
    if (points.ndim != 2) or (points.shape[-1] != 3):
        raise ColumnCountError(argument, points.shape)

    if points.shape[0] == 0:
        LOGGER.warning(f'Point set {argument} contains no points; results will not be finite')

    if not np.all(np.isfinite(points)):
        LOGGER.warning(f'Point set {argument} contains non-finite coordinates; results will not be finite either')

    return points

def validate_point_sets(u : Any, v : Any) -> tuple[
        np.ndarray[Shape[N, 3], float],
        np.ndarray[Shape[N, 3], float],
    ]:
    '''
    Check that a reference and mobile point set can be superimposed, i.e. that
    both have exactly 3 columns and that they contain the same number of points

    Checks are made in a fixed order (columns of u, columns of v, then row counts)
    and the first violated one is raised; no coordinates are touched otherwise

    Parameters
    ----------
    u : Array[[N, 3], float]
        The reference point set
    v : Array[[N, 3], float]
        The mobile point set, whose i-th row corresponds to the i-th row of u

    Returns
    -------
    u, v : Array[[N, 3], float]
        The point sets, coerced to floating-point numpy arrays

    Raises
    ------
    ColumnCountError
        If either point set does not have exactly 3 columns
    RowCountMismatchError
        If the point sets have differing numbers of rows
    '''
    u = as_point_set(u, argument='u')
    v = as_point_set(v, argument='v')
    if u.shape[0] != v.shape[0]:
        raise RowCountMismatchError(u.shape[0], v.shape[0])

    return u, v
