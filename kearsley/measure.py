'''For locating point sets in space and checking the properties of the matrices which move them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np

from .arraytypes import Shape, N, Numeric


def centroid(positions : np.ndarray[Shape[N, 3], Numeric]) -> np.ndarray[Shape[3], float]:
    '''The mean position of a set of points, i.e. the column-wise mean of an Nx3 array'''
    return positions.mean(axis=0)

def centered(positions : np.ndarray[Shape[N, 3], Numeric]) -> np.ndarray[Shape[N, 3], float]:
    '''Return a copy of a set of points translated so that its centroid lies at the origin;
    The array supplied to "positions" is unchanged'''
    return positions - centroid(positions) # broadcast subtracts centroid from each row

def is_orthogonal(matrix : np.ndarray[Shape[N, N], Numeric]) -> bool:
    '''
    Determine if a matrix is orthogonal, i.e. its left and right inverses are both its own transpose
    Note that the matrix does not necessarily have to be square in order for it to be orthogonal
    '''
    (n_rows, n_cols) = matrix.shape # implicitly assert 2-dimensionality
    return  np.allclose(matrix @ matrix.T, np.eye(n_rows)) \
        and np.allclose(matrix.T @ matrix, np.eye(n_cols)) # NOTE: can't optimize as the transpose of the above product for non-square matrices

def is_proper_rotation(matrix : np.ndarray[Shape[3, 3], Numeric]) -> bool:
    '''Determine if a 3x3 matrix is a proper rotation, i.e. orthogonal AND orientation-preserving (determinant +1)'''
    return is_orthogonal(matrix) and np.isclose(np.linalg.det(matrix), 1.0)

def deviation(
        positions_1 : np.ndarray[Shape[N, 3], Numeric],
        positions_2 : np.ndarray[Shape[N, 3], Numeric],
    ) -> float:
    '''Root-mean-square distance between corresponding rows of two point sets, WITHOUT any prior alignment'''
    return float(np.sqrt(np.mean(np.sum((positions_1 - positions_2)**2, axis=-1))))
