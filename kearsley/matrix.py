'''Construction of the 4x4 Kearsley matrix, whose eigensystem encodes the optimal superposition of two point sets'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np

from .arraytypes import Shape, N


def kearsley_matrix(
        x : np.ndarray[Shape[N, 3], float],
        y : np.ndarray[Shape[N, 3], float],
    ) -> np.ndarray[Shape[4, 4], float]:
    '''
    Assemble the symmetric Kearsley matrix for a pair of CENTERED point sets

    Only the lower triangle is computed explicitly; the upper triangle is mirrored from it
    The placement of each entry fixes the ordering of the resulting quaternion as scalar-first,
    which quaternions.rotation_from_quaternion relies upon, so DON'T permute rows or columns

    Parameters
    ----------
    x : Array[[N, 3], float]
        The centered reference point set
    y : Array[[N, 3], float]
        The centered mobile point set

    Returns
    -------
    Array[[4, 4], float]
        The Kearsley matrix, whose smallest eigenvalue is N times the minimal squared RMSD
    '''
    d = x - y
    s = x + y
    d1, d2, d3 = d.T # per-axis columns, each of length N
    s1, s2, s3 = s.T

    K = np.zeros((4, 4), dtype=float)
    K[0, 0] = d1 @ d1 + d2 @ d2 + d3 @ d3
    K[1, 0] = s2 @ d3 - d2 @ s3
    K[2, 0] = d1 @ s3 - s1 @ d3
    K[3, 0] = s1 @ d2 - d1 @ s2
    K[1, 1] = s2 @ s2 + s3 @ s3 + d1 @ d1
    K[2, 1] = d1 @ d2 - s1 @ s2
    K[3, 1] = d1 @ d3 - s1 @ s3
    K[2, 2] = s1 @ s1 + s3 @ s3 + d2 @ d2
    K[3, 2] = d2 @ d3 - s2 @ s3
    K[3, 3] = s1 @ s1 + s2 @ s2 + d3 @ d3

    return np.tril(K) + np.tril(K, k=-1).T # mirror strict lower triangle onto upper
