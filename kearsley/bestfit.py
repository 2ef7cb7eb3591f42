'''Determination of the minimal RMSD and optimal rotation between two point sets via the Kearsley method'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, NamedTuple

import logging
LOGGER = logging.getLogger(__name__)

import numpy as np

from .arraytypes import Shape
from .measure import centered
from .validation import validate_point_sets
from .matrix import kearsley_matrix
from .eigen import minimal_eigenpair


NEGATIVE_EIGENVALUE_TOLERANCE : float = 1E-8 # negative minimal eigenvalues smaller in magnitude than this are treated as round-off


class BestFit(NamedTuple):
    '''The outcome of optimally superimposing one point set onto another'''
    rmsd : float
    quaternion : np.ndarray[Shape[4], float]


def bestfit(u : Any, v : Any) -> BestFit:
    '''
    Calculate the minimal RMSD between two point sets and the quaternion
    of the rotation which attains it, after removing the relative translation

    Parameters
    ----------
    u : Array[[N, 3], float]
        The reference point set
    v : Array[[N, 3], float]
        The mobile point set, whose i-th row corresponds to the i-th row of u

    Returns
    -------
    rmsd : float
        The root-mean-square deviation between u and v after optimal superposition
    quaternion : Array[[4,], float]
        Scalar-first unit quaternion of the optimal rotation (sign is arbitrary)

    Raises
    ------
    ColumnCountError
        If either point set does not have exactly 3 columns
    RowCountMismatchError
        If the point sets have differing numbers of rows
    '''
    u, v = validate_point_sets(u, v)
    n_points = u.shape[0]

    K = kearsley_matrix(centered(u), centered(v))
    if not np.all(np.isfinite(K)): # eigensolver cannot converge on non-finite entries, so let NaNs flow downstream instead
        LOGGER.debug(f'Kearsley matrix for {n_points} points has non-finite entries; returning NaN RMSD and quaternion')
        return BestFit(rmsd=float('nan'), quaternion=np.full(4, np.nan))

    eigenvalue, quaternion = minimal_eigenpair(K)
    if eigenvalue < -NEGATIVE_EIGENVALUE_TOLERANCE:
        LOGGER.warning(f'Minimal eigenvalue of Kearsley matrix is negative ({eigenvalue}) beyond round-off; RMSD may be inaccurate')

    rmsd = float(np.sqrt(np.abs(eigenvalue) / n_points)) # abs() guards against tiny negative noise when the fit is exact
    LOGGER.debug(f'Superimposed {n_points} points: minimal eigenvalue={eigenvalue}, RMSD={rmsd}')

    return BestFit(rmsd=rmsd, quaternion=quaternion)
