'''Optimal rigid superposition of one point set onto another, i.e. minimizing the RMSD between them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any

import numpy as np
from scipy.spatial.transform import Rotation, RigidTransform

from .arraytypes import Shape, N
from .bestfit import bestfit
from .measure import centroid
from .quaternions import rotation_from_quaternion


def RMSD(u : Any, v : Any) -> float:
    '''
    Calculate the root-mean-square deviation of two sets of points after applying
    the rotation and translation which minimizes it

    Raises an InvalidArgumentError if the point sets do not contain the same
    number of points or if either does not have exactly three columns

    Example
    -------
    >>> u = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1], [1, 1, 0], [1, 0, 1], [0, 1, 1], [1, 1, 1]])
    >>> v = np.array([[1, 2, 3], [1, 1, 3], [2, 2, 3], [1, 2, 4], [2, 1, 3], [1, 1, 4], [2, 2, 4], [2, 1, 4]])
    >>> RMSD(u, v) < 1E-6
    True
    '''
    rmsd, _ = bestfit(u, v)
    return rmsd

def rot_trans(u : Any, v : Any) -> tuple[
        np.ndarray[Shape[3, 3], float],
        np.ndarray[Shape[3], float],
    ]:
    '''
    Calculate the rotation and translation which minimize the RMSD between two sets of points

    Parameters
    ----------
    u : Array[[N, 3], float]
        The reference point set
    v : Array[[N, 3], float]
        The mobile point set, whose i-th row corresponds to the i-th row of u

    Returns
    -------
    rotation : Array[[3, 3], float]
        Proper rotation matrix
    translation : Array[[3,], float]
        Translation vector, given by centroid(v) - rotation^-1 @ centroid(u)
        Subtracting it from v THEN rotating aligns v with u (see apply_transform())

    Raises
    ------
    ColumnCountError
        If either point set does not have exactly 3 columns
    RowCountMismatchError
        If the point sets have differing numbers of rows
    '''
    _, quaternion = bestfit(u, v) # validates both point sets before anything else is computed
    u = np.asarray(u, dtype=float)
    v = np.asarray(v, dtype=float)

    rotation = rotation_from_quaternion(quaternion)
    translation = centroid(v) - rotation.T @ centroid(u) # NOTE: inverse (i.e. transpose of) rotation, NOT rotation @ centroid(u)

    return rotation, translation

def apply_transform(u : Any, v : Any) -> np.ndarray[Shape[N, 3], float]:
    '''
    Calculate the rotation and translation which minimize the RMSD between
    two sets of points and apply that transformation to a copy of "v"

    Returns an Nx3 array of the transformed points in v, as optimally aligned with u
    The array supplied to "v" is unchanged

    Raises an InvalidArgumentError if the point sets do not contain the same
    number of points or if either does not have exactly three columns
    '''
    rotation, translation = rot_trans(u, v)
    v = np.asarray(v, dtype=float)

    return (v - translation) @ rotation.T # equivalent to rotation @ (row - translation) for each row

def rigid_transformation(u : Any, v : Any) -> RigidTransform:
    '''
    The transformation which optimally aligns "v" with "u", as a scipy RigidTransform
    Applying the returned transformation to v reproduces apply_transform(u, v)

    Raises an InvalidArgumentError if the point sets do not contain the same
    number of points or if either does not have exactly three columns
    '''
    rotation, translation = rot_trans(u, v)
    return (
        RigidTransform.from_rotation(Rotation.from_matrix(rotation))
        * RigidTransform.from_translation(-translation)
    )
