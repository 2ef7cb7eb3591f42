'''Conversion of the unit quaternions produced by the Kearsley method into rotations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np
from scipy.spatial.transform import Rotation

from .arraytypes import Shape


def rotation_from_quaternion(quaternion : np.ndarray[Shape[4], float]) -> np.ndarray[Shape[3, 3], float]:
    '''
    Compute the 3x3 rotation matrix described by a scalar-first unit quaternion (q1, q2, q3, q4)

    Every entry is bilinear in the quaternion components, so q and -q yield the same matrix
    The result is orthogonal with determinant +1 whenever the quaternion has unit norm
    '''
    q1, q2, q3, q4 = quaternion

    rotation = np.zeros((3, 3), dtype=float)
    rotation[0, 0] = q1**2 + q2**2 - q3**2 - q4**2
    rotation[1, 0] = 2*(q2*q3 - q1*q4)
    rotation[2, 0] = 2*(q2*q4 + q1*q3)
    rotation[0, 1] = 2*(q2*q3 + q1*q4)
    rotation[1, 1] = q1**2 + q3**2 - q2**2 - q4**2
    rotation[2, 1] = 2*(q3*q4 - q1*q2)
    rotation[0, 2] = 2*(q2*q4 - q1*q3)
    rotation[1, 2] = 2*(q3*q4 + q1*q2)
    rotation[2, 2] = q1**2 + q4**2 - q2**2 - q3**2

    return rotation

def as_scipy_rotation(quaternion : np.ndarray[Shape[4], float]) -> Rotation:
    '''The rotation described by a scalar-first unit quaternion, as a scipy Rotation
    whose matrix representation matches rotation_from_quaternion()'''
    # DEV: NOT Rotation.from_quat(), which expects scalar-LAST quaternions and yields the transpose of the matrix here
    return Rotation.from_matrix(rotation_from_quaternion(quaternion))
