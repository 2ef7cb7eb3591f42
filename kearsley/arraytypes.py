'''Typehints for the numpy arrays passed around during superposition'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import TypeVar
from numbers import Number


Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type

# Numpy array type annotations
## DEV: used as np.ndarray[Shape[N, 3], float], i.e. N points in 3D space
Shape = tuple # the shape field of a numpy array
N = TypeVar('N', bound=int) # typehint the size of a given dimension (usually the number of points)
