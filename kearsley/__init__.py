'''Optimal rigid superposition of corresponding 3D point sets via the quaternion-based Kearsley method'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .superposition import RMSD, rot_trans, apply_transform, rigid_transformation
from .bestfit import bestfit, BestFit
from .validation import InvalidArgumentError, ColumnCountError, RowCountMismatchError
