'''Eigendecomposition of real symmetric matrices, with eigenpairs in ascending order'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import numpy as np

from .arraytypes import Shape, N


def symmetric_eigendecomposition(matrix : np.ndarray[Shape[N, N], float]) -> tuple[
        np.ndarray[Shape[N], float],
        np.ndarray[Shape[N, N], float],
    ]:
    '''
    Compute the eigenvalues and eigenvectors of a real symmetric matrix

    Parameters
    ----------
    matrix : Array[[N, N], float]
        A real symmetric matrix; only its lower triangle is read

    Returns
    -------
    eigenvalues : Array[[N,], float]
        The eigenvalues of the matrix, in ascending order
    eigenvectors : Array[[N, N], float]
        A matrix whose i-th column is the unit eigenvector belonging to the i-th eigenvalue
    '''
    eivals, eivecs = np.linalg.eigh(matrix, UPLO='L')
    order = np.argsort(eivals) # minimal eigenpair is read off from index 0 downstream
    
    return eivals[order], eivecs[:, order]

def minimal_eigenpair(matrix : np.ndarray[Shape[N, N], float]) -> tuple[float, np.ndarray[Shape[N], float]]:
    '''The smallest eigenvalue of a real symmetric matrix and its corresponding unit eigenvector'''
    eivals, eivecs = symmetric_eigendecomposition(matrix)
    return float(eivals[0]), eivecs[:, 0]
