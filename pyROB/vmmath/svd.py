#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Math operations module - SVD.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np

from ..utils import cr, raiseError, SolverError


@cr('math.svd')
def svd(A:np.ndarray):
	r'''
	Single value decomposition (SVD) using Lapack (thin version).
		U(m,k)   are the left singular vectors.
		S(k)     are the singular values (descending).
		VT(k,n)  are the right singular vectors (transposed).
	with k = min(m,n).

	A failure to converge is raised as a SolverError, it is never
	returned as an empty or zero decomposition.

	Args:
		A (np.ndarray): Matrix A (m,n), replicated

	Result:
		np.ndarray: U (m,k)
		np.ndarray: S (k,)
		np.ndarray: VT (k,n)
	'''
	if A.ndim != 2 or A.size == 0:
		raiseError('SVD of an empty or non bidimensional array of shape %s!' % str(A.shape))
	try:
		U, S, VT = np.linalg.svd(A,full_matrices=False)
	except np.linalg.LinAlgError as e:
		raise SolverError('SVD did not converge on a (%d,%d) matrix: %s' % (A.shape[0],A.shape[1],e)) from e
	if not np.all(np.isfinite(S)):
		raise SolverError('SVD returned non finite singular values on a (%d,%d) matrix' % A.shape)
	return U, S, VT
