#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Math operations module - vector/matrix math.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np

from ..utils import cr


## Python functions
@cr('math.transpose')
def transpose(A:np.ndarray) -> np.ndarray:
	r'''
	Transposed of matrix A

	Args:
		A (np.ndarray): Matrix to be transposed

	Results
		np.ndarray: Transposed matrix (C ordered)
	'''
	return np.ascontiguousarray(np.transpose(A))

@cr('math.matmul')
def matmul(A:np.ndarray,B:np.ndarray) -> np.ndarray:
	r'''
	Matrix multiplication
	C = A x B

	Args:
		A (np.ndarray): Matrix A (M,Q)
		B (np.ndarray): Matrix B (Q,N)

	Result:
		np.ndarray: Resulting matrix C (M,N)
	'''
	return np.matmul(A,B)

@cr('math.matmulp')
def matmulp(A:np.ndarray,B:np.ndarray,channel) -> np.ndarray:
	r'''
	Matrix multiplication in parallel
	C = A x B

	.. warning::
	The contraction index of A and B is distributed along the processors
	and C is the same for all of them. This is a collective operation
	over the channel.

	Args:
		A (np.ndarray): Matrix A (M,Qi)
		B (np.ndarray): Matrix B (Qi,N)
		channel (MPIChannel): communication channel

	Result:
		np.ndarray: Resulting matrix C (M,N)
	'''
	aux = np.matmul(A,B)
	return channel.allreduce(aux,op='sum')

@cr('math.diag')
def diag(A:np.ndarray) -> np.ndarray:
	r'''
	If A is a matrix it returns its diagonal, if its a vector it returns
	a diagonal matrix with A in its diagonal

	Args:
		A (np.ndarray): Matrix A (M,N) or vector (M,)

	Result:
		np.ndarray: Diagonal of A (M,) or diagonal matrix (M,M)
	'''
	return np.diag(A)

def dot(u:np.ndarray,v:np.ndarray,channel=None) -> float:
	r'''
	Dot product of two vectors. When a channel is given the vectors
	are distributed and the local sums are reduced among the processors.
	'''
	aux = float(np.dot(u,v))
	return aux if channel is None else channel.allreduce(aux,op='sum')
