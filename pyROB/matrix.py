#!/usr/bin/env python
#
# pyROB, matrix.
#
# Matrix class, possibly distributed by rows among the processors.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np

from .vector       import Vector
from .vmmath       import matmul, matmulp, transpose
from .utils.mpi    import default_channel
from .utils.cr     import cr
from .utils.errors import raiseError


class Matrix(object):
	'''
	A dense matrix of doubles stored in row major order.

	When distributed, the rows of the matrix are spread among the
	processors of the channel: each processor owns a contiguous block
	of rows and num_rows is the size of that block. The number of
	columns is global and must be the same on all processors. Each
	processor does not need to hold the same number of rows.

	Only the products needed to build and use a reduced basis
	are supported:

		- mult(Matrix):           A x B, B undistributed, result distributed as A.
		- mult(Vector):           A x v, A distributed and v undistributed, result distributed.
		- transpose_mult(Matrix): A^T x B, A and B equally distributed, result undistributed.
		- transpose_mult(Vector): A^T x v, A and v distributed, result undistributed.

	A transposed product of distributed operands contracts over the
	distributed index and thus is collective on the channel.
	'''
	def __init__(self,num_rows:int,num_cols:int,distributed:bool,channel=None):
		'''
		Class constructor, the matrix is zero initialized.

		Args:
			num_rows (int): number of rows on this processor when distributed, total number of rows otherwise.
			num_cols (int): total number of columns.
			distributed (bool): whether the rows are spread over the processors.
			channel (MPIChannel, optional): communication channel (default: MPI_COMM_WORLD).
		'''
		if num_rows <= 0: raiseError('Matrix number of rows must be positive (got %d)!' % num_rows)
		if num_cols <= 0: raiseError('Matrix number of columns must be positive (got %d)!' % num_cols)
		self._nrows    = int(num_rows)
		self._ncols    = int(num_cols)
		self._distrib  = bool(distributed)
		self._channel  = channel if channel is not None else default_channel()
		self._readonly = False
		self._mat      = np.zeros((self._nrows,self._ncols),np.double)

	def __str__(self):
		out  = 'Matrix (%s) %d x %d%s:\n' % ('distributed' if self._distrib else 'undistributed',self._nrows,self._ncols,', read only' if self._readonly else '')
		out += str(self._mat)
		return out

	def _check_index(self,row,col):
		if not isinstance(row,(int,np.integer)) or not isinstance(col,(int,np.integer)):
			raiseError('Matrix indices must be integers (got %r,%r)!' % (row,col))
		if not 0 <= row < self._nrows:
			raiseError('Matrix row %d out of range [0,%d)!' % (row,self._nrows))
		if not 0 <= col < self._ncols:
			raiseError('Matrix column %d out of range [0,%d)!' % (col,self._ncols))

	def __getitem__(self,idx):
		row, col = idx
		self._check_index(row,col)
		return self._mat[row,col]

	def __setitem__(self,idx,value):
		row, col = idx
		self._check_index(row,col)
		if self._readonly: raiseError('Cannot modify a read only matrix!')
		self._mat[row,col] = value

	def __copy__(self):
		return self.copy()

	def __deepcopy__(self,memo):
		return self.copy()

	def item(self,row:int,col:int) -> float:
		'''
		Value at (row,col) of the rows on this processor
		'''
		return self[row,col]

	def copy(self):
		'''
		Deep and writable copy of the matrix
		'''
		return Matrix.from_data(self._mat,self._nrows,self._ncols,self._distrib,channel=self._channel)

	def to_numpy(self) -> np.ndarray:
		'''
		Copy of the rows on this processor as a (num_rows,num_columns) array
		'''
		return self._mat.copy()

	def freeze(self):
		'''
		Mark the matrix as read only
		'''
		self._readonly = True
		self._mat.flags.writeable = False
		return self

	@cr('Matrix.mult')
	def mult(self,other):
		'''
		Multiply this matrix with an undistributed Matrix or Vector.

		Matrix x Matrix returns a Matrix distributed as this one; a
		distributed Matrix x Vector returns a distributed Vector.
		No communications are involved.
		'''
		if other is None: raiseError('Matrix.mult operand is None!')
		if isinstance(other,Vector):
			if not self._distrib or other.distributed:
				raiseError('Matrix.mult(Vector) needs a distributed matrix and an undistributed vector!')
			if self._ncols != other.dim:
				raiseError('Matrix.mult(Vector) size mismatch: %d columns vs dim %d!' % (self._ncols,other.dim))
			return Vector.from_data(matmul(self._mat,other.to_numpy()),self._nrows,True,channel=self._channel)
		if other.distributed:
			raiseError('Matrix.mult(Matrix) needs an undistributed operand!')
		if self._ncols != other.num_rows:
			raiseError('Matrix.mult(Matrix) size mismatch: %d columns vs %d rows!' % (self._ncols,other.num_rows))
		return Matrix.from_data(matmul(self._mat,other._mat),self._nrows,other.num_columns,self._distrib,channel=self._channel)

	@cr('Matrix.transpose_mult')
	def transpose_mult(self,other):
		'''
		Multiply the transpose of this matrix with a Matrix or Vector.

		Matrix^T x Matrix needs both operands equally distributed and
		Matrix^T x Vector needs both distributed. The result is always
		undistributed and, when the operands are distributed, the
		product is reduced among all the processors (collective).
		'''
		if other is None: raiseError('Matrix.transpose_mult operand is None!')
		if isinstance(other,Vector):
			if not self._distrib or not other.distributed:
				raiseError('Matrix.transpose_mult(Vector) needs a distributed matrix and a distributed vector!')
			if self._nrows != other.dim:
				raiseError('Matrix.transpose_mult(Vector) size mismatch: %d rows vs dim %d!' % (self._nrows,other.dim))
			out = matmulp(self._mat.T,other.to_numpy(),self._channel)
			return Vector.from_data(out,self._ncols,False,channel=self._channel)
		if self._distrib != other.distributed:
			raiseError('Matrix.transpose_mult(Matrix) needs both operands equally distributed!')
		if self._nrows != other.num_rows:
			raiseError('Matrix.transpose_mult(Matrix) size mismatch: %d rows vs %d rows!' % (self._nrows,other.num_rows))
		out = matmulp(self._mat.T,other._mat,self._channel) if self._distrib else matmul(self._mat.T,other._mat)
		return Matrix.from_data(out,self._ncols,other.num_columns,False,channel=self._channel)

	def transpose(self):
		'''
		Transpose of an undistributed matrix
		'''
		if self._distrib: raiseError('Cannot transpose a distributed matrix!')
		return Matrix.from_data(transpose(self._mat),self._ncols,self._nrows,False,channel=self._channel)

	def get_first_n_columns(self,n:int):
		'''
		Matrix with the first n columns of this one, equally distributed
		'''
		if not 0 < n <= self._ncols:
			raiseError('Cannot take %d columns out of %d!' % (n,self._ncols))
		return Matrix.from_data(self._mat[:,:n],self._nrows,n,self._distrib,channel=self._channel)

	@classmethod
	def from_data(cls,data,num_rows:int,num_cols:int,distributed:bool,channel=None):
		'''
		Create a matrix from a copy of data, which holds
		num_rows*num_cols values in row major order.
		'''
		if data is None: raiseError('Matrix data is None!')
		data = np.asarray(data,dtype=np.double)
		if data.size != num_rows*num_cols:
			raiseError('Matrix data has %d values, expected %d x %d!' % (data.size,num_rows,num_cols))
		out = cls(num_rows,num_cols,distributed,channel=channel)
		out._mat[:,:] = data.reshape((num_rows,num_cols))
		return out

	@property
	def distributed(self):
		return self._distrib
	@property
	def num_rows(self):
		return self._nrows
	@property
	def num_columns(self):
		return self._ncols
	@property
	def channel(self):
		return self._channel
	@property
	def readonly(self):
		return self._readonly
