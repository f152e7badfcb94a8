#!/usr/bin/env python
#
# pyROB, vector.
#
# Vector class, possibly distributed among the processors.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np

from .vmmath       import dot
from .utils.mpi    import default_channel
from .utils.errors import raiseError


class Vector(object):
	'''
	A dense vector of doubles. When distributed, each processor
	owns a contiguous chunk of the global vector and dim is the
	size of that chunk.
	'''
	def __init__(self,dim:int,distributed:bool,channel=None):
		'''
		Class constructor, the vector is zero initialized
		'''
		if dim <= 0: raiseError('Vector dimension must be positive (got %d)!' % dim)
		self._dim     = int(dim)
		self._distrib = bool(distributed)
		self._channel = channel if channel is not None else default_channel()
		self._vec     = np.zeros((self._dim,),np.double)

	def __str__(self):
		return 'Vector (%s) dim %d: %s' % ('distributed' if self._distrib else 'undistributed',self._dim,str(self._vec))

	def __len__(self):
		return self._dim

	def _check_index(self,i):
		if not isinstance(i,(int,np.integer)):
			raiseError('Vector index must be an integer (got %r)!' % (i,))
		if not 0 <= i < self._dim:
			raiseError('Vector index %d out of range [0,%d)!' % (i,self._dim))

	def __getitem__(self,i):
		self._check_index(i)
		return self._vec[i]

	def __setitem__(self,i,value):
		self._check_index(i)
		self._vec[i] = value

	def __copy__(self):
		return self.copy()

	def __deepcopy__(self,memo):
		return self.copy()

	def item(self,i:int) -> float:
		'''
		Element i of the vector on this processor
		'''
		return self[i]

	def copy(self):
		'''
		Deep copy of the vector
		'''
		return Vector.from_data(self._vec,self._dim,self._distrib,channel=self._channel)

	def to_numpy(self) -> np.ndarray:
		return self._vec.copy()

	def _check_compatible(self,other):
		if other is None: raiseError('Vector operand is None!')
		if self._dim != other.dim or self._distrib != other.distributed:
			raiseError('Incompatible vectors: dim %d/%d distributed %s/%s!' % (self._dim,other.dim,self._distrib,other.distributed))

	def inner_product(self,other) -> float:
		'''
		Dot product with other, collective when distributed
		'''
		self._check_compatible(other)
		return dot(self._vec,other._vec,channel=self._channel if self._distrib else None)

	def norm(self) -> float:
		'''
		L2 norm, collective when distributed
		'''
		return np.sqrt(self.inner_product(self))

	def normalize(self) -> float:
		'''
		Normalize the vector in place and return its former norm
		'''
		nrm = self.norm()
		if nrm == 0.: raiseError('Cannot normalize a zero vector!')
		self._vec /= nrm
		return nrm

	def plus(self,other):
		'''
		Returns this + other
		'''
		self._check_compatible(other)
		return Vector.from_data(self._vec + other._vec,self._dim,self._distrib,channel=self._channel)

	def minus(self,other):
		'''
		Returns this - other
		'''
		self._check_compatible(other)
		return Vector.from_data(self._vec - other._vec,self._dim,self._distrib,channel=self._channel)

	def mult(self,factor:float):
		'''
		Returns factor*this
		'''
		return Vector.from_data(factor*self._vec,self._dim,self._distrib,channel=self._channel)

	@classmethod
	def from_data(cls,data,dim:int,distributed:bool,channel=None):
		'''
		Create a vector from a copy of data, which holds dim values
		'''
		if data is None: raiseError('Vector data is None!')
		data = np.asarray(data,dtype=np.double).ravel()
		if data.shape[0] != dim:
			raiseError('Vector data has %d values, expected %d!' % (data.shape[0],dim))
		out = cls(dim,distributed,channel=channel)
		out._vec[:] = data
		return out

	@property
	def dim(self):
		return self._dim
	@property
	def distributed(self):
		return self._distrib
	@property
	def channel(self):
		return self._channel
