#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Static SVD: full SVD of all the samples of a time interval.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np
from pathlib import Path

from .base          import SVD
from ..vector       import Vector
from ..matrix       import Matrix
from ..vmmath       import svd, diag
from ..utils.mpi    import default_channel
from ..utils.cr     import cr
from ..utils.parall import pprint
from ..utils.errors import raiseError, raiseWarning
from ..utils.config import StaticSVDConfig, load_yaml, build_static_svd_config


class StaticSVD(SVD):
	r'''
	Static SVD algorithm.

	All the samples of the time interval are gathered on every processor
	and a full SVD of the global matrix A(total_dim,num_samples) is
	computed redundantly on all of them. This is not scalable and it is
	intended as the reference for the scalable algorithms.

	The outputs of the factorization A = U x S x VT are:
		- spatial basis:   the rows of U(total_dim,k) owned by this processor (distributed).
		- singular values: S as a diagonal (k,k) matrix (replicated).
		- temporal basis:  VT(k,num_samples) (replicated).

	The factorization is computed lazily by the first accessor called
	after a sample has been taken. Since it gathers the samples of all
	the processors it is a collective operation: take_sample and the
	accessors must be called in the same order by every processor.
	'''
	def __init__(self,dim:int,samples_per_time_interval:int,debug_algorithm:bool=False,channel=None):
		super(StaticSVD,self).__init__(dim,samples_per_time_interval,debug_algorithm,channel)
		self._samples   = [] # Samples of this processor, (dim,) each
		self._dependent = [] # Whether each sample was added without increase
		self._U         = None
		self._S         = None
		self._V         = None
		self._total_dim = -1
		self._row_start = -1
		self._current   = False

	def __str__(self):
		return 'StaticSVD: rank %d of %d, dim %d, samples %d/%d, basis %s' % (self._rank,self._nprocs,self._dim,
			self.num_samples,self._spti,'current' if self._current else 'stale')

	@cr('StaticSVD.take_sample')
	def take_sample(self,u_in,time:float,add_without_increase:bool=False) -> bool:
		r'''
		Collect a new sample of the system at the given simulation time.

		The values of the sample are copied, so the caller may reuse the
		buffer afterwards.

		Args:
			u_in (np.ndarray or Vector): the part of the sample on this processor, of size dim.
			time (float): simulation time of the sample, must be >= 0.
			add_without_increase (bool, optional): the sample is linearly dependent on the
				previous ones, it enters the factorization without increasing the number
				of basis vectors (default: ``False``).

		Returns:
			bool: True if the sample has been taken, False if the time interval is full.
		'''
		if u_in is None: raiseError('Sample is None!')
		if not time >= 0.: raiseError('Sample time must be non negative (got %f)!' % time)
		u = u_in.to_numpy() if isinstance(u_in,Vector) else np.array(u_in,dtype=np.double).ravel()
		if u.shape[0] != self._dim:
			raiseError('Sample has %d values, expected %d!' % (u.shape[0],self._dim))
		if self.num_samples >= self._spti:
			raiseWarning('Time interval is full (%d samples), sample at time %f rejected!' % (self._spti,time))
			return False
		# Without previous samples there is nothing the sample can depend on
		if add_without_increase and self.num_independent_samples == 0:
			if self._debug: pprint(-1,'StaticSVD: no independent samples, sample at time %f taken as independent' % time,flush=True)
			add_without_increase = False
		if self.num_basis_time_intervals == 0: self._time_interval_start_times.append(time)
		self._samples.append(u)
		self._dependent.append(bool(add_without_increase))
		self._current = False
		if self._debug: pprint(-1,'StaticSVD: sample %d taken at time %f, norm %e' % (self.num_samples,time,np.linalg.norm(u)),flush=True)
		return True

	@cr('StaticSVD.compute_svd')
	def compute_svd(self):
		r'''
		Gather the samples of all the processors and compute the SVD.

		.. warning::
		This is a collective operation, all the processors must call it
		(directly or through an accessor) at the same point.

		The local blocks (dim,num_samples) are stacked in rank order so
		that rank 0 owns the first rows of the global matrix.
		'''
		nsamples = self.num_samples
		if nsamples == 0: raiseError('StaticSVD has no samples to compute the SVD!')
		# Partition sizes and number of basis vectors of all the processors
		sizes = self._channel.allgather(np.array([[self._dim,nsamples,self.num_independent_samples]],np.int64))
		if np.any(sizes[:,1] != nsamples):
			raiseError('Processors hold a different number of samples: %s!' % str(sizes[:,1].tolist()))
		if np.any(sizes[:,2] != sizes[0,2]):
			raiseError('Processors hold a different number of independent samples: %s!' % str(sizes[:,2].tolist()))
		total_dim       = int(np.sum(sizes[:,0]))
		self._row_start = int(np.sum(sizes[:self._rank,0]))
		# Globalize the sample matrix
		Ai = np.ascontiguousarray(np.column_stack(self._samples))
		A  = self._channel.allgather(Ai)
		if self._debug: pprint(-1,'StaticSVD: gathered A of shape',A.shape,'rows %d:%d are local'%(self._row_start,self._row_start+self._dim),flush=True)
		self._svd(A,total_dim)

	def _svd(self,A:np.ndarray,total_dim:int):
		r'''
		Compute the SVD of the globalized matrix and keep the part
		of the left singular vectors owned by this processor.

		The number of basis vectors is min(total_dim,num_samples) limited
		to the number of samples not added as linearly dependent.

		Args:
			A (np.ndarray): globalized sample matrix (total_dim,num_samples).
			total_dim (int): total dimension of the system.
		'''
		if A is None: raiseError('Globalized matrix is None!')
		if total_dim <= 0: raiseError('Total dimension must be positive (got %d)!' % total_dim)
		if A.shape[0] != total_dim:
			raiseError('Globalized matrix has %d rows, expected %d!' % (A.shape[0],total_dim))
		nsamples = A.shape[1]
		U, S, VT = svd(A)
		k  = min(total_dim,self.num_independent_samples)
		r0 = self._row_start
		# The previous factorization is replaced as a whole
		self._U = Matrix.from_data(U[r0:r0+self._dim,:k],self._dim,k,True,channel=self._channel).freeze()
		self._S = Matrix.from_data(diag(S[:k]),k,k,False,channel=self._channel).freeze()
		self._V = Matrix.from_data(VT[:k,:],k,nsamples,False,channel=self._channel).freeze()
		self._total_dim = total_dim
		self._current   = True
		if self._debug:
			pprint(0,'StaticSVD: %d basis vectors out of %d samples, total dim %d' % (k,nsamples,total_dim),flush=True)
			pprint(0,'StaticSVD: singular values',S[:k],flush=True)

	def get_spatial_basis(self) -> Matrix:
		'''
		Distributed (dim,k) matrix with the basis vectors of the
		current time interval. Collective when the basis is stale.
		The matrix is read only and owned by this object.
		'''
		if not self._current: self.compute_svd()
		return self._U

	def get_temporal_basis(self) -> Matrix:
		'''
		Undistributed (k,num_samples) matrix with the temporal basis
		vectors of the current time interval. Collective when the
		basis is stale. The matrix is read only and owned by this object.
		'''
		if not self._current: self.compute_svd()
		return self._V

	def get_singular_values(self) -> Matrix:
		'''
		Undistributed diagonal (k,k) matrix with the singular values
		in descending order. Collective when the basis is stale. The
		matrix is read only and owned by this object.
		'''
		if not self._current: self.compute_svd()
		return self._S

	@classmethod
	def from_config(cls,config,channel=None):
		'''
		Create a StaticSVD from a StaticSVDConfig, a dictionary or the
		path to a YAML file. The message tag of the configuration is
		only used when no channel is given.
		'''
		if isinstance(config,(str,Path)): config = load_yaml(config)
		if isinstance(config,dict):       config = build_static_svd_config(config)
		if not isinstance(config,StaticSVDConfig):
			raiseError('Invalid StaticSVD configuration of type %s!' % type(config).__name__)
		if channel is None: channel = default_channel(config.comm_tag)
		return cls(config.dim,config.samples_per_time_interval,debug_algorithm=config.debug_algorithm,channel=channel)

	@property
	def is_basis_current(self):
		return self._current
	@property
	def num_samples(self):
		return len(self._samples)
	@property
	def num_independent_samples(self):
		return len(self._dependent) - sum(self._dependent)
	@property
	def total_dim(self):
		return self._total_dim
