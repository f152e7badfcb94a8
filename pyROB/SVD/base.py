#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Common interface of the SVD algorithms.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

from ..utils.mpi    import default_channel
from ..utils.errors import raiseError


class SVD(object):
	'''
	Interface of the algorithms that compute a basis from the samples
	of a system whose dimension is distributed among the processors.

	The samples are collected in time intervals of at most
	samples_per_time_interval samples. Only a single time interval
	is handled.
	'''
	def __init__(self,dim:int,samples_per_time_interval:int,debug_algorithm:bool=False,channel=None):
		'''
		Class constructor.

		Args:
			dim (int): dimension of the system on this processor.
			samples_per_time_interval (int): maximum number of samples of a time interval.
			debug_algorithm (bool, optional): print the results of the algorithm (default: ``False``).
			channel (MPIChannel, optional): communication channel (default: MPI_COMM_WORLD).
		'''
		if dim <= 0:
			raiseError('SVD dimension must be positive (got %d)!' % dim)
		if samples_per_time_interval <= 0:
			raiseError('SVD samples per time interval must be positive (got %d)!' % samples_per_time_interval)
		self._dim     = int(dim)
		self._spti    = int(samples_per_time_interval)
		self._debug   = bool(debug_algorithm)
		self._channel = channel if channel is not None else default_channel()
		# Rank and size are fixed for the lifetime of the object
		self._rank    = self._channel.rank
		self._nprocs  = self._channel.size
		self._time_interval_start_times = []

	def __copy__(self):
		raiseError('%s objects cannot be copied!' % self.__class__.__name__)

	def __deepcopy__(self,memo):
		raiseError('%s objects cannot be copied!' % self.__class__.__name__)

	def take_sample(self,u_in,time:float,add_without_increase:bool=False) -> bool:
		raise NotImplementedError

	def get_spatial_basis(self):
		raise NotImplementedError

	def get_temporal_basis(self):
		raise NotImplementedError

	def get_singular_values(self):
		raise NotImplementedError

	def basis_interval_start_time(self,which_interval:int) -> float:
		'''
		Simulation time at which the given time interval starts
		'''
		if not 0 <= which_interval < self.num_basis_time_intervals:
			raiseError('Time interval %d out of range [0,%d)!' % (which_interval,self.num_basis_time_intervals))
		return self._time_interval_start_times[which_interval]

	@property
	def dim(self):
		return self._dim
	@property
	def samples_per_time_interval(self):
		return self._spti
	@property
	def debug_algorithm(self):
		return self._debug
	@property
	def channel(self):
		return self._channel
	@property
	def rank(self):
		return self._rank
	@property
	def num_procs(self):
		return self._nprocs
	@property
	def num_basis_time_intervals(self):
		return len(self._time_interval_start_times)
