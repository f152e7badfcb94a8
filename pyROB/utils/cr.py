#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Utils - Chrono modules for performance.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np, copy, functools, threading
from mpi4py import MPI

from .mpi    import MPI_COMM, MPI_RANK, MPI_SIZE, mpi_wtime
from .errors import raiseError

# One set of channels per thread of control
_LOCAL = threading.local()


def _channels():
	if not hasattr(_LOCAL,'channels'): _LOCAL.channels = {}
	return _LOCAL.channels


class CRChannel(object):
	'''
	Timing channel of the cr counter
	'''
	def __init__(self, name):
		self._name = name # Name of the channel
		self._tmax = 0.   # Maximum time of the channel
		self._tmin = 0.   # Minimum time of the channel
		self._tsum = 0.   # Total time of the channel
		self._nop  = 0    # Number of operations
		self._tini = 0.   # Initial instant (if == 0 channel is not running)

	def __str__(self):
		return 'name %-30s n %9d tmin %e tmax %e tavg %e tsum %e' % (self.name,self.nop,self.tmin,self.tmax,self.tavg,self.tsum)

	def __add__(self, other):
		new = copy.deepcopy(self)
		new += other
		return new

	def __iadd__(self, other):
		self._tmax  = max(self._tmax,other._tmax)
		self._tmin  = min(self._tmin,other._tmin)
		self._tsum += other._tsum
		self._nop  += other._nop
		return self

	def start(self,tini):
		if self.is_running():
			raiseError('Channel %s was already set!'%self.name)
		self._tini = tini

	def stop(self,tend):
		'''
		Stop the channel and account for the elapsed time
		'''
		time = tend - self._tini
		self._nop += 1
		if time > self._tmax or self._nop == 1: self._tmax = time
		if time < self._tmin or self._nop == 1: self._tmin = time
		self._tsum += time
		self._tini  = 0.
		return time

	def is_running(self):
		return not self._tini == 0

	@property
	def name(self):
		return self._name
	@property
	def nop(self):
		return self._nop
	@property
	def tmin(self):
		return self._tmin
	@property
	def tmax(self):
		return self._tmax
	@property
	def tavg(self):
		return self._tsum/max(self._nop,1)
	@property
	def tsum(self):
		return self._tsum


def _addsuff(ch_name,suff=-1):
	return ch_name if suff <= 0 else '%s%02d' % (ch_name,suff)

def _findch_crash(ch_name):
	'''
	Look for the channel and crash if it does not exist
	'''
	if not ch_name in _channels().keys():
		raiseError('Channel %s does not exist!' % ch_name)
	return _channels()[ch_name]

def _reduce_cr(cr1,cr2,dtype):
	for key in cr2.keys():
		cr1[key] = cr1[key] + cr2[key] if key in cr1.keys() else cr2[key]
	return cr1
cr_reduce = MPI.Op.Create(_reduce_cr, commute=True)

def _print_sorted(channels,header):
	names = list(channels.keys())
	tsum  = np.array([channels[key].tsum for key in names])
	print('\n%s:' % header,flush=True)
	for ii in np.argsort(tsum)[::-1]:
		print(channels[names[ii]],flush=True)
	print('',flush=True)


def cr_reset():
	'''
	Delete all channels and start again
	'''
	_channels().clear()

def cr_info(rank=-1):
	'''
	Print information - order by major sum.
	With rank < 0 the channels of all the processes are
	reduced (collective) and printed by rank 0.
	'''
	if rank >= 0:
		if rank == MPI_RANK: _print_sorted(_channels(),'cr_info')
		return
	channels = MPI_COMM.reduce(_channels(),op=cr_reduce,root=0) if MPI_SIZE > 1 else _channels()
	if MPI_RANK == 0: _print_sorted(channels,'cr_info (mpi size: %d)' % MPI_SIZE)

def cr_start(ch_name,suff=0):
	'''
	Start the chrono of a channel
	'''
	name = _addsuff(ch_name,suff)
	if not name in _channels().keys(): _channels()[name] = CRChannel(name)
	_channels()[name].start( mpi_wtime() )

def cr_stop(ch_name,suff=0):
	'''
	Stop the chrono of a channel
	'''
	end = mpi_wtime()
	return _findch_crash(_addsuff(ch_name,suff)).stop(end)

def cr(ch_name,suff=0):
	'''
	Chrono decorator
	'''
	def decorator(func):
		@functools.wraps(func)
		def wrapper(*args,**kwargs):
			cr_start(ch_name,suff)
			try:
				out = func(*args,**kwargs)
			finally:
				cr_stop(ch_name,suff)
			return out
		return wrapper
	return decorator
