#!/usr/bin/env python
#
# pyROB, utils.
#
# Parallel MPI routines and communication channel.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import mpi4py, numpy as np
mpi4py.rc.recv_mprobe = False
from mpi4py import MPI

MPI_COMM = MPI.COMM_WORLD
MPI_RANK = MPI_COMM.Get_rank()
MPI_SIZE = MPI_COMM.Get_size()

# Default message tag for the sample exchange
COMM_TAG = 1000


# Expose functions from MPI library
mpi_wtime = MPI.Wtime


def mpi_op(op):
	'''
	Convert an operation name to an MPI operation
	'''
	if not isinstance(op,str): return op
	if 'sum' in op: return MPI.SUM
	if 'max' in op: return MPI.MAX
	if 'min' in op: return MPI.MIN
	raise ValueError('Unknown reduction operation <%s>!' % op)


class MPIChannel(object):
	'''
	Communication channel among the cooperating processes.

	Wraps an mpi4py communicator together with the message tag used
	by the point-to-point exchanges of this channel. Every method
	except rank and size is collective: all the processes of the
	communicator must call it in the same order or the program hangs.
	With a single process all the collectives are local no-ops.
	'''
	def __init__(self,comm=MPI_COMM,tag=COMM_TAG):
		'''
		Class constructor
		'''
		self._comm = comm
		self._tag  = tag
		self._rank = comm.Get_rank()
		self._size = comm.Get_size()

	def __str__(self):
		return 'MPIChannel: rank %d of %d, tag %d' % (self._rank,self._size,self._tag)

	def allgather(self,sendbuff):
		'''
		Gather an array from all the processors on all the processors.

		The blocks are exchanged pairwise with sendrecv using the tag of
		the channel and concatenated along the first axis in rank order,
		so that rank 0 owns the first rows of the output.
		'''
		sendbuff = np.atleast_1d(sendbuff)
		if self._size == 1: return sendbuff.copy()
		blocks = [None]*self._size
		blocks[self._rank] = sendbuff
		for step in range(1,self._size):
			dest   = (self._rank + step) % self._size
			source = (self._rank - step) % self._size
			blocks[source] = self._comm.sendrecv(sendbuff,dest=dest,sendtag=self._tag,source=source,recvtag=self._tag)
		return np.concatenate(blocks,axis=0)

	def allreduce(self,sendbuff,op='sum'):
		'''
		Reduce an array from all the processors, result
		available on all of them.
		'''
		if self._size == 1: return sendbuff
		return self._comm.allreduce(sendbuff,op=mpi_op(op))

	def barrier(self):
		'''
		Implements the barrier
		'''
		if self._size > 1: self._comm.Barrier()

	@property
	def comm(self):
		return self._comm
	@property
	def tag(self):
		return self._tag
	@property
	def rank(self):
		return self._rank
	@property
	def size(self):
		return self._size


def default_channel(tag=COMM_TAG):
	'''
	Channel over MPI_COMM_WORLD
	'''
	return MPIChannel(MPI_COMM,tag)
