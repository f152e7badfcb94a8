#!/usr/bin/env python
#
# pyROB, utils.
#
# Parallel routines
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import numpy as np

from .mpi import MPI_RANK, MPI_SIZE


def worksplit(istart,iend,whoAmI,nWorkers=MPI_SIZE):
	'''
	Divide the range [istart,iend) in contiguous chunks
	between the processors. The first processors get one
	extra item when the range does not split evenly.
	'''
	irange = iend - istart
	nitems = int(np.floor(irange/nWorkers))
	remainder = irange - nitems*nWorkers
	istart_l  = istart + whoAmI*nitems + min(whoAmI,remainder)
	iend_l    = istart_l + nitems + (1 if whoAmI < remainder else 0)
	return istart_l, iend_l


def pprint(rank,*args,**kwargs):
	'''
	Print alternative for parallel codes. It works as
	python's print with the rank variable, which can
	be negative for everyone to print or equal to the
	rank that should print.
	'''
	if MPI_SIZE == 1:
		print(*args,**kwargs)
	elif rank < 0:
		print('Rank %d:'%MPI_RANK,*args,**kwargs)
	elif rank == MPI_RANK:
		print('Rank %d:'%rank,*args,**kwargs)
