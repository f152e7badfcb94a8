#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Utils - Error handling routines.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

import sys

from .mpi import MPI_RANK, MPI_SIZE, MPI_COMM


class pyROBError(Exception):
	'''
	Base class for the errors of pyROB
	'''
	pass

class ContractError(pyROBError):
	'''
	A precondition of an operation has been violated,
	i.e., a programming error on the caller side.
	'''
	pass

class SolverError(pyROBError):
	'''
	The dense factorization did not converge.
	'''
	pass


def raiseError(errmsg,error=ContractError):
	'''
	Raise a controlled error.

	In parallel runs the execution is aborted on all processes,
	since the remaining ranks would hang on the next collective.
	'''
	print('%d - %s' % (MPI_RANK,errmsg),file=sys.stderr,flush=True)
	if MPI_SIZE > 1: MPI_COMM.Abort(1)
	raise error(errmsg)


def raiseWarning(warnmsg,allranks=False):
	'''
	Raise a controlled warning but don't abort execution on
	all processes.
	'''
	if allranks:
		print('Warning! %d - %s' % (MPI_RANK,warnmsg),file=sys.stderr,flush=True)
	else:
		if MPI_RANK == 0: print('Warning! %s' % (warnmsg),file=sys.stderr,flush=True)
