#!/usr/bin/env python
#
# Example of the static SVD of a travelling wave whose
# spatial dimension is split among the processors.
#
# Run with: mpirun -np 4 python example_StaticSVD.py
#
# Last revision: 12/10/2026
from __future__ import print_function, division

import numpy as np
import pyROB
from pyROB.utils import MPI_RANK, MPI_SIZE, worksplit


## Parameters
NPOINTS  = 1000 # Global number of points
NSAMPLES = 20   # Samples per time interval
DT       = 0.05


## Split the points among the processors
istart, iend = worksplit(0,NPOINTS,MPI_RANK,nWorkers=MPI_SIZE)
x = np.linspace(0.,2.*np.pi,NPOINTS)[istart:iend]
pyROB.pprint(-1,'owns points %d to %d' % (istart,iend),flush=True)


## Take the samples
svd = pyROB.StaticSVD(iend-istart,NSAMPLES,debug_algorithm=False)
for it in range(NSAMPLES+1):
	t = it*DT
	u = np.sin(x - t) + 0.5*np.sin(3.*(x + 2.*t))
	if not svd.take_sample(u,t):
		pyROB.pprint(0,'sample at t=%.2f rejected, time interval is full' % t,flush=True)


## Compute the basis (collective)
U  = svd.get_spatial_basis()
S  = svd.get_singular_values()
VT = svd.get_temporal_basis()
s  = np.diag(S.to_numpy())
pyROB.pprint(0,'total dim',svd.total_dim,'basis vectors',U.num_columns,flush=True)
pyROB.pprint(0,'S =',s[:6],flush=True)

# Energy captured by the first 4 modes
pyROB.pprint(0,'energy of 4 modes = %.12f' % (np.sum(s[:4]**2)/np.sum(s**2)),flush=True)

# The spatial basis is orthonormal across all the processors
UtU = U.transpose_mult(U)
pyROB.pprint(0,'orthonormality error = %e' % np.max(np.abs(UtU.to_numpy() - np.eye(UtU.num_rows))),flush=True)

svd.channel.barrier()
pyROB.cr_info()
