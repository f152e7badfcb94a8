#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Utils Module
#
# Last rev: 12/10/2026

from .errors import raiseError, raiseWarning, pyROBError, ContractError, SolverError
from .cr     import cr, cr_start, cr_stop, cr_info, cr_reset
from .parall import worksplit, pprint
from .mpi    import MPI_COMM, MPI_RANK, MPI_SIZE, COMM_TAG, MPIChannel, default_channel
from .config import StaticSVDConfig, load_yaml, build_static_svd_config

del errors, parall
