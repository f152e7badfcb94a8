#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Last rev: 12/10/2026

__version__ = '1.0.0'

# Import essential tools
from .        import vmmath as math
from .vector  import Vector
from .matrix  import Matrix

# Import utilities
from .utils.cr     import cr, cr_start, cr_stop, cr_reset, cr_info
from .utils.parall import pprint
from .utils.mpi    import MPIChannel

# Import basis algorithms
from .     import SVD
from .SVD  import StaticSVD

del vector, matrix
