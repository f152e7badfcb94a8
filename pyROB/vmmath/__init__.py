#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Math operations Module
#
# Last rev: 12/10/2026

# Vector matrix routines
from .maths import transpose, matmul, matmulp, diag, dot
# SVD routines
from .svd   import svd


del maths
