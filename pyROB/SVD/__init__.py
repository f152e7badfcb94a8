#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# SVD Module
#
# Last rev: 12/10/2026

from .base   import SVD
from .static import StaticSVD


del base, static
