#!/usr/bin/env python
#
# pyROB, setup.
#
# Setup the python package.
#
# Last rev: 12/10/2026
from __future__ import print_function, division

from setuptools import setup, find_packages


## Read INIT file
with open('pyROB/__init__.py') as f:
	for l in f.readlines():
		if '__version__' in l:
			__version__ = eval(l.split('=')[1].strip())


## Read README file
with open('README.md') as f:
	readme = f.read()


## Main setup
setup(
	name             = 'pyROB',
	version          = __version__,
	description      = 'Reduced order basis of distributed samples through a static SVD',
	long_description = readme,
	long_description_content_type = 'text/markdown',
	packages         = find_packages(exclude=('Examples','tests')),
	python_requires  = '>=3.8',
	install_requires = ['numpy','mpi4py>=4.0.0','pyyaml','dacite'],
	extras_require   = {'test': ['pytest']},
)
