#!/usr/bin/env python
#
# pyROB - Python Reduced Order Basis.
#
# Utils - Configuration I/O utilities.
#
# Last rev: 12/10/2026

import yaml
from dataclasses import dataclass
from pathlib     import Path
from typing      import Union

from dacite import from_dict, Config as DaciteConfig

from .mpi import COMM_TAG


@dataclass(frozen=True)
class StaticSVDConfig:
	'''
	Parameters of a static SVD.

	- `dim`: dimension of the system on this processor.
	- `samples_per_time_interval`: maximum number of samples of a time interval.
	- `debug_algorithm`: trace the algorithm on the standard output.
	- `comm_tag`: message tag of the sample exchange.
	'''
	dim: int
	samples_per_time_interval: int
	debug_algorithm: bool = False
	comm_tag: int = COMM_TAG


def load_yaml(path: Union[str, Path]) -> dict:
	"""Load a YAML file into a Python dictionary."""
	with open(path, 'r') as f:
		return yaml.safe_load(f)

def build_static_svd_config(config: dict) -> StaticSVDConfig:
	'''
	Build the configuration from a dictionary, either the
	whole dictionary or its `svd` section. Unknown keys
	and wrong types are rejected.
	'''
	cfg = config['svd'] if 'svd' in config else config
	return from_dict(data_class=StaticSVDConfig, data=cfg, config=DaciteConfig(strict=True))
