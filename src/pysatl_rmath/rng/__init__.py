"""
Random number subpackage

- uniform source protocol, NumPy-backed source and default factory
  (:mod:`.source`);
- standard uniform, normal and exponential variates on top of a source
  (:mod:`.standard`);
- Poisson variates used by the mixture samplers (:mod:`.poisson`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .poisson import poisson_rand
from .source import (
    LazyRandomSource,
    NumPyRandomSource,
    RandomSource,
    RandomSourceFactory,
    default_random_source,
)
from .standard import exp_rand, norm_rand, unif_rand

__all__ = [
    "RandomSource",
    "RandomSourceFactory",
    "NumPyRandomSource",
    "LazyRandomSource",
    "default_random_source",
    "unif_rand",
    "norm_rand",
    "exp_rand",
    "poisson_rand",
]
