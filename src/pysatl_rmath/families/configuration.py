"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of PySATL RMath:

- continuous: Normal, Logistic, Exponential, Gamma, ChiSquared,
  ContinuousUniform;
- discrete: Geometric.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent; each ``configure_*_family`` skips a family that
  is already present.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_rmath.families.builtins import (
    configure_chi_squared_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_logistic_family,
    configure_normal_family,
    configure_uniform_family,
)
from pysatl_rmath.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_logistic_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_chi_squared_family()
    configure_uniform_family()
    configure_geometric_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
