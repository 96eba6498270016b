"""
Parametric Families module for working with statistical distribution families.

This package provides the registry of built-in families, the facade binding a
family to a random source and a diagnostic sink, and frozen distributions with
fixed parameter values.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .facade import DistributionFacade
from .parametric_family import ParametricFamily
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "DistributionFacade",
    "configure_families_register",
    "reset_families_register",
]
