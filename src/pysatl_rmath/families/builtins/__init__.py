"""
Built-in distribution families for PySATL RMath.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL RMath.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_rmath.families.builtins.continuous import *
from pysatl_rmath.families.builtins.continuous import __all__ as _continuous_all
from pysatl_rmath.families.builtins.discrete import *
from pysatl_rmath.families.builtins.discrete import __all__ as _discrete_all

__all__ = [
    *_continuous_all,
    *_discrete_all,
]

del _continuous_all
del _discrete_all
