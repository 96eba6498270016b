"""
PySATL RMath
============

Numerically careful density, cumulative, quantile and random variate
functions for classical distributions, together with the parametric family
registry, random sources and diagnostic sinks they are built on.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .diagnostics import *
from .diagnostics import __all__ as _diagnostics_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .families.builtins import *
from .families.builtins import __all__ as _builtins_all
from .rng import *
from .rng import __all__ as _rng_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-rmath")
__all__ = [
    "__version__",
    *_diagnostics_all,
    *_distr_all,
    *_family_all,
    *_builtins_all,
    *_rng_all,
    *_types_all,
]

del _diagnostics_all
del _distr_all
del _family_all
del _builtins_all
del _rng_all
del _types_all
