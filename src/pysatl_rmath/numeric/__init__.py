"""
Numeric subpackage

Floating-point building blocks shared by every distribution kernel:

- IEEE-754 and mathematical constants (:mod:`.constants`);
- log-scale and tail helpers, quantile prologue (:mod:`.primitives`);
- saddle-point expansions for gamma and binomial type densities (:mod:`.saddle`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .constants import *
from .constants import __all__ as _constants_all
from .primitives import *
from .primitives import __all__ as _primitives_all
from .saddle import *
from .saddle import __all__ as _saddle_all

__all__ = [
    *_constants_all,
    *_primitives_all,
    *_saddle_all,
]

del _constants_all
del _primitives_all
del _saddle_all
