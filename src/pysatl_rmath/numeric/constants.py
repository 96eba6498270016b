"""
Numeric Constants
=================

IEEE-754 double precision limits and mathematical constants shared by every
evaluator. Values follow ``<float.h>`` and R's ``Rmath.h``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

_FINFO = np.finfo(np.float64)

DBL_EPSILON = np.float64(_FINFO.eps)
"""Difference between 1.0 and the next representable double (2**-52)."""

DBL_MAX = np.float64(_FINFO.max)
"""Largest finite double."""

DBL_MIN = np.float64(_FINFO.smallest_normal)
"""Smallest positive normalized double."""

DBL_MANT_DIG = 53
"""Number of base-2 digits in the mantissa."""

DBL_MIN_EXP = -1021
"""Minimum binary exponent of a normalized double, in the ``<float.h>`` convention."""

M_LN2 = np.float64(0.693147180559945309417232121458)
"""ln(2)"""

M_2PI = np.float64(6.283185307179586476925286766559)
"""2*pi"""

M_LN_2PI = np.float64(1.837877066409345483560659472811)
"""ln(2*pi)"""

M_1_SQRT_2PI = np.float64(0.398942280401432677939946059934)
"""1/sqrt(2*pi)"""

M_LN_SQRT_2PI = np.float64(0.918938533204672741780329736406)
"""ln(sqrt(2*pi))"""

ML_POSINF = np.float64(np.inf)
ML_NEGINF = np.float64(-np.inf)
ML_NAN = np.float64(np.nan)

__all__ = [
    "DBL_EPSILON",
    "DBL_MAX",
    "DBL_MIN",
    "DBL_MANT_DIG",
    "DBL_MIN_EXP",
    "M_LN2",
    "M_2PI",
    "M_LN_2PI",
    "M_1_SQRT_2PI",
    "M_LN_SQRT_2PI",
    "ML_POSINF",
    "ML_NEGINF",
    "ML_NAN",
]
