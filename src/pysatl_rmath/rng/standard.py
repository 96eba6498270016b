"""
Standard Variates
=================

Unit variates drawn from a :class:`~pysatl_rmath.rng.source.RandomSource`:

- :func:`unif_rand`: uniform on ``(0, 1)``;
- :func:`norm_rand`: standard normal by inversion with 2**27 resolution
  boosting (R's default ``INVERSION`` kind);
- :func:`exp_rand`: standard exponential by Ahrens & Dieter (1972),
  algorithm SA.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import ndtri

from pysatl_rmath.numeric.constants import M_LN2

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource

_BIG = 134217728  # 2**27


def _series_table(terms: int) -> tuple[np.float64, ...]:
    # q[k-1] = sum(ln(2)**i / i!, i = 1..k); the series converges to exactly 1
    table = []
    term = np.float64(1.0)
    total = np.float64(0.0)
    for i in range(1, terms):
        term *= M_LN2 / i
        total += term
        table.append(min(total, np.float64(1.0)))
    table.append(np.float64(1.0))
    return tuple(table)


_Q = _series_table(16)


def unif_rand(source: RandomSource) -> np.float64:
    """Draw one uniform value from ``source``."""
    return np.float64(source.unif_rand())


def norm_rand(source: RandomSource) -> np.float64:
    """
    Draw a standard normal variate by inversion.

    Two uniforms are combined as ``int(2**27 * u1) + u2`` so the inverted
    probability carries more than 32 significant bits.
    """
    u = unif_rand(source)
    u = int(_BIG * u) + unif_rand(source)
    return np.float64(ndtri(u / _BIG))


def exp_rand(source: RandomSource) -> np.float64:
    """
    Draw a standard exponential variate.

    Ahrens, J.H. and Dieter, U. (1972). Computer methods for sampling from the
    exponential and normal distributions. Comm. ACM, 15, 873-882.
    """
    a = np.float64(0.0)
    u = unif_rand(source)
    while u <= 0.0 or u >= 1.0:
        u = unif_rand(source)

    while True:
        u += u
        if u > 1.0:
            break
        a += _Q[0]
    u -= 1.0

    if u <= _Q[0]:
        return a + u

    i = 0
    umin = unif_rand(source)
    while True:
        ustar = unif_rand(source)
        if umin > ustar:
            umin = ustar
        i += 1
        if u <= _Q[i]:
            break
    return a + umin * _Q[0]


__all__ = [
    "unif_rand",
    "norm_rand",
    "exp_rand",
]
