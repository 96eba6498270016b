"""
Poisson Variates
================

:func:`poisson_rand` draws a Poisson variate with mean ``mu`` from a
:class:`~pysatl_rmath.rng.source.RandomSource`, with the uniform, normal and
exponential consumption of R's ``rpois``:

- ``mu < 10``: inversion against the cumulative probability table;
- ``mu >= 10``: Ahrens & Dieter (1982), algorithm PD (normal sample with
  squeeze, quotient and Laplace-hat acceptance).

Ahrens, J.H. and Dieter, U. (1982). Computer generation of Poisson deviates
from modified normal distributions. ACM Trans. Math. Software, 8, 163-179.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_rmath.numeric.constants import M_1_SQRT_2PI
from pysatl_rmath.rng.standard import exp_rand, norm_rand, unif_rand

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource

# Coefficients of the series for log(1 + v) - v used in procedure F
_A = (-0.5, 0.3333333, -0.2500068, 0.2000118, -0.1661269, 0.1421878, -0.1384794, 0.1250060)
_FACT = (1.0, 1.0, 2.0, 6.0, 24.0, 120.0, 720.0, 5040.0, 40320.0, 362880.0)
_TABLE_SIZE = 35


def _small_mean(mu: np.float64, source: RandomSource) -> np.float64:
    # Table inversion; a uniform beyond the last cumulative entry is redrawn
    m = max(1, int(mu))
    p0 = np.exp(-mu)
    cumulative = [p0]
    p = p0
    while True:
        u = unif_rand(source)
        if u <= p0:
            return np.float64(0.0)
        start = min(len(cumulative) - 1, m) if u > 0.458 else 1
        for k in range(start, len(cumulative)):
            if u <= cumulative[k]:
                return np.float64(k)
        for k in range(len(cumulative), _TABLE_SIZE + 1):
            p *= mu / k
            cumulative.append(cumulative[-1] + p)
            if u <= cumulative[k]:
                return np.float64(k)


def _procedure_f(
    mu: np.float64, s: np.float64, pois: np.float64, omega: np.float64, c: tuple[float, ...]
) -> tuple[np.float64, np.float64, np.float64, np.float64]:
    # px, py: log-scale Poisson probability of pois; fx, fy: its discrete normal hat
    difmuk = mu - pois
    if pois < 10:
        px = -mu
        py = mu**pois / _FACT[int(pois)]
    else:
        delta = (1.0 / 12.0) / pois
        delta = delta * (1.0 - 4.8 * delta * delta)
        v = difmuk / pois
        if abs(v) <= 0.25:
            series = _A[7]
            for coefficient in reversed(_A[:7]):
                series = series * v + coefficient
            px = pois * v * v * series - delta
        else:
            px = pois * np.log1p(v) - difmuk - delta
        py = M_1_SQRT_2PI / np.sqrt(pois)
    x = (0.5 - difmuk) / s
    xx = x * x
    fx = -0.5 * xx
    c0, c1, c2, c3 = c
    fy = omega * (((c3 * xx + c2) * xx + c1) * xx + c0)
    return px, py, fx, fy


def poisson_rand(mu: float, source: RandomSource) -> np.float64:
    """
    Draw a Poisson variate with mean ``mu``.

    Parameters
    ----------
    mu : float
        Finite, non-negative mean; callers validate it. ``mu == 0`` returns
        0 without drawing.
    source : RandomSource
        Uniform source.

    Returns
    -------
    numpy.float64
        A non-negative integer value.
    """
    mu = np.float64(mu)
    if mu <= 0.0:
        return np.float64(0.0)
    if mu < 10.0:
        return _small_mean(mu, source)

    s = np.sqrt(mu)
    d = 6.0 * mu * mu
    big_l = np.floor(mu - 1.1484)

    # Step N: normal sample, immediate and squeeze acceptance
    g = mu + s * norm_rand(source)
    pois = np.float64(-1.0)
    u = np.float64(0.0)
    if g >= 0.0:
        pois = np.floor(g)
        if pois >= big_l:
            return pois
        difmuk = mu - pois
        u = unif_rand(source)
        if d * u >= difmuk * difmuk * difmuk:
            return pois

    # Step P: constants of the Hermite approximation of the normal hat
    omega = M_1_SQRT_2PI / s
    b1 = (1.0 / 24.0) / mu
    b2 = 0.3 * b1 * b1
    c3 = (1.0 / 7.0) * b1 * b2
    c2 = b2 - 15.0 * c3
    c1 = b1 - 6.0 * b2 + 45.0 * c3
    c0 = 1.0 - b1 + 3.0 * b2 - 15.0 * c3
    c = 0.1069 / mu
    hermite = (c0, c1, c2, c3)

    if g >= 0.0:
        # Step Q: quotient acceptance
        px, py, fx, fy = _procedure_f(mu, s, pois, omega, hermite)
        if fy - u * fy <= py * np.exp(px - fx):
            return pois

    while True:
        # Step E: double exponential sample, step H: hat acceptance
        e = exp_rand(source)
        u = 2.0 * unif_rand(source) - 1.0
        t = 1.8 + (e if u >= 0.0 else -e)
        if t <= -0.6744:
            continue
        pois = np.floor(mu + s * t)
        px, py, fx, fy = _procedure_f(mu, s, pois, omega, hermite)
        if c * abs(u) <= py * np.exp(px + e) - fy * np.exp(fx + e):
            return pois


__all__ = [
    "poisson_rand",
]
