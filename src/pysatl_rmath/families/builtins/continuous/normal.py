"""
Normal distribution family implementation.

Contains the scalar kernels and vectorized functions ``dnorm``, ``pnorm``,
``qnorm`` and ``rnorm``, and the Normal family registration.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np
from scipy.special import log_ndtr, ndtr, ndtri, ndtri_exp

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.distributions.vectorization import evaluator, variate_generator
from pysatl_rmath.families.parametric_family import ParametricFamily
from pysatl_rmath.families.registry import ParametricFamilyRegister
from pysatl_rmath.numeric.constants import (
    DBL_MANT_DIG,
    DBL_MAX,
    DBL_MIN_EXP,
    M_1_SQRT_2PI,
    M_LN2,
    M_LN_SQRT_2PI,
    ML_NAN,
    ML_NEGINF,
    ML_POSINF,
)
from pysatl_rmath.numeric.primitives import (
    d_zero,
    dt_one,
    dt_zero,
    forceint,
    ldexp,
    quantile_boundaries,
)
from pysatl_rmath.rng.standard import norm_rand
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource

# |z| above which exp(-z*z/2) underflows to 0 even as a subnormal (~38.586)
UNDERFLOW_BOUNDARY = np.sqrt(-2 * M_LN2 * (DBL_MIN_EXP + 1 - DBL_MANT_DIG))

# |z| above which z*z overflows
_OVERFLOW_BOUNDARY = 2 * np.sqrt(DBL_MAX)


def _dnorm(
    x: np.float64, mu: float = 0.0, sigma: float = 1.0, give_log: bool = False
) -> np.float64:
    """
    Density of the normal distribution.

    Parameters
    ----------
    x : float or array_like
        Points at which to evaluate the density.
    mu : float, default 0
        Mean.
    sigma : float, default 1
        Standard deviation. ``sigma == 0`` is a point mass at ``mu``
        (``+inf`` there, zero elsewhere); ``sigma < 0`` gives NaN.
    give_log : bool, default False
        Return the log-density.

    Returns
    -------
    float or numpy.ndarray
        Density values, shaped like ``x``.

    Notes
    -----
    For ``5 <= |z| <= UNDERFLOW_BOUNDARY`` the standardized value is split as
    ``z = z1 + z2`` with ``z1`` rounded to 16 fractional bits, so ``z1*z1`` is
    exact and ``exp(-z*z/2) = exp(-z1*z1/2) * exp((-z2/2 - z1)*z2)`` keeps full
    accuracy (Morten Welinder, R PR#15620).
    """
    if np.isnan(x) or np.isnan(mu) or np.isnan(sigma):
        return x + mu + sigma
    if not np.isfinite(sigma):
        return d_zero(give_log)
    if not np.isfinite(x) and mu == x:
        return ML_NAN  # x - mu is NaN
    if sigma <= 0:
        if sigma < 0:
            raise ArgumentDomainError("dnorm")
        return ML_POSINF if x == mu else d_zero(give_log)

    z = (x - mu) / sigma
    if not np.isfinite(z):
        return d_zero(give_log)

    z = np.abs(z)
    if z >= _OVERFLOW_BOUNDARY:
        return d_zero(give_log)
    if give_log:
        return -(M_LN_SQRT_2PI + 0.5 * z * z + np.log(sigma))
    if z < 5:
        return M_1_SQRT_2PI * np.exp(-0.5 * z * z) / sigma

    if z > UNDERFLOW_BOUNDARY:
        return np.float64(0.0)

    z1 = ldexp(forceint(ldexp(z, 16)), -16)
    z2 = z - z1
    return M_1_SQRT_2PI / sigma * (np.exp(-0.5 * z1 * z1) * np.exp((-0.5 * z2 - z1) * z2))


def _pnorm(
    q: np.float64,
    mu: float = 0.0,
    sigma: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.float64:
    """
    Cumulative distribution function of the normal distribution.

    Parameters
    ----------
    q : float or array_like
        Quantiles.
    mu, sigma : float
        Mean and standard deviation; ``sigma == 0`` is a step at ``mu``.
    lower_tail : bool, default True
        ``P(X <= q)`` if true, ``P(X > q)`` otherwise.
    log_p : bool, default False
        Return the log-probability.
    """
    if np.isnan(q) or np.isnan(mu) or np.isnan(sigma):
        return q + mu + sigma
    if not np.isfinite(q) and mu == q:
        return ML_NAN
    if sigma <= 0:
        if sigma < 0:
            raise ArgumentDomainError("pnorm")
        return dt_zero(lower_tail, log_p) if q < mu else dt_one(lower_tail, log_p)

    z = (q - mu) / sigma
    if not np.isfinite(z):
        return dt_zero(lower_tail, log_p) if q < mu else dt_one(lower_tail, log_p)

    # upper tail by symmetry, never as 1 - P
    if not lower_tail:
        z = -z
    return log_ndtr(z) if log_p else ndtr(z)


def _qnorm(
    p: np.float64,
    mu: float = 0.0,
    sigma: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.float64:
    """
    Quantile function of the normal distribution.

    ``p`` is a probability of the tail selected by ``lower_tail``, on log
    scale when ``log_p`` is true. Extreme probabilities map to ``-inf`` and
    ``+inf``; ``sigma == 0`` returns ``mu``.
    """
    if np.isnan(p) or np.isnan(mu) or np.isnan(sigma):
        return p + mu + sigma
    boundary = quantile_boundaries(p, ML_NEGINF, ML_POSINF, lower_tail, log_p, "qnorm")
    if boundary is not None:
        return boundary
    if sigma < 0:
        raise ArgumentDomainError("qnorm")
    if sigma == 0:
        return mu

    z = ndtri_exp(p) if log_p else ndtri(p)
    if not lower_tail:
        z = -z
    return mu + sigma * z


def _rnorm(
    mu: float = 0.0, sigma: float = 1.0, *, source: RandomSource
) -> np.float64:
    """
    Random variates of the normal distribution.

    Parameters
    ----------
    n : int
        Number of variates.
    mu, sigma : float
        Mean and standard deviation.
    source : RandomSource, optional
        Uniform source; two uniforms are consumed per variate.

    Returns
    -------
    float or numpy.ndarray
        A scalar for ``n == 1``, an array of length ``n`` otherwise.
    """
    if np.isnan(mu) or not np.isfinite(sigma) or sigma < 0.0:
        raise ArgumentDomainError("rnorm")
    if sigma == 0.0 or not np.isfinite(mu):
        return mu
    return mu + sigma * norm_rand(source)


dnorm = evaluator(_dnorm)
pnorm = evaluator(_pnorm)
qnorm = evaluator(_qnorm)
rnorm = variate_generator(_rnorm)


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    σ = 0 is accepted and describes a point mass at μ.
    """

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        parameter_names=("mu", "sigma"),
        distr_characteristics={
            CharacteristicName.PDF: dnorm,
            CharacteristicName.CDF: pnorm,
            CharacteristicName.PPF: qnorm,
        },
        sampler=rnorm,
    )
    Normal.__doc__ = NORMAL_DOC

    ParametricFamilyRegister.register(Normal)


__all__ = [
    "dnorm",
    "pnorm",
    "qnorm",
    "rnorm",
    "configure_normal_family",
]
