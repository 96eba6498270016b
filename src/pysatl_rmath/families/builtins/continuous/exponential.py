"""
Exponential distribution family implementation.

Rate parametrization; the kernels work with the scale ``1/rate``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.distributions.vectorization import evaluator, variate_generator
from pysatl_rmath.families.parametric_family import ParametricFamily
from pysatl_rmath.families.registry import ParametricFamilyRegister
from pysatl_rmath.numeric.primitives import (
    check_probability,
    d_exp,
    d_zero,
    dt_clog,
    dt_zero,
    log1mexp,
)
from pysatl_rmath.rng.standard import exp_rand
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource


def _dexp(x: np.float64, rate: float = 1.0, give_log: bool = False) -> np.float64:
    """
    Density of the exponential distribution.

    Parameters
    ----------
    x : float or array_like
        Points at which to evaluate the density.
    rate : float, default 1
        Rate parameter (λ). ``rate == inf`` or a negative rate gives NaN.
    give_log : bool, default False
        Return the log-density.
    """
    if np.isnan(x) or np.isnan(rate):
        return x + rate
    scale = 1.0 / rate
    if scale <= 0.0:
        raise ArgumentDomainError("dexp")
    if x < 0.0:
        return d_zero(give_log)
    return (-x / scale) - np.log(scale) if give_log else np.exp(-x / scale) / scale


def _pexp(
    q: np.float64, rate: float = 1.0, lower_tail: bool = True, log_p: bool = False
) -> np.float64:
    """Cumulative distribution function of the exponential distribution."""
    if np.isnan(q) or np.isnan(rate):
        return q + rate
    scale = 1.0 / rate
    if scale < 0:
        raise ArgumentDomainError("pexp")
    if q <= 0.0:
        return dt_zero(lower_tail, log_p)

    # log of the upper tail
    x = -(q / scale)
    if lower_tail:
        return log1mexp(x) if log_p else -np.expm1(x)
    return d_exp(x, log_p)


def _qexp(
    p: np.float64, rate: float = 1.0, lower_tail: bool = True, log_p: bool = False
) -> np.float64:
    """Quantile function of the exponential distribution."""
    if np.isnan(p) or np.isnan(rate):
        return p + rate
    scale = 1.0 / rate
    if scale < 0:
        raise ArgumentDomainError("qexp")
    check_probability(p, log_p, "qexp")
    if p == dt_zero(lower_tail, log_p):
        return np.float64(0.0)
    return -scale * dt_clog(p, lower_tail, log_p)


def _rexp(rate: float = 1.0, *, source: RandomSource) -> np.float64:
    """
    Random variates of the exponential distribution.

    ``rate == inf`` returns 0 without drawing; the uniform consumption per
    variate is variable (Ahrens-Dieter algorithm SA).
    """
    scale = 1.0 / rate
    if not np.isfinite(scale) or scale <= 0.0:
        if scale == 0.0:
            return np.float64(0.0)
        raise ArgumentDomainError("rexp")
    return scale * exp_rand(source)


dexp = evaluator(_dexp)
pexp = evaluator(_pexp)
qexp = evaluator(_qexp)
rexp = variate_generator(_rexp)


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process.

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0
    """

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        parameter_names=("rate",),
        distr_characteristics={
            CharacteristicName.PDF: dexp,
            CharacteristicName.CDF: pexp,
            CharacteristicName.PPF: qexp,
        },
        sampler=rexp,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    ParametricFamilyRegister.register(Exponential)


__all__ = [
    "dexp",
    "pexp",
    "qexp",
    "rexp",
    "configure_exponential_family",
]
