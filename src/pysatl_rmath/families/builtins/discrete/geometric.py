"""
Geometric distribution family implementation.

Number of failures before the first success in Bernoulli trials with success
probability ``prob``: ``P(X = k) = prob * (1 - prob)**k``, ``k = 0, 1, ...``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_rmath.diagnostics import ArgumentDomainError, NonIntegerArgument
from pysatl_rmath.distributions.vectorization import evaluator, variate_generator
from pysatl_rmath.families.builtins.continuous.gamma import _rgamma
from pysatl_rmath.families.parametric_family import ParametricFamily
from pysatl_rmath.families.registry import ParametricFamilyRegister
from pysatl_rmath.numeric.constants import ML_POSINF
from pysatl_rmath.numeric.primitives import (
    d_zero,
    dt_clog,
    dt_one,
    dt_zero,
    forceint,
    is_nonint,
    log1mexp,
    quantile_boundaries,
)
from pysatl_rmath.numeric.saddle import dbinom_raw
from pysatl_rmath.rng.poisson import poisson_rand
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource


def _dgeom(x: np.float64, prob: float, give_log: bool = False) -> np.float64:
    """
    Probability mass function of the geometric distribution.

    Parameters
    ----------
    x : float or array_like
        Number of failures; non-integer values have mass zero and emit a
        diagnostic.
    prob : float
        Success probability in ``(0, 1]``.
    give_log : bool, default False
        Return the log-probability.

    Notes
    -----
    ``(1 - prob)**x`` is the binomial term with no successes out of ``x``
    trials, evaluated by :func:`dbinom_raw` to stay accurate for small
    ``prob``.
    """
    if np.isnan(x) or np.isnan(prob):
        return x + prob
    if prob <= 0 or prob > 1:
        raise ArgumentDomainError("dgeom")
    if is_nonint(x):
        raise NonIntegerArgument("dgeom", float(x), d_zero(give_log))
    if x < 0 or not np.isfinite(x) or prob == 0:
        return d_zero(give_log)

    x = forceint(x)
    failures = dbinom_raw(0.0, x, prob, 1 - prob, give_log)
    return np.log(prob) + failures if give_log else prob * failures


def _pgeom(
    q: np.float64, prob: float, lower_tail: bool = True, log_p: bool = False
) -> np.float64:
    """Cumulative distribution function of the geometric distribution."""
    if np.isnan(q) or np.isnan(prob):
        return q + prob
    if prob <= 0 or prob > 1:
        raise ArgumentDomainError("pgeom")
    if q < 0.0:
        return dt_zero(lower_tail, log_p)
    if not np.isfinite(q):
        return dt_one(lower_tail, log_p)

    q = np.floor(q + 1e-7)
    if prob == 1.0:
        return dt_one(lower_tail, log_p)

    # log of the upper tail, (1 - prob)**(q + 1)
    x = np.log1p(-prob) * (q + 1)
    if log_p:
        return log1mexp(x) if lower_tail else x
    return -np.expm1(x) if lower_tail else np.exp(x)


def _qgeom(
    p: np.float64, prob: float, lower_tail: bool = True, log_p: bool = False
) -> np.float64:
    """Quantile function of the geometric distribution."""
    if np.isnan(p) or np.isnan(prob):
        return p + prob
    if prob <= 0 or prob > 1:
        raise ArgumentDomainError("qgeom")
    boundary = quantile_boundaries(p, 0.0, ML_POSINF, lower_tail, log_p, "qgeom")
    if prob == 1:
        return np.float64(0.0)
    if boundary is not None:
        return boundary

    # the fuzz keeps exact lattice probabilities on their own quantile
    k = np.ceil(dt_clog(p, lower_tail, log_p) / np.log1p(-prob) - 1 - 1e-12)
    return max(np.float64(0.0), k)


def _rgeom(prob: float, *, source: RandomSource) -> np.float64:
    """
    Random variates of the geometric distribution.

    Poisson variate whose mean is an exponential variate with mean
    ``(1 - prob) / prob``, drawn as R's ``rgeom`` draws it. ``prob == 1``
    returns 0 without drawing.
    """
    if not np.isfinite(prob) or prob <= 0 or prob > 1:
        raise ArgumentDomainError("rgeom")
    return poisson_rand(_rgamma(1.0, (1 - prob) / prob, source=source), source)


dgeom = evaluator(_dgeom)
pgeom = evaluator(_pgeom)
qgeom = evaluator(_qgeom)
rgeom = variate_generator(_rgeom)


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution.

    Number of failures before the first success in independent Bernoulli
    trials with success probability p.

    Probability mass function:
        P(X = k) = p * (1 - p)^k, k = 0, 1, 2, ...
    """

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        parameter_names=("prob",),
        distr_characteristics={
            CharacteristicName.PMF: dgeom,
            CharacteristicName.CDF: pgeom,
            CharacteristicName.PPF: qgeom,
        },
        sampler=rgeom,
    )
    Geometric.__doc__ = GEOMETRIC_DOC

    ParametricFamilyRegister.register(Geometric)


__all__ = [
    "dgeom",
    "pgeom",
    "qgeom",
    "rgeom",
    "configure_geometric_family",
]
