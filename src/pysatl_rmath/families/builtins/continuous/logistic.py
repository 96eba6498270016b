"""
Logistic distribution family implementation.

Location-scale family with ``F(x) = 1 / (1 + exp(-(x - location)/scale))``.
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
from pysatl_rmath.numeric.constants import ML_NEGINF, ML_POSINF
from pysatl_rmath.numeric.primitives import (
    dt_one,
    dt_zero,
    log1mexp,
    log1pexp,
    quantile_boundaries,
)
from pysatl_rmath.rng.standard import unif_rand
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource


def _dlogis(
    x: np.float64, location: float = 0.0, scale: float = 1.0, give_log: bool = False
) -> np.float64:
    """
    Density of the logistic distribution.

    Evaluated on ``|z|`` so ``exp(-|z|)`` never overflows; ``scale <= 0``
    gives NaN.
    """
    if np.isnan(x) or np.isnan(location) or np.isnan(scale):
        return x + location + scale
    if scale <= 0.0:
        raise ArgumentDomainError("dlogis")

    z = np.abs((x - location) / scale)
    e = np.exp(-z)
    f = 1.0 + e
    return -(z + np.log(scale * f * f)) if give_log else e / (scale * f * f)


def _plogis(
    q: np.float64,
    location: float = 0.0,
    scale: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.float64:
    """Cumulative distribution function of the logistic distribution."""
    if np.isnan(q) or np.isnan(location) or np.isnan(scale):
        return q + location + scale
    if scale <= 0.0:
        raise ArgumentDomainError("plogis")

    z = (q - location) / scale
    if np.isnan(z):
        raise ArgumentDomainError("plogis")
    if not np.isfinite(z):
        return dt_one(lower_tail, log_p) if z > 0 else dt_zero(lower_tail, log_p)

    if log_p:
        return -log1pexp(-z if lower_tail else z)
    return 1 / (1 + np.exp(-z if lower_tail else z))


def _qlogis(
    p: np.float64,
    location: float = 0.0,
    scale: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.float64:
    """
    Quantile function of the logistic distribution.

    On log scale the logit is formed as ``log(p) - log(1 - p)`` through
    :func:`log1mexp`, without leaving the log domain.
    """
    if np.isnan(p) or np.isnan(location) or np.isnan(scale):
        return p + location + scale
    boundary = quantile_boundaries(p, ML_NEGINF, ML_POSINF, lower_tail, log_p, "qlogis")
    if boundary is not None:
        return boundary
    if scale < 0.0:
        raise ArgumentDomainError("qlogis")
    if scale == 0.0:
        return location

    if log_p:
        logit = p - log1mexp(p) if lower_tail else log1mexp(p) - p
    else:
        logit = np.log(p / (1.0 - p) if lower_tail else (1.0 - p) / p)
    return location + scale * logit


def _rlogis(
    location: float = 0.0, scale: float = 1.0, *, source: RandomSource
) -> np.float64:
    """
    Random variates of the logistic distribution.

    One uniform is drawn per variate. ``scale == 0`` and an infinite
    ``location`` return ``location`` without drawing.
    """
    if np.isnan(location) or not np.isfinite(scale):
        raise ArgumentDomainError("rlogis")
    if scale == 0.0 or not np.isfinite(location):
        return location

    u = unif_rand(source)
    return location + scale * np.log(u / (1.0 - u))


dlogis = evaluator(_dlogis)
plogis = evaluator(_plogis)
qlogis = evaluator(_qlogis)
rlogis = variate_generator(_rlogis)


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOGISTIC):
        return

    LOGISTIC_DOC = """
    Logistic distribution.

    Symmetric location-scale distribution with heavier tails than the normal.

    Probability density function:
        f(x) = exp(-z) / (s * (1 + exp(-z))²),  z = (x - m)/s
    """

    Logistic = ParametricFamily(
        name=FamilyName.LOGISTIC,
        distr_type=UnivariateContinuous,
        parameter_names=("location", "scale"),
        distr_characteristics={
            CharacteristicName.PDF: dlogis,
            CharacteristicName.CDF: plogis,
            CharacteristicName.PPF: qlogis,
        },
        sampler=rlogis,
    )
    Logistic.__doc__ = LOGISTIC_DOC

    ParametricFamilyRegister.register(Logistic)


__all__ = [
    "dlogis",
    "plogis",
    "qlogis",
    "rlogis",
    "configure_logistic_family",
]
