"""
Uniform distribution family implementation.

Continuous uniform distribution on ``[lower_bound, upper_bound]``.
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
    d_zero,
    dt_one,
    dt_qiv,
    dt_val,
    dt_zero,
)
from pysatl_rmath.rng.standard import unif_rand
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource


def _dunif(
    x: np.float64,
    lower_bound: float = 0.0,
    upper_bound: float = 1.0,
    give_log: bool = False,
) -> np.float64:
    """
    Density of the continuous uniform distribution.

    ``upper_bound <= lower_bound`` gives NaN.
    """
    if np.isnan(x) or np.isnan(lower_bound) or np.isnan(upper_bound):
        return x + lower_bound + upper_bound
    if upper_bound <= lower_bound:
        raise ArgumentDomainError("dunif")
    if lower_bound <= x <= upper_bound:
        width = upper_bound - lower_bound
        return -np.log(width) if give_log else 1.0 / width
    return d_zero(give_log)


def _punif(
    q: np.float64,
    lower_bound: float = 0.0,
    upper_bound: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.float64:
    """Cumulative distribution function of the continuous uniform distribution."""
    if np.isnan(q) or np.isnan(lower_bound) or np.isnan(upper_bound):
        return q + lower_bound + upper_bound
    if upper_bound < lower_bound:
        raise ArgumentDomainError("punif")
    if not np.isfinite(lower_bound) or not np.isfinite(upper_bound):
        raise ArgumentDomainError("punif")
    if q >= upper_bound:
        return dt_one(lower_tail, log_p)
    if q <= lower_bound:
        return dt_zero(lower_tail, log_p)

    width = upper_bound - lower_bound
    if lower_tail:
        return dt_val((q - lower_bound) / width, True, log_p)
    return dt_val((upper_bound - q) / width, True, log_p)


def _qunif(
    p: np.float64,
    lower_bound: float = 0.0,
    upper_bound: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.float64:
    """Quantile function of the continuous uniform distribution."""
    if np.isnan(p) or np.isnan(lower_bound) or np.isnan(upper_bound):
        return p + lower_bound + upper_bound
    check_probability(p, log_p, "qunif")
    if not np.isfinite(lower_bound) or not np.isfinite(upper_bound):
        raise ArgumentDomainError("qunif")
    if upper_bound < lower_bound:
        raise ArgumentDomainError("qunif")
    if upper_bound == lower_bound:
        return lower_bound
    return lower_bound + dt_qiv(p, lower_tail, log_p) * (upper_bound - lower_bound)


def _runif(
    lower_bound: float = 0.0, upper_bound: float = 1.0, *, source: RandomSource
) -> np.float64:
    """
    Random variates of the continuous uniform distribution.

    Equal bounds return the bound without drawing.
    """
    if not np.isfinite(lower_bound) or not np.isfinite(upper_bound) or upper_bound < lower_bound:
        raise ArgumentDomainError("runif")
    if lower_bound == upper_bound:
        return lower_bound

    u = unif_rand(source)
    while u <= 0.0 or u >= 1.0:
        u = unif_rand(source)
    return lower_bound + (upper_bound - lower_bound) * u


dunif = evaluator(_dunif)
punif = evaluator(_punif)
qunif = evaluator(_qunif)
runif = variate_generator(_runif)


def configure_uniform_family() -> None:
    """
    Configure and register the continuous Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Continuous uniform distribution.

    Every point of [a, b] is equally likely.

    Probability density function:
        f(x) = 1/(b - a) for a ≤ x ≤ b, 0 otherwise
    """

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        parameter_names=("lower_bound", "upper_bound"),
        distr_characteristics={
            CharacteristicName.PDF: dunif,
            CharacteristicName.CDF: punif,
            CharacteristicName.PPF: qunif,
        },
        sampler=runif,
    )
    Uniform.__doc__ = UNIFORM_DOC

    ParametricFamilyRegister.register(Uniform)


__all__ = [
    "dunif",
    "punif",
    "qunif",
    "runif",
    "configure_uniform_family",
]
