"""
Chi-squared distribution family implementation.

The chi-squared distribution with ``df`` degrees of freedom is the gamma
distribution with shape ``df/2`` and scale 2; every kernel delegates to the
gamma kernels.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.distributions.vectorization import evaluator, variate_generator
from pysatl_rmath.families.builtins.continuous.gamma import (
    _dgamma,
    _pgamma,
    _qgamma,
    _rgamma,
)
from pysatl_rmath.families.parametric_family import ParametricFamily
from pysatl_rmath.families.registry import ParametricFamilyRegister
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_rmath.rng.source import RandomSource


def _dchisq(x: np.float64, df: float, give_log: bool = False) -> np.float64:
    """Density of the chi-squared distribution with ``df`` degrees of freedom."""
    return _dgamma(x, df / 2.0, 2.0, give_log)


def _pchisq(
    q: np.float64, df: float, lower_tail: bool = True, log_p: bool = False
) -> np.float64:
    """Cumulative distribution function of the chi-squared distribution."""
    return _pgamma(q, df / 2.0, 2.0, lower_tail, log_p)


def _qchisq(
    p: np.float64, df: float, lower_tail: bool = True, log_p: bool = False
) -> np.float64:
    """Quantile function of the chi-squared distribution."""
    return _qgamma(p, 0.5 * df, 2.0, lower_tail, log_p)


def _rchisq(df: float, *, source: RandomSource) -> np.float64:
    """
    Random variates of the chi-squared distribution.

    Each variate is exactly one gamma variate with shape ``df/2`` and
    scale 2. A non-finite or negative ``df`` gives NaN for every requested
    variate.
    """
    if not np.isfinite(df) or df < 0.0:
        raise ArgumentDomainError("rchisq")
    return _rgamma(df / 2.0, 2.0, source=source)


dchisq = evaluator(_dchisq)
pchisq = evaluator(_pchisq)
qchisq = evaluator(_qchisq)
rchisq = variate_generator(_rchisq)


def configure_chi_squared_family() -> None:
    """
    Configure and register the chi-squared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution.

    Distribution of a sum of ``df`` squared independent standard normal
    variables; a gamma distribution with shape df/2 and scale 2.

    Probability density function:
        f(x) = x^(k/2-1) * exp(-x/2) / (2^(k/2) * Γ(k/2)) for x ≥ 0
    """

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        parameter_names=("df",),
        distr_characteristics={
            CharacteristicName.PDF: dchisq,
            CharacteristicName.CDF: pchisq,
            CharacteristicName.PPF: qchisq,
        },
        sampler=rchisq,
    )
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    ParametricFamilyRegister.register(ChiSquared)


__all__ = [
    "dchisq",
    "pchisq",
    "qchisq",
    "rchisq",
    "configure_chi_squared_family",
]
