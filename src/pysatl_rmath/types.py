"""
Core Type Definitions
=====================

Enumerations, distribution type descriptors and numeric aliases shared by the
kernels, the vectorization layer and the families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float

NumericArray = NDArray[np.float64]
"""Float64 array; every evaluator and generator returns this dtype."""

ArrayLike = Number | Sequence[Number] | NDArray[Any]
"""Evaluation points accepted by the vectorized evaluators."""

type Result = float | NumericArray
"""Scalar for scalar input, array of the input's shape otherwise."""


class Kind(StrEnum):
    """Whether a distribution has a density or a probability mass."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class CharacteristicName(StrEnum):
    """
    Characteristics a family binds.

    Notes
    -----
    Continuous families provide ``PDF``, discrete families provide ``PMF``;
    both are served by :meth:`DistributionFacade.density`.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"


class FamilyName(StrEnum):
    NORMAL = "Normal"
    LOGISTIC = "Logistic"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    CHI_SQUARED = "ChiSquared"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    GEOMETRIC = "Geometric"


class DistributionType:
    """Marker base of distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution on ``R**dimension``.

    Parameters
    ----------
    kind : Kind
        Continuous (density) or discrete (mass on the integers).
    dimension : int
        Number of coordinates of one draw.
    """

    kind: Kind
    dimension: int

    @property
    def density_characteristic(self) -> CharacteristicName:
        """``PMF`` for discrete types, ``PDF`` for continuous ones."""
        return CharacteristicName.PMF if self.kind is Kind.DISCRETE else CharacteristicName.PDF


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ArrayLike",
    "Result",
    "CharacteristicName",
    "FamilyName",
]
