"""
Tests for distribution type descriptors.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from pysatl_rmath.types import (
    CharacteristicName,
    EuclideanDistributionType,
    Kind,
    UnivariateContinuous,
    UnivariateDiscrete,
)


@pytest.mark.parametrize(
    ("distr_type", "expected"),
    [
        (UnivariateContinuous, CharacteristicName.PDF),
        (UnivariateDiscrete, CharacteristicName.PMF),
    ],
)
def test_density_characteristic(distr_type, expected):
    assert distr_type.density_characteristic is expected


def test_descriptors_are_values():
    assert EuclideanDistributionType(Kind.DISCRETE, 1) == UnivariateDiscrete
    with pytest.raises(dataclasses.FrozenInstanceError):
        UnivariateContinuous.dimension = 2


def test_enums_compare_as_strings():
    assert CharacteristicName("pmf") is CharacteristicName.PMF
    assert Kind.CONTINUOUS == "continuous"
