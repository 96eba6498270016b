"""
Tests for the names re-exported at package level.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

import pysatl_rmath

FUNCTIONS = [
    f"{prefix}{name}"
    for name in ("norm", "logis", "exp", "gamma", "chisq", "unif", "geom")
    for prefix in "dpqr"
]


@pytest.mark.parametrize("name", FUNCTIONS)
def test_distribution_functions_exported(name):
    assert name in pysatl_rmath.__all__
    assert callable(getattr(pysatl_rmath, name))
    assert getattr(pysatl_rmath, name).__name__ == name


@pytest.mark.parametrize(
    "name",
    [
        "ParametricFamily",
        "ParametricFamilyRegister",
        "DistributionFacade",
        "configure_families_register",
        "NumPyRandomSource",
        "RecordingDiagnosticSink",
        "FamilyName",
    ],
)
def test_infrastructure_exported(name):
    assert hasattr(pysatl_rmath, name)


def test_end_to_end_through_registry():
    normal = pysatl_rmath.configure_families_register().get(pysatl_rmath.FamilyName.NORMAL)
    dist = normal(mu=1.0, sigma=2.0)
    assert dist.cdf(1.0) == 0.5
    assert dist.ppf(0.5) == 1.0
