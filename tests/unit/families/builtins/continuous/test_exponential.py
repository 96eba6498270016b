"""
Tests for Exponential Distribution Family

This module tests the exponential distribution family in its rate
parametrization: characteristics against SciPy and the variate generator.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import expon

from pysatl_rmath.families.builtins.continuous.exponential import dexp, pexp, qexp, rexp
from pysatl_rmath.numeric import M_LN2
from pysatl_rmath.rng import NumPyRandomSource
from pysatl_rmath.types import FamilyName, UnivariateContinuous
from tests.utils.mocks import FailingRandomSource, ScriptedRandomSource

from ..base import BaseDistributionTest


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.exponential_family = self.family(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(rate=0.5)
        self.ref = expon(scale=2.0)
        self.x = np.array([0.0, 0.1, 1.0, 2.0, 10.0, 100.0])

    def test_family_properties(self):
        """Test basic properties of exponential family."""
        assert self.exponential_family.name == FamilyName.EXPONENTIAL
        assert self.exponential_family.parameter_names == ("rate",)
        assert self.exponential_dist_example.distribution_type == UnivariateContinuous
        assert self.exponential_dist_example.parameters == {"rate": 0.5}

    def test_default_rate(self):
        assert self.exponential_family().parameters == {"rate": 1.0}

    def test_density(self):
        self.assert_arrays_close(self.exponential_dist_example.pdf(self.x), self.ref.pdf(self.x))
        self.assert_arrays_close(dexp(self.x, 0.5, give_log=True), self.ref.logpdf(self.x))
        assert dexp(-1.0) == 0.0
        assert dexp(-1.0, give_log=True) == -math.inf

    def test_cumulative(self):
        self.assert_arrays_close(pexp(self.x, 0.5), self.ref.cdf(self.x))
        self.assert_arrays_close(pexp(self.x, 0.5, lower_tail=False), self.ref.sf(self.x))
        self.assert_arrays_close(
            pexp(self.x[1:-1], 0.5, log_p=True), self.ref.logcdf(self.x[1:-1]), rtol=1e-13
        )
        assert pexp(100.0, lower_tail=False, log_p=True) == -100.0
        assert pexp(100.0, 0.5, log_p=True) == pytest.approx(-math.exp(-50.0), rel=1e-14)

    def test_quantile(self):
        p = np.array([0.0, 1e-15, 0.25, 0.5, 0.99])
        self.assert_arrays_close(qexp(p, 0.5), self.ref.ppf(p), rtol=1e-13)
        self.assert_arrays_close(qexp(p[1:], 0.5, lower_tail=False), self.ref.isf(p[1:]))
        assert qexp(1.0) == math.inf
        assert qexp(math.log(0.5), log_p=True) == pytest.approx(M_LN2, rel=1e-15)

    @pytest.mark.parametrize("rate", [-1.0, math.inf])
    def test_invalid_rate_in_density(self, sink, rate):
        assert math.isnan(dexp(1.0, rate, sink=sink))
        assert sink.sources() == ["dexp"]

    def test_invalid_probability(self, sink):
        assert math.isnan(qexp(1.5, sink=sink))
        assert math.isnan(pexp(1.0, -2.0, sink=sink))
        assert sink.sources() == ["qexp", "pexp"]


class TestRexp(BaseDistributionTest):
    def test_infinite_rate_without_drawing(self):
        assert rexp(1, math.inf, source=FailingRandomSource()) == 0.0

    def test_scaled_standard_exponential(self):
        # 0.3 gives ln 2 + 0.2 in algorithm SA
        assert rexp(1, 2.0, source=ScriptedRandomSource([0.3])) == pytest.approx(
            (M_LN2 + 0.2) / 2.0, rel=1e-14
        )

    @pytest.mark.parametrize("rate", [-1.0, 0.0, math.nan])
    def test_invalid_rate(self, sink, rate):
        values = rexp(3, rate, source=FailingRandomSource(), sink=sink)
        assert np.all(np.isnan(values))
        assert sink.sources() == ["rexp"]

    def test_moments(self):
        values = rexp(self.SAMPLE_SIZE, 4.0, source=NumPyRandomSource(8))
        assert values.mean() == pytest.approx(0.25, abs=0.01)
        assert values.var() == pytest.approx(0.0625, rel=0.1)
