"""
Tests for Chi-squared Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import chi2

import pysatl_rmath.families.builtins.continuous.chi_squared as chi_squared_module
from pysatl_rmath.families.builtins.continuous.chi_squared import dchisq, pchisq, qchisq, rchisq
from pysatl_rmath.families.builtins.continuous.gamma import _rgamma, rgamma
from pysatl_rmath.rng import NumPyRandomSource
from pysatl_rmath.types import FamilyName
from tests.utils.mocks import FailingRandomSource

from ..base import BaseDistributionTest


class TestChiSquaredFamily(BaseDistributionTest):
    """Test suite for Chi-squared distribution family."""

    def setup_method(self):
        self.chi_squared_family = self.family(FamilyName.CHI_SQUARED)
        self.x = np.array([0.05, 0.5, 1.0, 4.0, 15.0])

    def test_family_properties(self):
        assert self.chi_squared_family.parameter_names == ("df",)
        assert self.chi_squared_family.parameter_defaults == {}

    @pytest.mark.parametrize("df", [1.0, 2.5, 7.0])
    def test_characteristics_match_scipy(self, df):
        ref = chi2(df)
        p = np.array([0.01, 0.25, 0.5, 0.95])

        self.assert_arrays_close(dchisq(self.x, df), ref.pdf(self.x), rtol=1e-10)
        self.assert_arrays_close(pchisq(self.x, df), ref.cdf(self.x), rtol=1e-12)
        self.assert_arrays_close(pchisq(self.x, df, lower_tail=False), ref.sf(self.x), rtol=1e-12)
        self.assert_arrays_close(qchisq(p, df), ref.ppf(p), rtol=1e-10)

    def test_density_at_origin(self):
        assert dchisq(0.0, 1.0) == math.inf
        assert dchisq(0.0, 2.0) == 0.5
        assert dchisq(0.0, 3.0) == 0.0

    def test_invalid_df(self, sink):
        assert math.isnan(dchisq(1.0, -1.0, sink=sink))
        assert math.isnan(qchisq(0.5, -2.0, sink=sink))
        # diagnostics name the gamma kernels the evaluation delegates to
        assert sink.sources() == ["dgamma", "qgamma"]


class TestRchisq(BaseDistributionTest):
    def test_one_gamma_draw_per_variate(self, monkeypatch):
        calls = []

        def counting_rgamma(shape, scale=1.0, *, source):
            calls.append((shape, scale))
            return _rgamma(shape, scale, source=source)

        monkeypatch.setattr(chi_squared_module, "_rgamma", counting_rgamma)
        values = rchisq(7, 3.0, source=NumPyRandomSource(1))

        assert values.shape == (7,)
        assert calls == [(1.5, 2.0)] * 7

    def test_same_stream_as_gamma(self):
        values = rchisq(10, 5.0, source=NumPyRandomSource(23))
        expected = rgamma(10, 2.5, 2.0, source=NumPyRandomSource(23))
        np.testing.assert_array_equal(values, expected)

    @pytest.mark.parametrize("df", [-1.0, math.nan, math.inf])
    def test_invalid_df_fills_batch(self, sink, df):
        values = rchisq(5, df, source=FailingRandomSource(), sink=sink)
        assert values.shape == (5,)
        assert np.all(np.isnan(values))
        assert sink.sources() == ["rchisq"]

    def test_zero_df_without_drawing(self):
        assert rchisq(1, 0.0, source=FailingRandomSource()) == 0.0

    def test_moments(self):
        values = rchisq(self.SAMPLE_SIZE, 4.0, source=NumPyRandomSource(31))
        assert values.mean() == pytest.approx(4.0, rel=0.03)
        assert values.var() == pytest.approx(8.0, rel=0.08)
