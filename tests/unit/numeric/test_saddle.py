"""
Tests for the saddle-point helpers against direct formulas and SciPy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.special import gammaln
from scipy.stats import binom, poisson

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.numeric import M_LN_SQRT_2PI, bd0, dbinom_raw, dpois_raw, stirlerr


def _stirlerr_direct(n: float) -> float:
    return float(gammaln(n + 1.0) - (n + 0.5) * math.log(n) + n - M_LN_SQRT_2PI)


class TestStirlerr:
    def test_table_value_at_one(self):
        # log(1!) - log(sqrt(2*pi)) + 1
        assert stirlerr(1.0) == pytest.approx(1.0 - M_LN_SQRT_2PI, rel=1e-15)

    @pytest.mark.parametrize("n", [0.5, 2.0, 7.5, 15.0])
    def test_table_matches_definition(self, n):
        assert stirlerr(n) == pytest.approx(_stirlerr_direct(n), rel=1e-10)

    @pytest.mark.parametrize("n", [0.3, 3.3, 7.7, 20.0, 50.0, 100.0])
    def test_series_and_direct_branches(self, n):
        assert stirlerr(n) == pytest.approx(_stirlerr_direct(n), rel=1e-8)

    def test_large_argument_is_asymptotic(self):
        n = 600.0
        assert stirlerr(n) == pytest.approx(1.0 / (12.0 * n), rel=1e-6)


class TestBd0:
    def test_zero_at_equal_arguments(self):
        assert bd0(10.0, 10.0) == 0.0

    def test_direct_branch(self):
        expected = 10.0 * math.log(2.0) + 5.0 - 10.0
        assert bd0(10.0, 5.0) == pytest.approx(expected, rel=1e-14)

    def test_series_branch(self):
        expected = 10.0 * math.log(10.0 / 10.5) + 10.5 - 10.0
        assert bd0(10.0, 10.5) == pytest.approx(expected, rel=1e-9)
        assert bd0(10.0, 10.5) > 0.0

    @pytest.mark.parametrize("x, mean", [(1.0, 0.0), (math.inf, 1.0), (1.0, math.inf)])
    def test_invalid_arguments(self, x, mean):
        with pytest.raises(ArgumentDomainError):
            bd0(x, mean)


class TestRawDensities:
    @pytest.mark.parametrize("x, lam", [(0.0, 2.5), (3.0, 2.5), (40.0, 35.0), (200.0, 210.0)])
    def test_dpois_raw_matches_poisson(self, x, lam):
        assert dpois_raw(x, lam, False) == pytest.approx(poisson.pmf(x, lam), rel=1e-11)
        assert dpois_raw(x, lam, True) == pytest.approx(poisson.logpmf(x, lam), rel=1e-11)

    def test_dpois_raw_degenerate_rate(self):
        assert dpois_raw(0.0, 0.0, False) == 1.0
        assert dpois_raw(2.0, 0.0, False) == 0.0
        assert dpois_raw(2.0, 0.0, True) == -math.inf
        assert dpois_raw(2.0, math.inf, False) == 0.0

    @pytest.mark.parametrize("x, n, p", [(3.0, 10.0, 0.3), (50.0, 100.0, 0.45), (1.0, 4.0, 0.99)])
    def test_dbinom_raw_matches_binomial(self, x, n, p):
        assert dbinom_raw(x, n, p, 1 - p, False) == pytest.approx(binom.pmf(x, n, p), rel=1e-11)

    def test_dbinom_raw_no_successes(self):
        assert dbinom_raw(0.0, 5.0, 0.2, 0.8, False) == pytest.approx(0.8**5, rel=1e-14)
        assert dbinom_raw(0.0, 5.0, 0.2, 0.8, True) == pytest.approx(5 * math.log(0.8), rel=1e-14)

    def test_dbinom_raw_degenerate_probabilities(self):
        assert dbinom_raw(0.0, 3.0, 0.0, 1.0, False) == 1.0
        assert dbinom_raw(1.0, 3.0, 0.0, 1.0, False) == 0.0
        assert dbinom_raw(3.0, 3.0, 1.0, 0.0, False) == 1.0
        assert dbinom_raw(2.0, 3.0, 1.0, 0.0, True) == -math.inf
