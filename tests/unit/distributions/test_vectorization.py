"""
Tests for the evaluator and variate-generator adapters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.distributions import as_array, evaluator, variate_generator
from pysatl_rmath.rng.standard import unif_rand
from tests.utils.mocks import (
    CountingSourceFactory,
    FailingRandomSource,
    ScriptedRandomSource,
    failing_source_factory,
)


def _dscaled(x, scale=1.0, give_log=False):
    if scale <= 0:
        raise ArgumentDomainError("dscaled")
    value = x / scale
    return np.log(value) if give_log else value


def _rshift(shift=0.0, *, source):
    if not np.isfinite(shift):
        raise ArgumentDomainError("rshift")
    if shift == 0.0:
        return np.float64(-1.0)
    return shift + unif_rand(source)


dscaled = evaluator(_dscaled)
rshift = variate_generator(_rshift)


class TestEvaluator:
    def test_scalar_in_float_out(self):
        value = dscaled(3.0, 2.0)
        assert type(value) is float
        assert value == 1.5

    def test_integer_arguments_are_doubles(self):
        # integer division semantics must not leak through
        assert dscaled(1, 4) == 0.25

    def test_keyword_arguments_and_defaults(self):
        assert dscaled(3.0) == 3.0
        assert dscaled(x=3.0, scale=6.0) == 0.5
        assert dscaled(1.0, give_log=True) == 0.0

    @pytest.mark.parametrize("shape", [(1,), (4,), (2, 3)])
    def test_array_shape_preserved(self, shape):
        points = np.arange(1.0, 1.0 + math.prod(shape)).reshape(shape)
        values = dscaled(points, 2.0)
        assert isinstance(values, np.ndarray)
        assert values.shape == shape
        np.testing.assert_array_equal(values, points / 2.0)

    def test_sequence_input(self):
        np.testing.assert_array_equal(dscaled([2.0, 4.0], 2.0), [1.0, 2.0])

    def test_diagnostic_becomes_nan(self, sink):
        assert math.isnan(dscaled(1.0, -1.0, sink=sink))
        assert sink.sources() == ["dscaled"]

    def test_diagnostic_reported_per_element(self, sink):
        values = dscaled([1.0, 2.0, 3.0], 0.0, sink=sink)
        assert np.all(np.isnan(values))
        assert len(sink) == 3

    def test_ieee_semantics_without_warnings(self):
        with np.errstate(all="raise"):
            assert dscaled(0.0, give_log=True) == -math.inf

    def test_missing_point(self):
        with pytest.raises(TypeError):
            dscaled(scale=2.0)

    def test_wrapper_metadata(self):
        assert dscaled.__name__ == "dscaled"
        assert dscaled.kernel is _dscaled


class TestVariateGenerator:
    def test_single_variate_is_scalar(self):
        value = rshift(1, 10.0, source=ScriptedRandomSource([0.25]))
        assert type(value) is float
        assert value == 10.25

    def test_batch_in_draw_order(self):
        values = rshift(3, shift=1.0, source=ScriptedRandomSource([0.1, 0.2, 0.3]))
        np.testing.assert_array_almost_equal(values, [1.1, 1.2, 1.3])

    def test_zero_count_is_empty_array(self):
        values = rshift(0, 1.0, source=FailingRandomSource())
        assert isinstance(values, np.ndarray)
        assert values.shape == (0,)

    @pytest.mark.parametrize("n", [-1, 2.5, "3", None])
    def test_invalid_count(self, n):
        with pytest.raises(ValueError):
            rshift(n, 1.0)

    def test_numpy_integer_count(self):
        values = rshift(np.int64(2), 1.0, source=ScriptedRandomSource([0.5, 0.5]))
        assert values.shape == (2,)

    def test_invalid_parameter_fills_batch_once(self, sink):
        values = rshift(4, math.inf, source=FailingRandomSource(), sink=sink)
        assert values.shape == (4,)
        assert np.all(np.isnan(values))
        assert sink.sources() == ["rshift"]

    def test_default_source_not_created_without_draws(self):
        values = rshift(5, 0.0, source_factory=failing_source_factory)
        np.testing.assert_array_equal(values, np.full(5, -1.0))

    def test_default_source_created_once_per_call(self):
        factory = CountingSourceFactory()
        rshift(3, 1.0, source_factory=factory)
        rshift(3, 1.0, source_factory=factory)
        assert factory.created == 2

    def test_wrapper_metadata(self):
        assert rshift.__name__ == "rshift"
        assert rshift.kernel is _rshift


class TestAsArray:
    def test_scalar_becomes_one_dimensional(self):
        values = as_array(3.0)
        assert values.shape == (1,)
        assert values.dtype == np.float64

    def test_array_passthrough(self):
        np.testing.assert_array_equal(as_array([1, 2, 3]), [1.0, 2.0, 3.0])
