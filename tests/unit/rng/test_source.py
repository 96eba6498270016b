"""
Tests for random sources and the lazy default-source wrapper.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_rmath.rng import (
    LazyRandomSource,
    NumPyRandomSource,
    RandomSource,
    default_random_source,
)
from tests.utils.mocks import CountingSourceFactory, failing_source_factory


class TestNumPyRandomSource:
    def test_satisfies_protocol(self):
        assert isinstance(NumPyRandomSource(1), RandomSource)

    def test_same_seed_same_stream(self):
        first = NumPyRandomSource(42)
        second = NumPyRandomSource(42)
        assert [first.unif_rand() for _ in range(5)] == [second.unif_rand() for _ in range(5)]

    def test_values_in_open_unit_interval(self):
        source = NumPyRandomSource(7)
        values = np.array([source.unif_rand() for _ in range(2000)])
        assert np.all(values > 0.0)
        assert np.all(values < 1.0)

    def test_wraps_existing_generator(self):
        generator = np.random.default_rng(3)
        source = NumPyRandomSource(generator)
        assert source.generator is generator
        assert source.unif_rand() == pytest.approx(np.random.default_rng(3).random())

    def test_default_factory_builds_numpy_source(self):
        assert isinstance(default_random_source(), NumPyRandomSource)


class TestLazyRandomSource:
    def test_factory_not_called_before_first_draw(self):
        lazy = LazyRandomSource(failing_source_factory)
        assert not lazy.materialized

    def test_factory_called_once(self):
        factory = CountingSourceFactory()
        lazy = LazyRandomSource(factory)

        values = [lazy.unif_rand() for _ in range(3)]

        assert factory.created == 1
        assert lazy.materialized
        expected = NumPyRandomSource(2026)
        assert values == [expected.unif_rand() for _ in range(3)]
