"""
Tests for the distribution facade.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_rmath.diagnostics import NULL_SINK
from pysatl_rmath.families import ParametricFamily
from pysatl_rmath.families.builtins import dgeom, dnorm, pnorm, qnorm, rnorm
from pysatl_rmath.families.configuration import configure_families_register
from pysatl_rmath.rng import NumPyRandomSource
from pysatl_rmath.types import CharacteristicName, FamilyName, UnivariateContinuous
from tests.utils.mocks import CountingSourceFactory, FailingRandomSource, ScriptedRandomSource


class TestDistributionFacade:
    def setup_method(self):
        self.registry = configure_families_register()
        self.normal = self.registry.get(FamilyName.NORMAL)

    def test_defaults(self):
        facade = self.normal.bind()
        assert facade.family is self.normal
        assert facade.sink is NULL_SINK
        assert "Normal" in repr(facade)

    def test_operations_match_module_functions(self):
        facade = self.normal.bind()
        x = np.array([-1.0, 0.0, 2.5])

        np.testing.assert_array_equal(facade.density(x, 1.0, 2.0), dnorm(x, 1.0, 2.0))
        np.testing.assert_array_equal(
            facade.density(x, mu=1.0, sigma=2.0, give_log=True), dnorm(x, 1.0, 2.0, give_log=True)
        )
        assert facade.cumulative(0.0, lower_tail=False, log_p=True) == pnorm(
            0.0, lower_tail=False, log_p=True
        )
        assert facade.quantile(0.975, 1.0) == qnorm(0.975, 1.0)

    def test_discrete_density_uses_mass(self):
        facade = self.registry.get(FamilyName.GEOMETRIC).bind()
        assert facade.density(2.0, 0.3) == dgeom(2.0, 0.3)

    def test_bound_sink_receives_diagnostics(self, sink):
        facade = self.normal.bind(sink=sink)

        assert math.isnan(facade.density(0.0, 0.0, -1.0))
        assert math.isnan(facade.quantile(2.0))
        assert np.all(np.isnan(facade.variate(3, 0.0, -1.0)))
        assert sink.sources() == ["dnorm", "qnorm", "rnorm"]

    def test_bound_source_is_used_and_advanced(self):
        facade = self.normal.bind(source=NumPyRandomSource(9))
        reference = rnorm(4, source=NumPyRandomSource(9))

        np.testing.assert_array_equal(
            np.concatenate([facade.variate(2), facade.variate(2)]), reference
        )

    def test_per_call_source_override(self):
        facade = self.normal.bind(source=FailingRandomSource())
        value = facade.variate(1, source=ScriptedRandomSource([0.5, 0.0]))
        assert value == 0.0

    def test_default_source_created_lazily_once(self):
        factory = CountingSourceFactory()
        family = ParametricFamily(
            name="LazyNormal",
            distr_type=UnivariateContinuous,
            parameter_names=("mu", "sigma"),
            distr_characteristics={
                CharacteristicName.PDF: dnorm,
                CharacteristicName.CDF: pnorm,
                CharacteristicName.PPF: qnorm,
            },
            sampler=rnorm,
            source_factory=factory,
        )
        facade = family.bind()

        facade.density(0.0)
        facade.variate(5, 0.0, 0.0)
        assert factory.created == 0

        facade.variate(3)
        facade.variate(3)
        assert factory.created == 1

        family.bind().variate(1)
        assert factory.created == 2

    def test_count_validation(self):
        facade = self.normal.bind()
        with pytest.raises(ValueError):
            facade.variate(-2)
