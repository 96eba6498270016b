"""
Parametric family definitions.

This module contains the main class describing a family of distributions:
its parameters, its vectorized characteristics (density or mass, cumulative,
quantile) and its variate generator, together with factories for facades and
frozen distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import inspect
from typing import TYPE_CHECKING

from pysatl_rmath.families.distribution import ParametricFamilyDistribution
from pysatl_rmath.families.facade import DistributionFacade
from pysatl_rmath.rng.source import default_random_source
from pysatl_rmath.types import CharacteristicName, DistributionType, EuclideanDistributionType, Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from typing import Any

    from pysatl_rmath.diagnostics import DiagnosticSink
    from pysatl_rmath.rng.source import RandomSource, RandomSourceFactory
    from pysatl_rmath.types import Result

    type Characteristic = Callable[..., Result]


class ParametricFamily:
    """
    A family of distributions sharing one set of named parameters.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Distribution type descriptor (kind and dimension).
    parameter_names : Sequence[str]
        Ordered parameter names, as accepted positionally by every
        characteristic and by the sampler.
    distr_characteristics : dict[CharacteristicName, Callable]
        Vectorized characteristics. Continuous families provide ``PDF``,
        discrete ones ``PMF``; both provide ``CDF`` and ``PPF``.
    sampler : Callable
        Batch variate generator ``(n, *params, source=None, sink=...)``.
    source_factory : RandomSourceFactory, optional
        Factory of the random source bound by facades created without one.

    Raises
    ------
    ValueError
        If a required characteristic is missing.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        parameter_names: Sequence[str],
        distr_characteristics: dict[CharacteristicName, Characteristic],
        sampler: Callable[..., Result],
        source_factory: RandomSourceFactory = default_random_source,
    ):
        self._name = name
        self._distr_type = distr_type
        self.parameter_names: tuple[str, ...] = tuple(parameter_names)
        self.distr_characteristics = dict(distr_characteristics)
        self.sampler = sampler
        self.source_factory = source_factory

        required = (self.density_characteristic, CharacteristicName.CDF, CharacteristicName.PPF)
        missing = [str(c) for c in required if c not in self.distr_characteristics]
        if missing:
            raise ValueError(f"Family '{name}' is missing characteristics: {', '.join(missing)}")

        # Defaults come from the sampler signature, which lists only parameters
        signature = inspect.signature(sampler)
        self.parameter_defaults: dict[str, float] = {}
        for pname in self.parameter_names:
            parameter = signature.parameters.get(pname)
            if parameter is not None and parameter.default is not inspect.Parameter.empty:
                self.parameter_defaults[pname] = parameter.default

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        return self._distr_type

    @property
    def kind(self) -> Kind:
        """Continuous or discrete, as declared by the distribution type."""
        if isinstance(self._distr_type, EuclideanDistributionType):
            return self._distr_type.kind
        return Kind.CONTINUOUS

    @property
    def density_characteristic(self) -> CharacteristicName:
        """``PMF`` for discrete families, ``PDF`` otherwise."""
        if isinstance(self._distr_type, EuclideanDistributionType):
            return self._distr_type.density_characteristic
        return CharacteristicName.PDF

    def characteristic(self, name: CharacteristicName | str) -> Characteristic:
        """
        Fetch a vectorized characteristic by name.

        Raises
        ------
        KeyError
            If the family does not provide it.
        """
        return self.distr_characteristics[CharacteristicName(name)]

    def bind(
        self,
        source: RandomSource | None = None,
        sink: DiagnosticSink | None = None,
    ) -> DistributionFacade:
        """
        Bind the four operations of this family to a random source and a sink.

        Parameters
        ----------
        source : RandomSource, optional
            Source used by :meth:`DistributionFacade.variate`. When omitted
            the facade creates its own from :attr:`source_factory` at the
            first draw.
        sink : DiagnosticSink, optional
            Receiver of diagnostic events, a no-op sink by default.

        Returns
        -------
        DistributionFacade
            A new facade; facades never share a default source.
        """
        return DistributionFacade(self, source=source, sink=sink)

    def resolve_parameters(self, **parameters_values: Any) -> dict[str, float]:
        """
        Complete parameter values with the family defaults.

        Raises
        ------
        TypeError
            If a name is unknown or a parameter without default is missing.
        """
        unknown = set(parameters_values) - set(self.parameter_names)
        if unknown:
            raise TypeError(
                f"Unknown parameters for family '{self.name}': {', '.join(sorted(unknown))}"
            )
        resolved: dict[str, float] = {}
        for pname in self.parameter_names:
            if pname in parameters_values:
                resolved[pname] = parameters_values[pname]
            elif pname in self.parameter_defaults:
                resolved[pname] = self.parameter_defaults[pname]
            else:
                raise TypeError(f"Missing parameter '{pname}' for family '{self.name}'")
        return resolved

    def distribution(
        self,
        source: RandomSource | None = None,
        sink: DiagnosticSink | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with frozen parameter values.

        Parameters
        ----------
        source : RandomSource, optional
            Random source of the distribution's facade.
        sink : DiagnosticSink, optional
            Diagnostic sink of the distribution's facade.
        **parameters_values
            Parameter values; omitted ones take the family defaults.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Notes
        -----
        Values are not validated here: invalid values evaluate to NaN.
        """
        parameters = self.resolve_parameters(**parameters_values)
        return ParametricFamilyDistribution(
            self.name, self._distr_type, parameters, self.bind(source=source, sink=sink)
        )

    __call__ = distribution

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self.name!r}, parameters={self.parameter_names!r})"
