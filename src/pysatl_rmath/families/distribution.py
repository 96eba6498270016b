"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from pysatl_rmath.distributions.sampling import ArraySample
from pysatl_rmath.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pysatl_rmath.families.facade import DistributionFacade
    from pysatl_rmath.families.parametric_family import ParametricFamily
    from pysatl_rmath.rng.source import RandomSource
    from pysatl_rmath.types import ArrayLike, DistributionType, Result


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution:
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Mapping[str, float]
        Parameter values for this distribution.
    _facade : DistributionFacade
        Facade providing the operations, its source and its sink.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Mapping[str, float]
    _facade: DistributionFacade

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """Get the parametric family this distribution belongs to."""
        return self._facade.family

    def query_method(self, characteristic_name: CharacteristicName | str) -> Callable[..., Result]:
        """
        Get a characteristic with this distribution's parameters bound.

        Parameters
        ----------
        characteristic_name : CharacteristicName or str
            ``pdf``, ``pmf``, ``cdf`` or ``ppf``.

        Returns
        -------
        Callable
            Function of the evaluation point and the characteristic's flags.

        Raises
        ------
        KeyError
            If the family does not provide the characteristic.
        """
        func = self.family.characteristic(characteristic_name)
        return partial(func, sink=self._facade.sink, **self.parameters)

    def calculate_characteristic(
        self, characteristic_name: CharacteristicName | str, value: ArrayLike, **options: Any
    ) -> Result:
        return self.query_method(characteristic_name)(value, **options)

    def pdf(self, x: ArrayLike, give_log: bool = False) -> Result:
        """Density, or mass for a discrete family, at ``x``."""
        return self._facade.density(x, give_log=give_log, **self.parameters)

    pmf = pdf

    def cdf(self, q: ArrayLike, lower_tail: bool = True, log_p: bool = False) -> Result:
        return self._facade.cumulative(q, lower_tail=lower_tail, log_p=log_p, **self.parameters)

    def ppf(self, p: ArrayLike, lower_tail: bool = True, log_p: bool = False) -> Result:
        return self._facade.quantile(p, lower_tail=lower_tail, log_p=log_p, **self.parameters)

    def sample(self, n: int, source: RandomSource | None = None) -> ArraySample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate.
        source : RandomSource, optional
            Per-call override of the facade's random source.

        Returns
        -------
        ArraySample
            Samples of shape ``(n, 1)`` in draw order.
        """
        values = self._facade.variate(n, source=source, **self.parameters)
        return ArraySample.from_variates(values)


__all__ = [
    "ParametricFamilyDistribution",
]
