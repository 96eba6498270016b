"""
Distribution facade.

A facade bundles the four operations of one family (density, cumulative,
quantile, variate) with a random source and a diagnostic sink.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_rmath.diagnostics import NULL_SINK
from pysatl_rmath.rng.source import LazyRandomSource
from pysatl_rmath.types import CharacteristicName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_rmath.diagnostics import DiagnosticSink
    from pysatl_rmath.families.parametric_family import ParametricFamily
    from pysatl_rmath.rng.source import RandomSource
    from pysatl_rmath.types import ArrayLike, Result


class DistributionFacade:
    """
    Capability set of one family bound to a random source and a sink.

    Parameters
    ----------
    family : ParametricFamily
        Family providing the characteristics and the sampler.
    source : RandomSource, optional
        Source for :meth:`variate`. When omitted, a source is built from the
        family's factory at the first draw and reused afterwards.
    sink : DiagnosticSink, optional
        Receiver of the diagnostics of every operation.

    Notes
    -----
    Distribution parameters are passed positionally in
    ``family.parameter_names`` order or by name.
    """

    __slots__ = ("_family", "_source", "_sink")

    def __init__(
        self,
        family: ParametricFamily,
        source: RandomSource | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._family = family
        self._source: RandomSource = (
            LazyRandomSource(family.source_factory) if source is None else source
        )
        self._sink: DiagnosticSink = NULL_SINK if sink is None else sink

    @property
    def family(self) -> ParametricFamily:
        return self._family

    @property
    def source(self) -> RandomSource:
        """Random source used when :meth:`variate` gets no override."""
        return self._source

    @property
    def sink(self) -> DiagnosticSink:
        return self._sink

    def density(
        self, x: ArrayLike, *parameters: Any, give_log: bool = False, **named: Any
    ) -> Result:
        """Density (continuous) or mass (discrete) at ``x``."""
        func = self._family.characteristic(self._family.density_characteristic)
        return func(x, *parameters, give_log=give_log, sink=self._sink, **named)

    def cumulative(
        self,
        q: ArrayLike,
        *parameters: Any,
        lower_tail: bool = True,
        log_p: bool = False,
        **named: Any,
    ) -> Result:
        """``P(X <= q)``, or ``P(X > q)`` when ``lower_tail`` is false."""
        func = self._family.characteristic(CharacteristicName.CDF)
        return func(q, *parameters, lower_tail=lower_tail, log_p=log_p, sink=self._sink, **named)

    def quantile(
        self,
        p: ArrayLike,
        *parameters: Any,
        lower_tail: bool = True,
        log_p: bool = False,
        **named: Any,
    ) -> Result:
        """Inverse of :meth:`cumulative` for the same tail and scale."""
        func = self._family.characteristic(CharacteristicName.PPF)
        return func(p, *parameters, lower_tail=lower_tail, log_p=log_p, sink=self._sink, **named)

    def variate(
        self,
        n: int,
        *parameters: Any,
        source: RandomSource | None = None,
        **named: Any,
    ) -> Result:
        """
        Draw ``n`` variates.

        Parameters
        ----------
        n : int
            Number of variates.
        *parameters
            Distribution parameters.
        source : RandomSource, optional
            Per-call override of the bound source.

        Returns
        -------
        float or numpy.ndarray
            A scalar for ``n == 1``, an array of length ``n`` otherwise.
        """
        draw_source = self._source if source is None else source
        return self._family.sampler(n, *parameters, source=draw_source, sink=self._sink, **named)

    def __repr__(self) -> str:
        return f"DistributionFacade(family={self._family.name!r})"
