"""
Random Sources
==============

The uniform random source is the only stateful collaborator of the variate
generators. Generators depend on the :class:`RandomSource` protocol, never on
a concrete generator, so tests can substitute scripted sources.

- :class:`RandomSource`: protocol with a single ``unif_rand`` operation.
- :class:`NumPyRandomSource`: adapter over :class:`numpy.random.Generator`.
- :class:`LazyRandomSource`: builds its delegate on the first draw.
- :func:`default_random_source`: factory used when a caller omits a source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class RandomSource(Protocol):
    """
    Protocol for uniform random sources.

    Notes
    -----
    ``unif_rand`` must return a fresh value in the open interval ``(0, 1)``
    on every call. Sources are not required to be thread-safe; callers
    serialize access.
    """

    def unif_rand(self) -> float: ...


type RandomSourceFactory = Callable[[], RandomSource]
"""Zero-argument callable producing a fresh :class:`RandomSource`."""


class NumPyRandomSource:
    """
    Uniform source backed by a NumPy bit generator.

    Parameters
    ----------
    seed : int, numpy.random.SeedSequence, numpy.random.Generator or None
        Seed forwarded to :func:`numpy.random.default_rng`, or an existing
        generator to draw from.
    """

    __slots__ = ("_generator",)

    def __init__(
        self, seed: int | np.random.SeedSequence | np.random.Generator | None = None
    ) -> None:
        if isinstance(seed, np.random.Generator):
            self._generator = seed
        else:
            self._generator = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        """Underlying NumPy generator."""
        return self._generator

    def unif_rand(self) -> float:
        # Generator.random() samples [0, 1)
        u = self._generator.random()
        while u <= 0.0:
            u = self._generator.random()
        return float(u)


class LazyRandomSource:
    """
    Source that builds its delegate on the first draw.

    Parameters
    ----------
    factory : RandomSourceFactory
        Called at most once, when the first uniform is requested.
    """

    __slots__ = ("_factory", "_delegate")

    def __init__(self, factory: RandomSourceFactory) -> None:
        self._factory = factory
        self._delegate: RandomSource | None = None

    @property
    def materialized(self) -> bool:
        """Whether the delegate source has been created."""
        return self._delegate is not None

    def unif_rand(self) -> float:
        if self._delegate is None:
            self._delegate = self._factory()
        return self._delegate.unif_rand()


def default_random_source() -> RandomSource:
    """Create a fresh, entropy-seeded :class:`NumPyRandomSource`."""
    return NumPyRandomSource()


__all__ = [
    "RandomSource",
    "RandomSourceFactory",
    "NumPyRandomSource",
    "LazyRandomSource",
    "default_random_source",
]
