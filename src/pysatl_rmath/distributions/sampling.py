"""
Sample Containers
=================

Containers for batches of variates returned by frozen distributions.
Rows are draws in generation order, columns are coordinates; every family of
this package is univariate, so samples have exactly one column.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

from pysatl_rmath.distributions.vectorization import as_array

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_rmath.types import ArrayLike, NumericArray


class Sample(Protocol):
    """Read-only view of a batch of draws, shaped ``(n, d)``."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Sample backed by a 2D float array.

    Parameters
    ----------
    data : numpy.ndarray
        Array of shape ``(n, d)``; row ``i`` is the ``i``-th draw.

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    __slots__ = ("data", "dimension")

    def __init__(self, data: NumericArray) -> None:
        if data.ndim != 2:
            raise ValueError(f"ArraySample expects a 2D array of draws, got ndim={data.ndim}")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_variates(cls, values: ArrayLike) -> ArraySample:
        """Wrap the output of a univariate generator as an ``(n, 1)`` sample."""
        return cls(as_array(values).reshape(-1, 1))

    @property
    def array(self) -> NumericArray:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    @property
    def variates(self) -> NumericArray:
        """First coordinate of every draw, as a 1D array."""
        return self.data[:, 0]

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[NumericArray]:
        yield from self.data

    def __repr__(self) -> str:
        return f"ArraySample(n={len(self)}, dimension={self.dimension})"


__all__ = [
    "Sample",
    "ArraySample",
]
