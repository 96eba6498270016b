"""
Vectorization Adapters
======================

Lift scalar kernels into the public, shape-preserving functions.

- :func:`evaluator`: density, cumulative and quantile kernels
  ``(x, *params, **flags) -> float``.
- :func:`variate_generator`: variate kernels ``(*params, source) -> float``
  turned into batch generators ``(n, *params, source=None)``.

Notes
-----
- Parameters are bound once per call through the kernel signature (defaults
  applied) and numeric values are coerced to ``numpy.float64``, so kernels
  always run with IEEE semantics.
- Evaluation runs under ``numpy.errstate(all="ignore")``; under/overflow are
  handled by explicit boundary checks inside the kernels.
- A :class:`~pysatl_rmath.diagnostics.DistributionDiagnostic` raised by a
  kernel is reported to the sink and replaced by its sentinel value; it
  never propagates to the caller.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import inspect
import operator
from functools import wraps
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_rmath.diagnostics import NULL_SINK, DistributionDiagnostic
from pysatl_rmath.rng.source import LazyRandomSource, default_random_source

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_rmath.diagnostics import DiagnosticSink
    from pysatl_rmath.rng.source import RandomSource, RandomSourceFactory
    from pysatl_rmath.types import ArrayLike, NumericArray, Result

    type Kernel = Callable[..., Any]


def _as_double(value: Any) -> Any:
    if isinstance(value, bool | np.bool_):
        return value
    if isinstance(value, int | float | np.number):
        return np.float64(value)
    return value


def _bind_arguments(
    signature: inspect.Signature, args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    bound = signature.bind_partial(*args, **kwargs)
    bound.apply_defaults()
    return {name: _as_double(value) for name, value in bound.arguments.items()}


def _as_count(n: Any) -> int:
    try:
        count = operator.index(n)
    except TypeError as exc:
        raise ValueError(f"Variate count must be an integer, got {n!r}") from exc
    if count < 0:
        raise ValueError(f"Variate count must be non-negative, got {count}")
    return count


def evaluator(kernel: Kernel) -> Callable[..., Result]:
    """
    Lift a scalar kernel to scalars and arrays.

    Parameters
    ----------
    kernel : Callable
        Scalar function whose first parameter is the evaluation point and
        whose remaining parameters are distribution parameters and flags.

    Returns
    -------
    Callable
        Function with the kernel's signature plus a keyword-only ``sink``.
        Returns ``float`` for a scalar point and an array of the point's
        shape otherwise.
    """
    signature = inspect.signature(kernel)
    point_name = next(iter(signature.parameters))

    public_name = kernel.__name__.lstrip("_")

    @wraps(kernel)
    def wrapper(*args: Any, sink: DiagnosticSink = NULL_SINK, **kwargs: Any) -> Result:
        arguments = _bind_arguments(signature, args, kwargs)
        try:
            point = arguments.pop(point_name)
        except KeyError:
            raise TypeError(f"{public_name}() missing argument '{point_name}'") from None
        points = np.asarray(point, dtype=np.float64)

        def evaluate(x: np.float64) -> float:
            try:
                return kernel(x, **arguments)
            except DistributionDiagnostic as diagnostic:
                sink.emit(diagnostic.event)
                return diagnostic.value

        with np.errstate(all="ignore"):
            if points.ndim == 0:
                return float(evaluate(points[()]))
            values = np.fromiter(
                (evaluate(x) for x in points.flat), dtype=np.float64, count=points.size
            )
        return values.reshape(points.shape)

    wrapper.__name__ = wrapper.__qualname__ = public_name
    setattr(wrapper, "kernel", kernel)
    return wrapper


def variate_generator(kernel: Kernel) -> Callable[..., Result]:
    """
    Lift a single-draw variate kernel to a batch generator.

    Parameters
    ----------
    kernel : Callable
        Function ``(*params, source) -> float`` drawing one variate.

    Returns
    -------
    Callable
        Function ``(n, *params, source=None, sink=NULL_SINK)`` returning a
        ``float`` when ``n == 1`` and an array of length ``n`` otherwise.

    Notes
    -----
    - Output ``i`` is the ``i``-th draw; the source is advanced sequentially.
    - Parameters are validated by the kernel before it draws. The first
      diagnostic fills every remaining output with its sentinel value and is
      reported once for the batch.
    - Without an explicit ``source`` a default one is created, and only if a
      draw actually happens.

    Raises
    ------
    ValueError
        If ``n`` is not a non-negative integer.
    """
    signature = inspect.signature(kernel)

    @wraps(kernel)
    def wrapper(
        n: int,
        *args: Any,
        source: RandomSource | None = None,
        sink: DiagnosticSink = NULL_SINK,
        source_factory: RandomSourceFactory = default_random_source,
        **kwargs: Any,
    ) -> Result:
        count = _as_count(n)
        arguments = _bind_arguments(signature, args, kwargs)
        draw_source = LazyRandomSource(source_factory) if source is None else source

        values = np.empty(count, dtype=np.float64)
        with np.errstate(all="ignore"):
            for i in range(count):
                try:
                    values[i] = kernel(**arguments, source=draw_source)
                except DistributionDiagnostic as diagnostic:
                    sink.emit(diagnostic.event)
                    values[i:] = diagnostic.value
                    break

        if count == 1:
            return float(values[0])
        return values

    wrapper.__name__ = wrapper.__qualname__ = kernel.__name__.lstrip("_")
    setattr(wrapper, "kernel", kernel)
    return wrapper


def as_array(values: ArrayLike) -> NumericArray:
    """Return ``values`` as a one-dimensional float64 array."""
    return np.atleast_1d(np.asarray(values, dtype=np.float64))


__all__ = [
    "evaluator",
    "variate_generator",
    "as_array",
]
