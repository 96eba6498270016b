"""
Numeric Primitives
==================

Helper operations shared by the scalar kernels.

- scaled exponent composition (:func:`ldexp`);
- log-scale aware zero/one and their tail variants (:func:`d_zero`,
  :func:`d_one`, :func:`dt_zero`, :func:`dt_one`);
- tail-aware probability transforms (:func:`dt_val`, :func:`dt_clog`,
  :func:`dt_qiv`);
- stable ``log(1 - exp(x))`` and ``log(1 + exp(x))``;
- the common prologue of every quantile function
  (:func:`check_probability`, :func:`quantile_boundaries`).

Notes
-----
Every helper works on ``numpy.float64`` values so IEEE-754 semantics hold:
``log(0)`` is ``-inf`` and overflow gives ``inf`` instead of Python
exceptions. Callers evaluate under ``numpy.errstate(all="ignore")``.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.numeric.constants import M_LN2, ML_NEGINF

type Double = np.float64 | float


def ldexp(x: Double, exponent: int) -> np.float64:
    """
    Compose ``x * 2**exponent`` exactly.

    The exponent is applied to the binary representation, so no intermediate
    product can overflow or lose bits while the result is representable.
    """
    return np.ldexp(np.float64(x), exponent)


def forceint(x: Double) -> np.float64:
    """Round to the nearest integer, ties to even."""
    return np.rint(np.float64(x))


def is_nonint(x: Double) -> bool:
    """Check whether ``x`` is farther than a relative ``1e-7`` from an integer."""
    x = np.float64(x)
    return bool(np.abs(x - np.rint(x)) > 1e-7 * max(1.0, np.abs(x)))


def d_zero(give_log: bool) -> np.float64:
    """Probability zero: ``-inf`` on log scale, ``0`` otherwise."""
    return ML_NEGINF if give_log else np.float64(0.0)


def d_one(give_log: bool) -> np.float64:
    """Probability one: ``0`` on log scale, ``1`` otherwise."""
    return np.float64(0.0) if give_log else np.float64(1.0)


def dt_zero(lower_tail: bool, log_p: bool) -> np.float64:
    """Probability zero of the requested tail."""
    return d_zero(log_p) if lower_tail else d_one(log_p)


def dt_one(lower_tail: bool, log_p: bool) -> np.float64:
    """Probability one of the requested tail."""
    return d_one(log_p) if lower_tail else d_zero(log_p)


def d_val(x: Double, give_log: bool) -> np.float64:
    return np.log(x) if give_log else np.float64(x)


def d_exp(x: Double, give_log: bool) -> np.float64:
    """Map a log-probability to the requested scale."""
    return np.float64(x) if give_log else np.exp(x)


def d_clog(p: Double, give_log: bool) -> np.float64:
    """``1 - p`` on the requested scale."""
    return np.log1p(-p) if give_log else np.float64(0.5 - p + 0.5)


def dt_val(x: Double, lower_tail: bool, log_p: bool) -> np.float64:
    """Lower-tail probability ``x`` mapped to the requested tail and scale."""
    return d_val(x, log_p) if lower_tail else d_clog(x, log_p)


def log1mexp(x: Double) -> np.float64:
    """
    Compute ``log(1 - exp(x))`` for ``x <= 0``.

    Switches between ``log(-expm1(x))`` and ``log1p(-exp(x))`` at ``-ln 2``
    (Maechler, 2012) so neither branch cancels.
    """
    x = np.float64(x)
    return np.log(-np.expm1(x)) if x > -M_LN2 else np.log1p(-np.exp(x))


def log1pexp(x: Double) -> np.float64:
    """Compute ``log(1 + exp(x))`` without overflow."""
    x = np.float64(x)
    if x <= 18.0:
        return np.log1p(np.exp(x))
    if x > 33.3:
        return x
    return x + np.exp(-x)


def dt_clog(p: Double, lower_tail: bool, log_p: bool) -> np.float64:
    """
    ``log(1 - p)`` for a lower-tail ``p`` (``log(p)`` for an upper-tail one).

    ``p`` is on the scale selected by ``log_p``.
    """
    if lower_tail:
        return log1mexp(p) if log_p else np.log1p(-np.float64(p))
    return np.float64(p) if log_p else np.log(p)


def dt_qiv(p: Double, lower_tail: bool, log_p: bool) -> np.float64:
    """Convert ``p`` to a linear-scale lower-tail probability."""
    if log_p:
        return np.exp(p) if lower_tail else -np.expm1(p)
    return np.float64(p) if lower_tail else np.float64(0.5 - p + 0.5)


def check_probability(p: Double, log_p: bool, source: str) -> None:
    """
    Validate a probability argument.

    Raises
    ------
    ArgumentDomainError
        If ``p`` is outside ``[0, 1]`` (or ``(-inf, 0]`` on log scale).
    """
    if (log_p and p > 0) or (not log_p and (p < 0 or p > 1)):
        raise ArgumentDomainError(source)


def quantile_boundaries(
    p: Double,
    left: Double,
    right: Double,
    lower_tail: bool,
    log_p: bool,
    source: str,
) -> np.float64 | None:
    """
    Shared prologue of the quantile functions.

    Parameters
    ----------
    p : float
        Probability on the scale selected by ``log_p``.
    left, right : float
        Ends of the support returned for the extreme probabilities.
    lower_tail, log_p : bool
        Tail and scale flags of the quantile call.
    source : str
        Name used in the diagnostic.

    Returns
    -------
    numpy.float64 or None
        The boundary value when ``p`` is an extreme probability, ``None``
        when the caller must evaluate its own formula.

    Raises
    ------
    ArgumentDomainError
        If ``p`` is not a probability.
    """
    check_probability(p, log_p, source)
    if log_p:
        if p == 0:
            return np.float64(right if lower_tail else left)
        if p == ML_NEGINF:
            return np.float64(left if lower_tail else right)
    else:
        if p == 0:
            return np.float64(left if lower_tail else right)
        if p == 1:
            return np.float64(right if lower_tail else left)
    return None


__all__ = [
    "ldexp",
    "forceint",
    "is_nonint",
    "d_zero",
    "d_one",
    "dt_zero",
    "dt_one",
    "d_val",
    "d_exp",
    "d_clog",
    "dt_val",
    "log1mexp",
    "log1pexp",
    "dt_clog",
    "dt_qiv",
    "check_probability",
    "quantile_boundaries",
]
