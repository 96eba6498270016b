"""
Saddle-Point Helpers
====================

Catherine Loader's saddle-point expansions ("Fast and Accurate Computation of
Binomial Probabilities", 2000) used by the gamma, Poisson-type and binomial-type
densities:

- :func:`stirlerr`: error of Stirling's formula, ``log(n!) - log(sqrt(2*pi*n)*(n/e)**n)``;
- :func:`bd0`: deviance term ``x*log(x/np) + np - x`` without cancellation;
- :func:`dpois_raw`: Poisson-type density for real ``x``;
- :func:`dbinom_raw`: binomial-type density for real ``x`` and ``n``.

Notes
-----
Computing ``lgamma(x + 1) - x*log(lambda) ...`` directly loses most digits
when ``x`` is close to ``lambda``; the expansions below keep full relative
accuracy there.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
from scipy.special import gammaln

from pysatl_rmath.diagnostics import ArgumentDomainError
from pysatl_rmath.numeric.constants import DBL_MIN, M_2PI, M_LN_2PI, M_LN_SQRT_2PI
from pysatl_rmath.numeric.primitives import Double, d_exp, d_one, d_zero

_S0 = 1.0 / 12
_S1 = 1.0 / 360
_S2 = 1.0 / 1260
_S3 = 1.0 / 1680
_S4 = 1.0 / 1188

# stirlerr(n / 2) for n = 0, ..., 30; the first entry is a placeholder
_SFERR_HALVES = (
    0.0,
    0.1534264097200273452913848,
    0.0810614667953272582196702,
    0.0548141210519176538961390,
    0.0413406959554092940938221,
    0.03316287351993628748511048,
    0.02767792568499833914878929,
    0.02374616365629749597132920,
    0.02079067210376509311152277,
    0.01848845053267318523077934,
    0.01664469118982119216319487,
    0.01513497322191737887351255,
    0.01387612882307074799874573,
    0.01281046524292022692424986,
    0.01189670994589177009505572,
    0.01110455975820691732662991,
    0.010411265261972096497478567,
    0.009799416126158803298389475,
    0.009255462182712732917728637,
    0.008768700134139385462952823,
    0.008330563433362871256469318,
    0.007934114564314020547248100,
    0.007573675487951840794972024,
    0.007244554301320383179543912,
    0.006942840107209529865664152,
    0.006665247032707682442354394,
    0.006408994188004207068439631,
    0.006171712263039457647532867,
    0.005951370112758847735624416,
    0.005746216513010115682023589,
    0.005554733551962801371038690,
)


def stirlerr(n: Double) -> np.float64:
    """
    Error term of Stirling's approximation to ``log(n!)``.

    Exact table values are used for half-integers up to 15, the asymptotic
    series beyond.
    """
    n = np.float64(n)
    if n <= 15.0:
        nn = n + n
        if nn == int(nn):
            return np.float64(_SFERR_HALVES[int(nn)])
        return gammaln(n + 1.0) - (n + 0.5) * np.log(n) + n - M_LN_SQRT_2PI

    nn = n * n
    if n > 500:
        return (_S0 - _S1 / nn) / n
    if n > 80:
        return (_S0 - (_S1 - _S2 / nn) / nn) / n
    if n > 35:
        return (_S0 - (_S1 - (_S2 - _S3 / nn) / nn) / nn) / n
    return (_S0 - (_S1 - (_S2 - (_S3 - _S4 / nn) / nn) / nn) / nn) / n


def bd0(x: Double, np_: Double) -> np.float64:
    """
    Evaluate the deviance term ``x*log(x/np) + np - x``.

    When ``x`` and ``np`` are close the series in ``v = (x - np)/(x + np)``
    is summed instead.

    Raises
    ------
    ArgumentDomainError
        If either argument is non-finite or ``np == 0``.
    """
    x = np.float64(x)
    np_ = np.float64(np_)
    if not np.isfinite(x) or not np.isfinite(np_) or np_ == 0.0:
        raise ArgumentDomainError("bd0")

    if np.abs(x - np_) < 0.1 * (x + np_):
        v = (x - np_) / (x + np_)
        s = (x - np_) * v
        if np.abs(s) < DBL_MIN:
            return s
        ej = 2 * x * v
        v = v * v
        for j in range(1, 1000):
            ej *= v
            s1 = s + ej / (2 * j + 1)
            if s1 == s:
                return s1
            s = s1

    return x * np.log(x / np_) + np_ - x


def dpois_raw(x: Double, lambda_: Double, give_log: bool) -> np.float64:
    """
    Poisson-type density ``lambda**x * exp(-lambda) / gamma(x + 1)`` for real ``x >= 0``.

    No argument checking beyond the degenerate cases; callers validate.
    """
    x = np.float64(x)
    lambda_ = np.float64(lambda_)
    if lambda_ == 0:
        return d_one(give_log) if x == 0 else d_zero(give_log)
    if not np.isfinite(lambda_):
        return d_zero(give_log)
    if x < 0:
        return d_zero(give_log)
    if x <= lambda_ * DBL_MIN:
        return d_exp(-lambda_, give_log)
    if lambda_ < x * DBL_MIN:
        if not np.isfinite(x):
            return d_zero(give_log)
        return d_exp(-lambda_ + x * np.log(lambda_) - gammaln(x + 1), give_log)

    # R_D_fexp(2*pi*x, -stirlerr(x) - bd0(x, lambda))
    f = M_2PI * x
    exponent = -stirlerr(x) - bd0(x, lambda_)
    return -0.5 * np.log(f) + exponent if give_log else np.exp(exponent) / np.sqrt(f)


def dbinom_raw(x: Double, n: Double, p: Double, q: Double, give_log: bool) -> np.float64:
    """
    Binomial-type density for real ``x`` and ``n`` with ``q = 1 - p`` given separately.

    Passing ``q`` explicitly keeps precision when ``p`` is close to one.
    """
    x = np.float64(x)
    n = np.float64(n)
    if p == 0:
        return d_one(give_log) if x == 0 else d_zero(give_log)
    if q == 0:
        return d_one(give_log) if x == n else d_zero(give_log)

    if x == 0:
        if n == 0:
            return d_one(give_log)
        lc = -bd0(n, n * q) - n * p if p < 0.1 else n * np.log(q)
        return d_exp(lc, give_log)
    if x == n:
        lc = -bd0(n, n * p) - n * q if q < 0.1 else n * np.log(p)
        return d_exp(lc, give_log)
    if x < 0 or x > n:
        return d_zero(give_log)

    lc = stirlerr(n) - stirlerr(x) - stirlerr(n - x) - bd0(x, n * p) - bd0(n - x, n * q)
    lf = M_LN_2PI + np.log(x) + np.log1p(-x / n)
    return d_exp(lc - 0.5 * lf, give_log)


__all__ = [
    "stirlerr",
    "bd0",
    "dpois_raw",
    "dbinom_raw",
]
