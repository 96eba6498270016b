"""
Continuous distribution families.

Each module holds the scalar kernels of one family, their vectorized public
``d*``/``p*``/``q*``/``r*`` functions and a ``configure_*_family`` function that
registers the family.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .chi_squared import configure_chi_squared_family, dchisq, pchisq, qchisq, rchisq
from .exponential import configure_exponential_family, dexp, pexp, qexp, rexp
from .gamma import configure_gamma_family, dgamma, pgamma, qgamma, rgamma
from .logistic import configure_logistic_family, dlogis, plogis, qlogis, rlogis
from .normal import configure_normal_family, dnorm, pnorm, qnorm, rnorm
from .uniform import configure_uniform_family, dunif, punif, qunif, runif

__all__ = [
    "dnorm",
    "pnorm",
    "qnorm",
    "rnorm",
    "dlogis",
    "plogis",
    "qlogis",
    "rlogis",
    "dexp",
    "pexp",
    "qexp",
    "rexp",
    "dgamma",
    "pgamma",
    "qgamma",
    "rgamma",
    "dchisq",
    "pchisq",
    "qchisq",
    "rchisq",
    "dunif",
    "punif",
    "qunif",
    "runif",
    "configure_normal_family",
    "configure_logistic_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_chi_squared_family",
    "configure_uniform_family",
]
