"""
Distributions subpackage

Shared machinery between the scalar kernels and the public API:

- vectorization adapters for evaluators and variate generators
  (:mod:`.vectorization`);
- sampling protocol and array-backed samples (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .sampling import ArraySample, Sample
from .vectorization import as_array, evaluator, variate_generator

__all__ = [
    # adapters
    "evaluator",
    "variate_generator",
    "as_array",
    # sampling
    "Sample",
    "ArraySample",
]
