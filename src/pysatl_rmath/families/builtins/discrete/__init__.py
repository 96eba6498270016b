"""
Discrete distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .geometric import configure_geometric_family, dgeom, pgeom, qgeom, rgeom

__all__ = [
    "dgeom",
    "pgeom",
    "qgeom",
    "rgeom",
    "configure_geometric_family",
]
