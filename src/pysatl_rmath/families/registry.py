"""
Family Register
===============

Process-wide singleton mapping family names (``"Normal"``, ``"Geometric"``,
...) to :class:`~pysatl_rmath.families.parametric_family.ParametricFamily`
objects. Built-in families are added by
:func:`~pysatl_rmath.families.configuration.configure_families_register`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_rmath.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton lookup table of parametric families.

    All methods are class methods working on the single instance, which is
    created on first use. Families keep their registration order.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look a family up by name.

        Raises
        ------
        ValueError
            If ``name`` is not registered; the message lists known names.
        """
        families = cls()._families
        try:
            return families[name]
        except KeyError:
            known = ", ".join(families) or "none"
            raise ValueError(f"Unknown family '{name}' (registered: {known})") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def names(cls) -> list[str]:
        """Registered names in registration order."""
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its own name.

        Raises
        ------
        ValueError
            If the name is taken. Use :meth:`contains` to register
            idempotently.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family '{family.name}' is already registered")
        families[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        """Forget the instance and every family in it."""
        cls._instance = None
