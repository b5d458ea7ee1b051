"""
Process-wide catalog of dual-parameterized families.

Each built-in ``configure_*_family()`` function adds its family here once;
constructors and :class:`~pysatl_dual.families.distribution.DualDistribution`
consumers look families up by :class:`~pysatl_dual.types.FamilyName`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_dual.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton catalog mapping family names to dual families.

    Families are kept in registration order, which is the catalog order
    used by :func:`~pysatl_dual.families.configuration.configure_families_register`.
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
        Look up a family by name.

        Raises
        ------
        ValueError
            If the catalog holds no family called ``name``.
        """
        families = cls()._families
        if name not in families:
            raise ValueError(f"No family {name} found in register")
        return families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        """Whether ``name`` is already in the catalog."""
        return name in cls()._families

    @classmethod
    def names(cls) -> list[str]:
        """Family names in registration order."""
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add a configured family to the catalog.

        Raises
        ------
        ValueError
            If a family with the same name is already present; built-in
            configurators check :meth:`contains` first.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family
        logger.debug("Registered family %s", family.name)

    @classmethod
    def _reset(cls) -> None:
        # Next access builds an empty catalog.
        cls._instance = None
