"""
Global registry of distribution classes using the singleton pattern.

Every built-in distribution registers itself here at import time through the
:func:`~pysatl_stats.distributions.distribution.distribution_family`
decorator, so classes can be looked up by their
:class:`~pysatl_stats.types.DistributionName`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import TYPE_CHECKING

from pysatl_stats.types import DistributionName

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_stats.distributions.distribution import BaseDistribution


class DistributionRegister:
    """
    Singleton registry of distribution classes.

    Maintains a global mapping from distribution name to the class
    implementing it.
    """

    _instance: ClassVar[DistributionRegister | None] = None
    _registered: dict[DistributionName, type[BaseDistribution]]

    def __new__(cls) -> DistributionRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered = {}
        return cls._instance

    @classmethod
    def get(cls, name: DistributionName | str) -> type[BaseDistribution]:
        """
        Retrieve a distribution class by name.

        Parameters
        ----------
        name : DistributionName or str
            Name of the distribution, e.g. ``"Normal"``.

        Returns
        -------
        type[BaseDistribution]
            The registered class.

        Raises
        ------
        ValueError
            If no distribution with the given name exists.
        """
        self = cls()
        try:
            key = DistributionName(name)
        except ValueError:
            raise ValueError(f"No distribution {name} found in register") from None
        if key not in self._registered:
            raise ValueError(f"No distribution {name} found in register")
        return self._registered[key]

    @classmethod
    def register(cls, distribution: type[BaseDistribution]) -> None:
        """
        Register a distribution class under its ``name``.

        Registering the same class twice is ignored with a warning.

        Raises
        ------
        ValueError
            If a different class is already registered under the same name.
        """
        self = cls()
        name = distribution.name
        registered = self._registered.get(name)
        if registered is None:
            self._registered[name] = distribution
            return
        if registered.__qualname__ == distribution.__qualname__ and (
            registered.__module__ == distribution.__module__
        ):
            warnings.warn(
                f"Distribution {name} is already registered",
                UserWarning,
                stacklevel=3,
            )
            self._registered[name] = distribution
            return
        raise ValueError(f"Distribution {name} already found in register")

    @classmethod
    def names(cls) -> list[DistributionName]:
        """Names of all registered distributions."""
        return list(cls()._registered)


__all__ = ["DistributionRegister"]
