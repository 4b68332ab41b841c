"""
Error taxonomy of PySATL Stats.

Two kinds of failure reach callers: a :class:`DomainError` when an input or a
construction parameter violates a precondition, and an
:class:`UndefinedQuantityError` when a validly constructed distribution has no
closed form for the requested quantity.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class StatisticsError(Exception):
    """Base class for all errors raised by the library."""


class DomainError(StatisticsError, ValueError):
    """An argument or parameter lies outside the domain of the operation."""


class RangeMismatchError(DomainError, TypeError):
    """A range operation was given a range of a different variant."""


class UndefinedQuantityError(StatisticsError):
    """The requested quantity is not defined for this distribution."""


class ConvergenceWarning(UserWarning):
    """An iterative approximation stopped at the iteration cap."""


__all__ = [
    "StatisticsError",
    "DomainError",
    "RangeMismatchError",
    "UndefinedQuantityError",
    "ConvergenceWarning",
]
