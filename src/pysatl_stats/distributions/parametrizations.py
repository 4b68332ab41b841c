"""
Parameter constraints of distribution families.

Constraints are instance predicates marked with :func:`constraint`. The
:func:`~pysatl_stats.distributions.distribution.distribution_family`
decorator collects them once per class, and every instance checks them on
construction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from pysatl_stats.errors import DomainError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import Any


@dataclass(slots=True, frozen=True)
class ParameterConstraint:
    """
    Constraint on the parameter values of a distribution.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Predicate that returns True if the constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint, used in the error
        message when it does not hold.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def collect_constraints(cls: type) -> list[ParameterConstraint]:
    """
    Collect the constraint methods declared on ``cls``.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    """
    constraints: list[ParameterConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod | classmethod):
            func = attr.__func__
            if getattr(func, "__is_constraint", False):
                raise TypeError(f"@constraint '{name}' must be an instance method")
            continue

        if not isfunction(attr) or not getattr(attr, "__is_constraint", False):
            continue
        description = getattr(attr, "__constraint_description", attr.__name__)
        constraints.append(ParameterConstraint(description=description, check=attr))
    return constraints


def validate_constraints(instance: object, constraints: Iterable[ParameterConstraint]) -> None:
    """
    Check every constraint against ``instance``.

    Raises
    ------
    DomainError
        On the first constraint that does not hold.
    """
    for item in constraints:
        if not item.check(instance):
            raise DomainError(f'Constraint "{item.description}" does not hold')


__all__ = [
    "ParameterConstraint",
    "constraint",
    "collect_constraints",
    "validate_constraints",
]
