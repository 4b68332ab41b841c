"""
Moment generating functions.

A :class:`MomentGeneratingFunction` pairs the parameters of a distribution
with two kernels: the MGF itself and the closed form of its derivatives at
zero, which are the raw moments.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_stats.errors import DomainError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    MGFKernel = Callable[[Mapping[str, float], float], float]
    RawMomentKernel = Callable[[Mapping[str, float], int], float]


@dataclass(frozen=True, slots=True)
class MomentGeneratingFunction:
    """
    Moment generating function ``M(t) = E[exp(tX)]`` of a distribution.

    Parameters
    ----------
    parameters : Mapping[str, float]
        Parameters of the distribution, by name.
    kernel : Callable[[Mapping[str, float], float], float]
        ``kernel(parameters, t)`` evaluates ``M(t)``.
    raw_moment : Callable[[Mapping[str, float], int], float]
        ``raw_moment(parameters, n)`` evaluates ``M^(n)(0) = E[X^n]`` for
        ``n >= 1``.
    """

    parameters: Mapping[str, float]
    kernel: MGFKernel
    raw_moment: RawMomentKernel

    def evaluate(self, t: float) -> float:
        """Value of the MGF at ``t``."""
        return self.kernel(self.parameters, t)

    def __call__(self, t: float) -> float:
        return self.evaluate(t)

    def moment(self, order: int) -> float:
        """
        Derivative of order ``order`` at zero, the raw moment ``E[X^order]``.

        Raises
        ------
        DomainError
            If ``order`` is negative.
        """
        if order < 0:
            raise DomainError(f"Moment order must be non-negative, got {order}")
        if order == 0:
            return 1.0
        return float(self.raw_moment(self.parameters, order))


__all__ = ["MomentGeneratingFunction"]
