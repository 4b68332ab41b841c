"""
Fixed-step numerical integration.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_stats.constants import DEFAULT_SIMPSON_INTERVALS
from pysatl_stats.errors import DomainError

if TYPE_CHECKING:
    from pysatl_stats.types import ScalarFunc


def simpson(
    function: ScalarFunc,
    lower: float,
    upper: float,
    n: int = DEFAULT_SIMPSON_INTERVALS,
) -> float:
    """
    Composite Simpson's rule on ``n`` equal subintervals.

    Parameters
    ----------
    function : Callable[[float], float]
        Scalar integrand.
    lower, upper : float
        Integration limits.
    n : int, default 1000
        Number of subintervals; must be a positive even integer.

    Returns
    -------
    float
        ``(h / 3) · Σ w_i f(x_i)`` with weights ``1, 4, 2, ..., 2, 4, 1``.

    Raises
    ------
    DomainError
        If ``n`` is not a positive even integer.

    Notes
    -----
    There is no adaptive refinement; pass a larger ``n`` for more accuracy.
    """
    if n <= 0 or n % 2 != 0:
        raise DomainError(f"Simpson's rule needs a positive even n, got {n}")

    h = (upper - lower) / n
    nodes = lower + h * np.arange(n + 1, dtype=np.float64)
    weights = np.ones(n + 1, dtype=np.float64)
    weights[1:-1:2] = 4.0
    weights[2:-1:2] = 2.0

    values = np.fromiter((function(float(x)) for x in nodes), dtype=np.float64, count=n + 1)
    return float(h / 3.0 * np.dot(weights, values))


__all__ = ["simpson"]
