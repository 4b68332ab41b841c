"""
Sampling Primitives
===================

Random draws shared by the built-in distributions. Every distribution owns
a :class:`numpy.random.Generator` created from its seed; the helpers below
only consume draws from the generator they are given.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable


def make_generator(seed: int) -> np.random.Generator:
    """Deterministic generator for ``seed``."""
    return np.random.default_rng(seed)


def open_unit(rng: np.random.Generator) -> float:
    """Uniform draw from ``(0, 1]``, safe to pass to ``log``."""
    return 1.0 - float(rng.random())


def next_gaussian(rng: np.random.Generator) -> float:
    """
    Standard normal draw by the Marsaglia polar method.

    Notes
    -----
    Only one of the two variates produced per accepted pair is used, so the
    helper keeps no state between calls.
    """
    while True:
        u = 2.0 * float(rng.random()) - 1.0
        v = 2.0 * float(rng.random()) - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return u * math.sqrt(-2.0 * math.log(s) / s)


def discrete_quantile_search(
    cdf: Callable[[int], float],
    survival: Callable[[int], float],
    target: float,
    lower: int = 0,
    upper: int | None = None,
    guess: int | None = None,
) -> int:
    """
    Smallest lattice point whose cumulative probability reaches ``target``.

    The point is bracketed by doubling steps from ``guess`` and then located
    by bisection. Targets above one half are compared in the upper tail,
    ``survival(k) <= 1 - target``, where both sides keep their relative
    precision.

    Parameters
    ----------
    cdf : Callable[[int], float]
        ``P(X <= k)``, non-decreasing in ``k``.
    survival : Callable[[int], float]
        ``P(X > k)``, the complement of ``cdf``.
    target : float
        Cumulative probability to reach, in ``[0, 1]``.
    lower : int, default 0
        First point of the support.
    upper : int, optional
        Last point of the support, where ``cdf`` equals one.
    guess : int, optional
        Starting point of the bracket search, typically near the median.

    Returns
    -------
    int
        ``min{k >= lower : P(X <= k) >= target}``.
    """
    if target > 0.5:
        tail = 1.0 - target

        def reached(k: int) -> bool:
            return survival(k) <= tail

    else:

        def reached(k: int) -> bool:
            return cdf(k) >= target

    start = lower if guess is None else max(lower, guess)
    if upper is not None:
        start = min(start, upper)

    # Invariant: reached(hi) holds, reached(lo) does not (lower - 1 counts as unreached)
    step = 1
    if reached(start):
        hi, lo = start, start - step
        while lo >= lower and reached(lo):
            hi = lo
            step *= 2
            lo = hi - step
        lo = max(lo, lower - 1)
    else:
        lo, hi = start, start + step
        while (upper is None or hi < upper) and not reached(hi):
            lo = hi
            step *= 2
            hi = lo + step
        if upper is not None:
            hi = min(hi, upper)

    while hi - lo > 1:
        middle = (lo + hi) // 2
        if reached(middle):
            hi = middle
        else:
            lo = middle
    return hi


__all__ = [
    "make_generator",
    "open_unit",
    "next_gaussian",
    "discrete_quantile_search",
]
