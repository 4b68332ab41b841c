"""
Elementary Special Functions
============================

Combinatorial kernels, the entropy logarithm and the error function family.

Notes
-----
- :func:`erf` supports two interchangeable strategies (see
  :class:`~pysatl_stats.types.ErfMethod`): the Abramowitz–Stegun formula
  7.1.26 and an evaluation through the regularized incomplete gamma function.
- :func:`inverse_erfc` refines a rational initial guess with Newton steps on
  :func:`erfc` evaluated with the selected strategy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

from pysatl_stats.constants import EPSILON, MAX_ITERATIONS, SQRT_2, SQRT_PI
from pysatl_stats.errors import ConvergenceWarning, DomainError
from pysatl_stats.special.gamma import regularized_gamma_p, regularized_gamma_q
from pysatl_stats.types import EntropyUnit, ErfMethod

_AS_P = 0.3275911
_AS_COEFFICIENTS = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)
_ERF_SATURATION = 40.0

# Abramowitz–Stegun 26.2.23 rational approximation of the normal quantile
_QUANTILE_NUMERATOR = (2.515517, 0.802853, 0.010328)
_QUANTILE_DENOMINATOR = (1.432788, 0.189269, 0.001308)


def factorial(n: int) -> int:
    """
    Factorial ``n!`` as an exact integer.

    Raises
    ------
    DomainError
        If ``n < 0``.
    """
    if n < 0:
        raise DomainError(f"Factorial is defined for n >= 0, got {n}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def binomial_coefficient(n: int, k: int) -> int:
    """
    Binomial coefficient ``C(n, k)`` as an exact integer.

    Uses the multiplicative formula on ``min(k, n - k)`` factors; every
    partial product ``C(n, i)`` is an integer, so floor division is exact.

    Raises
    ------
    DomainError
        If ``k < 0`` or ``k > n``.
    """
    if k < 0 or k > n:
        raise DomainError(f"k must be between 0 and n, got n={n}, k={k}")
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        result = result * (n - i + 1) // i
    return result


def stirling2(n: int, k: int) -> int:
    """
    Stirling number of the second kind ``S(n, k)``.

    Number of ways to partition ``n`` labelled items into ``k`` non-empty
    blocks.

    Raises
    ------
    DomainError
        If ``n`` or ``k`` is negative.
    """
    if n < 0 or k < 0:
        raise DomainError(f"Stirling numbers need n >= 0 and k >= 0, got n={n}, k={k}")
    if k > n:
        return 0

    row = [1] + [0] * k
    for i in range(1, n + 1):
        for j in range(min(i, k), 0, -1):
            row[j] = j * row[j] + row[j - 1]
        row[0] = 0
    return row[k]


def entropy_log(x: float, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
    """
    Logarithm in the base matching an entropy unit.

    Parameters
    ----------
    x : float
        Non-negative argument; ``0`` maps to ``-inf``.
    unit : EntropyUnit
        ``SHANNON`` selects ``log2``, ``NATURAL`` selects ``ln``.

    Raises
    ------
    DomainError
        If ``x < 0``.
    """
    if x < 0.0:
        raise DomainError(f"Logarithm is undefined for negative x = {x}")
    if x == 0.0:
        return -math.inf
    if EntropyUnit(unit) is EntropyUnit.SHANNON:
        return math.log2(x)
    return math.log(x)


def _erfc_abramowitz_stegun(x: float) -> float:
    """``erfc(x)`` for ``x >= 0`` by Abramowitz–Stegun 7.1.26."""
    t = 1.0 / (1.0 + _AS_P * x)
    polynomial = 0.0
    for coefficient in reversed(_AS_COEFFICIENTS):
        polynomial = (polynomial + coefficient) * t
    return polynomial * math.exp(-x * x)


def erf(x: float, method: ErfMethod = ErfMethod.INCOMPLETE_GAMMA) -> float:
    """
    Error function.

    Parameters
    ----------
    x : float
        Argument.
    method : ErfMethod, default INCOMPLETE_GAMMA
        ``ABRAMOWITZ_STEGUN`` is a fixed-coefficient approximation with
        maximal error about ``1.5e-7``; ``INCOMPLETE_GAMMA`` evaluates
        ``sign(x) · P(1/2, x²)``.

    Returns
    -------
    float
        ``erf(x)`` in ``[-1, 1]``; saturates to ``±1`` for ``|x| > 40``.
    """
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        return x
    if abs(x) > _ERF_SATURATION:
        return math.copysign(1.0, x)

    if ErfMethod(method) is ErfMethod.ABRAMOWITZ_STEGUN:
        return math.copysign(1.0 - _erfc_abramowitz_stegun(abs(x)), x)
    return math.copysign(regularized_gamma_p(0.5, x * x), x)


def erfc(x: float, method: ErfMethod = ErfMethod.INCOMPLETE_GAMMA) -> float:
    """
    Complementary error function ``1 - erf(x)``.

    For positive ``x`` the complement is evaluated directly so that the
    upper tail keeps its relative precision.
    """
    if x > 0.0 and not math.isinf(x):
        if ErfMethod(method) is ErfMethod.ABRAMOWITZ_STEGUN:
            return _erfc_abramowitz_stegun(x)
        return regularized_gamma_q(0.5, x * x)
    return 1.0 - erf(x, method)


def _inverse_erfc_guess(y: float) -> float:
    """Initial guess for ``erfc(x) = y`` with ``0 < y <= 1``."""
    t = math.sqrt(-2.0 * math.log(y / 2.0))
    c0, c1, c2 = _QUANTILE_NUMERATOR
    d1, d2, d3 = _QUANTILE_DENOMINATOR
    z = t - (c0 + c1 * t + c2 * t * t) / (1.0 + d1 * t + d2 * t * t + d3 * t * t * t)
    return max(z / SQRT_2, 0.0)


def inverse_erfc(y: float, method: ErfMethod = ErfMethod.INCOMPLETE_GAMMA) -> float:
    """
    Inverse of the complementary error function.

    Parameters
    ----------
    y : float
        Value in ``[0, 2]``.
    method : ErfMethod
        Strategy of the :func:`erfc` being inverted.

    Returns
    -------
    float
        ``x`` with ``erfc(x) = y``; ``inf`` for ``y = 0`` and ``-inf`` for
        ``y = 2``.

    Raises
    ------
    DomainError
        If ``y`` lies outside ``[0, 2]``.
    """
    if not 0.0 <= y <= 2.0:
        raise DomainError(f"inverse_erfc is defined on [0, 2], got {y}")
    if y == 0.0:
        return math.inf
    if y == 2.0:
        return -math.inf
    if y == 1.0:
        return 0.0
    if y > 1.0:
        return -inverse_erfc(2.0 - y, method)

    x = _inverse_erfc_guess(y)
    for _ in range(MAX_ITERATIONS):
        slope = 2.0 / SQRT_PI * math.exp(-x * x)
        if slope == 0.0:
            break
        step = (erfc(x, method) - y) / slope
        x += step
        if abs(step) < EPSILON * max(1.0, abs(x)):
            return x
    else:
        warnings.warn(
            f"inverse_erfc did not converge for y={y}", ConvergenceWarning, stacklevel=2
        )
    return x


__all__ = [
    "factorial",
    "binomial_coefficient",
    "stirling2",
    "entropy_log",
    "erf",
    "erfc",
    "inverse_erfc",
]
