"""
Gamma Function Family
=====================

Numerical kernels related to the gamma function:

- :func:`gamma`: Lanczos approximation (``g = 7``, 9 coefficients) with the
  reflection formula for ``x < 0.5``;
- :func:`ln_gamma`: 7-coefficient Lanczos log-gamma, safe for large ``x``;
- :func:`regularized_gamma_p`, :func:`regularized_gamma_q` and
  :func:`incomplete_gamma`: incomplete gamma functions evaluated by a power
  series below ``x = a + 1`` and by a continued fraction above it;
- :func:`digamma` and :func:`trigamma`: polygamma functions evaluated by
  their defining series accelerated with an asymptotic tail.

Notes
-----
All kernels are scalar (``float -> float``) and stateless.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings

from pysatl_stats.constants import (
    EPSILON,
    EULER_MASCHERONI,
    MAX_ITERATIONS,
    PI,
    SERIES_TOLERANCE,
    SQRT_TAU,
)
from pysatl_stats.errors import ConvergenceWarning, DomainError

_LANCZOS_G = 7.0
_LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_LN_GAMMA_COEFFICIENTS = (
    1.000000000190015,
    76.18009172947146,
    -86.50532032941678,
    24.01409824083091,
    -1.231739572450155,
    0.1208650973866179e-2,
    -0.5395239384953e-5,
)

# Largest x with a finite double-precision gamma(x)
_GAMMA_OVERFLOW = 171.61447887182298
_TINY = 1e-300


def _is_pole(x: float) -> bool:
    return x <= 0.0 and float(x).is_integer()


def gamma(x: float) -> float:
    """
    Gamma function by the Lanczos approximation.

    Parameters
    ----------
    x : float
        Argument. Must not be a non-positive integer.

    Returns
    -------
    float
        ``Γ(x)``; ``inf`` when the result overflows a double.

    Raises
    ------
    DomainError
        If ``x`` is a pole of the gamma function.
    """
    if _is_pole(x):
        raise DomainError(f"Gamma function has a pole at x = {x}")
    if x < 0.5:
        # Reflection formula, 1 - x >= 0.5 so the recursion stops here
        return PI / (math.sin(PI * x) * gamma(1.0 - x))
    if x > _GAMMA_OVERFLOW:
        return math.inf

    z = x - 1.0
    series = _LANCZOS_COEFFICIENTS[0]
    for i, coefficient in enumerate(_LANCZOS_COEFFICIENTS[1:], start=1):
        series += coefficient / (z + i)
    t = z + _LANCZOS_G + 0.5

    # t ** (z + 0.5) is split in two halves to postpone overflow near 171
    half_power = t ** (0.5 * (z + 0.5))
    return SQRT_TAU * half_power * (half_power * math.exp(-t)) * series


def ln_gamma(x: float) -> float:
    """
    Natural logarithm of the gamma function for ``x > 0``.

    Uses a 7-coefficient Lanczos series, which stays finite where
    ``log(gamma(x))`` would overflow. Absolute error is below ``2e-10``.

    Raises
    ------
    DomainError
        If ``x <= 0``.
    """
    if x <= 0.0:
        raise DomainError(f"ln_gamma is defined for x > 0, got {x}")

    y = x
    tmp = x + 5.5
    tmp -= (x + 0.5) * math.log(tmp)
    series = _LN_GAMMA_COEFFICIENTS[0]
    for coefficient in _LN_GAMMA_COEFFICIENTS[1:]:
        y += 1.0
        series += coefficient / y
    return -tmp + math.log(SQRT_TAU * series / x)


def _log_gamma(x: float) -> float:
    """Most accurate available ``log Γ(x)`` for ``x > 0``."""
    if x < 150.0:
        return math.log(gamma(x))
    return ln_gamma(x)


def _gamma_series(a: float, x: float) -> float:
    """Regularized lower incomplete gamma ``P(a, x)`` by its power series."""
    term = 1.0
    total = 1.0
    converged = False
    for k in range(1, MAX_ITERATIONS):
        term *= x / (a + k)
        total += term
        if term / total < SERIES_TOLERANCE:
            converged = True
            break
    if not converged:
        warnings.warn(
            f"Incomplete gamma series did not converge for a={a}, x={x}",
            ConvergenceWarning,
            stacklevel=3,
        )
    # exp(-x) * x**a / Γ(a + 1) factored out of every term
    return total * math.exp(a * math.log(x) - x - _log_gamma(a + 1.0))


def _gamma_continued_fraction(a: float, x: float) -> float:
    """Regularized upper incomplete gamma ``Q(a, x)`` by modified Lentz."""
    b = x + 1.0 - a
    c = 1.0 / _TINY
    d = 1.0 / b
    h = d
    converged = False
    for i in range(1, MAX_ITERATIONS):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < _TINY:
            d = _TINY
        c = b + an / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < SERIES_TOLERANCE:
            converged = True
            break
    if not converged:
        warnings.warn(
            f"Incomplete gamma continued fraction did not converge for a={a}, x={x}",
            ConvergenceWarning,
            stacklevel=3,
        )
    return math.exp(a * math.log(x) - x - _log_gamma(a)) * h


def _check_shape(a: float) -> None:
    if not a > 0.0:
        raise DomainError(f"Incomplete gamma requires a > 0, got {a}")


def regularized_gamma_p(a: float, x: float) -> float:
    """
    Regularized lower incomplete gamma ``P(a, x) = γ(a, x) / Γ(a)``.

    Parameters
    ----------
    a : float
        Shape, ``a > 0``.
    x : float
        Upper integration limit. Values ``x <= 0`` give ``0``.

    Returns
    -------
    float
        Value in ``[0, 1]``.
    """
    _check_shape(a)
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    if x < a + 1.0:
        return _gamma_series(a, x)
    return 1.0 - _gamma_continued_fraction(a, x)


def regularized_gamma_q(a: float, x: float) -> float:
    """Regularized upper incomplete gamma ``Q(a, x) = 1 - P(a, x)``."""
    _check_shape(a)
    if x <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0
    if x < a + 1.0:
        return 1.0 - _gamma_series(a, x)
    return _gamma_continued_fraction(a, x)


def incomplete_gamma(a: float, x: float) -> float:
    """
    Lower incomplete gamma function ``γ(a, x) = Γ(a) · P(a, x)``.

    Raises
    ------
    DomainError
        If ``a <= 0``.
    """
    return gamma(a) * regularized_gamma_p(a, x)


def _digamma_asymptotic(z: float) -> float:
    inv = 1.0 / z
    inv2 = inv * inv
    return (
        math.log(z)
        - 0.5 * inv
        - inv2
        * (1 / 12 - inv2 * (1 / 120 - inv2 * (1 / 252 - inv2 * (1 / 240 - inv2 / 132))))
    )


def _trigamma_asymptotic(z: float) -> float:
    inv = 1.0 / z
    inv2 = inv * inv
    return (
        inv
        + 0.5 * inv2
        + inv
        * inv2
        * (1 / 6 - inv2 * (1 / 30 - inv2 * (1 / 42 - inv2 * (1 / 30 - inv2 * 5 / 66))))
    )


def digamma(x: float) -> float:
    """
    Digamma function ``ψ(x) = Γ'(x) / Γ(x)``.

    Evaluates ``ψ(x) = -γ - 1/x + Σ x / (n (n + x))``. After each partial sum
    the remaining tail is replaced by its asymptotic expansion; iteration
    stops once the corrected estimate changes by less than ``EPSILON``
    relative to its magnitude.

    Raises
    ------
    DomainError
        If ``x`` is a non-positive integer.
    """
    if _is_pole(x):
        raise DomainError(f"Digamma function has a pole at x = {x}")
    if x < 0.0:
        return digamma(1.0 - x) - PI / math.tan(PI * x)

    partial = -EULER_MASCHERONI - 1.0 / x
    previous = math.inf
    for n in range(1, MAX_ITERATIONS):
        partial += x / (n * (n + x))
        estimate = partial + _digamma_asymptotic(n + 1 + x) - _digamma_asymptotic(n + 1)
        if abs(estimate - previous) < EPSILON * max(1.0, abs(estimate)):
            return estimate
        previous = estimate

    warnings.warn(f"Digamma did not converge for x={x}", ConvergenceWarning, stacklevel=2)
    return previous


def trigamma(x: float) -> float:
    """
    Trigamma function ``ψ'(x) = Σ 1 / (x + n)²``.

    Raises
    ------
    DomainError
        If ``x`` is a non-positive integer.
    """
    if _is_pole(x):
        raise DomainError(f"Trigamma function has a pole at x = {x}")
    if x < 0.0:
        return (PI / math.sin(PI * x)) ** 2 - trigamma(1.0 - x)

    partial = 0.0
    previous = math.inf
    for n in range(MAX_ITERATIONS):
        partial += 1.0 / (x + n) ** 2
        estimate = partial + _trigamma_asymptotic(x + n + 1)
        if abs(estimate - previous) < EPSILON * max(1.0, abs(estimate)):
            return estimate
        previous = estimate

    warnings.warn(f"Trigamma did not converge for x={x}", ConvergenceWarning, stacklevel=2)
    return previous


__all__ = [
    "gamma",
    "ln_gamma",
    "incomplete_gamma",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "digamma",
    "trigamma",
]
