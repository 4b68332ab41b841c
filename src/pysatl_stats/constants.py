"""
Numerical Constants
===================

Read-only table of mathematical constants and numerical tolerances shared by
the special functions and the distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MathConstants:
    """
    Process-wide constants.

    Parameters
    ----------
    sqrt_2, sqrt_pi, sqrt_tau, pi, tau, e : float
        Mathematical constants (``tau = 2π``).
    euler_mascheroni : float
        Euler–Mascheroni constant γ.
    epsilon : float
        Convergence tolerance for iterative kernels and bisection.
    series_tolerance : float
        Relative stopping tolerance of the incomplete gamma series.
    simpson_intervals : int
        Default number of subintervals of the Simpson integrator.
    max_iterations : int
        Iteration cap for series, continued fractions and bisection.
    """

    sqrt_2: float = 1.4142135623730951
    sqrt_pi: float = 1.7724538509055159
    sqrt_tau: float = 2.5066282746310002
    pi: float = 3.141592653589793
    tau: float = 6.283185307179586
    e: float = 2.718281828459045
    euler_mascheroni: float = 0.5772156649015329
    epsilon: float = 1e-10
    series_tolerance: float = 1e-15
    simpson_intervals: int = 1000
    max_iterations: int = 10_000


CONSTANTS = MathConstants()

SQRT_2 = CONSTANTS.sqrt_2
SQRT_PI = CONSTANTS.sqrt_pi
SQRT_TAU = CONSTANTS.sqrt_tau
PI = CONSTANTS.pi
TAU = CONSTANTS.tau
E = CONSTANTS.e
EULER_MASCHERONI = CONSTANTS.euler_mascheroni
EPSILON = CONSTANTS.epsilon
SERIES_TOLERANCE = CONSTANTS.series_tolerance
DEFAULT_SIMPSON_INTERVALS = CONSTANTS.simpson_intervals
MAX_ITERATIONS = CONSTANTS.max_iterations

__all__ = [
    "MathConstants",
    "CONSTANTS",
    "SQRT_2",
    "SQRT_PI",
    "SQRT_TAU",
    "PI",
    "TAU",
    "E",
    "EULER_MASCHERONI",
    "EPSILON",
    "SERIES_TOLERANCE",
    "DEFAULT_SIMPSON_INTERVALS",
    "MAX_ITERATIONS",
]
