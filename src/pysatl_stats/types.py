"""
Core Type Definitions
=====================

Fundamental enumerations and type aliases used throughout PySATL Stats.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class EntropyUnit(StrEnum):
    """
    Unit in which an entropy is reported.

    Attributes
    ----------
    SHANNON : str
        Bits (base-2 logarithm).
    NATURAL : str
        Nats (natural logarithm).
    """

    SHANNON = "shannon"
    NATURAL = "natural"


class ErfMethod(StrEnum):
    """
    Strategy used to evaluate the error function.

    Attributes
    ----------
    ABRAMOWITZ_STEGUN : str
        Rational/exponential approximation 7.1.26 (max error ~1.5e-7).
    INCOMPLETE_GAMMA : str
        Evaluation through the regularized incomplete gamma function.
    """

    ABRAMOWITZ_STEGUN = "abramowitz_stegun"
    INCOMPLETE_GAMMA = "incomplete_gamma"


class DistributionName(StrEnum):
    """
    Registered names of the built-in distribution families.

    Attributes
    ----------
    BERNOULLI : str
        Single trial with success probability ``p``.
    BINOMIAL : str
        Number of successes in ``n`` independent Bernoulli trials.
    POISSON : str
        Count of events with rate ``λ``.
    NORMAL : str
        Gaussian law with mean ``μ`` and standard deviation ``σ``.
    UNIFORM : str
        Constant density on ``[a, b]``.
    EXPONENTIAL : str
        Waiting time with rate ``λ``.
    GAMMA : str
        Gamma law with shape ``α`` and rate ``β``.
    WEIBULL : str
        Weibull law with scale ``λ`` and shape ``k``.
    """

    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    POISSON = "Poisson"
    NORMAL = "Normal"
    UNIFORM = "Uniform"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    WEIBULL = "Weibull"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for float arrays returned by the library."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


__all__ = [
    "Kind",
    "EntropyUnit",
    "ErfMethod",
    "DistributionName",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ScalarFunc",
]
