"""
Special functions subpackage

Numerical kernels used by the distributions:

- gamma function family (:mod:`.gamma`);
- combinatorics, entropy logarithm and error function (:mod:`.functions`);
- fixed-step integration (:mod:`.integrate`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .functions import (
    binomial_coefficient,
    entropy_log,
    erf,
    erfc,
    factorial,
    inverse_erfc,
    stirling2,
)
from .gamma import (
    digamma,
    gamma,
    incomplete_gamma,
    ln_gamma,
    regularized_gamma_p,
    regularized_gamma_q,
    trigamma,
)
from .integrate import simpson

__all__ = [
    # combinatorics
    "binomial_coefficient",
    "factorial",
    "stirling2",
    # logarithms and error function
    "entropy_log",
    "erf",
    "erfc",
    "inverse_erfc",
    # gamma family
    "gamma",
    "ln_gamma",
    "incomplete_gamma",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "digamma",
    "trigamma",
    # integration
    "simpson",
]
