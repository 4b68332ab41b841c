"""
Built-in distributions of PySATL Stats.

Importing this package registers every distribution in
:class:`~pysatl_stats.distributions.registry.DistributionRegister`.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.distributions.builtins.continuous import (
    ExponentialDistribution,
    GammaDistribution,
    NormalDistribution,
    UniformDistribution,
    WeibullDistribution,
)
from pysatl_stats.distributions.builtins.discrete import (
    BernoulliDistribution,
    BinomialDistribution,
    PoissonDistribution,
)

__all__ = [
    "BernoulliDistribution",
    "BinomialDistribution",
    "PoissonDistribution",
    "NormalDistribution",
    "UniformDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "WeibullDistribution",
]
