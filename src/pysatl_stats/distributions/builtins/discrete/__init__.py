"""
Built-in discrete distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.distributions.builtins.discrete.bernoulli import BernoulliDistribution
from pysatl_stats.distributions.builtins.discrete.binomial import BinomialDistribution
from pysatl_stats.distributions.builtins.discrete.poisson import PoissonDistribution

__all__ = [
    "BernoulliDistribution",
    "BinomialDistribution",
    "PoissonDistribution",
]
