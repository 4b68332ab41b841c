"""
Built-in continuous distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.distributions.builtins.continuous.exponential import ExponentialDistribution
from pysatl_stats.distributions.builtins.continuous.gamma import GammaDistribution
from pysatl_stats.distributions.builtins.continuous.normal import NormalDistribution
from pysatl_stats.distributions.builtins.continuous.uniform import UniformDistribution
from pysatl_stats.distributions.builtins.continuous.weibull import WeibullDistribution

__all__ = [
    "NormalDistribution",
    "UniformDistribution",
    "ExponentialDistribution",
    "GammaDistribution",
    "WeibullDistribution",
]
