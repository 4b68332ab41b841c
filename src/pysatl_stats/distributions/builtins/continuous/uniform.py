"""
Uniform distribution.

Contains the continuous uniform distribution on ``[lower_bound, upper_bound]``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.ranges import ContinuousRange, SingleRange
from pysatl_stats.special import entropy_log, simpson
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.distributions.distribution import ContinuousDistribution
    from pysatl_stats.ranges import Range


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """``M(t) = (e^(tb) - e^(ta)) / (t (b - a))``."""
    a, b = parameters["lower_bound"], parameters["upper_bound"]
    if t == 0.0:
        return 1.0
    width = t * (b - a)
    return math.exp(t * a) * math.expm1(width) / width


def _raw_moment(parameters: Mapping[str, float], n: int) -> float:
    """``E[X^n] = (b^(n+1) - a^(n+1)) / ((n + 1)(b - a))``."""
    a, b = parameters["lower_bound"], parameters["upper_bound"]
    return (b ** (n + 1) - a ** (n + 1)) / ((n + 1) * (b - a))


@distribution_family(name=DistributionName.UNIFORM, kind=Kind.CONTINUOUS)
class UniformDistribution(BaseDistribution):
    """
    Continuous uniform distribution.

    Probability density function:
        f(x) = 1/(b - a) for a ≤ x ≤ b, 0 otherwise

    Parameters
    ----------
    lower_bound : float
        Left end ``a`` of the support.
    upper_bound : float
        Right end ``b`` of the support, ``a < b``.
    seed : int, default 0
        Seed of the owned random generator.
    """

    lower_bound: float
    upper_bound: float
    seed: int = 0

    @constraint(description="lower_bound < upper_bound")
    def check_lower_less_than_upper(self) -> bool:
        return self.lower_bound < self.upper_bound

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    def _compute_moments(self) -> Moments:
        return Moments(
            mean=0.5 * (self.lower_bound + self.upper_bound),
            variance=self.width**2 / 12.0,
            skewness=0.0,
            kurtosis=-6.0 / 5.0,
        )

    def _compute_fisher_information(self) -> None:
        return None

    def sample(self) -> float:
        return self.lower_bound + self.width * float(self._rng.random())

    def _density(self, x: float) -> float:
        return 1.0 / self.width if self.lower_bound <= x <= self.upper_bound else 0.0

    def pdf(self, x: float) -> SingleRange:
        return SingleRange(self._density(x))

    def cdf(self, x: float) -> SingleRange:
        if x < self.lower_bound:
            return SingleRange(0.0)
        if x > self.upper_bound:
            return SingleRange(1.0)
        return SingleRange((x - self.lower_bound) / self.width)

    def quantile(self, probability: float) -> SingleRange:
        self._check_probability(probability)
        return SingleRange(self.lower_bound + probability * self.width)

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        return entropy_log(self.width, unit)

    def median(self) -> Range:
        return SingleRange(self.mean())

    def mode(self) -> Range:
        """Every point of the support is a mode."""
        return ContinuousRange((self.lower_bound, self.upper_bound))

    def mad(self) -> float:
        return self.width / 4.0

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)

    def kl_divergence(self, other: ContinuousDistribution) -> float:
        """
        ``KL(self || other)`` integrated numerically over the support of self.

        Infinite when the support of ``other`` does not cover the support of
        self.

        Raises
        ------
        DomainError
            If ``other`` is not a :class:`UniformDistribution`.
        """
        q = self._require_same_family(other)
        if self.lower_bound < q.lower_bound or self.upper_bound > q.upper_bound:
            return math.inf

        def integrand(x: float) -> float:
            p_x = self._density(x)
            if p_x == 0.0:
                return 0.0
            return p_x * math.log(p_x / q._density(x))

        return simpson(integrand, self.lower_bound, self.upper_bound)


__all__ = ["UniformDistribution"]
