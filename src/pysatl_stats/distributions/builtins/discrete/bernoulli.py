"""
Bernoulli distribution.

A single trial that succeeds (value 1) with probability ``p`` and fails
(value 0) with probability ``q = 1 - p``.
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
    limit_ratio,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.errors import DomainError
from pysatl_stats.ranges import BoundedRange, SingleRange
from pysatl_stats.special import entropy_log
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.ranges import Range


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """``M(t) = q + p·e^t``."""
    p = parameters["p"]
    return 1.0 + p * math.expm1(t)


def _raw_moment(parameters: Mapping[str, float], n: int) -> float:
    """Every raw moment of order ``n >= 1`` equals ``p`` since ``X^n = X``."""
    return parameters["p"]


@distribution_family(name=DistributionName.BERNOULLI, kind=Kind.DISCRETE)
class BernoulliDistribution(BaseDistribution):
    """
    Bernoulli distribution.

    Parameters
    ----------
    p : float
        Success probability, ``0 <= p < 1``.
    seed : int, default 0
        Seed of the owned random generator.

    Probability mass function:
        P(X = 1) = p,  P(X = 0) = 1 - p
    """

    p: float
    seed: int = 0

    @constraint(description="0 <= p < 1")
    def check_p_in_unit_interval(self) -> bool:
        return 0.0 <= self.p < 1.0

    @property
    def q(self) -> float:
        """Failure probability ``1 - p``."""
        return 1.0 - self.p

    def _compute_moments(self) -> Moments:
        p, q = self.p, self.q
        variance = p * q
        return Moments(
            mean=p,
            variance=variance,
            skewness=limit_ratio(q - p, math.sqrt(variance)),
            kurtosis=limit_ratio(1.0 - 6.0 * variance, variance),
        )

    def _compute_fisher_information(self) -> tuple[float, ...]:
        return (limit_ratio(1.0, self.p * self.q),)

    def sample(self) -> float:
        return 1.0 if float(self._rng.random()) < self.p else 0.0

    def pmf(self, k: float) -> float:
        """
        Probability mass at ``k``.

        Raises
        ------
        DomainError
            If ``k`` is neither 0 nor 1.
        """
        if k == 0:
            return self.q
        if k == 1:
            return self.p
        raise DomainError(f"Bernoulli support is {{0, 1}}, got {k}")

    def pdf(self, x: float) -> SingleRange:
        return SingleRange(self.pmf(x))

    def cdf(self, x: float) -> SingleRange:
        if x < 0.0:
            return SingleRange(0.0)
        if x < 1.0:
            return SingleRange(self.q)
        return SingleRange(1.0)

    def quantile(self, probability: float) -> SingleRange:
        self._check_probability(probability)
        return SingleRange(0.0 if probability <= self.q else 1.0)

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        return -sum(mass * entropy_log(mass, unit) for mass in (self.p, self.q) if mass > 0.0)

    def _most_likely(self) -> Range:
        if self.p < 0.5:
            return SingleRange(0.0)
        if self.p > 0.5:
            return SingleRange(1.0)
        return BoundedRange(0.0, 1.0)

    def median(self) -> Range:
        """0 for ``p < 1/2``, 1 for ``p > 1/2``, ``[0, 1)`` at ``p = 1/2``."""
        return self._most_likely()

    def mode(self) -> Range:
        return self._most_likely()

    def mad(self) -> float:
        return 2.0 * self.p * self.q

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)


__all__ = ["BernoulliDistribution"]
