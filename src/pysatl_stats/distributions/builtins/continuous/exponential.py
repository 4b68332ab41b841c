"""
Exponential distribution.

Waiting time between events of a Poisson process with rate ``lambda_``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_stats.constants import E
from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.distributions.sampling import open_unit
from pysatl_stats.errors import DomainError
from pysatl_stats.ranges import SingleRange
from pysatl_stats.special import entropy_log
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.distributions.distribution import ContinuousDistribution
    from pysatl_stats.ranges import Range


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """
    ``M(t) = λ / (λ - t)`` for ``t < λ``.

    Raises
    ------
    DomainError
        If ``t >= λ``, where the expectation diverges.
    """
    rate = parameters["lambda_"]
    if t >= rate:
        raise DomainError(f"Exponential MGF is defined for t < {rate}, got {t}")
    return rate / (rate - t)


def _raw_moment(parameters: Mapping[str, float], n: int) -> float:
    """``E[X^n] = n! / λ^n``."""
    return math.factorial(n) / parameters["lambda_"] ** n


@distribution_family(name=DistributionName.EXPONENTIAL, kind=Kind.CONTINUOUS)
class ExponentialDistribution(BaseDistribution):
    """
    Exponential distribution.

    Probability density function:
        f(x) = λ exp(-λx) for x ≥ 0, 0 otherwise

    Parameters
    ----------
    lambda_ : float
        Rate λ, ``λ > 0``.
    seed : int, default 0
        Seed of the owned random generator.
    """

    lambda_: float
    seed: int = 0

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        return self.lambda_ > 0.0

    def _compute_moments(self) -> Moments:
        scale = 1.0 / self.lambda_
        return Moments(mean=scale, variance=scale**2, skewness=2.0, kurtosis=6.0)

    def _compute_fisher_information(self) -> tuple[float, ...]:
        return (1.0 / self.lambda_**2,)

    def sample(self) -> float:
        return -math.log(open_unit(self._rng)) / self.lambda_

    def pdf(self, x: float) -> SingleRange:
        if x < 0.0:
            return SingleRange(0.0)
        return SingleRange(self.lambda_ * math.exp(-self.lambda_ * x))

    def cdf(self, x: float) -> SingleRange:
        if x < 0.0:
            return SingleRange(0.0)
        return SingleRange(-math.expm1(-self.lambda_ * x))

    def quantile(self, probability: float) -> SingleRange:
        self._check_probability(probability)
        if probability == 1.0:
            return SingleRange(math.inf)
        return SingleRange(-math.log1p(-probability) / self.lambda_)

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        """``1 - ln λ`` nats."""
        return entropy_log(E / self.lambda_, unit)

    def median(self) -> Range:
        return SingleRange(math.log(2.0) / self.lambda_)

    def mode(self) -> Range:
        return SingleRange(0.0)

    def mad(self) -> float:
        raise self._undefined("MAD")

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)

    def kl_divergence(self, other: ContinuousDistribution) -> float:
        """
        ``KL(self || other) = ln(λ₀/λ₁) + λ₁/λ₀ - 1`` with ``λ₀`` the rate of self.

        Raises
        ------
        DomainError
            If ``other`` is not an :class:`ExponentialDistribution`.
        """
        q = self._require_same_family(other)
        return math.log(self.lambda_ / q.lambda_) + q.lambda_ / self.lambda_ - 1.0


__all__ = ["ExponentialDistribution"]
