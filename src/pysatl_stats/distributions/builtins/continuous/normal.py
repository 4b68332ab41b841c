"""
Normal distribution.

Contains the Normal (Gaussian) distribution with mean ``mu`` and standard
deviation ``sigma``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_stats.constants import E, PI, SQRT_2, SQRT_TAU, TAU
from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.distributions.sampling import open_unit
from pysatl_stats.ranges import SingleRange
from pysatl_stats.special import entropy_log, erfc, inverse_erfc
from pysatl_stats.types import DistributionName, EntropyUnit, ErfMethod, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.distributions.distribution import ContinuousDistribution
    from pysatl_stats.ranges import Range


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """``M(t) = exp(μt + σ²t²/2)``."""
    mu, sigma = parameters["mu"], parameters["sigma"]
    return math.exp(mu * t + 0.5 * sigma**2 * t**2)


def _raw_moment(parameters: Mapping[str, float], n: int) -> float:
    """
    Raw moment of the normal distribution.

    Parameters
    ----------
    parameters : Mapping[str, float]
        Distribution parameters with keys:
        - mu: float (mean)
        - sigma: float (standard deviation)
    n : int
        Order of the moment, ``n >= 1``.

    Returns
    -------
    float
        ``E[X^n] = Σ_j C(n, 2j) μ^(n-2j) σ^(2j) (2j - 1)!!``
    """
    mu, sigma = parameters["mu"], parameters["sigma"]
    return math.fsum(
        math.comb(n, 2 * j) * mu ** (n - 2 * j) * sigma ** (2 * j) * math.prod(range(1, 2 * j, 2))
        for j in range(n // 2 + 1)
    )


@distribution_family(name=DistributionName.NORMAL, kind=Kind.CONTINUOUS)
class NormalDistribution(BaseDistribution):
    """
    Normal (Gaussian) distribution.

    The normal distribution is symmetric about its mean and is defined by two
    parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float, default 0.0
        Mean.
    sigma : float, default 1.0
        Standard deviation, ``sigma > 0``.
    seed : int, default 0
        Seed of the owned random generator.
    approx : bool, default False
        Evaluate the error function by the Abramowitz–Stegun approximation
        instead of the incomplete gamma function.
    """

    mu: float = 0.0
    sigma: float = 1.0
    seed: int = 0
    approx: bool = False

    _auxiliary_fields = BaseDistribution._auxiliary_fields | {"approx"}

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0.0

    @property
    def erf_method(self) -> ErfMethod:
        return ErfMethod.ABRAMOWITZ_STEGUN if self.approx else ErfMethod.INCOMPLETE_GAMMA

    def _compute_moments(self) -> Moments:
        return Moments(mean=self.mu, variance=self.sigma**2, skewness=0.0, kurtosis=0.0)

    def _compute_fisher_information(self) -> tuple[float, ...]:
        precision = 1.0 / self.sigma**2
        return (precision, 0.0, 0.0, 2.0 * precision)

    def sample(self) -> float:
        """Box–Muller transform of two uniform draws."""
        radius = math.sqrt(-2.0 * math.log(open_unit(self._rng)))
        angle = TAU * float(self._rng.random())
        return self.mu + self.sigma * radius * math.cos(angle)

    def pdf(self, x: float) -> SingleRange:
        z = (x - self.mu) / self.sigma
        return SingleRange(math.exp(-0.5 * z * z) / (self.sigma * SQRT_TAU))

    def cdf(self, x: float) -> SingleRange:
        """``Φ(x) = erfc(-(x - μ) / (σ√2)) / 2``."""
        z = (x - self.mu) / (self.sigma * SQRT_2)
        return SingleRange(0.5 * erfc(-z, self.erf_method))

    def quantile(self, probability: float) -> SingleRange:
        """
        Inverse of :meth:`cdf`; ``-inf`` at 0 and ``inf`` at 1.

        Raises
        ------
        DomainError
            If probability is outside [0, 1].
        """
        self._check_probability(probability)
        z = inverse_erfc(2.0 * probability, self.erf_method)
        return SingleRange(self.mu - self.sigma * SQRT_2 * z)

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        return 0.5 * entropy_log(TAU * E * self.sigma**2, unit)

    def median(self) -> Range:
        return SingleRange(self.mu)

    def mode(self) -> Range:
        return SingleRange(self.mu)

    def mad(self) -> float:
        return self.sigma * math.sqrt(2.0 / PI)

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)

    def kl_divergence(self, other: ContinuousDistribution) -> float:
        """
        ``KL(self || other)`` for another normal distribution.

        Raises
        ------
        DomainError
            If ``other`` is not a :class:`NormalDistribution`.
        """
        q = self._require_same_family(other)
        variance_ratio = (self.sigma / q.sigma) ** 2
        shift = ((self.mu - q.mu) / q.sigma) ** 2
        return 0.5 * (variance_ratio + shift - 1.0 - math.log(variance_ratio))


__all__ = ["NormalDistribution"]
