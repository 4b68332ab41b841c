"""
Poisson distribution.

Number of events in a fixed interval when events occur independently at a
constant ``rate``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_stats.constants import E, SERIES_TOLERANCE, TAU
from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.distributions.sampling import discrete_quantile_search
from pysatl_stats.errors import DomainError
from pysatl_stats.ranges import DiscreteRange, SingleRange
from pysatl_stats.special import (
    entropy_log,
    factorial,
    ln_gamma,
    regularized_gamma_p,
    regularized_gamma_q,
    stirling2,
)
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.ranges import Range

# Largest k whose factorial is representable as a double
_FACTORIAL_FLOAT_LIMIT = 170
# Below this rate the entropy is summed exactly
_EXACT_ENTROPY_RATE = 10.0


def _log_factorial(k: int) -> float:
    if k <= _FACTORIAL_FLOAT_LIMIT:
        return math.log(factorial(k))
    return ln_gamma(k + 1.0)


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """``M(t) = exp(λ (e^t - 1))``."""
    rate = parameters["rate"]
    return math.exp(rate * math.expm1(t))


def _raw_moment(parameters: Mapping[str, float], order: int) -> float:
    """Touchard polynomial ``E[X^r] = Σ_j S(r, j) λ^j``."""
    rate = parameters["rate"]
    return math.fsum(stirling2(order, j) * rate**j for j in range(order + 1))


@distribution_family(name=DistributionName.POISSON, kind=Kind.DISCRETE)
class PoissonDistribution(BaseDistribution):
    """
    Poisson distribution.

    Parameters
    ----------
    rate : float
        Expected number of events λ, ``λ > 0``.
    seed : int, default 0
        Seed of the owned random generator.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / k!,  k = 0, 1, ...
    """

    rate: float
    seed: int = 0

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        return self.rate > 0.0

    def _compute_moments(self) -> Moments:
        rate = self.rate
        return Moments(
            mean=rate,
            variance=rate,
            skewness=1.0 / math.sqrt(rate),
            kurtosis=1.0 / rate,
        )

    def _compute_fisher_information(self) -> tuple[float, ...]:
        return (1.0 / self.rate,)

    def pmf(self, k: float) -> float:
        """
        Probability of exactly ``k`` events.

        Raises
        ------
        DomainError
            If ``k`` is not a non-negative integer.
        """
        if k < 0 or not float(k).is_integer():
            raise DomainError(f"k must be a non-negative integer, got {k}")
        k = int(k)
        return math.exp(k * math.log(self.rate) - self.rate - _log_factorial(k))

    def pdf(self, x: float) -> SingleRange:
        return SingleRange(self.pmf(x))

    def _cdf_value(self, k: int) -> float:
        """``P(X <= k) = Q(k + 1, λ)``."""
        if k < 0:
            return 0.0
        return regularized_gamma_q(k + 1.0, self.rate)

    def _survival(self, k: int) -> float:
        """``P(X > k) = P(k + 1, λ)``, accurate deep in the upper tail."""
        if k < 0:
            return 1.0
        return regularized_gamma_p(k + 1.0, self.rate)

    def cdf(self, x: float) -> SingleRange:
        if math.isinf(x):
            return SingleRange(1.0 if x > 0.0 else 0.0)
        return SingleRange(self._cdf_value(math.floor(x)))

    def _search(self, probability: float) -> int:
        return discrete_quantile_search(
            self._cdf_value, self._survival, probability, guess=math.floor(self.rate)
        )

    def quantile(self, probability: float) -> SingleRange:
        self._check_probability(probability)
        if probability == 1.0:
            return SingleRange(math.inf)
        return SingleRange(float(self._search(probability)))

    def sample(self) -> float:
        return float(self._search(float(self._rng.random())))

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        """
        Entropy in the requested unit.

        Exact for ``λ < 10``:
            H = λ (1 - ln λ) + Σ_k P(X = k) ln k!
        otherwise the asymptotic expansion
            H ≈ ½ ln(2πeλ) - 1/(12λ) - 1/(24λ²) - 19/(360λ³)
        """
        rate = self.rate
        nats_to_unit = entropy_log(E, unit)
        if rate >= _EXACT_ENTROPY_RATE:
            correction = 1.0 / (12.0 * rate) + 1.0 / (24.0 * rate**2) + 19.0 / (360.0 * rate**3)
            return 0.5 * entropy_log(TAU * E * rate, unit) - correction * nats_to_unit

        total = 0.0
        k = 2
        while True:
            term = self.pmf(k) * _log_factorial(k)
            total += term
            if k > rate and term <= SERIES_TOLERANCE * total:
                break
            k += 1
        return (rate * (1.0 - math.log(rate)) + total) * nats_to_unit

    def median(self) -> Range:
        return self.quantile(0.5)

    def mode(self) -> Range:
        """``⌊λ⌋``, or both ``λ - 1`` and ``λ`` when ``λ`` is an integer."""
        if float(self.rate).is_integer():
            return DiscreteRange({self.rate - 1.0, float(self.rate)})
        return SingleRange(float(math.floor(self.rate)))

    def mad(self) -> float:
        """``2 λ^(m + 1) e^(-λ) / m!`` with ``m = ⌊λ⌋``."""
        m = math.floor(self.rate)
        return 2.0 * (m + 1) * self.pmf(m + 1)

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)


__all__ = ["PoissonDistribution"]
