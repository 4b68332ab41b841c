"""
Binomial distribution.

Number of successes in ``n`` independent Bernoulli trials with success
probability ``p``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from numbers import Integral
from typing import TYPE_CHECKING

from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
    limit_ratio,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.distributions.sampling import discrete_quantile_search
from pysatl_stats.errors import DomainError
from pysatl_stats.ranges import DiscreteRange, SingleRange
from pysatl_stats.special import binomial_coefficient, entropy_log, stirling2
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.ranges import Range

# Coefficients wider than this are combined with the powers in log space
_MAX_COEFFICIENT_BITS = 1000
# Below this log of p^k q^(n-k) one of the powers may underflow
_MIN_LOG_POWERS = -700.0


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """``M(t) = (q + p·e^t)^n``."""
    n, p = int(parameters["n"]), parameters["p"]
    return (1.0 + p * math.expm1(t)) ** n


def _raw_moment(parameters: Mapping[str, float], order: int) -> float:
    """
    Raw moment ``E[X^r] = Σ_j S(r, j) · n^(j) · p^j``.

    ``S(r, j)`` are Stirling numbers of the second kind and ``n^(j)`` is the
    falling factorial.
    """
    n, p = int(parameters["n"]), parameters["p"]
    return math.fsum(
        stirling2(order, j) * math.perm(n, j) * p**j for j in range(min(order, n) + 1)
    )


@distribution_family(name=DistributionName.BINOMIAL, kind=Kind.DISCRETE)
class BinomialDistribution(BaseDistribution):
    """
    Binomial distribution.

    Parameters
    ----------
    n : int
        Number of trials, ``n > 0``.
    p : float
        Success probability of each trial, ``0 <= p < 1``.
    seed : int, default 0
        Seed of the owned random generator.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1 - p)^(n - k),  k = 0, ..., n
    """

    n: int
    p: float
    seed: int = 0

    @constraint(description="n is a positive integer")
    def check_n_positive_integer(self) -> bool:
        return isinstance(self.n, Integral) and self.n > 0

    @constraint(description="0 <= p < 1")
    def check_p_in_unit_interval(self) -> bool:
        return 0.0 <= self.p < 1.0

    @property
    def q(self) -> float:
        return 1.0 - self.p

    def _compute_moments(self) -> Moments:
        n, p, q = self.n, self.p, self.q
        variance = n * p * q
        return Moments(
            mean=n * p,
            variance=variance,
            skewness=limit_ratio(q - p, math.sqrt(variance)),
            kurtosis=limit_ratio(1.0 - 6.0 * p * q, variance),
        )

    def _compute_fisher_information(self) -> tuple[float, ...]:
        return (limit_ratio(self.n, self.p * self.q),)

    def pmf(self, k: float) -> float:
        """
        Probability of exactly ``k`` successes.

        Raises
        ------
        DomainError
            If ``k`` is not an integer in ``[0, n]``.
        """
        if not float(k).is_integer() or not 0 <= k <= self.n:
            raise DomainError(f"k must be an integer between 0 and {self.n}, got {k}")
        k = int(k)
        n, p, q = self.n, self.p, self.q
        if p == 0.0:
            return 1.0 if k == 0 else 0.0

        coefficient = binomial_coefficient(n, k)
        log_powers = k * math.log(p) + (n - k) * math.log(q)
        if coefficient.bit_length() < _MAX_COEFFICIENT_BITS and log_powers > _MIN_LOG_POWERS:
            return coefficient * p**k * q ** (n - k)
        return math.exp(math.log(coefficient) + log_powers)

    def pdf(self, x: float) -> SingleRange:
        return SingleRange(self.pmf(x))

    def _lower_tail(self, k: int) -> float:
        return math.fsum(self.pmf(j) for j in range(k + 1))

    def _upper_tail(self, k: int) -> float:
        return math.fsum(self.pmf(j) for j in range(k + 1, self.n + 1))

    def _cdf_value(self, k: int) -> float:
        """``P(X <= k)``, summed over the tail on the same side of the mean as ``k``."""
        if k < 0:
            return 0.0
        if k >= self.n:
            return 1.0
        if k < self.mean():
            return self._lower_tail(k)
        return 1.0 - self._upper_tail(k)

    def _survival(self, k: int) -> float:
        """``P(X > k)``."""
        if k < 0:
            return 1.0
        if k >= self.n:
            return 0.0
        if k < self.mean():
            return 1.0 - self._lower_tail(k)
        return self._upper_tail(k)

    def cdf(self, x: float) -> SingleRange:
        return SingleRange(self._cdf_value(math.floor(x)) if x < self.n else 1.0)

    def _search(self, probability: float) -> int:
        return discrete_quantile_search(
            self._cdf_value,
            self._survival,
            probability,
            upper=self.n,
            guess=math.floor(self.mean()),
        )

    def quantile(self, probability: float) -> SingleRange:
        """Smallest ``k`` with ``cdf(k) >= probability``."""
        self._check_probability(probability)
        if probability == 1.0:
            return SingleRange(float(self.n))
        return SingleRange(float(self._search(probability)))

    def sample(self) -> float:
        return float(self._search(float(self._rng.random())))

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        masses = (self.pmf(k) for k in range(self.n + 1))
        return -math.fsum(mass * entropy_log(mass, unit) for mass in masses if mass > 0.0)

    def median(self) -> Range:
        return self.quantile(0.5)

    def mode(self) -> Range:
        """``⌊(n + 1)p⌋``, or both ``(n + 1)p - 1`` and ``(n + 1)p`` when it is an integer."""
        peak = (self.n + 1) * self.p
        if self.p > 0.0 and peak.is_integer():
            return DiscreteRange({peak - 1.0, peak})
        return SingleRange(float(math.floor(peak)))

    def mad(self) -> float:
        """``2 (m + 1) q P(X = m + 1)`` with ``m = ⌊np⌋``."""
        if self.p == 0.0:
            return 0.0
        m = math.floor(self.n * self.p)
        return 2.0 * (m + 1) * self.q * self.pmf(m + 1)

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)


__all__ = ["BinomialDistribution"]
