"""
Weibull distribution.

Contains the Weibull distribution with scale ``lambda_`` and shape ``k``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_stats.constants import E, EULER_MASCHERONI
from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
    limit_ratio,
)
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.distributions.sampling import open_unit
from pysatl_stats.errors import DomainError
from pysatl_stats.ranges import SingleRange
from pysatl_stats.special import entropy_log, gamma
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from pysatl_stats.distributions.distribution import ContinuousDistribution
    from pysatl_stats.distributions.mgf import MomentGeneratingFunction
    from pysatl_stats.ranges import Range


@distribution_family(name=DistributionName.WEIBULL, kind=Kind.CONTINUOUS)
class WeibullDistribution(BaseDistribution):
    """
    Weibull distribution.

    Probability density function:
        f(x) = (k/λ) (x/λ)^(k-1) exp(-(x/λ)^k) for x ≥ 0

    Parameters
    ----------
    lambda_ : float
        Scale λ, ``λ > 0``.
    k : float
        Shape, ``k > 0``.
    seed : int, default 0
        Seed of the owned random generator.

    Notes
    -----
    The moment generating function, the mean absolute deviation and the
    Fisher information have no closed form and raise
    :class:`~pysatl_stats.errors.UndefinedQuantityError`. Raw moments are
    available through :meth:`moment`.
    """

    lambda_: float
    k: float
    seed: int = 0

    @constraint(description="lambda_ > 0")
    def check_lambda_positive(self) -> bool:
        return self.lambda_ > 0.0

    @constraint(description="k > 0")
    def check_k_positive(self) -> bool:
        return self.k > 0.0

    def _gamma_moment(self, order: int) -> float:
        return gamma(1.0 + order / self.k)

    def _compute_moments(self) -> Moments:
        g1, g2, g3, g4 = (self._gamma_moment(i) for i in range(1, 5))
        spread = max(g2 - g1**2, 0.0)
        return Moments(
            mean=self.lambda_ * g1,
            variance=self.lambda_**2 * spread,
            skewness=limit_ratio(g3 - 3.0 * g1 * g2 + 2.0 * g1**3, math.sqrt(spread) ** 3),
            kurtosis=limit_ratio(
                -6.0 * g1**4 + 12.0 * g1**2 * g2 - 3.0 * g2**2 - 4.0 * g1 * g3 + g4, spread**2
            ),
        )

    def _compute_fisher_information(self) -> None:
        return None

    def sample(self) -> float:
        return self.lambda_ * (-math.log(open_unit(self._rng))) ** (1.0 / self.k)

    def pdf(self, x: float) -> SingleRange:
        k, scale = self.k, self.lambda_
        if x < 0.0:
            return SingleRange(0.0)
        if x == 0.0:
            if k < 1.0:
                return SingleRange(math.inf)
            return SingleRange(1.0 / scale if k == 1.0 else 0.0)
        z = x / scale
        return SingleRange(k / scale * z ** (k - 1.0) * math.exp(-(z**k)))

    def cdf(self, x: float) -> SingleRange:
        if x <= 0.0:
            return SingleRange(0.0)
        return SingleRange(-math.expm1(-((x / self.lambda_) ** self.k)))

    def quantile(self, probability: float) -> SingleRange:
        self._check_probability(probability)
        if probability == 1.0:
            return SingleRange(math.inf)
        return SingleRange(self.lambda_ * (-math.log1p(-probability)) ** (1.0 / self.k))

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        """``γ (1 - 1/k) + ln(λ/k) + 1`` nats."""
        nats = EULER_MASCHERONI * (1.0 - 1.0 / self.k) + math.log(self.lambda_ / self.k) + 1.0
        return nats * entropy_log(E, unit)

    def median(self) -> Range:
        return SingleRange(self.lambda_ * math.log(2.0) ** (1.0 / self.k))

    def mode(self) -> Range:
        if self.k > 1.0:
            return SingleRange(self.lambda_ * ((self.k - 1.0) / self.k) ** (1.0 / self.k))
        return SingleRange(0.0)

    def mad(self) -> float:
        raise self._undefined("MAD")

    def mgf(self) -> MomentGeneratingFunction:
        raise self._undefined("Moment generating function")

    def moment(self, n: int) -> float:
        """
        Raw moment ``E[X^n] = λ^n Γ(1 + n/k)``.

        Raises
        ------
        DomainError
            If ``n`` is not a non-negative integer.
        """
        if n < 0 or not float(n).is_integer():
            raise DomainError(f"Moment order must be a non-negative integer, got {n}")
        if n == 0:
            return 1.0
        return self.lambda_**n * self._gamma_moment(int(n))

    def kl_divergence(self, other: ContinuousDistribution) -> float:
        """
        ``KL(self || other)`` for another Weibull distribution.

        Raises
        ------
        DomainError
            If ``other`` is not a :class:`WeibullDistribution`.
        """
        q = self._require_same_family(other)
        k1, l1 = self.k, self.lambda_
        k2, l2 = q.k, q.lambda_
        return (
            math.log(k1) - k1 * math.log(l1)
            - (math.log(k2) - k2 * math.log(l2))
            + (k1 - k2) * (math.log(l1) - EULER_MASCHERONI / k1)
            + (l1 / l2) ** k2 * gamma(k2 / k1 + 1.0)
            - 1.0
        )


__all__ = ["WeibullDistribution"]
