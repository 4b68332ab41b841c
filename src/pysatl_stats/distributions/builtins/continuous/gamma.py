"""
Gamma distribution.

Contains the Gamma distribution in the shape-rate parametrization.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING

from pysatl_stats.constants import E, EPSILON, MAX_ITERATIONS
from pysatl_stats.distributions.distribution import (
    BaseDistribution,
    Moments,
    distribution_family,
)
from pysatl_stats.distributions.mgf import MomentGeneratingFunction
from pysatl_stats.distributions.parametrizations import constraint
from pysatl_stats.distributions.sampling import next_gaussian, open_unit
from pysatl_stats.errors import ConvergenceWarning, DomainError
from pysatl_stats.ranges import SingleRange
from pysatl_stats.special import (
    digamma,
    entropy_log,
    ln_gamma,
    regularized_gamma_p,
    trigamma,
)
from pysatl_stats.types import DistributionName, EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_stats.distributions.distribution import ContinuousDistribution
    from pysatl_stats.ranges import Range

# Doubling steps allowed while searching for an upper quantile bracket
_MAX_BRACKET_DOUBLINGS = 1100


def _mgf(parameters: Mapping[str, float], t: float) -> float:
    """
    ``M(t) = (1 - t/β)^(-α)`` for ``t < β``.

    Raises
    ------
    DomainError
        If ``t >= β``.
    """
    alpha, beta = parameters["alpha"], parameters["beta"]
    if t >= beta:
        raise DomainError(f"Gamma MGF is defined for t < {beta}, got {t}")
    return (1.0 - t / beta) ** (-alpha)


def _raw_moment(parameters: Mapping[str, float], n: int) -> float:
    """``E[X^n] = α (α + 1) ... (α + n - 1) / β^n``."""
    alpha, beta = parameters["alpha"], parameters["beta"]
    return math.prod(alpha + i for i in range(n)) / beta**n


@distribution_family(name=DistributionName.GAMMA, kind=Kind.CONTINUOUS)
class GammaDistribution(BaseDistribution):
    """
    Gamma distribution with shape ``alpha`` and rate ``beta``.

    Probability density function:
        f(x) = β^α x^(α-1) exp(-βx) / Γ(α) for x ≥ 0

    Parameters
    ----------
    alpha : float
        Shape α, ``α > 0``.
    beta : float
        Rate β, ``β > 0``.
    seed : int, default 0
        Seed of the owned random generator.
    """

    alpha: float
    beta: float
    seed: int = 0

    @constraint(description="alpha > 0")
    def check_alpha_positive(self) -> bool:
        return self.alpha > 0.0

    @constraint(description="beta > 0")
    def check_beta_positive(self) -> bool:
        return self.beta > 0.0

    def _compute_moments(self) -> Moments:
        alpha, beta = self.alpha, self.beta
        return Moments(
            mean=alpha / beta,
            variance=alpha / beta**2,
            skewness=2.0 / math.sqrt(alpha),
            kurtosis=6.0 / alpha,
        )

    def _compute_fisher_information(self) -> tuple[float, ...]:
        alpha, beta = self.alpha, self.beta
        return (trigamma(alpha), -1.0 / beta, -1.0 / beta, alpha / beta**2)

    def sample(self) -> float:
        """
        Marsaglia–Tsang rejection sampler with a Gaussian proposal.

        Shapes below one are sampled at ``α + 1`` and scaled by ``U^(1/α)``.
        """
        shape = self.alpha
        boost = 1.0
        if shape < 1.0:
            boost = open_unit(self._rng) ** (1.0 / shape)
            shape += 1.0

        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            x = next_gaussian(self._rng)
            v = 1.0 + c * x
            if v <= 0.0:
                continue
            v = v**3
            u = open_unit(self._rng)
            if u < 1.0 - 0.0331 * x**4:
                break
            if math.log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
                break
        return d * v * boost / self.beta

    def pdf(self, x: float) -> SingleRange:
        alpha, beta = self.alpha, self.beta
        if x < 0.0:
            return SingleRange(0.0)
        if x == 0.0:
            if alpha < 1.0:
                return SingleRange(math.inf)
            return SingleRange(beta if alpha == 1.0 else 0.0)
        log_density = alpha * math.log(beta) + (alpha - 1.0) * math.log(x) - beta * x
        return SingleRange(math.exp(log_density - ln_gamma(alpha)))

    def _cdf_value(self, x: float) -> float:
        return regularized_gamma_p(self.alpha, self.beta * x)

    def cdf(self, x: float) -> SingleRange:
        """``P(α, βx)``."""
        return SingleRange(self._cdf_value(x))

    def quantile(self, probability: float) -> SingleRange:
        """
        Inverse of :meth:`cdf` by bisection.

        The bracket starts at ``[0, 100 αβ]`` and its right end doubles until
        it covers ``probability``; halving stops at width ``EPSILON``.
        """
        self._check_probability(probability)
        if probability == 0.0:
            return SingleRange(0.0)
        if probability == 1.0:
            return SingleRange(math.inf)

        lower, upper = 0.0, self.alpha * self.beta * 100.0
        for _ in range(_MAX_BRACKET_DOUBLINGS):
            if self._cdf_value(upper) >= probability:
                break
            lower, upper = upper, 2.0 * upper

        for _ in range(MAX_ITERATIONS):
            if upper - lower < EPSILON:
                break
            middle = 0.5 * (lower + upper)
            if not lower < middle < upper:
                # Bracket is narrower than the float spacing at this magnitude
                break
            if self._cdf_value(middle) < probability:
                lower = middle
            else:
                upper = middle
        else:
            warnings.warn(
                f"Gamma quantile bisection did not converge for p={probability}",
                ConvergenceWarning,
                stacklevel=2,
            )
        return SingleRange(0.5 * (lower + upper))

    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float:
        """``α - ln β + ln Γ(α) + (1 - α) ψ(α)`` nats."""
        alpha = self.alpha
        nats = alpha - math.log(self.beta) + ln_gamma(alpha) + (1.0 - alpha) * digamma(alpha)
        return nats * entropy_log(E, unit)

    def median(self) -> Range:
        return self.quantile(0.5)

    def mode(self) -> Range:
        if self.alpha >= 1.0:
            return SingleRange((self.alpha - 1.0) / self.beta)
        return SingleRange(0.0)

    def mad(self) -> float:
        raise self._undefined("MAD")

    def mgf(self) -> MomentGeneratingFunction:
        return MomentGeneratingFunction(self.parameters, _mgf, _raw_moment)

    def kl_divergence(self, other: ContinuousDistribution) -> float:
        """
        ``KL(self || other)`` for another gamma distribution.

        Raises
        ------
        DomainError
            If ``other`` is not a :class:`GammaDistribution`.
        """
        q = self._require_same_family(other)
        a_p, b_p = self.alpha, self.beta
        a_q, b_q = q.alpha, q.beta
        return (
            (a_p - a_q) * digamma(a_p)
            - ln_gamma(a_p)
            + ln_gamma(a_q)
            + a_q * (math.log(b_p) - math.log(b_q))
            + a_p * (b_q - b_p) / b_p
        )


__all__ = ["GammaDistribution"]
