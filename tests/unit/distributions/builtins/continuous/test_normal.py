"""
Tests for the Normal distribution.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_stats.distributions import ExponentialDistribution, NormalDistribution
from pysatl_stats.errors import DomainError
from pysatl_stats.ranges import SingleRange
from pysatl_stats.types import EntropyUnit, ErfMethod

from ..base import BaseDistributionTest


class TestNormalDistribution(BaseDistributionTest):
    """Test suite for the Normal distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = NormalDistribution(mu=1.0, sigma=2.0, seed=5)
        self.reference = norm(loc=1.0, scale=2.0)

    def test_default_is_standard_normal(self):
        dist = NormalDistribution()
        assert dist.mu == 0.0
        assert dist.sigma == 1.0
        assert dist.erf_method is ErfMethod.INCOMPLETE_GAMMA

    @pytest.mark.parametrize("sigma", [0.0, -1.0])
    def test_parameter_constraints(self, sigma):
        with pytest.raises(DomainError, match="sigma > 0"):
            NormalDistribution(mu=0.0, sigma=sigma)

    def test_pdf_matches_scipy(self):
        points = np.linspace(-8.0, 10.0, 37)
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.pdf, points), self.reference.pdf(points)
        )

    def test_pdf_integrates_to_one(self):
        assert self.integrate_density(self.dist.pdf, -19.0, 21.0) == pytest.approx(1.0, abs=1e-9)

    def test_cdf_matches_scipy(self):
        points = np.linspace(-8.0, 10.0, 37)
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.cdf, points), self.reference.cdf(points)
        )

    def test_cdf_of_mean_is_one_half(self):
        assert NormalDistribution().cdf(0.0).value == pytest.approx(0.5, abs=1e-15)

    def test_approximate_cdf_is_close(self):
        dist = NormalDistribution(mu=1.0, sigma=2.0, approx=True)
        points = np.linspace(-8.0, 10.0, 37)
        self.assert_arrays_almost_equal(
            self.evaluate(dist.cdf, points), self.reference.cdf(points), precision=1e-6
        )

    @pytest.mark.parametrize("p", [1e-6, 0.025, 0.3, 0.5, 0.8, 0.975, 1 - 1e-6])
    def test_quantile_matches_scipy(self, p):
        assert self.dist.quantile(p).value == pytest.approx(self.reference.ppf(p), abs=1e-8)

    def test_quantile_of_one_half_is_the_mean(self):
        assert NormalDistribution().quantile(0.5) == SingleRange(0.0)

    def test_quantile_bounds_are_infinite(self):
        assert self.dist.quantile(0.0).value == -math.inf
        assert self.dist.quantile(1.0).value == math.inf

    @pytest.mark.parametrize("approx", [False, True])
    @pytest.mark.parametrize("p", [0.01, 0.2, 0.5, 0.7, 0.99])
    def test_quantile_inverts_cdf(self, approx, p):
        dist = NormalDistribution(mu=1.0, sigma=2.0, approx=approx)
        assert dist.cdf(dist.quantile(p).value).value == pytest.approx(p, abs=1e-8)

    @pytest.mark.parametrize("p", [-0.1, 1.1])
    def test_quantile_outside_unit_interval_raises(self, p):
        with pytest.raises(DomainError, match=r"\[0, 1\]"):
            self.dist.quantile(p)

    def test_moments(self):
        assert self.dist.mean() == 1.0
        assert self.dist.variance() == 4.0
        assert self.dist.stddev() == 2.0
        assert self.dist.skewness() == 0.0
        assert self.dist.kurtosis() == 0.0

    @pytest.mark.parametrize("order, expected", [(0, 1.0), (1, 1.0), (2, 5.0), (3, 13.0), (4, 73.0)])
    def test_raw_moments(self, order, expected):
        assert self.dist.moment(order) == pytest.approx(expected, rel=1e-12)

    def test_mgf(self):
        mgf = self.dist.mgf()
        assert mgf(0.0) == 1.0
        assert mgf(0.5) == pytest.approx(math.exp(0.5 + 0.5 * 4.0 * 0.25), rel=1e-12)

    def test_entropy(self):
        assert self.dist.entropy() == pytest.approx(self.reference.entropy(), rel=1e-12)
        assert self.dist.entropy(EntropyUnit.SHANNON) == pytest.approx(
            self.reference.entropy() / math.log(2.0), rel=1e-12
        )

    def test_median_and_mode(self):
        assert self.dist.median() == SingleRange(1.0)
        assert self.dist.mode() == SingleRange(1.0)

    def test_mad(self):
        assert self.dist.mad() == pytest.approx(2.0 * math.sqrt(2.0 / math.pi), rel=1e-12)

    def test_fisher_information(self):
        self.assert_arrays_almost_equal(
            self.dist.fisher_information(), np.array([0.25, 0.0, 0.0, 0.5])
        )

    def test_kl_divergence(self):
        other = NormalDistribution(mu=1.0, sigma=2.0)
        assert NormalDistribution().kl_divergence(other) == pytest.approx(0.4431471805599453)
        assert self.dist.kl_divergence(self.dist) == 0.0

    def test_kl_divergence_with_another_family_raises(self):
        with pytest.raises(DomainError, match="KL divergence"):
            self.dist.kl_divergence(ExponentialDistribution(lambda_=1.0))

    def test_sampling(self):
        samples = self.dist.sample_many(self.SAMPLE_SIZE)
        assert samples.shape == (self.SAMPLE_SIZE,)
        assert abs(samples.mean() - 1.0) < 0.1
        assert abs(samples.std() - 2.0) < 0.1

    def test_same_seed_gives_same_samples(self):
        first = NormalDistribution(seed=42).sample_many(10)
        second = NormalDistribution(seed=42).sample_many(10)
        np.testing.assert_array_equal(first, second)
