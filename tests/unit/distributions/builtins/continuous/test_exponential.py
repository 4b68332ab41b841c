"""
Tests for the Exponential distribution.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import expon

from pysatl_stats.distributions import ExponentialDistribution, GammaDistribution
from pysatl_stats.errors import DomainError, UndefinedQuantityError
from pysatl_stats.ranges import SingleRange
from pysatl_stats.types import EntropyUnit

from ..base import BaseDistributionTest


class TestExponentialDistribution(BaseDistributionTest):
    """Test suite for the Exponential distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = ExponentialDistribution(lambda_=2.0, seed=7)
        self.reference = expon(scale=0.5)

    @pytest.mark.parametrize("rate", [0.0, -2.0])
    def test_parameter_constraints(self, rate):
        with pytest.raises(DomainError, match="lambda_ > 0"):
            ExponentialDistribution(lambda_=rate)

    def test_pdf_and_cdf_match_scipy(self):
        points = np.linspace(-1.0, 6.0, 29)
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.pdf, points), self.reference.pdf(points)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.cdf, points), self.reference.cdf(points)
        )

    @pytest.mark.parametrize("p", [0.0, 0.1, 0.5, 0.9, 0.999])
    def test_quantile_matches_scipy(self, p):
        assert self.dist.quantile(p).value == pytest.approx(self.reference.ppf(p), abs=1e-12)

    def test_quantile_of_one_is_infinite(self):
        assert self.dist.quantile(1.0) == SingleRange(math.inf)

    def test_moments(self):
        assert self.dist.mean() == 0.5
        assert self.dist.variance() == 0.25
        assert self.dist.stddev() == 0.5
        assert self.dist.skewness() == 2.0
        assert self.dist.kurtosis() == 6.0

    def test_raw_moments(self):
        assert self.dist.moment(0) == 1.0
        assert self.dist.moment(3) == pytest.approx(6.0 / 8.0)

    def test_mgf_outside_convergence_region_raises(self):
        mgf = self.dist.mgf()
        assert mgf(1.0) == pytest.approx(2.0)
        with pytest.raises(DomainError, match="t < 2.0"):
            mgf(2.0)

    def test_entropy(self):
        assert self.dist.entropy() == pytest.approx(self.reference.entropy(), rel=1e-12)
        assert self.dist.entropy(EntropyUnit.SHANNON) == pytest.approx(
            (1.0 - math.log(2.0)) / math.log(2.0), rel=1e-12
        )

    def test_median_and_mode(self):
        assert self.dist.median().value == pytest.approx(math.log(2.0) / 2.0)
        assert self.dist.mode() == SingleRange(0.0)

    def test_mad_is_undefined(self):
        with pytest.raises(UndefinedQuantityError, match="MAD"):
            self.dist.mad()

    def test_fisher_information(self):
        self.assert_arrays_almost_equal(self.dist.fisher_information(), np.array([0.25]))

    def test_kl_divergence(self):
        p = ExponentialDistribution(lambda_=1.0)
        q = ExponentialDistribution(lambda_=2.0)
        assert p.kl_divergence(q) == pytest.approx(math.log(0.5) + 1.0, rel=1e-12)
        assert p.kl_divergence(p) == 0.0

    def test_kl_divergence_with_another_family_raises(self):
        with pytest.raises(DomainError, match="KL divergence"):
            self.dist.kl_divergence(GammaDistribution(alpha=1.0, beta=2.0))

    def test_sampling(self):
        samples = self.dist.sample_many(self.SAMPLE_SIZE)
        assert np.all(samples >= 0.0)
        assert abs(samples.mean() - 0.5) < 0.02
