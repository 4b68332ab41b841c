"""
Tests for the Weibull distribution.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import weibull_min

from pysatl_stats.distributions import ExponentialDistribution, WeibullDistribution
from pysatl_stats.errors import DomainError, UndefinedQuantityError
from pysatl_stats.ranges import SingleRange

from ..base import BaseDistributionTest


class TestWeibullDistribution(BaseDistributionTest):
    """Test suite for the Weibull distribution."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = WeibullDistribution(lambda_=2.0, k=1.5, seed=19)
        self.reference = weibull_min(c=1.5, scale=2.0)

    @pytest.mark.parametrize(
        "scale, shape, message",
        [(0.0, 1.0, "lambda_ > 0"), (1.0, -1.0, "k > 0")],
    )
    def test_parameter_constraints(self, scale, shape, message):
        with pytest.raises(DomainError, match=message):
            WeibullDistribution(lambda_=scale, k=shape)

    def test_pdf_and_cdf_match_scipy(self):
        points = np.linspace(-1.0, 10.0, 45)
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.pdf, points), self.reference.pdf(points)
        )
        self.assert_arrays_almost_equal(
            self.evaluate(self.dist.cdf, points), self.reference.cdf(points)
        )

    @pytest.mark.parametrize("p", [0.0, 0.05, 0.5, 0.95])
    def test_quantile_matches_scipy(self, p):
        assert self.dist.quantile(p).value == pytest.approx(self.reference.ppf(p), abs=1e-12)

    def test_quantile_of_one_is_infinite(self):
        assert self.dist.quantile(1.0) == SingleRange(math.inf)

    def test_moments_match_scipy(self):
        mean, var, skew, kurt = self.reference.stats(moments="mvsk")
        assert self.dist.mean() == pytest.approx(mean, rel=1e-10)
        assert self.dist.variance() == pytest.approx(var, rel=1e-10)
        assert self.dist.skewness() == pytest.approx(skew, rel=1e-8)
        assert self.dist.kurtosis() == pytest.approx(kurt, rel=1e-8)

    @pytest.mark.parametrize("order", [0, 1, 2, 3])
    def test_raw_moments_match_scipy(self, order):
        assert self.dist.moment(order) == pytest.approx(self.reference.moment(order), rel=1e-10)

    def test_negative_moment_order_raises(self):
        with pytest.raises(DomainError, match="non-negative integer"):
            self.dist.moment(-1)

    def test_entropy(self):
        assert self.dist.entropy() == pytest.approx(self.reference.entropy(), rel=1e-10)

    def test_median_and_mode(self):
        assert self.dist.median().value == pytest.approx(self.reference.median(), rel=1e-12)
        assert self.dist.mode().value == pytest.approx(2.0 * (1.0 / 3.0) ** (1.0 / 1.5))
        assert WeibullDistribution(lambda_=2.0, k=0.5).mode() == SingleRange(0.0)

    @pytest.mark.parametrize("quantity", ["mad", "mgf", "fisher_information"])
    def test_quantities_without_closed_form_are_undefined(self, quantity):
        with pytest.raises(UndefinedQuantityError):
            getattr(self.dist, quantity)()

    def test_kl_divergence_to_itself_is_zero(self):
        assert self.dist.kl_divergence(self.dist) == pytest.approx(0.0, abs=1e-12)

    def test_kl_divergence_reduces_to_exponential(self):
        p = WeibullDistribution(lambda_=2.0, k=1.0)
        q = WeibullDistribution(lambda_=1.0, k=1.0)
        expected = ExponentialDistribution(lambda_=0.5).kl_divergence(
            ExponentialDistribution(lambda_=1.0)
        )
        assert p.kl_divergence(q) == pytest.approx(expected, rel=1e-12)
        assert expected == pytest.approx(0.30685281944005466)

    def test_kl_divergence_with_another_family_raises(self):
        with pytest.raises(DomainError, match="KL divergence"):
            self.dist.kl_divergence(ExponentialDistribution(lambda_=1.0))

    def test_sampling(self):
        samples = self.dist.sample_many(self.SAMPLE_SIZE)
        assert np.all(samples >= 0.0)
        assert abs(samples.mean() - self.dist.mean()) < 0.05
