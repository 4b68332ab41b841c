from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import pytest

from pysatl_stats.distributions import (
    BaseDistribution,
    NormalDistribution,
    PoissonDistribution,
    distribution_family,
)
from pysatl_stats.distributions.registry import DistributionRegister
from pysatl_stats.types import DistributionName, Kind


class TestDistributionRegister:
    def test_register_is_a_singleton(self) -> None:
        assert DistributionRegister() is DistributionRegister()

    def test_all_builtins_are_registered(self) -> None:
        assert set(DistributionRegister.names()) == set(DistributionName)

    def test_every_name_is_documented(self) -> None:
        doc = DistributionName.__doc__
        assert "Attributes" in doc
        for member in DistributionName:
            assert f"{member.name} : str" in doc

    @pytest.mark.parametrize("name", [DistributionName.NORMAL, "Normal"])
    def test_get_by_name(self, name) -> None:
        assert DistributionRegister.get(name) is NormalDistribution

    def test_registered_class_is_usable(self) -> None:
        cls = DistributionRegister.get(DistributionName.POISSON)
        assert cls is PoissonDistribution
        assert cls(rate=2.0).mean() == 2.0

    @pytest.mark.parametrize("name", ["Cauchy", "normal"])
    def test_unknown_name_raises(self, name) -> None:
        with pytest.raises(ValueError, match=f"No distribution {name} found in register"):
            DistributionRegister.get(name)

    def test_registering_the_same_class_again_warns(self) -> None:
        with pytest.warns(UserWarning, match="already registered"):
            DistributionRegister.register(NormalDistribution)
        assert DistributionRegister.get(DistributionName.NORMAL) is NormalDistribution

    def test_registering_another_class_under_a_taken_name_raises(self) -> None:
        with pytest.raises(ValueError, match="already found in register"):

            @distribution_family(name=DistributionName.NORMAL, kind=Kind.CONTINUOUS)
            class OtherNormal(BaseDistribution):
                mu: float
                seed: int = 0

        assert DistributionRegister.get(DistributionName.NORMAL) is NormalDistribution

    def test_decorator_sets_class_attributes(self) -> None:
        assert NormalDistribution.name is DistributionName.NORMAL
        assert NormalDistribution.kind is Kind.CONTINUOUS
        assert PoissonDistribution.kind is Kind.DISCRETE
