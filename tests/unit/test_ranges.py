from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math

import numpy as np
import pytest

from pysatl_stats.errors import DomainError, RangeMismatchError
from pysatl_stats.ranges import BoundedRange, ContinuousRange, DiscreteRange, SingleRange


class TestBoundedRange:
    def setup_method(self) -> None:
        self.unit = BoundedRange(0.0, 1.0)

    @pytest.mark.parametrize("lower, upper", [(1.0, 1.0), (2.0, 1.0), (math.nan, 1.0)])
    def test_invalid_bounds_raise(self, lower: float, upper: float) -> None:
        with pytest.raises(DomainError):
            BoundedRange(lower, upper)

    def test_half_open_membership(self) -> None:
        assert 0.0 in self.unit
        assert 0.5 in self.unit
        assert 1.0 not in self.unit
        assert not self.unit.contains(-0.1)

    def test_contains_range(self) -> None:
        assert self.unit.contains(BoundedRange(0.2, 0.8))
        assert not self.unit.contains(BoundedRange(0.5, 1.5))

    def test_contains_other_variant_raises(self) -> None:
        with pytest.raises(RangeMismatchError):
            self.unit.contains(SingleRange(0.5))

    def test_overlaps(self) -> None:
        assert self.unit.overlaps(0.5)
        assert not self.unit.overlaps(0.0)
        assert self.unit.overlaps(BoundedRange(0.9, 2.0))
        assert not self.unit.overlaps(BoundedRange(1.0, 2.0))

    def test_subset_and_superset(self) -> None:
        inner = BoundedRange(0.25, 0.75)
        assert inner.is_subset_of(self.unit)
        assert self.unit.is_superset_of(inner)
        assert not self.unit.is_subset_of(inner)

    def test_union(self) -> None:
        assert self.unit.union(BoundedRange(0.5, 2.0)) == BoundedRange(0.0, 2.0)
        assert self.unit.union(BoundedRange(1.0, 3.0)) == BoundedRange(0.0, 3.0)

    def test_union_of_disjoint_ranges_raises(self) -> None:
        with pytest.raises(DomainError, match="disjoint"):
            self.unit.union(BoundedRange(2.0, 3.0))

    def test_intersection(self) -> None:
        assert self.unit.intersection(BoundedRange(0.5, 2.0)) == BoundedRange(0.5, 1.0)
        with pytest.raises(DomainError, match="do not overlap"):
            self.unit.intersection(BoundedRange(1.0, 2.0))

    def test_difference(self) -> None:
        assert self.unit.difference(BoundedRange(0.25, 0.5)) == [
            BoundedRange(0.0, 0.25),
            BoundedRange(0.5, 1.0),
        ]
        assert self.unit.difference(BoundedRange(0.5, 2.0)) == [BoundedRange(0.0, 0.5)]
        assert self.unit.difference(BoundedRange(-1.0, 2.0)) == []
        assert self.unit.difference(BoundedRange(3.0, 4.0)) == [self.unit]

    def test_algebra_across_variants_raises(self) -> None:
        with pytest.raises(RangeMismatchError):
            self.unit.union(DiscreteRange({0.0}))  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            self.unit.min_val = 3.0  # type: ignore[misc]


class TestDiscreteRange:
    def setup_method(self) -> None:
        self.values = DiscreteRange({1, 2, 3})

    def test_values_are_floats(self) -> None:
        assert self.values.values == frozenset({1.0, 2.0, 3.0})
        assert list(self.values) == [1.0, 2.0, 3.0]
        assert len(self.values) == 3

    def test_bounds(self) -> None:
        assert self.values.min_val == 1.0
        assert self.values.max_val == 3.0
        assert math.isnan(DiscreteRange().min_val)

    def test_membership(self) -> None:
        assert 2 in self.values
        assert 2.5 not in self.values
        assert self.values.contains(DiscreteRange({1.0, 3.0}))
        assert not self.values.contains(DiscreteRange({4.0}))

    def test_set_algebra(self) -> None:
        other = DiscreteRange({3.0, 4.0})
        assert self.values.union(other) == DiscreteRange({1.0, 2.0, 3.0, 4.0})
        assert self.values.intersection(other) == DiscreteRange({3.0})
        assert self.values.difference(other) == [DiscreteRange({1.0, 2.0})]
        assert self.values.difference(self.values) == []


class TestContinuousRange:
    def setup_method(self) -> None:
        self.span = ContinuousRange((0.0, 0.5, 1.0))

    def test_breakpoints_are_sorted(self) -> None:
        assert ContinuousRange((3.0, 1.0, 2.0, 1.0)).values == (1.0, 2.0, 3.0)

    @pytest.mark.parametrize("values, accuracy", [((), 0.01), ((0.0, 1.0), 0.0)])
    def test_invalid_construction_raises(self, values: tuple[float, ...], accuracy: float) -> None:
        with pytest.raises(DomainError):
            ContinuousRange(values, accuracy=accuracy)

    def test_membership(self) -> None:
        assert 0.75 in self.span
        assert 1.5 not in self.span

    def test_grid(self) -> None:
        grid = ContinuousRange((0.0, 1.0), accuracy=0.25).grid()
        np.testing.assert_allclose(grid, [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_union_and_intersection(self) -> None:
        other = ContinuousRange((0.75, 2.0), accuracy=0.001)
        union = self.span.union(other)
        assert union.values == (0.0, 0.5, 0.75, 1.0, 2.0)
        assert union.accuracy == 0.001

        intersection = self.span.intersection(other)
        assert intersection.values == (0.75, 1.0)

    def test_difference(self) -> None:
        parts = self.span.difference(ContinuousRange((0.25, 0.75)))
        assert parts == [ContinuousRange((0.0, 0.25)), ContinuousRange((0.75, 1.0))]

    def test_disjoint_union_raises(self) -> None:
        with pytest.raises(DomainError):
            self.span.union(ContinuousRange((5.0, 6.0)))


class TestSingleRange:
    def test_bounds_and_value(self) -> None:
        single = SingleRange(0.25)
        assert single.value == 0.25
        assert float(single) == 0.25
        assert single.min_val == 0.25
        assert single.max_val == math.inf

    def test_membership(self) -> None:
        assert 0.25 in SingleRange(0.25)
        assert 0.3 not in SingleRange(0.25)
        assert SingleRange(1.0).contains(SingleRange(1.0))

    def test_algebra_produces_discrete_ranges(self) -> None:
        a, b = SingleRange(1.0), SingleRange(2.0)
        assert a.union(b) == DiscreteRange({1.0, 2.0})
        assert a.intersection(b) == DiscreteRange()
        assert a.intersection(SingleRange(1.0)) == DiscreteRange({1.0})
        assert a.difference(b) == [DiscreteRange({1.0})]
        assert a.difference(SingleRange(1.0)) == []

    def test_mixing_with_bounded_raises(self) -> None:
        with pytest.raises(RangeMismatchError):
            SingleRange(0.5).contains(BoundedRange(0.0, 1.0))
