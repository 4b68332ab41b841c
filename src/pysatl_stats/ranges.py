"""
Ranges
======

Immutable value objects returned by distribution queries.

- :class:`BoundedRange` is a half-open interval ``[min_val, max_val)``;
- :class:`DiscreteRange` is a finite (possibly empty) set of reals;
- :class:`ContinuousRange` is an interval described by ordered breakpoints
  together with a resolution;
- :class:`SingleRange` carries one scalar. Its bounds are
  ``[value, +inf)``.

Set algebra (``union``, ``intersection``, ``difference``) and range
containment are defined only between ranges of the same variant; mixing
variants raises :class:`~pysatl_stats.errors.RangeMismatchError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, Any, Self, cast, overload

import numpy as np

from pysatl_stats.errors import DomainError, RangeMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_stats.types import Number, NumericArray


class AbstractRange(ABC):
    """
    Common behaviour of all range variants.

    Subclasses expose ``min_val`` and ``max_val`` either as dataclass fields
    or as properties.
    """

    __slots__ = ()

    min_val: float
    max_val: float

    @overload
    def contains(self, item: Number) -> bool: ...
    @overload
    def contains(self, item: Self) -> bool: ...

    def contains(self, item: Number | AbstractRange) -> bool:
        """
        Check whether a point or a range of the same variant lies inside.

        Raises
        ------
        RangeMismatchError
            If ``item`` is a range of another variant.
        """
        if isinstance(item, AbstractRange):
            self._check_same_variant(item)
            return self._contains_range(item)
        return self._contains_value(float(item))

    def __contains__(self, item: object) -> bool:
        return self.contains(cast(Any, item))

    def overlaps(self, item: Number | AbstractRange) -> bool:
        """Check whether a point lies strictly inside or another range overlaps by bounds."""
        if isinstance(item, AbstractRange):
            return item.min_val < self.max_val and item.max_val > self.min_val
        value = float(item)
        return self.min_val < value < self.max_val

    def is_subset_of(self, other: AbstractRange) -> bool:
        return other.min_val <= self.min_val and self.max_val <= other.max_val

    def is_superset_of(self, other: AbstractRange) -> bool:
        return self.min_val <= other.min_val and other.max_val <= self.max_val

    def union(self, other: Self) -> AbstractRange:
        self._check_same_variant(other)
        return self._union(other)

    def intersection(self, other: Self) -> AbstractRange:
        self._check_same_variant(other)
        return self._intersection(other)

    def difference(self, other: Self) -> list[AbstractRange]:
        """Parts of this range not covered by ``other``."""
        self._check_same_variant(other)
        return self._difference(other)

    def _check_same_variant(self, other: AbstractRange) -> None:
        if type(other) is not type(self):
            raise RangeMismatchError(
                f"Expected {type(self).__name__}, got {type(other).__name__}"
            )

    def _contains_value(self, value: float) -> bool:
        return self.min_val <= value < self.max_val

    @abstractmethod
    def _contains_range(self, other: Any) -> bool: ...

    @abstractmethod
    def _union(self, other: Any) -> AbstractRange: ...

    @abstractmethod
    def _intersection(self, other: Any) -> AbstractRange: ...

    @abstractmethod
    def _difference(self, other: Any) -> list[AbstractRange]: ...


@dataclass(frozen=True, slots=True)
class BoundedRange(AbstractRange):
    """
    Half-open interval ``[min_val, max_val)``.

    Parameters
    ----------
    min_val : float
        Left (closed) endpoint.
    max_val : float
        Right (open) endpoint, strictly greater than ``min_val``.

    Raises
    ------
    DomainError
        If an endpoint is NaN or ``min_val >= max_val``.
    """

    min_val: float
    max_val: float

    def __post_init__(self) -> None:
        if math.isnan(self.min_val) or math.isnan(self.max_val):
            raise DomainError("Range bounds must not be NaN")
        if self.min_val >= self.max_val:
            raise DomainError(
                f"Range minimum must be less than maximum, got [{self.min_val}, {self.max_val})"
            )

    def _contains_range(self, other: BoundedRange) -> bool:
        return self.min_val <= other.min_val and other.max_val <= self.max_val

    def _union(self, other: BoundedRange) -> BoundedRange:
        if other.min_val > self.max_val or other.max_val < self.min_val:
            raise DomainError(f"Cannot join disjoint ranges {self} and {other}")
        return BoundedRange(min(self.min_val, other.min_val), max(self.max_val, other.max_val))

    def _intersection(self, other: BoundedRange) -> BoundedRange:
        lower = max(self.min_val, other.min_val)
        upper = min(self.max_val, other.max_val)
        if lower >= upper:
            raise DomainError(f"Ranges {self} and {other} do not overlap")
        return BoundedRange(lower, upper)

    def _difference(self, other: BoundedRange) -> list[AbstractRange]:
        if not self.overlaps(other):
            return [self]
        parts: list[AbstractRange] = []
        if self.min_val < other.min_val:
            parts.append(BoundedRange(self.min_val, other.min_val))
        if other.max_val < self.max_val:
            parts.append(BoundedRange(other.max_val, self.max_val))
        return parts

    def __str__(self) -> str:
        return f"[{self.min_val}, {self.max_val})"


@dataclass(frozen=True, slots=True)
class DiscreteRange(AbstractRange):
    """
    Finite set of real values.

    Parameters
    ----------
    values : Iterable[float], default empty
        Members of the set; converted to a ``frozenset`` of floats.
    """

    values: frozenset[float] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", frozenset(float(v) for v in self.values))

    @property
    def min_val(self) -> float:  # type: ignore[override]
        return min(self.values) if self.values else math.nan

    @property
    def max_val(self) -> float:  # type: ignore[override]
        return max(self.values) if self.values else math.nan

    def _contains_value(self, value: float) -> bool:
        return value in self.values

    def _contains_range(self, other: DiscreteRange) -> bool:
        return other.values <= self.values

    def _union(self, other: DiscreteRange) -> DiscreteRange:
        return DiscreteRange(self.values | other.values)

    def _intersection(self, other: DiscreteRange) -> DiscreteRange:
        return DiscreteRange(self.values & other.values)

    def _difference(self, other: DiscreteRange) -> list[AbstractRange]:
        remaining = self.values - other.values
        return [DiscreteRange(remaining)] if remaining else []

    def __iter__(self) -> Iterator[float]:
        return iter(sorted(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self) + "}"


@dataclass(frozen=True, slots=True)
class ContinuousRange(AbstractRange):
    """
    Interval given by ordered breakpoints.

    The range spans ``[min(values), max(values))``; ``accuracy`` is the
    resolution used by :meth:`grid`.

    Parameters
    ----------
    values : Iterable[float]
        Breakpoints; sorted and de-duplicated on construction.
    accuracy : float, default 0.01
        Positive grid step.

    Raises
    ------
    DomainError
        If ``values`` is empty or ``accuracy`` is not positive.
    """

    values: tuple[float, ...]
    accuracy: float = 0.01

    def __post_init__(self) -> None:
        points = tuple(sorted({float(v) for v in self.values}))
        if not points:
            raise DomainError("ContinuousRange needs at least one breakpoint")
        if not self.accuracy > 0.0:
            raise DomainError(f"Accuracy must be positive, got {self.accuracy}")
        object.__setattr__(self, "values", points)

    @property
    def min_val(self) -> float:  # type: ignore[override]
        return self.values[0]

    @property
    def max_val(self) -> float:  # type: ignore[override]
        return self.values[-1]

    def grid(self) -> NumericArray:
        """Points from ``min_val`` to ``max_val`` spaced by ``accuracy``."""
        count = max(int(round((self.max_val - self.min_val) / self.accuracy)), 1) + 1
        return np.linspace(self.min_val, self.max_val, count, dtype=np.float64)

    def _contains_range(self, other: ContinuousRange) -> bool:
        return self.min_val <= other.min_val and other.max_val <= self.max_val

    def _union(self, other: ContinuousRange) -> ContinuousRange:
        if other.min_val > self.max_val or other.max_val < self.min_val:
            raise DomainError(f"Cannot join disjoint ranges {self} and {other}")
        return ContinuousRange(
            self.values + other.values, accuracy=min(self.accuracy, other.accuracy)
        )

    def _intersection(self, other: ContinuousRange) -> ContinuousRange:
        lower = max(self.min_val, other.min_val)
        upper = min(self.max_val, other.max_val)
        if lower > upper:
            raise DomainError(f"Ranges {self} and {other} do not overlap")
        inner = [v for v in (*self.values, *other.values) if lower <= v <= upper]
        return ContinuousRange(
            (lower, *inner, upper), accuracy=min(self.accuracy, other.accuracy)
        )

    def _difference(self, other: ContinuousRange) -> list[AbstractRange]:
        if not self.overlaps(other):
            return [self]
        parts: list[AbstractRange] = []
        if self.min_val < other.min_val:
            left = [v for v in self.values if v < other.min_val]
            parts.append(ContinuousRange((*left, other.min_val), accuracy=self.accuracy))
        if other.max_val < self.max_val:
            right = [v for v in self.values if v > other.max_val]
            parts.append(ContinuousRange((other.max_val, *right), accuracy=self.accuracy))
        return parts

    def __str__(self) -> str:
        return f"[{self.min_val}, {self.max_val}] (accuracy={self.accuracy})"


@dataclass(frozen=True, slots=True)
class SingleRange(AbstractRange):
    """
    Scalar result of a distribution query.

    Parameters
    ----------
    value : float
        Carried value; the range bounds are ``[value, +inf)``.
    """

    value: float

    @property
    def min_val(self) -> float:  # type: ignore[override]
        return self.value

    @property
    def max_val(self) -> float:  # type: ignore[override]
        return inf

    def __float__(self) -> float:
        return float(self.value)

    def _contains_value(self, value: float) -> bool:
        return value == self.value

    def _contains_range(self, other: SingleRange) -> bool:
        return other.value == self.value

    def _union(self, other: SingleRange) -> DiscreteRange:
        return DiscreteRange({self.value, other.value})

    def _intersection(self, other: SingleRange) -> DiscreteRange:
        return DiscreteRange({self.value} if self.value == other.value else ())

    def _difference(self, other: SingleRange) -> list[AbstractRange]:
        return [] if self.value == other.value else [DiscreteRange({self.value})]

    def __str__(self) -> str:
        return f"[{self.value}]"


Range = BoundedRange | DiscreteRange | ContinuousRange | SingleRange
"""Type alias for any concrete range variant."""


__all__ = [
    "AbstractRange",
    "BoundedRange",
    "DiscreteRange",
    "ContinuousRange",
    "SingleRange",
    "Range",
]
