"""
Distribution Interfaces and the Shared Implementation
=====================================================

This module defines the public contract of the library and the machinery the
built-in distributions are made of:

- :class:`Distribution` protocol, the uniform interface every distribution
  satisfies;
- :class:`ContinuousDistribution` protocol, which adds the Kullback–Leibler
  divergence;
- :class:`BaseDistribution`, the shared implementation: constraint
  validation, the owned random generator and precomputed moments;
- :func:`distribution_family`, the class decorator that turns a subclass into
  a frozen dataclass and registers it.

Notes
-----
- Instances are immutable value objects apart from their random generator.
  A single instance must not be sampled from several threads at once.
- Kurtosis is always reported as excess kurtosis.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, is_dataclass
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    ClassVar,
    Protocol,
    TypeVar,
    dataclass_transform,
    runtime_checkable,
)

import numpy as np

from pysatl_stats.distributions.parametrizations import (
    collect_constraints,
    validate_constraints,
)
from pysatl_stats.distributions.registry import DistributionRegister
from pysatl_stats.distributions.sampling import make_generator
from pysatl_stats.errors import DomainError, UndefinedQuantityError
from pysatl_stats.types import EntropyUnit, Kind

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from pysatl_stats.distributions.mgf import MomentGeneratingFunction
    from pysatl_stats.distributions.parametrizations import ParameterConstraint
    from pysatl_stats.ranges import Range, SingleRange
    from pysatl_stats.types import DistributionName, NumericArray


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface."""

    @property
    def kind(self) -> Kind: ...

    @property
    def seed(self) -> int: ...

    def is_discrete(self) -> bool: ...
    def is_continuous(self) -> bool: ...

    def sample(self) -> float: ...
    def sample_many(self, n: int) -> NumericArray: ...

    def pdf(self, x: float) -> SingleRange: ...
    def cdf(self, x: float) -> SingleRange: ...
    def quantile(self, probability: float) -> SingleRange: ...

    def mean(self) -> float: ...
    def variance(self) -> float: ...
    def stddev(self) -> float: ...
    def skewness(self) -> float: ...
    def kurtosis(self) -> float: ...
    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float: ...
    def median(self) -> Range: ...
    def mode(self) -> Range: ...
    def mad(self) -> float: ...
    def moment(self, n: int) -> float: ...
    def mgf(self) -> MomentGeneratingFunction: ...
    def fisher_information(self) -> NumericArray: ...


@runtime_checkable
class ContinuousDistribution(Distribution, Protocol):
    """Distribution with a density, comparable by Kullback–Leibler divergence."""

    def kl_divergence(self, other: ContinuousDistribution) -> float: ...


@dataclass(frozen=True, slots=True)
class Moments:
    """
    Precomputed summary moments of a distribution.

    Parameters
    ----------
    mean, variance : float
        First moment and second central moment.
    skewness : float
        Standardized third central moment.
    kurtosis : float
        Excess kurtosis (standardized fourth central moment minus 3).

    Attributes
    ----------
    stddev : float
        Square root of the variance.
    """

    mean: float
    variance: float
    skewness: float
    kurtosis: float
    stddev: float = field(init=False)

    def __post_init__(self) -> None:
        stddev = math.sqrt(self.variance) if self.variance >= 0.0 else math.nan
        object.__setattr__(self, "stddev", stddev)


def limit_ratio(numerator: float, denominator: float) -> float:
    """
    ``numerator / denominator`` extended to a zero denominator.

    A zero denominator gives a signed infinity, or NaN when the numerator is
    zero as well.
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class BaseDistribution(ABC):
    """
    Shared implementation of the :class:`Distribution` protocol.

    Concrete subclasses are decorated with :func:`distribution_family`,
    declare their parameters as dataclass fields followed by
    ``seed: int = 0``, and mark parameter checks with
    :func:`~pysatl_stats.distributions.parametrizations.constraint`.
    """

    # These attributes are set by the @distribution_family decorator
    name: ClassVar[DistributionName]
    kind: ClassVar[Kind]
    _constraints: ClassVar[list[ParameterConstraint]] = []

    # Fields that configure the instance rather than parametrize the law
    _auxiliary_fields: ClassVar[frozenset[str]] = frozenset({"seed"})

    seed: int
    _rng: np.random.Generator
    _moments: Moments
    _fisher: tuple[float, ...] | None

    def __post_init__(self) -> None:
        self.validate()
        object.__setattr__(self, "_rng", make_generator(self.seed))
        object.__setattr__(self, "_moments", self._compute_moments())
        object.__setattr__(self, "_fisher", self._compute_fisher_information())

    # Parameters

    @property
    def parameters(self) -> Mapping[str, float]:
        """Read-only view of the distribution parameters by name."""
        values = {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.name not in self._auxiliary_fields
        }
        return MappingProxyType(values)

    @property
    def constraints(self) -> list[ParameterConstraint]:
        """Constraints declared by this distribution."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints of this distribution.

        Raises
        ------
        DomainError
            If any constraint is not satisfied.
        """
        validate_constraints(self, self._constraints)

    def is_discrete(self) -> bool:
        return self.kind is Kind.DISCRETE

    def is_continuous(self) -> bool:
        return self.kind is Kind.CONTINUOUS

    # Sampling

    @abstractmethod
    def sample(self) -> float:
        """Draw one random variate using the owned generator."""

    def sample_many(self, n: int) -> NumericArray:
        """
        Draw ``n`` independent variates.

        Raises
        ------
        DomainError
            If ``n`` is negative.
        """
        if n < 0:
            raise DomainError(f"Sample size must be non-negative, got {n}")
        return np.fromiter((self.sample() for _ in range(n)), dtype=np.float64, count=n)

    # Characteristics

    @abstractmethod
    def pdf(self, x: float) -> SingleRange: ...

    @abstractmethod
    def cdf(self, x: float) -> SingleRange: ...

    @abstractmethod
    def quantile(self, probability: float) -> SingleRange: ...

    @staticmethod
    def _check_probability(probability: float) -> None:
        if not 0.0 <= probability <= 1.0:
            raise DomainError(f"Probability must be in [0, 1], got {probability}")

    # Moments

    @abstractmethod
    def _compute_moments(self) -> Moments: ...

    def mean(self) -> float:
        return self._moments.mean

    def variance(self) -> float:
        return self._moments.variance

    def stddev(self) -> float:
        return self._moments.stddev

    def skewness(self) -> float:
        return self._moments.skewness

    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return self._moments.kurtosis

    @abstractmethod
    def entropy(self, unit: EntropyUnit = EntropyUnit.NATURAL) -> float: ...

    @abstractmethod
    def median(self) -> Range: ...

    @abstractmethod
    def mode(self) -> Range: ...

    @abstractmethod
    def mad(self) -> float:
        """Mean absolute deviation around the mean."""

    @abstractmethod
    def mgf(self) -> MomentGeneratingFunction: ...

    def moment(self, n: int) -> float:
        """
        Raw moment ``E[X^n]``, the ``n``-th derivative of the MGF at zero.

        Raises
        ------
        DomainError
            If ``n`` is not a non-negative integer.
        """
        if n < 0 or not float(n).is_integer():
            raise DomainError(f"Moment order must be a non-negative integer, got {n}")
        return self.mgf().moment(int(n))

    # Information

    @abstractmethod
    def _compute_fisher_information(self) -> tuple[float, ...] | None:
        """Row-major Fisher information, or None when it is not defined."""

    def fisher_information(self) -> NumericArray:
        """
        Fisher information with respect to the parameters.

        Returns
        -------
        NumericArray
            Length 1 for one parameter, length 4 (row-major 2×2) for two.

        Raises
        ------
        UndefinedQuantityError
            If the distribution has no Fisher information in closed form.
        """
        if self._fisher is None:
            raise UndefinedQuantityError(
                f"Fisher information is undefined for the {self.name} distribution"
            )
        return np.array(self._fisher, dtype=np.float64)

    def _undefined(self, quantity: str) -> UndefinedQuantityError:
        return UndefinedQuantityError(f"{quantity} is undefined for the {self.name} distribution")

    def _require_same_family(self: D, other: object) -> D:
        if type(other) is not type(self):
            raise DomainError(
                f"KL divergence needs another {self.name} distribution, "
                f"got {type(other).__name__}"
            )
        return other  # type: ignore[return-value]


D = TypeVar("D", bound="BaseDistribution")
T = TypeVar("T", bound="BaseDistribution")


@dataclass_transform(frozen_default=True)
def distribution_family(
    *,
    name: DistributionName,
    kind: Kind,
) -> Callable[[type[T]], type[T]]:
    """
    Decorator declaring a concrete distribution.

    Parameters
    ----------
    name : DistributionName
        Registry name of the distribution.
    kind : Kind
        Discrete or continuous.

    Returns
    -------
    Callable[[type[T]], type[T]]
        Class decorator that converts the class to a frozen dataclass,
        collects its constraints and registers it in
        :class:`~pysatl_stats.distributions.registry.DistributionRegister`.
    """

    def decorator(cls: type[T]) -> type[T]:
        if not is_dataclass(cls):
            cls = dataclass(frozen=True)(cls)

        cls.name = name
        cls.kind = kind
        cls._constraints = collect_constraints(cls)

        DistributionRegister.register(cls)
        return cls

    return decorator


__all__ = [
    "Distribution",
    "ContinuousDistribution",
    "BaseDistribution",
    "Moments",
    "distribution_family",
    "limit_ratio",
]
