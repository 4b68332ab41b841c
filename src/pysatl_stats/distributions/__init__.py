"""
Distributions subpackage

Interfaces and implementations of the probability distributions of
PySATL Stats:

- distribution protocols and the shared base class (:mod:`.distribution`);
- parameter constraints (:mod:`.parametrizations`);
- moment generating functions (:mod:`.mgf`);
- sampling primitives (:mod:`.sampling`);
- registry of distribution classes (:mod:`.registry`);
- built-in discrete and continuous distributions (:mod:`.builtins`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .builtins import *
from .builtins import __all__ as _builtins_all
from .distribution import (
    BaseDistribution,
    ContinuousDistribution,
    Distribution,
    Moments,
    distribution_family,
)
from .mgf import MomentGeneratingFunction
from .parametrizations import ParameterConstraint, constraint
from .registry import DistributionRegister

__all__ = [
    # distribution
    "Distribution",
    "ContinuousDistribution",
    "BaseDistribution",
    "Moments",
    "distribution_family",
    # parameters
    "ParameterConstraint",
    "constraint",
    # moments
    "MomentGeneratingFunction",
    # registry
    "DistributionRegister",
    # built-ins
    *_builtins_all,
]

del _builtins_all
