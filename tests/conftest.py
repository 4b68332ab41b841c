from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from collections.abc import Generator
from typing import Any

import pytest

from pysatl_stats.errors import ConvergenceWarning

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _convergence_warnings_are_errors() -> Generator[None, Any, None]:
    with warnings.catch_warnings():
        warnings.simplefilter("error", ConvergenceWarning)
        yield
