from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_stats.errors import DomainError
from pysatl_stats.special import simpson


class TestSimpson:
    def test_exact_for_cubics(self) -> None:
        assert simpson(lambda x: x**3 - 2.0 * x + 1.0, 0.0, 2.0, n=2) == pytest.approx(2.0)
        assert simpson(lambda x: x * x, 0.0, 3.0) == pytest.approx(9.0, abs=1e-12)

    def test_sine_over_half_period(self) -> None:
        assert simpson(math.sin, 0.0, math.pi) == pytest.approx(2.0, abs=1e-10)

    def test_reversed_limits_change_sign(self) -> None:
        assert simpson(math.exp, 1.0, 0.0) == pytest.approx(-(math.e - 1.0), abs=1e-10)

    @pytest.mark.parametrize("n", [0, -2, 3, 999])
    def test_invalid_interval_count_raises(self, n: int) -> None:
        with pytest.raises(DomainError, match="positive even"):
            simpson(math.sin, 0.0, 1.0, n=n)
