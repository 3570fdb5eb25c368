"""
tests/precision/test_analysis.py

Covers:
  - Local minimum and maximum search from either side
  - Bounds stop the walk; a start outside them is a contract violation
  - Plateaus stop the walk (strict improvement only)
  - Non-int points that support ± 1
"""

from fractions import Fraction

import pytest

from keystone import ContractViolation
from keystone.precision import Integer, find_local_maximum, find_local_minimum


def parabola(x):
    return (x - 5) ** 2


class TestFindLocalMinimum:

    @pytest.mark.parametrize("start", [-20, 0, 5, 6, 40])
    def test_reaches_the_bottom(self, start):
        assert find_local_minimum(start, parabola) == 5

    def test_bounds_stop_the_walk(self):
        assert find_local_minimum(0, parabola, within=(0, 3)) == 3
        assert find_local_minimum(9, parabola, within=(7, 9)) == 7

    def test_start_outside_bounds_is_a_contract_violation(self):
        with pytest.raises(ContractViolation):
            find_local_minimum(10, parabola, within=(0, 3))

    def test_plateau_stops_the_walk(self):
        assert find_local_minimum(3, lambda x: 0) == 3

    def test_stops_at_a_local_minimum(self):
        bumpy = {0: 3, 1: 1, 2: 2, 3: 0, 4: 5}
        assert find_local_minimum(1, bumpy.__getitem__) == 1
        assert find_local_minimum(4, bumpy.__getitem__, within=(0, 4)) == 3

    def test_rational_scores(self):
        assert find_local_minimum(0, lambda x: abs(Fraction(x) - Fraction(7, 2))) == 3

    def test_precision_points(self):
        result = find_local_minimum(Integer(-10), parabola)
        assert type(result) is Integer
        assert result == 5


class TestFindLocalMaximum:

    def test_reaches_the_top(self):
        assert find_local_maximum(0, lambda x: -parabola(x)) == 5
        assert find_local_maximum(12, lambda x: -parabola(x)) == 5

    def test_bounds(self):
        assert find_local_maximum(0, lambda x: x, within=(0, 10)) == 10
