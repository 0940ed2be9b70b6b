"""
tests/test_rounding.py
──────────────────────
Tests for display rounding.
"""
import pytest

from fleetview.analytics.rounding import fixed, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(2.5, 3), (0.5, 1), (3.5, 4), (2.4, 2), (-2.5, -2), (-2.6, -3)])
    def test_ties_go_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_up(7.0), int)


class TestFixed:
    @pytest.mark.parametrize("value, expected", [(10.25, "10.3"), (0.05, "0.1"), (16.0, "16.0"), (-2.25, "-2.3")])
    def test_one_decimal(self, value, expected):
        assert fixed(value) == expected

    def test_binary_value_decides(self):
        # 2.675 is stored just below the tie
        assert fixed(2.675, 2) == "2.67"

    def test_two_decimals(self):
        assert fixed(12.345678, 2) == "12.35"
