"""
Tests for BeWithin(delta).of(expected).
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from matchkit.matchers import BeWithin, BeWithinOf, ConfigurationError


class TestBeWithinOf:
    """abs(expected - actual) <= delta, inclusive at both ends."""

    @pytest.mark.parametrize("actual", [40, 41, 42])
    def test_inside_tolerance(self, actual):
        assert BeWithin(1).of(41).match(lambda: actual) is True

    @pytest.mark.parametrize("actual", [39, 43])
    def test_outside_tolerance(self, actual):
        assert BeWithin(1).of(41).match(lambda: actual) is False

    def test_boundaries_are_inclusive(self):
        matcher = BeWithin(0.5).of(2.0)
        assert matcher.match(lambda: 2.5) is True
        assert matcher.match(lambda: 1.5) is True

    def test_just_past_boundary(self):
        matcher = BeWithin(0.5).of(2.0)
        assert matcher.match(lambda: 2.5 + 1e-9) is False
        assert matcher.match(lambda: 1.5 - 1e-9) is False

    def test_zero_delta_is_exact(self):
        matcher = BeWithin(0).of(3)
        assert matcher.match(lambda: 3) is True
        assert matcher.match(lambda: 3.0001) is False

    def test_other_numeric_types(self):
        assert BeWithin(Decimal("0.01")).of(Decimal("1.00")).match(lambda: Decimal("1.01")) is True
        assert BeWithin(Fraction(1, 3)).of(1).match(lambda: Fraction(4, 3)) is True
        assert BeWithin(0.1).of(np.float64(1.0)).match(lambda: np.float64(1.05)) is True

    def test_describe(self):
        assert BeWithin(1).of(41).describe() == "be within 1 of 41"
        assert BeWithin(0.5).of(2.0).describe() == "be within 0.5 of 2.0"


class TestBeWithinBuilder:
    """BeWithin alone is not a complete matcher."""

    def test_matching_builder_directly_fails(self):
        with pytest.raises(ConfigurationError, match="not a complete matcher"):
            BeWithin(0.5).match(lambda: 42)

    def test_of_returns_new_matcher(self):
        builder = BeWithin(2)
        first = builder.of(10)
        second = builder.of(20)
        assert isinstance(first, BeWithinOf)
        assert first.expected == 10
        assert second.expected == 20
        assert builder.delta == 2


class TestBeWithinValidation:
    """Invalid parameters fail at construction, never at match time."""

    def test_negative_delta(self):
        with pytest.raises(ConfigurationError, match="must be >= 0"):
            BeWithin(-0.1)

    @pytest.mark.parametrize("delta", ["1", None, True, [1]])
    def test_non_numeric_delta(self, delta):
        with pytest.raises(ConfigurationError, match="must be a number"):
            BeWithin(delta)

    @pytest.mark.parametrize("expected", ["41", None, False])
    def test_non_numeric_expected(self, expected):
        with pytest.raises(ConfigurationError, match="expected must be a number"):
            BeWithin(1).of(expected)

    def test_direct_construction_validates_delta(self):
        with pytest.raises(ConfigurationError):
            BeWithinOf(-1, 10)
