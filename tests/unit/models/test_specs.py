"""Test per-call rounding and grouping options."""
import pytest
from pydantic import ValidationError

from numeric_formatting.models.specs import GroupingSpec, RoundingSpec


class TestRoundingSpec:
    def test_defaults(self):
        spec = RoundingSpec()
        assert spec.precision == 3
        assert spec.significant_digits is None
        assert spec.strip_trailing_zeros is False
        assert spec.uses_significant_digits is False

    def test_significant_needs_positive_precision(self):
        assert RoundingSpec(precision=2, significant_digits=2).uses_significant_digits is True
        assert RoundingSpec(precision=0, significant_digits=2).uses_significant_digits is False

    def test_negative_precision_rejected(self):
        with pytest.raises(ValidationError):
            RoundingSpec(precision=-1)


class TestGroupingSpec:
    def test_defaults(self):
        spec = GroupingSpec()
        assert spec.group_separator == ","
        assert spec.decimal_point == "."

    def test_same_character_allowed(self):
        spec = GroupingSpec(group_separator=".", decimal_point=".")
        assert spec.group_separator == spec.decimal_point

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            GroupingSpec(decimal_point="")
