import math
from datetime import date
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from domainguard.checks.numeric import (
    ensure_at_least,
    ensure_greater_than,
    ensure_non_negative,
    ensure_non_zero,
    ensure_positive,
    ensure_within_range,
)
from domainguard.errors import GuardError, GuardFailureKind


class TestSignChecks:
    @pytest.mark.parametrize("value", [1, -1, 0.001, Decimal("-3.5"), Fraction(1, 3), np.int64(7)])
    def test_non_zero_passes(self, value: object) -> None:
        assert ensure_non_zero(value, "divisor") == value

    @pytest.mark.parametrize("value", [0, 0.0, -0.0, Decimal("0"), Fraction(0), np.float32(0.0)])
    def test_non_zero_raises(self, value: object) -> None:
        with pytest.raises(GuardError, match=r"^divisor cannot be zero\.$"):
            ensure_non_zero(value, "divisor")

    @pytest.mark.parametrize("value", [1, 100, 1e-9, Decimal("0.01"), np.float64(2.5)])
    def test_positive_passes(self, value: object) -> None:
        assert ensure_positive(value, "amount") == value

    @pytest.mark.parametrize("value", [0, -1, -0.5, Decimal("-1"), np.int32(0)])
    def test_positive_raises(self, value: object) -> None:
        with pytest.raises(GuardError, match="amount must be positive") as exc_info:
            ensure_positive(value, "amount")
        assert exc_info.value.kind is GuardFailureKind.RANGE

    @pytest.mark.parametrize("value", [0, 1, 0.0, Fraction(1, 2)])
    def test_non_negative_passes(self, value: object) -> None:
        assert ensure_non_negative(value, "count") == value

    def test_non_negative_raises(self) -> None:
        with pytest.raises(GuardError, match="count cannot be negative"):
            ensure_non_negative(-1, "count")

    def test_nan(self) -> None:
        assert math.isnan(ensure_non_zero(math.nan, "x"))
        with pytest.raises(GuardError):
            ensure_positive(math.nan, "x")
        with pytest.raises(GuardError):
            ensure_non_negative(math.nan, "x")


class TestComparisons:
    @pytest.mark.parametrize("value,min_value", [(5, 4), (0, -1), (1.5, 1.0)])
    def test_greater_than_passes(self, value: float, min_value: float) -> None:
        assert ensure_greater_than(value, min_value, "age") == value

    @pytest.mark.parametrize("value,min_value", [(5, 5), (4, 5)])
    def test_greater_than_raises(self, value: int, min_value: int) -> None:
        with pytest.raises(GuardError, match=rf"^age={value} must be greater than {min_value}\.$"):
            ensure_greater_than(value, min_value, "age")

    @pytest.mark.parametrize("value,min_value", [(5, 5), (6, 5)])
    def test_at_least_passes(self, value: int, min_value: int) -> None:
        assert ensure_at_least(value, min_value, "age") == value

    def test_at_least_raises(self) -> None:
        with pytest.raises(GuardError, match=r"^age=4 must be at least 5\.$"):
            ensure_at_least(4, 5, "age")

    def test_works_for_any_orderable(self) -> None:
        start = date(2024, 1, 1)
        assert ensure_greater_than(date(2024, 6, 1), start, "end") == date(2024, 6, 1)
        assert ensure_at_least("b", "a", "letter") == "b"
        with pytest.raises(GuardError, match="must be greater than 2024-01-01"):
            ensure_greater_than(start, start, "end")

    def test_incomparable_types_propagate_type_error(self) -> None:
        with pytest.raises(TypeError):
            ensure_greater_than("5", 4, "value")


class TestWithinRange:
    @pytest.mark.parametrize("value,min_value,max_value", [(5, 1, 10), (1, 1, 10), (10, 1, 10)])
    def test_inclusive_range_passes(self, value: int, min_value: int, max_value: int) -> None:
        assert ensure_within_range(value, min_value, max_value, "level") == value

    @pytest.mark.parametrize("value,min_value,max_value", [(0, 1, 10), (11, 1, 10)])
    def test_outside_range_raises(self, value: int, min_value: int, max_value: int) -> None:
        with pytest.raises(
            GuardError,
            match=rf"^level={value} must be between {min_value} and {max_value}\.$",
        ):
            ensure_within_range(value, min_value, max_value, "level")

    def test_exclude_min(self) -> None:
        with pytest.raises(GuardError):
            ensure_within_range(0, 0, 10, "level", exclude_min=True)
        assert ensure_within_range(10, 0, 10, "level", exclude_min=True) == 10

    def test_exclude_max(self) -> None:
        with pytest.raises(GuardError):
            ensure_within_range(10, 0, 10, "level", exclude_min=False, exclude_max=True)
        assert ensure_within_range(0, 0, 10, "level", exclude_max=True) == 0

    def test_exclude_both(self) -> None:
        assert ensure_within_range(0.5, 0.0, 1.0, "ratio", exclude_min=True, exclude_max=True) == 0.5
        for bound in (0.0, 1.0):
            with pytest.raises(GuardError):
                ensure_within_range(bound, 0.0, 1.0, "ratio", exclude_min=True, exclude_max=True)

    def test_nan_is_out_of_range(self) -> None:
        with pytest.raises(GuardError, match="ratio=nan must be between"):
            ensure_within_range(math.nan, 0.0, 1.0, "ratio")

    def test_numpy_scalar(self) -> None:
        value = np.float32(0.25)
        assert ensure_within_range(value, 0.0, 1.0, "ratio") is value


@pytest.mark.parametrize(
    "check,args",
    [
        (ensure_non_zero, ()),
        (ensure_positive, ()),
        (ensure_non_negative, ()),
        (ensure_greater_than, (1,)),
        (ensure_at_least, (3,)),
        (ensure_within_range, (0, 10)),
    ],
)
def test_checks_are_idempotent(check, args):
    once = check(3, *args)
    assert check(once, *args) == once == 3
