"""Числовые проверки и проверки порядка.

Ноль здесь это литерал `0`, он корректно сравнивается с int/float/Decimal/Fraction
и скалярами numpy, так что отдельные версии под каждый тип не нужны.

Важно про NaN: любое сравнение с NaN ложно. Поэтому `ensure_positive(nan)`
и все проверки порядка падают, а `ensure_non_zero(nan)` проходит.
"""

from __future__ import annotations

from domainguard.core.patterns import DEFAULT_NAME
from domainguard.core.types import NumberT, OrderedT
from domainguard.core.validation import render, subject
from domainguard.errors import GuardError, GuardFailureKind


def ensure_non_zero(value: NumberT, name: str = DEFAULT_NAME) -> NumberT:
    if value == 0:
        raise GuardError(f"{name} cannot be zero.", GuardFailureKind.RANGE)
    return value


def ensure_positive(value: NumberT, name: str = DEFAULT_NAME) -> NumberT:
    if not value > 0:
        raise GuardError(f"{name} must be positive.", GuardFailureKind.RANGE)
    return value


def ensure_non_negative(value: NumberT, name: str = DEFAULT_NAME) -> NumberT:
    if not value >= 0:
        raise GuardError(f"{name} cannot be negative.", GuardFailureKind.RANGE)
    return value


def ensure_greater_than(value: OrderedT, min_value: OrderedT, name: str = DEFAULT_NAME) -> OrderedT:
    if not value > min_value:
        raise GuardError(
            f"{subject(name, value)} must be greater than {render(min_value)}.",
            GuardFailureKind.RANGE,
        )
    return value


def ensure_at_least(value: OrderedT, min_value: OrderedT, name: str = DEFAULT_NAME) -> OrderedT:
    if not value >= min_value:
        raise GuardError(
            f"{subject(name, value)} must be at least {render(min_value)}.",
            GuardFailureKind.RANGE,
        )
    return value


def ensure_within_range(
    value: OrderedT,
    min_value: OrderedT,
    max_value: OrderedT,
    name: str = DEFAULT_NAME,
    *,
    exclude_min: bool = False,
    exclude_max: bool = False,
) -> OrderedT:
    """Проверка `min <= value <= max`.

    Границы включены по умолчанию; `exclude_min` / `exclude_max` независимо
    делают соответствующую границу строгой.
    """

    too_low = value <= min_value if exclude_min else value < min_value
    too_high = value >= max_value if exclude_max else value > max_value

    # NaN не попадает ни в too_low, ни в too_high
    if too_low or too_high or value != value:
        raise GuardError(
            f"{subject(name, value)} must be between {render(min_value)} and {render(max_value)}.",
            GuardFailureKind.RANGE,
        )
    return value


__all__ = [
    "ensure_non_zero",
    "ensure_positive",
    "ensure_non_negative",
    "ensure_greater_than",
    "ensure_at_least",
    "ensure_within_range",
]
