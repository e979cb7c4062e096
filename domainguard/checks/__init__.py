"""Каталог проверок (guard clauses).

Каждая проверка возвращает входное значение без изменений (можно строить
цепочки) или бросает `GuardError`.
"""

from __future__ import annotations

from domainguard.checks.booleans import ensure_false, ensure_true
from domainguard.checks.enums import ensure_enum_defined, ensure_enum_name_defined
from domainguard.checks.mappings import ensure_key_exists
from domainguard.checks.nulls import (
    ensure_none,
    ensure_not_default,
    ensure_not_none,
    ensure_not_none_or_default,
)
from domainguard.checks.numeric import (
    ensure_at_least,
    ensure_greater_than,
    ensure_non_negative,
    ensure_non_zero,
    ensure_positive,
    ensure_within_range,
)
from domainguard.checks.sequences import ensure_any, ensure_non_empty_collection
from domainguard.checks.strings import (
    ensure_exact_length,
    ensure_image_url,
    ensure_length_in_range,
    ensure_matches_pattern,
    ensure_non_blank,
    ensure_non_empty,
    ensure_valid_email,
)

__all__ = [
    "ensure_not_none",
    "ensure_none",
    "ensure_not_default",
    "ensure_not_none_or_default",
    "ensure_non_zero",
    "ensure_positive",
    "ensure_non_negative",
    "ensure_greater_than",
    "ensure_at_least",
    "ensure_within_range",
    "ensure_non_empty",
    "ensure_non_blank",
    "ensure_matches_pattern",
    "ensure_image_url",
    "ensure_valid_email",
    "ensure_exact_length",
    "ensure_length_in_range",
    "ensure_any",
    "ensure_non_empty_collection",
    "ensure_enum_defined",
    "ensure_enum_name_defined",
    "ensure_key_exists",
    "ensure_true",
    "ensure_false",
]
