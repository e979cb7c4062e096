"""domainguard package.

Guard clauses для value objects и агрегатов: каждая проверка возвращает
значение без изменений или бросает `GuardError`.

    from domainguard import ensure_non_blank, ensure_within_range

    @dataclass(frozen=True)
    class Discount:
        code: str
        percent: float

        def __post_init__(self) -> None:
            ensure_non_blank(self.code, "code")
            ensure_within_range(self.percent, 0.0, 100.0, "percent", exclude_min=True)

Имя параметра передаётся явно (по умолчанию "value").
Пакет ничего не пишет в логи сам: на логгер `domainguard` повешен NullHandler.
"""

from __future__ import annotations

import logging

from domainguard.checks import (
    ensure_any,
    ensure_at_least,
    ensure_enum_defined,
    ensure_enum_name_defined,
    ensure_exact_length,
    ensure_false,
    ensure_greater_than,
    ensure_image_url,
    ensure_key_exists,
    ensure_length_in_range,
    ensure_matches_pattern,
    ensure_non_blank,
    ensure_non_empty,
    ensure_non_empty_collection,
    ensure_non_negative,
    ensure_non_zero,
    ensure_none,
    ensure_not_default,
    ensure_not_none,
    ensure_not_none_or_default,
    ensure_positive,
    ensure_true,
    ensure_valid_email,
    ensure_within_range,
)
from domainguard.config import DEFAULT_EMAIL_POLICY, EmailPolicy
from domainguard.core.patterns import DEFAULT_NAME
from domainguard.errors import GuardError, GuardFailureKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GuardError",
    "GuardFailureKind",
    "EmailPolicy",
    "DEFAULT_EMAIL_POLICY",
    "DEFAULT_NAME",
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
