"""Строковые проверки: пустота, пробелы, шаблоны, URL картинок, email, длина.

`ensure_matches_pattern` использует `re.search` (совпадение где угодно в
строке); якоря `^...$` задаёт сам шаблон.

Email проверяется библиотекой `email_validator` (та же, что стоит за
`pydantic.EmailStr`). Возвращается исходная строка вызывающего, а не
нормализованная форма.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from email_validator import EmailNotValidError, validate_email

from domainguard.config.policies import DEFAULT_EMAIL_POLICY, EmailPolicy
from domainguard.core.patterns import DEFAULT_NAME, IMAGE_URL_PATTERN
from domainguard.errors import GuardError, GuardFailureKind

def ensure_non_empty(value: Optional[str], name: str = DEFAULT_NAME) -> str:
    """Строка не None и не "". Строка из пробелов проходит."""

    if value is None or len(value) == 0:
        raise GuardError(f"{name} cannot be empty.", GuardFailureKind.EMPTY)
    return value


def ensure_non_blank(value: Optional[str], name: str = DEFAULT_NAME) -> str:
    if value is None or not value.strip():
        raise GuardError(f"{name} cannot be blank.", GuardFailureKind.EMPTY)
    return value


def ensure_matches_pattern(value: str, pattern: Union[str, re.Pattern[str]], name: str = DEFAULT_NAME) -> str:
    if re.search(pattern, value) is None:
        raise GuardError(f"{name} does not match the required pattern.", GuardFailureKind.PATTERN)
    return value


def ensure_image_url(value: str, name: str = DEFAULT_NAME) -> str:
    """http(s)-URL, оканчивающийся на png/gif/webp/jpeg/jpg (+ query), без учёта регистра."""

    if IMAGE_URL_PATTERN.search(value) is None:
        raise GuardError(f"{name} is not a valid image URL.", GuardFailureKind.PATTERN)
    return value


def ensure_valid_email(value: str, name: str = DEFAULT_NAME, *, policy: EmailPolicy = DEFAULT_EMAIL_POLICY) -> str:
    """Проверка грамматики адреса (RFC 5322/6531 в трактовке email_validator).

    Только синтаксис: DNS не запрашивается. По умолчанию принимаются домены
    без точки (admin@mailserver1) и домены .test.

    Raises:
        GuardError: адрес не прошёл проверку; причина в `__cause__`.
    """

    try:
        validate_email(
            value,
            allow_smtputf8=policy.allow_smtputf8,
            allow_quoted_local=policy.allow_quoted_local,
            allow_domain_literal=policy.allow_domain_literal,
            allow_display_name=policy.allow_display_name,
            globally_deliverable=policy.globally_deliverable,
            test_environment=policy.allow_test_domains,
            check_deliverability=False,
        )
    except EmailNotValidError as exc:
        raise GuardError(f"{name} is not a valid email address.", GuardFailureKind.PATTERN) from exc
    return value


def ensure_exact_length(value: str, length: int, name: str = DEFAULT_NAME) -> str:
    if len(value) != length:
        raise GuardError(f"{name} must be exactly {length} characters.", GuardFailureKind.LENGTH)
    return value


def ensure_length_in_range(value: str, min_length: int, max_length: int, name: str = DEFAULT_NAME) -> str:
    actual = len(value)
    if actual < min_length or actual > max_length:
        raise GuardError(
            f"{name} length must be between {min_length} and {max_length}, but was {actual}.",
            GuardFailureKind.LENGTH,
        )
    return value


__all__ = [
    "ensure_non_empty",
    "ensure_non_blank",
    "ensure_matches_pattern",
    "ensure_image_url",
    "ensure_valid_email",
    "ensure_exact_length",
    "ensure_length_in_range",
]
