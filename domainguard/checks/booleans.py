"""Проверки булевых утверждений.

Сравнение идёт через `==` с True/False, а не через truthiness: строка
"false" или непустой список не проходят `ensure_true`. Скаляры `numpy.bool_`
сравниваются как обычные bool.
"""

from __future__ import annotations

from domainguard.core.patterns import DEFAULT_NAME
from domainguard.core.types import T
from domainguard.errors import GuardError, GuardFailureKind


def ensure_true(value: T, name: str = DEFAULT_NAME) -> T:
    if not value == True:  # noqa: E712
        raise GuardError(f"{name} must be true.", GuardFailureKind.ASSERTION)
    return value


def ensure_false(value: T, name: str = DEFAULT_NAME) -> T:
    if not value == False:  # noqa: E712
        raise GuardError(f"{name} must be false.", GuardFailureKind.ASSERTION)
    return value


__all__ = [
    "ensure_true",
    "ensure_false",
]
