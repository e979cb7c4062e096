"""Проверки на None и на значение по умолчанию.

"Значение по умолчанию" типа = результат конструктора без аргументов
(`int()` -> 0, `str()` -> "", `Decimal()` -> Decimal("0"), `np.float64()` -> 0.0).
Для типов без такого конструктора передай `default=` явно.
"""

from __future__ import annotations

from typing import Any, Optional

from domainguard.core.patterns import DEFAULT_NAME
from domainguard.core.types import T
from domainguard.errors import GuardError, GuardFailureKind

_MISSING: Any = object()


def _default_of(value: object, default: object) -> object:
    if default is _MISSING:
        return type(value)()
    return default


def ensure_not_none(value: Optional[T], name: str = DEFAULT_NAME) -> T:
    if value is None:
        raise GuardError(f"{name} cannot be null.", GuardFailureKind.NULL)
    return value


def ensure_none(value: Optional[T], name: str = DEFAULT_NAME) -> Optional[T]:
    if value is not None:
        raise GuardError(f"{name} must be null.", GuardFailureKind.NULL)
    return value


def ensure_not_default(value: T, name: str = DEFAULT_NAME, default: Any = _MISSING) -> T:
    """Значение не должно совпадать с default своего типа.

    Raises:
        TypeError: тип нельзя сконструировать без аргументов, а `default` не задан.
    """

    if value == _default_of(value, default):
        raise GuardError(f"{name} cannot be default.", GuardFailureKind.DEFAULT)
    return value


def ensure_not_none_or_default(value: Optional[T], name: str = DEFAULT_NAME, default: Any = _MISSING) -> T:
    if value is None or value == _default_of(value, default):
        raise GuardError(f"{name} cannot be null or default.", GuardFailureKind.DEFAULT)
    return value


__all__ = [
    "ensure_not_none",
    "ensure_none",
    "ensure_not_default",
    "ensure_not_none_or_default",
]
