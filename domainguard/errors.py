"""domainguard.errors

Единственный тип ошибки библиотеки.

Любая проверка при нарушении условия бросает `GuardError`. Подклассов нет:
категорию нарушения несёт текст сообщения и (дополнительно) тег `kind`.
`GuardError` наследует `ValueError`, поэтому код, который уже ловит
`ValueError` вокруг `__post_init__`, продолжает работать без изменений.
"""

from __future__ import annotations

from enum import Enum


class GuardFailureKind(Enum):
    """Категория нарушения. Только для диагностики, на поведение не влияет."""

    NULL = "null"
    DEFAULT = "default"
    RANGE = "range"
    PATTERN = "pattern"
    LENGTH = "length"
    EMPTY = "empty"
    ENUM = "enum"
    KEY = "key"
    ASSERTION = "assertion"


class GuardError(ValueError):
    """Raised when a guard clause is violated.

    The message is self-contained (parameter name first, period at the end)
    and can be shown to a user or logged as is.
    """

    def __init__(self, message: str, kind: GuardFailureKind = GuardFailureKind.ASSERTION) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"GuardError(kind={self.kind.name}, message={self.message!r})"


__all__ = [
    "GuardError",
    "GuardFailureKind",
]
