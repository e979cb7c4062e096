"""Проверки коллекций и ленивых последовательностей.

`ensure_any` работает с тремя видами входа:
- Sized (list, tuple, dict, set, numpy-массив): проверяется `len()`, без итерации;
- переитерируемые Iterable без `__len__` (свои классы с `__iter__`):
  зондируется свежим итератором, возвращается сам объект;
- одноразовые итераторы (генераторы, `iter(...)`, файлы): первый элемент
  неизбежно потребляется, поэтому возвращается НОВЫЙ итератор, который
  сначала отдаёт этот элемент, а потом остаток. Используй возвращённое значение.
  Повторный вызов на таком результате снова вернёт новый итератор, поэтому
  `ensure_any(ensure_any(it)) == ensure_any(it)` не выполняется для объектов;
  сохраняется только последовательность элементов.

Зондирование блокируется, пока итератор не выдаст первый элемент или не
закончится. Таймаута нет: для бесконечных/медленных источников это
ответственность вызывающего.
"""

from __future__ import annotations

from collections.abc import Iterable, Sized
from itertools import chain
from typing import Any, Optional, TypeVar

from domainguard.core.patterns import DEFAULT_NAME
from domainguard.errors import GuardError, GuardFailureKind

IterableT = TypeVar("IterableT", bound=Iterable[Any])
SizedT = TypeVar("SizedT", bound=Sized)

_EMPTY: Any = object()


def _empty(name: str) -> GuardError:
    return GuardError(f"{name} cannot be empty.", GuardFailureKind.EMPTY)


def ensure_any(value: Optional[IterableT], name: str = DEFAULT_NAME) -> IterableT:
    """Последовательность не None и содержит хотя бы один элемент."""

    if value is None:
        raise _empty(name)

    if isinstance(value, Sized):
        if len(value) == 0:
            raise _empty(name)
        return value

    iterator = iter(value)
    first = next(iterator, _EMPTY)
    if first is _EMPTY:
        raise _empty(name)

    if iterator is value:
        # одноразовый итератор: возвращаем уже потреблённый элемент обратно
        return chain((first,), iterator)  # type: ignore[return-value]
    return value


def ensure_non_empty_collection(value: Optional[SizedT], name: str = DEFAULT_NAME) -> SizedT:
    # только len(): truthiness numpy-массива неоднозначна
    if value is None or len(value) == 0:
        raise _empty(name)
    return value


__all__ = [
    "ensure_any",
    "ensure_non_empty_collection",
]
