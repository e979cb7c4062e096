"""domainguard.core.types

Ограничения по возможностям (capability constraints) для обобщённых проверок.

Проверки не делают `isinstance`-диспетчеризации по числовым типам: им
достаточно, чтобы значение умело сравниваться (с нулём или с границей).
Поэтому int, float, Decimal, Fraction, datetime и скаляры numpy проходят
через одну и ту же функцию.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Тотальный порядок: `<`, `<=`, `>`, `>=` против значения того же типа."""

    def __lt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


class SupportsZeroComparison(SupportsOrdering, Protocol):
    """Число, которое корректно сравнивается с литералом `0`."""

    def __eq__(self, other: object, /) -> bool: ...

    def __ne__(self, other: object, /) -> bool: ...


class SupportsKeyLookup(Protocol):
    """Минимальный mapping: `key in m` и `m[key]`."""

    def __contains__(self, key: object, /) -> bool: ...

    def __getitem__(self, key: Any, /) -> Any: ...


T = TypeVar("T")
NumberT = TypeVar("NumberT", bound=SupportsZeroComparison)
OrderedT = TypeVar("OrderedT", bound=SupportsOrdering)
EnumT = TypeVar("EnumT", bound=Enum)
